from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import typer

from ..data.loader import DatasetError, LoadedData, load_dataset
from ..layout import find_conflicts, layout_with_audit
from ..models.event import DayLayout
from ..render.json_out import conflicts_to_dicts, dumps, layouts_to_dicts, write_layout_json
from ..settings import load_settings
from ..validate.checks import validate_layouts
from ..validate.report import format_validation_report


def _setup_logging(level: int, log_dir: Path | None = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "engine.log", encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )
    logging.getLogger().setLevel(level)


def run_layout(
    dataset: Path,
    *,
    class_id: str | None = None,
    coordinates: str | None = None,
    config: Path | None = None,
) -> Tuple[Dict[str, DayLayout], List[str], LoadedData]:
    settings = load_settings(config)
    loaded = load_dataset(dataset, settings.day_names)
    layouts, audit = layout_with_audit(
        loaded.fragments,
        loaded.lessons,
        loaded.reference,
        loaded.days,
        loaded.slots,
        class_id=class_id,
        coordinates=coordinates,
        settings=settings,
    )
    return layouts, audit, loaded


app = typer.Typer(add_completion=False, help="Weekly timetable layout engine")


def _load_or_exit(dataset: Path, **kwargs) -> Tuple[Dict[str, DayLayout], List[str], LoadedData]:
    try:
        return run_layout(dataset, **kwargs)
    except (DatasetError, OSError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="Log level"),
    log_dir: Optional[Path] = typer.Option(None, help="Also write engine.log here"),
) -> None:
    _setup_logging(getattr(logging, log_level.upper(), logging.WARNING), log_dir)


@app.command("layout")
def cli_layout(
    dataset: Path = typer.Argument(..., help="Timetable export (JSON)"),
    class_id: Optional[str] = typer.Option(None, help="Only lessons of this class"),
    coordinates: Optional[str] = typer.Option(None, help="index or minutes"),
    config: Optional[Path] = typer.Option(None, help="Settings TOML (default configs/layout.toml)"),
    out: Optional[Path] = typer.Option(None, help="Write JSON here instead of stdout"),
    show_audit: bool = typer.Option(False, "--audit", help="Print dropped records to stderr"),
) -> None:
    layouts, audit, _ = _load_or_exit(
        dataset, class_id=class_id, coordinates=coordinates, config=config
    )
    if show_audit:
        for line in audit:
            typer.echo(line, err=True)
    if out is not None:
        write_layout_json(layouts, out)
        typer.echo(f"Wrote {out}")
    else:
        typer.echo(dumps(layouts_to_dicts(layouts)))


@app.command("validate")
def cli_validate(
    dataset: Path = typer.Argument(..., help="Timetable export (JSON)"),
    class_id: Optional[str] = typer.Option(None, help="Only lessons of this class"),
    coordinates: Optional[str] = typer.Option(None, help="index or minutes"),
    config: Optional[Path] = typer.Option(None, help="Settings TOML"),
) -> None:
    layouts, _, loaded = _load_or_exit(
        dataset, class_id=class_id, coordinates=coordinates, config=config
    )
    report = validate_layouts(layouts, [d.id for d in loaded.days])
    typer.echo(format_validation_report(report))
    if report["overlap_count"] or report["non_minimal_days"] or report["missing_days"]:
        raise typer.Exit(code=2)


@app.command("conflicts")
def cli_conflicts(
    dataset: Path = typer.Argument(..., help="Timetable export (JSON)"),
    class_id: Optional[str] = typer.Option(None, help="Only lessons of this class"),
    coordinates: Optional[str] = typer.Option(None, help="index or minutes"),
    config: Optional[Path] = typer.Option(None, help="Settings TOML"),
) -> None:
    layouts, _, _ = _load_or_exit(
        dataset, class_id=class_id, coordinates=coordinates, config=config
    )
    conflicts = {day_id: find_conflicts(day) for day_id, day in layouts.items()}
    typer.echo(dumps(conflicts_to_dicts({d: c for d, c in conflicts.items() if c})))


if __name__ == "__main__":
    app()
