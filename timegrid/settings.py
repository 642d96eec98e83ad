from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Tuple

COORDINATE_MODES = ("index", "minutes")

DEFAULT_DAY_NAMES: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(frozen=True)
class LayoutSettings:
    coordinates: str = "index"
    day_names: Tuple[str, ...] = field(default=DEFAULT_DAY_NAMES)
    # "HH:MM" origin of the minutes axis; None -> earliest known start
    day_start: str | None = None

    def with_overrides(self, **overrides: Any) -> "LayoutSettings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _project_root() -> Path:
    # timegrid/settings.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_settings(path: Path | str | None = None) -> LayoutSettings:
    """Load layout settings from configs/layout.toml if present, else defaults.

    Keys may live at the top level or under a [layout] table:
      - coordinates: "index" | "minutes"
      - day_names: list of day names; ids are their positions ("0", "1", ...)
      - day_start: "HH:MM"
    """
    logger = logging.getLogger(__name__)
    base = LayoutSettings()
    cfg = _project_root() / "configs" / "layout.toml" if path is None else Path(path)
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning(f"Ignoring unreadable settings file {cfg}: {exc}")
        return base
    section = data.get("layout") if isinstance(data.get("layout"), dict) else data

    coordinates = str(section.get("coordinates", base.coordinates)).lower()
    if coordinates not in COORDINATE_MODES:
        logger.warning(f"Unknown coordinates mode {coordinates!r}; using 'index'")
        coordinates = "index"

    day_names = section.get("day_names")
    if isinstance(day_names, list) and day_names:
        names = tuple(str(n) for n in day_names)
    else:
        names = base.day_names

    day_start = section.get("day_start")
    return LayoutSettings(
        coordinates=coordinates,
        day_names=names,
        day_start=str(day_start) if day_start else None,
    )
