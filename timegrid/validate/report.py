from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"overlap_count: {report.get('overlap_count')}")
    for o in report.get("overlaps", []) or []:
        lines.append(f"  - {o}")
    lines.append(f"missing_days: {', '.join(report.get('missing_days', [])) or 'none'}")
    lines.append(f"extra_days: {', '.join(report.get('extra_days', [])) or 'none'}")
    non_minimal = report.get("non_minimal_days", {})
    lines.append(f"non_minimal_days: {len(non_minimal)}")
    if isinstance(non_minimal, dict):
        for day, v in non_minimal.items():
            lines.append(f"  - {day}: {v['needed_tracks']} tracks, max concurrency {v['max_concurrency']}")
    lines.append("max_concurrency:")
    conc = report.get("max_concurrency", {})
    if isinstance(conc, dict):
        for k, v in conc.items():
            lines.append(f"  - {k}: {v}")
    return "\n".join(lines)
