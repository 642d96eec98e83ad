from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping

from ..models.event import Conflict, DayLayout


def layouts_to_dicts(layouts: Mapping[str, DayLayout]) -> Dict[str, dict]:
    return {day_id: day.to_dict() for day_id, day in layouts.items()}


def conflicts_to_dicts(conflicts: Mapping[str, List[Conflict]]) -> Dict[str, list]:
    return {day_id: [c.to_dict() for c in items] for day_id, items in conflicts.items()}


def dumps(payload: object) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_layout_json(layouts: Mapping[str, DayLayout], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(layouts_to_dicts(layouts)), encoding="utf-8")
    return path
