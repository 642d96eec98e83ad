from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..models.fragment import ScheduleFragment
from ..models.lesson import Lesson
from ..models.period import TimeSlot
from ..models.reference import Day, Room, Subject, Teacher
from ..settings import DEFAULT_DAY_NAMES
from .days import build_days, day_id_from_bitmask, day_id_from_name, days_from_rows
from .directory import ReferenceDirectory


class DatasetError(ValueError):
    pass


@dataclass
class LoadedData:
    slots: List[TimeSlot]
    lessons: List[Lesson]
    fragments: List[ScheduleFragment]
    reference: ReferenceDirectory
    days: List[Day] = field(default_factory=build_days)


def _rows(value: Any) -> List[Dict[str, Any]]:
    # Tables come either as a list of rows or as {id: row}
    if isinstance(value, dict):
        return [{"id": k, **v} for k, v in value.items() if isinstance(v, dict)]
    if isinstance(value, list):
        return [r for r in value if isinstance(r, dict)]
    return []


def _ids(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if v is not None)
    return tuple(s.strip() for s in str(value).split(",") if s.strip())


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _str_or_none(value: Any) -> str | None:
    return None if value in (None, "") else str(value)


def parse_slot(row: Dict[str, Any]) -> TimeSlot:
    return TimeSlot(
        id=str(row["id"]),
        order=_int_or_none(row.get("period", row.get("order"))),
        start=_str_or_none(row.get("starttime", row.get("start"))),
        end=_str_or_none(row.get("endtime", row.get("end"))),
        label=_str_or_none(row.get("name")),
    )


def parse_lesson(row: Dict[str, Any]) -> Lesson:
    teacher_ids = _ids(row.get("teacherids", row.get("teacherid")))
    return Lesson(
        id=str(row["id"]),
        subject_id=_str_or_none(row.get("subjectid")),
        teacher_ids=teacher_ids,
        duration_in_slots=_int_or_none(row.get("durationperiods")),
        class_ids=_ids(row.get("classids", row.get("classid"))),
    )


def resolve_day_id(value: Any, days: Sequence[Day], aliases: Dict[str, str]) -> str | None:
    # Table id, then positional id, then day name; otherwise kept for the merger to drop
    raw = str(value).strip()
    if raw in aliases:
        return aliases[raw]
    if any(d.id == raw for d in days):
        return raw
    return day_id_from_name(raw, days) or raw


def parse_card(
    row: Dict[str, Any],
    days: Sequence[Day] = (),
    aliases: Dict[str, str] | None = None,
) -> ScheduleFragment:
    named_day = row.get("dayid", row.get("day"))
    if named_day not in (None, ""):
        day_id = resolve_day_id(named_day, days, aliases or {})
    else:
        day_id = day_id_from_bitmask(row.get("days"))
    return ScheduleFragment(
        lesson_id=str(row["lessonid"]),
        day_id=day_id,
        slot_id=_str_or_none(row.get("period", row.get("periodid"))),
        room_ids=_ids(row.get("classroomids", row.get("classroomid"))),
        teacher_ids=_ids(row.get("teacherids")),
        start=_str_or_none(row.get("starttime")),
        end=_str_or_none(row.get("endtime")),
        id=_str_or_none(row.get("id")),
    )


def _named(row: Dict[str, Any], cls):
    # Subject, Teacher, Room and Day rows share the id/name/short shape
    name = row.get("name") or row.get("short") or row["id"]
    return cls(id=str(row["id"]), name=str(name), short=_str_or_none(row.get("short")))


def parse_dataset(data: Any, day_names: Sequence[str] = DEFAULT_DAY_NAMES) -> LoadedData:
    """Typed records from an export; ``day_names`` names the days when it has no day table."""
    logger = logging.getLogger(__name__)
    if not isinstance(data, dict):
        raise DatasetError("Timetable export must be a JSON object")

    def parse_all(key: str, parse, required: tuple[str, ...] = ("id",)) -> list:
        out = []
        for row in _rows(data.get(key)):
            if any(row.get(k) in (None, "") for k in required):
                logger.debug(f"Skipping {key} row without {required}: {row}")
                continue
            out.append(parse(row))
        return out

    days_rows = _rows(data.get("days"))
    if days_rows:
        days, aliases = days_from_rows(days_rows)
    else:
        days, aliases = build_days(day_names), {}
    return LoadedData(
        slots=parse_all("periods", parse_slot),
        lessons=parse_all("lessons", parse_lesson),
        fragments=parse_all("cards", lambda r: parse_card(r, days, aliases), ("lessonid",)),
        reference=ReferenceDirectory(
            subjects=parse_all("subjects", lambda r: _named(r, Subject)),
            teachers=parse_all("teachers", lambda r: _named(r, Teacher)),
            rooms=parse_all("classrooms", lambda r: _named(r, Room)),
        ),
        days=days,
    )


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_dataset(path: Path | str, day_names: Sequence[str] = DEFAULT_DAY_NAMES) -> LoadedData:
    path = Path(path)
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{path}: not valid JSON ({exc})") from exc
    return parse_dataset(data, day_names)
