from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from ..data.directory import ReferenceDirectory
from ..models.event import DayLayout, Event
from ..models.fragment import ScheduleFragment
from ..models.lesson import Lesson
from ..models.period import TimeSlot
from ..models.reference import Day
from ..settings import LayoutSettings
from .merge import group_fragments, merge_events
from .normalize import normalize_slots
from .pack import InvalidSpan, check_span, pack_events


def _day_ids(days: Iterable[Day | str]) -> List[str]:
    out: List[str] = []
    for d in days:
        did = d.id if isinstance(d, Day) else str(d)
        if did not in out:
            out.append(did)
    return out


def layout_with_audit(
    fragments: Sequence[ScheduleFragment],
    lessons: Iterable[Lesson],
    reference: ReferenceDirectory,
    days: Iterable[Day | str],
    slots: Sequence[TimeSlot],
    *,
    class_id: str | None = None,
    coordinates: str | None = None,
    day_start: str | None = None,
    settings: LayoutSettings | None = None,
) -> Tuple[Dict[str, DayLayout], List[str]]:
    """Build one DayLayout per requested day, plus an audit of everything dropped.

    Pure: inputs are only read and all returned records are new.
    """
    logger = logging.getLogger(__name__)
    cfg = (settings or LayoutSettings()).with_overrides(
        coordinates=coordinates, day_start=day_start
    )
    audit: List[str] = []

    lessons_by_id: Dict[str, Lesson] = {str(l.id): l for l in lessons}
    if class_id is not None:
        # Lessons of other classes are outside this view, not bad data
        outside = {lid for lid, l in lessons_by_id.items() if class_id not in l.class_ids}
        fragments = [f for f in fragments if str(f.lesson_id) not in outside]
        lessons_by_id = {lid: l for lid, l in lessons_by_id.items() if lid not in outside}

    axis = normalize_slots(
        slots, mode=cfg.coordinates, fragments=fragments, day_start=cfg.day_start
    )
    if axis.ambiguous:
        audit.append("Slot order is ambiguous (no clock times or order); using id order")

    day_ids = _day_ids(days)
    grouped = group_fragments(fragments, day_ids, lessons_by_id, audit)

    layouts: Dict[str, DayLayout] = {}
    for day_id in day_ids:
        merged = merge_events(day_id, grouped[day_id], lessons_by_id, reference, axis, audit)
        valid: List[Event] = []
        for event in merged:
            try:
                check_span(event.id, event.span)
            except InvalidSpan as exc:
                audit.append(f"Excluded {exc}")
                logger.warning(audit[-1])
                continue
            valid.append(event)
        placed, needed = pack_events(valid)
        layouts[day_id] = DayLayout(day_id=day_id, events=placed, needed_tracks=needed)
        logger.debug(f"Day {day_id}: {len(placed)} events on {needed} tracks")
    return layouts, audit


def layout(
    fragments: Sequence[ScheduleFragment],
    lessons: Iterable[Lesson],
    reference: ReferenceDirectory,
    days: Iterable[Day | str],
    slots: Sequence[TimeSlot],
    **options,
) -> Dict[str, DayLayout]:
    layouts, _ = layout_with_audit(fragments, lessons, reference, days, slots, **options)
    return layouts
