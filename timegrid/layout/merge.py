from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from ..data.directory import ReferenceDirectory
from ..models.event import Event
from ..models.fragment import ScheduleFragment
from ..models.lesson import Lesson
from .normalize import SlotAxis

GroupKey = Tuple[str, str]  # (lesson_id, day_id)


def group_fragments(
    fragments: Iterable[ScheduleFragment],
    day_ids: Iterable[str],
    lessons: Mapping[str, Lesson],
    audit: List[str],
) -> Dict[str, Dict[GroupKey, List[ScheduleFragment]]]:
    """Bucket fragments per day, then per (lesson_id, day_id).

    Fragments with no day, a day outside ``day_ids`` or an unknown lesson are
    dropped and recorded in ``audit``. Every day id gets a (possibly empty) bucket.
    """
    logger = logging.getLogger(__name__)
    by_day: Dict[str, Dict[GroupKey, List[ScheduleFragment]]] = {d: {} for d in day_ids}
    for frag in fragments:
        day_id = None if frag.day_id is None else str(frag.day_id)
        if day_id is None or day_id not in by_day:
            audit.append(f"Dropped fragment {frag.id or '?'} of lesson {frag.lesson_id}: unknown day {frag.day_id!r}")
            logger.debug(audit[-1])
            continue
        lesson_id = str(frag.lesson_id)
        if lesson_id not in lessons:
            audit.append(f"Dropped fragment {frag.id or '?'}: unknown lesson {lesson_id}")
            logger.debug(audit[-1])
            continue
        by_day[day_id].setdefault((lesson_id, day_id), []).append(frag)
    return by_day


def _span_for(
    lesson: Lesson,
    placed: Sequence[Tuple[Tuple[int, int], ScheduleFragment]],
    axis: SlotAxis,
) -> int:
    start = placed[0][0][0]
    duration = lesson.duration_in_slots
    has_duration = duration is not None and duration > 0
    if axis.mode == "index":
        return duration if has_duration else len(placed)
    if has_duration:
        first_idx = axis.index_of(placed[0][1])
        if first_idx is not None:
            end = axis.slot_end(first_idx + duration - 1)
            if end is not None:
                return end - start
    return max(end for (_, end), _ in placed) - start


def merge_events(
    day_id: str,
    groups: Mapping[GroupKey, Sequence[ScheduleFragment]],
    lessons: Mapping[str, Lesson],
    directory: ReferenceDirectory,
    axis: SlotAxis,
    audit: List[str],
) -> List[Event]:
    """One Event per (lesson_id, day_id) group of one day.

    Spans are returned as computed; rejecting non-positive spans is left to the packer.
    """
    logger = logging.getLogger(__name__)
    events: List[Event] = []
    for (lesson_id, _), frags in sorted(groups.items()):
        lesson = lessons[lesson_id]
        placed: List[Tuple[Tuple[int, int], ScheduleFragment]] = []
        for frag in frags:
            interval = axis.interval(frag)
            if interval is None:
                audit.append(
                    f"Dropped fragment {frag.id or '?'} of lesson {lesson_id}: "
                    f"slot {frag.slot_id!r} cannot be placed"
                )
                logger.debug(audit[-1])
                continue
            placed.append((interval, frag))
        if not placed:
            continue
        placed.sort(key=lambda p: (p[0][0], p[0][1], str(p[1].slot_id), str(p[1].id)))

        teacher_ids: List[str] = list(lesson.teacher_ids)
        room_ids: List[str] = []
        for _, frag in placed:
            teacher_ids.extend(frag.teacher_ids)
            room_ids.extend(frag.room_ids)

        events.append(
            Event(
                id=f"{lesson_id}-{day_id}",
                lesson_id=lesson_id,
                day_id=day_id,
                start_offset=placed[0][0][0],
                span=_span_for(lesson, placed, axis),
                subject=directory.subject(lesson.subject_id),
                teachers=directory.teachers_for(teacher_ids),
                rooms=directory.rooms_for(room_ids),
            )
        )
    return events
