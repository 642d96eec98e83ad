from __future__ import annotations

from typing import List

from timegrid.data.directory import ReferenceDirectory
from timegrid.layout.merge import group_fragments, merge_events
from timegrid.layout.normalize import normalize_slots
from timegrid.models import Lesson, Room, ScheduleFragment, Subject, Teacher, TimeSlot

SLOTS = [TimeSlot(f"P{i}", order=i, start=f"{7 + i:02d}:00", end=f"{8 + i:02d}:00") for i in range(1, 6)]
DIRECTORY = ReferenceDirectory(
    subjects=[Subject("S1", "Web Programming", "CT206")],
    teachers=[Teacher("T1", "Dr. Ahmad"), Teacher("T2", "Dr. Siti")],
    rooms=[Room("R1", "Computer Lab 1"), Room("R2", "Lecture Hall 2")],
)


def merge_day(fragments, lessons, mode: str = "index", day_id: str = "0"):
    audit: List[str] = []
    by_id = {l.id: l for l in lessons}
    axis = normalize_slots(SLOTS, mode=mode, fragments=fragments)
    grouped = group_fragments(fragments, ["0", "1"], by_id, audit)
    return merge_events(day_id, grouped[day_id], by_id, DIRECTORY, axis, audit), audit


def test_two_fragments_without_duration_merge_into_two_slot_event() -> None:
    lessons = [Lesson("L1", "S1", ("T1",))]
    frags = [ScheduleFragment("L1", "0", "P2"), ScheduleFragment("L1", "0", "P1")]
    events, audit = merge_day(frags, lessons)
    assert len(events) == 1
    e = events[0]
    assert (e.id, e.start_offset, e.span) == ("L1-0", 0, 2)
    assert e.subject is not None and e.subject.short == "CT206"
    assert audit == []


def test_explicit_duration_wins_over_fragment_count() -> None:
    lessons = [Lesson("L1", "S1", duration_in_slots=3)]
    events, _ = merge_day([ScheduleFragment("L1", "0", "P2"), ScheduleFragment("L1", "0", "P3")], lessons)
    assert (events[0].start_offset, events[0].span) == (1, 3)

    zero = [Lesson("L1", "S1", duration_in_slots=0)]
    events, _ = merge_day([ScheduleFragment("L1", "0", "P2")], zero)
    assert events[0].span == 1


def test_same_lesson_on_other_day_is_a_separate_event() -> None:
    lessons = [Lesson("L1", "S1")]
    frags = [ScheduleFragment("L1", "0", "P1"), ScheduleFragment("L1", "1", "P1")]
    monday, _ = merge_day(frags, lessons, day_id="0")
    tuesday, _ = merge_day(frags, lessons, day_id="1")
    assert [e.id for e in monday] == ["L1-0"]
    assert [e.id for e in tuesday] == ["L1-1"]


def test_teachers_and_rooms_are_deduplicated_and_blank_rooms_dropped() -> None:
    lessons = [Lesson("L1", "S1", ("T1", "T2", "T1"))]
    frags = [
        ScheduleFragment("L1", "0", "P1", room_ids=("R1", "")),
        ScheduleFragment("L1", "0", "P2", room_ids=("R1", "R2", "  "), teacher_ids=("T2",)),
        ScheduleFragment("L1", "0", "P3", room_ids=("R404",)),
    ]
    events, _ = merge_day(frags, lessons)
    assert [t.id for t in events[0].teachers] == ["T1", "T2"]
    assert [r.id for r in events[0].rooms] == ["R1", "R2"]


def test_unknown_lesson_day_and_slot_are_dropped_with_audit() -> None:
    lessons = [Lesson("L1", "S1")]
    frags = [
        ScheduleFragment("L1", "0", "P1"),
        ScheduleFragment("L1", "0", "P99"),
        ScheduleFragment("L404", "0", "P1"),
        ScheduleFragment("L1", "6", "P1"),
        ScheduleFragment("L1", None, "P1"),
    ]
    events, audit = merge_day(frags, lessons)
    assert [(e.id, e.span) for e in events] == [("L1-0", 1)]
    assert len(audit) == 4
    assert any("unknown lesson L404" in line for line in audit)


def test_unknown_subject_keeps_event() -> None:
    events, _ = merge_day([ScheduleFragment("L1", "0", "P1")], [Lesson("L1", "S404")])
    assert events[0].subject is None


def test_minutes_mode_uses_clock_extent() -> None:
    lessons = [Lesson("L1", "S1"), Lesson("L2", "S1", duration_in_slots=2)]
    frags = [
        ScheduleFragment("L1", "0", "P2"),
        ScheduleFragment("L1", "0", "P3"),
        ScheduleFragment("L2", "0", "P1"),
    ]
    events, _ = merge_day(frags, lessons, mode="minutes")
    spans = {e.lesson_id: (e.start_offset, e.span) for e in events}
    assert spans == {"L1": (60, 120), "L2": (0, 120)}
