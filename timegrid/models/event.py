from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .reference import Room, Subject, Teacher


@dataclass(frozen=True)
class Event:
    id: str  # "<lesson_id>-<day_id>"
    lesson_id: str
    day_id: str
    start_offset: int
    span: int
    subject: Subject | None = None
    teachers: Tuple[Teacher, ...] = ()
    rooms: Tuple[Room, ...] = ()
    track_index: int = 0
    total_tracks: int = 1

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.span

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "lesson_id": self.lesson_id,
            "day_id": self.day_id,
            "start_offset": self.start_offset,
            "span": self.span,
            "subject": self.subject.to_dict() if self.subject else None,
            "teachers": [t.to_dict() for t in self.teachers],
            "rooms": [r.to_dict() for r in self.rooms],
            "track_index": self.track_index,
            "total_tracks": self.total_tracks,
        }


@dataclass
class DayLayout:
    day_id: str
    events: List[Event] = field(default_factory=list)
    needed_tracks: int = 1

    def to_dict(self) -> dict:
        return {
            "day_id": self.day_id,
            "needed_tracks": self.needed_tracks,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass(frozen=True)
class Conflict:
    day_id: str
    first: str  # event ids
    second: str
    overlap_start: int
    overlap_end: int

    def to_dict(self) -> dict:
        return {
            "day_id": self.day_id,
            "first": self.first,
            "second": self.second,
            "overlap_start": self.overlap_start,
            "overlap_end": self.overlap_end,
        }
