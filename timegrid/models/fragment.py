from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .period import clock_to_minutes


@dataclass(frozen=True)
class ScheduleFragment:
    lesson_id: str
    day_id: str | None
    slot_id: str | None = None
    room_ids: Tuple[str, ...] = ()
    teacher_ids: Tuple[str, ...] = ()
    # Explicit clock times, used instead of the slot in minutes mode
    start: str | None = None
    end: str | None = None
    id: str | None = None

    @property
    def start_minutes(self) -> int | None:
        return clock_to_minutes(self.start)

    @property
    def end_minutes(self) -> int | None:
        return clock_to_minutes(self.end)
