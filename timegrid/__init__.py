from .data import ReferenceDirectory, build_days
from .layout import InvalidSpan, find_conflicts, layout, layout_with_audit
from .models import (
    Conflict,
    Day,
    DayLayout,
    Event,
    Lesson,
    Room,
    ScheduleFragment,
    Subject,
    Teacher,
    TimeSlot,
)
from .settings import LayoutSettings, load_settings

__all__ = [
    "layout",
    "layout_with_audit",
    "find_conflicts",
    "InvalidSpan",
    "ReferenceDirectory",
    "build_days",
    "LayoutSettings",
    "load_settings",
    "TimeSlot",
    "ScheduleFragment",
    "Lesson",
    "Subject",
    "Teacher",
    "Room",
    "Day",
    "Event",
    "DayLayout",
    "Conflict",
]
