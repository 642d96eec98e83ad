# Re-export common types
from .event import Conflict, DayLayout, Event
from .fragment import ScheduleFragment
from .lesson import Lesson
from .period import TimeSlot, clock_to_minutes
from .reference import Day, Room, Subject, Teacher

__all__ = [
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
    "clock_to_minutes",
]
