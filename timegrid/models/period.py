from __future__ import annotations

from dataclasses import dataclass


def clock_to_minutes(value: str | None) -> int | None:
    """Parse "HH:MM" (or "H:MM", "HH:MM:SS") into minutes after midnight.

    Returns None for missing or unparseable values.
    """
    if not value:
        return None
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if hours < 0 or not 0 <= minutes < 60:
        return None
    return hours * 60 + minutes


@dataclass(frozen=True)
class TimeSlot:
    id: str
    order: int | None = None
    start: str | None = None  # "HH:MM"
    end: str | None = None
    label: str | None = None

    @property
    def start_minutes(self) -> int | None:
        return clock_to_minutes(self.start)

    @property
    def end_minutes(self) -> int | None:
        return clock_to_minutes(self.end)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order": self.order,
            "start": self.start,
            "end": self.end,
            "label": self.label,
        }
