from __future__ import annotations

from typing import List

from ..models.event import Conflict, DayLayout


def find_conflicts(day: DayLayout) -> List[Conflict]:
    # Every pair of events whose [start, end) intervals intersect
    out: List[Conflict] = []
    events = day.events
    for i, a in enumerate(events):
        for b in events[i + 1 :]:
            if a.start_offset < b.end_offset and b.start_offset < a.end_offset:
                out.append(
                    Conflict(
                        day_id=day.day_id,
                        first=a.id,
                        second=b.id,
                        overlap_start=max(a.start_offset, b.start_offset),
                        overlap_end=min(a.end_offset, b.end_offset),
                    )
                )
    return out
