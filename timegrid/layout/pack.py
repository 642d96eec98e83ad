from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

from ..models.event import Event


class InvalidSpan(ValueError):
    def __init__(self, event_id: str, span: float):
        super().__init__(f"Event {event_id} has non-positive span {span}")
        self.event_id = event_id
        self.span = span


def check_span(event_id: str, span: float) -> None:
    if span <= 0:
        raise InvalidSpan(event_id, span)


def pack_intervals(intervals: Sequence[Tuple[float, float]]) -> Tuple[List[int], int]:
    """Greedy first-fit track assignment for (start, span) intervals of one day.

    Intervals are visited by start ascending, longer spans first on ties, and
    each goes to the lowest-numbered track that is free by its start. Returns
    the track of every interval (in input order) and the number of tracks, at
    least 1.
    """
    for i, (_, span) in enumerate(intervals):
        check_span(str(i), span)
    order = sorted(range(len(intervals)), key=lambda i: (intervals[i][0], -intervals[i][1], i))
    tracks: List[int] = [0] * len(intervals)
    track_ends: List[float] = []  # end of the last interval placed on each track
    for i in order:
        start, span = intervals[i]
        for t, end in enumerate(track_ends):
            if end <= start:
                tracks[i] = t
                track_ends[t] = start + span
                break
        else:
            tracks[i] = len(track_ends)
            track_ends.append(start + span)
    return tracks, max(1, len(track_ends))


def pack_events(events: Sequence[Event]) -> Tuple[List[Event], int]:
    """Assign track_index/total_tracks to one day's events.

    Returns new Event records sorted by (start, -span, lesson_id, day_id) and the needed
    track count. Raises InvalidSpan if any event has span <= 0.
    """
    for e in events:
        check_span(e.id, e.span)
    ordered = sorted(events, key=lambda e: (e.start_offset, -e.span, e.lesson_id, e.day_id))
    tracks, needed = pack_intervals([(e.start_offset, e.span) for e in ordered])
    placed = [
        replace(e, track_index=t, total_tracks=needed) for e, t in zip(ordered, tracks)
    ]
    return placed, needed
