from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Tuple

from ..models.event import DayLayout, Event


def max_concurrency(events: Iterable[Event]) -> int:
    """Sweep-line count of events active at the busiest instant."""
    points: List[Tuple[int, int]] = []
    for e in events:
        points.append((e.start_offset, 1))
        points.append((e.end_offset, -1))
    # Ends sort before starts at the same offset: [a, b) and [b, c) do not overlap
    points.sort()
    active = peak = 0
    for _, delta in points:
        active += delta
        peak = max(peak, active)
    return peak


def overlapping_pairs(day: DayLayout) -> List[str]:
    by_track: Dict[int, List[Event]] = defaultdict(list)
    for e in day.events:
        by_track[e.track_index].append(e)
    out: List[str] = []
    for track, events in sorted(by_track.items()):
        events = sorted(events, key=lambda e: (e.start_offset, e.id))
        for prev, cur in zip(events, events[1:]):
            if cur.start_offset < prev.end_offset:
                out.append(f"{day.day_id} track {track}: {prev.id} / {cur.id}")
    return out


def validate_layouts(layouts: Mapping[str, DayLayout], day_ids: Iterable[str]) -> Dict[str, object]:
    report: Dict[str, object] = {}
    expected = [str(d) for d in day_ids]

    overlaps: List[str] = []
    non_minimal: Dict[str, Dict[str, int]] = {}
    concurrency: Dict[str, int] = {}
    for day_id, day in layouts.items():
        overlaps.extend(overlapping_pairs(day))
        peak = max(1, max_concurrency(day.events))
        concurrency[day_id] = peak
        if day.needed_tracks != peak:
            non_minimal[day_id] = {"needed_tracks": day.needed_tracks, "max_concurrency": peak}

    report["overlap_count"] = len(overlaps)
    report["overlaps"] = overlaps
    report["non_minimal_days"] = non_minimal
    report["missing_days"] = [d for d in expected if d not in layouts]
    report["extra_days"] = [d for d in layouts if d not in expected]
    report["max_concurrency"] = concurrency
    return report
