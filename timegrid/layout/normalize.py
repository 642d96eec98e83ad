from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..models.fragment import ScheduleFragment
from ..models.period import TimeSlot, clock_to_minutes
from ..settings import COORDINATE_MODES

# Ordering sources, in order of preference
BY_CLOCK = "clock"
BY_ORDER = "order"
BY_ID = "id"


@dataclass
class SlotAxis:
    """A linear coordinate space built from the slots of one layout request.

    In "index" mode a fragment occupies [index, index + 1) of its slot; in
    "minutes" mode it occupies its clock interval relative to ``origin``.
    """

    mode: str
    ordered: List[TimeSlot] = field(default_factory=list)
    slot_index: Dict[str, int] = field(default_factory=dict)
    ordered_by: str = BY_ID
    origin: int = 0

    @property
    def total_slots(self) -> int:
        return len(self.ordered)

    @property
    def ambiguous(self) -> bool:
        return self.ordered_by == BY_ID and len(self.ordered) > 1

    def index_of(self, fragment: ScheduleFragment) -> int | None:
        if fragment.slot_id is None:
            return None
        return self.slot_index.get(str(fragment.slot_id))

    def interval(self, fragment: ScheduleFragment) -> Tuple[int, int] | None:
        """Half-open [start, end) of one fragment, or None when it cannot be placed."""
        if self.mode == "index":
            idx = self.index_of(fragment)
            return None if idx is None else (idx, idx + 1)
        start, end = fragment.start_minutes, fragment.end_minutes
        idx = self.index_of(fragment)
        if idx is not None:
            slot = self.ordered[idx]
            start = slot.start_minutes if start is None else start
            end = slot.end_minutes if end is None else end
        if start is None or end is None:
            return None
        return start - self.origin, end - self.origin

    def slot_end(self, index: int) -> int | None:
        # Minutes-mode end of the slot at ``index`` (clamped to the last slot)
        if not self.ordered:
            return None
        slot = self.ordered[min(max(index, 0), len(self.ordered) - 1)]
        end = slot.end_minutes
        return None if end is None else end - self.origin


def order_slots(slots: Iterable[TimeSlot]) -> Tuple[List[TimeSlot], str]:
    """Total order over slots: clock start, else explicit order, else id.

    Ties break on the slot id so the result never depends on input order.
    """
    unique: Dict[str, TimeSlot] = {}
    for s in slots:
        unique.setdefault(str(s.id), s)
    items = list(unique.values())
    if items and all(s.start_minutes is not None for s in items):
        return sorted(items, key=lambda s: (s.start_minutes, str(s.id))), BY_CLOCK
    if items and all(s.order is not None for s in items):
        return sorted(items, key=lambda s: (s.order, str(s.id))), BY_ORDER
    return sorted(items, key=lambda s: str(s.id)), BY_ID


def normalize_slots(
    slots: Sequence[TimeSlot],
    *,
    mode: str = "index",
    fragments: Sequence[ScheduleFragment] = (),
    day_start: str | None = None,
) -> SlotAxis:
    logger = logging.getLogger(__name__)
    if mode not in COORDINATE_MODES:
        logger.warning(f"Unknown coordinates mode {mode!r}; using 'index'")
        mode = "index"
    ordered, ordered_by = order_slots(slots)
    axis = SlotAxis(
        mode=mode,
        ordered=ordered,
        slot_index={str(s.id): i for i, s in enumerate(ordered)},
        ordered_by=ordered_by,
    )
    if axis.ambiguous:
        logger.warning(
            f"{len(ordered)} slots have neither clock times nor order; falling back to id order"
        )
    if mode == "minutes":
        origin = clock_to_minutes(day_start)
        if origin is None:
            starts = [s.start_minutes for s in ordered] + [f.start_minutes for f in fragments]
            known = [m for m in starts if m is not None]
            origin = min(known) if known else 0
        axis.origin = origin
    return axis
