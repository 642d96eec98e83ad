from .conflicts import find_conflicts
from .engine import layout, layout_with_audit
from .merge import group_fragments, merge_events
from .normalize import SlotAxis, normalize_slots, order_slots
from .pack import InvalidSpan, pack_events, pack_intervals

__all__ = [
    "layout",
    "layout_with_audit",
    "normalize_slots",
    "order_slots",
    "SlotAxis",
    "group_fragments",
    "merge_events",
    "pack_intervals",
    "pack_events",
    "InvalidSpan",
    "find_conflicts",
]
