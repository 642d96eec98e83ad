from timegrid.layout.normalize import BY_CLOCK, BY_ID, BY_ORDER, normalize_slots, order_slots
from timegrid.models import ScheduleFragment, TimeSlot, clock_to_minutes


def test_clock_parsing() -> None:
    assert clock_to_minutes("08:30") == 510
    assert clock_to_minutes("9:05") == 545
    assert clock_to_minutes("13:00:00") == 780
    assert clock_to_minutes("") is None
    assert clock_to_minutes("noon") is None
    assert clock_to_minutes("10:75") is None


def test_clock_times_order_numerically_with_id_tiebreak() -> None:
    slots = [
        TimeSlot("b", order=1, start="10:00", end="11:00"),
        TimeSlot("c", order=2, start="9:00", end="10:00"),
        TimeSlot("a", order=3, start="10:00", end="11:00"),
    ]
    ordered, by = order_slots(slots)
    assert by == BY_CLOCK
    assert [s.id for s in ordered] == ["c", "a", "b"]


def test_order_field_when_clock_times_missing() -> None:
    slots = [TimeSlot("x", order=2), TimeSlot("y", order=0), TimeSlot("z", order=1, start="08:00")]
    ordered, by = order_slots(slots)
    assert by == BY_ORDER
    assert [s.id for s in ordered] == ["y", "z", "x"]


def test_id_order_fallback_is_flagged() -> None:
    axis = normalize_slots([TimeSlot("P2"), TimeSlot("P10"), TimeSlot("P1", order=1)])
    assert axis.ordered_by == BY_ID
    assert axis.ambiguous
    assert axis.slot_index == {"P1": 0, "P10": 1, "P2": 2}
    assert axis.total_slots == 3


def test_duplicate_slot_ids_collapse() -> None:
    axis = normalize_slots([TimeSlot("P1", order=1), TimeSlot("P1", order=5), TimeSlot("P2", order=2)])
    assert axis.total_slots == 2
    assert axis.slot_index == {"P1": 0, "P2": 1}


def test_index_intervals() -> None:
    axis = normalize_slots([TimeSlot("P1", order=1), TimeSlot("P2", order=2)])
    assert axis.interval(ScheduleFragment("L1", "0", "P2")) == (1, 2)
    assert axis.interval(ScheduleFragment("L1", "0", "P9")) is None
    assert axis.interval(ScheduleFragment("L1", "0", None, start="08:00", end="09:00")) is None


def test_minutes_axis_origin_and_explicit_times() -> None:
    slots = [TimeSlot("P1", start="08:00", end="09:00"), TimeSlot("P2", start="09:00", end="10:00")]
    frags = [ScheduleFragment("L1", "0", None, start="07:30", end="08:15")]
    axis = normalize_slots(slots, mode="minutes", fragments=frags)
    assert axis.origin == 450
    assert axis.interval(frags[0]) == (0, 45)
    assert axis.interval(ScheduleFragment("L2", "0", "P2")) == (90, 150)
    assert axis.slot_end(5) == 150

    fixed = normalize_slots(slots, mode="minutes", day_start="08:00")
    assert fixed.interval(ScheduleFragment("L2", "0", "P1")) == (0, 60)


def test_unknown_mode_falls_back_to_index() -> None:
    axis = normalize_slots([TimeSlot("P1", order=1)], mode="hours")
    assert axis.mode == "index"
