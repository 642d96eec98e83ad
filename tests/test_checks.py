from pathlib import Path

from timegrid.models import DayLayout, Event
from timegrid.validate.checks import max_concurrency, validate_layouts
from timegrid.validate.report import format_validation_report, write_validation_report


def ev(eid: str, start: int, span: int, track: int = 0) -> Event:
    return Event(id=eid, lesson_id=eid, day_id="0", start_offset=start, span=span, track_index=track)


def test_sweep_line_treats_touching_intervals_as_disjoint() -> None:
    assert max_concurrency([]) == 0
    assert max_concurrency([ev("a", 0, 2), ev("b", 2, 2)]) == 1
    assert max_concurrency([ev("a", 0, 3), ev("b", 1, 1), ev("c", 2, 2)]) == 2


def test_report_flags_overlap_waste_and_missing_days(tmp_path: Path) -> None:
    layouts = {
        "0": DayLayout("0", [ev("a", 0, 2, 0), ev("b", 1, 2, 0)], needed_tracks=1),
        "1": DayLayout("1", [ev("c", 0, 1, 0), ev("d", 3, 1, 1)], needed_tracks=2),
        "9": DayLayout("9"),
    }
    report = validate_layouts(layouts, ["0", "1", "2"])
    assert report["overlap_count"] == 1
    assert report["non_minimal_days"] == {
        "0": {"needed_tracks": 1, "max_concurrency": 2},
        "1": {"needed_tracks": 2, "max_concurrency": 1},
    }
    assert report["missing_days"] == ["2"]
    assert report["extra_days"] == ["9"]
    text = format_validation_report(report)
    assert "overlap_count: 1" in text
    assert "missing_days: 2" in text
    assert write_validation_report(report, tmp_path / "out").exists()


def test_clean_report() -> None:
    layouts = {"0": DayLayout("0", [ev("a", 0, 2, 0), ev("b", 1, 2, 1)], needed_tracks=2)}
    report = validate_layouts(layouts, ["0"])
    assert report["overlap_count"] == 0
    assert report["non_minimal_days"] == {}
    assert report["missing_days"] == [] and report["extra_days"] == []
