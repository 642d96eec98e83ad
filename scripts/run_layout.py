from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from timegrid.cli.main import run_layout
from timegrid.render.json_out import write_layout_json
from timegrid.validate.checks import validate_layouts
from timegrid.validate.report import format_validation_report, write_validation_report


def main() -> None:
    dataset = Path(sys.argv[1]) if len(sys.argv) > 1 else root / "data" / "sample_timetable.json"
    layouts, audit, loaded = run_layout(dataset)
    outputs_dir = root / "outputs"
    write_layout_json(layouts, outputs_dir / "layout.json")
    report = validate_layouts(layouts, [d.id for d in loaded.days])
    write_validation_report(report, outputs_dir)
    print(format_validation_report(report))
    print("\n".join(["Dropped:"] + audit))


if __name__ == "__main__":
    main()
