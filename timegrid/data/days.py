from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from ..models.reference import Day
from ..settings import DEFAULT_DAY_NAMES


def build_days(names: Iterable[str] = DEFAULT_DAY_NAMES) -> List[Day]:
    # Day ids are positional strings: "0" = first name, "1" = second, ...
    return [Day(id=str(i), name=n, short=n[:3]) for i, n in enumerate(names)]


def days_from_rows(rows: Sequence[Dict[str, object]]) -> Tuple[List[Day], Dict[str, str]]:
    """Positional days from an export's day table, in table order.

    Bitmask position i means the i-th row, so ids are "0", "1", ... regardless
    of the table's own ids. Also returns {table id: positional id}.
    """
    days: List[Day] = []
    aliases: Dict[str, str] = {}
    for i, row in enumerate(rows):
        name = str(row.get("name") or row.get("short") or row.get("id") or f"Day {i + 1}")
        short = row.get("short")
        days.append(Day(id=str(i), name=name, short=str(short) if short else name[:3]))
        if row.get("id") not in (None, ""):
            aliases.setdefault(str(row["id"]), str(i))
    return days, aliases


def day_index_from_bitmask(mask: str | None) -> int:
    """Position of the first '1' in a days bitmask ("0100000" -> 1), or -1."""
    if not mask:
        return -1
    return str(mask).find("1")


def day_id_from_bitmask(mask: str | None) -> str | None:
    idx = day_index_from_bitmask(mask)
    return str(idx) if idx >= 0 else None


def day_id_from_name(value: str | None, days: Iterable[Day]) -> str | None:
    """Match a day by full name or its 3-letter prefix, ignoring case."""
    if not value or not str(value).strip():
        return None
    needle = str(value).strip().lower()
    days = list(days)
    for d in days:
        if needle == d.name.lower() or (d.short and needle == d.short.lower()):
            return d.id
    for d in days:
        if len(needle) >= 3 and needle[:3] == d.name.lower()[:3]:
            return d.id
    return None
