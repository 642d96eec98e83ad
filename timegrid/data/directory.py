from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, TypeVar

from ..models.reference import Room, Subject, Teacher

T = TypeVar("T")


def _unique_by_id(records: Iterable[T]) -> Tuple[T, ...]:
    seen: set[str] = set()
    out: List[T] = []
    for r in records:
        rid = getattr(r, "id")
        if rid in seen:
            continue
        seen.add(rid)
        out.append(r)
    return tuple(out)


class ReferenceDirectory:
    """Id lookups for subjects, teachers and rooms.

    Unknown ids resolve to None (single lookups) or are skipped (bulk lookups);
    blank ids are ignored.
    """

    def __init__(
        self,
        subjects: Iterable[Subject] = (),
        teachers: Iterable[Teacher] = (),
        rooms: Iterable[Room] = (),
    ):
        self.subjects: Dict[str, Subject] = {s.id: s for s in subjects}
        self.teachers: Dict[str, Teacher] = {t.id: t for t in teachers}
        self.rooms: Dict[str, Room] = {r.id: r for r in rooms}

    def subject(self, subject_id: str | None) -> Subject | None:
        if subject_id is None:
            return None
        return self.subjects.get(str(subject_id))

    def teachers_for(self, ids: Iterable[str]) -> Tuple[Teacher, ...]:
        found = (self.teachers.get(str(i).strip()) for i in ids if i and str(i).strip())
        return _unique_by_id(t for t in found if t is not None)

    def rooms_for(self, ids: Iterable[str]) -> Tuple[Room, ...]:
        found = (self.rooms.get(str(i).strip()) for i in ids if i and str(i).strip())
        return _unique_by_id(r for r in found if r is not None)
