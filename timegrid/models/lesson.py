from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Lesson:
    id: str
    subject_id: str | None
    teacher_ids: Tuple[str, ...] = ()
    duration_in_slots: int | None = None
    class_ids: Tuple[str, ...] = ()
