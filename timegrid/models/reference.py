from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    short: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "short": self.short}


@dataclass(frozen=True)
class Teacher:
    id: str
    name: str
    short: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "short": self.short}


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    short: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "short": self.short}


@dataclass(frozen=True)
class Day:
    id: str
    name: str
    short: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "short": self.short}
