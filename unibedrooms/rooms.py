"""Rooms offered in residences and the localities that group them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .messages import FREE, OCCUPIED, ApplicationExists
from .people import Student


@dataclass(eq=False)
class Room:
    """A room in a residence, with its state and its applicants in order."""

    code: str
    manager_login: str
    residence: str
    university: str
    locality: str
    floor: int
    description: str
    state: str = FREE
    applicants: list[Student] = field(default_factory=list)

    @property
    def occupied(self) -> bool:
        return self.state == OCCUPIED

    @property
    def application_count(self) -> int:
        return len(self.applicants)

    def add_applicant(self, student: Student) -> None:
        """Append a student to the applicants; raise if already there."""
        if self.has_applicant(student.login):
            raise ApplicationExists()
        self.applicants.append(student)

    def has_applicant(self, login: str) -> bool:
        return any(student.login == login for student in self.applicants)

    def remove_applicant(self, login: str) -> None:
        """Drop the student with this login from the applicants, if present."""
        for student in self.applicants:
            if student.login == login:
                self.applicants.remove(student)
                return

    def clear_applicants(self) -> None:
        self.applicants.clear()

    def withdraw_from_applicants(self) -> None:
        """Remove this room's code from every applicant's own applications."""
        for student in list(self.applicants):
            student.withdraw(self.code)


@dataclass(eq=False)
class Locality:
    """A locality and the rooms located in it, keyed by room code."""

    name: str
    rooms: dict[str, Room] = field(default_factory=dict)

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    def add_room(self, room: Room) -> None:
        """Add a room unless one with the same code is already here."""
        self.rooms.setdefault(room.code, room)

    def remove_room(self, room: Room) -> None:
        self.rooms.pop(room.code, None)

    def sorted_rooms(self) -> Iterator[Room]:
        """Yield the rooms in ascending order of code."""
        yield from sorted(self.rooms.values(), key=lambda room: room.code)