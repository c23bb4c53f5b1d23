"""The room-rental system: students, managers, rooms and localities."""

from __future__ import annotations

from .messages import (
    OCCUPIED,
    ActiveApplications,
    ApplicationNotFound,
    ManagerNotFound,
    NoApplications,
    NoManagers,
    NoRooms,
    NoRoomsInLocality,
    NotAuthorized,
    RoomExists,
    RoomNotFound,
    RoomOccupied,
    StudentNotFound,
    UserExists,
)
from .people import MAX_APPLICATIONS, Manager, Student
from .ranking import TopManagers
from .rooms import Locality, Room


class UniBedrooms:
    """Registry of users and rooms; each operation raises on refusal."""

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}
        self._managers: dict[str, Manager] = {}
        self._rooms: dict[str, Room] = {}
        self._localities: dict[str, Locality] = {}
        self._top = TopManagers()

    # Users

    def add_student(
        self, login: str, name: str, university: str, locality: str, age: int
    ) -> Student:
        """Register a student; the login must not belong to anyone yet."""
        if login in self._managers or login in self._students:
            raise UserExists()
        student = Student(login, name, university, locality, age)
        self._students[login] = student
        return student

    def student(self, login: str) -> Student:
        try:
            return self._students[login]
        except KeyError:
            raise StudentNotFound() from None

    def add_manager(self, login: str, name: str, university: str) -> Manager:
        """Register a manager; the login must not belong to anyone yet."""
        if login in self._students:
            raise UserExists()
        existing = self._managers.get(login)
        if existing is not None:
            self._top.update(existing)
            raise UserExists()
        manager = Manager(login, name, university)
        self._managers[login] = manager
        self._top.update(manager)
        return manager

    def manager(self, login: str) -> Manager:
        try:
            return self._managers[login]
        except KeyError:
            raise ManagerNotFound() from None

    # Rooms

    def add_room(
        self,
        code: str,
        manager_login: str,
        residence: str,
        university: str,
        locality: str,
        floor: int,
        description: str,
    ) -> Room:
        """Register a room run by a manager of the same university."""
        if code in self._rooms:
            raise RoomExists()
        manager = self.manager(manager_login)
        if manager.university != university:
            raise NotAuthorized()
        room = Room(
            code, manager_login, residence, university, locality, floor, description
        )
        self._rooms[code] = room
        self._localities.setdefault(locality, Locality(locality)).add_room(room)
        return room

    def room(self, code: str) -> Room:
        try:
            return self._rooms[code]
        except KeyError:
            raise RoomNotFound() from None

    def _owned_room(self, code: str, manager_login: str) -> Room:
        room = self.room(code)
        if room.manager_login != manager_login:
            raise NotAuthorized()
        return room

    def set_room_state(self, code: str, manager_login: str, state: str) -> None:
        """Change a room's state; occupying it needs no pending applications."""
        room = self._owned_room(code, manager_login)
        if state == OCCUPIED and room.application_count:
            raise ActiveApplications()
        room.state = state

    def remove_room(self, code: str, manager_login: str) -> None:
        """Remove a room that has no pending applications."""
        room = self._owned_room(code, manager_login)
        if room.application_count:
            raise ActiveApplications()
        locality = self._localities.get(room.locality)
        if locality is not None:
            locality.remove_room(room)
        del self._rooms[code]

    # Applications

    def apply(self, login: str, code: str) -> None:
        """Record a student's application to a free room."""
        student = self.student(login)
        if student.application_count >= MAX_APPLICATIONS:
            raise NotAuthorized()
        room = self.room(code)
        if room.occupied:
            raise RoomOccupied()
        room.add_applicant(student)
        student.apply(room.code)

    def accept(self, code: str, manager_login: str, login: str) -> None:
        """Give the room to an applicant and drop every related application."""
        room = self._owned_room(code, manager_login)
        student = self._students.get(login)
        if student is None or not room.has_applicant(login):
            raise ApplicationNotFound()
        manager = self._managers.get(room.manager_login)
        if manager is None:
            return
        room.state = OCCUPIED
        for applied in list(student.applications):
            other = self._rooms.get(applied)
            if other is not None:
                other.remove_applicant(login)
        room.withdraw_from_applicants()
        student.clear_applications()
        room.clear_applicants()
        manager.record_rental()
        self._top.update(manager)

    def applicants(self, code: str, manager_login: str) -> list[Student]:
        """Return the applicants to a room, in the order they applied."""
        room = self.room(code)
        if room.manager_login != manager_login:
            raise NotAuthorized()
        if not room.application_count:
            raise NoApplications()
        return list(room.applicants)

    # Listings

    def rooms(self) -> list[Room]:
        """Return every room, ordered by locality name and then by code."""
        if not self._rooms:
            raise NoRooms()
        return [
            room
            for name in sorted(self._localities)
            for room in self._localities[name].sorted_rooms()
        ]

    def free_rooms(self, locality: str) -> list[Room]:
        """Return the rooms in a locality that are not occupied, by code."""
        place = self._localities.get(locality)
        if place is None or not place.room_count:
            raise NoRoomsInLocality()
        free = [room for room in place.sorted_rooms() if not room.occupied]
        if not free:
            raise NoRoomsInLocality()
        return free

    def top_managers(self) -> list[Manager]:
        """Return the ranked managers with the most rooms rented out."""
        if not self._managers:
            raise NoManagers()
        return list(self._top)