"""Students and managers registered in the system."""

from dataclasses import dataclass, field

from .messages import ApplicationExists

MAX_APPLICATIONS = 10


@dataclass(eq=False)
class Student:
    """A student, with the codes of the rooms applied for in order."""

    login: str
    name: str
    university: str
    locality: str
    age: int
    applications: list[str] = field(default_factory=list)

    @property
    def application_count(self) -> int:
        return len(self.applications)

    def apply(self, code: str) -> None:
        """Record an application to a room; raise if already recorded."""
        if code in self.applications:
            raise ApplicationExists()
        self.applications.append(code)

    def withdraw(self, code: str) -> None:
        """Drop the application to a room, if there is one."""
        if code in self.applications:
            self.applications.remove(code)

    def clear_applications(self) -> None:
        self.applications.clear()


@dataclass(eq=False)
class Manager:
    """A residence manager and the number of rooms rented out."""

    login: str
    name: str
    university: str
    rentals: int = 0

    def record_rental(self) -> None:
        self.rentals += 1

    def cancel_rental(self) -> None:
        self.rentals -= 1