"""Line-oriented command interpreter for the room-rental system."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .messages import (
    APPLICATION_ACCEPTED,
    APPLICATION_REGISTERED,
    EXIT,
    MANAGER_REGISTERED,
    ROOM_REGISTERED,
    ROOM_REMOVED,
    ROOM_UPDATED,
    STUDENT_REGISTERED,
    InvalidCommand,
    RoomsError,
)
from .system import UniBedrooms

PROMPT = "> "
EXIT_COMMAND = "XS"
STATE_LENGTH = 9

_HEAD_AND_REST = re.compile(r"\s*\S+\s+(\S+)\s+(\S[^\n]*)")
_REST = re.compile(r"\s*\S+\s+(\S[^\n]*)")
_INT_AND_REST = re.compile(r"\s*([+-]?\d+)\s*(\S[^\n]*)?")
_INT = re.compile(r"\s*([+-]?\d+)")


def _arguments(line: str, count: int) -> list[str]:
    """Return the first ``count`` words after the command word."""
    words = line.split()[1:]
    if len(words) < count:
        raise InvalidCommand()
    return words[:count]


def _text(line: str) -> str:
    """Return a whole line without its line ending."""
    return line.split("\n", 1)[0]


def _integer(line: str) -> int:
    match = _INT.match(line)
    return int(match.group(1)) if match else 0


def _integer_and_rest(line: str) -> tuple[int, str]:
    match = _INT_AND_REST.match(line)
    if not match:
        return 0, ""
    return int(match.group(1)), match.group(2) or ""


class _Interpreter:
    """Reads commands from a stream and writes the answers to another."""

    def __init__(self, stream: TextIO, out: TextIO, system: UniBedrooms) -> None:
        self._stream = stream
        self._out = out
        self.system = system
        self._commands: dict[str, Callable[[str], None]] = {
            "IE": self._insert_student,
            "DE": self._show_student,
            "IG": self._insert_manager,
            "DG": self._show_manager,
            "IQ": self._insert_room,
            "DQ": self._show_room,
            "MQ": self._change_room_state,
            "RQ": self._remove_room,
            "IC": self._apply,
            "AC": self._accept,
            "LC": self._list_applicants,
            "LQ": self._list_rooms,
            "LL": self._list_free_rooms,
            "LT": self._list_top_managers,
        }

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _read(self) -> str:
        return self._stream.readline()

    def loop(self) -> None:
        command = ""
        while True:
            self._out.write(PROMPT)
            line = self._read()
            if not line:
                return
            words = line.split()
            if words:
                command = words[0]
            if command.startswith("#"):
                self._out.write("\n\n")
            handler = self._commands.get(command)
            if handler is not None:
                try:
                    handler(line)
                except RoomsError as error:
                    self._say(str(error))
                self._out.write("\n")
            elif command == EXIT_COMMAND:
                break
            elif not command.startswith("#"):
                self._say(InvalidCommand.message)
                self._out.write("\n")
        self._say(EXIT)
        self._out.write("\n")

    # Users

    def _insert_student(self, line: str) -> None:
        match = _HEAD_AND_REST.match(line)
        if not match:
            raise InvalidCommand()
        login, name = match.groups()
        age, locality = _integer_and_rest(self._read())
        university = _text(self._read())
        self.system.add_student(login, name, university, locality, age)
        self._say(STUDENT_REGISTERED)

    def _show_student(self, line: str) -> None:
        (login,) = _arguments(line, 1)
        student = self.system.student(login)
        self._say(
            f"{student.login}, {student.name}, {student.age} anos, {student.locality}"
        )
        self._say(student.university)

    def _insert_manager(self, line: str) -> None:
        match = _HEAD_AND_REST.match(line)
        if not match:
            raise InvalidCommand()
        login, name = match.groups()
        university = _text(self._read())
        self.system.add_manager(login, name, university)
        self._say(MANAGER_REGISTERED)

    def _show_manager(self, line: str) -> None:
        (login,) = _arguments(line, 1)
        manager = self.system.manager(login)
        self._say(f"{manager.login}, {manager.name}")
        self._say(manager.university)

    # Rooms

    def _insert_room(self, line: str) -> None:
        code, manager_login = _arguments(line, 2)
        residence = _text(self._read())
        university = _text(self._read())
        locality = _text(self._read())
        floor = _integer(self._read())
        description = _text(self._read())
        self.system.add_room(
            code, manager_login, residence, university, locality, floor, description
        )
        self._say(ROOM_REGISTERED)

    def _show_room(self, line: str) -> None:
        (code,) = _arguments(line, 1)
        room = self.system.room(code)
        self._say(f"{code}, {room.residence}")
        self._say(room.university)
        self._say(room.locality)
        self._say(str(room.floor))
        self._say(room.description)
        self._say(room.state)

    def _change_room_state(self, line: str) -> None:
        code, manager_login, state = _arguments(line, 3)
        self.system.set_room_state(code, manager_login, state[:STATE_LENGTH])
        self._say(ROOM_UPDATED)

    def _remove_room(self, line: str) -> None:
        code, manager_login = _arguments(line, 2)
        self.system.remove_room(code, manager_login)
        self._say(ROOM_REMOVED)

    # Applications

    def _apply(self, line: str) -> None:
        login, code = _arguments(line, 2)
        self.system.apply(login, code)
        self._say(APPLICATION_REGISTERED)

    def _accept(self, line: str) -> None:
        code, manager_login, login = _arguments(line, 3)
        self.system.accept(code, manager_login, login)
        self._say(APPLICATION_ACCEPTED)

    def _list_applicants(self, line: str) -> None:
        code, manager_login = _arguments(line, 2)
        for student in self.system.applicants(code, manager_login):
            self._say(f"{student.login}, {student.name}, {student.university}")

    # Listings

    def _list_rooms(self, line: str) -> None:
        for room in self.system.rooms():
            self._say(f"{room.locality} {room.code}")
            self._say(room.university)
            self._say(room.residence + "\n")

    def _list_free_rooms(self, line: str) -> None:
        match = _REST.match(line)
        if not match:
            raise InvalidCommand()
        locality = match.group(1)
        for room in self.system.free_rooms(locality):
            self._say(f"{locality} {room.code}")
            self._say(room.university)
            self._say(room.residence + "\n")

    def _list_top_managers(self, line: str) -> None:
        for manager in self.system.top_managers():
            self._say(f"{manager.login} alugou {manager.rentals} quartos")


def run(stream: TextIO, out: TextIO) -> UniBedrooms:
    """Run the interpreter over a stream of commands and return the system."""
    system = UniBedrooms()
    _Interpreter(stream, out, system).loop()
    return system


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until the exit command."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())