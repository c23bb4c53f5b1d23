# unibedrooms

A small system for managing university residence rooms. Students and
managers register, managers publish rooms, students apply to rooms, and
managers accept applications. Rooms can be listed by locality, and the
managers who have rented out the most rooms are ranked.

## Installing

```
pip install .
```

## Running the interpreter

```
unibedrooms
```

The program prints a `> ` prompt and reads one command per line from
standard input until `XS` (or the end of input). A line whose first word
starts with `#` is treated as a comment. Any other unknown command prints
`Comando invalido.`

| Command | Meaning |
|---------|---------|
| `IE login name` + `age locality` + `university` | register a student |
| `DE login` | show a student |
| `IG login name` + `university` | register a manager |
| `DG login` | show a manager |
| `IQ code manager` + residence, university, locality, floor, description (one per line) | register a room |
| `DQ code` | show a room |
| `MQ code manager state` | set a room's state, e.g. `livre` or `ocupado` |
| `RQ code manager` | remove a room that has no pending applications |
| `IC login code` | a student applies to a free room (at most 10 applications) |
| `AC code manager login` | accept an application |
| `LC code manager` | list the applicants to a room, in order of application |
| `LQ` | list all rooms by locality and code |
| `LL locality` | list the free rooms in a locality |
| `LT` | show the ranked managers (up to three) by rentals |
| `XS` | quit |

Example session input:

```
IG ana Ana Silva
Uni Lisboa
IQ Q1 ana
Residencia Norte
Uni Lisboa
Lisboa
2
Quarto com varanda
IE joao Joao Costa
20 Porto
Uni Lisboa
IC joao Q1
AC Q1 ana joao
LT
XS
```

Accepting an application marks the room `ocupado`, withdraws the student's
other applications and the other students' applications to that room, and
counts one more rental for the room's manager.

## Using it from Python

```python
from unibedrooms.system import UniBedrooms
from unibedrooms.messages import RoomsError

system = UniBedrooms()
system.add_manager("ana", "Ana Silva", "Uni Lisboa")
system.add_room("Q1", "ana", "Residencia Norte", "Uni Lisboa", "Lisboa", 2, "Quarto com varanda")
system.add_student("joao", "Joao Costa", "Uni Lisboa", "Porto", 20)
system.apply("joao", "Q1")
system.accept("Q1", "ana", "joao")

for manager in system.top_managers():
    print(manager.login, manager.rentals)

try:
    system.apply("joao", "Q1")
except RoomsError as error:
    print(error)   # Quarto ocupado.
```

`UniBedrooms` offers `add_student`, `student`, `add_manager`, `manager`,
`add_room`, `room`, `set_room_state`, `remove_room`, `apply`, `accept`,
`applicants`, `rooms`, `free_rooms` and `top_managers`. Every refused
operation raises a subclass of `RoomsError` (defined in
`unibedrooms.messages`) whose message is the text the interpreter prints.
The interpreter itself can be driven from any text stream with
`unibedrooms.cli.run(stream, out)`, which returns the `UniBedrooms` it
filled.

## What it does not do

All data lives in memory for the length of one run. Nothing is saved to
or loaded from disk, and there are no commands to remove students or
managers.

## Testing

```
pip install .[test]
pytest
```