import pytest

from unibedrooms.messages import FREE, OCCUPIED, ApplicationExists
from unibedrooms.people import Student
from unibedrooms.rooms import Locality, Room


def make_room(code="Q1", locality="Lisboa"):
    return Room(code, "ger1", "Residencia A", "NOVA", locality, 2, "Quarto amplo")


def make_student(login):
    return Student(login, "Nome " + login, "NOVA", "Almada", 20)


def test_new_room_is_free():
    room = make_room()
    assert room.state == FREE
    assert room.state == "livre"
    assert not room.occupied
    assert room.application_count == 0


def test_room_keeps_its_data():
    room = make_room("Q7", "Porto")
    assert (room.code, room.manager_login, room.locality, room.floor) == (
        "Q7",
        "ger1",
        "Porto",
        2,
    )


def test_occupied_state():
    room = make_room()
    room.state = OCCUPIED
    assert room.occupied
    assert room.state == "ocupado"


def test_add_applicant_keeps_order():
    room = make_room()
    a, b, c = make_student("a"), make_student("b"), make_student("c")
    for student in (b, a, c):
        room.add_applicant(student)
    assert [s.login for s in room.applicants] == ["b", "a", "c"]
    assert room.application_count == 3


def test_duplicate_applicant_raises():
    room = make_room()
    room.add_applicant(make_student("a"))
    with pytest.raises(ApplicationExists):
        room.add_applicant(make_student("a"))
    assert room.application_count == 1


def test_has_applicant():
    room = make_room()
    room.add_applicant(make_student("a"))
    room.add_applicant(make_student("b"))
    assert room.has_applicant("a")
    assert room.has_applicant("b")
    assert not room.has_applicant("z")


def test_remove_applicant():
    room = make_room()
    for login in ("a", "b", "c"):
        room.add_applicant(make_student(login))
    room.remove_applicant("b")
    assert [s.login for s in room.applicants] == ["a", "c"]
    room.remove_applicant("missing")
    assert room.application_count == 2


def test_clear_applicants():
    room = make_room()
    room.add_applicant(make_student("a"))
    room.clear_applicants()
    assert room.applicants == []


def test_withdraw_from_applicants_removes_code_from_students():
    room = make_room("Q1")
    a, b = make_student("a"), make_student("b")
    for student in (a, b):
        student.apply("Q1")
        student.apply("Q2")
        room.add_applicant(student)
    room.withdraw_from_applicants()
    assert a.applications == ["Q2"]
    assert b.applications == ["Q2"]
    assert room.application_count == 2


def test_locality_sorted_rooms():
    loc = Locality("Lisboa")
    for code in ("Q3", "Q1", "Q2"):
        loc.add_room(make_room(code))
    assert [r.code for r in loc.sorted_rooms()] == ["Q1", "Q2", "Q3"]
    assert loc.room_count == 3


def test_locality_add_existing_code_keeps_first():
    loc = Locality("Lisboa")
    first = make_room("Q1")
    loc.add_room(first)
    loc.add_room(make_room("Q1"))
    assert loc.room_count == 1
    assert list(loc.sorted_rooms()) == [first]


def test_locality_remove_room():
    loc = Locality("Lisboa")
    q1, q2 = make_room("Q1"), make_room("Q2")
    loc.add_room(q1)
    loc.add_room(q2)
    loc.remove_room(q1)
    assert list(loc.sorted_rooms()) == [q2]
    loc.remove_room(q1)
    assert loc.room_count == 1


def test_empty_locality():
    loc = Locality("Faro")
    assert loc.name == "Faro"
    assert list(loc.sorted_rooms()) == []


def test_sorted_rooms_is_ordered_invariant():
    loc = Locality("Lisboa")
    codes = ["b2", "A1", "a1", "B10", "b1"]
    for code in codes:
        loc.add_room(make_room(code))
    result = [r.code for r in loc.sorted_rooms()]
    assert result == sorted(codes)
    assert all(x <= y for x, y in zip(result, result[1:]))