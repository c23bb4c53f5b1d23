from unibedrooms.people import Manager
from unibedrooms.ranking import TopManagers


def _manager(login, rentals=0):
    return Manager(login, "Nome " + login, "FCT", rentals)


def _ranking(*managers):
    top = TopManagers()
    for manager in managers:
        top.update(manager)
    return top


def test_empty_ranking_has_no_logins():
    top = TopManagers()
    assert top.logins() == []
    assert len(top) == 0


def test_single_manager_is_first():
    top = _ranking(_manager("ana"))
    assert top.logins() == ["ana"]


def test_ties_are_ordered_by_login():
    top = _ranking(_manager("b"), _manager("a"), _manager("c"))
    assert top.logins() == ["a", "b", "c"]


def test_ranking_never_exceeds_three():
    top = _ranking(*(_manager(login) for login in ["e", "d", "c", "b", "a", "f"]))
    assert len(top) == 3
    assert len(set(top.logins())) == 3


def test_fourth_manager_with_larger_login_stays_out():
    top = _ranking(_manager("a"), _manager("b"), _manager("c"), _manager("d"))
    assert top.logins() == ["a", "b", "c"]


def test_rental_promotes_manager_step_by_step():
    a, b, c = _manager("a"), _manager("b"), _manager("c")
    top = _ranking(a, b, c)
    c.record_rental()
    top.update(c)
    assert top.logins() == ["a", "c", "b"]
    c.record_rental()
    top.update(c)
    assert top.logins() == ["c", "a", "b"]


def test_outsider_with_more_rentals_takes_third_place():
    top = _ranking(_manager("a"), _manager("b"), _manager("c"))
    top.update(_manager("d", rentals=5))
    assert top.logins() == ["a", "b", "d"]


def test_second_manager_with_fewer_rentals_goes_second():
    top = _ranking(_manager("z", rentals=1), _manager("a"))
    assert top.logins() == ["z", "a"]


def test_second_manager_with_more_rentals_goes_first():
    top = _ranking(_manager("a"), _manager("z", rentals=2))
    assert top.logins() == ["z", "a"]


def test_updating_leader_keeps_order():
    a, b = _manager("a"), _manager("b")
    top = _ranking(a, b)
    a.record_rental()
    top.update(a)
    assert top.logins() == ["a", "b"]


def test_repeated_update_of_same_manager_does_not_duplicate():
    a = _manager("a")
    top = _ranking(a, a, a)
    assert top.logins() == ["a"]


def test_iteration_yields_managers_in_order():
    a, b = _manager("a"), _manager("b")
    top = _ranking(b, a)
    assert [manager is expected for manager, expected in zip(top, [a, b])] == [True, True]