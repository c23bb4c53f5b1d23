"""Ranking of the three managers with the most rooms rented out."""

from __future__ import annotations

from collections.abc import Iterator

from .people import Manager

TOP_SIZE = 3


class TopManagers:
    """The top three managers, kept by the system's own promotion rules.

    Each call to :meth:`update` looks at one manager that was just
    registered or whose rental count just grew. It moves that manager up
    or brings it in, comparing rental counts first and logins on ties.
    """

    def __init__(self) -> None:
        self._top: list[Manager] = []

    def __len__(self) -> int:
        return len(self._top)

    def __iter__(self) -> Iterator[Manager]:
        return iter(list(self._top))

    def _holds(self, manager: Manager) -> bool:
        return any(entry is manager for entry in self._top)

    def logins(self) -> list[str]:
        """Return the logins in ranking order, best first."""
        return [manager.login for manager in self._top]

    def update(self, manager: Manager) -> None:
        """Place a manager whose rental count may have changed."""
        size = len(self._top)
        if size == 0:
            self._top.append(manager)
        elif size == 1:
            self._update_one(manager)
        elif size == 2:
            self._update_two(manager)
        else:
            self._update_three(manager)

    def _update_one(self, g: Manager) -> None:
        first = self._top[0]
        if g is first:
            return
        if g.rentals > first.rentals:
            self._top = [g, first]
        elif g.rentals == first.rentals:
            self._top = [first, g] if first.login < g.login else [g, first]
        else:
            self._top = [first, g]

    def _update_two(self, g: Manager) -> None:
        first, second = self._top
        if not self._holds(g):
            if g.rentals > second.rentals:
                self._top = [first, g, second]
            elif g.rentals == second.rentals:
                if second.login < g.login:
                    self._top.append(g)
                else:
                    self._top = [first, g, second]
                    if g.rentals > first.rentals or (
                        g.rentals == first.rentals and g.login < first.login
                    ):
                        self._top = [g, first, second]
            else:
                self._top.append(g)
        elif g is second:
            if g.rentals > first.rentals:
                self._top = [g, first]
            elif g.rentals == first.rentals and not first.login > g.login:
                self._top = [g, first]

    def _update_three(self, g: Manager) -> None:
        top = self._top
        if not self._holds(g):
            third = top[2]
            if g.rentals > third.rentals:
                top[2] = g
            elif g.rentals == third.rentals and g.login < third.login:
                top[2] = g
                if g.rentals == top[1].rentals and g.login < top[1].login:
                    top[2], top[1] = top[1], g
                    if g.rentals == top[0].rentals and g.login > top[0].login:
                        top[1], top[0] = top[0], g
        elif g is top[2]:
            second = top[1]
            if g.rentals > second.rentals:
                top[2], top[1] = second, g
            elif g.rentals == second.rentals and not second.login < g.login:
                top[2], top[1] = second, g
                if g.rentals > top[0].rentals or (
                    g.rentals == top[0].rentals and g.login < top[0].login
                ):
                    top[1], top[0] = top[0], g
        elif g is top[1]:
            first = top[0]
            if g.rentals > first.rentals:
                top[1], top[0] = first, g
            elif g.rentals == first.rentals and not first.login < g.login:
                top[1], top[0] = first, g