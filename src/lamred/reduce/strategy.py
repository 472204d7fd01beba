"""Evaluation strategies: pure searches from a term to its next redex."""

from __future__ import annotations

from typing import Callable

from ..ast import App, Lam, Term, Var
from .path import BETA, IRREDUCIBLE, InArg, InBody, InFunc, Path

type Strategy = Callable[[Term], Path]

# Linked list of descend constructors, innermost first.
type _Route = tuple[Callable[[Path], Path], _Route] | None


def _wrap_route(path: Path, route: _Route) -> Path:
    while route is not None:
        make, route = route
        path = make(path)
    return path


def _search(term: Term, under_binders: bool) -> Path:
    """Leftmost-outermost search, function position before argument.

    The first redex met in pre-order is the answer, so nodes that hold no
    redex never get a wrapper and a fruitless search is ``IRREDUCIBLE``.
    """

    stack: list[tuple[Term, _Route]] = [(term, None)]
    while stack:
        t, route = stack.pop()
        match t:
            case App(Lam(), _):
                return _wrap_route(BETA, route)
            case App(f, a):
                stack.append((a, (InArg, route)))
                stack.append((f, (InFunc, route)))
            case Lam(_, body):
                if under_binders:
                    stack.append((body, (InBody, route)))
            case Var():
                pass
            case _:
                raise TypeError(f"Unexpected term in strategy search: {t!r}")
    return IRREDUCIBLE


def call_by_name(term: Term) -> Path:
    """Leftmost-outermost redex, never looking inside an abstraction."""

    return _search(term, under_binders=False)


def normal_order(term: Term) -> Path:
    """Leftmost-outermost redex, including those under binders."""

    return _search(term, under_binders=True)


class UnknownStrategyError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        choices = ", ".join(sorted(STRATEGIES))
        return f"Unknown strategy {self.name!r} (expected one of: {choices})"


STRATEGIES: dict[str, Strategy] = {
    "name": call_by_name,
    "call-by-name": call_by_name,
    "normal": normal_order,
    "normal-order": normal_order,
}


def get_strategy(name: str) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None


__all__ = [
    "Strategy",
    "call_by_name",
    "normal_order",
    "STRATEGIES",
    "UnknownStrategyError",
    "get_strategy",
]
