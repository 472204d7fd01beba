"""Abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Var:
    """Variable occurrence, free or bound, identified by ``name``."""

    name: str


@dataclass(frozen=True)
class App:
    """Function application.

    Args:
        func: Term in function position.
        arg: Argument term supplied to ``func``.
    """

    func: Term
    arg: Term


@dataclass(frozen=True)
class Lam:
    """Single-parameter abstraction.

    Args:
        param: Name bound by this abstraction.
        body: Term in which ``param`` is in scope.
    """

    param: str
    body: Term


type Term = Var | App | Lam


def lams(params: list[str], body: Term) -> Term:
    """Wrap ``body`` in one abstraction per name, outermost first."""

    for param in reversed(params):
        body = Lam(param, body)
    return body


__all__ = ["Term", "Var", "App", "Lam", "lams"]
