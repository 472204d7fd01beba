"""Capture-avoiding substitution and alpha-renaming on named terms."""

from __future__ import annotations

from dataclasses import dataclass

from .ast import App, Lam, Term, Var
from .errors import ReductionError
from .names import fresh_name, is_free


@dataclass(frozen=True)
class _BuildApp:
    """Pop argument then function from the result stack, push ``App``."""


@dataclass(frozen=True)
class _BuildLam:
    param: str


_BUILD_APP = _BuildApp()


def substitute(term: Term, name: str, replacement: Term) -> Term:
    """Return ``term[name := replacement]``.

    A binder whose parameter occurs free in ``replacement`` is renamed first
    so that no free variable of ``replacement`` ends up captured.
    """

    done: list[Term] = []
    todo: list[Term | _BuildApp | _BuildLam] = [term]
    while todo:
        item = todo.pop()
        match item:
            case Var(n):
                done.append(replacement if n == name else item)
            case App(f, a):
                todo.extend((_BUILD_APP, a, f))
            case Lam(param, body):
                if param == name:
                    done.append(item)
                elif is_free(param, replacement):
                    todo.append(alpha_rename(item, fresh_name(param)))
                else:
                    todo.extend((_BuildLam(param), body))
            case _BuildApp():
                a = done.pop()
                done.append(App(done.pop(), a))
            case _BuildLam(param):
                done.append(Lam(param, done.pop()))
            case _:
                raise TypeError(f"Unexpected term in substitute: {item!r}")
    return done.pop()


def alpha_rename(term: Term, new_name: str) -> Term:
    """Rename the parameter of abstraction ``term`` to ``new_name``."""

    match term:
        case Lam(param, body):
            return Lam(new_name, substitute(body, param, Var(new_name)))
    raise ReductionError("not a lambda expression", term=term)


__all__ = ["substitute", "alpha_rename"]
