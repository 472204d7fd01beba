"""Free-variable queries and fresh-name generation."""

from __future__ import annotations

from .ast import App, Lam, Term, Var

PRIME = "'"


def is_free(name: str, term: Term) -> bool:
    """Return ``True`` if ``name`` occurs unbound somewhere in ``term``."""

    stack = [term]
    while stack:
        match stack.pop():
            case Var(n):
                if n == name:
                    return True
            case App(f, a):
                stack.append(a)
                stack.append(f)
            case Lam(param, body):
                # The binder shadows every occurrence of its own name.
                if param != name:
                    stack.append(body)
            case other:
                raise TypeError(f"Unexpected term in is_free: {other!r}")
    return False


def free_vars(term: Term) -> frozenset[str]:
    """Return the set of names occurring free in ``term``."""

    found: set[str] = set()
    stack: list[tuple[Term, frozenset[str]]] = [(term, frozenset())]
    while stack:
        t, bound = stack.pop()
        match t:
            case Var(n):
                if n not in bound:
                    found.add(n)
            case App(f, a):
                stack.append((a, bound))
                stack.append((f, bound))
            case Lam(param, body):
                stack.append((body, bound | {param}))
            case _:
                raise TypeError(f"Unexpected term in free_vars: {t!r}")
    return frozenset(found)


def fresh_name(name: str) -> str:
    """Return ``name`` with one prime appended.

    Only distinct from ``name`` itself; callers needing a name unused in a
    wider scope must check for themselves.
    """

    return name + PRIME


__all__ = ["PRIME", "is_free", "free_vars", "fresh_name"]
