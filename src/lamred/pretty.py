"""Pretty-printing for lambda terms."""

from __future__ import annotations

from .ast import App, Lam, Term, Var

ATOM_PREC = 2
APP_PREC = 1
LAM_PREC = 0


def _prec(term: Term) -> int:
    match term:
        case Var():
            return ATOM_PREC
        case App():
            return APP_PREC
        case Lam():
            return LAM_PREC
    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


def pretty(term: Term) -> str:
    """Return ``term`` with the fewest parentheses that still re-parse.

    A child is parenthesized when it binds more loosely than its position
    requires: a function needs at least an application, an argument an atom.
    """

    out: list[str] = []
    todo: list[str | tuple[Term, int]] = [(term, LAM_PREC)]
    while todo:
        item = todo.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        t, parent_prec = item
        paren = _prec(t) < parent_prec
        if paren:
            todo.append(")")
        match t:
            case Var(name):
                todo.append(name)
            case App(f, a):
                todo.extend(((a, ATOM_PREC), " ", (f, APP_PREC)))
            case Lam(param, body):
                params = [param]
                while isinstance(body, Lam):
                    params.append(body.param)
                    body = body.body
                todo.extend(((body, LAM_PREC), f"\\{' '.join(params)}. "))
        if paren:
            todo.append("(")
    return "".join(out)


__all__ = ["pretty"]
