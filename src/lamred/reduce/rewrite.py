"""Apply a reduction path to the term it was computed from."""

from __future__ import annotations

from ..ast import App, Lam, Term
from ..errors import ReductionError
from ..subst import substitute
from .path import Beta, InArg, InBody, InFunc, Irreducible, Path


def apply_path(term: Term, path: Path) -> Term:
    """Rebuild ``term`` with the redex located by ``path`` contracted.

    ``Irreducible`` is the identity on every term. Any other path must match
    the shape of ``term`` node for node, otherwise ``ReductionError``.
    """

    spine: list[tuple[Term, Path]] = []
    while True:
        match term, path:
            case App(Lam(param, body), arg), Beta():
                result = substitute(body, param, arg)
                break
            case App(), Beta():
                raise ReductionError("bad beta reduction", path=path, term=term)
            case App(f, _), InFunc(inner):
                spine.append((term, path))
                term, path = f, inner
            case App(_, a), InArg(inner):
                spine.append((term, path))
                term, path = a, inner
            case Lam(_, body), InBody(inner):
                spine.append((term, path))
                term, path = body, inner
            case _, Irreducible():
                result = term
                break
            case _:
                raise ReductionError("bad reduction", path=path, term=term)

    for node, taken in reversed(spine):
        match node, taken:
            case App(_, a), InFunc():
                result = App(result, a)
            case App(f, _), InArg():
                result = App(f, result)
            case Lam(param, _), InBody():
                result = Lam(param, result)
    return result


__all__ = ["apply_path"]
