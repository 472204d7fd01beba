"""Drivers that repeatedly search and rewrite a term under a strategy."""

from __future__ import annotations

import logging
from typing import Iterator

from ..ast import Term
from ..pretty import pretty
from .path import IRREDUCIBLE, Path
from .rewrite import apply_path
from .strategy import Strategy

logger = logging.getLogger(__name__)


def step(strategy: Strategy, term: Term) -> tuple[Path, Term]:
    """One reduction step.

    Returns the path taken and the rewritten term. An ``Irreducible`` path
    means ``term`` is already in normal form for ``strategy`` and is returned
    unchanged.
    """

    path = strategy(term)
    new_term = apply_path(term, path)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s  %s", path, pretty(new_term))
    return path, new_term


def reduce_to_normal_form(strategy: Strategy, term: Term) -> Term:
    """Step until no redex remains. Does not return if ``term`` diverges."""

    count = 0
    while True:
        path, term = step(strategy, term)
        if path == IRREDUCIBLE:
            logger.info("normal form reached after %d steps", count)
            return term
        count += 1


def iterate(strategy: Strategy, term: Term) -> Iterator[tuple[Path, Term]]:
    """Lazily yield ``(path, term)`` for every step actually applied.

    The sequence ends at the first irreducible path. It is single-pass:
    to replay from the start, call ``iterate`` again.
    """

    while True:
        path, term = step(strategy, term)
        if path == IRREDUCIBLE:
            return
        yield path, term


__all__ = ["step", "reduce_to_normal_form", "iterate"]
