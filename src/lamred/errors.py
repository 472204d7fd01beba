"""Invariant violations raised by the reduction engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lamred.pretty import pretty

if TYPE_CHECKING:
    from lamred.ast import Term
    from lamred.reduce.path import Path


@dataclass
class ReductionError(Exception):
    """A path or term was used against a node of the wrong shape.

    Strategies only produce paths that fit the term they searched, so this
    signals a hand-built or mismatched path, never a property of the term.
    """

    message: str
    path: Path | None = None
    term: Term | None = None

    def __str__(self) -> str:
        if self.term is None:
            return self.message
        if self.path is None:
            return f"{self.message}: {pretty(self.term)}"
        return f"{self.message}: {self.path} on {pretty(self.term)}"


__all__ = ["ReductionError"]
