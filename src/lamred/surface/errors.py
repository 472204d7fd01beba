"""Source spans and the parse error type."""

from __future__ import annotations

from dataclasses import dataclass

# Human-readable names for the lexer's token kinds.
TOKEN_NAMES = {
    "IDENT": "name",
    "LAMBDA": "binder",
    "DOT": "'.'",
    "LPAREN": "'('",
    "RPAREN": "')'",
    "$end": "end of input",
}


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass
class ParseError(Exception):
    """Malformed lambda source.

    ``expected`` holds the token kinds the grammar would have accepted at
    ``span``; it is empty for lexical errors.
    """

    message: str
    span: Span
    source: str | None = None
    expected: tuple[str, ...] = ()

    def __str__(self) -> str:
        where = f"{self.span.start}:{self.span.end}"
        text = f"{self.message} @ {where}"
        if self.source is not None and self.span.end > self.span.start:
            text += f": {self.span.extract(self.source)!r}"
        if self.expected:
            names = [TOKEN_NAMES.get(kind, kind) for kind in self.expected]
            if len(names) == 1:
                text += f" (expected {names[0]})"
            else:
                text += f" (expected {', '.join(names[:-1])} or {names[-1]})"
        return text


__all__ = ["TOKEN_NAMES", "Span", "ParseError"]
