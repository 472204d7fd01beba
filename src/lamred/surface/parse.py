"""Parser for the textual lambda syntax.

Grammar::

    term    : LAMBDA binders DOT term
            | app
            | app LAMBDA binders DOT term
    binders : binders IDENT | IDENT
    app     : app atom | atom
    atom    : IDENT | LPAREN term RPAREN

``\\`` and ``λ`` are interchangeable binder glyphs.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from lamred.ast import App, Term, Var, lams
from lamred.surface.errors import TOKEN_NAMES, ParseError, Span

_SOURCE: str = ""

tokens = (
    "IDENT",
    "LAMBDA",
    "DOT",
    "LPAREN",
    "RPAREN",
)

t_LAMBDA = r"\\|λ"
t_DOT = r"\."
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_]*'*"
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise ParseError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def p_term_lambda(p: yacc.YaccProduction) -> None:
    "term : LAMBDA binders DOT term"
    p[0] = lams(p[2], p[4])


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = p[1]


def p_term_app_lambda(p: yacc.YaccProduction) -> None:
    "term : app LAMBDA binders DOT term"
    p[0] = App(p[1], lams(p[3], p[5]))


def p_binders_multi(p: yacc.YaccProduction) -> None:
    "binders : binders IDENT"
    p[0] = p[1] + [p[2]]


def p_binders_single(p: yacc.YaccProduction) -> None:
    "binders : IDENT"
    p[0] = [p[1]]


def p_app_chain(p: yacc.YaccProduction) -> None:
    "app : app atom"
    p[0] = App(p[1], p[2])


def p_app_atom(p: yacc.YaccProduction) -> None:
    "app : atom"
    p[0] = p[1]


def p_atom_ident(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = Var(p[1])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN term RPAREN"
    p[0] = p[2]


def _expected() -> tuple[str, ...]:
    """Token kinds the parser could have shifted or reduced on instead."""

    state = _PARSER.statestack[-1]
    return tuple(kind for kind in TOKEN_NAMES if kind in _PARSER.action[state])


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise ParseError("Unexpected end of input", span, _SOURCE, _expected())
    tok = cast(lex.LexToken, p)
    span = Span(tok.lexpos, tok.lexpos + len(str(tok.value)))
    message = f"Unexpected {TOKEN_NAMES[tok.type]}"
    raise ParseError(message, span, _SOURCE, _expected())


_PARSER = None


def parse(source: str) -> Term:
    """Parse ``source`` into a term, raising ``ParseError`` on bad input."""

    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="term", debug=False, write_tables=False)
    term = cast(Term, _PARSER.parse(source, lexer=lexer))
    if term is None:
        span = Span(len(source), len(source))
        raise ParseError("Unexpected end of input", span, source)
    return term


__all__ = ["parse"]
