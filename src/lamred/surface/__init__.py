"""Textual syntax: parsing source into terms."""

from .errors import ParseError, Span
from .parse import parse

__all__ = ["ParseError", "Span", "parse"]
