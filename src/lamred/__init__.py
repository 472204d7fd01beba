"""Step-by-step beta reduction for the untyped lambda calculus."""

from .ast import App, Lam, Term, Var
from .errors import ReductionError
from .names import free_vars, is_free
from .pretty import pretty
from .reduce import (
    apply_path,
    call_by_name,
    iterate,
    normal_order,
    reduce_to_normal_form,
    step,
)
from .subst import alpha_rename, substitute
from .surface import ParseError, parse

__all__ = [
    "App",
    "Lam",
    "Term",
    "Var",
    "ReductionError",
    "free_vars",
    "is_free",
    "pretty",
    "apply_path",
    "call_by_name",
    "normal_order",
    "iterate",
    "reduce_to_normal_form",
    "step",
    "alpha_rename",
    "substitute",
    "ParseError",
    "parse",
]
