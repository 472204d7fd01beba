"""Reduction engine split into paths, strategies, rewriting and drivers."""

from .drivers import iterate, reduce_to_normal_form, step
from .path import (
    BETA,
    IRREDUCIBLE,
    Beta,
    InArg,
    InBody,
    InFunc,
    Irreducible,
    Path,
    depth,
    render,
)
from .rewrite import apply_path
from .strategy import (
    STRATEGIES,
    Strategy,
    UnknownStrategyError,
    call_by_name,
    get_strategy,
    normal_order,
)

__all__ = [
    "BETA",
    "IRREDUCIBLE",
    "Beta",
    "InArg",
    "InBody",
    "InFunc",
    "Irreducible",
    "Path",
    "depth",
    "render",
    "apply_path",
    "Strategy",
    "STRATEGIES",
    "UnknownStrategyError",
    "call_by_name",
    "normal_order",
    "get_strategy",
    "step",
    "reduce_to_normal_form",
    "iterate",
]
