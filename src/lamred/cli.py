"""Command line entry point: reduce an expression and print the result."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Sequence, TextIO

from .pretty import pretty
from .reduce import STRATEGIES, get_strategy, iterate, reduce_to_normal_form
from .surface import ParseError, parse

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="lamred", description="Lambda calculus reducer")
    parser.add_argument("expr", help="Expression to reduce.")
    parser.add_argument(
        "--strategy",
        "-s",
        choices=sorted(STRATEGIES),
        default="normal",
        help="Evaluation order (default: normal).",
    )
    parser.add_argument(
        "--trace",
        "-t",
        action="store_true",
        help="Print the input, then each step as the path taken and the new term.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold for diagnostics on stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    out = sys.stdout if out is None else out
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        term = parse(args.expr)
    except ParseError as exc:
        print(f"lamred: {exc}", file=sys.stderr)
        return 1

    strategy = get_strategy(args.strategy)
    logger.info("reducing %s with %s", pretty(term), strategy.__name__)
    if args.trace:
        print(pretty(term), file=out)
        for path, term in iterate(strategy, term):
            print(f"{path}  {pretty(term)}", file=out)
    else:
        term = reduce_to_normal_form(strategy, term)
        print(pretty(term), file=out)
    return 0


__all__ = ["build_parser", "main"]
