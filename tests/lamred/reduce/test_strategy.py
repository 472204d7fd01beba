import pytest

from lamred.ast import App, Lam, Term, Var, lams
from lamred.reduce.path import BETA, IRREDUCIBLE, InArg, InBody, InFunc, Path, depth
from lamred.reduce.strategy import (
    UnknownStrategyError,
    call_by_name,
    get_strategy,
    normal_order,
)
from lamred.surface import parse


def _mentions_body(path: Path) -> bool:
    match path:
        case InBody():
            return True
        case InFunc(inner) | InArg(inner):
            return _mentions_body(inner)
    return False


def test_irreducible_by_name() -> None:
    assert call_by_name(parse("x")) == IRREDUCIBLE
    assert call_by_name(parse("a b")) == IRREDUCIBLE
    assert call_by_name(parse(r"\x.x")) == IRREDUCIBLE
    assert call_by_name(parse(r"\x. (\y.y) z")) == IRREDUCIBLE


def test_beta_by_name() -> None:
    assert call_by_name(parse(r"(\x. x) y")) == BETA
    assert call_by_name(parse(r"(\x. x) y z")) == InFunc(BETA)
    assert call_by_name(parse(r"z ((\x. x) y)")) == InArg(BETA)


def test_order_by_name() -> None:
    assert call_by_name(parse(r"(\a. a) b ((\x. x) y)")) == InFunc(BETA)
    assert call_by_name(parse(r"(\x. (\a. a) x) z w")) == InFunc(BETA)


def test_by_name_never_enters_a_body() -> None:
    sources = [
        r"\x. (\y. y) x",
        r"a (\x. (\y. y) x)",
        r"f (\x. (\y. y) x) ((\z. z) w)",
        r"(\x. x) (\y. (\z. z) y)",
    ]
    for src in sources:
        assert not _mentions_body(call_by_name(parse(src)))


def test_irreducible_norm() -> None:
    assert normal_order(parse("x")) == IRREDUCIBLE
    assert normal_order(parse("a b")) == IRREDUCIBLE
    assert normal_order(parse(r"\x.x")) == IRREDUCIBLE
    assert normal_order(parse(r"\x. (\y.y) z")) != IRREDUCIBLE


def test_beta_norm() -> None:
    assert normal_order(parse(r"(\x. x) y")) == BETA
    assert normal_order(parse(r"(\x. x) y z")) == InFunc(BETA)
    assert normal_order(parse(r"z ((\x. x) y)")) == InArg(BETA)
    assert normal_order(parse(r"\x. (\y.y) z")) == InBody(BETA)


def test_order_norm() -> None:
    assert normal_order(parse(r"(\a. a) b ((\x. x) y)")) == InFunc(BETA)
    assert normal_order(parse(r"(\x. (\a. a) x y) z")) == BETA
    assert normal_order(parse(r"a (\x. (\y. y) x)")) == InArg(InBody(BETA))


def test_function_position_is_searched_first() -> None:
    term = parse(r"x (\a. (\b. b) a) ((\c. c) d)")
    assert normal_order(term) == InFunc(InArg(InBody(BETA)))
    assert call_by_name(term) == InArg(BETA)


def test_get_strategy() -> None:
    assert get_strategy("name") is call_by_name
    assert get_strategy("call-by-name") is call_by_name
    assert get_strategy("normal") is normal_order
    assert get_strategy("normal-order") is normal_order
    with pytest.raises(UnknownStrategyError, match="Unknown strategy 'lazy'"):
        get_strategy("lazy")


DEEP = 5_000
IDENTITY_REDEX = App(Lam("y", Var("y")), Var("q"))


def _spine(head: Term, n: int) -> Term:
    for i in range(1, n):
        head = App(head, Var(f"x{i}"))
    return head


def test_deep_spine_without_redex() -> None:
    term = _spine(Var("x0"), DEEP)
    assert call_by_name(term) == IRREDUCIBLE
    assert normal_order(term) == IRREDUCIBLE


def test_redex_at_the_head_of_a_deep_spine() -> None:
    path = call_by_name(_spine(IDENTITY_REDEX, DEEP))
    assert depth(path) == DEEP - 1
    assert str(path) == "(" * (DEEP - 1) + "β" + " _)" * (DEEP - 1)


def test_redex_at_the_end_of_a_deep_argument_chain() -> None:
    term = IDENTITY_REDEX
    for _ in range(DEEP):
        term = App(Var("f"), term)
    assert str(normal_order(term)) == "(_ " * DEEP + "β" + ")" * DEEP


def test_redex_under_deep_binders() -> None:
    term = lams([f"p{i}" for i in range(DEEP)], IDENTITY_REDEX)
    assert call_by_name(term) == IRREDUCIBLE
    assert str(normal_order(term)) == "(λ. " * DEEP + "β" + ")" * DEEP
