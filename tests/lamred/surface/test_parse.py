import pytest

from lamred.ast import App, Lam, Var
from lamred.surface import ParseError, parse


def test_multi_parameter_abstraction_desugars() -> None:
    assert parse(r"\x y z. x") == Lam("x", Lam("y", Lam("z", Var("x"))))


def test_binder_glyphs_are_interchangeable() -> None:
    assert parse("λx. x") == parse(r"\x. x")
    assert parse("(λa b. b) c") == parse(r"(\a b. b) c")


def test_application_is_left_associative() -> None:
    assert parse("a b c") == App(App(Var("a"), Var("b")), Var("c"))
    assert parse("a (b c)") == App(Var("a"), App(Var("b"), Var("c")))


def test_abstraction_extends_right() -> None:
    assert parse(r"\x. x y") == Lam("x", App(Var("x"), Var("y")))
    assert parse(r"a \x. x y") == App(Var("a"), Lam("x", App(Var("x"), Var("y"))))


def test_primed_names_and_whitespace() -> None:
    assert parse("x'") == Var("x'")
    assert parse("\n  f\tx  \n") == App(Var("f"), Var("x"))


def test_unexpected_end_of_input() -> None:
    with pytest.raises(ParseError, match="Unexpected end of input") as info:
        parse("(x")
    assert info.value.expected == ("RPAREN",)
    assert str(info.value) == "Unexpected end of input @ 2:2 (expected ')')"


def test_empty_source_lists_what_a_term_can_start_with() -> None:
    with pytest.raises(ParseError) as info:
        parse("")
    assert str(info.value) == (
        "Unexpected end of input @ 0:0 (expected name, binder or '(')"
    )


def test_binder_without_parameter() -> None:
    with pytest.raises(ParseError) as info:
        parse(r"\. x")
    assert str(info.value) == "Unexpected '.' @ 1:2: '.' (expected name)"


def test_unbalanced_close_paren() -> None:
    with pytest.raises(ParseError, match="Unexpected '\\)'") as info:
        parse("x )")
    assert info.value.expected == ("$end",)


def test_unexpected_character() -> None:
    with pytest.raises(ParseError, match="Unexpected character '\\$'") as info:
        parse("x $")
    assert info.value.span.start == 2
    assert info.value.expected == ()
