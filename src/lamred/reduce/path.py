"""Reduction paths: where the next redex sits and what to do there."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InFunc:
    """Continue in the function position of an application."""

    inner: Path

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class InArg:
    """Continue in the argument position of an application."""

    inner: Path

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class InBody:
    """Continue in the body of an abstraction."""

    inner: Path

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Beta:
    """The current node is itself the redex."""

    def __str__(self) -> str:
        return "β"


@dataclass(frozen=True)
class Irreducible:
    """No redex at or beneath the current node."""

    def __str__(self) -> str:
        return "-"


type Path = InFunc | InArg | InBody | Beta | Irreducible

BETA = Beta()
IRREDUCIBLE = Irreducible()


def render(path: Path) -> str:
    """Return the ``(P _)`` / ``(_ P)`` / ``(λ. P)`` / ``β`` / ``-`` notation."""

    opens: list[str] = []
    closes: list[str] = []
    while True:
        match path:
            case InFunc(inner):
                opens.append("(")
                closes.append(" _)")
            case InArg(inner):
                opens.append("(_ ")
                closes.append(")")
            case InBody(inner):
                opens.append("(λ. ")
                closes.append(")")
            case Beta() | Irreducible():
                break
            case _:
                raise TypeError(f"Unexpected reduction path: {path!r}")
        path = inner
    return "".join(opens) + str(path) + "".join(reversed(closes))


def depth(path: Path) -> int:
    """Number of descend steps before the terminal action."""

    n = 0
    while isinstance(path, InFunc | InArg | InBody):
        n += 1
        path = path.inner
    return n


__all__ = [
    "Path",
    "InFunc",
    "InArg",
    "InBody",
    "Beta",
    "Irreducible",
    "BETA",
    "IRREDUCIBLE",
    "render",
    "depth",
]
