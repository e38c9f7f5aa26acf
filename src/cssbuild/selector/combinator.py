"""Combinators: join rendered selectors into complex selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def render(self) -> str: ...


class Combinator(StrEnum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Combination:
    """A complex selector made of two rendered operands and a combinator token."""

    left: str
    token: str
    right: str

    def render(self) -> str:
        # One space on each side of every token, including the descendant " ".
        return f"{self.left} {self.token} {self.right}"

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, token: str, right: Renderable) -> Combination:
    """Join *left* and *right* with *token*.

    Both operands are rendered immediately, so later changes to a builder do
    not affect the combination. Any string is accepted as *token*.
    """
    return Combination(left=left.render(), token=str(token), right=right.render())
