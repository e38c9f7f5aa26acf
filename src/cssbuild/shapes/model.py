"""Shape models: plain geometric records with derived areas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


class Shape(Protocol):
    """A shape exposing a derived area."""

    @property
    def area(self) -> float: ...


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    Only ``width`` and ``height`` are stored; ``area`` is computed on access
    and is therefore never serialised.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle:
    radius: float

    @property
    def area(self) -> float:
        return math.pi * self.radius**2


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a rectangle with the given *width* and *height*."""
    return Rectangle(width=width, height=height)
