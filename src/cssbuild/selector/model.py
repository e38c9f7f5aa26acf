"""Selector model: fragment kinds in grammar order and the accumulated state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FragmentKind(Enum):
    """A kind of simple-selector fragment.

    Members are declared in CSS grammar order; ``position`` compares them.
    Each value is ``(position, prefix, suffix, singleton)``.
    """

    ELEMENT = (0, "", "", True)
    ID = (1, "#", "", True)
    CLASS = (2, ".", "", False)
    ATTRIBUTE = (3, "[", "]", False)
    PSEUDO_CLASS = (4, ":", "", False)
    PSEUDO_ELEMENT = (5, "::", "", True)

    def __init__(self, position: int, prefix: str, suffix: str, singleton: bool) -> None:
        self.position = position
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


GRAMMAR_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)


@dataclass
class SelectorState:
    """Fragments accumulated by one builder, grouped by kind.

    Each group holds already-prefixed strings in insertion order.
    """

    groups: dict[FragmentKind, list[str]] = field(
        default_factory=lambda: {kind: [] for kind in GRAMMAR_ORDER}
    )

    def has(self, kind: FragmentKind) -> bool:
        return bool(self.groups[kind])

    def written_after(self, kind: FragmentKind) -> list[FragmentKind]:
        """Return the groups later than *kind* that already hold fragments."""
        return [k for k in GRAMMAR_ORDER if k.position > kind.position and self.has(k)]

    def append(self, kind: FragmentKind, value: str) -> None:
        self.groups[kind].append(kind.format(value))

    def copy(self) -> SelectorState:
        return SelectorState(groups={k: list(v) for k, v in self.groups.items()})

    def render(self) -> str:
        """Concatenate every group in grammar order with no separators."""
        return "".join("".join(self.groups[kind]) for kind in GRAMMAR_ORDER)
