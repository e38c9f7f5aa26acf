"""Error hierarchy for cssbuild."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.selector.model import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class CssbuildError(Exception):
    """Base error for all cssbuild errors."""


class SelectorError(CssbuildError):
    """A fragment could not be added to a selector."""

    def __init__(self, message: str, *, kind: FragmentKind, value: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class DuplicateError(SelectorError):
    """Element, id or pseudo-element added a second time."""

    def __init__(self, *, kind: FragmentKind, value: str) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind, value=value)


class OrderError(SelectorError):
    """Fragment added after a grammatically later fragment."""

    def __init__(self, *, kind: FragmentKind, value: str) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind, value=value)


class DeserializationError(CssbuildError):
    """Parsed JSON cannot be cast to the requested type."""

    def __init__(self, message: str, *, target: type | None = None) -> None:
        super().__init__(message)
        self.target = target
