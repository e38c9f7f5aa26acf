"""Fluent CSS selector builder enforcing fragment order and cardinality."""

from __future__ import annotations

import logging

from cssbuild.errors import DuplicateError, OrderError
from cssbuild.selector.model import FragmentKind, SelectorState

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the fragments of one compound selector.

    Every ``add_*`` method returns the builder itself so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Fragments must arrive in grammar order (element, id, class, attribute,
    pseudo-class, pseudo-element). Element, id and pseudo-element may appear
    at most once.
    """

    def __init__(self) -> None:
        self._state = SelectorState()

    # --- fragments ------------------------------------------------------------

    def add_element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ELEMENT, value)

    def add_id(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ID, value)

    def add_class(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.CLASS, value)

    def add_attribute(self, value: str) -> SelectorBuilder:
        """Add an attribute filter; *value* is the text inside the brackets."""
        return self._add(FragmentKind.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def add_pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Add a fragment of an arbitrary *kind*."""
        return self._add(kind, value)

    # Fluent short names.
    element = add_element
    id = add_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = add_pseudo_element

    # --- output ---------------------------------------------------------------

    @property
    def state(self) -> SelectorState:
        """A snapshot of the accumulated fragments."""
        return self._state.copy()

    def render(self) -> str:
        return self._state.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"

    # --- internals ------------------------------------------------------------

    def _add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        later = self._state.written_after(kind)
        if later:
            logger.debug(
                "Rejected %s %r: %s already written", kind.label, value,
                ", ".join(k.label for k in later),
            )
            raise OrderError(kind=kind, value=value)
        if kind.singleton and self._state.has(kind):
            logger.debug("Rejected %s %r: already present", kind.label, value)
            raise DuplicateError(kind=kind, value=value)
        self._state.append(kind, value)
        logger.debug("Added %s %r", kind.label, value)
        return self
