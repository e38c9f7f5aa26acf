"""Entry points that start a fresh selector builder on every call."""

from __future__ import annotations

from cssbuild.selector.builder import SelectorBuilder
from cssbuild.selector.combinator import Combination, Renderable
from cssbuild.selector.combinator import combine as _combine


class SelectorFacade:
    """Stateless facade over :class:`SelectorBuilder`.

    Example::

        builder = css_selector_builder
        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).render()
        # 'div#main + table#data'
    """

    @staticmethod
    def element(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_element(value)

    @staticmethod
    def id(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_id(value)

    @staticmethod
    def class_(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_class(value)

    @staticmethod
    def attr(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_attribute(value)

    @staticmethod
    def pseudo_class(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_element(value)

    @staticmethod
    def combine(left: Renderable, token: str, right: Renderable) -> Combination:
        return _combine(left, token, right)


css_selector_builder = SelectorFacade()
