"""Stateless entry points that start a fresh SelectorBuilder per chain."""

from __future__ import annotations

from cssbuilder.selector.builder import SelectorBuilder

__all__ = ["CssSelectorFacade", "css_selector_builder"]


class CssSelectorFacade:
    """Facade over :class:`SelectorBuilder`.

    Each method creates a new builder, applies the first call, and returns
    the builder for further chaining::

        css_selector_builder.element("a").attr('href$=".png"').stringify()
        # => 'a[href$=".png"]'
    """

    @staticmethod
    def element(value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    @staticmethod
    def id(value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    @staticmethod
    def class_(value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    @staticmethod
    def attr(value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    @staticmethod
    def pseudo_class(value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    @staticmethod
    def combine(
        left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)


css_selector_builder = CssSelectorFacade()
