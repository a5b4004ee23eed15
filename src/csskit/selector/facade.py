"""Facade that starts a new selector builder for each call."""

from __future__ import annotations

from csskit.selector.builder import SelectorBuilder, combine
from csskit.selector.model import FragmentKind

__all__ = ["COMBINATORS", "CssSelectorBuilder", "css_selector_builder"]

# descendant, adjacent sibling, general sibling, child
COMBINATORS = (" ", "+", "~", ">")


class CssSelectorBuilder:
    """Entry point mirroring the builder's fragment methods.

    Each fragment method creates a fresh ``SelectorBuilder`` holding that
    fragment, so chains never share state::

        css_selector_builder.id("main").class_("container").stringify()
        # -> '#main.container'
    """

    def _start(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        return SelectorBuilder().add(kind, value)

    def element(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
