"""Stateful builder that assembles compound CSS selectors fragment by fragment.

Example::

    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    # -> 'a[href$=".png"]:focus'
"""

from __future__ import annotations

import logging
from collections import Counter

from csskit.selector.errors import CardinalityError, OrderingError, SealedSelectorError
from csskit.selector.model import FragmentKind, fragment_spec

__all__ = ["SelectorBuilder", "combine"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments in rank order and renders them.

    Every fragment method validates before touching any state, so a call that
    raises leaves the builder exactly as it was. Successful calls return the
    builder itself to allow chaining.
    """

    def __init__(self) -> None:
        self._text = ""
        self._highest_rank = 0
        self._rank_counts: Counter[FragmentKind] = Counter()
        self._sealed = False

    @classmethod
    def from_text(cls, text: str) -> SelectorBuilder:
        """Create a finished builder holding literal selector *text*."""
        builder = cls()
        builder._text = text
        builder._sealed = True
        return builder

    # --- state ----------------------------------------------------------------

    @property
    def highest_rank(self) -> int:
        return self._highest_rank

    @property
    def sealed(self) -> bool:
        return self._sealed

    def count(self, kind: FragmentKind) -> int:
        return self._rank_counts[kind]

    # --- fragments ------------------------------------------------------------

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Validate and append one fragment of *kind*."""
        if self._sealed:
            logger.debug("rejected %s %r: selector is sealed", kind.value, value)
            raise SealedSelectorError(kind)

        spec = fragment_spec(kind)
        if self._text and spec.rank < self._highest_rank:
            logger.debug(
                "rejected %s %r: rank %d after rank %d",
                kind.value,
                value,
                spec.rank,
                self._highest_rank,
            )
            raise OrderingError(kind)
        if spec.unique and self._rank_counts[kind] >= 1:
            logger.debug("rejected %s %r: already present", kind.value, value)
            raise CardinalityError(kind)

        self._text += spec.render(value)
        self._highest_rank = spec.rank
        self._rank_counts[kind] += 1
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    """Join two finished selectors with *combinator* into a new sealed builder.

    Neither input is modified. The result is literal text with no usable
    ordering state, so extending it with fragments is unsupported: the sealed
    builder rejects such calls with ``SealedSelectorError`` instead of
    appending to the combined text unchecked.
    """
    text = f"{left.stringify()} {combinator} {right.stringify()}"
    logger.debug("combined selector %r", text)
    return SelectorBuilder.from_text(text)
