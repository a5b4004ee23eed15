"""Error hierarchy for the selector builder."""

from __future__ import annotations

from csskit.selector.model import ORDER_DESCRIPTION, FragmentKind


class SelectorError(Exception):
    """Base error for all selector builder errors."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class OrderingError(SelectorError):
    """A fragment was added after a fragment of a higher rank."""

    def __init__(self, kind: FragmentKind | None = None) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            f"{ORDER_DESCRIPTION}",
            kind=kind,
        )


class CardinalityError(SelectorError):
    """A second element, id or pseudo-element fragment was added."""

    def __init__(self, kind: FragmentKind | None = None) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector",
            kind=kind,
        )


class SealedSelectorError(SelectorError):
    """A fragment was added to a selector produced by ``combine``."""

    def __init__(self, kind: FragmentKind | None = None) -> None:
        super().__init__(
            "Combined selectors are finished and cannot be extended with fragments",
            kind=kind,
        )
