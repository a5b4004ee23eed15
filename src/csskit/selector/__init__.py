from csskit.selector.builder import SelectorBuilder, combine
from csskit.selector.errors import (
    CardinalityError,
    OrderingError,
    SealedSelectorError,
    SelectorError,
)
from csskit.selector.facade import COMBINATORS, CssSelectorBuilder, css_selector_builder
from csskit.selector.model import FragmentKind, FragmentSpec, fragment_spec

__all__ = [
    "COMBINATORS",
    "CardinalityError",
    "CssSelectorBuilder",
    "FragmentKind",
    "FragmentSpec",
    "OrderingError",
    "SealedSelectorError",
    "SelectorBuilder",
    "SelectorError",
    "combine",
    "css_selector_builder",
    "fragment_spec",
]
