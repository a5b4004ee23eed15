"""csskit: CSS selector builder, rectangle value object and JSON helpers."""

__version__ = "0.1.0"

from csskit.config import CsskitConfig  # noqa: E402
from csskit.model import Rectangle  # noqa: E402
from csskit.selector import (  # noqa: E402
    CardinalityError,
    CssSelectorBuilder,
    FragmentKind,
    OrderingError,
    SealedSelectorError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from csskit.serialization import ParseError, from_json, to_json  # noqa: E402

__all__ = [
    "__version__",
    "CsskitConfig",
    "Rectangle",
    "CardinalityError",
    "CssSelectorBuilder",
    "FragmentKind",
    "OrderingError",
    "SealedSelectorError",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "ParseError",
    "from_json",
    "to_json",
]
