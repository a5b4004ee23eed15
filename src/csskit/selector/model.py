"""Selector fragment model: FragmentKind and its rank/affix table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """One atomic piece of a compound CSS selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


@dataclass(frozen=True)
class FragmentSpec:
    """How a fragment kind is ordered and rendered.

    Attributes:
        rank: Fixed position of the kind inside a compound selector (1..6).
        prefix: Text written before the fragment value.
        suffix: Text written after the fragment value.
        unique: Whether the kind may occur at most once per selector.
    """

    rank: int
    prefix: str = ""
    suffix: str = ""
    unique: bool = False

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


_SPECS: dict[FragmentKind, FragmentSpec] = {
    FragmentKind.ELEMENT: FragmentSpec(rank=1, unique=True),
    FragmentKind.ID: FragmentSpec(rank=2, prefix="#", unique=True),
    FragmentKind.CLASS: FragmentSpec(rank=3, prefix="."),
    FragmentKind.ATTRIBUTE: FragmentSpec(rank=4, prefix="[", suffix="]"),
    FragmentKind.PSEUDO_CLASS: FragmentSpec(rank=5, prefix=":"),
    FragmentKind.PSEUDO_ELEMENT: FragmentSpec(rank=6, prefix="::", unique=True),
}

# Human-readable required order, used in error messages.
ORDER_DESCRIPTION = ", ".join(kind.value for kind in _SPECS)

UNIQUE_KINDS = frozenset(kind for kind, spec in _SPECS.items() if spec.unique)


def fragment_spec(kind: FragmentKind) -> FragmentSpec:
    """Return the rank and affixes for *kind*."""
    return _SPECS[kind]
