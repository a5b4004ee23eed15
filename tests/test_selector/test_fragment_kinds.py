"""Tests for the fragment kind table."""

import pytest

from csskit.selector import FragmentKind, FragmentSpec, fragment_spec
from csskit.selector.model import ORDER_DESCRIPTION, UNIQUE_KINDS


class TestFragmentSpec:
    @pytest.mark.parametrize(
        "kind,rank,rendered",
        [
            (FragmentKind.ELEMENT, 1, "v"),
            (FragmentKind.ID, 2, "#v"),
            (FragmentKind.CLASS, 3, ".v"),
            (FragmentKind.ATTRIBUTE, 4, "[v]"),
            (FragmentKind.PSEUDO_CLASS, 5, ":v"),
            (FragmentKind.PSEUDO_ELEMENT, 6, "::v"),
        ],
    )
    def test_rank_and_render(self, kind: FragmentKind, rank: int, rendered: str) -> None:
        spec = fragment_spec(kind)
        assert spec.rank == rank
        assert spec.render("v") == rendered

    def test_unique_kinds(self) -> None:
        assert UNIQUE_KINDS == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    def test_order_description(self) -> None:
        assert ORDER_DESCRIPTION == (
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )

    def test_spec_is_frozen(self) -> None:
        spec = FragmentSpec(rank=1)
        with pytest.raises(AttributeError):
            spec.rank = 2  # type: ignore[misc]
