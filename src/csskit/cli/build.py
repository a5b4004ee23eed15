"""CLI command: csskit build -- assemble a selector from fragments."""

from __future__ import annotations

import sys

import click

from csskit.selector import (
    COMBINATORS,
    FragmentKind,
    SelectorBuilder,
    SelectorError,
    combine,
)

_KIND_ALIASES: dict[str, FragmentKind] = {kind.value: kind for kind in FragmentKind}
_KIND_ALIASES["attr"] = FragmentKind.ATTRIBUTE

# The descendant combinator is a bare space, spelled out on the command line.
_COMBINATOR_TOKENS = {token: token for token in COMBINATORS if token.strip()}
_COMBINATOR_TOKENS["descendant"] = " "


def _parse_part(part: str) -> tuple[FragmentKind, str]:
    name, sep, value = part.partition("=")
    if not sep:
        raise click.BadParameter(
            f"{part!r} is neither kind=value nor a combinator", param_hint="PART"
        )
    kind = _KIND_ALIASES.get(name.strip().lower())
    if kind is None:
        known = ", ".join(sorted(_KIND_ALIASES))
        raise click.BadParameter(
            f"unknown fragment kind {name!r} (expected one of: {known})",
            param_hint="PART",
        )
    return kind, value


def _assemble(parts: tuple[str, ...]) -> SelectorBuilder:
    """Apply *parts* in order, joining compounds at combinator tokens."""
    compounds: list[SelectorBuilder] = [SelectorBuilder()]
    combinators: list[str] = []
    for part in parts:
        if part in _COMBINATOR_TOKENS:
            if not compounds[-1].highest_rank:
                raise click.BadParameter(
                    f"combinator {part!r} must follow a selector", param_hint="PART"
                )
            combinators.append(_COMBINATOR_TOKENS[part])
            compounds.append(SelectorBuilder())
            continue
        kind, value = _parse_part(part)
        compounds[-1].add(kind, value)

    if not compounds[-1].highest_rank:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="PART")

    result = compounds[0]
    for combinator, compound in zip(combinators, compounds[1:]):
        result = combine(result, combinator, compound)
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from ordered PARTS.

    Each PART is kind=value (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: +, ~, > or "descendant".

    Example: csskit build element=div id=main + element=table id=data
    """
    try:
        selector = _assemble(parts)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
