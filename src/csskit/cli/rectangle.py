"""CLI command: csskit rectangle -- print a rectangle as JSON."""

from __future__ import annotations

import dataclasses

import click

from csskit.config import CsskitConfig
from csskit.model import Rectangle
from csskit.serialization import to_json

# Every whole float below this magnitude converts to an int exactly.
_EXACT_INT_LIMIT = 2**53


def _display(value: float) -> float | int:
    """Drop the trailing ``.0`` from whole numbers that fit an exact int."""
    if value.is_integer() and abs(value) < _EXACT_INT_LIMIT:
        return int(value)
    return value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", default=None, type=int, help="Indent JSON output")
@click.option("--sort-keys/--no-sort-keys", default=True, help="Sort JSON keys")
@click.pass_obj
def rectangle(
    config: CsskitConfig, width: float, height: float, indent: int | None, sort_keys: bool
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON followed by its area."""
    config = dataclasses.replace(config, json_indent=indent, json_sort_keys=sort_keys)
    rect = Rectangle(width=width, height=height)
    shown = Rectangle(width=_display(rect.width), height=_display(rect.height))
    click.echo(to_json(shown, sort_keys=config.json_sort_keys, indent=config.json_indent))
    click.echo(f"Area: {_display(rect.area)}")
