"""CLI command: csskit kinds -- list fragment kinds in their required order."""

from __future__ import annotations

import click

from csskit.selector import FragmentKind, fragment_spec


@click.command()
def kinds() -> None:
    """List selector fragment kinds with rank and rendering."""
    for kind in FragmentKind:
        spec = fragment_spec(kind)
        occurs = "once" if spec.unique else "many"
        click.echo(f"{spec.rank}  {kind.value:<15} {spec.render('value'):<10} {occurs}")
