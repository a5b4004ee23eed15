"""csskit CLI entry point: Click group with subcommands."""

import logging

import click

from csskit import __version__
from csskit.config import CsskitConfig


@click.group()
@click.version_option(version=__version__, prog_name="csskit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """csskit - build CSS selectors and small JSON-encoded shapes."""
    config = CsskitConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from csskit.cli.build import build  # noqa: E402
from csskit.cli.kinds import kinds  # noqa: E402
from csskit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
cli.add_command(rectangle)
