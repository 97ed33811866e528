"""designsync CLI entry point: Click group with subcommands."""

import logging

import click

from designsync import __version__


@click.group()
@click.version_option(version=__version__, prog_name="designsync")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """designsync - edit element design values and utility classes together."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from designsync.cli.read import get  # noqa: E402
from designsync.cli.write import classes, reset, set_property  # noqa: E402

cli.add_command(get)
cli.add_command(set_property)
cli.add_command(reset)
cli.add_command(classes)
