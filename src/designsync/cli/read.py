"""CLI command: designsync get -- print a property's effective value."""

from __future__ import annotations

import sys

import click

from designsync.cli.options import build_engine, load_element, target_options


@click.command()
@target_options
@click.argument("category")
@click.argument("property_name", metavar="PROPERTY")
def get(
    element_file: str,
    element_id: str | None,
    breakpoint: str,
    state: str,
    text_style: str | None,
    category: str,
    property_name: str,
) -> None:
    """Print the value of PROPERTY as it applies at the chosen breakpoint and state.

    Exits with code 1 when no value applies.
    """
    store, element = load_element(element_file, element_id)
    with build_engine(store, element, breakpoint, state, text_style) as sync:
        value = sync.get_property(category, property_name)
    if value is None:
        click.echo(f"{property_name}: not set", err=True)
        sys.exit(1)
    click.echo(value)
