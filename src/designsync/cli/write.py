"""CLI commands that modify an element: set, reset, classes."""

from __future__ import annotations

import click

from designsync.cli.options import build_engine, load_element, output_option, target_options
from designsync.model.element import join_classes
from designsync.store import ElementStore


def _save(store: ElementStore, element_file: str, output: str | None, result) -> None:
    store.dump(output or element_file)
    if result is None:
        click.echo("No changes.")
        return
    _, classes = result
    click.echo(join_classes(classes))


@click.command("set")
@target_options
@output_option
@click.argument("category")
@click.argument("property_name", metavar="PROPERTY")
@click.argument("value", required=False)
@click.option("--unset", is_flag=True, help="Remove PROPERTY at every breakpoint and state.")
def set_property(
    element_file: str,
    element_id: str | None,
    breakpoint: str,
    state: str,
    text_style: str | None,
    output: str | None,
    category: str,
    property_name: str,
    value: str | None,
    unset: bool,
) -> None:
    """Set CATEGORY.PROPERTY to VALUE and print the resulting classes."""
    if unset == (value is not None):
        raise click.UsageError("Pass either VALUE or --unset.")
    store, element = load_element(element_file, element_id)
    with build_engine(store, element, breakpoint, state, text_style) as sync:
        result = sync.update_property(category, property_name, None if unset else value)
    _save(store, element_file, output, result)


@click.command()
@target_options
@output_option
@click.argument("category")
def reset(
    element_file: str,
    element_id: str | None,
    breakpoint: str,
    state: str,
    text_style: str | None,
    output: str | None,
    category: str,
) -> None:
    """Remove CATEGORY and every class its properties produced."""
    store, element = load_element(element_file, element_id)
    with build_engine(store, element, breakpoint, state, text_style) as sync:
        result = sync.reset_category(category)
    _save(store, element_file, output, result)


@click.command()
@target_options
@output_option
@click.argument("class_string", metavar="CLASSES")
def classes(
    element_file: str,
    element_id: str | None,
    breakpoint: str,
    state: str,
    text_style: str | None,
    output: str | None,
    class_string: str,
) -> None:
    """Replace the class list with CLASSES, leaving the design object as it is."""
    store, element = load_element(element_file, element_id)
    with build_engine(store, element, breakpoint, state, text_style) as sync:
        result = sync.sync_classes(class_string)
    _save(store, element_file, output, result)
