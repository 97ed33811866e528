"""Options and loading helpers shared by the designsync commands."""

from __future__ import annotations

import sys
from typing import Any, Callable

import click

from designsync.model.element import Element
from designsync.model.variants import Breakpoint, UIState
from designsync.store import ElementStore
from designsync.sync import DesignSync, ManualScheduler


def target_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the element file argument and the breakpoint/state/target options."""
    fn = click.option("--text-style", "text_style", default=None, help="Edit this named text style instead of the element.")(fn)
    fn = click.option(
        "--state",
        type=click.Choice([s.value for s in UIState]),
        default=UIState.NEUTRAL.value,
        show_default=True,
        help="UI state the edit applies to.",
    )(fn)
    fn = click.option(
        "--breakpoint",
        type=click.Choice([b.value for b in Breakpoint]),
        default=Breakpoint.DESKTOP.value,
        show_default=True,
        help="Breakpoint tier the edit applies to.",
    )(fn)
    fn = click.option("--element", "element_id", default=None, help="Element id (required when the file holds several).")(fn)
    fn = click.argument("element_file", type=click.Path(exists=True, dir_okay=False))(fn)
    return fn


def output_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--output",
        "-o",
        type=click.Path(dir_okay=False),
        default=None,
        help="Write the updated elements here instead of back to ELEMENT_FILE.",
    )(fn)


def load_element(element_file: str, element_id: str | None) -> tuple[ElementStore, Element]:
    """Load the store and pick the element to edit, exiting with code 1 on failure."""
    try:
        store = ElementStore.load(element_file)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError, as is an element without an id.
        click.echo(f"Error: cannot read {element_file}: {exc}", err=True)
        sys.exit(1)

    if element_id is None:
        if len(store) != 1:
            click.echo("Error: file holds several elements; pass --element", err=True)
            sys.exit(1)
        return store, next(iter(store))
    element = store.get(element_id)
    if element is None:
        click.echo(f"Error: no element {element_id!r} in {element_file}", err=True)
        sys.exit(1)
    return store, element


def build_engine(
    store: ElementStore,
    element: Element,
    breakpoint: str,
    state: str,
    text_style: str | None,
) -> DesignSync:
    # Commands only issue immediate writes, so timers never need a real clock.
    return DesignSync(
        element,
        store.apply_patch,
        breakpoint=Breakpoint(breakpoint),
        ui_state=UIState(state),
        text_style_key=text_style,
        scheduler=ManualScheduler(),
    )
