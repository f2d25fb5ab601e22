"""CLI command: cssbuilder build -- assemble a selector from options."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SelectorError
from cssbuilder.selector import SelectorBuilder


@click.command()
@click.option("--element", "element", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute condition, repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from fragment options.

    Fragments are applied in canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element) regardless of the order given.
    """
    builder = SelectorBuilder()
    try:
        if element is not None:
            builder.element(element)
        if id_ is not None:
            builder.id(id_)
        for value in classes:
            builder.class_(value)
        for value in attrs:
            builder.attr(value)
        for value in pseudo_classes:
            builder.pseudo_class(value)
        if pseudo_element is not None:
            builder.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    selector = builder.stringify()
    if not selector:
        click.echo("Nothing to build: pass at least one fragment option", err=True)
        sys.exit(1)
    click.echo(selector)
