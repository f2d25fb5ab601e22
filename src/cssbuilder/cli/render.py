"""CLI command: cssbuilder render -- build a selector from a JSON description."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssbuilder.errors import SelectorError
from cssbuilder.selector import build_selector


@click.command()
@click.argument("descfile", type=click.Path(exists=True))
def render(descfile: str) -> None:
    """Render the selector described by a JSON file.

    The file holds a list of [kind, value] steps, or a
    {"combine": [left, combinator, right]} mapping. Exits with code 1 if the
    description is malformed or breaks the selector rules.
    """
    desc_path = Path(descfile)

    try:
        description = json.loads(desc_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {desc_path.name}: {exc}", err=True)
        sys.exit(1)

    try:
        selector = build_selector(description)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
