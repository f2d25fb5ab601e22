"""CLI command: cssbuilder rect -- show a rectangle as JSON with its area."""

from __future__ import annotations

import click

from cssbuilder.config import CssBuilderConfig
from cssbuilder.objects import Rectangle, to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rect(config: CssBuilderConfig | None, width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    config = config or CssBuilderConfig()
    rectangle = Rectangle(width=width, height=height)
    click.echo(to_json(rectangle, indent=config.json_indent))
    click.echo(f"Area: {rectangle.get_area():g}")
