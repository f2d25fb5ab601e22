"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.option("--indent", type=int, default=None, help="Indent JSON output by N spaces")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, indent: int | None) -> None:
    """cssbuilder - build validated CSS selectors from the command line."""
    config = CssBuilderConfig(
        log_level="DEBUG" if verbose else CssBuilderConfig.log_level,
        json_indent=indent,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.render import render  # noqa: E402
from cssbuilder.cli.rect import rect  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(rect)
