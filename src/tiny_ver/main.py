# SPDX-License-Identifier: MIT
"""CLI entry point for the tiny-ver command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .commands import Context, check_name, compose, echo_error, parse, pass_context, split
from .config import ConfigError
from .errors import TinyVersionError


@click.group()
@click.version_option(version=__version__, prog_name="tiny-ver")
@click.option("-v", "--verbose", is_flag=True, help="Show parsed fields and config sources.")
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read pyproject.toml from this directory instead of searching upwards.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse versions and build or split versioned names.

    \b
    Examples:
        tiny-ver parse 1.2.3-beta
        tiny-ver check-name my_app
        tiny-ver compose --name my_app --version 1.2.3
        tiny-ver split my_app-1.2.3-beta
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


for command in (parse, check_name, compose, split):
    cli.add_command(command)


def main() -> None:
    """Run the CLI, reporting library and config errors with exit status 1."""
    try:
        cli()
    except (TinyVersionError, ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
