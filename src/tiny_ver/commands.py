# SPDX-License-Identifier: MIT
"""Commands of the tiny-ver CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from .config import ConfigError, load_config
from .errors import InvalidNameError, ParseError, SplitError
from .name import is_valid_name, normalize_name
from .version import Version, parse_version
from .versioned import split_versioned_name


class Context:
    """Options of the tiny-ver group shared with its commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_warning(message: str) -> None:
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _version_fields(version: Version) -> dict[str, object]:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "pre_release": version.pre_release,
    }


@click.command()
@click.argument("version_string", metavar="VERSION")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed fields as JSON.")
@pass_context
def parse(ctx: Context, version_string: str, as_json: bool) -> None:
    """Parse VERSION and print its canonical form.

    \b
    Examples:
        tiny-ver parse 1.2.3
        tiny-ver parse 01.2.3-rc.1 --json
    """
    try:
        version = parse_version(version_string)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(_version_fields(version)))
        return

    click.echo(str(version))
    if ctx.verbose:
        click.echo(f"  major: {version.major}")
        click.echo(f"  minor: {version.minor}")
        click.echo(f"  patch: {version.patch}")
        click.echo(f"  pre-release: {version.pre_release or '-'}")


@click.command("check-name")
@click.argument("name")
def check_name(name: str) -> None:
    """Check that NAME is a valid package name."""
    if not is_valid_name(name):
        echo_error(str(InvalidNameError(name)))
        raise SystemExit(1)

    click.secho(f"'{name}' is a valid name", fg="green")


@click.command()
@click.option("--name", "-n", help="Package name (defaults to the project name).")
@click.option(
    "--version",
    "-V",
    "version_string",
    help="Version (defaults to the project version).",
)
@click.option(
    "--normalize",
    is_flag=True,
    help="Normalize the name first (e.g. My-Package -> my_package).",
)
@pass_context
def compose(
    ctx: Context,
    name: Optional[str],
    version_string: Optional[str],
    normalize: bool,
) -> None:
    """Print the versioned name NAME-VERSION.

    Values not given on the command line are read from pyproject.toml,
    first from [tool.tiny-ver] and then from [project].

    \b
    Examples:
        tiny-ver compose --name my_app --version 1.2.3
        tiny-ver compose --normalize
    """
    if name is None or version_string is None:
        try:
            config = load_config(ctx.project_dir)
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)
        if ctx.verbose:
            click.echo(f"Using configuration from {config.project_dir / 'pyproject.toml'}")
        name = config.name if name is None else name
        version_string = config.version if version_string is None else version_string

    if not name:
        echo_error("No package name given and none found in pyproject.toml")
        raise SystemExit(1)
    if not version_string:
        echo_error("No version given and none found in pyproject.toml")
        raise SystemExit(1)

    try:
        if normalize:
            normalized = normalize_name(name)
            if normalized != name and ctx.verbose:
                echo_warning(f"Name '{name}' normalized to '{normalized}'")
            name = normalized
        version = parse_version(version_string)
        result = version.versioned_name(name)
    except (InvalidNameError, ParseError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    click.echo(result)


@click.command()
@click.argument("full_name", metavar="VERSIONED_NAME")
@click.option("--json", "as_json", is_flag=True, help="Print name and fields as JSON.")
def split(full_name: str, as_json: bool) -> None:
    """Split VERSIONED_NAME into its name and version.

    The name is not checked against the name grammar.
    """
    try:
        name, version = split_versioned_name(full_name)
    except SplitError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps({"name": name, "version": str(version), **_version_fields(version)}))
        return

    click.echo(f"name: {name}")
    click.echo(f"version: {version}")
