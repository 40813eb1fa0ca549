# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-order command."""

from __future__ import annotations

import json
import sys

import click

from . import __version__
from .compare import sort_versions
from .ordering import compare_versions
from .semver import InvalidVersionError, Version, is_valid_semver, parse_version

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False

    def debug(self, message: str) -> None:
        """Print a message only when --verbose is set."""
        if self.verbose:
            click.secho(message, dim=True, err=True)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _parse_or_exit(version: str) -> Version:
    try:
        return parse_version(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="semver-order")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Parse, compare and sort semantic versions.

    \b
    Examples:
        semver-order validate 1.0.0 1.0.0-rc.1
        semver-order compare 1.0.0-alpha 1.0.0
        semver-order sort 2.0.0 1.0.0 1.0.0-beta
        semver-order show 1.2.3-rc.1+build.5 --json
    """
    ctx.verbose = verbose


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid semantic version.

    Exits with status 1 if any version is invalid.
    """
    invalid = 0
    for version in versions:
        if is_valid_semver(version):
            echo_success(f"{version}: valid")
        else:
            echo_error(f"{version}: invalid semantic version")
            invalid += 1

    ctx.debug(f"Checked {len(versions)} version(s), {invalid} invalid")
    if invalid:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--numeric",
    is_flag=True,
    help="Print -1, 0 or 1 instead of an expression.",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, numeric: bool) -> None:
    """Compare VERSION1 with VERSION2 by precedence.

    Build metadata is ignored.

    \b
    Examples:
        semver-order compare 1.0.0-alpha 1.0.0     # 1.0.0-alpha < 1.0.0
        semver-order compare --numeric 2.0.0 1.0.0 # 1
    """
    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)
    ctx.debug(f"Parsed {v1} and {v2}")

    result = compare_versions(v1, v2)
    if numeric:
        echo_info(str(result))
    else:
        echo_info(f"{version1} {_SYMBOLS[result]} {version2}")


@cli.command("sort")
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort in descending order.",
)
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Sort VERSIONS in ascending precedence, one per line.

    Reads one version per line from stdin when no VERSIONS are given.
    """
    if not versions:
        stdin = click.get_text_stream("stdin")
        versions = tuple(line.strip() for line in stdin if line.strip())
        ctx.debug(f"Read {len(versions)} version(s) from stdin")

    if not versions:
        echo_warning("No versions to sort")
        return

    parsed = [_parse_or_exit(version) for version in versions]
    sort_versions(parsed)
    if reverse:
        parsed.reverse()

    for version in parsed:
        echo_info(str(version))


@cli.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit the parsed fields as a JSON object.",
)
def show(version: str, as_json: bool) -> None:
    """Show the parsed fields of VERSION."""
    parsed = _parse_or_exit(version)
    fields = {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": parsed.prerelease,
        "build": parsed.build,
    }

    if as_json:
        echo_info(json.dumps(fields, indent=2))
        return

    for name, value in fields.items():
        echo_info(f"{name}: {value}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
