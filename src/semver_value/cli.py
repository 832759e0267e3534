# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import sys
from typing import IO

import click

from .compare import compare_versions, sort_versions
from .errors import VersionError
from .semver import parse_version
from .structured import validate_version_data, version_to_json


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


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


@click.group()
@click.version_option(package_name="semver-value")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Parse, compare, and validate semantic versions.

    \b
    Examples:
        semver parse 1.2.3-alpha.1+build.5
        semver parse --json 1.2.3
        semver compare 1.0.0-rc.1 1.0.0
        semver sort 2.0.0 1.0.0 1.0.0-alpha
        semver validate version.json
    """
    ctx.verbose = verbose


@cli.command()
@click.argument("version")
@click.option("--strict", is_flag=True, help="Reject trailing characters after the version.")
@click.option("--json", "as_json", is_flag=True, help="Print the structured form as JSON.")
@pass_context
def parse(ctx: Context, version: str, strict: bool, as_json: bool) -> None:
    """Parse VERSION and print its canonical form."""
    try:
        parsed = parse_version(version, strict=strict)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)

    if as_json:
        echo_info(version_to_json(parsed, indent=2))
    else:
        echo_info(str(parsed))

    if ctx.verbose:
        echo_info(f"  major:      {parsed.major}")
        echo_info(f"  minor:      {parsed.minor}")
        echo_info(f"  patch:      {parsed.patch}")
        echo_info(f"  prerelease: {'.'.join(parsed.prerelease) or '-'}")
        echo_info(f"  build:      {'.'.join(parsed.build) or '-'}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Compare two versions and print -1, 0 or 1."""
    try:
        result = compare_versions(version1, version2)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)

    echo_info(str(result))


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print the highest version first.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order, one per line."""
    try:
        ordered = sort_versions(list(versions), reverse=reverse)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)

    for version in ordered:
        echo_info(str(version))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@pass_context
def validate(ctx: Context, source: IO[str]) -> None:
    """Validate a version in structured JSON form.

    Reads SOURCE, or standard input when SOURCE is omitted or "-".
    """
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON: {e}")
        sys.exit(1)

    result = validate_version_data(data)
    if not result.valid:
        echo_error(f"Validation failed with {len(result.errors)} error(s)")
        for error in result.errors:
            echo_info(f"  {error.field}: {error.message}")
            if ctx.verbose and error.value is not None:
                echo_info(f"    value: {error.value!r}")
        sys.exit(1)

    echo_success(f"Validation passed: {result.version}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
