"""CLI entry point for license-check."""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

import click
from rich.console import Console

from license_check import __version__
from license_check.config import load_config
from license_check.constants import EXIT_ERROR, EXIT_FAILURE, EXIT_SUCCESS
from license_check.exceptions import LicenseCheckError, ValidationFailure
from license_check.models.coordinate import DependencyCoordinate
from license_check.output.log import RunLog
from license_check.runner import validate_dependencies
from license_check.sources import (
    parse_coordinates,
    read_coordinates,
    unique_coordinates,
)

# Module-level console for consistent output
_console = Console(emoji=False)
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True, emoji=False)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Check - Verify that dependencies declare a license.

    Asks a validation server whether each dependency coordinate declares
    an open-source license and fails on the first one that does not.

    \b
    Examples:
        license-check check org.slf4j:slf4j-api:2.0.9
        license-check check --dependencies deps.txt
        mvn dependency:list -DoutputFile=deps.txt && license-check check -d deps.txt
    """
    pass


@main.command()
@click.option(
    "--dependencies",
    "-d",
    "dependencies_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="File with one dependency coordinate per line ('-' for stdin).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--host",
    envvar="LICENSE_CHECK_HOST",
    default=None,
    help="Base URL of the validation server.",
)
@click.option(
    "--notification-email",
    envvar="LICENSE_CHECK_NOTIFICATION_EMAIL",
    default=None,
    help="Ask the server to notify this address about unknown libraries.",
)
@click.option(
    "--offline/--online",
    default=None,
    help="Skip validation entirely (overrides configuration file).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Only print errors.",
)
@click.argument("coordinates", nargs=-1)
def check(
    dependencies_path: str | None,
    config_path: str | None,
    host: str | None,
    notification_email: str | None,
    offline: Optional[bool],
    quiet_flag: bool,
    coordinates: tuple[str, ...],
) -> None:
    """Validate that every dependency declares a license.

    COORDINATES are groupId:artifactId:version triples. Coordinates given
    as arguments are checked before those read from --dependencies.

    \b
    Examples:
        license-check check junit:junit:4.13.2
        license-check check --dependencies deps.txt --notification-email me@example.com
        license-check check --host http://localhost:8081/validate.php?id= -d deps.txt
        license-check check --offline -d deps.txt
    """
    try:
        config = load_config(
            config_path,
            host=host,
            notification_email=notification_email,
            offline=offline,
        )
        dependencies = _collect_coordinates(coordinates, dependencies_path)

        log = RunLog(console=_console, error_console=_error_console, quiet=quiet_flag)
        asyncio.run(validate_dependencies(dependencies, config, log=log))
        sys.exit(EXIT_SUCCESS)

    except ValidationFailure as e:
        _display_error(e)
        sys.exit(EXIT_FAILURE)
    except LicenseCheckError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _collect_coordinates(
    arguments: tuple[str, ...], dependencies_path: str | None
) -> list[DependencyCoordinate]:
    """Combine coordinates from arguments and the dependency file.

    Args:
        arguments: Coordinates given on the command line.
        dependencies_path: Optional dependency file path.

    Returns:
        Coordinates in order, arguments first, without repeats.
    """
    coordinates = parse_coordinates(arguments)
    if dependencies_path is not None:
        coordinates.extend(read_coordinates(dependencies_path))
    return unique_coordinates(coordinates)


def _display_error(error: LicenseCheckError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    if isinstance(error, ValidationFailure):
        message = f"Error: {error}"
    else:
        message = f"Error: {type(error).__name__}: {error}"
    _error_console.print(
        message,
        style="red bold",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
