"""Reading the dependency coordinates supplied by the build tool."""
from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from license_check.exceptions import ConfigurationError, CoordinateError
from license_check.models.coordinate import DependencyCoordinate

# First line of an mvn dependency:list output file
RESOLVED_HEADER = "The following files have been resolved:"
# Printed instead of entries when a project has no dependencies
NO_DEPENDENCIES = "none"
# Maven 3.9 appends the JPMS module name to each entry
MODULE_SUFFIX = " -- "


def unique_coordinates(
    coordinates: Iterable[DependencyCoordinate],
) -> list[DependencyCoordinate]:
    """Drop repeated coordinates, keeping the first occurrence of each."""
    return list(dict.fromkeys(coordinates))


def _coordinate_text(raw: str) -> Optional[str]:
    """Extract the coordinate from one line, or None for non-entry lines.

    Handles blank lines, ``#`` comments, the dependency:list header and
    ``none`` marker, a trailing `` -- module <name>`` and an ``(optional)``
    flag after the coordinate.
    """
    line = raw.strip()
    if not line or line.startswith("#"):
        return None
    if line == RESOLVED_HEADER or line == NO_DEPENDENCIES:
        return None
    line = line.split(MODULE_SUFFIX, 1)[0]
    return line.split()[0]


def parse_coordinates(lines: Iterable[str]) -> list[DependencyCoordinate]:
    """Parse dependency coordinates, one per line.

    Accepts plain ``g:a:v`` lines as well as the file written by
    ``mvn dependency:list -DoutputFile=...``. Order is preserved and
    repeated coordinates are kept only once.

    Raises:
        CoordinateError: If a line is not a valid coordinate; the message
            names the line number.
    """
    coordinates: list[DependencyCoordinate] = []

    for lineno, raw in enumerate(lines, start=1):
        text = _coordinate_text(raw)
        if text is None:
            continue
        try:
            coordinates.append(DependencyCoordinate.parse(text))
        except CoordinateError as e:
            raise CoordinateError(f"line {lineno}: {e}") from e

    return unique_coordinates(coordinates)


def read_coordinates(path: str) -> list[DependencyCoordinate]:
    """Read dependency coordinates from a file, or stdin when path is ``-``.

    Raises:
        ConfigurationError: If the file cannot be read.
        CoordinateError: If a line is not a valid coordinate.
    """
    if path == "-":
        return parse_coordinates(sys.stdin.read().splitlines())

    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read dependency file '{path}': {e}"
        ) from e

    return parse_coordinates(content.splitlines())
