"""Dependency coordinate model."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from license_check.exceptions import CoordinateError

# Resolved snapshot versions look like 1.0-20131201.123456-1
_TIMESTAMPED_SNAPSHOT = re.compile(r"^(?P<base>.+)-\d{8}\.\d{6}-\d+$")


def base_version(version: str) -> str:
    """Collapse a timestamped snapshot version to its ``-SNAPSHOT`` form.

    Args:
        version: Version string as resolved by the build tool.

    Returns:
        The base version, e.g. ``1.0-SNAPSHOT`` for ``1.0-20131201.123456-1``.
        Other versions are returned unchanged.
    """
    match = _TIMESTAMPED_SNAPSHOT.match(version)
    if match:
        return f"{match.group('base')}-SNAPSHOT"
    return version


class DependencyCoordinate(BaseModel):
    """The groupId:artifactId:version triple identifying a dependency."""

    model_config = {"extra": "forbid", "frozen": True}

    group_id: str = Field(min_length=1, description="Maven groupId")
    artifact_id: str = Field(min_length=1, description="Maven artifactId")
    version: str = Field(min_length=1, description="Base version")

    @property
    def key(self) -> str:
        """Coordinate in ``groupId:artifactId:version`` form."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def __str__(self) -> str:
        return self.key

    @classmethod
    def parse(cls, text: str) -> DependencyCoordinate:
        """Parse a coordinate string.

        Accepts ``g:a:v`` as well as the forms printed by
        ``mvn dependency:list``:

        - ``g:a:type:v``
        - ``g:a:type:v:scope``
        - ``g:a:type:classifier:v:scope``

        Args:
            text: Coordinate text.

        Returns:
            Parsed DependencyCoordinate with a base version.

        Raises:
            CoordinateError: If the text has an unsupported shape or
                an empty field.
        """
        parts = [part.strip() for part in text.strip().split(":")]

        if len(parts) == 3:
            group_id, artifact_id, version = parts
        elif len(parts) in (4, 5):
            group_id, artifact_id, version = parts[0], parts[1], parts[3]
        elif len(parts) == 6:
            group_id, artifact_id, version = parts[0], parts[1], parts[4]
        else:
            raise CoordinateError(
                f"Invalid dependency coordinate '{text}': "
                "expected groupId:artifactId:version"
            )

        if not all(parts):
            raise CoordinateError(
                f"Invalid dependency coordinate '{text}': empty field"
            )

        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=base_version(version),
        )
