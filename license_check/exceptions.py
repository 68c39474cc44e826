"""Custom exceptions for license-check."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from license_check.models.coordinate import DependencyCoordinate


class LicenseCheckError(Exception):
    """Base exception for all license-check errors."""

    pass


class LookupFailure(LicenseCheckError):
    """Exception raised when the validation server cannot be queried.

    Covers transport errors, non-2xx responses and response bodies that
    are not a valid license-status document.
    """

    pass


class ConfigurationError(LicenseCheckError):
    """Exception raised when configuration is invalid."""

    pass


class CoordinateError(ConfigurationError):
    """Exception raised when a dependency coordinate cannot be parsed."""

    pass


class ValidationFailure(LicenseCheckError):
    """Exception raised when a dependency fails license validation."""

    def __init__(self, coordinate: DependencyCoordinate) -> None:
        self.coordinate = coordinate
        super().__init__(f"could not validate license for artifact {coordinate}")
