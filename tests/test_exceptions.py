"""Tests for custom exceptions."""

import pytest

from license_check.exceptions import (
    ConfigurationError,
    CoordinateError,
    LicenseCheckError,
    LookupFailure,
    ValidationFailure,
)
from license_check.models.coordinate import DependencyCoordinate


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type", [LookupFailure, ConfigurationError, ValidationFailure]
    )
    def test_inherits_from_base(self, exc_type: type) -> None:
        """Test that all errors derive from LicenseCheckError."""
        assert issubclass(exc_type, LicenseCheckError)

    def test_coordinate_error_is_configuration_error(self) -> None:
        """Test that bad coordinates are reported as configuration errors."""
        assert issubclass(CoordinateError, ConfigurationError)

    def test_validation_failure_names_coordinate(self) -> None:
        """Test the ValidationFailure message and attribute."""
        coordinate = DependencyCoordinate.parse("g:a:1.0")

        with pytest.raises(LicenseCheckError) as exc_info:
            raise ValidationFailure(coordinate)

        assert str(exc_info.value) == "could not validate license for artifact g:a:1.0"
        assert exc_info.value.coordinate == coordinate  # type: ignore[attr-defined]
