"""Pydantic data models for license-check."""

from license_check.models.config import CheckConfig
from license_check.models.coordinate import DependencyCoordinate
from license_check.models.run import RunOutcome, RunStatus
from license_check.models.status import CheckOutcome, CoordinateCheck, LicenseStatus

__all__ = [
    "CheckConfig",
    "CheckOutcome",
    "CoordinateCheck",
    "DependencyCoordinate",
    "LicenseStatus",
    "RunOutcome",
    "RunStatus",
]
