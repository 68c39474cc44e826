"""Validation run outcome models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from license_check.exceptions import ValidationFailure
from license_check.models.coordinate import DependencyCoordinate
from license_check.models.status import CoordinateCheck


class RunStatus(Enum):
    """Terminal state of a validation run."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED_OFFLINE = "skipped_offline"


class RunOutcome(BaseModel):
    """Aggregate result of a validation run."""

    model_config = {"extra": "forbid", "validate_assignment": True}

    status: RunStatus
    total_coordinates: int = Field(
        default=0, description="Number of coordinates actually checked"
    )
    failure_count: int = Field(default=0, description="Number of failed checks")
    checks: list[CoordinateCheck] = Field(
        default_factory=list,
        description="Checks in the order they were performed",
    )
    failed_coordinate: Optional[DependencyCoordinate] = Field(
        default=None,
        description="Coordinate that stopped the run (FAILURE only)",
    )

    @model_validator(mode="after")
    def check_failed_coordinate(self) -> RunOutcome:
        """Ensure a FAILURE names the coordinate that stopped the run.

        Raises:
            ValueError: If status is FAILURE without a failed coordinate.
        """
        if self.status == RunStatus.FAILURE and self.failed_coordinate is None:
            raise ValueError("a failed run must name its failed coordinate")
        return self

    @property
    def succeeded(self) -> bool:
        """True when the build may continue (success or offline skip)."""
        return self.status != RunStatus.FAILURE

    @classmethod
    def skipped_offline(cls) -> RunOutcome:
        """Outcome of a run that was skipped because it is offline."""
        return cls(status=RunStatus.SKIPPED_OFFLINE)

    @classmethod
    def from_checks(cls, checks: list[CoordinateCheck]) -> RunOutcome:
        """Create a RunOutcome from the checks performed.

        The run is a FAILURE if any check did not pass; the first such
        check names the failed coordinate.

        Args:
            checks: Checks in the order they were performed.

        Returns:
            RunOutcome with totals and terminal status.
        """
        failures = [check for check in checks if not check.passed]
        return cls(
            status=RunStatus.FAILURE if failures else RunStatus.SUCCESS,
            total_coordinates=len(checks),
            failure_count=len(failures),
            checks=checks,
            failed_coordinate=failures[0].coordinate if failures else None,
        )

    def raise_for_status(self) -> None:
        """Raise ValidationFailure if the run failed.

        Raises:
            ValidationFailure: Naming the coordinate that failed.
        """
        if self.status == RunStatus.FAILURE:
            raise ValidationFailure(self.failed_coordinate)
