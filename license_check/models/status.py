"""License status models for single coordinate checks."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from license_check.constants import DECLARED_OK
from license_check.models.coordinate import DependencyCoordinate


class LicenseStatus(BaseModel):
    """License-status document returned by the validation server.

    The wire format uses ``licenseDeclared`` and ``license``; fields the
    server adds beyond those are ignored.
    """

    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}

    declared: str = Field(
        alias="licenseDeclared",
        description='"ok" when a license is declared, any other value otherwise',
    )
    license: str = Field(
        default="",
        description="Name of the declared license, possibly empty",
    )

    @field_validator("license", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @property
    def is_ok(self) -> bool:
        """True when the server reports a declared license."""
        return self.declared == DECLARED_OK


class CheckOutcome(Enum):
    """Classification of a single coordinate check."""

    PASS = "pass"
    FAIL = "fail"
    LOOKUP_ERROR = "lookup_error"


class CoordinateCheck(BaseModel):
    """Result of checking one dependency coordinate."""

    model_config = {"extra": "forbid", "frozen": True}

    coordinate: DependencyCoordinate
    outcome: CheckOutcome
    status: Optional[LicenseStatus] = Field(
        default=None,
        description="Server response (None when the lookup failed)",
    )
    message: str = Field(description="Narration line logged for this check")

    @property
    def passed(self) -> bool:
        """Check if the coordinate passed validation.

        Returns:
            True only for CheckOutcome.PASS. Lookup errors count as failures.
        """
        return self.outcome == CheckOutcome.PASS
