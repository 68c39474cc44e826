"""Configuration Pydantic models for license-check."""
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from license_check.constants import DEFAULT_HOST


class CheckConfig(BaseModel):
    """Configuration for a validation run.

    ``host`` is used as a URL prefix: the coordinate is appended to it
    verbatim, so it normally ends with ``/`` or ``=``.
    """

    model_config = {"extra": "forbid"}

    offline: bool = Field(
        default=False,
        description="Skip validation entirely (no network calls).",
    )
    host: str = Field(
        default=DEFAULT_HOST,
        min_length=1,
        description="Base URL of the validation server.",
    )
    notification_email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("notification_email", "notificationEmail"),
        description="Address the server should notify when a library "
        "becomes available.",
    )
