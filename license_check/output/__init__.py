"""Output handling for license-check."""

from license_check.output.log import ERROR, INFO, RunLog

__all__ = [
    "ERROR",
    "INFO",
    "RunLog",
]
