"""Configuration handling for license-check."""
from __future__ import annotations

from license_check.config.loader import find_config_file, load_config, read_settings
from license_check.models.config import CheckConfig

__all__ = [
    "CheckConfig",
    "find_config_file",
    "load_config",
    "read_settings",
]
