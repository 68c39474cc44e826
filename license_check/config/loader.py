"""Resolve the run configuration from a YAML file and command line options.

Precedence, lowest first: built-in defaults, the configuration file
(``--config`` or a discovered ``.license-check.yaml``), command line options.
The file accepts the plugin-style key ``notificationEmail`` as well as
``notification_email``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from license_check.constants import CONFIG_FILE_NAMES
from license_check.exceptions import ConfigurationError
from license_check.models.config import CheckConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first of CONFIG_FILE_NAMES present in ``start_dir``.

    Args:
        start_dir: Directory to search. Defaults to current working directory.
    """
    search_dir = start_dir or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        if (search_dir / name).exists():
            return search_dir / name
    return None


def read_settings(path: Path) -> dict[str, Any]:
    """Read the settings mapping from a YAML configuration file.

    An empty file, or one holding only comments, yields no settings.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or its top level is not a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def _validate(settings: dict[str, Any], context: str) -> CheckConfig:
    try:
        return CheckConfig.model_validate(settings)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"{context}: {problems}") from e


def load_config(
    config_path: str | None = None, **overrides: Optional[Any]
) -> CheckConfig:
    """Build the run configuration.

    Args:
        config_path: Explicit configuration file. When omitted, a file is
            looked up in the current directory; without one, defaults apply.
        **overrides: Command line values (``offline``, ``host``,
            ``notification_email``). None means the option was not given.

    Returns:
        Validated CheckConfig.

    Raises:
        ConfigurationError: If the file or an option value is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file()

    config = CheckConfig()
    if path is not None:
        config = _validate(read_settings(path), f"Invalid configuration in '{path}'")

    options = {key: value for key, value in overrides.items() if value is not None}
    if not options:
        return config
    return _validate({**config.model_dump(), **options}, "Invalid option")
