"""Configuration loader for recordkit.

Configuration is read from a YAML file and then adjusted by environment
variables:

- ``RECORDKIT_CONFIG``: path of the configuration file
- ``RECORDKIT_STRICT_TYPES``: overrides ``strict_types``
- ``RECORDKIT_NULL_AS_ABSENT``: overrides ``null_as_absent``
- ``RECORDKIT_INACCESSIBLE_INPUT``: overrides ``inaccessible_input``
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import RecordkitConfigModel

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "recordkit.yml"

_TRUE_VALUES = ("1", "true", "yes")
_FALSE_VALUES = ("0", "false", "no")


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_var, key in (
        ("RECORDKIT_STRICT_TYPES", "strict_types"),
        ("RECORDKIT_NULL_AS_ABSENT", "null_as_absent"),
    ):
        value = os.environ.get(env_var, "").strip().lower()
        if value in _TRUE_VALUES:
            overrides[key] = True
        elif value in _FALSE_VALUES:
            overrides[key] = False
        elif value:
            logger.warning(f"Ignoring unrecognized value for {env_var}: {value!r}")

    inaccessible = os.environ.get("RECORDKIT_INACCESSIBLE_INPUT", "").strip().lower()
    if inaccessible:
        overrides["inaccessible_input"] = inaccessible
    return overrides


def load_config(config_path: Path | str | None = None) -> RecordkitConfigModel:
    """Load recordkit configuration.

    Args:
        config_path: Optional path to the configuration file.
                    If not provided, looks for:
                    1. RECORDKIT_CONFIG environment variable
                    2. ./recordkit.yml

    Returns:
        RecordkitConfigModel with file settings and environment overrides applied

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the config is invalid
    """
    if config_path is None:
        env_path = os.environ.get("RECORDKIT_CONFIG")
        if env_path:
            config_path = Path(env_path)
        else:
            candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if candidate.exists():
                config_path = candidate

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found at {config_path}")

        logger.debug(f"Loading config from: {config_path}")
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e

        if loaded is None:
            logger.info("Empty config file, using defaults")
        elif not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        else:
            raw_config = loaded
    else:
        logger.debug("No config file found, using defaults")

    raw_config.update(_env_overrides())

    try:
        return RecordkitConfigModel.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Invalid recordkit config: {e}") from e
