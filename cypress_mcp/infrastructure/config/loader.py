import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from cypress_mcp.domain.value_objects.app_config import AppConfig

CONFIG_ENV_VAR = "CYPRESS_MCP_CONFIG"
DEFAULT_CONFIG_FILENAME = "cypress-mcp.config.yaml"

SECTIONS = ("cypress", "mcp", "security")


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return the config file location.

    Explicit path first, then $CYPRESS_MCP_CONFIG, then
    ./cypress-mcp.config.yaml.
    """
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def merge_sections(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge per section: keys from overrides win inside each
    section."""
    merged: dict[str, Any] = {}
    for section in SECTIONS:
        base = dict(defaults.get(section) or {})
        extra = overrides.get(section) or {}
        if not isinstance(extra, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        base.update(extra)
        merged[section] = base
    return merged


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration, falling back to defaults.

    A missing file is the normal case. An unreadable or invalid file is
    logged and ignored.
    """
    config_path = resolve_config_path(path)
    defaults = AppConfig().model_dump(by_alias=True)

    if not config_path.exists():
        logger.debug("No config file at {}, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ValueError("top-level YAML value must be a mapping")
        config = AppConfig.model_validate(merge_sections(defaults, file_config))
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.warning("Failed to load config from {}: {}", config_path, e)
        return AppConfig()

    logger.info("Loaded config from {}", config_path)
    return config
