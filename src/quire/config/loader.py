"""Reading ``.quire/config.yml`` into a validated QuireConfig."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quire.config.exceptions import ConfigError, ConfigValidationError
from quire.config.settings import QuireConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(".quire") / "config.yml"


def read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping stored in ``path``, or ``{}`` when the file is absent.

    Raises:
        ConfigError: If the file is not valid YAML or its root is not a mapping.

    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No %s found, using defaults", path)
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Configuration root of {path} must be a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return data


class ConfigLoader:
    """Builds the configuration of one site.

    The config file is handed to :class:`QuireConfig` as keyword data, so
    environment variables still take precedence over it key by key.
    """

    def __init__(self, site_root: Path | None = None) -> None:
        self.site_root = site_root if site_root is not None else Path.cwd()

    @property
    def config_path(self) -> Path:
        return self.site_root / CONFIG_FILE

    def load(self) -> QuireConfig:
        data = read_config_file(self.config_path)

        paths = data.get("paths") or {}
        if not isinstance(paths, dict):
            msg = f"Configuration 'paths' must be a mapping, got {type(paths).__name__}"
            raise ConfigError(msg)
        data["paths"] = {**paths, "site_root": self.site_root}

        try:
            return QuireConfig(**data)
        except ValidationError as e:
            raise ConfigValidationError(e.errors(include_url=False)) from e


def load_quire_config(site_root: Path | None = None) -> QuireConfig:
    """Load the configuration of the site at ``site_root``."""
    return ConfigLoader(site_root).load()
