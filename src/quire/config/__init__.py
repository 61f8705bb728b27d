"""Configuration facade.

    from quire.config import QuireConfig, load_quire_config
"""

from quire.config.exceptions import ConfigError, ConfigValidationError
from quire.config.loader import ConfigLoader, load_quire_config
from quire.config.settings import (
    DEFAULT_RENDERED_EXTENSIONS,
    AuthorSettings,
    LoaderSettings,
    LoadOptions,
    PathsSettings,
    QuireConfig,
    SiteSettings,
)

__all__ = [
    "DEFAULT_RENDERED_EXTENSIONS",
    "AuthorSettings",
    "ConfigError",
    "ConfigLoader",
    "ConfigValidationError",
    "LoadOptions",
    "LoaderSettings",
    "PathsSettings",
    "QuireConfig",
    "SiteSettings",
    "load_quire_config",
]
