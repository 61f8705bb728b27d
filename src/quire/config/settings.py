"""Configuration models for Quire.

Settings are read from ``.quire/config.yml`` under the site root and may be
overridden with environment variables of the form ``QUIRE_SECTION__KEY``
(for example ``QUIRE_SITE__URL=/blog/``).
"""

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_RENDERED_EXTENSIONS = ("md", "markdown", "j2", "jinja")
DEFAULT_SUMMARY_MARKER = "==="
DEFAULT_CONCURRENCY = 16
DEFAULT_STATIC_WORKERS = 8


class LoadOptions(BaseModel):
    """Switches for how file names are decoded into routes.

    Instances are frozen, so they can be shared freely between workers.
    """

    model_config = ConfigDict(frozen=True)

    date_from_filename: bool = Field(default=True, description="Decode a YYYY-M-D prefix into the date")
    order_from_filename: bool = Field(default=True, description="Decode an N. or N- prefix into the order")
    sanitize_path: bool = Field(default=True, description="Sanitize folder names in output paths")
    clean_urls: bool = Field(default=True, description="Serve foo.html as foo/index.html")
    insert_date_into_path: bool = Field(default=True, description="Insert year/month/day folders for dated documents")


class AuthorSettings(BaseModel):
    """Default author attached to every document."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str | None = None
    uri: str | None = None


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to ``site_root`` unless absolute.
    """

    site_root: Path = Field(default_factory=Path.cwd, description="Root directory of the site")
    documents_dir: Path = Field(default=Path("documents"), description="Content documents directory")
    files_dir: Path = Field(default=Path("files"), description="Static files directory")
    output_dir: Path = Field(default=Path("build"), description="Output directory")

    @property
    def abs_documents_dir(self) -> Path:
        return self._resolve(self.documents_dir)

    @property
    def abs_files_dir(self) -> Path:
        return self._resolve(self.files_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class SiteSettings(BaseModel):
    """Addressing and content conventions of the site."""

    url: str = Field(default="/", description="Application base URL that document URLs hang off")
    root_url: str = Field(default="", description="Scheme and host prepended to build absolute URLs")
    author: AuthorSettings | None = None
    timezone: str | None = Field(default=None, description="IANA timezone applied to naive dates")
    rendered_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RENDERED_EXTENSIONS),
        description="File extensions handled by a rendering engine",
    )
    summary_marker: str = Field(default=DEFAULT_SUMMARY_MARKER, description="Line that ends a document summary")

    @field_validator("rendered_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized = [ext.strip().lstrip(".").lower() for ext in value]
        return [ext for ext in normalized if ext]

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Invalid timezone '{value}': {exc}"
            raise ValueError(msg) from exc
        return value

    @property
    def zone(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


class LoaderSettings(BaseModel):
    """Concurrency limits for loading documents and copying files."""

    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1, description="Documents parsed at once")
    static_workers: int = Field(default=DEFAULT_STATIC_WORKERS, ge=1, description="Threads copying static files")


class QuireConfig(BaseSettings):
    """Root configuration for Quire.

    Keyword arguments carry the values of the site's config file. Environment
    variables named ``QUIRE_SECTION__KEY`` (e.g. ``QUIRE_OPTIONS__CLEAN_URLS=false``)
    rank above them, key by key.
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)
    options: LoadOptions = Field(default_factory=LoadOptions)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="QUIRE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings


__all__ = [
    "DEFAULT_RENDERED_EXTENSIONS",
    "AuthorSettings",
    "LoadOptions",
    "LoaderSettings",
    "PathsSettings",
    "QuireConfig",
    "SiteSettings",
]
