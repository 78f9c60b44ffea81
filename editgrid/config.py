"""Configuration system for editgrid using pydantic-settings.

Supports layered configuration:
1. Built-in defaults (lowest priority)
2. pyproject.toml [tool.editgrid] section (project-level)
3. ./editgrid.toml (project-level, explicit)
4. ~/.config/editgrid/config.toml (user-level, overrides project)
5. The file named by EDITGRID_CONFIG_FILE
6. Environment variables (highest priority)

Environment variables use EDITGRID_ prefix with nested delimiter __.
Example: EDITGRID_GRID__PAGE_SIZE=25, EDITGRID_LOG__LEVEL=DEBUG
"""

from __future__ import annotations

import os
import sys

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .log import set_format, set_level, warn


if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_SHORT_MONTH_NAMES: list[str] = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def config_file_candidates() -> list[tuple[str, Path]]:
    """Configuration files editgrid reads, lowest precedence first.

    Returns
    -------
    list[tuple[str, Path]]
        A short label and the path of each candidate, whether or not it exists.
    """
    if sys.platform == "win32":
        user_config = Path(os.environ.get("APPDATA", "~")) / "editgrid" / "config.toml"
    else:
        user_config = Path("~/.config/editgrid/config.toml")

    candidates = [
        ("pyproject.toml [tool.editgrid]", Path("pyproject.toml")),
        ("project", Path("editgrid.toml")),
        ("user", user_config.expanduser()),
    ]
    env_config = os.environ.get("EDITGRID_CONFIG_FILE")
    if env_config:
        candidates.append(("EDITGRID_CONFIG_FILE", Path(env_config)))
    return candidates


def _find_config_files() -> list[Path]:
    """Find all existing configuration files in order of precedence (lowest first)."""
    return [path for _, path in config_file_candidates() if path.exists()]


def _load_toml_config() -> dict[str, Any]:
    """Load and merge all TOML configuration files."""
    merged: dict[str, Any] = {}

    for config_file in _find_config_files():
        try:
            data = tomllib.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            warn(f"Ignoring unreadable config file {config_file}: {exc}")
            continue

        if config_file.name == "pyproject.toml":
            data = data.get("tool", {}).get("editgrid", {})

        merged = _deep_merge(merged, data)

    return merged


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class TomlFilesSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading the merged TOML configuration files."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return _load_toml_config()


class GridSettings(BaseSettings):
    """Default options for every EditableGrid.

    Environment prefix: EDITGRID_GRID__
    Example: EDITGRID_GRID__IGNORE_LAST_ROW=true
    """

    model_config = SettingsConfigDict(
        env_prefix="EDITGRID_GRID__",
        extra="ignore",
    )

    enable_sort: bool = True
    ignore_last_row: bool = Field(
        default=False,
        description="Keep the last row (typically a totals row) at the bottom when sorting.",
    )
    page_size: int = Field(default=0, ge=0, description="Rows per page, 0 disables pagination.")
    date_format: Literal["EU", "US"] = "EU"
    short_month_names: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SHORT_MONTH_NAMES)
    )
    strict: bool = Field(
        default=False,
        description="Raise usage errors instead of logging them and returning a sentinel.",
    )

    @field_validator("short_month_names", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Accept a comma-separated string (from env var) or a list."""
        if isinstance(v, str):
            v = [name.strip() for name in v.split(",") if name.strip()]
        if not isinstance(v, list):
            msg = f"short_month_names must be a list or comma-separated string, got {type(v).__name__}"
            raise TypeError(msg)
        if len(v) != 12:
            raise ValueError(f"short_month_names needs 12 entries, got {len(v)}")
        return v


class LogSettings(BaseSettings):
    """Logging settings.

    Environment prefix: EDITGRID_LOG__
    Example: EDITGRID_LOG__LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="EDITGRID_LOG__",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(name)s - %(levelname)s - %(message)s"


class EditGridSettings(BaseSettings):
    """Main settings aggregating all configuration sections.

    Environment prefix: EDITGRID_

    Configuration sources (in order of precedence):
    1. Built-in defaults
    2. pyproject.toml [tool.editgrid] section
    3. ./editgrid.toml (project-level)
    4. ~/.config/editgrid/config.toml (user-level, overrides project)
    5. The file named by EDITGRID_CONFIG_FILE
    6. Environment variables
    7. Keyword arguments (highest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="EDITGRID_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    grid: GridSettings = Field(default_factory=GridSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Explicit arguments, then environment, then TOML files."""
        return (init_settings, env_settings, TomlFilesSettingsSource(settings_cls))

    def to_toml(self) -> str:
        """Export settings as TOML string."""
        lines = ["# editgrid configuration", "# Generated by: editgrid config --toml", ""]

        for section_name, section_data in self.model_dump().items():
            lines.append(f"[{section_name}]")
            for field_name, field_value in section_data.items():
                if isinstance(field_value, list):
                    value_str = "[" + ", ".join(f'"{v}"' for v in field_value) + "]"
                elif isinstance(field_value, bool):
                    value_str = "true" if field_value else "false"
                elif isinstance(field_value, str):
                    value_str = f'"{field_value}"'
                else:
                    value_str = str(field_value)
                lines.append(f"{field_name} = {value_str}")
            lines.append("")

        return "\n".join(lines)

    def to_env(self) -> str:
        """Export settings as shell environment variables."""
        lines = [
            "# editgrid environment variables",
            "# Generated by: editgrid config --env",
            "",
        ]

        for section_name, section_data in self.model_dump().items():
            for field_name, field_value in section_data.items():
                env_name = f"EDITGRID_{section_name.upper()}__{field_name.upper()}"
                if isinstance(field_value, list):
                    value_str = ",".join(str(v) for v in field_value)
                elif isinstance(field_value, bool):
                    value_str = "true" if field_value else "false"
                else:
                    value_str = str(field_value)
                lines.append(f'export {env_name}="{value_str}"')

        return "\n".join(lines)


@lru_cache(maxsize=1)
def get_settings() -> EditGridSettings:
    """Get the global settings instance (cached).

    Loading the settings also applies the configured log level and format.
    Call clear_settings() to reload configuration.
    """
    settings = EditGridSettings()
    set_level(settings.log.level)
    set_format(settings.log.format)
    return settings


def clear_settings() -> None:
    """Clear the cached settings to force reload."""
    get_settings.cache_clear()


def reload_settings() -> EditGridSettings:
    """Reload settings from all sources."""
    clear_settings()
    return get_settings()
