"""Settings for the command-line front end.

Values come from, in increasing precedence: defaults, ``SERIKO_*``
environment variables, an optional TOML file and explicit overrides.
The parser itself takes no configuration.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputFormat = Literal["tree", "json", "summary"]


class SerikoSettings(BaseSettings):
    """Options controlling how documents are reported."""

    model_config = SettingsConfigDict(
        env_prefix="SERIKO_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="WARNING", description="Logging level")
    output_format: OutputFormat = Field(
        default="tree",
        description="How `seriko inspect` renders a document",
    )
    show_comments: bool = Field(
        default=False,
        description="Include comment lines in rendered output",
    )

    @field_validator("log_level", "output_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept `debug` as well as `DEBUG`, `JSON` as well as `json`."""
        if not isinstance(v, str):
            return v
        if info.field_name == "log_level":
            return v.strip().upper()
        return v.strip().lower()


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _settings_section(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``[tool.seriko]`` when present, else the top-level table."""
    tool = data.get("tool")
    if isinstance(tool, dict) and isinstance(tool.get("seriko"), dict):
        return dict(tool["seriko"])
    return {key: value for key, value in data.items() if key != "tool"}


def load_settings(config_path: Optional[Path] = None, **overrides: Any) -> SerikoSettings:
    """Build settings from the environment, ``config_path`` and ``overrides``.

    ``None`` overrides are ignored so unset command-line options fall
    through to the lower layers.
    """
    values: Dict[str, Any] = {}
    if config_path is not None:
        values.update(_settings_section(_read_toml_config(Path(config_path))))
    values.update({key: value for key, value in overrides.items() if value is not None})
    return SerikoSettings(**values)


__all__ = ["SerikoSettings", "load_settings", "LogLevel", "OutputFormat"]
