"""Configuration models and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError


class ClientConfig(BaseModel):
    """HTTP client settings."""

    api_version: str = "2024-01"
    timeout_seconds: float = Field(default=10.0, gt=0)


class LogConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseModel):
    """Top-level settings."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    log: LogConfig = Field(default_factory=LogConfig)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {path}", cause=e) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {path}", cause=e) from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


def load(path: Path) -> Settings:
    """Load settings from a YAML file.

    Missing sections fall back to their defaults; an empty file yields the
    default settings.
    """
    data = _read_yaml(path)
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed: {e}", cause=e) from e
