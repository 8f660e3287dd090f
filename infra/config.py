"""Centralized application configuration with schema validation.

Settings are read from a local ``.env`` file first and then from the process
environment (process values win). Both flat names (for example
``REPORT_PAGE_SIZE``) and nested names (for example ``REPORTER__PAGE_SIZE``)
are accepted.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from threading import Lock

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


def _parse_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return default


class LoggingSettings(BaseModel):
    """Repository-wide logging settings."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    override_root_handlers: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        text = str(value or "").strip().upper()
        if text in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return text
        return "INFO"


class ReporterConfig(BaseModel):
    """Frame materialization defaults."""

    model_config = ConfigDict(frozen=True)

    # 0 disables paging: everything lands in one frame
    page_size: int = Field(default=0, ge=0)
    log_frames: bool = Field(default=False)

    @field_validator("log_frames", mode="before")
    @classmethod
    def _normalize_log_frames(cls, value: object) -> bool:
        return _parse_bool(value, False)


class Settings(BaseModel):
    """Top-level settings model."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    reporter: ReporterConfig = Field(default_factory=ReporterConfig)

    @classmethod
    def from_env(
        cls,
        *,
        env: Mapping[str, str] | None = None,
        env_file: str = ".env",
    ) -> Settings:
        """Build settings from `.env` then environment variables."""
        runtime_env = os.environ if env is None else env
        merged_env = _merge_env(_load_dotenv(Path(env_file)), runtime_env)
        payload = _build_payload(merged_env)
        return cls.model_validate(payload)


def _load_dotenv(path: Path) -> dict[str, str]:
    """Parse a minimal `.env` file format."""
    if not path.exists() or not path.is_file():
        return {}

    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        key_clean = key.strip()
        value = raw_value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        if key_clean:
            values[key_clean] = value
    return values


def _merge_env(dotenv_values: Mapping[str, str], runtime_env: Mapping[str, str]) -> dict[str, str]:
    """Return env map where process env overrides `.env` values."""
    merged = {str(k): str(v) for k, v in dotenv_values.items()}
    for key, value in runtime_env.items():
        merged[str(key)] = str(value)
    return merged


def _first_non_empty(env: Mapping[str, str], *keys: str) -> str | None:
    """Return the first non-empty value for the provided keys."""
    for key in keys:
        value = str(env.get(key, "")).strip()
        if value:
            return value
    return None


def _build_payload(env: Mapping[str, str]) -> dict[str, object]:
    """Build nested settings payload from env values."""
    logging_settings = {
        "level": _first_non_empty(env, "LOGGING__LEVEL", "REPORT_LOG_LEVEL"),
        "json_logs": _first_non_empty(env, "LOGGING__JSON_LOGS", "REPORT_LOG_JSON"),
        "override_root_handlers": _first_non_empty(
            env, "LOGGING__OVERRIDE_ROOT_HANDLERS", "REPORT_LOG_OVERRIDE"
        ),
    }
    reporter = {
        "page_size": _first_non_empty(env, "REPORTER__PAGE_SIZE", "REPORT_PAGE_SIZE"),
        "log_frames": _first_non_empty(env, "REPORTER__LOG_FRAMES", "REPORT_LOG_FRAMES"),
    }
    return {
        "logging": {k: v for k, v in logging_settings.items() if v is not None},
        "reporter": {k: v for k, v in reporter.items() if v is not None},
    }


_SETTINGS_LOCK = Lock()
_SETTINGS_CACHE: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """Return cached settings, optionally forcing reload from env."""
    global _SETTINGS_CACHE
    with _SETTINGS_LOCK:
        if reload or _SETTINGS_CACHE is None:
            _SETTINGS_CACHE = Settings.from_env()
        return _SETTINGS_CACHE


def clear_settings_cache() -> None:
    """Clear in-process settings cache."""
    global _SETTINGS_CACHE
    with _SETTINGS_LOCK:
        _SETTINGS_CACHE = None


__all__ = [
    "LoggingSettings",
    "ReporterConfig",
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "ValidationError",
]
