"""Configuration loading and validation for the voice page stub."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from infra.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    """Stub settings loaded from environment variables."""

    selector_timeout_ms: int = 1000
    function_timeout_ms: int = 10000
    selector_poll_interval_s: float = 0.01
    function_poll_interval_s: float = 0.05
    log_path: str = "/var/log/voicestub.log"
    log_level: str = "INFO"


def load_dotenv(path: str = ".env") -> None:
    """Load .env key-value pairs into environment without overriding existing values."""
    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export ") :].strip()
        value = value.strip()
        if len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]:
            value = value[1:-1]
        os.environ.setdefault(key, value)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Load and validate stub settings from environment."""
    source = os.environ if env is None else env
    try:
        settings = Settings(
            selector_timeout_ms=int(source.get("STUB_SELECTOR_TIMEOUT_MS", 1000)),
            function_timeout_ms=int(source.get("STUB_FUNCTION_TIMEOUT_MS", 10000)),
            selector_poll_interval_s=float(source.get("STUB_SELECTOR_POLL_INTERVAL_S", 0.01)),
            function_poll_interval_s=float(source.get("STUB_FUNCTION_POLL_INTERVAL_S", 0.05)),
            log_path=source.get("STUB_LOG_PATH", "/var/log/voicestub.log"),
            log_level=source.get("STUB_LOG_LEVEL", "INFO").upper(),
        )
    except ValueError as exc:
        raise ConfigError(f"Invalid numeric setting: {exc}") from exc
    _validate(settings)
    return settings


def _validate(settings: Settings) -> None:
    if settings.selector_timeout_ms < 0:
        raise ConfigError("STUB_SELECTOR_TIMEOUT_MS must not be negative")
    if settings.function_timeout_ms < 0:
        raise ConfigError("STUB_FUNCTION_TIMEOUT_MS must not be negative")
    if settings.selector_poll_interval_s <= 0:
        raise ConfigError("STUB_SELECTOR_POLL_INTERVAL_S must be positive")
    if settings.function_poll_interval_s <= 0:
        raise ConfigError("STUB_FUNCTION_POLL_INTERVAL_S must be positive")
    if not settings.log_path:
        raise ConfigError("STUB_LOG_PATH must not be empty")
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ConfigError(f"STUB_LOG_LEVEL '{settings.log_level}' is not a logging level")
