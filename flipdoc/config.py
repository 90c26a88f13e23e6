"""Runtime settings loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_PORT = 3000
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    """Settings for the HTTP service and command line tools."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def read_log_level(env: Mapping[str, str] | None = None) -> str:
    """Return the configured log level name without reading the other settings."""
    env = os.environ if env is None else env
    return env.get("FLIPDOC_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to ``os.environ``)."""
    env = os.environ if env is None else env
    origins = tuple(
        origin.strip() for origin in env.get("FLIPDOC_CORS_ORIGINS", "*").split(",") if origin.strip()
    )
    return Settings(
        host=env.get("FLIPDOC_HOST", "0.0.0.0"),
        port=_read_int(env, "PORT", DEFAULT_PORT),
        max_upload_bytes=_read_int(env, "FLIPDOC_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        cors_origins=origins or ("*",),
        log_level=read_log_level(env),
    )


__all__ = ["Settings", "load_settings", "read_log_level"]
