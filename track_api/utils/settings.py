from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    allowed_origins: Tuple[str, ...] = ()
    request_logging: bool = True
    log_file: Optional[str] = None


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid PORT value: {raw}. Error: {e}. Using default: {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning(
            f"Invalid PORT value: {raw}. Must be between 1 and 65535. "
            f"Using default: {DEFAULT_PORT}"
        )
        return DEFAULT_PORT
    return port


def _parse_log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning(f"Invalid LOG_LEVEL value: {raw}. Using default: {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    origins = tuple(
        origin.strip()
        for origin in env.get("ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    )
    return Settings(
        host=env.get("HOST") or DEFAULT_HOST,
        port=_parse_port(env.get("PORT")),
        log_level=_parse_log_level(env.get("LOG_LEVEL")),
        allowed_origins=origins,
        request_logging=env.get("DISABLE_REQUEST_LOGGING", "").lower() != "true",
        log_file=env.get("LOG_FILE") or None,
    )
