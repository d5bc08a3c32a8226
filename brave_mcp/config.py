"""Конфигурация и загрузка окружения MCP-сервера Brave Search."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .errors import ConfigurationError


DEFAULT_API_BASE_URL = "https://api.search.brave.com/res/v1/"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_default(name: str, fallback: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return fallback
    trimmed = value.strip()
    return trimmed or fallback


def _env_optional(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _env_float(name: str) -> Optional[float]:
    raw = _env_optional(name)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def reload_from_env() -> None:
    global BRAVE_API_KEY, BRAVE_API_BASE_URL, BRAVE_HTTP_TIMEOUT, LOG_LEVEL

    BRAVE_API_KEY = _env_optional("BRAVE_API_KEY")
    BRAVE_API_BASE_URL = _env_default("BRAVE_API_BASE_URL", DEFAULT_API_BASE_URL)
    # Без значения запросы к API выполняются без таймаута.
    BRAVE_HTTP_TIMEOUT = _env_float("BRAVE_HTTP_TIMEOUT")
    LOG_LEVEL = _env_default("LOG_LEVEL", "info").lower()


def require_api_key() -> str:
    """Вернуть ключ API или сообщить о невозможности запуска."""

    if not BRAVE_API_KEY:
        raise ConfigurationError("BRAVE_API_KEY environment variable is not set")
    return BRAVE_API_KEY


def configure_logging(level: Optional[str] = None) -> None:
    """Настроить корневой логгер.

    Логи пишутся в stderr: stdout занят stdio-транспортом MCP.
    """

    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr, force=True)


reload_from_env()


__all__ = [
    "BRAVE_API_BASE_URL",
    "BRAVE_API_KEY",
    "BRAVE_HTTP_TIMEOUT",
    "DEFAULT_API_BASE_URL",
    "LOG_LEVEL",
    "configure_logging",
    "reload_from_env",
    "require_api_key",
    "_env_default",
    "_env_optional",
]
