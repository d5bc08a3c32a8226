"""Иерархия ошибок MCP-сервера Brave Search."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    UPSTREAM_API = "upstream_api"
    NETWORK = "network"
    INTERNAL = "internal"


class BraveSearchError(Exception):
    """Базовая ошибка пакета."""

    kind: ErrorKind = ErrorKind.INTERNAL


class ToolArgumentsError(BraveSearchError, ValueError):
    """Аргументы инструмента не прошли проверку.

    Обнаруживается локально, до любого сетевого вызова.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, *, tool: Optional[str] = None) -> None:
        super().__init__(message)
        self.tool = tool


class BraveApiError(BraveSearchError):
    """Ошибка обращения к Brave Search API."""

    kind = ErrorKind.UPSTREAM_API

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details


class RateLimitExceeded(BraveApiError):
    kind = ErrorKind.RATE_LIMIT

    def __init__(self, endpoint: str) -> None:
        super().__init__("Rate limit exceeded: > 1/second", 429)
        self.endpoint = endpoint


class BraveNetworkError(BraveApiError):
    kind = ErrorKind.NETWORK

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationError(RuntimeError):
    """Сервер нельзя запустить с текущим окружением."""


__all__ = [
    "BraveApiError",
    "BraveNetworkError",
    "BraveSearchError",
    "ConfigurationError",
    "ErrorKind",
    "RateLimitExceeded",
    "ToolArgumentsError",
]
