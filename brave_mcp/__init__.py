"""Основной пакет MCP-сервера Brave Search."""

from __future__ import annotations

from fastmcp import FastMCP


SERVER_NAME = "brave-search-mcp"
SERVER_VERSION = "0.2.0"

# Инициализация FastMCP-приложения доступна для импорта из пакета.
app = FastMCP(SERVER_NAME)


from . import config  # noqa: E402
from . import tools  # noqa: E402 - регистрация инструментов
from .dispatch import ToolHandler, ToolResponse  # noqa: E402
from .errors import (  # noqa: E402
    BraveApiError,
    BraveNetworkError,
    BraveSearchError,
    ConfigurationError,
    ErrorKind,
    RateLimitExceeded,
    ToolArgumentsError,
)
from .services.client import BraveClient  # noqa: E402
from .services.rate_limit import RateLimiter  # noqa: E402
from .tools import get_handler, set_handler  # noqa: E402


__all__ = [
    "BraveApiError",
    "BraveClient",
    "BraveNetworkError",
    "BraveSearchError",
    "ConfigurationError",
    "ErrorKind",
    "RateLimitExceeded",
    "RateLimiter",
    "SERVER_NAME",
    "SERVER_VERSION",
    "ToolArgumentsError",
    "ToolHandler",
    "ToolResponse",
    "app",
    "config",
    "get_handler",
    "set_handler",
    "tools",
]
