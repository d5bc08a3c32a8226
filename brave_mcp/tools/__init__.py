"""Пакет с MCP-инструментами."""

from .search import (
    TOOLS,
    BraveSearchTool,
    UnknownToolMiddleware,
    get_handler,
    set_handler,
)


__all__ = [
    "BraveSearchTool",
    "TOOLS",
    "UnknownToolMiddleware",
    "get_handler",
    "set_handler",
]
