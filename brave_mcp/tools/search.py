"""MCP-инструменты поиска Brave.

Инструменты регистрируются из ``TOOL_SPECS``: клиент получает объявленные
``inputSchema``, а сырые аргументы вызова уходят в ``ToolHandler`` без
предварительной проверки FastMCP. Тексты ошибок формирует только диспетчер.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool, ToolResult

from .. import app
from ..dispatch import ToolHandler, ToolResponse
from ..schemas.tools import TOOL_SPECS, ToolSpec
from ..services.client import BraveClient


_handler: Optional[ToolHandler] = None


def get_handler() -> ToolHandler:
    """Вернуть активный обработчик, создав его из конфигурации при первом вызове."""

    global _handler
    if _handler is None:
        _handler = ToolHandler(BraveClient.from_config())
    return _handler


def set_handler(handler: Optional[ToolHandler]) -> None:
    global _handler
    _handler = handler


def _to_result(response: ToolResponse) -> ToolResult:
    return ToolResult(content=response.first_text, is_error=response.is_error)


async def call_handler(name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
    response = await get_handler().call_tool(name, arguments)
    return _to_result(response)


class BraveSearchTool(Tool):
    """Инструмент, передающий аргументы обработчику как есть."""

    @classmethod
    def from_spec(cls, spec: ToolSpec) -> "BraveSearchTool":
        return cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        return await call_handler(self.name, arguments)


class UnknownToolMiddleware(Middleware):
    """Отдаёт вызовы незарегистрированных инструментов обработчику."""

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> ToolResult:
        name = context.message.name
        if name not in TOOL_SPECS:
            return await call_handler(name, context.message.arguments)
        return await call_next(context)


TOOLS: Dict[str, BraveSearchTool] = {
    name: BraveSearchTool.from_spec(spec) for name, spec in TOOL_SPECS.items()
}

for _tool in TOOLS.values():
    app.add_tool(_tool)

app.add_middleware(UnknownToolMiddleware())


__all__ = [
    "BraveSearchTool",
    "TOOLS",
    "UnknownToolMiddleware",
    "call_handler",
    "get_handler",
    "set_handler",
]
