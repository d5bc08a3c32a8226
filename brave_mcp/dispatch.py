"""Единая точка вызова инструментов: проверка, выполнение, конверт ответа."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .errors import BraveApiError, ErrorKind
from .schemas import (
    LocalSearchArgs,
    PoiDescriptionsArgs,
    PoiDetailsArgs,
    ToolArgs,
    WebSearchArgs,
    list_tool_specs,
    parse_tool_arguments,
)
from .services import search as search_services
from .services.client import BraveClient


logger = logging.getLogger(__name__)


class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolResponse(BaseModel):
    """Конверт ответа `tools/call`."""

    content: List[TextContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def text(cls, text: str, *, is_error: bool = False) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @property
    def first_text(self) -> str:
        return self.content[0].text if self.content else ""

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def format_error(exc: BaseException) -> str:
    """Текст ошибки для пользователя, выбранный по виду ошибки."""

    kind = getattr(exc, "kind", ErrorKind.INTERNAL)

    if kind is ErrorKind.VALIDATION:
        return str(exc)

    if isinstance(exc, BraveApiError) and kind in (
        ErrorKind.UPSTREAM_API,
        ErrorKind.RATE_LIMIT,
        ErrorKind.NETWORK,
    ):
        status = exc.status if exc.status is not None else "N/A"
        details = f" - {exc.details}" if exc.details else ""
        return f"Brave API Error ({status}): {exc.message}{details}"

    return f"Internal Server Error: {exc}"


class ToolHandler:
    """Обработчик `tools/list` и `tools/call` поверх `BraveClient`."""

    def __init__(self, client: BraveClient) -> None:
        self.client = client

    def list_tools(self) -> Dict[str, Any]:
        return {"tools": list_tool_specs()}

    async def _execute(self, args: ToolArgs) -> str:
        if isinstance(args, WebSearchArgs):
            return await search_services.perform_web_search(
                self.client, args.query, args.count, args.offset
            )
        if isinstance(args, LocalSearchArgs):
            return await search_services.perform_local_search(self.client, args.query, args.count)
        if isinstance(args, PoiDetailsArgs):
            return await search_services.perform_poi_details(self.client, list(args.ids))
        if isinstance(args, PoiDescriptionsArgs):
            return await search_services.perform_poi_descriptions(self.client, list(args.ids))
        raise TypeError(f"Unsupported tool arguments: {type(args).__name__}")

    async def call_tool(self, name: str, arguments: Any = None) -> ToolResponse:
        logger.debug("Received CallToolRequest: tool=%s, args=%r", name, arguments)

        try:
            args = parse_tool_arguments(name, arguments)
            results = await self._execute(args)
        except Exception as exc:
            if getattr(exc, "kind", None) is ErrorKind.VALIDATION:
                logger.info("Rejected call to tool %r: %s", name, exc)
            else:
                logger.error("Error executing tool %r: %s", name, exc, exc_info=True)
            return ToolResponse.text(format_error(exc), is_error=True)

        logger.debug("Tool %r executed successfully. Result length: %d", name, len(results))
        return ToolResponse.text(results)


__all__ = ["TextContent", "ToolHandler", "ToolResponse", "format_error"]
