"""Публичный интерфейс схем MCP-сервера."""

from .brave import (
    Coordinates,
    LocationRef,
    LocationRefs,
    PoiAddress,
    PoiDescriptionsResponse,
    PoiRating,
    PoiRecord,
    PoiResponse,
    WebResult,
    WebResults,
    WebSearchResponse,
)
from .tools import (
    TOOL_SPECS,
    LocalSearchArgs,
    PoiDescriptionsArgs,
    PoiDetailsArgs,
    ToolArgs,
    ToolSpec,
    WebSearchArgs,
    get_tool_spec,
    list_tool_specs,
    parse_tool_arguments,
)


__all__ = [
    "Coordinates",
    "LocalSearchArgs",
    "LocationRef",
    "LocationRefs",
    "PoiAddress",
    "PoiDescriptionsArgs",
    "PoiDescriptionsResponse",
    "PoiDetailsArgs",
    "PoiRating",
    "PoiRecord",
    "PoiResponse",
    "TOOL_SPECS",
    "ToolArgs",
    "ToolSpec",
    "WebResult",
    "WebResults",
    "WebSearchArgs",
    "WebSearchResponse",
    "get_tool_spec",
    "list_tool_specs",
    "parse_tool_arguments",
]
