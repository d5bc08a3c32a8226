"""Объявления MCP-инструментов и проверка их аргументов."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from ..errors import ToolArgumentsError


Number = Union[StrictInt, StrictFloat]

WEB_SEARCH = "brave_web_search"
LOCAL_SEARCH = "brave_local_search"
POI_DETAILS = "brave_poi_details"
POI_DESCRIPTIONS = "brave_poi_descriptions"


class ToolArgs(BaseModel):
    # Лишние ключи не считаются ошибкой.
    model_config = ConfigDict(extra="ignore", frozen=True)


class WebSearchArgs(ToolArgs):
    query: StrictStr
    count: Number = 10
    offset: Number = 0


class LocalSearchArgs(ToolArgs):
    query: StrictStr
    count: Number = 5


class PoiDetailsArgs(ToolArgs):
    ids: List[StrictStr]


class PoiDescriptionsArgs(ToolArgs):
    ids: List[StrictStr]


class ToolSpec(BaseModel):
    """Описание инструмента в формате ответа `tools/list`."""

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")
    arguments_model: Type[ToolArgs] = Field(exclude=True)
    expected: str = Field(exclude=True)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


_IDS_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
}


WEB_SEARCH_TOOL = ToolSpec(
    name=WEB_SEARCH,
    description=(
        "Performs a web search using the Brave Search API, ideal for general queries, "
        "news, articles, and online content. Use this for broad information gathering, "
        "recent events, or when you need diverse web sources. Supports pagination, "
        "content filtering, and freshness controls. Maximum 20 results per request, "
        "with offset for pagination. "
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query (max 400 chars, 50 words)",
            },
            "count": {
                "type": "number",
                "description": "Number of results (1-20, default 10)",
                "default": 10,
            },
            "offset": {
                "type": "number",
                "description": "Pagination offset (0-9, default 0)",
                "default": 0,
                "minimum": 0,
                "maximum": 9,
            },
        },
        "required": ["query"],
    },
    arguments_model=WebSearchArgs,
    expected="{ query: string, count?: number, offset?: number }",
)

LOCAL_SEARCH_TOOL = ToolSpec(
    name=LOCAL_SEARCH,
    description=(
        "Searches for local businesses and places using Brave's Local Search API. "
        "Best for queries related to physical locations, businesses, restaurants, "
        "services, etc. Returns detailed information including:\n"
        "- Business names and addresses\n"
        "- Ratings and review counts\n"
        "- Phone numbers and opening hours\n"
        "Use this when the query implies 'near me' or mentions specific locations. "
        "Automatically falls back to web search if no local results are found."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Local search query (e.g. 'pizza near Central Park')",
            },
            "count": {
                "type": "number",
                "description": "Number of results (1-20, default 5)",
                "default": 5,
                "minimum": 1,
                "maximum": 20,
            },
        },
        "required": ["query"],
    },
    arguments_model=LocalSearchArgs,
    expected="{ query: string, count?: number }",
)

POI_DETAILS_TOOL = ToolSpec(
    name=POI_DETAILS,
    description="Fetches detailed information for a list of Points of Interest (POIs) using their IDs.",
    inputSchema={
        "type": "object",
        "properties": {
            "ids": {
                **_IDS_SCHEMA,
                "description": "An array of Brave Place IDs for which to fetch details.",
            }
        },
        "required": ["ids"],
    },
    arguments_model=PoiDetailsArgs,
    expected="{ ids: string[] }",
)

POI_DESCRIPTIONS_TOOL = ToolSpec(
    name=POI_DESCRIPTIONS,
    description="Fetches descriptions for a list of Points of Interest (POIs) using their IDs.",
    inputSchema={
        "type": "object",
        "properties": {
            "ids": {
                **_IDS_SCHEMA,
                "description": "An array of Brave Place IDs for which to fetch descriptions.",
            }
        },
        "required": ["ids"],
    },
    arguments_model=PoiDescriptionsArgs,
    expected="{ ids: string[] }",
)


TOOL_SPECS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (WEB_SEARCH_TOOL, LOCAL_SEARCH_TOOL, POI_DETAILS_TOOL, POI_DESCRIPTIONS_TOOL)
}


def list_tool_specs() -> List[Dict[str, Any]]:
    return [spec.to_json() for spec in TOOL_SPECS.values()]


def get_tool_spec(name: str) -> ToolSpec:
    spec = TOOL_SPECS.get(name) if isinstance(name, str) else None
    if spec is None:
        raise ToolArgumentsError(f"Unknown tool requested: {name}", tool=name)
    return spec


def parse_tool_arguments(name: str, arguments: Any) -> ToolArgs:
    """Проверить произвольный ввод и вернуть типизированные аргументы.

    Неизвестное имя, отсутствующие аргументы и несоответствие схеме
    приводят к `ToolArgumentsError`.
    """

    spec = get_tool_spec(name)

    if arguments is None:
        raise ToolArgumentsError(f'Tool arguments are required for tool "{name}".', tool=name)

    invalid = f'Invalid arguments for tool "{name}". Expected: {spec.expected}'
    if not isinstance(arguments, Mapping):
        raise ToolArgumentsError(invalid, tool=name)

    try:
        return spec.arguments_model.model_validate(dict(arguments))
    except ValidationError as exc:
        raise ToolArgumentsError(invalid, tool=name) from exc


__all__ = [
    "LOCAL_SEARCH",
    "LOCAL_SEARCH_TOOL",
    "LocalSearchArgs",
    "POI_DESCRIPTIONS",
    "POI_DESCRIPTIONS_TOOL",
    "POI_DETAILS",
    "POI_DETAILS_TOOL",
    "PoiDescriptionsArgs",
    "PoiDetailsArgs",
    "TOOL_SPECS",
    "ToolArgs",
    "ToolSpec",
    "WEB_SEARCH",
    "WEB_SEARCH_TOOL",
    "WebSearchArgs",
    "get_tool_spec",
    "list_tool_specs",
    "parse_tool_arguments",
]
