import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastmcp import Client
from fastmcp.exceptions import ToolError

import brave_mcp
from brave_mcp import config
from brave_mcp.dispatch import ToolHandler, ToolResponse
from brave_mcp.errors import ConfigurationError
from brave_mcp.schemas.tools import list_tool_specs
from brave_mcp.services.client import BraveClient
from brave_mcp.tools import search as search_tools


@pytest.fixture
def anyio_backend():
    return "asyncio"


class RecordingHandler:
    def __init__(self, response):
        self.calls = []
        self._response = response

    async def call_tool(self, name, arguments=None):
        self.calls.append((name, arguments))
        return self._response


@pytest.fixture
def install_handler():
    def _install(response):
        handler = RecordingHandler(response)
        search_tools.set_handler(handler)
        return handler

    yield _install
    search_tools.set_handler(None)


@pytest.fixture
def upstream():
    """Настоящий `ToolHandler` поверх `BraveClient` с подменённым транспортом."""

    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={"web": {"results": [{"title": "hit", "url": "https://example.com", "description": "d"}]}},
        )

    client = BraveClient("test-key", transport=httpx.MockTransport(handler))
    search_tools.set_handler(ToolHandler(client))
    yield requests
    search_tools.set_handler(None)


async def _call(name, arguments):
    async with Client(brave_mcp.app) as client:
        return await client.call_tool_mcp(name, arguments)


@pytest.mark.anyio
async def test_app_lists_declared_tools():
    async with Client(brave_mcp.app) as client:
        tools = await client.list_tools()

    listed = [
        {"name": tool.name, "description": tool.description, "inputSchema": tool.input_schema}
        for tool in tools
    ]
    assert sorted(listed, key=lambda item: item["name"]) == sorted(
        list_tool_specs(), key=lambda item: item["name"]
    )


@pytest.mark.anyio
async def test_raw_arguments_reach_handler(install_handler):
    handler = install_handler(ToolResponse.text("Title: hit"))

    result = await _call("brave_web_search", {"query": "python"})

    assert result.is_error is False
    assert result.content[0].text == "Title: hit"
    assert handler.calls == [("brave_web_search", {"query": "python"})]


@pytest.mark.anyio
async def test_each_tool_forwards_to_handler(install_handler):
    handler = install_handler(ToolResponse.text("ok"))

    await _call("brave_local_search", {"query": "pizza", "count": 3})
    await _call("brave_poi_details", {"ids": ["a"]})
    await _call("brave_poi_descriptions", {"ids": ["b"]})

    assert handler.calls == [
        ("brave_local_search", {"query": "pizza", "count": 3}),
        ("brave_poi_details", {"ids": ["a"]}),
        ("brave_poi_descriptions", {"ids": ["b"]}),
    ]


@pytest.mark.anyio
async def test_web_search_end_to_end(upstream):
    result = await _call("brave_web_search", {"query": "python", "count": 3})

    assert result.is_error is False
    assert result.content[0].text.startswith("Title: hit")
    assert len(upstream) == 1
    assert upstream[0].url.params["count"] == "3"


@pytest.mark.anyio
async def test_missing_query_is_reported_by_dispatcher(upstream):
    result = await _call("brave_web_search", {"count": 3})

    assert result.is_error is True
    assert result.content[0].text.startswith('Invalid arguments for tool "brave_web_search".')
    assert upstream == []


@pytest.mark.anyio
async def test_string_count_is_rejected(upstream):
    result = await _call("brave_web_search", {"query": "x", "count": "10"})

    assert result.is_error is True
    assert result.content[0].text.startswith('Invalid arguments for tool "brave_web_search".')
    assert upstream == []


@pytest.mark.anyio
async def test_string_ids_are_rejected(upstream):
    result = await _call("brave_poi_details", {"ids": "poi1"})

    assert result.is_error is True
    assert result.content[0].text.startswith('Invalid arguments for tool "brave_poi_details".')
    assert upstream == []


@pytest.mark.anyio
async def test_unknown_tool_is_reported_by_dispatcher(upstream):
    result = await _call("nope", {"query": "x"})

    assert result.is_error is True
    assert result.content[0].text == "Unknown tool requested: nope"
    assert upstream == []


@pytest.mark.anyio
async def test_error_response_raises_tool_error(install_handler):
    install_handler(ToolResponse.text("Brave API Error (429): Rate limit exceeded: > 1/second", is_error=True))

    async with Client(brave_mcp.app) as client:
        with pytest.raises(ToolError, match=r"Brave API Error \(429\)"):
            await client.call_tool("brave_poi_details", {"ids": ["a"]})


def test_tools_are_built_from_declarations():
    assert set(search_tools.TOOLS) == {spec["name"] for spec in list_tool_specs()}
    for spec in list_tool_specs():
        tool = search_tools.TOOLS[spec["name"]]
        assert tool.parameters == spec["inputSchema"]
        assert tool.description == spec["description"]


def test_handler_requires_api_key(monkeypatch):
    search_tools.set_handler(None)
    monkeypatch.setattr(config, "BRAVE_API_KEY", None)

    with pytest.raises(ConfigurationError):
        search_tools.get_handler()


def test_handler_is_built_once(monkeypatch):
    search_tools.set_handler(None)
    monkeypatch.setattr(config, "BRAVE_API_KEY", "secret")

    try:
        first = search_tools.get_handler()
        assert search_tools.get_handler() is first
        assert first.client.headers["X-Subscription-Token"] == "secret"
    finally:
        search_tools.set_handler(None)
