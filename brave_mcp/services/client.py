"""Клиент Brave Search API с ограничением частоты запросов."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

from .. import config
from ..errors import BraveApiError, BraveNetworkError, RateLimitExceeded
from ..schemas import PoiDescriptionsResponse, PoiResponse, WebSearchResponse
from .rate_limit import RateLimiter, endpoint_from_url


logger = logging.getLogger(__name__)

MAX_COUNT = 20
MAX_OFFSET = 9
ERROR_DETAIL_LIMIT = 200

T_Response = TypeVar("T_Response", bound=BaseModel)
QueryParams = List[Tuple[str, str]]


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _paging_params(count: Optional[float], offset: Optional[float]) -> QueryParams:
    params: QueryParams = []
    if _is_finite_number(count):
        params.append(("count", _format_number(min(count, MAX_COUNT))))
    if _is_finite_number(offset):
        params.append(("offset", _format_number(max(0, min(offset, MAX_OFFSET)))))
    return params


def _ids_params(ids: Iterable[Optional[str]]) -> QueryParams:
    return [("ids", poi_id) for poi_id in ids if poi_id]


class BraveClient:
    """Асинхронный клиент REST-эндпоинтов Brave Search.

    Перед каждым запросом спрашивает `RateLimiter`; отказ превращается в
    `RateLimitExceeded` без обращения к сети. HTTP-ошибки и сбои транспорта
    приводятся к `BraveApiError`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = config.DEFAULT_API_BASE_URL,
        limiter: Optional[RateLimiter] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise ValueError("api_key must be a non-empty string")
        self._api_key = api_key
        self._base_url = httpx.URL(base_url if base_url.endswith("/") else base_url + "/")
        self.limiter = limiter if limiter is not None else RateLimiter()
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, **kwargs: Any) -> "BraveClient":
        kwargs.setdefault("base_url", config.BRAVE_API_BASE_URL)
        kwargs.setdefault("timeout", config.BRAVE_HTTP_TIMEOUT)
        return cls(config.require_api_key(), **kwargs)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self._api_key,
        }

    def url_for(self, path: str) -> httpx.URL:
        return self._base_url.join(path)

    async def _call(self, path: str, params: QueryParams) -> Any:
        url = self.url_for(path)
        endpoint = endpoint_from_url(url)
        if not self.limiter.check(endpoint):
            logger.debug("Rate limit hit for endpoint %s", endpoint)
            raise RateLimitExceeded(endpoint)

        logger.debug("Calling Brave API: %s", url.copy_with(params=params))

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=self.headers)

                if not response.is_success:
                    error_text = response.text
                    logger.debug("Brave API error response: %s", error_text)
                    raise BraveApiError(
                        "API request failed",
                        response.status_code,
                        f"{response.reason_phrase}: {error_text[:ERROR_DETAIL_LIMIT]}...",
                    )

                payload = response.json()
        except BraveApiError:
            raise
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Network or fetch error calling Brave API: %s", exc)
            raise BraveNetworkError(f"Network error calling Brave API: {exc}") from exc

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Brave API success response (truncated): %s...",
                json.dumps(payload)[:ERROR_DETAIL_LIMIT],
            )
        return payload

    async def _call_model(self, path: str, params: QueryParams, model: Type[T_Response]) -> T_Response:
        payload = await self._call(path, params)
        return model.model_validate(payload)

    async def web_search(
        self,
        query: str,
        count: Optional[float] = None,
        offset: Optional[float] = None,
    ) -> WebSearchResponse:
        params: QueryParams = [("q", query)]
        params.extend(_paging_params(count, offset))
        params.append(("result_filter", "web"))
        return await self._call_model("web/search", params, WebSearchResponse)

    async def location_search(self, query: str, count: float) -> WebSearchResponse:
        params: QueryParams = [
            ("q", query),
            ("search_lang", "en"),
            ("result_filter", "locations"),
            ("count", _format_number(min(count, MAX_COUNT))),
        ]
        return await self._call_model("web/search", params, WebSearchResponse)

    async def poi_details(self, ids: List[Optional[str]]) -> PoiResponse:
        if not ids:
            return PoiResponse(results=[])
        return await self._call_model("local/pois", _ids_params(ids), PoiResponse)

    async def poi_descriptions(self, ids: List[Optional[str]]) -> PoiDescriptionsResponse:
        if not ids:
            return PoiDescriptionsResponse(descriptions={})
        return await self._call_model("local/descriptions", _ids_params(ids), PoiDescriptionsResponse)

    async def _vertical_search(
        self,
        path: str,
        query: str,
        count: Optional[float],
        offset: Optional[float],
    ) -> Dict[str, Any]:
        params: QueryParams = [("q", query)]
        params.extend(_paging_params(count, offset))
        payload = await self._call(path, params)
        if not isinstance(payload, dict):
            raise ValueError(f"Brave API response for {path} must be a JSON object")
        return payload

    async def image_search(
        self, query: str, count: Optional[float] = None, offset: Optional[float] = None
    ) -> Dict[str, Any]:
        return await self._vertical_search("images/search", query, count, offset)

    async def video_search(
        self, query: str, count: Optional[float] = None, offset: Optional[float] = None
    ) -> Dict[str, Any]:
        return await self._vertical_search("videos/search", query, count, offset)

    async def news_search(
        self, query: str, count: Optional[float] = None, offset: Optional[float] = None
    ) -> Dict[str, Any]:
        return await self._vertical_search("news/search", query, count, offset)


__all__ = ["BraveClient", "ERROR_DETAIL_LIMIT", "MAX_COUNT", "MAX_OFFSET", "httpx"]
