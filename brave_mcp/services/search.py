"""Сценарии поиска: веб, локальный поиск с обогащением, данные о POI."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from ..schemas import PoiDescriptionsResponse, PoiRecord, PoiResponse, WebSearchResponse
from .client import BraveClient


logger = logging.getLogger(__name__)

NO_WEB_RESULTS = "No web results found."
NO_LOCAL_RESULTS = "No local results found."
NO_DESCRIPTION = "No description available."
NO_IDS_FOR_DETAILS = "No IDs provided to fetch details."
NO_IDS_FOR_DESCRIPTIONS = "No IDs provided to fetch descriptions."
NO_DESCRIPTIONS_FOUND = "No descriptions found for the provided IDs."


def format_web_results(data: WebSearchResponse) -> str:
    results = data.web.results if data.web is not None else []
    if not results:
        return NO_WEB_RESULTS

    return "\n\n".join(
        f"Title: {item.title or 'N/A'}\n"
        f"Description: {item.description or 'N/A'}\n"
        f"URL: {item.url or 'N/A'}"
        for item in results
    )


def _format_poi(poi: PoiRecord, descriptions: Mapping[str, Optional[str]]) -> str:
    address = ", ".join(poi.address.parts()) if poi.address is not None else ""
    rating_value = poi.rating.rating_value if poi.rating is not None else None
    rating_count = poi.rating.rating_count if poi.rating is not None else None
    hours = ", ".join(poi.opening_hours or [])
    description = descriptions.get(poi.id) if poi.id is not None else None

    return (
        f"Name: {poi.name or 'N/A'}\n"
        f"Address: {address or 'N/A'}\n"
        f"Phone: {poi.phone or 'N/A'}\n"
        f"Rating: {rating_value if rating_value is not None else 'N/A'} "
        f"({rating_count if rating_count is not None else 0} reviews)\n"
        f"Price Range: {poi.price_range or 'N/A'}\n"
        f"Hours: {hours or 'N/A'}\n"
        f"Description: {description or NO_DESCRIPTION}\n"
    )


def format_local_results(pois: PoiResponse, descriptions: PoiDescriptionsResponse) -> str:
    if not pois.results:
        return NO_LOCAL_RESULTS
    return "\n---\n".join(_format_poi(poi, descriptions.descriptions) for poi in pois.results)


def format_descriptions(descriptions: PoiDescriptionsResponse) -> str:
    return "\n\n".join(
        f"ID: {poi_id}\nDescription: {text}" for poi_id, text in descriptions.descriptions.items()
    )


async def perform_web_search(client: BraveClient, query: str, count=10, offset=0) -> str:
    logger.debug("Performing web search: query=%r, count=%s, offset=%s", query, count, offset)
    data = await client.web_search(query, count, offset)
    return format_web_results(data)


async def perform_local_search(client: BraveClient, query: str, count=5) -> str:
    """Локальный поиск с откатом к веб-поиску.

    Без найденных идентификаторов мест сразу выполняется веб-поиск. Если
    идентификаторы есть, но запрос деталей или описаний падает, результат
    также заменяется веб-поиском. Ошибка первичного поиска мест не
    перехватывается.
    """

    logger.debug("Performing local search: query=%r, count=%s", query, count)
    location_data = await client.location_search(query, count)
    location_ids = location_data.location_ids()

    # Резервный веб-поиск идёт через тот же лимитер: в пределах секунды после
    # поиска мест он получит RateLimitExceeded, и ошибка уйдёт в диспетчер.
    if not location_ids:
        logger.debug("No location IDs found, falling back to web search")
        return await perform_web_search(client, query, count)

    logger.debug("Found location IDs: %s. Fetching details", ", ".join(location_ids))

    # Запросы последовательные: параллельные вызовы упрутся в лимит частоты.
    try:
        pois = await client.poi_details(location_ids)
        descriptions = await client.poi_descriptions(location_ids)
    except Exception as exc:
        logger.warning(
            "Error fetching POI details/descriptions, falling back to web search: %s", exc
        )
        return await perform_web_search(client, query, count)

    return format_local_results(pois, descriptions)


async def perform_poi_details(client: BraveClient, ids: List[str]) -> str:
    logger.debug("Fetching POI details for IDs: %s", ", ".join(ids))
    if not ids:
        return NO_IDS_FOR_DETAILS

    pois = await client.poi_details(ids)
    return format_local_results(pois, PoiDescriptionsResponse(descriptions={}))


async def perform_poi_descriptions(client: BraveClient, ids: List[str]) -> str:
    logger.debug("Fetching POI descriptions for IDs: %s", ", ".join(ids))
    if not ids:
        return NO_IDS_FOR_DESCRIPTIONS

    descriptions = await client.poi_descriptions(ids)
    if not descriptions.descriptions:
        return NO_DESCRIPTIONS_FOUND
    return format_descriptions(descriptions)


__all__ = [
    "NO_DESCRIPTIONS_FOUND",
    "NO_IDS_FOR_DESCRIPTIONS",
    "NO_IDS_FOR_DETAILS",
    "NO_LOCAL_RESULTS",
    "NO_WEB_RESULTS",
    "format_descriptions",
    "format_local_results",
    "format_web_results",
    "perform_local_search",
    "perform_poi_descriptions",
    "perform_poi_details",
    "perform_web_search",
]
