"""Pydantic-схемы ответов Brave Search API.

Все поля необязательны, лишние ключи сохраняются: схема описывает форму
ответа, но не проверяет его смысл.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


_WIRE_CONFIG = ConfigDict(populate_by_name=True, extra="allow")


class WebResult(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    language: Optional[str] = None
    published: Optional[str] = None
    rank: Optional[Union[int, float]] = None

    model_config = _WIRE_CONFIG


class WebResults(BaseModel):
    results: List[WebResult] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class LocationRef(BaseModel):
    """Ссылка на POI внутри ответа веб-поиска."""

    id: Optional[str] = None
    title: Optional[str] = None

    model_config = _WIRE_CONFIG


class LocationRefs(BaseModel):
    results: List[LocationRef] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class WebSearchResponse(BaseModel):
    """Ответ `web/search` (в том числе с `result_filter=locations`)."""

    web: Optional[WebResults] = None
    locations: Optional[LocationRefs] = None

    model_config = _WIRE_CONFIG

    def location_ids(self) -> List[str]:
        if self.locations is None:
            return []
        return [item.id for item in self.locations.results if item.id is not None]


class PoiAddress(BaseModel):
    street_address: Optional[str] = Field(default=None, alias="streetAddress")
    address_locality: Optional[str] = Field(default=None, alias="addressLocality")
    address_region: Optional[str] = Field(default=None, alias="addressRegion")
    postal_code: Optional[str] = Field(default=None, alias="postalCode")

    model_config = _WIRE_CONFIG

    def parts(self) -> List[str]:
        return [
            part
            for part in (
                self.street_address,
                self.address_locality,
                self.address_region,
                self.postal_code,
            )
            if part
        ]


class Coordinates(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = _WIRE_CONFIG


class PoiRating(BaseModel):
    rating_value: Optional[Union[int, float]] = Field(default=None, alias="ratingValue")
    rating_count: Optional[int] = Field(default=None, alias="ratingCount")

    model_config = _WIRE_CONFIG


class PoiRecord(BaseModel):
    """Карточка места из `local/pois`."""

    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[PoiAddress] = None
    coordinates: Optional[Coordinates] = None
    phone: Optional[str] = None
    rating: Optional[PoiRating] = None
    opening_hours: Optional[List[str]] = Field(default=None, alias="openingHours")
    price_range: Optional[str] = Field(default=None, alias="priceRange")

    model_config = _WIRE_CONFIG


class PoiResponse(BaseModel):
    results: List[PoiRecord] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class PoiDescriptionsResponse(BaseModel):
    descriptions: Dict[str, Optional[str]] = Field(default_factory=dict)

    model_config = _WIRE_CONFIG


__all__ = [
    "Coordinates",
    "LocationRef",
    "LocationRefs",
    "PoiAddress",
    "PoiDescriptionsResponse",
    "PoiRating",
    "PoiRecord",
    "PoiResponse",
    "WebResult",
    "WebResults",
    "WebSearchResponse",
]
