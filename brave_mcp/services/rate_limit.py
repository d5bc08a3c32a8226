"""Ограничение частоты запросов к эндпоинтам Brave API."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

import httpx


MIN_INTERVAL_MS = 1000


@dataclass
class EndpointTracker:
    last_call_time: float = 0
    call_count: int = 0


def _wall_clock_ms() -> float:
    return time.time() * 1000


def endpoint_from_url(url: Union[str, httpx.URL]) -> str:
    """Логический идентификатор эндпоинта: два последних сегмента пути."""

    path = httpx.URL(str(url)).path
    return "/".join(path.split("/")[-2:])


class RateLimiter:
    """Не более одного принятого вызова в секунду на каждый эндпоинт.

    Лишний вызов отклоняется сразу, без ожидания и очереди. Проверка и
    фиксация времени выполняются синхронно, поэтому между ними нет точки
    переключения корутин.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or _wall_clock_ms
        self._trackers: Dict[str, EndpointTracker] = {}

    def check(self, endpoint: str, now: Optional[float] = None) -> bool:
        if now is None:
            now = self._clock()

        tracker = self._trackers.get(endpoint)
        if tracker is None:
            tracker = self._trackers[endpoint] = EndpointTracker()

        if now - tracker.last_call_time < MIN_INTERVAL_MS:
            return False

        tracker.last_call_time = now
        tracker.call_count += 1
        return True

    def tracker(self, endpoint: str) -> Optional[EndpointTracker]:
        return self._trackers.get(endpoint)

    def reset(self) -> None:
        self._trackers.clear()

    def __len__(self) -> int:
        return len(self._trackers)


__all__ = ["EndpointTracker", "MIN_INTERVAL_MS", "RateLimiter", "endpoint_from_url"]
