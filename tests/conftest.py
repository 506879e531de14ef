from __future__ import annotations

from typing import Any, Dict, List

import pytest

from core.cache.store import MemoryCacheStore
from core.errors import GeocodeError
from core.services.cache_gate import CacheGate
from core.services.context import ImageServices
from core.transport import ResponseFormat


class FakeTransport:
    """Transport double returning canned responses keyed by URL."""

    def __init__(self, responses: Dict[str, Any] | None = None) -> None:
        self.responses: Dict[str, Any] = dict(responses or {})
        self.calls: List[Dict[str, Any]] = []

    def get(
        self,
        url: str,
        headers: Dict[str, str] | None = None,
        expected_format: ResponseFormat = ResponseFormat.DATA,
        params: Dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append({"url": url, "headers": headers, "format": expected_format, "params": params})
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


class FakeGeocoder:
    """Geocoder double that records calls and returns or raises a canned result."""

    def __init__(self, result: str | None = "Paris, France") -> None:
        self.result = result
        self.calls: List[tuple[str, str]] = []

    def reverse_geocode(self, latitude: str, longitude: str) -> str:
        self.calls.append((latitude, longitude))
        if self.result is None:
            raise GeocodeError("quota exceeded")
        return self.result


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def services(transport: FakeTransport, geocoder: FakeGeocoder, store: MemoryCacheStore) -> ImageServices:
    return ImageServices(
        transport=transport,  # type: ignore[arg-type]
        cache=CacheGate(store),
        geocoder=geocoder,
        flickr_api_key="flickr-key",
        unsplash_access_key="unsplash-key",
    )
