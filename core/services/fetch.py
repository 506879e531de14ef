"""Fetch pipeline steps shared by the provider variants."""

from __future__ import annotations

from typing import Callable, Dict

from core.errors import GeocodeError, SizeUnavailableError
from core.models.image import ImageRecord, NormalizedInfo, SizeVariant
from core.services.cache_gate import CacheLookup
from core.services.context import ImageServices
from core.transport import ResponseFormat
from logger import get_logger

log = get_logger()


def fetch_image_data(
    record: ImageRecord,
    size: SizeVariant,
    url: str | None,
    services: ImageServices,
    headers: Dict[str, str] | None = None,
) -> None:
    """Cache-first download of one size variant into the record."""
    if services.cache.check_data(record, size) is CacheLookup.HIT:
        return
    if not url:
        raise SizeUnavailableError(size)
    log.debug(f"Fetching {record.provider.value}/{record.identifier} {size.value}: {url}")
    data = services.transport.get(url, headers=headers, expected_format=ResponseFormat.DATA)
    services.cache.store_data(record, size, data)


def fetch_image_info(
    record: ImageRecord,
    services: ImageServices,
    load: Callable[[], NormalizedInfo],
) -> None:
    """Cache-first metadata fetch.

    ``load`` performs the provider request and normalization. Coordinates it
    leaves behind are resolved to a place name, then the metadata is written
    through exactly once.
    """
    with record.info_lock:
        if services.cache.check_info(record) is CacheLookup.HIT:
            return
        log.debug(f"Fetching {record.provider.value}/{record.identifier} info")
        normalized = load()
        if normalized.coordinates is not None:
            location = enrich_location(services, *normalized.coordinates)
            if location:
                normalized.metadata.location = location
        services.cache.store_info(record, normalized.metadata)


def enrich_location(services: ImageServices, latitude: str, longitude: str) -> str | None:
    """Reverse geocode coordinates; failures are logged and yield None."""
    if services.geocoder is None:
        log.debug(f"No geocoder configured; leaving location ({latitude}, {longitude}) unresolved")
        return None
    try:
        return services.geocoder.reverse_geocode(latitude, longitude)
    except GeocodeError as exc:
        log.warn(f"  ⚠️ Reverse geocoding failed for ({latitude}, {longitude}): {exc}")
        return None
