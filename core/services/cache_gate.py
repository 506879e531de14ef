"""Cache-first lookups for image artifacts and metadata."""

from __future__ import annotations

from enum import Enum
from typing import Any

from core.cache.keys import data_key, info_key
from core.cache.store import CacheStore
from core.models.image import ImageMetadata, ImageRecord, SizeVariant
from logger import get_logger

log = get_logger()


class CacheLookup(str, Enum):
    HIT = "hit"
    MISS = "miss"


class CacheGate:
    """Checks memory and the shared store before a fetch goes to the network.

    A hit leaves the record populated (reloading from the store if needed).
    The gate holds no per-request state.
    """

    def __init__(self, store: CacheStore) -> None:
        self.store = store

    def check_data(self, record: ImageRecord, size: SizeVariant) -> CacheLookup:
        artifact = record.artifact(size)
        if artifact.data is not None:
            return CacheLookup.HIT
        cached = self.store.get(data_key(record.provider, record.identifier, size))
        if isinstance(cached, (bytes, bytearray)):
            artifact.data = bytes(cached)
            log.debug(f"Cache hit: {record.provider.value}/{record.identifier} {size.value}")
            return CacheLookup.HIT
        return CacheLookup.MISS

    def check_info(self, record: ImageRecord) -> CacheLookup:
        if record.metadata.cached:
            return CacheLookup.HIT
        cached: Any = self.store.get(info_key(record.provider, record.identifier))
        if isinstance(cached, dict):
            record.metadata.update(ImageMetadata.from_dict(cached))
            log.debug(f"Cache hit: {record.provider.value}/{record.identifier} info")
            return CacheLookup.HIT
        return CacheLookup.MISS

    def store_data(self, record: ImageRecord, size: SizeVariant, data: bytes) -> None:
        record.artifact(size).data = data
        self.store.put(data_key(record.provider, record.identifier, size), data)

    def store_info(self, record: ImageRecord, metadata: ImageMetadata) -> None:
        """Apply metadata to the record and write it through as one unit."""
        metadata.cached = True
        record.metadata.update(metadata)
        self.store.put(info_key(record.provider, record.identifier), metadata.to_dict())
