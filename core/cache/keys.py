"""Cache key construction."""

from __future__ import annotations

from typing import Optional, Tuple

from core.models.image import Provider, SizeVariant

DATA_KIND = "data"
INFO_KIND = "info"

CacheKey = Tuple[str, str, str, Optional[str]]


def cache_key(provider: Provider, identifier: str, kind: str, size: SizeVariant | None = None) -> CacheKey:
    """Build the (provider, identifier, kind, size) key for one artifact."""
    return (provider.value, identifier, kind, size.value if size is not None else None)


def data_key(provider: Provider, identifier: str, size: SizeVariant) -> CacheKey:
    return cache_key(provider, identifier, DATA_KIND, size)


def info_key(provider: Provider, identifier: str) -> CacheKey:
    return cache_key(provider, identifier, INFO_KIND)
