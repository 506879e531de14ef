"""Service wiring for image providers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import requests

from config import Config
from core.cache.store import FileCacheStore, MemoryCacheStore
from core.geocode.opencage import Geocoder, OpenCageGeocoder
from core.services.cache_gate import CacheGate
from core.transport import HttpTransport
from logger import get_logger

log = get_logger()


@dataclass
class ImageServices:
    """Stateless collaborators and credentials shared by every image resource."""

    transport: HttpTransport
    cache: CacheGate
    geocoder: Geocoder | None = None
    flickr_api_key: str = ""
    unsplash_access_key: str = ""


def resolve_api_key(api_key: str, api_key_env: str) -> str:
    """Prefer an explicit key, else read it from the named environment variable."""
    if api_key:
        return api_key
    if api_key_env:
        return os.environ.get(api_key_env, "")
    return ""


def init_services(cfg: Config) -> tuple[ImageServices, str | None]:
    """Build transport, cache and geocoder from configuration.

    Returns:
        The services and an error message when no provider credential is
        available at all.
    """
    session = requests.Session()
    transport = HttpTransport(session=session, timeout=cfg.http.timeout_seconds, user_agent=cfg.http.user_agent)

    if cfg.cache.enabled and cfg.cache.directory:
        store = FileCacheStore(Path(cfg.cache.directory).expanduser())
    else:
        store = MemoryCacheStore()

    flickr_key = resolve_api_key(cfg.flickr.api_key, cfg.flickr.api_key_env)
    unsplash_key = resolve_api_key(cfg.unsplash.api_key, cfg.unsplash.api_key_env)

    geocoder: Geocoder | None = None
    if cfg.geocoder.enabled:
        geocoder_key = resolve_api_key(cfg.geocoder.api_key, cfg.geocoder.api_key_env)
        if geocoder_key:
            geocoder = OpenCageGeocoder(transport, geocoder_key, language=cfg.geocoder.language)
        else:
            log.debug(f"Reverse geocoding disabled: set env var {cfg.geocoder.api_key_env} to enable it.")

    services = ImageServices(
        transport=transport,
        cache=CacheGate(store),
        geocoder=geocoder,
        flickr_api_key=flickr_key,
        unsplash_access_key=unsplash_key,
    )
    if not flickr_key and not unsplash_key:
        return (
            services,
            f"No provider credentials. Set env var {cfg.flickr.api_key_env} or {cfg.unsplash.api_key_env}.",
        )
    return services, None
