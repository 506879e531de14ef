"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from config.models import (
    CacheConfig,
    Config,
    FlickrConfig,
    GeocoderConfig,
    HttpConfig,
    LoggingConfig,
    UnsplashConfig,
)


BASE_DIR = Path(__file__).resolve().parent.parent
MODULE_CONFIG_PATHS = {
    "flickr": BASE_DIR / "core" / "providers" / "flickr" / "config.json",
    "unsplash": BASE_DIR / "core" / "providers" / "unsplash" / "config.json",
    "geocoder": BASE_DIR / "core" / "geocode" / "config.json",
}


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_default_sections() -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for section, file_path in MODULE_CONFIG_PATHS.items():
        if file_path.exists():
            raw[section] = _load_json(file_path)
    return raw


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override sections into the base config."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_sections(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    flickr_raw = raw.get("flickr", {}) or {}
    unsplash_raw = raw.get("unsplash", {}) or {}
    geocoder_raw = raw.get("geocoder", {}) or {}
    cache_raw = raw.get("cache", {}) or {}
    http_raw = raw.get("http", {}) or {}
    logging_raw = raw.get("logging", {}) or {}

    flickr = FlickrConfig(
        api_key_env=str(flickr_raw.get("api_key_env", "FLICKR_API_KEY")),
        api_key=str(flickr_raw.get("api_key", "")),
    )
    unsplash = UnsplashConfig(
        api_key_env=str(unsplash_raw.get("api_key_env", "UNSPLASH_ACCESS_KEY")),
        api_key=str(unsplash_raw.get("api_key", "")),
    )
    geocoder = GeocoderConfig(
        enabled=_as_bool(geocoder_raw.get("enabled"), True),
        api_key_env=str(geocoder_raw.get("api_key_env", "OPENCAGE_API_KEY")),
        api_key=str(geocoder_raw.get("api_key", "")),
        language=str(geocoder_raw.get("language", "")),
    )
    cache = CacheConfig(
        enabled=_as_bool(cache_raw.get("enabled"), True),
        directory=str(cache_raw.get("directory", "cache")),
    )
    http = HttpConfig(
        timeout_seconds=_as_float(http_raw.get("timeout_seconds", 20.0), 20.0),
        user_agent=str(http_raw.get("user_agent", "provider-image-service")),
    )
    logging = LoggingConfig(level=str(logging_raw.get("level", "INFO")))
    return Config(
        flickr=flickr,
        unsplash=unsplash,
        geocoder=geocoder,
        cache=cache,
        http=http,
        logging=logging,
    )


def load_config(path: Path | None) -> Config:
    """Load config data into a Config instance."""
    raw = _load_default_sections()
    if path is not None:
        raw = merge_sections(raw, _load_json(path))
    return config_from_dict(raw)
