"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FlickrConfig:
    """Flickr API settings."""

    api_key_env: str = "FLICKR_API_KEY"
    api_key: str = ""


@dataclass
class UnsplashConfig:
    """Unsplash API settings."""

    api_key_env: str = "UNSPLASH_ACCESS_KEY"
    api_key: str = ""


@dataclass
class GeocoderConfig:
    """OpenCage reverse geocoding settings."""

    enabled: bool = True
    api_key_env: str = "OPENCAGE_API_KEY"
    api_key: str = ""
    language: str = ""


@dataclass
class CacheConfig:
    """Image and metadata cache settings."""

    enabled: bool = True
    directory: str = "cache"


@dataclass
class HttpConfig:
    """HTTP transport settings."""

    timeout_seconds: float = 20.0
    user_agent: str = "provider-image-service"


@dataclass
class LoggingConfig:
    """Logger settings."""

    level: str = "INFO"


@dataclass
class Config:
    """Top-level configuration container."""

    flickr: FlickrConfig
    unsplash: UnsplashConfig
    geocoder: GeocoderConfig
    cache: CacheConfig
    http: HttpConfig
    logging: LoggingConfig
