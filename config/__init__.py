"""Config package facade."""

from config.loader import config_from_dict, load_config, merge_sections
from config.models import (
    CacheConfig,
    Config,
    FlickrConfig,
    GeocoderConfig,
    HttpConfig,
    LoggingConfig,
    UnsplashConfig,
)

__all__ = [
    "CacheConfig",
    "Config",
    "FlickrConfig",
    "GeocoderConfig",
    "HttpConfig",
    "LoggingConfig",
    "UnsplashConfig",
    "config_from_dict",
    "load_config",
    "merge_sections",
]
