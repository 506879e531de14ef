"""Unsplash URL maps and API requests."""

from __future__ import annotations

from typing import Any, Dict, Mapping
from urllib.parse import quote

from core.models.image import SizeVariant
from core.transport import HttpTransport, ResponseFormat

UNSPLASH_BASE = "https://api.unsplash.com"

# Each listing key backs these sizes; "raw" serves both of the largest tiers.
URL_KEYS: Dict[str, tuple[SizeVariant, ...]] = {
    "thumb": (SizeVariant.THUMBNAIL,),
    "small": (SizeVariant.SMALL,),
    "regular": (SizeVariant.MEDIUM,),
    "full": (SizeVariant.LARGE,),
    "raw": (SizeVariant.EXTRA_LARGE, SizeVariant.ORIGINAL),
}


def auth_headers(access_key: str) -> Dict[str, str]:
    """Headers attached to every Unsplash call."""
    return {"Authorization": f"Client-ID {access_key}"}


def urls_from_listing(urls: Mapping[str, Any] | None) -> Dict[SizeVariant, str]:
    """Map an Unsplash ``urls`` object onto size variants, skipping absent keys."""
    resolved: Dict[SizeVariant, str] = {}
    for key, sizes in URL_KEYS.items():
        value = (urls or {}).get(key)
        if isinstance(value, str) and value:
            for size in sizes:
                resolved[size] = value
    return resolved


def unsplash_request(transport: HttpTransport, access_key: str, endpoint: str) -> Any:
    """Make an Unsplash API request.

    Args:
        transport: HTTP transport.
        access_key: Unsplash access key.
        endpoint: API endpoint path.

    Returns:
        Decoded JSON response.
    """
    url = f"{UNSPLASH_BASE}{endpoint}"
    return transport.get(url, headers=auth_headers(access_key), expected_format=ResponseFormat.JSON)


def unsplash_photo_details(transport: HttpTransport, access_key: str, photo_id: str) -> Any:
    """Fetch full details for a photo."""
    return unsplash_request(transport, access_key, f"/photos/{quote(photo_id, safe='')}")
