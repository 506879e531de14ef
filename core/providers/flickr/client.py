"""Flickr URL construction and REST requests."""

from __future__ import annotations

from typing import Any, Dict

from core.models.image import SizeVariant
from core.transport import HttpTransport, ResponseFormat

FLICKR_REST = "https://api.flickr.com/services/rest/"

# ref. https://www.flickr.com/services/api/misc.urls.html
SIZE_LETTERS: Dict[SizeVariant, str] = {
    SizeVariant.THUMBNAIL: "t",
    SizeVariant.SMALL: "n",
    SizeVariant.MEDIUM: "c",
    SizeVariant.LARGE: "b",
    SizeVariant.EXTRA_LARGE: "k",
    SizeVariant.ORIGINAL: "o",
}
DEFAULT_SIZE_LETTER = "o"


def build_image_url(farm: int | str, server: str, photo_id: str, secret: str, size: SizeVariant) -> str:
    """Build a static image URL for a photo.

    Args:
        farm: Farm number from the photo listing.
        server: Server id.
        photo_id: Photo id.
        secret: Photo secret.
        size: Requested size; unmapped sizes fall back to the original.

    Returns:
        Full image URL string.
    """
    letter = SIZE_LETTERS.get(size, DEFAULT_SIZE_LETTER)
    return f"https://farm{farm}.staticflickr.com/{server}/{photo_id}_{secret}_{letter}.jpg"


def flickr_request(transport: HttpTransport, api_key: str, method: str, params: Dict[str, Any]) -> bytes:
    """Call a Flickr REST method and return the raw ``jsonFlickrApi(...)`` body.

    Args:
        transport: HTTP transport.
        api_key: Flickr API key, sent as a query parameter.
        method: Flickr method name, e.g. flickr.photos.getInfo.
        params: Extra query parameters.

    Returns:
        Response body bytes.
    """
    query: Dict[str, Any] = {"method": method, "api_key": api_key}
    query.update(params)
    query["format"] = "json"
    return transport.get(FLICKR_REST, params=query, expected_format=ResponseFormat.DATA)


def flickr_photo_info(transport: HttpTransport, api_key: str, photo_id: str) -> bytes:
    """Fetch the flickr.photos.getInfo body for a photo."""
    return flickr_request(transport, api_key, "flickr.photos.getInfo", {"photo_id": photo_id})
