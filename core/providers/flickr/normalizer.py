"""Flickr getInfo response decoding and normalization."""

from __future__ import annotations

import json
from typing import Any, Dict

from core.errors import DecodeError, MalformedResponseError, MissingSectionError
from core.models.image import ImageMetadata, NormalizedInfo

JSONP_PREFIX = "jsonFlickrApi("
JSONP_SUFFIX = ")"


def unwrap_flickr_response(body: bytes | str) -> Any:
    """Decode a ``jsonFlickrApi(<json>)`` body into its inner JSON value.

    Flickr wraps ``format=json`` responses in a JSONP callback even for
    plain REST calls. Bodies without the wrapper are decoded as is.
    """
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError("Flickr response is not UTF-8") from exc
    else:
        text = body
    text = text.strip()
    if text.startswith(JSONP_PREFIX) and text.endswith(JSONP_SUFFIX):
        text = text[len(JSONP_PREFIX) : -len(JSONP_SUFFIX)]
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Flickr response is not valid JSON: {exc}") from exc


def _content(value: Any) -> str | None:
    if isinstance(value, dict):
        value = value.get("_content")
    if isinstance(value, str):
        return value
    return None


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def normalize_flickr_info(payload: Any) -> NormalizedInfo:
    """Map a decoded getInfo payload onto ImageMetadata.

    Raises:
        MalformedResponseError: If the payload is not an object or ``stat`` is not "ok".
        MissingSectionError: If the ``photo`` object is absent.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Flickr response is not a JSON object")
    if payload.get("stat") != "ok":
        detail = payload.get("message") or payload.get("stat") or "missing stat"
        code = payload.get("code")
        suffix = f" (code {code})" if code is not None else ""
        raise MalformedResponseError(f"Flickr imageInfo abnormal: {detail}{suffix}")
    photo = payload.get("photo")
    if not isinstance(photo, dict):
        raise MissingSectionError("photo")

    metadata = ImageMetadata()
    metadata.title = _non_empty(_content(photo.get("title")))

    owner: Dict[str, Any] = photo.get("owner") if isinstance(photo.get("owner"), dict) else {}
    metadata.author = _non_empty(owner.get("realname")) or _non_empty(owner.get("username"))

    dates = photo.get("dates")
    if isinstance(dates, dict) and isinstance(dates.get("taken"), str):
        metadata.date = dates["taken"]

    metadata.description = _content(photo.get("description"))

    coordinates = None
    location = photo.get("location")
    if isinstance(location, dict):
        latitude = _non_empty(location.get("latitude"))
        longitude = _non_empty(location.get("longitude"))
        if latitude and longitude:
            coordinates = (latitude, longitude)
    return NormalizedInfo(metadata=metadata, coordinates=coordinates)
