"""Unsplash photo payload normalization."""

from __future__ import annotations

from typing import Any

from core.errors import MalformedResponseError
from core.models.image import ImageMetadata, NormalizedInfo

UNTITLED = "Untitled"


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _coordinate(value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return str(float(value))


def normalize_unsplash_info(payload: Any) -> NormalizedInfo:
    """Map a decoded /photos/{id} payload onto ImageMetadata.

    Location is taken from ``location.title``, then ``location.name``; when
    only ``location.position`` is numeric, the coordinates are returned for
    reverse geocoding instead.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Unsplash response is not a JSON object")

    metadata = ImageMetadata()
    description = payload.get("description")
    if isinstance(description, str):
        metadata.title = description
        metadata.description = description
    else:
        metadata.title = UNTITLED

    user = payload.get("user")
    if isinstance(user, dict):
        metadata.author = _non_empty(user.get("name")) or _non_empty(user.get("username"))

    created_at = payload.get("created_at")
    if isinstance(created_at, str):
        metadata.date = created_at

    coordinates = None
    location = payload.get("location")
    if isinstance(location, dict):
        place = _non_empty(location.get("title")) or _non_empty(location.get("name"))
        if place:
            metadata.location = place
        else:
            position = location.get("position")
            if isinstance(position, dict):
                latitude = _coordinate(position.get("latitude"))
                longitude = _coordinate(position.get("longitude"))
                if latitude is not None and longitude is not None:
                    coordinates = (latitude, longitude)
    return NormalizedInfo(metadata=metadata, coordinates=coordinates)
