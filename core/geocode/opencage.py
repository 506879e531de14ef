"""OpenCage reverse geocoding."""

from __future__ import annotations

from typing import Any, Dict, Protocol

from core.errors import GeocodeError, TransportError
from core.transport import HttpTransport, ResponseFormat

OPENCAGE_URL = "https://api.opencagedata.com/geocode/v1/json"


class Geocoder(Protocol):
    """Converts raw coordinates into a human-readable place."""

    def reverse_geocode(self, latitude: str, longitude: str) -> str:
        """Return a formatted location, or raise GeocodeError."""


class OpenCageGeocoder(Geocoder):
    """Geocoder backed by the OpenCage Data API."""

    def __init__(self, transport: HttpTransport, api_key: str, language: str = "") -> None:
        self.transport = transport
        self.api_key = api_key
        self.language = language

    def reverse_geocode(self, latitude: str, longitude: str) -> str:
        if not self.api_key:
            raise GeocodeError("OpenCage API key missing")
        params: Dict[str, Any] = {"q": f"{latitude},{longitude}", "key": self.api_key, "no_annotations": 1}
        if self.language:
            params["language"] = self.language
        try:
            data = self.transport.get(OPENCAGE_URL, params=params, expected_format=ResponseFormat.JSON)
        except TransportError as exc:
            raise GeocodeError(str(exc)) from exc
        return formatted_location(data)


def formatted_location(data: Any) -> str:
    """Pick the formatted place name from an OpenCage response."""
    if not isinstance(data, dict):
        raise GeocodeError("Unexpected OpenCage response")
    results = data.get("results") or []
    if not results or not isinstance(results[0], dict):
        status = data.get("status") or {}
        message = status.get("message") if isinstance(status, dict) else None
        raise GeocodeError(f"No location found ({message or 'empty results'})")
    formatted = str(results[0].get("formatted") or "").strip()
    if not formatted:
        raise GeocodeError("Location result has no formatted name")
    return formatted
