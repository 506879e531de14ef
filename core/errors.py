"""Exception types raised by image fetches."""

from __future__ import annotations


class ImageServiceError(Exception):
    """Base class for failures surfaced by fetch_data/fetch_info."""


class TransportError(ImageServiceError):
    """Network, HTTP status or body decoding failure from the transport."""

    NETWORK = "network"
    HTTP_STATUS = "http-status"
    DECODE = "decode"

    def __init__(self, kind: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class DecodeError(ImageServiceError):
    """Response body is not in the expected shape."""


class MalformedResponseError(ImageServiceError):
    """Response decoded but violates the provider's schema."""


class MissingSectionError(MalformedResponseError):
    """A required section of the response is absent."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Response is missing the '{section}' section")
        self.section = section


class SizeUnavailableError(ImageServiceError):
    """No URL can be resolved for the requested size."""

    def __init__(self, size: object) -> None:
        label = getattr(size, "value", size)
        super().__init__(f"URL for the image with size '{label}' is unavailable")
        self.size = size


class GeocodeError(ImageServiceError):
    """Reverse geocoding failed. Never surfaced by fetch_info."""
