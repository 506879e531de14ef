"""Image resource interface implemented once per provider."""

from __future__ import annotations

from typing import Protocol

from core.models.image import ImageMetadata, ImageRecord, Provider, SizeVariant


class ImageResource(Protocol):
    """Provider variant exposing cache-first data and info fetches."""

    provider: Provider
    record: ImageRecord

    @property
    def identifier(self) -> str:
        """Provider-scoped image id."""

    @property
    def metadata(self) -> ImageMetadata:
        """Metadata populated by fetch_info."""

    def image_url(self, size: SizeVariant) -> str | None:
        """Resolve the source URL for a size, or None when unavailable."""

    def image_data(self, size: SizeVariant) -> bytes | None:
        """Bytes populated by fetch_data, if any."""

    def fetch_data(self, size: SizeVariant = SizeVariant.ORIGINAL) -> None:
        """Load image bytes for a size into the record; raises ImageServiceError on failure."""

    def fetch_info(self) -> None:
        """Load and normalize metadata into the record; raises ImageServiceError on failure."""
