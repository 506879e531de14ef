"""Unsplash image resource."""

from __future__ import annotations

from typing import Any, Mapping

from core.errors import MalformedResponseError
from core.models.image import ImageMetadata, ImageRecord, NormalizedInfo, Provider, SizeVariant
from core.providers.adapter import ImageResource
from core.providers.unsplash.client import auth_headers, unsplash_photo_details, urls_from_listing
from core.providers.unsplash.normalizer import normalize_unsplash_info
from core.services.context import ImageServices
from core.services.fetch import fetch_image_data, fetch_image_info


class UnsplashImage(ImageResource):
    """Unsplash photo whose size URLs are supplied up front by the listing."""

    provider = Provider.UNSPLASH

    def __init__(self, identifier: str, urls: Mapping[str, Any] | None, services: ImageServices) -> None:
        self.services = services
        self.record = ImageRecord(provider=self.provider, identifier=identifier)
        for size, url in urls_from_listing(urls).items():
            self.record.artifact(size).url = url

    @classmethod
    def from_listing(cls, item: Mapping[str, Any], services: ImageServices) -> "UnsplashImage":
        """Create an image from a photo object of an Unsplash list or search response."""
        identifier = item.get("id")
        if not identifier:
            raise MalformedResponseError("Unsplash listing entry has no id")
        urls = item.get("urls")
        return cls(str(identifier), urls if isinstance(urls, Mapping) else None, services)

    @property
    def identifier(self) -> str:
        return self.record.identifier

    @property
    def metadata(self) -> ImageMetadata:
        return self.record.metadata

    def image_url(self, size: SizeVariant) -> str | None:
        return self.record.artifact(size).url

    def image_data(self, size: SizeVariant) -> bytes | None:
        return self.record.artifact(size).data

    def fetch_data(self, size: SizeVariant = SizeVariant.ORIGINAL) -> None:
        headers = auth_headers(self.services.unsplash_access_key)
        fetch_image_data(self.record, size, self.image_url(size), self.services, headers=headers)

    def fetch_info(self) -> None:
        fetch_image_info(self.record, self.services, self._load_info)

    def _load_info(self) -> NormalizedInfo:
        payload = unsplash_photo_details(self.services.transport, self.services.unsplash_access_key, self.identifier)
        return normalize_unsplash_info(payload)
