"""Flickr image resource."""

from __future__ import annotations

from typing import Any, Mapping

from core.errors import MalformedResponseError
from core.models.image import ImageMetadata, ImageRecord, NormalizedInfo, Provider, SizeVariant
from core.providers.adapter import ImageResource
from core.providers.flickr.client import build_image_url, flickr_photo_info
from core.providers.flickr.normalizer import normalize_flickr_info, unwrap_flickr_response
from core.services.context import ImageServices
from core.services.fetch import fetch_image_data, fetch_image_info


class FlickrImage(ImageResource):
    """Flickr photo addressed by its (farm, server, id, secret) key."""

    provider = Provider.FLICKR

    def __init__(self, identifier: str, farm: int, server: str, secret: str, services: ImageServices) -> None:
        self.farm = farm
        self.server = server
        self.secret = secret
        self.services = services
        self.record = ImageRecord(provider=self.provider, identifier=identifier)
        for size, artifact in self.record.artifacts.items():
            artifact.url = self.image_url(size)

    @classmethod
    def from_listing(cls, item: Mapping[str, Any], services: ImageServices) -> "FlickrImage":
        """Create an image from a photo entry of a Flickr search or list response."""
        try:
            return cls(
                identifier=str(item["id"]),
                farm=int(item["farm"]),
                server=str(item["server"]),
                secret=str(item["secret"]),
                services=services,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedResponseError(f"Flickr listing entry is incomplete: {exc}") from exc

    @property
    def identifier(self) -> str:
        return self.record.identifier

    @property
    def metadata(self) -> ImageMetadata:
        return self.record.metadata

    def image_url(self, size: SizeVariant) -> str | None:
        return build_image_url(self.farm, self.server, self.identifier, self.secret, size)

    def image_data(self, size: SizeVariant) -> bytes | None:
        return self.record.artifact(size).data

    def fetch_data(self, size: SizeVariant = SizeVariant.ORIGINAL) -> None:
        fetch_image_data(self.record, size, self.image_url(size), self.services)

    def fetch_info(self) -> None:
        fetch_image_info(self.record, self.services, self._load_info)

    def _load_info(self) -> NormalizedInfo:
        body = flickr_photo_info(self.services.transport, self.services.flickr_api_key, self.identifier)
        return normalize_flickr_info(unwrap_flickr_response(body))
