import os

import pytest

from core.cache.store import MemoryCacheStore
from core.models.image import SizeVariant
from core.providers.flickr.adapter import FlickrImage
from core.providers.flickr.client import flickr_request
from core.providers.flickr.normalizer import unwrap_flickr_response
from core.providers.unsplash.adapter import UnsplashImage
from core.providers.unsplash.client import unsplash_request
from core.services.cache_gate import CacheGate
from core.services.context import ImageServices
from core.transport import HttpTransport


def _services(**keys: str) -> ImageServices:
    return ImageServices(transport=HttpTransport(), cache=CacheGate(MemoryCacheStore()), **keys)


@pytest.mark.integration
def test_flickr_recent_photo_info() -> None:
    api_key = os.environ.get("FLICKR_API_KEY")
    if not api_key:
        pytest.skip("FLICKR_API_KEY is not set in the environment.")
    services = _services(flickr_api_key=api_key)
    body = flickr_request(services.transport, api_key, "flickr.photos.getRecent", {"per_page": 1})
    listing = unwrap_flickr_response(body)
    image = FlickrImage.from_listing(listing["photos"]["photo"][0], services)
    image.fetch_data(SizeVariant.THUMBNAIL)
    image.fetch_info()
    assert image.image_data(SizeVariant.THUMBNAIL)
    assert image.metadata.cached is True


@pytest.mark.integration
def test_unsplash_random_photo_thumbnail() -> None:
    access_key = os.environ.get("UNSPLASH_ACCESS_KEY")
    if not access_key:
        pytest.skip("UNSPLASH_ACCESS_KEY is not set in the environment.")
    services = _services(unsplash_access_key=access_key)
    photo = unsplash_request(services.transport, access_key, "/photos/random")
    image = UnsplashImage.from_listing(photo, services)
    image.fetch_data(SizeVariant.THUMBNAIL)
    image.fetch_info()
    assert image.image_data(SizeVariant.THUMBNAIL)
    assert image.metadata.title
