import pytest

from core.errors import MalformedResponseError
from core.providers.unsplash.client import urls_from_listing
from core.models.image import SizeVariant
from core.providers.unsplash.normalizer import normalize_unsplash_info


def test_missing_description_resolves_to_untitled() -> None:
    result = normalize_unsplash_info({"user": {"username": "sam"}})
    assert result.metadata.title == "Untitled"
    assert result.metadata.description is None
    assert result.metadata.author == "sam"


def test_description_populates_title_and_description() -> None:
    payload = {
        "description": "Misty forest",
        "user": {"name": "Sam Lee", "username": "sam"},
        "created_at": "2020-01-02T03:04:05-05:00",
    }

    metadata = normalize_unsplash_info(payload).metadata

    assert metadata.title == "Misty forest"
    assert metadata.description == "Misty forest"
    assert metadata.author == "Sam Lee"
    assert metadata.date == "2020-01-02T03:04:05-05:00"


def test_location_prefers_title() -> None:
    payload = {
        "location": {"title": "Paris", "name": "Ignored", "position": {"latitude": 1.0, "longitude": 2.0}}
    }
    result = normalize_unsplash_info(payload)
    assert result.metadata.location == "Paris"
    assert result.coordinates is None


def test_location_falls_back_to_name() -> None:
    result = normalize_unsplash_info({"location": {"title": "", "name": "Lyon"}})
    assert result.metadata.location == "Lyon"


def test_location_position_needs_geocoding() -> None:
    result = normalize_unsplash_info({"location": {"position": {"latitude": 1.0, "longitude": 2.0}}})
    assert result.metadata.location is None
    assert result.coordinates == ("1.0", "2.0")


def test_location_null_position_is_ignored() -> None:
    result = normalize_unsplash_info({"location": {"title": None, "position": {"latitude": None, "longitude": None}}})
    assert result.coordinates is None
    assert result.metadata.location is None


def test_non_object_payload_is_malformed() -> None:
    with pytest.raises(MalformedResponseError):
        normalize_unsplash_info(["not", "an", "object"])


def test_urls_from_listing_maps_raw_to_two_sizes() -> None:
    urls = urls_from_listing({"thumb": "t.jpg", "regular": "r.jpg", "raw": "raw.jpg"})
    assert urls == {
        SizeVariant.THUMBNAIL: "t.jpg",
        SizeVariant.MEDIUM: "r.jpg",
        SizeVariant.EXTRA_LARGE: "raw.jpg",
        SizeVariant.ORIGINAL: "raw.jpg",
    }
