from concurrent.futures import ThreadPoolExecutor

from core.errors import SizeUnavailableError
from core.models.image import SizeVariant
from core.providers.flickr.adapter import FlickrImage
from core.providers.unsplash.adapter import UnsplashImage
from core.services.dispatch import FetchOutcome, submit_fetch


def test_parallel_fetches_fill_disjoint_slots(services, transport) -> None:
    image = FlickrImage("7", 1, "srv", "sec", services)
    sizes = [SizeVariant.THUMBNAIL, SizeVariant.SMALL, SizeVariant.MEDIUM]
    for size in sizes:
        transport.responses[image.image_url(size)] = size.value.encode()
    outcomes: list[FetchOutcome] = []

    with ThreadPoolExecutor(max_workers=3) as executor:
        futures = [submit_fetch(executor, image.fetch_data, size, on_complete=outcomes.append) for size in sizes]
        results = [future.result() for future in futures]

    assert all(result.ok for result in results)
    assert len(outcomes) == 3
    for size in sizes:
        assert image.image_data(size) == size.value.encode()


def test_failure_is_reported_through_callback(services) -> None:
    image = UnsplashImage("u", {}, services)
    outcomes: list[FetchOutcome] = []

    with ThreadPoolExecutor(max_workers=1) as executor:
        result = submit_fetch(executor, image.fetch_data, SizeVariant.SMALL, on_complete=outcomes.append).result()

    assert result.ok is False
    assert isinstance(result.error, SizeUnavailableError)
    assert outcomes == [result]
