import pytest

from core.errors import GeocodeError, TransportError
from core.geocode.opencage import OPENCAGE_URL, OpenCageGeocoder, formatted_location


def test_formatted_location_uses_first_result() -> None:
    data = {"results": [{"formatted": "Eiffel Tower, Paris, France"}, {"formatted": "Other"}]}
    assert formatted_location(data) == "Eiffel Tower, Paris, France"


def test_formatted_location_without_results() -> None:
    with pytest.raises(GeocodeError, match="invalid coordinates"):
        formatted_location({"results": [], "status": {"message": "invalid coordinates"}})


def test_reverse_geocode_queries_coordinates(transport) -> None:
    transport.responses[OPENCAGE_URL] = {"results": [{"formatted": "Lyon, France"}]}
    geocoder = OpenCageGeocoder(transport, "oc-key", language="en")

    assert geocoder.reverse_geocode("45.76", "4.83") == "Lyon, France"
    params = transport.calls[0]["params"]
    assert params["q"] == "45.76,4.83"
    assert params["key"] == "oc-key"
    assert params["language"] == "en"


def test_reverse_geocode_wraps_transport_errors(transport) -> None:
    transport.responses[OPENCAGE_URL] = TransportError(TransportError.HTTP_STATUS, "402 quota", 402)
    with pytest.raises(GeocodeError):
        OpenCageGeocoder(transport, "oc-key").reverse_geocode("1.0", "2.0")


def test_reverse_geocode_requires_key(transport) -> None:
    with pytest.raises(GeocodeError):
        OpenCageGeocoder(transport, "").reverse_geocode("1.0", "2.0")
    assert transport.calls == []
