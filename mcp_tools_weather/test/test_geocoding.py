from mcp_tools_weather.core.schemas import FetchResult
from mcp_tools_weather.services.geocoding import geocode_city

from .payloads import GEOCODE_KHARKIV


def test_geocode_city_uses_first_result(settings, make_fetcher):
    fetch = make_fetcher(geocode=FetchResult.success(GEOCODE_KHARKIV))

    place = geocode_city("Kharkiv", settings, fetch=fetch)

    assert place is not None
    assert place.name == "Харків"
    assert place.coords.lat == 49.98081
    assert place.coords.lon == 36.25272
    assert fetch.calls == [
        (settings.geocoding_url, {"name": "Kharkiv", "count": 1, "language": "uk"})
    ]


def test_geocode_city_no_results(settings, make_fetcher):
    for payload in ({"results": []}, {"generationtime_ms": 0.5}):
        fetch = make_fetcher(geocode=FetchResult.success(payload))
        assert geocode_city("Atlantis", settings, fetch=fetch) is None


def test_geocode_city_fetch_failure(settings, make_fetcher):
    fetch = make_fetcher(geocode=FetchResult.failure("HTTP 500"))

    assert geocode_city("Lviv", settings, fetch=fetch) is None


def test_geocode_city_unusable_result(settings, make_fetcher):
    fetch = make_fetcher(
        geocode=FetchResult.success({"results": [{"name": "Nowhere", "latitude": 999}]})
    )

    assert geocode_city("Nowhere", settings, fetch=fetch) is None


def test_geocode_city_malformed_results(settings, make_fetcher):
    for payload in ({"results": 5}, {"results": {"a": 1}}, {"results": "Kyiv"}):
        fetch = make_fetcher(geocode=FetchResult.success(payload))
        assert geocode_city("Kyiv", settings, fetch=fetch) is None


def test_geocode_city_result_without_name(settings, make_fetcher):
    fetch = make_fetcher(
        geocode=FetchResult.success({"results": [{"latitude": 48.45, "longitude": 34.98}]})
    )

    place = geocode_city("Dnipro", settings, fetch=fetch)

    assert place is not None
    assert place.name is None
    assert place.coords.lat == 48.45
