from __future__ import annotations

from typing import Optional

import pytest

from mcp_tools_weather.core.config import WeatherSettings
from mcp_tools_weather.core.schemas import FetchResult

from .payloads import FakeFetcher


@pytest.fixture
def settings() -> WeatherSettings:
    return WeatherSettings()


@pytest.fixture
def make_fetcher(settings):
    def _make(geocode: Optional[FetchResult] = None, forecast: Optional[FetchResult] = None):
        responses = {}
        if geocode is not None:
            responses[settings.geocoding_url] = geocode
        if forecast is not None:
            responses[settings.forecast_url] = forecast
        return FakeFetcher(responses)

    return _make
