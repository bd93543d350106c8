from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.config import WeatherSettings
from ..core.schemas import Coordinates, Place
from .formatting import format_forecast_text
from .geocoding import geocode_city
from .http import Fetcher, fetch_json
from .weather import fetch_forecast, parse_forecast


logger = logging.getLogger(__name__)


def get_forecast_text(
    settings: WeatherSettings,
    city: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    fetch: Fetcher = fetch_json,
) -> str:
    """Mini pipeline: resolve location + fetch forecast + render text.

    Location resolution, first match wins:
      1. latitude and longitude both given (0.0 is a valid coordinate)
      2. a non-blank city name, geocoded
      3. the default location (Kyiv)

    Never raises; every failure is returned as a Ukrainian message.
    """
    strings = settings.strings

    if latitude is not None and longitude is not None:
        try:
            place = Place(coords=Coordinates(lat=latitude, lon=longitude))
        except ValidationError as exc:
            logger.warning("Rejected coordinates %s, %s: %s", latitude, longitude, exc)
            return strings.failure_message()
    elif city and city.strip():
        city = city.strip()
        place = geocode_city(city, settings, fetch=fetch)
        if place is None:
            return strings.not_found_message(city)
    else:
        place = Place(
            coords=Coordinates(lat=settings.default_latitude, lon=settings.default_longitude),
            name=settings.default_place_name,
        )

    result = fetch_forecast(place.coords, settings, fetch=fetch)
    if not result.ok:
        logger.warning(
            "Forecast unavailable for %.4f, %.4f: %s",
            place.coords.lat,
            place.coords.lon,
            result.error,
        )
        return strings.failure_message()

    try:
        forecast = parse_forecast(result.data)
    except ValidationError as exc:
        logger.error("Unusable forecast payload: %s", exc)
        return strings.failure_message()

    return format_forecast_text(place, forecast, strings, max_days=settings.max_days)
