from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.config import WeatherSettings
from ..core.schemas import Coordinates, GeocodingHit, Place
from .http import Fetcher, fetch_json


logger = logging.getLogger(__name__)


def geocode_city(
    city: str,
    settings: WeatherSettings,
    fetch: Fetcher = fetch_json,
) -> Optional[Place]:
    """Token-free geocoding via the Open-Meteo geocoding API.

    Only the first candidate is used. Returns None when the lookup failed or
    found nothing.
    """
    params = {"name": city, "count": 1, "language": settings.language}
    result = fetch(settings.geocoding_url, params=params, timeout_s=settings.timeout_s)
    if not result.ok:
        logger.warning("Geocoding failed for '%s': %s", city, result.error)
        return None

    results = result.data.get("results")
    if not isinstance(results, list) or not results:
        logger.info("Geocoding: no results for '%s'", city)
        return None

    try:
        hit = GeocodingHit.model_validate(results[0])
        coords = Coordinates(lat=hit.latitude, lon=hit.longitude)
    except ValidationError as exc:
        logger.error("Geocoding: unusable result for '%s': %s", city, exc)
        return None

    logger.debug("Geocoded '%s' -> %s (%s)", city, hit.name, hit.country)
    return Place(coords=coords, name=hit.name)
