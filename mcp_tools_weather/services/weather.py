"""Weather service (Open-Meteo forecast endpoint).

Builds the forecast query for a resolved location and turns the raw payload
into a Forecast. The daily block arrives as parallel arrays keyed by field
name; they are zipped into one ForecastDay per entry of `daily.time`. A
missing or non-numeric value only blanks that field of that day.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.config import WeatherSettings
from ..core.schemas import Coordinates, CurrentWeather, FetchResult, Forecast, ForecastDay
from .http import Fetcher, fetch_json


def build_forecast_params(coords: Coordinates, settings: WeatherSettings) -> Dict[str, str]:
    """Query string for current conditions plus the daily min/max/precipitation series."""
    return {
        "latitude": str(coords.lat),
        "longitude": str(coords.lon),
        "current_weather": "true",
        "daily": ",".join(settings.daily_fields),
        "timezone": settings.timezone,
        "temperature_unit": settings.temperature_unit,
        "windspeed_unit": settings.windspeed_unit,
    }


def fetch_forecast(
    coords: Coordinates,
    settings: WeatherSettings,
    fetch: Fetcher = fetch_json,
) -> FetchResult:
    params = build_forecast_params(coords, settings)
    return fetch(settings.forecast_url, params=params, timeout_s=settings.timeout_s)


def parse_forecast(data: Dict[str, Any]) -> Forecast:
    """Transform raw Open-Meteo payload into our domain model.

    Raises pydantic.ValidationError if `current_weather` is present but unusable.
    """
    current_raw = data.get("current_weather")
    current = CurrentWeather.model_validate(current_raw) if current_raw else None

    return Forecast(
        latitude=data.get("latitude"),
        longitude=data.get("longitude"),
        timezone=data.get("timezone"),
        current=current,
        days=_days_from_daily(data.get("daily")),
    )


def _days_from_daily(daily: Any) -> List[ForecastDay]:
    if not isinstance(daily, dict):
        return []
    times = _as_list(daily.get("time"))
    tmax = _as_list(daily.get("temperature_2m_max"))
    tmin = _as_list(daily.get("temperature_2m_min"))
    precip = _as_list(daily.get("precipitation_sum"))

    days: List[ForecastDay] = []
    for i, t in enumerate(times):
        days.append(
            ForecastDay(
                date=str(t),
                temp_min_c=_safe_float(tmin, i),
                temp_max_c=_safe_float(tmax, i),
                precipitation_mm=_safe_float(precip, i),
            )
        )
    return days


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _safe_float(arr: List[Any], idx: int) -> Optional[float]:
    try:
        v = arr[idx]
        return None if v is None else float(v)
    except (IndexError, TypeError, ValueError):
        return None
