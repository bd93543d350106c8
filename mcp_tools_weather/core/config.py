from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


# Open-Meteo, token-free
GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"

DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "precipitation_sum")


class UkrainianStrings(BaseModel):
    """User-facing text fragments, all in Ukrainian."""
    model_config = ConfigDict(frozen=True)

    forecast_for: str = "Прогноз для"
    current: str = "Поточні умови"
    temperature: str = "Температура"
    wind: str = "Вітер"
    time: str = "Час"
    daily: str = "Денний прогноз"
    precipitation: str = "опади"
    no_data: str = "Дані недоступні"
    missing_value: str = "н/д"
    failed: str = "Не вдалося отримати дані"
    city_not_found: str = "не знайдено місто '{city}'"
    fetch_error: str = "помилка при отриманні даних"

    def not_found_message(self, city: str) -> str:
        return f"{self.failed}: {self.city_not_found.format(city=city)}"

    def failure_message(self) -> str:
        return f"{self.failed}: {self.fetch_error}"


class WeatherSettings(BaseModel):
    """Process-wide configuration.

    Built once at startup (see mcp/server.py) and handed to the tool
    registration; nothing in here changes while the server runs.
    """
    model_config = ConfigDict(frozen=True)

    server_name: str = "weather-ukraine"

    geocoding_url: str = GEOCODING_BASE_URL
    forecast_url: str = FORECAST_BASE_URL

    # Used when the caller gives neither coordinates nor a city
    default_latitude: float = Field(default=50.4501, ge=-90, le=90)
    default_longitude: float = Field(default=30.5234, ge=-180, le=180)
    default_place_name: str = "Kyiv"
    timezone: str = "Europe/Kyiv"
    language: str = "uk"

    temperature_unit: str = "celsius"
    windspeed_unit: str = "kmh"
    daily_fields: Tuple[str, ...] = DAILY_FIELDS
    max_days: int = Field(default=7, ge=1, le=16)

    timeout_s: float = Field(default=30.0, gt=0)

    strings: UkrainianStrings = Field(default_factory=UkrainianStrings)
