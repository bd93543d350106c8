from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Geographic coordinates in WGS84."""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class Place(BaseModel):
    """Resolved location of a single forecast request."""
    model_config = ConfigDict(frozen=True)

    coords: Coordinates
    name: Optional[str] = None


class GeocodingHit(BaseModel):
    """First entry of an Open-Meteo geocoding `results` array."""
    latitude: float
    longitude: float
    name: Optional[str] = None
    country: Optional[str] = None


class CurrentWeather(BaseModel):
    """Open-Meteo `current_weather` block."""
    temperature: float
    windspeed: float
    winddirection: float
    weathercode: Optional[int] = None
    time: str


class ForecastDay(BaseModel):
    """One day of the daily series, assembled from the parallel arrays."""
    date: str
    temp_min_c: Optional[float] = None
    temp_max_c: Optional[float] = None
    precipitation_mm: Optional[float] = None


class Forecast(BaseModel):
    """Parsed forecast payload."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    current: Optional[CurrentWeather] = None
    days: List[ForecastDay] = Field(default_factory=list)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of an HTTP fetch: either parsed JSON or the reason it failed."""
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Dict[str, Any]) -> "FetchResult":
        return cls(data=data)

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(error=reason)


# Bounded coordinate types for tool arguments.
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]
