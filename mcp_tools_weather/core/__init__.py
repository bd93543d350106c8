from .config import UkrainianStrings, WeatherSettings  # noqa: F401
from .schemas import (  # noqa: F401
    Coordinates,
    CurrentWeather,
    FetchResult,
    Forecast,
    ForecastDay,
    GeocodingHit,
    Latitude,
    Longitude,
    Place,
)
