from __future__ import annotations

from typing import List, Optional

from ..core.config import UkrainianStrings
from ..core.schemas import Forecast, Place


def format_forecast_text(
    place: Place,
    forecast: Forecast,
    strings: UkrainianStrings,
    max_days: int = 7,
) -> str:
    """Render a forecast as plain Ukrainian text, one fact per line.

    Pure function: identical input always yields identical output.
    """
    lat = f"{place.coords.lat:.4f}"
    lon = f"{place.coords.lon:.4f}"
    loc = f"{place.name} ({lat}, {lon})" if place.name else f"{lat}, {lon}"

    lines: List[str] = [f"{strings.forecast_for} {loc}"]

    cur = forecast.current
    if cur is not None:
        lines.append("")
        lines.append(f"{strings.current}:")
        lines.append(f"{strings.temperature}: {_num(cur.temperature, strings)} °C")
        lines.append(
            f"{strings.wind}: {_num(cur.windspeed, strings)} km/h "
            f"({_num(cur.winddirection, strings)}°)"
        )
        lines.append(f"{strings.time}: {cur.time}")
    else:
        lines.append(strings.no_data)

    if forecast.days:
        lines.append("")
        lines.append(f"{strings.daily}:")
        for day in forecast.days[:max_days]:
            lines.append(
                f"{day.date} — {strings.temperature}: "
                f"{_num(day.temp_min_c, strings)}…{_num(day.temp_max_c, strings)} °C, "
                f"{strings.precipitation}: {_num(day.precipitation_mm, strings)} мм"
            )

    return "\n".join(lines)


def _num(value: Optional[float], strings: UkrainianStrings) -> str:
    """Print numbers the way the API sends them: 12.0 -> '12', 12.5 -> '12.5'."""
    if value is None:
        return strings.missing_value
    if float(value).is_integer():
        return str(int(value))
    return str(value)
