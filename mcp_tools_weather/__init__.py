"""mcp_tools_weather package

Purpose:
- Provide clean, testable services for a Ukrainian weather forecast (Open-Meteo).
- Expose those services via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: settings + schemas
- services/: http/geocoding/weather/formatting logic + the tool handler
- mcp/: FastMCP server + tool wiring
"""

from .core.config import UkrainianStrings, WeatherSettings  # noqa: F401
from .core.schemas import Coordinates, Forecast, ForecastDay, Place  # noqa: F401
