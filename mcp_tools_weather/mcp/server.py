"""MCP server (official python-sdk) exposing the Ukrainian weather forecast tool.

This uses FastMCP from the official MCP Python SDK:
- The tool is an ordinary Python function decorated with @mcp.tool().
- Its argument schema is derived from the type hints; range checks on
  latitude/longitude run when the tool is invoked.
- Transport is stdio by default, streamable HTTP (Uvicorn) on request.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

import sys
import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..core.config import WeatherSettings
from ..core.schemas import Latitude, Longitude
from ..services.forecast import get_forecast_text


logger = logging.getLogger("weather-ukraine-mcp")
logging.basicConfig(stream=sys.stderr, level=logging.INFO)

TOOL_DESCRIPTION = (
    "Отримати прогноз погоди для місця в Україні (місто або координати). "
    "Якщо нічого не вказано — Київ."
)

# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------


def create_server(settings: WeatherSettings) -> FastMCP:
    """Build the FastMCP instance and register `get_forecast` against `settings`."""
    mcp = FastMCP(name=settings.server_name, stateless_http=False)

    @mcp.tool(name="get_forecast", description=TOOL_DESCRIPTION)
    def get_forecast(
        city: Annotated[
            Optional[str], Field(description="Назва міста (наприклад 'Kyiv')")
        ] = None,
        latitude: Annotated[Optional[Latitude], Field(description="Широта")] = None,
        longitude: Annotated[Optional[Longitude], Field(description="Довгота")] = None,
    ) -> str:
        return get_forecast_text(
            settings,
            city=city,
            latitude=latitude,
            longitude=longitude,
        )

    return mcp


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    """Start the weather MCP server (stdio by default)."""
    parser = argparse.ArgumentParser(description="Weather (Ukraine) MCP server")
    parser.add_argument("--transport", choices=["stdio", "streamable-http"], default="stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)

    logging.getLogger().setLevel(args.log_level)

    try:
        settings = WeatherSettings(timeout_s=args.timeout)
        mcp = create_server(settings)

        if args.transport == "stdio":
            logger.info("Weather (Ukraine) MCP Server running on stdio")
            mcp.run(transport="stdio")
        else:
            logger.info(
                "Starting Weather (Ukraine) MCP server (streamable-http) on http://%s:%d/mcp …",
                args.host,
                args.port,
            )
            uvicorn.run(
                mcp.streamable_http_app(),  # path="/mcp"
                host=args.host,
                port=args.port,
                reload=False,
                loop="asyncio",
            )
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
