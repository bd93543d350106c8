"""Entrypoint for running the Weather (Ukraine) MCP server (stdio).

Usage:
  python run_mcp_server.py

Or via MCP host config (e.g., Claude Desktop) pointing to this script.
"""
from mcp_tools_weather.mcp.server import main

if __name__ == "__main__":
    main()
