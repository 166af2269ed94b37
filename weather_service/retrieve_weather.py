import logging
import os

import httpx
from mcp.server.fastmcp import FastMCP

from . import client
from .fetcher import fetch_current, fetch_daily, fetch_hourly
from .formatter import describe_weather, format_current, format_daily

logger = logging.getLogger(__name__)

UNAVAILABLE = "Unable to fetch forecast data for this location."

# Allow environment variables to configure host/port/mount path at import time
_m_host = os.environ.get("WEATHER_HOST", "127.0.0.1")
_m_port = int(os.environ.get("WEATHER_PORT", "8000"))
_m_mount = os.environ.get("WEATHER_MOUNT_PATH", "/mcp")
mcp = FastMCP(
    "weather",
    host=_m_host,
    port=_m_port,
    mount_path=_m_mount,
    streamable_http_path=_m_mount,
)


@mcp.tool()
async def get_hourly_weather() -> list[dict] | str:
    """Hourly temperature series for Jakarta as ``{time, temperature}`` records."""
    try:
        points = await fetch_hourly()
    except httpx.HTTPError as exc:
        logger.warning("Hourly forecast request failed: %s", exc)
        return UNAVAILABLE
    return [p.model_dump(by_alias=True) for p in points]


@mcp.tool()
async def get_current_weather() -> dict | str:
    """Current conditions for Jakarta, including the chance of rain this hour."""
    try:
        snapshot = await fetch_current()
    except httpx.HTTPError as exc:
        logger.warning("Current conditions request failed: %s", exc)
        return UNAVAILABLE
    return snapshot.model_dump(by_alias=True)


@mcp.tool()
async def get_daily_weather() -> list[dict] | str:
    """Daily forecast for Jakarta, one record per day in the forecast window."""
    try:
        days = await fetch_daily()
    except httpx.HTTPError as exc:
        logger.warning("Daily forecast request failed: %s", exc)
        return UNAVAILABLE
    return [d.model_dump(by_alias=True) for d in days]


@mcp.tool()
async def describe_weather_code(code: int | None = None) -> dict:
    """Map an Open-Meteo weather code to a ``{label, icon}`` descriptor."""
    return describe_weather(code).model_dump(by_alias=True)


@mcp.tool()
async def get_forecast() -> str:
    """Human-readable current conditions and daily forecast for Jakarta."""
    try:
        snapshot = await fetch_current()
        days = await fetch_daily()
    except httpx.HTTPError as exc:
        logger.warning("Forecast request failed: %s", exc)
        return UNAVAILABLE

    return "\n---\n".join([format_current(snapshot), format_daily(days)])


def _fake_payload() -> dict:
    """A minimal plausible Open-Meteo JSON body covering every section we request."""
    hours = [f"2024-01-01T{h:02d}:00" for h in range(24)]
    return {
        "latitude": client.LATITUDE,
        "longitude": client.LONGITUDE,
        "timezone": "Asia/Jakarta",
        "current": {
            "time": "2024-01-01T12:00",
            "temperature_2m": 31.2,
            "apparent_temperature": 35.0,
            "weathercode": 2,
            "relativehumidity_2m": 70,
            "windspeed_10m": 8.5,
        },
        "hourly": {
            "time": hours,
            "temperature_2m": [26.0 + (h % 12) * 0.5 for h in range(24)],
            "precipitation_probability": [h * 4 for h in range(24)],
        },
        "daily": {
            "time": ["2024-01-01", "2024-01-02", "2024-01-03"],
            "weathercode": [2, 61, 95],
            "temperature_2m_max": [32.0, 30.5, 29.8],
            "temperature_2m_min": [24.1, 23.9, 23.5],
            "precipitation_probability_max": [20, 80, 95],
            "windspeed_10m_max": [12.0, 15.3, 20.1],
        },
    }


async def _fake_make(params: dict | None = None) -> dict:
    return _fake_payload()


def main(argv=None):
    """Entry point for running the weather MCP server.

    Accepts an optional argv list (for console scripts or tests). Supported options:
      --version    Print package version and exit
      run (default) Start the MCP server
    """
    import argparse

    parser = argparse.ArgumentParser(prog="weather")
    parser.add_argument("command", nargs="?", choices=["run"], default="run")
    parser.add_argument(
        "--version", action="store_true", help="Print package version and exit"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http", "sse"],
        default=os.environ.get("WEATHER_TRANSPORT", "streamable-http"),
        help="Transport to use (default: streamable-http)",
    )
    parser.add_argument(
        "--mount-path",
        default=os.environ.get("WEATHER_MOUNT_PATH", "/mcp"),
        help="Mount path for HTTP transports (default: /mcp)",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("WEATHER_HOST", "127.0.0.1"),
        help="Host to bind the HTTP server to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("WEATHER_PORT", "8000")),
        help="Port to bind the HTTP server to",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("WEATHER_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--use-fake",
        action="store_true",
        help="Use a canned Open-Meteo response (for testing)",
    )
    args = parser.parse_args(argv)

    if args.version:
        from importlib.metadata import PackageNotFoundError, version

        try:
            print(version("weather-service"))
        except PackageNotFoundError:
            print("version unknown")
        return

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if args.use_fake:
        logger.info("Serving canned Open-Meteo responses")
        client.make_open_meteo_request = _fake_make

    # FastMCP binds to the host/port it was built with; keep them in sync
    mcp.settings.host = args.host
    mcp.settings.port = args.port

    logger.info("Starting weather server (transport=%s)", args.transport)
    mcp.run(transport=args.transport, mount_path=args.mount_path)


if __name__ == "__main__":
    main()
