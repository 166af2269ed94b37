import logging
import math

from . import client
from .models import CurrentSnapshot, DailyPoint, HourlyPoint

logger = logging.getLogger(__name__)

HOURLY_FIELDS = ["temperature_2m"]
CURRENT_FIELDS = [
    "temperature_2m",
    "apparent_temperature",
    "weathercode",
    "relativehumidity_2m",
    "windspeed_10m",
]
DAILY_FIELDS = [
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
    "windspeed_10m_max",
]


def _section(data, key: str) -> dict:
    block = data.get(key) if isinstance(data, dict) else None
    return block if isinstance(block, dict) else {}


def _series(block: dict, key: str) -> list:
    values = block.get(key)
    return values if isinstance(values, list) else []


def _at(values: list, index: int):
    return values[index] if 0 <= index < len(values) else None


def _number(value) -> float | int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        float(value)
    except OverflowError:
        # JSON integers are unbounded; ours must fit in a float
        return None
    return value


def _code(value) -> int | None:
    value = _number(value)
    if value is None or isinstance(value, float) and not value.is_integer():
        return None
    return int(value)


def _text(value) -> str | None:
    return value if isinstance(value, str) else None


def parse_hourly(data) -> list[HourlyPoint]:
    """Zip ``hourly.time`` with ``hourly.temperature_2m``.

    Entries whose temperature is missing, non-numeric or NaN are dropped.
    """
    hourly = _section(data, "hourly")
    times = _series(hourly, "time")
    temps = _series(hourly, "temperature_2m")

    points: list[HourlyPoint] = []
    for i, time in enumerate(times):
        temp = _number(_at(temps, i))
        if temp is None or math.isnan(temp) or _text(time) is None:
            continue
        points.append(HourlyPoint(time=time, temperature=temp))
    return points


def parse_current(data) -> CurrentSnapshot:
    """Build the current snapshot.

    The precipitation chance comes from the hourly series at the index whose
    timestamp equals ``current.time``, or from the first hour when there is no
    such index.
    """
    current = _section(data, "current")
    hourly = _section(data, "hourly")
    times = _series(hourly, "time")
    precipitation = _series(hourly, "precipitation_probability")

    now = _text(current.get("time"))
    index = times.index(now) if now is not None and now in times else 0

    return CurrentSnapshot(
        time=now,
        temperature=_number(current.get("temperature_2m")),
        apparent_temperature=_number(current.get("apparent_temperature")),
        weather_code=_code(current.get("weathercode")),
        wind_speed=_number(current.get("windspeed_10m")),
        humidity=_number(current.get("relativehumidity_2m")),
        precipitation_chance=_number(_at(precipitation, index)),
    )


def parse_daily(data) -> list[DailyPoint]:
    """One record per ``daily.time`` entry, index-aligned and unfiltered."""
    daily = _section(data, "daily")
    dates = _series(daily, "time")
    max_temps = _series(daily, "temperature_2m_max")
    min_temps = _series(daily, "temperature_2m_min")
    codes = _series(daily, "weathercode")
    precipitation = _series(daily, "precipitation_probability_max")
    wind = _series(daily, "windspeed_10m_max")

    return [
        DailyPoint(
            date=_text(date),
            max_temp=_number(_at(max_temps, i)),
            min_temp=_number(_at(min_temps, i)),
            weather_code=_code(_at(codes, i)),
            precipitation_chance=_number(_at(precipitation, i)),
            wind_speed=_number(_at(wind, i)),
        )
        for i, date in enumerate(dates)
    ]


async def fetch_hourly() -> list[HourlyPoint]:
    """Fetch the hourly temperature series for Jakarta."""
    data = await client.make_open_meteo_request(
        {"hourly": ",".join(HOURLY_FIELDS)}
    )
    points = parse_hourly(data)
    logger.debug("Parsed %d hourly points", len(points))
    return points


async def fetch_current() -> CurrentSnapshot:
    """Fetch current conditions for Jakarta."""
    data = await client.make_open_meteo_request(
        {
            "current": ",".join(CURRENT_FIELDS),
            "hourly": "precipitation_probability",
        }
    )
    return parse_current(data)


async def fetch_daily() -> list[DailyPoint]:
    """Fetch the daily forecast for Jakarta."""
    data = await client.make_open_meteo_request({"daily": ",".join(DAILY_FIELDS)})
    days = parse_daily(data)
    logger.debug("Parsed %d daily records", len(days))
    return days
