# Public entry points for library callers (e.g. a UI layer).
from .fetcher import fetch_current, fetch_daily, fetch_hourly
from .formatter import describe_weather
from .models import CurrentSnapshot, DailyPoint, HourlyPoint, WeatherDescriptor

__all__ = [
    "fetch_hourly",
    "fetch_current",
    "fetch_daily",
    "describe_weather",
    "HourlyPoint",
    "DailyPoint",
    "CurrentSnapshot",
    "WeatherDescriptor",
]
