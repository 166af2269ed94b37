from .models import CurrentSnapshot, DailyPoint, WeatherDescriptor

# First matching row wins. Codes outside every row fall back to Cloudy.
WEATHER_CODE_TABLE = (
    (frozenset({0}), "Sunny", "sunny"),
    (frozenset({1, 2}), "Partly Cloudy", "partly-sunny"),
    (frozenset({3}), "Cloudy", "cloudy"),
    (frozenset({45, 48}), "Foggy", "cloudy"),
    (
        frozenset({51, 53, 55, 56, 57, 61, 63, 65, 80, 81, 82}),
        "Rainy",
        "rainy",
    ),
    (frozenset({66, 67, 71, 73, 75, 77, 85, 86}), "Snowy", "rainy"),
    (frozenset({95, 96, 99}), "Thunder", "thunderstorm"),
)

UNKNOWN = WeatherDescriptor(label="Unknown", icon="cloudy")
FALLBACK = WeatherDescriptor(label="Cloudy", icon="cloudy")


def describe_weather(code: int | None) -> WeatherDescriptor:
    """Map an Open-Meteo weather code to a label and icon name."""
    if code is None:
        return UNKNOWN
    if isinstance(code, bool):
        return FALLBACK

    for codes, label, icon in WEATHER_CODE_TABLE:
        if code in codes:
            return WeatherDescriptor(label=label, icon=icon)

    return FALLBACK


def _value(value, unit: str = "") -> str:
    return "N/A" if value is None else f"{value}{unit}"


def format_current(snapshot: CurrentSnapshot) -> str:
    if snapshot.time is None and snapshot.temperature is None:
        return "Current weather: not available."

    return (
        f"Now ({_value(snapshot.time)}):\n"
        f"Temperature: {_value(snapshot.temperature, '°C')} "
        f"(feels like {_value(snapshot.apparent_temperature, '°C')})\n"
        f"Humidity: {_value(snapshot.humidity, '%')}\n"
        f"Wind: {_value(snapshot.wind_speed, ' km/h')}\n"
        f"Chance of rain: {_value(snapshot.precipitation_chance, '%')}\n"
        f"Conditions: {describe_weather(snapshot.weather_code).label}"
    )


def format_daily(days: list[DailyPoint]) -> str:
    if not days:
        return "Daily forecast: not available."

    lines = [
        f"{_value(d.date)}: {describe_weather(d.weather_code).label}, "
        f"High {_value(d.max_temp, '°C')}, Low {_value(d.min_temp, '°C')}, "
        f"Rain {_value(d.precipitation_chance, '%')}, "
        f"Wind {_value(d.wind_speed, ' km/h')}"
        for d in days
    ]
    return "Daily Forecast:\n" + "\n".join(lines)
