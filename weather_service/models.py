from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

WeatherIcon = Literal["rainy", "cloudy", "partly-sunny", "sunny", "thunderstorm"]


class _Shape(BaseModel):
    # attributes are snake_case, serialized keys camelCase for UI callers
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class HourlyPoint(_Shape):
    time: str
    temperature: float


class DailyPoint(_Shape):
    date: str | None = None
    max_temp: float | None = None
    min_temp: float | None = None
    weather_code: int | None = None
    precipitation_chance: float | None = None
    wind_speed: float | None = None


class CurrentSnapshot(_Shape):
    time: str | None = None
    temperature: float | None = None
    apparent_temperature: float | None = None
    weather_code: int | None = None
    wind_speed: float | None = None
    humidity: float | None = None
    precipitation_chance: float | None = None


class WeatherDescriptor(_Shape):
    label: str
    icon: WeatherIcon
