#!/usr/bin/env python3
# models/weather.py - OpenWeatherMap payload views
#
# from_dict() raises KeyError/IndexError when an expected field is missing and
# TypeError when a field has the wrong JSON type; callers map the first to a
# parse failure and the second to a processing failure.

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Union

Number = Union[int, Decimal, float]


def _number(value: Any, field: str) -> Number:
    # bool is an int subclass but never a temperature
    if isinstance(value, bool) or not isinstance(value, (int, Decimal, float)):
        raise TypeError(f"{field} must be a number, got {type(value).__name__}")
    return value


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class CurrentWeather:
    temperature: Number
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurrentWeather':
        current = data["current"]
        return cls(
            temperature=_number(current["temp"], "current.temp"),
            description=_text(current["weather"][0]["description"], "current.weather[0].description")
        )

    def format(self) -> str:
        return f"Current weather: {self.temperature}°C, {self.description}"


@dataclass(frozen=True)
class ForecastEntry:
    timestamp: str
    temperature: Number
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ForecastEntry':
        return cls(
            timestamp=_text(data["dt_txt"], "dt_txt"),
            temperature=_number(data["main"]["temp"], "main.temp"),
            description=_text(data["weather"][0]["description"], "weather[0].description")
        )

    @classmethod
    def list_from_dict(cls, data: Dict[str, Any]) -> List['ForecastEntry']:
        return [cls.from_dict(item) for item in data["list"]]

    def format(self) -> str:
        return f"Date: {self.timestamp}, Temp: {self.temperature}°C, Description: {self.description}"


@dataclass(frozen=True)
class AlertEntry:
    event: str
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AlertEntry':
        return cls(event=_text(data["event"], "event"), description=_text(data["description"], "description"))

    def format(self) -> str:
        return f"Event: {self.event}, Description: {self.description}"


def format_forecast(entries: List[ForecastEntry]) -> str:
    lines = ["Weather forecast:\n"]
    for entry in entries:
        lines.append(f"{entry.format()}\n")
    return "".join(lines)


def format_alerts(alerts: List[AlertEntry]) -> str:
    lines = ["Weather Alerts:\n"]
    for alert in alerts:
        lines.append(f"{alert.format()}\n")
    return "".join(lines)
