"""
Mock weather generation and formatting.

Nothing here talks to a real weather service. Every call draws fresh random
values, so the same city gives a different report each time.
"""
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from ...config import weather_locale
from .schemas import WeatherReport

TEMPERATURE_RANGE = (10, 40)
HUMIDITY_RANGE = (30, 80)
WIND_SPEED_RANGE = (5, 25)


@dataclass(frozen=True)
class WeatherLocale:
    """Labels and templates used to render a report in one language."""
    conditions: tuple[str, ...]
    template: str
    time_formatter: Callable[[datetime], str]


def _format_time_en(moment: datetime) -> str:
    # e.g. 10/19/2026, 3:04:05 PM
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {meridiem}"


def _format_time_ja(moment: datetime) -> str:
    # e.g. 2026/10/19 15:04:05
    return f"{moment.year}/{moment.month}/{moment.day} {moment.hour}:{moment:%M:%S}"


LOCALES: dict[str, WeatherLocale] = {
    "en": WeatherLocale(
        conditions=("Sunny", "Cloudy", "Rainy", "Snowy"),
        template=(
            "🌤️ Weather for {city}\n"
            "Temperature: {temperature}°C\n"
            "Condition: {condition}\n"
            "Humidity: {humidity}%\n"
            "Wind speed: {wind_speed} km/h\n"
            "Updated: {updated}"
        ),
        time_formatter=_format_time_en,
    ),
    "ja": WeatherLocale(
        conditions=("晴れ", "曇り", "雨", "雪"),
        template=(
            "🌤️ {city}の天気情報\n"
            "気温: {temperature}°C\n"
            "天候: {condition}\n"
            "湿度: {humidity}%\n"
            "風速: {wind_speed} km/h\n"
            "更新時刻: {updated}"
        ),
        time_formatter=_format_time_ja,
    ),
}


def get_locale(name: str) -> WeatherLocale:
    """Resolve a locale name such as "en", "ja" or "ja-JP"."""
    key = name.split("-")[0].split("_")[0].lower()
    if key not in LOCALES:
        raise ValueError(f"Unsupported weather locale: {name}")
    return LOCALES[key]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WeatherGenerator:
    """
    Seedable source of mock weather reports.

    Args:
        seed: Seed for the private random number generator. None seeds from the OS.
        locale: Language used for condition labels and the formatted text.
        clock: Callable returning the report timestamp. Defaults to UTC now.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        locale: str = "en",
        clock: Optional[Callable[[], datetime]] = None
    ):
        self._random = random.Random(seed)
        self.locale = get_locale(locale)
        self._clock = clock or _utcnow

    def generate(self, city: str) -> WeatherReport:
        return WeatherReport(
            city=city,
            temperature_celsius=self._random.randrange(*TEMPERATURE_RANGE),
            condition=self._random.choice(self.locale.conditions),
            humidity_percent=self._random.randrange(*HUMIDITY_RANGE),
            wind_speed_kph=self._random.randrange(*WIND_SPEED_RANGE),
            generated_at=self._clock(),
        )

    def format(self, report: WeatherReport) -> str:
        """Render a report as the multi-line text returned to clients."""
        return self.locale.template.format(
            city=report.city,
            temperature=report.temperature_celsius,
            condition=report.condition,
            humidity=report.humidity_percent,
            wind_speed=report.wind_speed_kph,
            updated=self.locale.time_formatter(report.generated_at.astimezone()),
        )


_default_generator: Optional[WeatherGenerator] = None


def get_default_generator() -> WeatherGenerator:
    """Return the process-wide generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = WeatherGenerator(locale=weather_locale())
    return _default_generator


def set_default_generator(generator: Optional[WeatherGenerator]) -> Optional[WeatherGenerator]:
    """Replace the process-wide generator and return the previous one.

    Passing None resets it so the next call builds a fresh one from config.
    """
    global _default_generator
    previous = _default_generator
    _default_generator = generator
    return previous
