"""
Pydantic schemas for the weather tool.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeatherQuery(BaseModel):
    """Input for the weather tool."""

    city: str = Field(min_length=1, description="City name (e.g. Tokyo, Osaka, New York)")


class WeatherReport(BaseModel):
    """Mock weather observation for one city. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    city: str = Field(description="City the report was generated for")
    temperature_celsius: int = Field(ge=10, lt=40, description="Temperature in °C")
    condition: str = Field(description="Localized sky condition label")
    humidity_percent: int = Field(ge=30, lt=80, description="Relative humidity in %")
    wind_speed_kph: int = Field(ge=5, lt=25, description="Wind speed in km/h")
    generated_at: datetime = Field(description="When the report was generated (UTC)")
