"""Tests for the registered getWeather tool."""

import pytest
from pydantic import ValidationError

from weather_mcp_lambda.tools import get_tool
from weather_mcp_lambda.tools.weather import TOOL_NAME, WeatherGenerator, get_weather


class TestGetWeather:
    def test_registered_under_tool_name(self) -> None:
        definition = get_tool(TOOL_NAME)
        assert definition is not None
        assert definition.function is get_weather

    def test_returns_formatted_text(self, seeded_generator: WeatherGenerator) -> None:
        text = get_weather("Sapporo")
        assert text.startswith("🌤️ Weather for Sapporo")
        assert "km/h" in text

    def test_rejects_empty_city(self) -> None:
        with pytest.raises(ValidationError):
            get_weather("")
