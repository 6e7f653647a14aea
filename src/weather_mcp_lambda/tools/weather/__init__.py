"""
Weather tool for the Lambda MCP server.
"""
from .schemas import WeatherQuery, WeatherReport
from .tool import TOOL_NAME, get_weather
from .utils import WeatherGenerator, get_default_generator, set_default_generator

__all__ = [
    "TOOL_NAME",
    "WeatherGenerator",
    "WeatherQuery",
    "WeatherReport",
    "get_default_generator",
    "get_weather",
    "set_default_generator",
]
