"""
Weather tool (mock data).
"""
from weather_mcp_lambda.tools.base import tool

from .schemas import WeatherQuery
from .utils import get_default_generator

TOOL_NAME = "getWeather"
TOOL_DESCRIPTION = "Get the current weather information for the specified city"


@tool(
    name=TOOL_NAME,
    description=TOOL_DESCRIPTION,
    descriptions={"city": WeatherQuery.model_fields["city"].description}
)
def get_weather(city: str) -> str:
    """
    Generate a mock weather report for a city.

    Args:
        city: City name (e.g. "Tokyo")

    Returns:
        Multi-line human readable report
    """
    query = WeatherQuery(city=city)
    generator = get_default_generator()
    return generator.format(generator.generate(query.city))
