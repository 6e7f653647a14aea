"""Tests for the tool registry and @tool decorator."""

import pytest

from weather_mcp_lambda.tools import base
from weather_mcp_lambda.tools.base import build_input_schema, python_type_to_json_schema


@pytest.fixture
def empty_registry(monkeypatch: pytest.MonkeyPatch) -> dict:
    registry: dict = {}
    monkeypatch.setattr(base, "TOOL_REGISTRY", registry)
    return registry


class TestTypeMapping:
    @pytest.mark.parametrize(
        "python_type,expected",
        [(str, "string"), (int, "integer"), (float, "number"), (bool, "boolean"),
         (list, "array"), (dict, "object"), (bytes, "string")],
    )
    def test_mapping(self, python_type: type, expected: str) -> None:
        assert python_type_to_json_schema(python_type) == expected


class TestBuildInputSchema:
    def test_required_and_optional(self) -> None:
        def sample(city: str, days: int = 3, verbose=False) -> None:
            pass

        schema = build_input_schema(sample, {"city": "Where"})
        assert schema == {
            "type": "object",
            "properties": {
                "city": {"type": "string", "description": "Where"},
                "days": {"type": "integer"},
                "verbose": {"type": "string"},
            },
            "required": ["city"],
        }


class TestToolDecorator:
    def test_registers_and_returns_function(self, empty_registry: dict) -> None:
        @base.tool(name="echo", description="Returns what you send")
        def echo(message: str) -> str:
            return message

        assert echo("hi") == "hi"
        definition = empty_registry["echo"]
        assert definition.function is echo
        assert definition({"message": "hey"}) == "hey"
        assert definition.to_schema().model_dump() == {
            "name": "echo",
            "description": "Returns what you send",
            "inputSchema": {
                "type": "object",
                "properties": {"message": {"type": "string"}},
                "required": ["message"],
            },
        }

    def test_lookup(self, empty_registry: dict) -> None:
        @base.tool(name="noop", description="Does nothing")
        def noop() -> None:
            return None

        assert base.get_tool("noop") is empty_registry["noop"]
        assert base.get_tool("missing") is None
        assert [t.name for t in base.get_all_tools()] == ["noop"]


class TestWeatherRegistration:
    def test_get_weather_registered(self) -> None:
        from weather_mcp_lambda.tools import register_all_tools

        registry = register_all_tools()
        assert list(registry) == ["getWeather"]


class TestToolDefinitionCall:
    def test_drops_undeclared_arguments(self, empty_registry: dict) -> None:
        @base.tool(name="greet", description="Says hello")
        def greet(name: str, punctuation: str = "!") -> str:
            return f"Hello {name}{punctuation}"

        definition = empty_registry["greet"]
        assert definition.argument_names == {"name", "punctuation"}
        assert definition({"name": "Ada", "units": "metric", "debug": True}) == "Hello Ada!"

    def test_missing_required_argument_still_fails(self, empty_registry: dict) -> None:
        @base.tool(name="greet", description="Says hello")
        def greet(name: str) -> str:
            return f"Hello {name}"

        with pytest.raises(TypeError):
            empty_registry["greet"]({"units": "metric"})
