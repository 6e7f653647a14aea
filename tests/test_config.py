"""Tests for environment driven configuration."""

import re

import pytest

from weather_mcp_lambda import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AWS_LWA_PORT", "PORT", "AWS_LAMBDA_FUNCTION_NAME", "LOG_LEVEL", "WEATHER_LOCALE"):
        monkeypatch.delenv(name, raising=False)


class TestGetPort:
    def test_default(self) -> None:
        assert config.get_port() == 8080

    def test_port_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        assert config.get_port() == 9000

    def test_adapter_port_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("AWS_LWA_PORT", "9100")
        assert config.get_port() == 9100


class TestRuntimeEnvironment:
    def test_local(self) -> None:
        assert config.runtime_environment() == "local"

    def test_lambda(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "WeatherMcpServer")
        assert config.runtime_environment() == "lambda"


class TestMisc:
    def test_log_level_is_uppercased(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert config.log_level() == "DEBUG"

    def test_locale_default(self) -> None:
        assert config.weather_locale() == "en"

    def test_utc_timestamp_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", config.utc_timestamp())
