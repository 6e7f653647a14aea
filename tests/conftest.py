"""Shared fixtures for the service tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from weather_mcp_lambda.main import app
from weather_mcp_lambda.tools.weather import WeatherGenerator, set_default_generator

FIXED_TIME = datetime(2026, 10, 19, 6, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def seeded_generator() -> Iterator[WeatherGenerator]:
    """Install a deterministic generator for the duration of a test."""
    generator = WeatherGenerator(seed=1234, clock=lambda: FIXED_TIME)
    previous = set_default_generator(generator)
    yield generator
    set_default_generator(previous)
