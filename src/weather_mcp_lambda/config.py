"""
Runtime configuration read from the environment.

Values are looked up on every call rather than cached at import time, so the
same process behaves correctly whether it was started by the Lambda Web
Adapter bootstrap or locally with a .env file.
"""
import os
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

SERVER_NAME = "Lambda Weather MCP Server"
SERVER_VERSION = "1.0.0"
SERVER_DESCRIPTION = "A simple weather MCP server running on AWS Lambda"
PROTOCOL_VERSION = "2024-11-05"


def get_port() -> int:
    """Port the HTTP listener binds to.

    The Web Adapter forwards traffic to AWS_LWA_PORT (falling back to PORT).
    """
    value = os.getenv("AWS_LWA_PORT") or os.getenv("PORT")
    return int(value) if value else DEFAULT_PORT


def runtime_environment() -> str:
    """Return "lambda" inside the managed runtime, "local" otherwise."""
    return "lambda" if os.getenv("AWS_LAMBDA_FUNCTION_NAME") else "local"


def invoke_mode() -> str:
    return os.getenv("AWS_LWA_INVOKE_MODE", "buffered")


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def weather_locale() -> str:
    return os.getenv("WEATHER_LOCALE", "en")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
