"""
Hello service - liveness and transport diagnostics behind the Web Adapter.
"""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from . import config
from .config import utc_timestamp

logger = logging.getLogger(__name__)

GREETING = "Hello from FastAPI + Lambda Web Adapter 🎉"

# 1 MiB, large enough to exercise response streaming through the adapter
LARGE_PAYLOAD_SIZE = 1024 * 1024

app = FastAPI(title="Hello", docs_url=None, redoc_url=None, openapi_url=None)


@app.get("/", response_class=PlainTextResponse)
async def hello():
    """Greeting endpoint."""
    return GREETING


@app.get("/time", response_class=PlainTextResponse)
async def current_time():
    """Current UTC time as plain text."""
    return utc_timestamp()


@app.get("/test/large", response_class=PlainTextResponse)
async def large_response():
    """Fixed 1 MiB body for checking large responses through the adapter."""
    return "A" * LARGE_PAYLOAD_SIZE


def run() -> None:
    """Start the hello listener on the configured port."""
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    port = config.get_port()
    logger.info("Starting HTTP server on port %d", port)
    uvicorn.run(app, host=config.DEFAULT_HOST, port=port, log_level=config.log_level().lower())


if __name__ == "__main__":
    run()
