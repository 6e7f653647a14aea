"""
Lambda Weather MCP Server - Main FastAPI application.

Runs as a plain HTTP server; on Lambda the Web Adapter layer proxies
invocations to it.
"""
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .config import SERVER_DESCRIPTION, SERVER_NAME, SERVER_VERSION, utc_timestamp
from .mcp.server import router as mcp_router
from .tools import get_all_tools, register_all_tools
from .tools.weather import TOOL_NAME, WeatherQuery, get_default_generator

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

AVAILABLE_ENDPOINTS = ["/", "/health", "/tools", "/weather", "/mcp"]

register_all_tools()

# Create FastAPI app. Interactive docs are off so every unknown path gets the 404 body.
app = FastAPI(
    title=SERVER_NAME,
    description=SERVER_DESCRIPTION,
    version=SERVER_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)

# Include MCP router
app.include_router(mcp_router)


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """
    Attach CORS headers to every response.
    Also the last line of defence: anything a route lets escape becomes a 500.
    """
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("Server error")
        response = JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": str(e)}
        )
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and known paths with the wrong method both answer 404."""
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": "The requested endpoint was not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            }
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.options("/{full_path:path}")
async def preflight(full_path: str):
    """CORS preflight for any path."""
    return Response(status_code=200)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": SERVER_NAME,
        "version": SERVER_VERSION,
        "endpoints": {
            "mcp": "/mcp",
            "weather": "/weather",
            "health": "/health",
            "tools": "/tools",
        },
        "server": {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "description": SERVER_DESCRIPTION,
            "tools": [tool.name for tool in get_all_tools()],
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "environment": config.runtime_environment(),
    }


@app.get("/tools")
async def tools():
    """List registered tool descriptors."""
    tool_list = [tool.to_schema().model_dump() for tool in get_all_tools()]
    return {
        "tools": tool_list,
        "count": len(tool_list),
    }


@app.post("/weather")
async def weather(request: Request):
    """Run the weather tool directly and return both text and structured data."""
    try:
        body = await request.json()
        city = body.get("city") if isinstance(body, dict) else None

        if not city:
            return JSONResponse(status_code=400, content={"error": "City parameter is required"})

        query = WeatherQuery(city=city)
        generator = get_default_generator()
        report = generator.generate(query.city)

        return {
            "tool": TOOL_NAME,
            "input": {"city": query.city},
            "result": generator.format(report),
            "data": report.model_dump(mode="json", by_alias=True),
            "timestamp": utc_timestamp(),
        }

    except Exception as e:
        logger.exception("Weather tool error")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to get weather information", "message": str(e)}
        )


@app.on_event("startup")
async def startup_event():
    """Log the tool registry once the server is up."""
    loaded = get_all_tools()
    logger.info("Loaded %d tools", len(loaded))
    for tool in loaded:
        logger.info("   - %s", tool.name)


def run() -> None:
    """Start the HTTP listener the Web Adapter proxies to."""
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    port = config.get_port()
    logger.info("Starting HTTP server on port %d", port)
    logger.info("Environment: %s", config.runtime_environment())
    logger.info("AWS_LWA_INVOKE_MODE: %s", config.invoke_mode())
    uvicorn.run(app, host=config.DEFAULT_HOST, port=port, log_level=config.log_level().lower())


if __name__ == "__main__":
    run()
