"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.cli_helpers import setup_logging
from common.utils import utc_timestamp
from extraction_api.clients import build_extractor, build_store
from extraction_api.config import get_config
from extraction_api.routers import extraction, health, root

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the model and store clients once and share them across requests."""
    config = get_config()
    logger.info("Configuration present: %s", config.presence())

    app.state.extractor = build_extractor(config)
    app.state.store = build_store(config)
    yield
    app.state.extractor = None
    app.state.store = None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": ...}; unsupported methods count as not found."""
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Error: %s", exc, exc_info=exc)
    status_code = getattr(exc, "status_code", 500)
    if not isinstance(status_code, int):
        status_code = 500
    return JSONResponse(
        status_code=status_code,
        content={
            "error": str(exc) or "Internal Server Error",
            "timestamp": utc_timestamp(),
        },
    )


def create_app() -> FastAPI:
    """Create the FastAPI application with routers and error handlers."""
    app = FastAPI(
        title="Content Extraction API",
        description="Extracts structured content from raw articles with an LLM and stores it",
        version=root.API_VERSION,
        lifespan=lifespan,
    )

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(extraction.router)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    return app


app = create_app()


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()

    uvicorn.run(
        "extraction_api.main:app",
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
