"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pksuid.config import load_config
from pksuid.core.errors import PKSUIDError
from pksuid.internal.logging import get_logger, LogLevel, StructuredLogger
from pksuid.ui.routes import health, ids


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    log_level = LogLevel[config.logging.level.upper()]
    StructuredLogger.configure(min_level=log_level)
    logger_instance = get_logger()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0")
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="PKSUID",
        version="1.0.0",
        description="prefixed k-sortable unique identifiers",
        lifespan=lifespan,
    )

    ids.init(config.ids)

    app.include_router(ids.router)
    app.include_router(health.router)

    @app.exception_handler(PKSUIDError)
    async def pksuid_error(request: Request, exc: PKSUIDError):
        logger_instance.warn("Rejected identifier", error=exc, path=request.url.path, error_id=exc.error_id)
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "error_id": exc.error_id, "type": type(exc).__name__},
        )

    return app
