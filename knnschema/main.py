"""FastAPI app entry: config, logging, health, and method endpoints."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from knnschema.config.logging import configure_logging, get_logger
from knnschema.config.settings import get_settings
from knnschema.controllers.routes.method import router as method_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="k-NN Method Schema",
    description="Validate k-NN method definitions and compile native index descriptions",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(method_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
