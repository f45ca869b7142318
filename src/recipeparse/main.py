"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipeparse import __version__
from recipeparse.config import settings
from recipeparse.logging_config import LoggingContext, configure_logging, get_logger
from recipeparse.normalize.units import UNIT_TABLE
from recipeparse.routers import ingredients_router

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Recipeparse API ({len(UNIT_TABLE)} unit spellings loaded)")
    yield
    logger.info("Shutting down Recipeparse API")


app = FastAPI(
    title="Recipeparse API",
    description="Parse recipe ingredient lines into structured measurements",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag every log record of a request with its request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.include_router(ingredients_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipeparse-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipeparse API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
