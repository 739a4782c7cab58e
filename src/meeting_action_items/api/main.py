"""FastAPI application for the meeting action item extraction service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .config import get_settings
from .routes.extract import router as extract_router
from .routes.health import router as health_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate settings at startup so misconfiguration fails fast."""
    settings = get_settings()

    logger.info(
        "lifespan.startup",
        default_pattern_configured=bool(settings.TARGET_NAME_PATTERN),
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="meeting-action-items",
    description="Extracts a person's action items and due dates from meeting notes",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(extract_router)
