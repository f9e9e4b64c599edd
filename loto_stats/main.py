"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from loto_stats.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
if settings.LOG_TO_FILE:
    logger.add(str(settings.LOG_FILE), rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ({}) ...", settings.APP_NAME, settings.APP_ENV)
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Loto session statistics: frequencies, gaps, timing and milestones",
    lifespan=lifespan,
)

# Include API routers
from loto_stats.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"app": settings.APP_NAME, "env": settings.APP_ENV}
