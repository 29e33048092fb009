"""Lumen API - content quality analysis engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import analyze_router, audits_router, checks_router, health_router
from config import settings
from logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Code before `yield` runs on startup.
    Code after `yield` runs on shutdown.
    """
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    logger.info(f"Starting {settings.app_name}...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="Lumen API",
    description="Content quality analysis for titles, metadata, headings, structured data and links.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api/v1")
app.include_router(checks_router, prefix="/api/v1")
app.include_router(analyze_router, prefix="/api/v1")
app.include_router(audits_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    """Point to the API docs."""
    return {
        "service": "Lumen API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
