from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurant_api.api import restaurants_router
from restaurant_api.config import get_settings
from restaurant_api.database import close_db, get_session_context, init_db
from restaurant_api.services.seed_service import SeedService

# Import all models to register them with Base BEFORE init_db
from restaurant_api.models import OperatingHours, Reservation, Restaurant  # noqa: F401

settings = get_settings()
LOGGER = logging.getLogger("restaurant-reservations")


def configure_logging() -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    configure_logging()

    # create_all() is idempotent
    try:
        await init_db()
        LOGGER.info("Database initialized")
    except Exception as e:
        LOGGER.error("Database initialization failed: %s", e)
        raise

    if settings.is_development and settings.seed_on_startup:
        try:
            async with get_session_context() as session:
                result = await SeedService(session).ensure_default_data()
                if result["restaurants_created"] > 0:
                    LOGGER.info("Seeded default data: %s", result)
        except Exception as e:
            LOGGER.warning("Default data seeding failed: %s", e)

    yield

    await close_db()


app = FastAPI(
    title="Restaurant Reservations API",
    description="Restaurant, opening hours and reservation records backed by a relational store",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS (needed for browser preflight requests)
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/healthz")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "service": "restaurant-reservations"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Restaurant Reservations API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/healthz",
    }


app.include_router(restaurants_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
