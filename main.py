"""Wayfinder - voice assistant backend for a college and a district court."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wayfinder.api import router
from wayfinder.config import get_settings
from wayfinder.db import close_db, init_db
from wayfinder.dependencies import (
    get_campus_chat,
    get_court_directory,
    get_elevenlabs_client,
    get_openai_tts_client,
    get_session_sweeper,
    get_web_search,
)
from wayfinder.middleware import RequestLoggingMiddleware


def _setup_logging(debug: bool = False) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    _setup_logging(settings.debug)

    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.env)

    await init_db()
    logger.info("Database initialized")

    chat = get_campus_chat()
    if chat.is_available:
        logger.info(
            "LLM providers: %s",
            ", ".join(f"{p.provider_name} ({p.model_name})" for p in chat.providers),
        )
    else:
        logger.warning("No LLM provider configured; assistants will return fallback answers")

    directory = get_court_directory()
    logger.info(
        "Court directory: %d buildings, %d rooms", len(directory.buildings), len(directory.rooms)
    )

    sweeper = get_session_sweeper()
    sweeper.start()

    yield

    logger.info("Shutting down...")
    await sweeper.stop()

    for client in (get_elevenlabs_client(), get_openai_tts_client(), get_web_search()):
        try:
            await client.close()
        except Exception as e:
            logger.warning("Error closing HTTP client: %s", e)

    await close_db()
    logger.info("Shutdown complete")


settings = get_settings()

# Configure CORS based on environment
allowed_origins = ["*"] if settings.is_development else settings.cors_origins

app = FastAPI(
    title=settings.app_name,
    description="Voice assistant backend for college and court visitors, with admin panels",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["X-TTS-Provider", "X-TTS-Mode"],
)

app.include_router(router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.is_development,
    )
