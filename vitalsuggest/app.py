"""
Vitals Suggestion Service
FastAPI application relaying vital-sign readings to a chat-completion provider.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from vitalsuggest import __version__
from vitalsuggest.api.routers import api_router
from vitalsuggest.config.settings import get_settings
from vitalsuggest.middleware.error_handling import (
    ErrorHandlingMiddleware,
    malformed_request_handler,
)
from vitalsuggest.middleware.request_logging import RequestLoggingMiddleware
from vitalsuggest.services.suggestion_client import SuggestionClient


def create_app(http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Settings are resolved here, so a missing OPENAI_API_KEY fails startup
    rather than individual requests.

    Args:
        http_client: Optional transport for the provider client, mainly for tests
    """
    settings = get_settings()

    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan context manager."""
        logging.info(
            f"Starting {settings.app_name} ({settings.environment}), "
            f"model {settings.suggestion_model}"
        )
        app.state.suggestion_client = SuggestionClient.from_settings(
            settings, http_client=http_client
        )
        yield
        logging.info("Shutting down...")
        await app.state.suggestion_client.close()

    app = FastAPI(
        title=settings.app_name,
        description="Health assessment suggestions for vital-sign readings",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        ErrorHandlingMiddleware, expose_details=not settings.is_production
    )
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, malformed_request_handler)

    app.include_router(api_router)

    return app
