"""
Liveness endpoint.

Reports the service version and which provider model it is configured
against. It never calls the provider.
"""
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from vitalsuggest import __version__
from vitalsuggest.config.settings import Settings, get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    model: str
    provider_host: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="ok",
        version=__version__,
        environment=settings.environment,
        model=settings.suggestion_model,
        provider_host=urlsplit(settings.openai_base_url).hostname or "",
    )
