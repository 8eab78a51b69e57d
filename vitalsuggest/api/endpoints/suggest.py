"""
Health suggestion endpoints.

Accepts vital-sign readings and relays a chat-completion assessment of them.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from vitalsuggest.api.models import ErrorResponse, HealthReading, SuggestionResult
from vitalsuggest.controllers.suggestion_controller import SuggestionController
from vitalsuggest.services.suggestion_client import SuggestionError

# ============================================================================
# Dependency Injection
# ============================================================================


def get_suggestion_controller(request: Request) -> SuggestionController:
    """Dependency injection for SuggestionController."""
    return SuggestionController(request.app.state.suggestion_client)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/suggest",
    status_code=status.HTTP_200_OK,
    response_model=SuggestionResult,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request payload"},
        500: {"description": "Suggestion provider failed"},
    },
)
async def suggest(
    reading: HealthReading,
    controller: SuggestionController = Depends(get_suggestion_controller),
) -> SuggestionResult:
    """
    Get a health assessment for a set of vital-sign readings.

    Takes body temperature (°C), pulse rate (BPM), SpO₂ (%) and a response
    language, and returns the chat-completion provider's assessment and
    recommendations written in that language.

    Readings are forwarded as given; no clinical range checks are applied.
    """
    try:
        return await controller.suggest(reading)
    except SuggestionError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get suggestion: {e}",
        )
