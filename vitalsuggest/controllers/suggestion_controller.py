"""
Controller for vital-sign health suggestions.

Bridges the HTTP layer and the chat-completion client: unpacks a validated
reading, requests a suggestion and wraps the text in the response model.
"""
import logging

from vitalsuggest.api.models.suggestion import HealthReading, SuggestionResult
from vitalsuggest.services.suggestion_client import SuggestionClient

logger = logging.getLogger(__name__)


class SuggestionController:
    """Controller for health suggestion operations."""

    def __init__(self, client: SuggestionClient):
        """Initialize the controller with a shared suggestion client."""
        self.client = client

    async def suggest(self, reading: HealthReading) -> SuggestionResult:
        """
        Get a health assessment for one set of readings.

        Args:
            reading: Validated vital-sign readings and response language

        Returns:
            SuggestionResult with the provider's reply text

        Raises:
            SuggestionError: If the provider call fails
        """
        logger.debug(f"Requesting suggestion in {reading.language}")
        suggestion = await self.client.request_suggestion(
            reading.temperature,
            reading.pulse_rate,
            reading.oxygen_saturation,
            reading.language,
        )
        return SuggestionResult(suggestion=suggestion)
