"""
Client for the external chat-completion provider.

Turns vital-sign readings into a two-message prompt, performs one
chat-completion call and extracts the reply text.
"""
import logging
import re
from typing import List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI
from pydantic import ValidationError

from vitalsuggest.api.models.completion import (
    CompletionRequest,
    CompletionResponse,
    PromptMessage,
)
from vitalsuggest.config.settings import Settings
from vitalsuggest.services.prompts import (
    SUGGESTION_SYSTEM_PROMPT,
    SUGGESTION_USER_PROMPT,
)

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"

# Returned when the provider answers without any choice
NO_SUGGESTION_TEXT = "No suggestion available."

_FORMATTING_SYMBOLS = re.compile(r"[&{}#\[\]\*]+")


class SuggestionError(Exception):
    """Base class for failures while obtaining a suggestion."""


class UpstreamTransportError(SuggestionError):
    """The provider could not be reached (connection, TLS or timeout failure)."""


class UpstreamProtocolError(SuggestionError):
    """The provider answered with an error status or an unexpected body."""


def build_prompt_messages(
    temperature: float,
    pulse_rate: float,
    oxygen_saturation: float,
    language: str,
) -> List[PromptMessage]:
    """Build the system instruction and the user prompt for one reading."""
    user_content = SUGGESTION_USER_PROMPT.format(
        temperature=temperature,
        pulse_rate=pulse_rate,
        oxygen_saturation=oxygen_saturation,
        language=language,
    )
    return [
        PromptMessage(role="system", content=SUGGESTION_SYSTEM_PROMPT),
        PromptMessage(role="user", content=user_content),
    ]


def clean_suggestion_text(text: str) -> str:
    """
    Strip markdown leftovers from a model reply.

    Removes heading, emphasis and bracket symbols, collapses blank lines and
    trims surrounding whitespace.
    """
    cleaned = _FORMATTING_SYMBOLS.sub("", text)
    cleaned = cleaned.replace("\n\n", "\n")
    return cleaned.strip()


class SuggestionClient:
    """Single-attempt client for health suggestions."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float,
        clean_output: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Defaults for every option live in Settings; use from_settings.

        Args:
            api_key: Credential sent as a bearer token
            base_url: Provider base URL, without the chat-completions path
            model: Model identifier used for every call
            timeout: Upper bound in seconds for one outbound call
            clean_output: Strip formatting symbols from replies
            http_client: Optional transport, mainly for tests
        """
        self.model = model
        self.clean_output = clean_output
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "SuggestionClient":
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.suggestion_model,
            timeout=settings.suggestion_timeout,
            clean_output=settings.clean_suggestion_text,
            http_client=http_client,
        )

    def build_request(
        self,
        temperature: float,
        pulse_rate: float,
        oxygen_saturation: float,
        language: str,
    ) -> CompletionRequest:
        return CompletionRequest(
            model=self.model,
            messages=build_prompt_messages(
                temperature, pulse_rate, oxygen_saturation, language
            ),
        )

    async def request_suggestion(
        self,
        temperature: float,
        pulse_rate: float,
        oxygen_saturation: float,
        language: str,
    ) -> str:
        """
        Ask the provider for an assessment of the given readings.

        Returns:
            The first choice's content, or NO_SUGGESTION_TEXT when the
            provider returned no choices

        Raises:
            UpstreamTransportError: If the provider could not be reached
            UpstreamProtocolError: If the provider returned a non-success
                status or a body that is not a chat completion
        """
        completion_request = self.build_request(
            temperature, pulse_rate, oxygen_saturation, language
        )

        try:
            response = await self.client.post(
                CHAT_COMPLETIONS_PATH,
                cast_to=httpx.Response,
                body=completion_request.model_dump(),
            )
        except APIConnectionError as e:
            logger.error(f"Suggestion provider unreachable: {e}")
            raise UpstreamTransportError(
                "the suggestion provider could not be reached"
            ) from e
        except APIStatusError as e:
            logger.error(f"Suggestion provider returned HTTP {e.status_code}: {e}")
            raise UpstreamProtocolError(
                f"the suggestion provider returned HTTP {e.status_code}"
            ) from e

        try:
            completion = CompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Suggestion provider returned an unexpected body: {e}")
            raise UpstreamProtocolError(
                "the suggestion provider returned an invalid response"
            ) from e

        if not completion.choices:
            logger.info("Suggestion provider returned no choices")
            return NO_SUGGESTION_TEXT

        suggestion = completion.choices[0].message.content
        if self.clean_output:
            suggestion = clean_suggestion_text(suggestion)
        return suggestion

    async def close(self) -> None:
        await self.client.close()
