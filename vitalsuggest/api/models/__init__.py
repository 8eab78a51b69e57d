from .completion import CompletionRequest, CompletionResponse, PromptMessage
from .error import ErrorResponse
from .suggestion import HealthReading, SuggestionResult

__all__ = [
    "ErrorResponse",
    "HealthReading",
    "SuggestionResult",
    "PromptMessage",
    "CompletionRequest",
    "CompletionResponse",
]
