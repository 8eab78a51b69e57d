from .suggestion_prompts import (
    SUGGESTION_SYSTEM_PROMPT,
    SUGGESTION_USER_PROMPT,
)

__all__ = [
    "SUGGESTION_SYSTEM_PROMPT",
    "SUGGESTION_USER_PROMPT",
]
