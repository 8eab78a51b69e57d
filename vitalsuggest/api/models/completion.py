"""
Wire models for the external chat-completion provider.

Only the fields this service sends or reads are modelled; anything else the
provider returns is ignored.
"""
from typing import List, Literal

from pydantic import BaseModel


class PromptMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class CompletionRequest(BaseModel):
    """Body of a chat-completion call."""
    model: str
    messages: List[PromptMessage]


class ChoiceMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class CompletionResponse(BaseModel):
    """Body returned by the provider. Only the first choice is consumed."""
    choices: List[Choice]
