"""Request models for the conversational assistant."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from cabinquote.models.config import CabinConfig


class ChatTurn(BaseModel):
    """One earlier message in the conversation."""

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """A new user message plus the configuration it refers to."""

    message: str = Field(min_length=1)
    config: CabinConfig
    history: list[ChatTurn] = Field(default_factory=list)
