"""Conversational assistant — streams replies from the Anthropic Messages API.

The assistant is briefed with a text rendering of the customer's current
configuration and answers questions about materials and options. It never
sees computed prices.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from cabinquote.describe import describe_config

if TYPE_CHECKING:
    from collections.abc import Iterator

    from anthropic.types import MessageParam

    from cabinquote.models.chat import ChatTurn
    from cabinquote.models.config import CabinConfig

logger = logging.getLogger(__name__)

CONNECTION_ERROR_REPLY = (
    "Sorry, the consultant could not be reached right now. Please try again shortly."
)

_SYSTEM_PROMPT_TEMPLATE = (
    "You are an experienced consultant for a company that builds modular "
    "buildings and site cabins.\n\n"
    "Your job:\n"
    "1. Help the customer choose materials and equipment.\n"
    "2. Explain the differences between insulation and finish options.\n"
    "3. Give recommendations based on the customer's current configuration.\n\n"
    "The customer's current configuration:\n"
    "{configuration}\n\n"
    "Prices:\n"
    "The calculator computes exact prices automatically. You may talk about "
    "how options compare in price (for example, 'thicker insulation costs "
    "more but keeps the cabin warmer'), but do not quote amounts unless asked "
    "about a specific item.\n\n"
    "Tone: friendly, professional and brief."
)


def build_system_prompt(config: CabinConfig) -> str:
    """Consultant instructions with the configuration filled in."""
    return _SYSTEM_PROMPT_TEMPLATE.format(configuration=describe_config(config))


class CabinConsultant:
    """Streams consultant replies for a cabin configuration.

    The system prompt is rebuilt from the configuration on every call, so
    the assistant always sees the latest selection.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 60.0,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
        )
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    def stream_reply(
        self,
        message: str,
        config: CabinConfig,
        history: list[ChatTurn] | None = None,
    ) -> Iterator[str]:
        """Yield reply text chunks as they arrive.

        API failures are logged and turned into a single apology chunk so
        the chat window always gets an answer.
        """
        messages = self._build_messages(message, history)
        try:
            with self._client.messages.stream(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                system=build_system_prompt(config),
                messages=messages,
            ) as stream:
                for text in stream.text_stream:
                    if text:
                        yield text
        except (
            anthropic.APITimeoutError,
            anthropic.APIConnectionError,
            anthropic.RateLimitError,
            anthropic.APIStatusError,
        ):
            logger.exception("Consultant API error")
            yield CONNECTION_ERROR_REPLY

    @staticmethod
    def _build_messages(
        message: str,
        history: list[ChatTurn] | None,
    ) -> list[MessageParam]:
        messages: list[MessageParam] = [
            {"role": turn.role, "content": turn.content} for turn in history or []
        ]
        messages.append({"role": "user", "content": message})
        return messages
