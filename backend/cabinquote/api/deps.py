"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cabinquote.exceptions import ConsultantError
from cabinquote.services.consultant import CabinConsultant

if TYPE_CHECKING:
    from cabinquote.config import Settings

logger = logging.getLogger(__name__)


def create_consultant(settings: Settings) -> CabinConsultant:
    """Create a CabinConsultant from settings.

    Raises ConsultantError if no Anthropic API key is configured.
    """
    if not settings.assistant_enabled:
        msg = (
            "ANTHROPIC_API_KEY environment variable is not set. "
            "Set it to use the /api/chat endpoint."
        )
        raise ConsultantError(msg)

    logger.info("Creating consultant with model %s", settings.chat_model)
    return CabinConsultant(
        api_key=settings.anthropic_api_key,
        model=settings.chat_model,
        timeout=settings.chat_timeout,
        temperature=settings.chat_temperature,
    )
