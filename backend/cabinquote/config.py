"""Runtime settings read from the environment.

``.env`` files in the project root and in ``backend/`` are loaded first,
so local development does not need exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

DEFAULT_CHAT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


def load_env() -> None:
    """Load ``.env`` files without overriding variables already set."""
    load_dotenv(_project_root / ".env")
    load_dotenv(_backend_dir / ".env")


@dataclass(frozen=True)
class Settings:
    """Settings for the HTTP app and the assistant."""

    anthropic_api_key: str = ""
    chat_model: str = DEFAULT_CHAT_MODEL
    chat_temperature: float = 0.7
    chat_timeout: float = 60.0
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @property
    def assistant_enabled(self) -> bool:
        return bool(self.anthropic_api_key)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``os.environ``.

        Recognised variables: ``ANTHROPIC_API_KEY``, ``CABINQUOTE_CHAT_MODEL``,
        ``CABINQUOTE_CHAT_TEMPERATURE``, ``CABINQUOTE_CHAT_TIMEOUT`` and
        ``CABINQUOTE_CORS_ORIGINS`` (comma separated).
        """
        origins = os.environ.get("CABINQUOTE_CORS_ORIGINS", "")
        return cls(
            anthropic_api_key=os.environ.get("ANTHROPIC_API_KEY", ""),
            chat_model=os.environ.get("CABINQUOTE_CHAT_MODEL", DEFAULT_CHAT_MODEL),
            chat_temperature=float(os.environ.get("CABINQUOTE_CHAT_TEMPERATURE", "0.7")),
            chat_timeout=float(os.environ.get("CABINQUOTE_CHAT_TIMEOUT", "60")),
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                or DEFAULT_CORS_ORIGINS
            ),
        )
