"""Custom exception hierarchy for cabinquote."""

from __future__ import annotations


class CabinQuoteError(Exception):
    """Base exception for all cabinquote errors."""


class ConfigurationError(CabinQuoteError):
    """Raised when an editor operation would produce an invalid configuration."""


class ConsultantError(CabinQuoteError):
    """Raised when the conversational assistant cannot be used."""
