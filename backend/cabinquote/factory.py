"""Factory functions for creating pre-configured PricingEngine instances."""

from __future__ import annotations

from cabinquote.data.catalog import PriceCatalog
from cabinquote.data.pricing import DEFAULT_PRICING
from cabinquote.engine import PricingEngine


def create_default_engine() -> PricingEngine:
    """Create a PricingEngine wired up with the built-in price list.

    Example::

        from cabinquote import DEFAULT_CONFIG, create_default_engine

        engine = create_default_engine()
        breakdown = engine.estimate(DEFAULT_CONFIG)
    """
    return PricingEngine(PriceCatalog(DEFAULT_PRICING))
