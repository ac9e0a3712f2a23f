"""Cabinquote price calculator for prefabricated cabins.

Usage::

    from cabinquote import DEFAULT_CONFIG, create_default_engine

    engine = create_default_engine()
    breakdown = engine.estimate(DEFAULT_CONFIG)
"""

from cabinquote.data.pricing import DEFAULT_PRICING, PricingTable
from cabinquote.data.seed import DEFAULT_CONFIG
from cabinquote.engine import PricingEngine, compute_estimate
from cabinquote.factory import create_default_engine
from cabinquote.models.config import CabinConfig, DoorItem, PlumbingItem, WindowItem
from cabinquote.models.enums import (
    DoorCategory,
    DoorType,
    ExteriorMaterial,
    InsulationType,
    InteriorMaterial,
    PlumbingType,
    PriceNote,
    WindowSize,
)
from cabinquote.models.estimate import EstimateBreakdown, LineItemCost

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PRICING",
    "CabinConfig",
    "DoorCategory",
    "DoorItem",
    "DoorType",
    "EstimateBreakdown",
    "ExteriorMaterial",
    "InsulationType",
    "InteriorMaterial",
    "LineItemCost",
    "PlumbingItem",
    "PlumbingType",
    "PriceNote",
    "PricingEngine",
    "PricingTable",
    "WindowItem",
    "WindowSize",
    "compute_estimate",
    "create_default_engine",
]
