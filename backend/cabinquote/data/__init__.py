"""Price list and catalog data for the cabinquote pricing engine."""

from cabinquote.data.catalog import PriceCatalog
from cabinquote.data.pricing import DEFAULT_PRICING, IncludedOptions, PricingTable, UnitPrices

__all__ = [
    "DEFAULT_PRICING",
    "IncludedOptions",
    "PriceCatalog",
    "PricingTable",
    "UnitPrices",
]
