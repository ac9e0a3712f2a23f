"""Price catalog for looking up pricing table entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cabinquote.data.pricing import INCLUDED_OPTIONS, SUBSTITUTE_DOOR_TYPE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cabinquote.data.pricing import IncludedOptions, PricingTable
    from cabinquote.models.enums import (
        DoorType,
        ExteriorMaterial,
        InsulationType,
        InteriorMaterial,
        PlumbingType,
        WindowSize,
    )

logger = logging.getLogger(__name__)


class PriceCatalog:
    """Read-only view over a PricingTable.

    Every lookup is total: a variant missing from the table prices at 0
    rather than failing, so a partial price list still yields an estimate.
    """

    def __init__(
        self,
        table: PricingTable,
        included: IncludedOptions = INCLUDED_OPTIONS,
        substitute_door: DoorType = SUBSTITUTE_DOOR_TYPE,
    ) -> None:
        self._table = table
        self._included = included
        self._substitute_door = substitute_door

    @property
    def table(self) -> PricingTable:
        return self._table

    @property
    def included(self) -> IncludedOptions:
        return self._included

    @property
    def substitute_door(self) -> DoorType:
        return self._substitute_door

    @property
    def base_price_per_sqm(self) -> float:
        return self._table.base_price_per_sqm

    def exterior_rate(self, material: ExteriorMaterial) -> float:
        """Surcharge per m² for an exterior cladding."""
        return _lookup(self._table.exterior_prices_per_sqm, material, "exterior")

    def interior_rate(self, material: InteriorMaterial) -> float:
        """Surcharge per m² for an interior finish."""
        return _lookup(self._table.interior_prices_per_sqm, material, "interior")

    def insulation_rate(self, insulation: InsulationType) -> float:
        """Surcharge per m² for an insulation option."""
        return _lookup(self._table.insulation_prices_per_sqm, insulation, "insulation")

    def window_price(self, size: WindowSize) -> float:
        return _lookup(self._table.extras.window, size, "window")

    def door_price(self, door_type: DoorType) -> float:
        return _lookup(self._table.extras.door, door_type, "door")

    def plumbing_price(self, plumbing_type: PlumbingType) -> float:
        return _lookup(self._table.extras.plumbing, plumbing_type, "plumbing")

    def to_dict(self) -> dict[str, Any]:
        """Unit prices keyed by variant value, for display."""
        extras = self._table.extras
        return {
            "base_price_per_sqm": self.base_price_per_sqm,
            "reference_base_price": self._table.reference_base_price,
            "exterior_per_sqm": _by_value(self._table.exterior_prices_per_sqm),
            "interior_per_sqm": _by_value(self._table.interior_prices_per_sqm),
            "insulation_per_sqm": _by_value(self._table.insulation_prices_per_sqm),
            "window": _by_value(extras.window),
            "window_substitution_pvc": extras.window_substitution_pvc,
            "door": _by_value(extras.door),
            "door_substitution_metal": extras.door_substitution_metal,
            "plumbing": _by_value(extras.plumbing),
            "partition_short": extras.partition_short,
            "partition_long": extras.partition_long,
            "electric_wiring_base": extras.electric_wiring_base,
            "heating_unit": extras.heating_unit,
        }


def _lookup(prices: Mapping[Any, float], key: Any, kind: str) -> float:
    price = prices.get(key)
    if price is None:
        logger.debug("No %s price for '%s'; pricing at 0", kind, key)
        return 0.0
    return price


def _by_value(prices: Mapping[Any, float]) -> dict[str, float]:
    return {str(key): value for key, value in prices.items()}
