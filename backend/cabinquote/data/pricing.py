"""Pricing table schema and the built-in price list.

Prices are in RUB. The base shell is calibrated on the reference cabin:
a 5.85 x 2.45 m module at 2.45 m wall height costs exactly 162,000 with
every reference finish and fixture. Finish surcharges that the catalog
quotes per whole cabin are spread over the reference floor area.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from cabinquote.models.enums import (
    DoorType,
    ExteriorMaterial,
    InsulationType,
    InteriorMaterial,
    PlumbingType,
    WindowSize,
)

REFERENCE_LENGTH = 5.85
REFERENCE_WIDTH = 2.45
REFERENCE_HEIGHT = 2.45
REFERENCE_AREA = REFERENCE_LENGTH * REFERENCE_WIDTH
REFERENCE_BASE_PRICE = 162_000.0

PRICE_LIST_VERSION = "2024.1"


class UnitPrices(BaseModel):
    """Flat per-unit prices for fixtures and extras."""

    model_config = ConfigDict(frozen=True)

    window: dict[WindowSize, float]
    window_substitution_pvc: float
    door: dict[DoorType, float]
    door_substitution_metal: float
    plumbing: dict[PlumbingType, float]
    partition_short: float
    partition_long: float
    # Listed in the catalog but wiring is always included in the base price.
    electric_wiring_base: float
    heating_unit: float


class PricingTable(BaseModel):
    """Complete price list consumed by the pricing engine.

    The base shell price is stored as its calibration point (a reference
    price for a reference floor area) so that a cabin of exactly the
    reference size reproduces the reference price without rounding drift.

    Mappings need not be exhaustive: a variant with no entry prices at 0.
    """

    model_config = ConfigDict(frozen=True)

    reference_base_price: float
    reference_area: float
    exterior_prices_per_sqm: dict[ExteriorMaterial, float]
    interior_prices_per_sqm: dict[InteriorMaterial, float]
    insulation_prices_per_sqm: dict[InsulationType, float]
    extras: UnitPrices

    @property
    def base_price_per_sqm(self) -> float:
        return self.reference_base_price / self.reference_area


class IncludedOptions(BaseModel):
    """Variants bundled with the base shell at no extra cost."""

    model_config = ConfigDict(frozen=True)

    window_size: WindowSize = WindowSize.WOOD_75x85
    door_type: DoorType = DoorType.DVP_EXT
    interior: InteriorMaterial = InteriorMaterial.DVPO
    exterior: ExteriorMaterial = ExteriorMaterial.METAL_SIDING
    insulation: InsulationType = InsulationType.MINERAL_WOOL_50


INCLUDED_OPTIONS = IncludedOptions()

# The door that may take the place of the included one at a reduced price.
SUBSTITUTE_DOOR_TYPE = DoorType.METAL_RF


DEFAULT_PRICING = PricingTable(
    reference_base_price=REFERENCE_BASE_PRICE,
    reference_area=REFERENCE_AREA,
    exterior_prices_per_sqm={
        ExteriorMaterial.METAL_SIDING: 0.0,
        ExteriorMaterial.GALVANIZED: 16_500 / REFERENCE_AREA,
    },
    interior_prices_per_sqm={
        InteriorMaterial.DVPO: 0.0,
        InteriorMaterial.OSB: 2190.0,
        InteriorMaterial.WOODEN_LINING: 2640.0,
        InteriorMaterial.PVC_PANELS: 1430.0,
        # Quoted as 20,000 for the whole reference cabin.
        InteriorMaterial.MDF_PVC: 20_000 / REFERENCE_AREA,
    },
    insulation_prices_per_sqm={
        InsulationType.NONE: 0.0,
        InsulationType.MINERAL_WOOL_50: 0.0,
        InsulationType.MINERAL_WOOL_100: 16_000 / REFERENCE_AREA,
    },
    extras=UnitPrices(
        window={
            WindowSize.PVC_50x50: 8100.0,
            WindowSize.PVC_80x100: 8534.0,
            WindowSize.PVC_80x100_TILT: 10438.0,
            WindowSize.WOOD_90x110: 5250.0,
            WindowSize.WOOD_75x85: 4200.0,
            WindowSize.PVC_100x85: 9500.0,
        },
        window_substitution_pvc=8500.0,
        door={
            DoorType.DVP_EXT: 7472.0,
            DoorType.METAL_RF: 29400.0,
            DoorType.PVC_EXT: 44482.0,
            DoorType.DVP_INT: 5150.0,
            DoorType.WOOD_INT: 9596.0,
        },
        door_substitution_metal=25800.0,
        plumbing={
            PlumbingType.TOILET: 14500.0,
            PlumbingType.SINK: 8500.0,
            PlumbingType.SHOWER_TRAY: 18000.0,
            PlumbingType.SHOWER_CABIN: 32000.0,
            PlumbingType.WATER_HEATER_30: 16500.0,
            PlumbingType.WATER_HEATER_50: 18500.0,
            PlumbingType.WATER_HEATER_80: 21500.0,
            PlumbingType.WATER_HEATER_100: 24500.0,
            PlumbingType.SEWERAGE_OUT: 4500.0,
        },
        partition_short=4300.0,
        partition_long=7300.0,
        electric_wiring_base=8000.0,
        heating_unit=5250.0,
    ),
)
