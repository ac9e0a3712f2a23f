"""Enums for the cabinquote domain models.

Each enum is a closed set of catalog variants. Values match the keys used
by the pricing table and the label catalog.
"""

from enum import StrEnum


class ExteriorMaterial(StrEnum):
    """Exterior cladding options."""

    METAL_SIDING = "METAL_SIDING"
    GALVANIZED = "GALVANIZED"


class InteriorMaterial(StrEnum):
    """Interior wall and ceiling finishes."""

    DVPO = "DVPO"
    OSB = "OSB"
    PVC_PANELS = "PVC_PANELS"
    WOODEN_LINING = "WOODEN_LINING"
    MDF_PVC = "MDF_PVC"


class InsulationType(StrEnum):
    """Wall insulation options."""

    NONE = "NONE"
    MINERAL_WOOL_50 = "MINERAL_WOOL_50"
    MINERAL_WOOL_100 = "MINERAL_WOOL_100"


class WindowSize(StrEnum):
    """Window variants. Values prefixed with ``PVC`` form the substitutable class."""

    PVC_50x50 = "PVC_50x50"
    PVC_80x100 = "PVC_80x100"
    PVC_80x100_TILT = "PVC_80x100_TILT"
    WOOD_90x110 = "WOOD_90x110"
    WOOD_75x85 = "WOOD_75x85"
    PVC_100x85 = "PVC_100x85"

    @property
    def is_pvc(self) -> bool:
        return self.value.startswith("PVC")


class DoorType(StrEnum):
    """Door variants."""

    DVP_EXT = "DVP_EXT"
    METAL_RF = "METAL_RF"
    PVC_EXT = "PVC_EXT"
    DVP_INT = "DVP_INT"
    WOOD_INT = "WOOD_INT"


class DoorCategory(StrEnum):
    """Where a door is installed."""

    EXTERIOR = "EXTERIOR"
    INTERIOR = "INTERIOR"


class PlumbingType(StrEnum):
    """Plumbing fixtures, priced flat per unit."""

    TOILET = "TOILET"
    SINK = "SINK"
    SHOWER_TRAY = "SHOWER_TRAY"
    SHOWER_CABIN = "SHOWER_CABIN"
    WATER_HEATER_30 = "WATER_HEATER_30"
    WATER_HEATER_50 = "WATER_HEATER_50"
    WATER_HEATER_80 = "WATER_HEATER_80"
    WATER_HEATER_100 = "WATER_HEATER_100"
    SEWERAGE_OUT = "SEWERAGE_OUT"


class PriceNote(StrEnum):
    """Why a line item's price deviates from its catalog price."""

    INCLUDED = "included"
    ONE_UNIT_INCLUDED = "included: one unit"
    SUBSTITUTED = "substituted-for-base"


# Canonical category for each door type. PVC_EXT ships as an interior door.
DOOR_CATEGORIES: dict[DoorType, DoorCategory] = {
    DoorType.DVP_EXT: DoorCategory.EXTERIOR,
    DoorType.METAL_RF: DoorCategory.EXTERIOR,
    DoorType.PVC_EXT: DoorCategory.INTERIOR,
    DoorType.DVP_INT: DoorCategory.INTERIOR,
    DoorType.WOOD_INT: DoorCategory.INTERIOR,
}
