"""Display labels for catalog variants."""

from cabinquote.models.enums import (
    DoorCategory,
    DoorType,
    ExteriorMaterial,
    InsulationType,
    InteriorMaterial,
    PlumbingType,
    WindowSize,
)

EXTERIOR_LABELS: dict[ExteriorMaterial, str] = {
    ExteriorMaterial.METAL_SIDING: "Corrugated sheet C8 (standard)",
    ExteriorMaterial.GALVANIZED: "Corrugated sheet, RAL colour of choice",
}

INTERIOR_LABELS: dict[InteriorMaterial, str] = {
    InteriorMaterial.DVPO: "Hardboard (base)",
    InteriorMaterial.OSB: "OSB board",
    InteriorMaterial.WOODEN_LINING: "Wooden lining",
    InteriorMaterial.PVC_PANELS: "PVC panels (moisture resistant)",
    InteriorMaterial.MDF_PVC: "MDF walls, PVC ceiling (instead of hardboard)",
}

INSULATION_LABELS: dict[InsulationType, str] = {
    InsulationType.NONE: "No insulation",
    InsulationType.MINERAL_WOOL_50: "Mineral wool 50 mm (base)",
    InsulationType.MINERAL_WOOL_100: "Mineral wool 100 mm (winter)",
}

WINDOW_LABELS: dict[WindowSize, str] = {
    WindowSize.WOOD_75x85: "Wooden 75x85 cm (base)",
    WindowSize.PVC_100x85: "PVC 100x85 cm",
    WindowSize.PVC_50x50: "PVC 50x50 cm (turn)",
    WindowSize.PVC_80x100: "PVC 80x100 cm (turn)",
    WindowSize.PVC_80x100_TILT: "PVC 80x100 cm (tilt and turn)",
    WindowSize.WOOD_90x110: "Wooden 90x110 cm",
}

DOOR_LABELS: dict[DoorType, str] = {
    DoorType.DVP_EXT: "Hardboard door (sheet clad)",
    DoorType.METAL_RF: "Metal door, insulated",
    DoorType.PVC_EXT: "PVC door (glazed)",
    DoorType.DVP_INT: "Hardboard door (interior)",
    DoorType.WOOD_INT: "Panelled wooden door",
}

DOOR_CATEGORY_LABELS: dict[DoorCategory, str] = {
    DoorCategory.EXTERIOR: "Exterior",
    DoorCategory.INTERIOR: "Interior",
}

PLUMBING_LABELS: dict[PlumbingType, str] = {
    PlumbingType.TOILET: "Toilet (ceramic, cistern)",
    PlumbingType.SINK: "Sink (mixer, vanity unit)",
    PlumbingType.SHOWER_TRAY: "Shower tray (enamel, curtain)",
    PlumbingType.SHOWER_CABIN: "Shower cabin (corner)",
    PlumbingType.WATER_HEATER_30: "Water heater 30 l (storage)",
    PlumbingType.WATER_HEATER_50: "Water heater 50 l (storage)",
    PlumbingType.WATER_HEATER_80: "Water heater 80 l (storage)",
    PlumbingType.WATER_HEATER_100: "Water heater 100 l (storage)",
    PlumbingType.SEWERAGE_OUT: "Sewer outlet (pipe)",
}

# Partition lengths in metres, matching the two module sides.
PARTITION_SHORT_LENGTH_M = 2.45
PARTITION_LONG_LENGTH_M = 5.85
