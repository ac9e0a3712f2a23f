"""Reference configuration shown when the calculator opens.

Every finish and fixture is the included variant, so it prices at exactly
the reference base price.
"""

from cabinquote.data.pricing import REFERENCE_HEIGHT, REFERENCE_LENGTH, REFERENCE_WIDTH
from cabinquote.models.config import CabinConfig, DoorItem, WindowItem
from cabinquote.models.enums import (
    DoorCategory,
    DoorType,
    ExteriorMaterial,
    InsulationType,
    InteriorMaterial,
    WindowSize,
)

DEFAULT_CONFIG = CabinConfig(
    length=REFERENCE_LENGTH,
    width=REFERENCE_WIDTH,
    height=REFERENCE_HEIGHT,
    exterior=ExteriorMaterial.METAL_SIDING,
    interior=InteriorMaterial.DVPO,
    insulation=InsulationType.MINERAL_WOOL_50,
    window_list=[WindowItem(id="1", size=WindowSize.WOOD_75x85, count=1)],
    door_list=[
        DoorItem(
            id="1",
            type=DoorType.DVP_EXT,
            category=DoorCategory.EXTERIOR,
            count=1,
        ),
    ],
    plumbing_list=[],
    partitions_short=0,
    partitions_long=0,
    electric_wiring=True,
    heating=False,
)
