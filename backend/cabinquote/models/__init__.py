"""Domain models for the cabinquote pricing engine."""

from cabinquote.models.chat import ChatRequest, ChatTurn
from cabinquote.models.config import CabinConfig, DoorItem, PlumbingItem, WindowItem
from cabinquote.models.enums import (
    DOOR_CATEGORIES,
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
    "DOOR_CATEGORIES",
    "CabinConfig",
    "ChatRequest",
    "ChatTurn",
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
    "WindowSize",
]
