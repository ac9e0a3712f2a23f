"""Configuration models: the value the editor produces and the engine prices."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cabinquote.models.enums import (
    DOOR_CATEGORIES,
    DoorCategory,
    DoorType,
    ExteriorMaterial,
    InsulationType,
    InteriorMaterial,
    PlumbingType,
    WindowSize,
)


class WindowItem(BaseModel):
    """A row of identical windows."""

    model_config = ConfigDict(frozen=True)

    id: str
    size: WindowSize
    count: int = Field(default=1, ge=0)


class DoorItem(BaseModel):
    """A row of identical doors.

    ``category`` is derived from the door type when omitted and must agree
    with ``DOOR_CATEGORIES`` when given.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: DoorType
    category: DoorCategory
    count: int = Field(default=1, ge=0)

    @model_validator(mode="before")
    @classmethod
    def default_category_from_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("category") is None and "type" in data:
            return {**data, "category": DOOR_CATEGORIES[DoorType(data["type"])]}
        return data

    @model_validator(mode="after")
    def category_matches_type(self) -> DoorItem:
        canonical = DOOR_CATEGORIES[self.type]
        if self.category != canonical:
            msg = (
                f"Door type '{self.type}' belongs to category '{canonical}', "
                f"got '{self.category}'"
            )
            raise ValueError(msg)
        return self


class PlumbingItem(BaseModel):
    """A row of identical plumbing fixtures."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: PlumbingType
    count: int = Field(default=1, ge=0)


def _check_unique_ids(items: list[Any]) -> None:
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            msg = f"Duplicate item id '{item.id}'"
            raise ValueError(msg)
        seen.add(item.id)


class CabinConfig(BaseModel):
    """A complete cabin configuration.

    Dimensions are in metres. The model does not bound them; range checks
    belong to the editor (see ``cabinquote.editor.DIMENSION_BOUNDS``).
    """

    model_config = ConfigDict(frozen=True)

    length: float
    width: float
    height: float
    exterior: ExteriorMaterial
    interior: InteriorMaterial
    insulation: InsulationType

    window_list: list[WindowItem] = Field(default_factory=list)
    door_list: list[DoorItem] = Field(default_factory=list)
    plumbing_list: list[PlumbingItem] = Field(default_factory=list)

    partitions_short: int = Field(default=0, ge=0)
    partitions_long: int = Field(default=0, ge=0)
    electric_wiring: bool = True
    heating: bool = False

    @field_validator("window_list", "door_list", "plumbing_list")
    @classmethod
    def ids_must_be_unique(cls, v: list[Any]) -> list[Any]:
        _check_unique_ids(v)
        return v

    @property
    def area(self) -> float:
        """Floor area in square metres."""
        return self.length * self.width
