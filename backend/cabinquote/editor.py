"""Configuration editor operations.

Each operation takes a CabinConfig and returns a new one with a single
change applied; the input is never modified. These are the rules the form
enforces: dimensions stay within their bounds, item counts never drop below
one (an item is removed instead), partition counts never drop below zero,
and a door's category always follows its type.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import ValidationError

from cabinquote.exceptions import ConfigurationError
from cabinquote.models.config import CabinConfig, DoorItem, PlumbingItem, WindowItem
from cabinquote.models.enums import (
    DOOR_CATEGORIES,
    DoorCategory,
    DoorType,
    PlumbingType,
    WindowSize,
)

ListName = Literal["window_list", "door_list", "plumbing_list"]
Dimension = Literal["length", "width", "height"]


@dataclass(frozen=True)
class DimensionBounds:
    """Allowed range for a dimension input, in metres.

    ``step`` is the input granularity offered by the form. It is not
    enforced: the reference cabin itself (5.85 m long) is off the length grid.
    """

    minimum: float
    maximum: float
    step: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


DIMENSION_BOUNDS: dict[str, DimensionBounds] = {
    "length": DimensionBounds(minimum=2.0, maximum=12.0, step=0.5),
    "width": DimensionBounds(minimum=2.0, maximum=3.0, step=0.1),
    "height": DimensionBounds(minimum=2.2, maximum=3.2, step=0.1),
}

# Door type preselected when a door of each category is added.
DEFAULT_DOOR_TYPES: dict[DoorCategory, DoorType] = {
    DoorCategory.EXTERIOR: DoorType.DVP_EXT,
    DoorCategory.INTERIOR: DoorType.DVP_INT,
}

_OPTION_FIELDS = frozenset({"exterior", "interior", "insulation", "electric_wiring", "heating"})


def new_item_id() -> str:
    return uuid.uuid4().hex


def _replace(config: CabinConfig, **changes: Any) -> CabinConfig:
    """Rebuild the config with ``changes`` applied, re-running validation."""
    data = config.model_dump()
    data.update(changes)
    try:
        return CabinConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _find_index(items: list[Any], item_id: str, list_name: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    msg = f"No item with id '{item_id}' in {list_name}"
    raise ConfigurationError(msg)


def _replace_item(config: CabinConfig, list_name: ListName, item_id: str, item: Any) -> CabinConfig:
    items = list(getattr(config, list_name))
    items[_find_index(items, item_id, list_name)] = item
    return _replace(config, **{list_name: items})


# ---------------------------------------------------------------------------
# Dimensions and options
# ---------------------------------------------------------------------------


def set_dimension(config: CabinConfig, name: Dimension, value: float) -> CabinConfig:
    """Set length, width or height, rejecting values outside DIMENSION_BOUNDS."""
    bounds = DIMENSION_BOUNDS.get(name)
    if bounds is None:
        msg = f"Unknown dimension '{name}'"
        raise ConfigurationError(msg)
    if not bounds.contains(value):
        msg = (
            f"{name} must be between {bounds.minimum:g} and {bounds.maximum:g} m, "
            f"got {value:g}"
        )
        raise ConfigurationError(msg)
    return _replace(config, **{name: value})


def set_option(config: CabinConfig, field_name: str, value: Any) -> CabinConfig:
    """Set a finish or a yes/no option (exterior, interior, insulation, wiring, heating)."""
    if field_name not in _OPTION_FIELDS:
        msg = f"'{field_name}' is not an editable option"
        raise ConfigurationError(msg)
    return _replace(config, **{field_name: value})


def set_partitions(
    config: CabinConfig,
    short: int | None = None,
    long: int | None = None,
) -> CabinConfig:
    """Set partition counts directly. ``None`` keeps a count; negatives become 0."""
    return _replace(
        config,
        partitions_short=max(0, config.partitions_short if short is None else short),
        partitions_long=max(0, config.partitions_long if long is None else long),
    )


def adjust_partitions(config: CabinConfig, short_delta: int = 0, long_delta: int = 0) -> CabinConfig:
    """Add or remove partitions; counts stop at zero."""
    return set_partitions(
        config,
        short=config.partitions_short + short_delta,
        long=config.partitions_long + long_delta,
    )


# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------


def add_window(
    config: CabinConfig,
    size: WindowSize = WindowSize.WOOD_75x85,
    item_id: str | None = None,
) -> CabinConfig:
    item = WindowItem(id=item_id or new_item_id(), size=size, count=1)
    return _replace(config, window_list=[*config.window_list, item])


def add_door(
    config: CabinConfig,
    category: DoorCategory = DoorCategory.EXTERIOR,
    item_id: str | None = None,
) -> CabinConfig:
    """Add one door of the default type for ``category``."""
    door_type = DEFAULT_DOOR_TYPES[category]
    item = DoorItem(id=item_id or new_item_id(), type=door_type, category=category, count=1)
    return _replace(config, door_list=[*config.door_list, item])


def add_plumbing(
    config: CabinConfig,
    plumbing_type: PlumbingType = PlumbingType.TOILET,
    item_id: str | None = None,
) -> CabinConfig:
    item = PlumbingItem(id=item_id or new_item_id(), type=plumbing_type, count=1)
    return _replace(config, plumbing_list=[*config.plumbing_list, item])


def remove_item(config: CabinConfig, list_name: ListName, item_id: str) -> CabinConfig:
    items = list(getattr(config, list_name))
    del items[_find_index(items, item_id, list_name)]
    return _replace(config, **{list_name: items})


def set_item_variant(
    config: CabinConfig,
    list_name: ListName,
    item_id: str,
    variant: str,
) -> CabinConfig:
    """Change the size or type of an item. A door's category follows its new type."""
    items = getattr(config, list_name)
    current = items[_find_index(items, item_id, list_name)]
    try:
        if list_name == "window_list":
            updated = current.model_copy(update={"size": WindowSize(variant)})
        elif list_name == "door_list":
            door_type = DoorType(variant)
            updated = current.model_copy(
                update={"type": door_type, "category": DOOR_CATEGORIES[door_type]},
            )
        else:
            updated = current.model_copy(update={"type": PlumbingType(variant)})
    except ValueError as exc:
        msg = f"'{variant}' is not a valid variant for {list_name}"
        raise ConfigurationError(msg) from exc
    return _replace_item(config, list_name, item_id, updated)


def set_item_count(config: CabinConfig, list_name: ListName, item_id: str, count: int) -> CabinConfig:
    if count < 1:
        msg = f"Item count must be at least 1, got {count}; remove the item instead"
        raise ConfigurationError(msg)
    items = getattr(config, list_name)
    current = items[_find_index(items, item_id, list_name)]
    return _replace_item(config, list_name, item_id, current.model_copy(update={"count": count}))


def increment_item(config: CabinConfig, list_name: ListName, item_id: str) -> CabinConfig:
    items = getattr(config, list_name)
    current = items[_find_index(items, item_id, list_name)]
    return set_item_count(config, list_name, item_id, current.count + 1)


def decrement_item(config: CabinConfig, list_name: ListName, item_id: str) -> CabinConfig:
    """Remove one unit from an item. The count stops at one."""
    items = getattr(config, list_name)
    current = items[_find_index(items, item_id, list_name)]
    return set_item_count(config, list_name, item_id, max(1, current.count - 1))
