"""Plain-text rendering of a configuration.

Used to brief the conversational assistant on what the customer has
selected. Prices are deliberately left out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cabinquote.data.labels import (
    DOOR_LABELS,
    EXTERIOR_LABELS,
    INSULATION_LABELS,
    INTERIOR_LABELS,
    PARTITION_LONG_LENGTH_M,
    PARTITION_SHORT_LENGTH_M,
    PLUMBING_LABELS,
    WINDOW_LABELS,
)
from cabinquote.formatting import format_dimensions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cabinquote.models.config import CabinConfig

NONE_TEXT = "None"


def _join_rows(rows: Iterable[tuple[int, str]]) -> str:
    return ", ".join(f"{count} x {label}" for count, label in rows) or NONE_TEXT


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def describe_partitions(config: CabinConfig) -> str:
    parts: list[str] = []
    if config.partitions_short > 0:
        parts.append(f"{config.partitions_short} x {PARTITION_SHORT_LENGTH_M:g} m")
    if config.partitions_long > 0:
        parts.append(f"{config.partitions_long} x {PARTITION_LONG_LENGTH_M:g} m")
    return ", ".join(parts) or NONE_TEXT


def describe_config(config: CabinConfig) -> str:
    """Render ``config`` as a bullet list, one line per option."""
    windows = _join_rows(
        (item.count, WINDOW_LABELS.get(item.size, item.size)) for item in config.window_list
    )
    doors = _join_rows(
        (item.count, DOOR_LABELS.get(item.type, item.type)) for item in config.door_list
    )
    plumbing = _join_rows(
        (item.count, PLUMBING_LABELS.get(item.type, item.type)) for item in config.plumbing_list
    )
    lines = [
        f"- Size: {format_dimensions(config.length, config.width, config.height)}",
        f"- Exterior: {EXTERIOR_LABELS.get(config.exterior, config.exterior)}",
        f"- Interior: {INTERIOR_LABELS.get(config.interior, config.interior)}",
        f"- Insulation: {INSULATION_LABELS.get(config.insulation, config.insulation)}",
        f"- Windows: {windows}",
        f"- Doors: {doors}",
        f"- Plumbing: {plumbing}",
        f"- Partitions: {describe_partitions(config)}",
        f"- Electric wiring: {_yes_no(config.electric_wiring)}",
        f"- Heating: {_yes_no(config.heating)}",
    ]
    return "\n".join(lines)
