"""Estimate output models for the cabinquote pricing engine."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, model_validator

from cabinquote.models.enums import PriceNote


class LineItemCost(BaseModel):
    """Cost attributed to a single configuration line item."""

    item_id: str
    variant: str
    count: int
    full_unit_price: float
    total_cost: float
    note: PriceNote | None = None


class EstimateBreakdown(BaseModel):
    """Itemized price estimate for one configuration.

    ``total_cost`` always equals the sum of the named sub-totals; the
    validator rejects a breakdown where it does not.
    """

    base_structure_cost: float
    exterior_cost: float
    interior_cost: float
    insulation_cost: float
    windows_cost: float
    doors_cost: float
    partitions_cost: float
    heating_cost: float
    plumbing_cost: float
    extras_cost: float
    total_cost: float

    window_items: list[LineItemCost] = Field(default_factory=list)
    door_items: list[LineItemCost] = Field(default_factory=list)
    plumbing_items: list[LineItemCost] = Field(default_factory=list)

    @model_validator(mode="after")
    def total_is_sum_of_parts(self) -> EstimateBreakdown:
        expected = self.subtotal_sum()
        if self.total_cost != expected and not math.isnan(expected):
            msg = (
                f"total_cost {self.total_cost} does not match "
                f"the sum of sub-totals {expected}"
            )
            raise ValueError(msg)
        return self

    def subtotals(self) -> dict[str, float]:
        """Named sub-totals in display order."""
        return {
            "base_structure_cost": self.base_structure_cost,
            "exterior_cost": self.exterior_cost,
            "interior_cost": self.interior_cost,
            "insulation_cost": self.insulation_cost,
            "windows_cost": self.windows_cost,
            "doors_cost": self.doors_cost,
            "partitions_cost": self.partitions_cost,
            "heating_cost": self.heating_cost,
            "plumbing_cost": self.plumbing_cost,
            "extras_cost": self.extras_cost,
        }

    def subtotal_sum(self) -> float:
        # Left-to-right in declaration order so the sum is reproducible.
        total = 0.0
        for value in self.subtotals().values():
            total += value
        return total

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Monetary values are pre-formatted; line items carry their note so the
        display can badge included and substituted rows.
        """
        from cabinquote.formatting import format_currency, format_line_price

        def _rows(items: list[LineItemCost]) -> list[dict[str, Any]]:
            return [
                {
                    "item_id": item.item_id,
                    "variant": item.variant,
                    "count": item.count,
                    "cost_formatted": format_line_price(
                        item.total_cost, included=item.note == PriceNote.INCLUDED
                    ),
                    "note": item.note.value if item.note else None,
                }
                for item in items
            ]

        return {
            "subtotals_formatted": {
                name: format_currency(value)
                for name, value in self.subtotals().items()
            },
            "total_cost_formatted": format_currency(self.total_cost),
            "windows": _rows(self.window_items),
            "doors": _rows(self.door_items),
            "plumbing": _rows(self.plumbing_items),
            "num_windows": sum(item.count for item in self.window_items),
            "num_doors": sum(item.count for item in self.door_items),
            "num_plumbing": sum(item.count for item in self.plumbing_items),
        }
