"""Tests for CabinConfig, line items and EstimateBreakdown."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cabinquote.data.seed import DEFAULT_CONFIG
from cabinquote.models import (
    CabinConfig,
    DoorCategory,
    DoorItem,
    DoorType,
    EstimateBreakdown,
    LineItemCost,
    PlumbingItem,
    PlumbingType,
    PriceNote,
    WindowItem,
    WindowSize,
)


def _make_breakdown(**overrides: object) -> EstimateBreakdown:
    """Helper to build a consistent EstimateBreakdown."""
    values: dict[str, object] = {
        "base_structure_cost": 162_000.0,
        "exterior_cost": 0.0,
        "interior_cost": 0.0,
        "insulation_cost": 0.0,
        "windows_cost": 4200.0,
        "doors_cost": 0.0,
        "partitions_cost": 0.0,
        "heating_cost": 5250.0,
        "plumbing_cost": 0.0,
        "extras_cost": 0.0,
        "total_cost": 171_450.0,
        "window_items": [
            LineItemCost(
                item_id="w1",
                variant="WOOD_75x85",
                count=2,
                full_unit_price=4200.0,
                total_cost=4200.0,
                note=PriceNote.ONE_UNIT_INCLUDED,
            ),
        ],
        "door_items": [
            LineItemCost(
                item_id="d1",
                variant="DVP_EXT",
                count=1,
                full_unit_price=7472.0,
                total_cost=0.0,
                note=PriceNote.INCLUDED,
            ),
        ],
    }
    values.update(overrides)
    return EstimateBreakdown(**values)  # type: ignore[arg-type]


class TestDoorCategory:
    def test_category_derived_from_type(self) -> None:
        door = DoorItem(id="d", type=DoorType.METAL_RF)
        assert door.category == DoorCategory.EXTERIOR

    def test_pvc_door_is_interior(self) -> None:
        door = DoorItem(id="d", type=DoorType.PVC_EXT)
        assert door.category == DoorCategory.INTERIOR

    def test_category_derived_from_json(self) -> None:
        door = DoorItem.model_validate({"id": "d", "type": "WOOD_INT", "count": 2})
        assert door.category == DoorCategory.INTERIOR
        assert door.count == 2

    def test_matching_category_accepted(self) -> None:
        door = DoorItem(id="d", type=DoorType.DVP_INT, category=DoorCategory.INTERIOR)
        assert door.type == DoorType.DVP_INT

    def test_mismatched_category_rejected(self) -> None:
        with pytest.raises(ValidationError, match="belongs to category"):
            DoorItem(id="d", type=DoorType.DVP_EXT, category=DoorCategory.INTERIOR)

    def test_unknown_door_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DoorItem.model_validate({"id": "d", "type": "GLASS"})


class TestLineItems:
    def test_count_defaults_to_one(self) -> None:
        assert WindowItem(id="w", size=WindowSize.PVC_50x50).count == 1

    def test_zero_count_allowed(self) -> None:
        assert PlumbingItem(id="p", type=PlumbingType.SINK, count=0).count == 0

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WindowItem(id="w", size=WindowSize.PVC_50x50, count=-1)

    def test_items_are_frozen(self) -> None:
        item = WindowItem(id="w", size=WindowSize.PVC_50x50)
        with pytest.raises(ValidationError):
            item.count = 3  # type: ignore[misc]


class TestCabinConfig:
    def test_default_config_area(self) -> None:
        assert DEFAULT_CONFIG.area == pytest.approx(5.85 * 2.45)

    def test_duplicate_ids_rejected(self) -> None:
        data = DEFAULT_CONFIG.model_dump()
        data["window_list"] = [
            {"id": "x", "size": "WOOD_75x85", "count": 1},
            {"id": "x", "size": "PVC_50x50", "count": 1},
        ]
        with pytest.raises(ValidationError, match="Duplicate item id"):
            CabinConfig.model_validate(data)

    def test_same_id_in_different_lists_allowed(self) -> None:
        # The default config uses id "1" for both its window and its door.
        assert DEFAULT_CONFIG.window_list[0].id == DEFAULT_CONFIG.door_list[0].id

    def test_negative_partitions_rejected(self) -> None:
        data = DEFAULT_CONFIG.model_dump()
        data["partitions_short"] = -1
        with pytest.raises(ValidationError):
            CabinConfig.model_validate(data)

    def test_unknown_material_rejected(self) -> None:
        data = DEFAULT_CONFIG.model_dump()
        data["exterior"] = "BRICK"
        with pytest.raises(ValidationError):
            CabinConfig.model_validate(data)

    def test_json_round_trip(self) -> None:
        restored = CabinConfig.model_validate_json(DEFAULT_CONFIG.model_dump_json())
        assert restored == DEFAULT_CONFIG

    def test_lists_default_to_empty(self) -> None:
        config = CabinConfig(
            length=3.0,
            width=2.0,
            height=2.5,
            exterior="METAL_SIDING",  # type: ignore[arg-type]
            interior="OSB",  # type: ignore[arg-type]
            insulation="NONE",  # type: ignore[arg-type]
        )
        assert config.window_list == []
        assert config.door_list == []
        assert config.plumbing_list == []
        assert config.electric_wiring is True
        assert config.heating is False


class TestEstimateBreakdown:
    def test_consistent_breakdown_accepted(self) -> None:
        breakdown = _make_breakdown()
        assert breakdown.total_cost == breakdown.subtotal_sum()

    def test_inconsistent_total_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match"):
            _make_breakdown(total_cost=1.0)

    def test_subtotals_in_display_order(self) -> None:
        names = list(_make_breakdown().subtotals())
        assert names[0] == "base_structure_cost"
        assert names[-1] == "extras_cost"
        assert len(names) == 10

    def test_summary_dict_formats_money(self) -> None:
        summary = _make_breakdown().to_summary_dict()
        assert summary["total_cost_formatted"] == "171\u00a0450\u00a0₽"
        assert summary["subtotals_formatted"]["heating_cost"] == "5\u00a0250\u00a0₽"
        assert summary["subtotals_formatted"]["doors_cost"] == "0\u00a0₽"

    def test_summary_dict_rows(self) -> None:
        summary = _make_breakdown().to_summary_dict()
        assert summary["windows"] == [
            {
                "item_id": "w1",
                "variant": "WOOD_75x85",
                "count": 2,
                "cost_formatted": "4\u00a0200\u00a0₽",
                "note": "included: one unit",
            },
        ]
        assert summary["doors"][0]["cost_formatted"] == "Included"
        assert summary["doors"][0]["note"] == "included"
        assert summary["plumbing"] == []

    def test_summary_dict_zero_count_row_is_not_included(self) -> None:
        empty_row = LineItemCost(
            item_id="p1",
            variant="SINK",
            count=0,
            full_unit_price=8500.0,
            total_cost=0.0,
        )
        summary = _make_breakdown(plumbing_items=[empty_row]).to_summary_dict()
        assert summary["plumbing"][0]["cost_formatted"] == "0\u00a0₽"
        assert summary["plumbing"][0]["note"] is None

    def test_summary_dict_counts_units(self) -> None:
        summary = _make_breakdown().to_summary_dict()
        assert summary["num_windows"] == 2
        assert summary["num_doors"] == 1
        assert summary["num_plumbing"] == 0
