"""Pricing engine for the cabinquote calculator.

The PricingEngine turns a CabinConfig into an EstimateBreakdown:

1. **Shell**: floor area times the base rate, scaled by wall height relative
   to the reference height.
2. **Finishes**: exterior, interior and insulation surcharges per m² of floor
   area. They do not scale with height.
3. **Windows and doors**: catalog unit prices with the included-unit and
   substitution rules (see ``price_units``).
4. **Plumbing, partitions, heating**: flat catalog prices.
5. **Wiring**: always included in the base price; contributes 0.

Every call starts from a clean state. Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from cabinquote.data.catalog import PriceCatalog
from cabinquote.data.pricing import DEFAULT_PRICING, REFERENCE_HEIGHT
from cabinquote.models.enums import PriceNote
from cabinquote.models.estimate import EstimateBreakdown, LineItemCost

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from cabinquote.data.pricing import PricingTable
    from cabinquote.models.config import CabinConfig, DoorItem, PlumbingItem, WindowItem

ENGINE_VERSION = "0.1.0"


class UnitOutcome(StrEnum):
    """How a single unit was priced."""

    INCLUDED = "included"
    SUBSTITUTED = "substituted"
    FULL_PRICE = "full_price"


@dataclass(frozen=True)
class UnitPrice:
    """Price of one physical unit, tagged with the line item it came from."""

    item_index: int
    price: float
    outcome: UnitOutcome


@dataclass(frozen=True)
class _PassState:
    reference_consumed: bool = False
    substitution_applied: bool = False


@dataclass(frozen=True)
class SubstitutionRule:
    """The included-unit and substitution terms for one fixture family.

    Attributes:
        reference: The variant bundled free with the shell (one unit only).
        is_substitutable: Whether a variant may replace the missing reference
            unit at ``substitution_price``.
        substitution_price: Flat price for the first substituting unit.
        unit_price: Catalog price lookup for a variant.
    """

    reference: StrEnum
    is_substitutable: Callable[[Any], bool]
    substitution_price: float
    unit_price: Callable[[Any], float]


def _step(
    state: _PassState,
    variant: StrEnum,
    rule: SubstitutionRule,
    has_reference_unit: bool,
) -> tuple[float, UnitOutcome, _PassState]:
    """Price one unit and return the state carried to the next one."""
    if variant == rule.reference and not state.reference_consumed:
        return 0.0, UnitOutcome.INCLUDED, _PassState(
            reference_consumed=True,
            substitution_applied=state.substitution_applied,
        )
    if (
        rule.is_substitutable(variant)
        and not has_reference_unit
        and not state.substitution_applied
    ):
        return rule.substitution_price, UnitOutcome.SUBSTITUTED, _PassState(
            reference_consumed=state.reference_consumed,
            substitution_applied=True,
        )
    return rule.unit_price(variant), UnitOutcome.FULL_PRICE, state


def price_units(
    variants_and_counts: Sequence[tuple[StrEnum, int]],
    rule: SubstitutionRule,
) -> list[UnitPrice]:
    """Price every unit of a window or door list in list order.

    Each ``(variant, count)`` row expands into ``count`` units. The first
    reference unit anywhere in the list is free. When the list holds no
    reference unit at all, the first substitutable unit is charged the
    substitution price instead. Everything else is charged the catalog price.
    Rows with a count of 0 contribute no units.
    """
    has_reference_unit = any(
        variant == rule.reference and count > 0
        for variant, count in variants_and_counts
    )

    state = _PassState()
    units: list[UnitPrice] = []
    for index, (variant, count) in enumerate(variants_and_counts):
        for _ in range(count):
            price, outcome, state = _step(state, variant, rule, has_reference_unit)
            units.append(UnitPrice(item_index=index, price=price, outcome=outcome))
    return units


def _note_for(outcomes: list[UnitOutcome], count: int) -> PriceNote | None:
    included = outcomes.count(UnitOutcome.INCLUDED)
    if included:
        return PriceNote.INCLUDED if included == count else PriceNote.ONE_UNIT_INCLUDED
    if UnitOutcome.SUBSTITUTED in outcomes:
        return PriceNote.SUBSTITUTED
    return None


def _group_by_item(
    units: list[UnitPrice],
    rows: Sequence[tuple[str, StrEnum, int]],
    unit_price: Callable[[Any], float],
) -> list[LineItemCost]:
    """Fold unit prices back onto the line items they came from."""
    totals = [0.0] * len(rows)
    outcomes: list[list[UnitOutcome]] = [[] for _ in rows]
    for unit in units:
        totals[unit.item_index] += unit.price
        outcomes[unit.item_index].append(unit.outcome)

    return [
        LineItemCost(
            item_id=item_id,
            variant=variant.value,
            count=count,
            full_unit_price=unit_price(variant),
            total_cost=totals[index],
            note=_note_for(outcomes[index], count),
        )
        for index, (item_id, variant, count) in enumerate(rows)
    ]


def _sum_prices(units: list[UnitPrice]) -> float:
    total = 0.0
    for unit in units:
        total += unit.price
    return total


class PricingEngine:
    """Converts a CabinConfig into an EstimateBreakdown.

    Args:
        catalog: Price lookups and the included/substitute variants.

    Example::

        from cabinquote.data.catalog import PriceCatalog
        from cabinquote.data.pricing import DEFAULT_PRICING

        engine = PricingEngine(PriceCatalog(DEFAULT_PRICING))
        breakdown = engine.estimate(config)
    """

    def __init__(self, catalog: PriceCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> PriceCatalog:
        return self._catalog

    def estimate(self, config: CabinConfig) -> EstimateBreakdown:
        """Price a configuration.

        Never raises for a valid CabinConfig. Negative dimensions propagate
        arithmetically; bounding them is the editor's job.
        """
        catalog = self._catalog
        table = catalog.table

        # 1. Shell. Calibrated form of area * base_price_per_sqm * height
        # multiplier, exact at the reference size.
        area = config.area
        height_multiplier = config.height / REFERENCE_HEIGHT
        base_structure_cost = (
            table.reference_base_price * (area / table.reference_area) * height_multiplier
        )

        # 2. Finishes
        exterior_cost = area * catalog.exterior_rate(config.exterior)
        interior_cost = area * catalog.interior_rate(config.interior)
        insulation_cost = area * catalog.insulation_rate(config.insulation)

        # 3. Windows and doors
        windows_cost, window_items = self._price_windows(config.window_list)
        doors_cost, door_items = self._price_doors(config.door_list)

        # 4. Flat-priced extras
        plumbing_items = self._price_plumbing(config.plumbing_list)
        plumbing_cost = _sum_item_costs(plumbing_items)

        extras = table.extras
        partitions_cost = (
            config.partitions_short * extras.partition_short
            + config.partitions_long * extras.partition_long
        )
        heating_cost = extras.heating_unit if config.heating else 0.0

        # 5. Wiring is part of the base price whether or not it is selected.
        extras_cost = 0.0

        total_cost = (
            base_structure_cost
            + exterior_cost
            + interior_cost
            + insulation_cost
            + windows_cost
            + doors_cost
            + partitions_cost
            + heating_cost
            + plumbing_cost
            + extras_cost
        )

        return EstimateBreakdown(
            base_structure_cost=base_structure_cost,
            exterior_cost=exterior_cost,
            interior_cost=interior_cost,
            insulation_cost=insulation_cost,
            windows_cost=windows_cost,
            doors_cost=doors_cost,
            partitions_cost=partitions_cost,
            heating_cost=heating_cost,
            plumbing_cost=plumbing_cost,
            extras_cost=extras_cost,
            total_cost=total_cost,
            window_items=window_items,
            door_items=door_items,
            plumbing_items=plumbing_items,
        )

    def window_rule(self) -> SubstitutionRule:
        """Included wooden window; any PVC window may substitute for it."""
        catalog = self._catalog
        return SubstitutionRule(
            reference=catalog.included.window_size,
            is_substitutable=lambda variant: variant.is_pvc,
            substitution_price=catalog.table.extras.window_substitution_pvc,
            unit_price=catalog.window_price,
        )

    def door_rule(self) -> SubstitutionRule:
        """Included hardboard door; the metal door may substitute for it."""
        catalog = self._catalog
        substitute = catalog.substitute_door
        return SubstitutionRule(
            reference=catalog.included.door_type,
            is_substitutable=lambda variant: variant == substitute,
            substitution_price=catalog.table.extras.door_substitution_metal,
            unit_price=catalog.door_price,
        )

    def _price_windows(
        self, items: Sequence[WindowItem]
    ) -> tuple[float, list[LineItemCost]]:
        rule = self.window_rule()
        units = price_units([(item.size, item.count) for item in items], rule)
        rows = [(item.id, item.size, item.count) for item in items]
        return _sum_prices(units), _group_by_item(units, rows, rule.unit_price)

    def _price_doors(
        self, items: Sequence[DoorItem]
    ) -> tuple[float, list[LineItemCost]]:
        rule = self.door_rule()
        units = price_units([(item.type, item.count) for item in items], rule)
        rows = [(item.id, item.type, item.count) for item in items]
        return _sum_prices(units), _group_by_item(units, rows, rule.unit_price)

    def _price_plumbing(self, items: Sequence[PlumbingItem]) -> list[LineItemCost]:
        return [
            LineItemCost(
                item_id=item.id,
                variant=item.type.value,
                count=item.count,
                full_unit_price=self._catalog.plumbing_price(item.type),
                total_cost=item.count * self._catalog.plumbing_price(item.type),
            )
            for item in items
        ]


def _sum_item_costs(items: list[LineItemCost]) -> float:
    total = 0.0
    for item in items:
        total += item.total_cost
    return total


def compute_estimate(
    config: CabinConfig,
    table: PricingTable = DEFAULT_PRICING,
) -> EstimateBreakdown:
    """Price ``config`` against ``table`` with the standard included options."""
    return PricingEngine(PriceCatalog(table)).estimate(config)
