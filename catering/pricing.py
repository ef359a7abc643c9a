"""Per-unit price aggregation into a compact price breakdown."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable

from catering.logger import get_logger
from catering.models import PriceBreakdown, PriceGroup, UnitCollection, UnitConfiguration
from catering.units import effective_config

logger = get_logger(__name__)

CENT = Decimal("0.01")

PriceValue = Decimal | float | int
PriceFn = Callable[[UnitConfiguration], PriceValue]


class PriceComputationFailed(ValueError):
    """The price function returned an unusable value for a unit."""

    def __init__(self, unit_index: int, price: object) -> None:
        super().__init__(f"Price computation failed for unit {unit_index}: {price!r}")
        self.unit_index = unit_index
        self.price = price


def to_cents(value: PriceValue) -> Decimal:
    """Round a price to the currency's minor unit, half-up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _checked_price(unit_index: int, raw: object) -> Decimal:
    if isinstance(raw, bool) or not isinstance(raw, (Decimal, float, int)):
        raise PriceComputationFailed(unit_index, raw)
    value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    if not value.is_finite() or value < 0:
        raise PriceComputationFailed(unit_index, raw)
    try:
        return to_cents(value)
    except InvalidOperation as exc:
        # Too many digits to quantize to cents.
        raise PriceComputationFailed(unit_index, raw) from exc


def aggregate(collection: UnitCollection, price_fn: PriceFn) -> PriceBreakdown:
    """
    Price every unit once and group units that share a price.

    Groups are ordered by price descending; unit indices inside a group are
    ascending. The total is the sum of the group subtotals, which equals the
    sum of the individually rounded unit prices.
    """
    members: dict[Decimal, list[int]] = {}
    for unit_index in range(1, collection.unit_count + 1):
        raw = price_fn(effective_config(collection, unit_index))
        try:
            price = _checked_price(unit_index, raw)
        except PriceComputationFailed:
            logger.error("price_fn returned %r for unit %d", raw, unit_index)
            raise
        members.setdefault(price, []).append(unit_index)

    groups = tuple(
        PriceGroup(price=price, unit_count=len(indices), unit_indices=tuple(indices))
        for price, indices in sorted(members.items(), key=lambda item: item[0], reverse=True)
    )
    total = sum((group.subtotal for group in groups), Decimal("0.00"))
    logger.debug("aggregate units=%d groups=%d total=%s", collection.unit_count, len(groups), total)
    return PriceBreakdown(groups=groups, total=total)


def collection_title(collection: UnitCollection, template_name: str | None) -> str:
    """Headline for the boxes section, e.g. "8 x Game Day Combo + 2 Customized"."""
    customized = len(collection.overrides)
    if template_name is None or customized >= collection.unit_count:
        return f"{collection.unit_count} Customized Individual Boxes"
    if customized:
        return f"{collection.unit_count - customized} x {template_name} + {customized} Customized"
    return f"{collection.unit_count} x {template_name}"
