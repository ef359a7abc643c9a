"""Standard per-box price function."""

from __future__ import annotations

from decimal import Decimal

from catering.constant import (
    BOX_BASE_PRICE,
    CATEGORY_UPCHARGES,
    PREMIUM_SAUCE_IDS,
    PREMIUM_SAUCE_UPCHARGE,
    PREMIUM_SPLIT_SLOT_UPCHARGE,
    STYLE_UPCHARGE,
    WING_COUNT_UPCHARGES,
)
from catering.data import MENU, MenuCatalog
from catering.models import CATEGORY_ORDER, CategoryKind, Style, UnitConfiguration
from catering.pricing import to_cents

NO_DESSERT_ID = "no-dessert"


class BoxPricer:
    """
    Price one boxed meal.

    The base price includes chips and the template's own dessert, so sides and
    desserts are charged as differentials. Category upcharges are weighted by
    each category's share of the box's wings.
    """

    def __init__(self, catalog: MenuCatalog = MENU, included_dessert_id: str | None = None) -> None:
        self.catalog = catalog
        self.included_dessert_id = included_dessert_id

    def __call__(self, config: UnitConfiguration) -> Decimal:
        price = Decimal(BOX_BASE_PRICE)
        price += Decimal(WING_COUNT_UPCHARGES.get(config.wing_count, "0.00"))
        price += self._category_upcharge(config)
        if config.mix.quantity(CategoryKind.BONE_IN) > 0 and config.mix.bone_in.style in {Style.FLATS, Style.DRUMS}:
            price += Decimal(STYLE_UPCHARGE)
        price += self._sauce_upcharge(config)
        price += self._entry_price(self.catalog.sides, config.side_id)
        price += self._dessert_differential(config.dessert_id)
        return to_cents(price)

    def _category_upcharge(self, config: UnitConfiguration) -> Decimal:
        wings = config.mix.total()
        if wings <= 0:
            return Decimal("0.00")
        weighted = sum(
            (Decimal(CATEGORY_UPCHARGES[kind.value]) * config.mix.quantity(kind) for kind in CATEGORY_ORDER),
            Decimal("0"),
        )
        return to_cents(weighted / wings)

    def _sauce_upcharge(self, config: UnitConfiguration) -> Decimal:
        if config.split is not None:
            premium_slots = sum(1 for slot in config.split.slots if slot.flavor_id in PREMIUM_SAUCE_IDS)
            return Decimal(PREMIUM_SPLIT_SLOT_UPCHARGE) * premium_slots
        if config.sauce_id in PREMIUM_SAUCE_IDS:
            return Decimal(PREMIUM_SAUCE_UPCHARGE)
        return Decimal("0.00")

    @staticmethod
    def _entry_price(section: dict, entry_id: str | None) -> Decimal:
        entry = section.get(entry_id) if entry_id else None
        if entry is None or entry.price is None:
            return Decimal("0.00")
        return entry.price

    def _dessert_differential(self, dessert_id: str | None) -> Decimal:
        if not dessert_id or dessert_id == NO_DESSERT_ID:
            return Decimal("0.00")
        baseline = Decimal("0.00")
        if self.included_dessert_id and self.included_dessert_id != NO_DESSERT_ID:
            baseline = self._entry_price(self.catalog.desserts, self.included_dessert_id)
        return self._entry_price(self.catalog.desserts, dessert_id) - baseline
