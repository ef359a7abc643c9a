"""Static catalog, template data and configuration (de)serialization."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catering.allocation import default_distribution
from catering.constant import DESSERTS, DIPS, SAUCES, SIDES
from catering.constant import TEMPLATES as _TEMPLATES_RAW
from catering.models import (
    CATEGORY_ORDER,
    BoneIn,
    BoxTemplate,
    CatalogEntry,
    CategoryKind,
    PlantBased,
    PrepMethod,
    SplitSelection,
    SplitSlot,
    Style,
    UnitConfiguration,
    WingMix,
)


def _parse_entry(entry_id: str, raw: dict[str, object]) -> CatalogEntry:
    """Validate one raw catalog row; malformed rows fail at load time."""
    name = raw.get("name")
    if not entry_id or not isinstance(name, str) or not name.strip():
        raise ValueError(f"Catalog entry {entry_id!r} needs a non-empty id and name")

    heat_level = raw.get("heat_level")
    if heat_level is not None and (not isinstance(heat_level, int) or isinstance(heat_level, bool) or heat_level < 0):
        raise ValueError(f"Catalog entry {entry_id!r} has invalid heat level {heat_level!r}")

    raw_price = raw.get("price")
    price: Decimal | None = None
    if raw_price is not None:
        try:
            price = Decimal(str(raw_price))
        except InvalidOperation as exc:
            raise ValueError(f"Catalog entry {entry_id!r} has invalid price {raw_price!r}") from exc
        if not price.is_finite() or price < 0:
            raise ValueError(f"Catalog entry {entry_id!r} has invalid price {raw_price!r}")

    return CatalogEntry(entry_id=entry_id, name=name.strip(), heat_level=heat_level, price=price)


def build_catalog(raw_entries: dict[str, dict[str, object]]) -> dict[str, CatalogEntry]:
    return {entry_id: _parse_entry(entry_id, raw) for entry_id, raw in raw_entries.items()}


@dataclass(frozen=True)
class MenuCatalog:
    """Every selectable entry, keyed by id."""

    sauces: dict[str, CatalogEntry]
    dips: dict[str, CatalogEntry]
    sides: dict[str, CatalogEntry]
    desserts: dict[str, CatalogEntry]

    def find(self, entry_id: str | None) -> CatalogEntry | None:
        if entry_id is None:
            return None
        for section in (self.sauces, self.dips, self.sides, self.desserts):
            if entry_id in section:
                return section[entry_id]
        return None

    def name_for(self, entry_id: str | None) -> str:
        """Display name for an id, falling back to the id itself."""
        entry = self.find(entry_id)
        if entry is None:
            return entry_id or "-"
        return entry.name


MENU = MenuCatalog(
    sauces=build_catalog(SAUCES),
    dips=build_catalog(DIPS),
    sides=build_catalog(SIDES),
    desserts=build_catalog(DESSERTS),
)


def config_to_dict(config: UnitConfiguration) -> dict[str, object]:
    """Plain-data form of a configuration (JSON friendly)."""
    split = None
    if config.split is not None:
        split = [{"flavor_id": slot.flavor_id, "count": slot.count} for slot in config.split.slots]
    return {
        "wing_count": config.wing_count,
        "quantities": {kind.value: config.mix.quantity(kind) for kind in CATEGORY_ORDER},
        "prep_method": config.mix.plant_based.prep_method.value if config.mix.plant_based.prep_method else None,
        "style": config.mix.bone_in.style.value if config.mix.bone_in.style else None,
        "sauce_id": config.sauce_id,
        "split": split,
        "dips": list(config.dips),
        "side_id": config.side_id,
        "dessert_id": config.dessert_id,
        "notes": config.notes,
    }


def config_from_dict(raw: dict[str, object]) -> UnitConfiguration:
    """
    Build a configuration from plain data.

    Accepts either explicit per-category "quantities" or a single "category"
    that receives every wing, as the template data uses.
    """
    wing_count = int(raw["wing_count"])  # type: ignore[arg-type]
    raw_quantities = raw.get("quantities")
    if isinstance(raw_quantities, dict):
        quantities = {kind: int(raw_quantities.get(kind.value, 0)) for kind in CATEGORY_ORDER}
    else:
        quantities = default_distribution(wing_count, CategoryKind(raw.get("category", CategoryKind.BONELESS.value)))

    prep_method = raw.get("prep_method")
    style = raw.get("style", Style.MIXED.value)
    mix = WingMix(
        quantities=quantities,
        plant_based=PlantBased(prep_method=PrepMethod(prep_method) if prep_method else None),
        bone_in=BoneIn(style=Style(style) if style else None),
    )

    split = None
    raw_split = raw.get("split")
    if raw_split:
        first, second = raw_split  # type: ignore[misc]
        split = SplitSelection(
            first=SplitSlot(flavor_id=first.get("flavor_id"), count=int(first["count"])),
            second=SplitSlot(flavor_id=second.get("flavor_id"), count=int(second["count"])),
        )

    dips = list(raw.get("dips") or [])  # type: ignore[call-overload]
    dips = (dips + [None, None])[:2]
    return UnitConfiguration(
        wing_count=wing_count,
        mix=mix,
        sauce_id=raw.get("sauce_id"),  # type: ignore[arg-type]
        split=split,
        dips=(dips[0], dips[1]),
        side_id=raw.get("side_id"),  # type: ignore[arg-type]
        dessert_id=raw.get("dessert_id"),  # type: ignore[arg-type]
        notes=str(raw.get("notes") or ""),
    )


TEMPLATES: list[BoxTemplate] = [
    BoxTemplate(
        template_id=str(raw["template_id"]),
        name=str(raw["name"]),
        tagline=str(raw["tagline"]),
        config=config_from_dict(raw["config"]),  # type: ignore[arg-type]
    )
    for raw in _TEMPLATES_RAW
]

TEMPLATE_BY_ID: dict[str, BoxTemplate] = {template.template_id: template for template in TEMPLATES}


def template_by_id(template_id: str) -> BoxTemplate | None:
    return TEMPLATE_BY_ID.get(template_id)
