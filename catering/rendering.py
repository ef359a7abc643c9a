"""Rendering helpers for mixes, configurations, messages and price breakdowns."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from catering.data import MENU, MenuCatalog
from catering.models import (
    CATEGORY_ORDER,
    CategoryKind,
    MessageKind,
    PriceBreakdown,
    Style,
    UnitConfiguration,
    ValidationMessage,
    WingMix,
)
from catering.validation import CATEGORY_LABELS

# Groups this small list their box numbers inline.
INLINE_INDEX_LIMIT = 3

CATEGORY_BADGES: dict[CategoryKind, str] = {
    CategoryKind.PLANT_BASED: "PB",
    CategoryKind.BONELESS: "BL",
    CategoryKind.BONE_IN: "BI",
}

MESSAGE_ICONS: dict[MessageKind, str] = {
    MessageKind.ERROR: "x",
    MessageKind.WARNING: "!",
    MessageKind.INFO: "i",
    MessageKind.SUCCESS: "✓",
}

MESSAGE_STYLES: dict[MessageKind, str] = {
    MessageKind.ERROR: "bold #ffb3b3",
    MessageKind.WARNING: "#ffd27f",
    MessageKind.INFO: "#9ecbff",
    MessageKind.SUCCESS: "bold #5fbf72",
}


def badge_style(kind: CategoryKind) -> str:
    """Return a consistent badge style for category tags."""
    if kind == CategoryKind.BONE_IN:
        return "bold #ffffff on #b23a48"
    if kind == CategoryKind.PLANT_BASED:
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #2f6db5"


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def format_mix_label(mix: WingMix) -> Text:
    """Render the non-zero categories of a mix as badges with counts."""
    text = Text()
    for kind in CATEGORY_ORDER:
        quantity = mix.quantity(kind)
        if quantity <= 0:
            continue
        if text.plain:
            text.append(" ")
        text.append(CATEGORY_BADGES[kind], style=badge_style(kind))
        text.append(f" {quantity}")
        if kind == CategoryKind.PLANT_BASED and mix.plant_based.prep_method is not None:
            text.append(f" ({mix.plant_based.prep_method.value})")
        if kind == CategoryKind.BONE_IN and mix.bone_in.style is not None:
            text.append(f" ({mix.bone_in.style.value})")
    if not text.plain:
        text.append("(no wings)", style="dim")
    return text


def mix_summary(mix: WingMix) -> str:
    parts = []
    for kind in CATEGORY_ORDER:
        quantity = mix.quantity(kind)
        if quantity <= 0:
            continue
        label = f"{quantity} {CATEGORY_LABELS[kind]}"
        if kind == CategoryKind.PLANT_BASED and mix.plant_based.prep_method is not None:
            label += f" {mix.plant_based.prep_method.value}"
        if kind == CategoryKind.BONE_IN and mix.bone_in.style in {Style.FLATS, Style.DRUMS}:
            label += f" all {mix.bone_in.style.value}"
        parts.append(label)
    return ", ".join(parts) or "no wings"


def sauce_summary(config: UnitConfiguration, catalog: MenuCatalog = MENU) -> str:
    if config.split is not None:
        return " / ".join(
            f"{slot.count} {catalog.name_for(slot.flavor_id) if slot.flavor_id else '?'}" for slot in config.split.slots
        )
    if config.sauce_id is None:
        return "no sauce"
    return catalog.name_for(config.sauce_id)


def config_summary_lines(config: UnitConfiguration, catalog: MenuCatalog = MENU) -> list[str]:
    """Plain-text lines describing one configuration."""
    dips = " + ".join(catalog.name_for(dip_id) if dip_id else "?" for dip_id in config.dips)
    lines = [
        f"{config.wing_count} wings: {mix_summary(config.mix)}",
        f"Sauce: {sauce_summary(config, catalog)}",
        f"Dips: {dips}",
        f"Side: {catalog.name_for(config.side_id)}",
        f"Dessert: {catalog.name_for(config.dessert_id)}",
    ]
    if config.notes.strip():
        lines.append(f"Notes: {config.notes.strip()}")
    return lines


def format_messages(messages: list[ValidationMessage]) -> Text:
    text = Text()
    for idx, message in enumerate(messages):
        if idx > 0:
            text.append("\n")
        style = MESSAGE_STYLES[message.kind]
        text.append(f"{MESSAGE_ICONS[message.kind]} {message.summary}", style=style)
        if message.detail:
            text.append(f"\n    {message.detail}", style="dim")
    return text


def format_breakdown(breakdown: PriceBreakdown) -> Text:
    """Render price groups, listing box numbers only for small groups."""
    text = Text()
    for idx, group in enumerate(breakdown.groups):
        if idx > 0:
            text.append("\n")
        noun = "box" if group.unit_count == 1 else "boxes"
        text.append(f"{group.unit_count} {noun} @ {format_money(group.price)}")
        if group.unit_count <= INLINE_INDEX_LIMIT:
            text.append("  #" + ", #".join(str(index) for index in group.unit_indices), style="dim")
        text.append(f"  {format_money(group.subtotal)}", style="bold")
    if breakdown.groups:
        text.append("\n")
    text.append(f"Total: {format_money(breakdown.total)}", style="bold")
    return text
