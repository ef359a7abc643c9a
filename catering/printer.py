"""Kitchen prep ticket printing for finalized catering orders."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from catering.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from catering.logger import get_logger
from catering.models import PriceBreakdown, UnitCollection, UnitConfiguration
from catering.rendering import config_summary_lines, format_money
from catering.units import effective_config

logger = get_logger(__name__)

_FONT_OVERRIDE_ENV = "CATERING_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)
_SEPARATOR = "__SEP__"
_SEPARATOR_HEIGHT_PX = 12
_LINE_EXTRA_PX = 14


@dataclass
class _PrepGroup:
    config: UnitConfiguration
    unit_indices: list[int] = field(default_factory=list)


def _group_units(collection: UnitCollection) -> list[_PrepGroup]:
    """Group units with identical effective configurations, in first-seen order."""
    groups: list[_PrepGroup] = []
    for unit_index in range(1, collection.unit_count + 1):
        config = effective_config(collection, unit_index)
        for group in groups:
            if group.config == config:
                group.unit_indices.append(unit_index)
                break
        else:
            groups.append(_PrepGroup(config=config, unit_indices=[unit_index]))
    return groups


def _unit_range_label(unit_indices: list[int]) -> str:
    """Compact box numbers, e.g. "1-4, 7, 9-10"."""
    parts: list[str] = []
    start = prev = unit_indices[0]
    for index in unit_indices[1:]:
        if index == prev + 1:
            prev = index
            continue
        parts.append(str(start) if start == prev else f"{start}-{prev}")
        start = prev = index
    parts.append(str(start) if start == prev else f"{start}-{prev}")
    return ", ".join(parts)


def ticket_lines(collection: UnitCollection, breakdown: PriceBreakdown, title: str | None = None) -> list[str]:
    """Lines of the prep ticket: one block per distinct box configuration."""
    lines: list[str] = []
    if title:
        lines.append(title)
        lines.append(_SEPARATOR)
    for group in _group_units(collection):
        count = len(group.unit_indices)
        noun = "box" if count == 1 else "boxes"
        lines.append(f"{count} {noun} #{_unit_range_label(group.unit_indices)}")
        lines.extend(f"  {line}" for line in config_summary_lines(group.config))
        lines.append(_SEPARATOR)
    lines.append(f"Total {format_money(breakdown.total)}")
    return lines


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. CATERING_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Report whether escpos, Pillow and a usable font are available."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def render_ticket(lines: list[str], font: object) -> object:
    """Render all ticket lines onto one 1-bit image."""
    from PIL import Image, ImageDraw

    line_height = PRINTER_FONT_SIZE + _LINE_EXTRA_PX
    height = sum(_SEPARATOR_HEIGHT_PX if line == _SEPARATOR else line_height for line in lines)
    img = Image.new("1", (PRINTER_WIDTH_PX, max(1, height)), color=1)
    draw = ImageDraw.Draw(img)

    y = 0
    for line in lines:
        if line == _SEPARATOR:
            mid = y + _SEPARATOR_HEIGHT_PX // 2
            draw.rectangle((0, mid - 1, PRINTER_WIDTH_PX - 1, mid), fill=0)
            y += _SEPARATOR_HEIGHT_PX
            continue
        bbox = draw.textbbox((0, 0), line, font=font)
        text_height = bbox[3] - bbox[1]
        # Offset by bbox top so descenders are not clipped.
        draw.text((PRINTER_LEFT_INDENT_PX, y + (line_height - text_height) // 2 - bbox[1]), line, font=font, fill=0)
        y += line_height
    return img


def print_ticket(lines: list[str]) -> None:
    """Print the ticket and cut it."""
    if not lines:
        return

    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    printer.image(render_ticket(lines, font))
    printer.cut()
    logger.info("ticket printed lines=%d", len(lines))
