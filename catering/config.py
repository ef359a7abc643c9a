"""Runtime configuration defaults for the catering configurator."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("CATERING_DB_PATH", "data/catering.db")
LOG_DIR = os.environ.get("CATERING_LOG_DIR", "logs")

# Boxed meal order limits.
MIN_UNIT_COUNT = 10
DEFAULT_UNIT_COUNT = 10
WING_COUNT_OPTIONS = (6, 10, 12)
# Split sauces are offered by the UI from this wing count up.
SPLIT_MIN_WING_COUNT = 10
HEADROOM_WARNING_LIMIT = 10

# Kitchen ticket printer.
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 40
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 16
