"""SQLite persistence for finalized catering orders."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

from catering.config import DB_PATH
from catering.data import config_from_dict, config_to_dict
from catering.logger import get_logger
from catering.models import PriceBreakdown, UnitCollection, UnitConfiguration
from catering.units import effective_config, is_overridden

logger = get_logger(__name__)


@dataclass(frozen=True)
class SavedUnit:
    unit_index: int
    price: Decimal
    is_override: bool
    config: UnitConfiguration


@dataclass(frozen=True)
class SavedOrder:
    """Saved order metadata and the copied per-unit configurations."""

    order_id: str
    created_at: str
    template_id: str | None
    status: str
    total: Decimal
    units: list[SavedUnit]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _connect() -> sqlite3.Connection:
    db_file = Path(DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def bootstrap_schema() -> None:
    """Create the orders and order_units tables if missing."""
    with _connect() as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                template_id TEXT,
                unit_count INTEGER NOT NULL,
                total TEXT NOT NULL,
                source TEXT NOT NULL DEFAULT 'tui',
                status TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS order_units (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                unit_index INTEGER NOT NULL,
                price TEXT NOT NULL,
                is_override INTEGER NOT NULL DEFAULT 0,
                config_json TEXT NOT NULL,
                FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
            );

            CREATE INDEX IF NOT EXISTS idx_order_units_order_id_unit
                ON order_units(order_id, unit_index);
            """
        )


def save_order(collection: UnitCollection, breakdown: PriceBreakdown, template_id: str | None) -> SavedOrder:
    """Persist every unit's effective configuration and price."""
    if collection.unit_count <= 0 or not breakdown.groups:
        raise ValueError("Cannot save empty catering order")

    price_by_unit = {
        unit_index: group.price for group in breakdown.groups for unit_index in group.unit_indices
    }
    units = []
    for unit_index in range(1, collection.unit_count + 1):
        if unit_index not in price_by_unit:
            raise ValueError(f"Price breakdown is missing unit {unit_index}")
        units.append(
            SavedUnit(
                unit_index=unit_index,
                price=price_by_unit[unit_index],
                is_override=is_overridden(collection, unit_index),
                config=effective_config(collection, unit_index),
            )
        )

    order_id = uuid4().hex
    created_at = _utc_now_iso()

    with _connect() as conn:
        with conn:
            conn.execute(
                """
                INSERT INTO orders (id, created_at, template_id, unit_count, total, source, status)
                VALUES (?, ?, ?, ?, ?, 'tui', 'SAVED')
                """,
                (order_id, created_at, template_id, collection.unit_count, str(breakdown.total)),
            )
            conn.executemany(
                """
                INSERT INTO order_units (order_id, unit_index, price, is_override, config_json)
                VALUES (?, ?, ?, ?, ?)
                """,
                [
                    (order_id, unit.unit_index, str(unit.price), int(unit.is_override), json.dumps(config_to_dict(unit.config)))
                    for unit in units
                ],
            )

    logger.info("order saved id=%s units=%d total=%s", order_id, len(units), breakdown.total)
    return SavedOrder(
        order_id=order_id,
        created_at=created_at,
        template_id=template_id,
        status="SAVED",
        total=breakdown.total,
        units=units,
    )


def update_order_status(order_id: str, status: str) -> None:
    """Update status for a persisted order."""
    with _connect() as conn:
        with conn:
            conn.execute("UPDATE orders SET status = ? WHERE id = ?", (status, order_id))


def load_order(order_id: str) -> SavedOrder | None:
    with _connect() as conn:
        row = conn.execute(
            "SELECT id, created_at, template_id, total, status FROM orders WHERE id = ?",
            (order_id,),
        ).fetchone()
        if row is None:
            return None
        unit_rows = conn.execute(
            """
            SELECT unit_index, price, is_override, config_json
            FROM order_units WHERE order_id = ? ORDER BY unit_index
            """,
            (order_id,),
        ).fetchall()

    units = [
        SavedUnit(
            unit_index=int(unit_index),
            price=Decimal(price),
            is_override=bool(is_override),
            config=config_from_dict(json.loads(config_json)),
        )
        for unit_index, price, is_override, config_json in unit_rows
    ]
    return SavedOrder(
        order_id=row[0],
        created_at=row[1],
        template_id=row[2],
        status=row[4],
        total=Decimal(row[3]),
        units=units,
    )
