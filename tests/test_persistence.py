"""
Order persistence tests (SQLite in a temp directory)
"""

from decimal import Decimal

import pytest

from catering.models import PriceBreakdown
from catering.persistence import bootstrap_schema, load_order, save_order, update_order_status
from catering.pricing import aggregate
from catering.units import new_collection, set_override


def notes_price(config):
    return Decimal("15.00") if config.notes else Decimal("12.50")


class TestSaveOrder:

    def test_save_and_load(self, temp_db, office_config, noted_config):
        bootstrap_schema()
        collection = set_override(new_collection(office_config, 10), 5, noted_config)
        breakdown = aggregate(collection, notes_price)

        saved = save_order(collection, breakdown, "office-favorite")
        assert saved.status == "SAVED"
        assert temp_db.exists()

        loaded = load_order(saved.order_id)
        assert loaded is not None
        assert loaded.total == Decimal("127.50")
        assert loaded.template_id == "office-favorite"
        assert len(loaded.units) == 10
        assert loaded.units[4].is_override
        assert loaded.units[4].config == noted_config
        assert loaded.units[4].price == Decimal("15.00")
        assert loaded.units[0].config == office_config

    def test_status_update(self, temp_db, office_config):
        bootstrap_schema()
        collection = new_collection(office_config)
        saved = save_order(collection, aggregate(collection, notes_price), None)
        update_order_status(saved.order_id, "PRINTED")
        assert load_order(saved.order_id).status == "PRINTED"

    def test_empty_breakdown_rejected(self, temp_db, office_config):
        bootstrap_schema()
        with pytest.raises(ValueError):
            save_order(new_collection(office_config), PriceBreakdown(groups=(), total=Decimal("0.00")), None)

    def test_missing_order(self, temp_db):
        bootstrap_schema()
        assert load_order("nope") is None
