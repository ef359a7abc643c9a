"""
Price aggregation tests

- aggregate(): grouping, ordering, total identity
- PriceComputationFailed for unusable prices
- collection_title()
"""

from decimal import Decimal

import pytest

from catering.pricing import PriceComputationFailed, aggregate, collection_title, to_cents
from catering.units import effective_config, new_collection, set_override


def flat_price(config):
    return Decimal("12.50")


def notes_price(config):
    """Noted boxes cost more"""
    return Decimal("15.00") if config.notes else Decimal("12.50")


class TestAggregate:

    def test_uniform_collection_single_group(self, office_config):
        breakdown = aggregate(new_collection(office_config, 10), flat_price)
        assert len(breakdown.groups) == 1
        group = breakdown.groups[0]
        assert group.unit_count == 10
        assert group.unit_indices == tuple(range(1, 11))
        assert breakdown.total == Decimal("125.00")

    def test_groups_ordered_by_price_descending(self, office_config, noted_config):
        collection = new_collection(office_config, 10)
        collection = set_override(collection, 7, noted_config)
        collection = set_override(collection, 3, noted_config)
        breakdown = aggregate(collection, notes_price)

        assert [group.price for group in breakdown.groups] == [Decimal("15.00"), Decimal("12.50")]
        assert breakdown.groups[0].unit_indices == (3, 7)
        assert breakdown.groups[1].unit_indices == (1, 2, 4, 5, 6, 8, 9, 10)
        assert breakdown.total == Decimal("130.00")

    def test_total_equals_sum_of_unit_prices(self, office_config, noted_config):
        collection = set_override(new_collection(office_config, 13), 13, noted_config)
        breakdown = aggregate(collection, notes_price)
        expected = sum(to_cents(notes_price(effective_config(collection, i))) for i in range(1, 14))
        assert breakdown.total == expected
        assert sum(group.unit_count for group in breakdown.groups) == 13

    def test_prices_grouped_after_cent_rounding(self, office_config, noted_config):
        """12.499999999 and 12.5 both land on 12.50"""
        collection = set_override(new_collection(office_config, 10), 2, noted_config)
        breakdown = aggregate(collection, lambda config: 12.499999999 if config.notes else 12.5)
        assert len(breakdown.groups) == 1
        assert breakdown.groups[0].price == Decimal("12.50")

    def test_price_fn_called_once_per_unit(self, office_config):
        calls = []

        def counting_price(config):
            calls.append(config)
            return 10

        aggregate(new_collection(office_config, 12), counting_price)
        assert len(calls) == 12

    @pytest.mark.parametrize("bad_price", [float("nan"), float("inf"), -1, "12.50", None, True])
    def test_unusable_price_fails(self, office_config, bad_price):
        with pytest.raises(PriceComputationFailed) as exc_info:
            aggregate(new_collection(office_config, 10), lambda config: bad_price)
        assert exc_info.value.unit_index == 1

    def test_failure_reports_unit_index(self, office_config, noted_config):
        collection = set_override(new_collection(office_config, 10), 4, noted_config)
        with pytest.raises(PriceComputationFailed) as exc_info:
            aggregate(collection, lambda config: Decimal("-1") if config.notes else Decimal("12.50"))
        assert exc_info.value.unit_index == 4

    def test_price_too_large_for_cents_fails(self, office_config, noted_config):
        """1e30 cannot be quantized to cents at default precision"""
        collection = set_override(new_collection(office_config, 10), 6, noted_config)
        with pytest.raises(PriceComputationFailed) as exc_info:
            aggregate(collection, lambda config: Decimal("1e30") if config.notes else Decimal("12.50"))
        assert exc_info.value.unit_index == 6

    def test_failure_is_value_error(self, office_config):
        with pytest.raises(ValueError):
            aggregate(new_collection(office_config), lambda config: float("nan"))


class TestToCents:

    def test_half_up(self):
        assert to_cents(Decimal("1.005")) == Decimal("1.01")
        assert to_cents(2) == Decimal("2.00")


class TestCollectionTitle:

    def test_uniform(self, office_config):
        assert collection_title(new_collection(office_config), "Office Favorite") == "10 x Office Favorite"

    def test_with_customized(self, office_config, noted_config):
        collection = new_collection(office_config)
        collection = set_override(collection, 1, noted_config)
        collection = set_override(collection, 2, noted_config)
        assert collection_title(collection, "Office Favorite") == "8 x Office Favorite + 2 Customized"

    def test_without_template_name(self, office_config):
        assert collection_title(new_collection(office_config), None) == "10 Customized Individual Boxes"
