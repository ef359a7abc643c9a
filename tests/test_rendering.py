"""
Rendering helper tests
"""

from dataclasses import replace
from decimal import Decimal

from catering.models import BoneIn, CategoryKind, MessageKind, PriceBreakdown, PriceGroup, Style, ValidationMessage, WingMix
from catering.rendering import config_summary_lines, format_breakdown, format_messages, format_mix_label, format_money, mix_summary


class TestMoney:

    def test_thousands(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"


class TestMixText:

    def test_mix_summary(self):
        mix = WingMix(
            quantities={CategoryKind.PLANT_BASED: 0, CategoryKind.BONELESS: 3, CategoryKind.BONE_IN: 3},
            bone_in=BoneIn(Style.FLATS),
        )
        assert mix_summary(mix) == "3 boneless, 3 bone-in all flats"

    def test_mix_label_badges(self, veggie_config):
        assert format_mix_label(veggie_config.mix).plain == "PB 6 (fried)"

    def test_empty_mix(self):
        assert format_mix_label(WingMix(quantities={})).plain == "(no wings)"


class TestConfigSummary:

    def test_office_lines(self, office_config):
        assert config_summary_lines(office_config) == [
            "6 wings: 6 boneless",
            "Sauce: Sweet BBQ",
            "Dips: Ranch + Honey Mustard",
            "Side: Miss Vickie's Chips",
            "Dessert: Classic New York Cheesecake",
        ]

    def test_notes_line(self, office_config):
        lines = config_summary_lines(replace(office_config, notes=" no celery "))
        assert lines[-1] == "Notes: no celery"


class TestBreakdownText:

    def test_small_groups_list_box_numbers(self):
        breakdown = PriceBreakdown(
            groups=(
                PriceGroup(price=Decimal("15.00"), unit_count=2, unit_indices=(3, 7)),
                PriceGroup(price=Decimal("12.50"), unit_count=8, unit_indices=(1, 2, 4, 5, 6, 8, 9, 10)),
            ),
            total=Decimal("130.00"),
        )
        plain = format_breakdown(breakdown).plain.splitlines()
        assert plain[0] == "2 boxes @ $15.00  #3, #7  $30.00"
        assert plain[1] == "8 boxes @ $12.50  $100.00"
        assert plain[2] == "Total: $130.00"

    def test_messages(self):
        text = format_messages([ValidationMessage(MessageKind.ERROR, "Total wings must equal 6", "You need 2 more wings")])
        assert text.plain == "x Total wings must equal 6\n    You need 2 more wings"
