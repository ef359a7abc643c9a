"""
Quantity allocation and preset tests

- set_quantity(): proportional rebalance with remainder correction
- apply_preset(): exact sums for any total
- adjust_mix() / apply_preset_to_mix(): sub-selection reset rules
"""

import pytest

from catering.allocation import (
    PRESETS,
    Preset,
    adjust_mix,
    apply_preset,
    apply_preset_to_mix,
    default_distribution,
    matching_preset,
    set_quantity,
)
from catering.models import BoneIn, CategoryKind, PlantBased, PrepMethod, Style, WingMix

PB = CategoryKind.PLANT_BASED
BL = CategoryKind.BONELESS
BI = CategoryKind.BONE_IN


def dist(plant_based, boneless, bone_in):
    return {PB: plant_based, BL: boneless, BI: bone_in}


# ================================================================
# set_quantity() tests
# ================================================================


class TestSetQuantity:

    def test_worked_example_boneless_absorbs_remaining(self):
        """24 boneless, bone-in set to 6 -> boneless keeps the other 18"""
        result = set_quantity(dist(0, 24, 0), BI, 6, 24)
        assert result == dist(0, 18, 6)

    def test_all_others_zero_even_split(self):
        result = set_quantity(dist(0, 10, 0), BL, 0, 10)
        assert result == dist(5, 0, 5)

    def test_all_others_zero_odd_total_remainder_to_last(self):
        result = set_quantity(dist(0, 11, 0), BL, 0, 11)
        assert result == dist(5, 0, 6)

    def test_remaining_zero_zeroes_others(self):
        result = set_quantity(dist(3, 3, 4), PB, 10, 10)
        assert result == dist(10, 0, 0)

    def test_proportional_split(self):
        result = set_quantity(dist(3, 3, 4), BI, 0, 10)
        assert result == dist(5, 5, 0)

    def test_round_half_up_on_ties(self):
        """1:1 prior split of 5 -> first gets round(2.5) = 3, last gets 2"""
        result = set_quantity(dist(1, 0, 1), BL, 5, 10)
        assert result == dist(3, 5, 2)

    def test_last_other_absorbs_rounding_error(self):
        """Prior 1:2 of 7 -> round(2.33)=2 first, last takes 5"""
        result = set_quantity(dist(1, 0, 2), BL, 3, 10)
        assert result == dist(2, 3, 5)

    def test_quantity_above_total_is_clamped(self):
        result = set_quantity(dist(0, 24, 0), BI, 30, 24)
        assert result == dist(0, 0, 24)

    def test_negative_quantity_is_clamped(self):
        result = set_quantity(dist(0, 18, 6), BI, -5, 24)
        assert result == dist(0, 24, 0)

    def test_input_is_not_mutated(self):
        original = dist(0, 24, 0)
        set_quantity(original, BI, 6, 24)
        assert original == dist(0, 24, 0)

    def test_idempotent_when_reapplied(self):
        once = set_quantity(dist(2, 7, 4), BL, 5, 13)
        twice = set_quantity(once, BL, 5, 13)
        assert once == twice

    @pytest.mark.parametrize("total", [1, 2, 7, 13, 24, 50, 97])
    def test_sum_invariant_over_edit_sequence(self, total):
        distribution = default_distribution(total)
        edits = [(BI, total // 3), (PB, total // 2), (BL, 1), (BI, total), (PB, 0), (BL, total - 1), (BI, 2)]
        for kind, quantity in edits * 3:
            distribution = set_quantity(distribution, kind, quantity, total)
            assert sum(distribution.values()) == total
            assert all(qty >= 0 for qty in distribution.values())


class TestDefaultDistribution:

    def test_entire_total_in_boneless(self):
        assert default_distribution(24) == dist(0, 24, 0)

    def test_other_category(self):
        assert default_distribution(6, PB) == dist(6, 0, 0)


# ================================================================
# apply_preset() tests
# ================================================================


class TestApplyPreset:

    def test_balanced_mix_13(self):
        assert apply_preset(Preset.BALANCED_MIX, 13) == dist(0, 9, 4)

    def test_traditional_13_remainder_to_bone_in(self):
        assert apply_preset(Preset.TRADITIONAL, 13) == dist(0, 6, 7)

    def test_balanced_mix_50(self):
        assert apply_preset(Preset.BALANCED_MIX, 50) == dist(0, 37, 13)

    def test_all_plant_based(self):
        assert apply_preset(Preset.ALL_PLANT_BASED, 24) == dist(24, 0, 0)

    @pytest.mark.parametrize("total", [13, 24, 50])
    @pytest.mark.parametrize("preset", list(Preset))
    def test_every_preset_sums_exactly(self, preset, total):
        distribution = apply_preset(preset, total)
        assert sum(distribution.values()) == total
        assert all(qty >= 0 for qty in distribution.values())

    def test_preset_fractions_sum_to_one(self):
        for definition in PRESETS.values():
            assert sum(definition.fractions.values()) == 1


class TestMatchingPreset:

    def test_matches_balanced(self):
        assert matching_preset(dist(0, 9, 4), 13) == Preset.BALANCED_MIX

    def test_matches_all_boneless(self):
        assert matching_preset(dist(0, 13, 0), 13) == Preset.ALL_BONELESS

    def test_custom_distribution(self):
        assert matching_preset(dist(1, 8, 4), 13) is None


# ================================================================
# Mix-level rules
# ================================================================


class TestMixRules:

    def test_plant_based_to_zero_clears_prep_method(self):
        mix = WingMix(quantities=dist(6, 6, 0), plant_based=PlantBased(PrepMethod.BAKED))
        result = adjust_mix(mix, PB, 0, 12)
        assert result.quantities == dist(0, 12, 0)
        assert result.plant_based.prep_method is None

    def test_bone_in_to_zero_resets_style(self):
        mix = WingMix(quantities=dist(0, 6, 6), bone_in=BoneIn(Style.DRUMS))
        result = adjust_mix(mix, BI, 0, 12)
        assert result.bone_in.style == Style.MIXED

    def test_nonzero_keeps_selections(self):
        mix = WingMix(quantities=dist(6, 6, 0), plant_based=PlantBased(PrepMethod.FRIED))
        result = adjust_mix(mix, PB, 4, 12)
        assert result.plant_based.prep_method == PrepMethod.FRIED
        assert result.quantities == dist(4, 8, 0)

    def test_preset_clears_zeroed_selections(self):
        mix = WingMix(
            quantities=dist(4, 4, 4),
            plant_based=PlantBased(PrepMethod.SPLIT),
            bone_in=BoneIn(Style.FLATS),
        )
        result = apply_preset_to_mix(mix, Preset.ALL_BONELESS, 12)
        assert result.quantities == dist(0, 12, 0)
        assert result.plant_based.prep_method is None
        assert result.bone_in.style == Style.MIXED

    def test_preset_keeps_style_when_bone_in_remains(self):
        mix = WingMix(quantities=dist(0, 12, 0), bone_in=BoneIn(Style.FLATS))
        result = apply_preset_to_mix(mix, Preset.TRADITIONAL, 12)
        assert result.bone_in.style == Style.FLATS
