"""Fixed-sum quantity allocation across wing categories, and named presets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction
from math import floor

from catering.logger import get_logger
from catering.models import (
    CATEGORY_ORDER,
    BoneIn,
    CategoryKind,
    Distribution,
    PlantBased,
    Style,
    WingMix,
)

logger = get_logger(__name__)

_HALF = Fraction(1, 2)


def _round_half_up(value: Fraction) -> int:
    return floor(value + _HALF)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def default_distribution(required_total: int, kind: CategoryKind = CategoryKind.BONELESS) -> Distribution:
    """Opening distribution: the entire total in one category."""
    distribution = {category: 0 for category in CATEGORY_ORDER}
    distribution[kind] = max(0, required_total)
    return distribution


def set_quantity(
    distribution: Distribution,
    changed: CategoryKind,
    new_quantity: int,
    required_total: int,
) -> Distribution:
    """
    Set one category and rebalance the others so the sum stays at required_total.

    Other categories keep their pre-edit proportions (round-half-up), and the
    last other category in CATEGORY_ORDER takes the exact remainder. When every
    other category was zero, the remaining wings are split evenly by floor
    division with the modulus going to the last one.
    """
    required_total = max(0, required_total)
    new_quantity = _clamp(new_quantity, 0, required_total)
    remaining = required_total - new_quantity
    others = [kind for kind in CATEGORY_ORDER if kind != changed]

    result: Distribution = {kind: 0 for kind in CATEGORY_ORDER}
    result[changed] = new_quantity
    if remaining == 0:
        return result

    prior_other_total = sum(max(0, distribution.get(kind, 0)) for kind in others)
    allocated = 0
    if prior_other_total > 0:
        for kind in others[:-1]:
            prior = max(0, distribution.get(kind, 0))
            amount = _round_half_up(Fraction(prior * remaining, prior_other_total))
            result[kind] = amount
            allocated += amount
    else:
        per_category = remaining // len(others)
        for kind in others[:-1]:
            result[kind] = per_category
            allocated += per_category
    result[others[-1]] = remaining - allocated

    logger.debug(
        "set_quantity changed=%s qty=%d total=%d -> %s",
        changed.value,
        new_quantity,
        required_total,
        {kind.value: qty for kind, qty in result.items()},
    )
    return result


def _clear_zeroed_selections(mix: WingMix) -> WingMix:
    if mix.quantity(CategoryKind.PLANT_BASED) == 0 and mix.plant_based.prep_method is not None:
        mix = replace(mix, plant_based=PlantBased())
    if mix.quantity(CategoryKind.BONE_IN) == 0 and mix.bone_in.style != Style.MIXED:
        mix = replace(mix, bone_in=BoneIn())
    return mix


def adjust_mix(mix: WingMix, changed: CategoryKind, new_quantity: int, required_total: int) -> WingMix:
    """Apply set_quantity to a mix and clear sub-selections of categories that hit zero."""
    quantities = set_quantity(mix.quantities, changed, new_quantity, required_total)
    return _clear_zeroed_selections(replace(mix, quantities=quantities))


class Preset(str, Enum):
    BALANCED_MIX = "balanced_mix"
    ALL_BONELESS = "all_boneless"
    TRADITIONAL = "traditional"
    ALL_PLANT_BASED = "all_plant_based"


@dataclass(frozen=True)
class PresetDefinition:
    """Target fractions per category plus the category that absorbs flooring."""

    name: str
    description: str
    fractions: dict[CategoryKind, Fraction]
    remainder_category: CategoryKind


PRESETS: dict[Preset, PresetDefinition] = {
    Preset.BALANCED_MIX: PresetDefinition(
        name="Balanced Mix",
        description="75% boneless, 25% bone-in",
        fractions={CategoryKind.BONELESS: Fraction(3, 4), CategoryKind.BONE_IN: Fraction(1, 4)},
        remainder_category=CategoryKind.BONE_IN,
    ),
    Preset.ALL_BONELESS: PresetDefinition(
        name="All Boneless",
        description="Easy to eat, crowd favorite",
        fractions={CategoryKind.BONELESS: Fraction(1)},
        remainder_category=CategoryKind.BONELESS,
    ),
    Preset.TRADITIONAL: PresetDefinition(
        name="Traditional",
        description="Classic 50/50 split",
        fractions={CategoryKind.BONELESS: Fraction(1, 2), CategoryKind.BONE_IN: Fraction(1, 2)},
        remainder_category=CategoryKind.BONE_IN,
    ),
    Preset.ALL_PLANT_BASED: PresetDefinition(
        name="Plant-Based",
        description="100% plant-based wings",
        fractions={CategoryKind.PLANT_BASED: Fraction(1)},
        remainder_category=CategoryKind.PLANT_BASED,
    ),
}


def apply_preset(preset: Preset, required_total: int) -> Distribution:
    """Resolve a preset into a distribution that sums exactly to required_total."""
    definition = PRESETS[preset]
    required_total = max(0, required_total)
    distribution: Distribution = {kind: 0 for kind in CATEGORY_ORDER}
    for kind, fraction in definition.fractions.items():
        if kind == definition.remainder_category:
            continue
        distribution[kind] = floor(fraction * required_total)
    assigned = sum(distribution.values())
    distribution[definition.remainder_category] = required_total - assigned
    return distribution


def apply_preset_to_mix(mix: WingMix, preset: Preset, required_total: int) -> WingMix:
    """Replace a mix's quantities with a preset, clearing sub-selections that no longer apply."""
    quantities = apply_preset(preset, required_total)
    logger.debug("apply_preset preset=%s total=%d", preset.value, required_total)
    return _clear_zeroed_selections(replace(mix, quantities=quantities))


def matching_preset(distribution: Distribution, required_total: int) -> Preset | None:
    """Return the preset this distribution currently equals, if any."""
    for preset in Preset:
        resolved = apply_preset(preset, required_total)
        if all(distribution.get(kind, 0) == resolved[kind] for kind in CATEGORY_ORDER):
            return preset
    return None
