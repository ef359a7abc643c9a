"""Domain models for the boxed catering configurator."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar


class CategoryKind(str, Enum):
    """Protein classes a box's wings can be split across."""

    PLANT_BASED = "plant_based"
    BONELESS = "boneless"
    BONE_IN = "bone_in"


# Fixed iteration order; the last "other" category absorbs allocation remainders.
CATEGORY_ORDER: tuple[CategoryKind, ...] = (
    CategoryKind.PLANT_BASED,
    CategoryKind.BONELESS,
    CategoryKind.BONE_IN,
)


class PrepMethod(str, Enum):
    BAKED = "baked"
    FRIED = "fried"
    SPLIT = "split"


class Style(str, Enum):
    MIXED = "mixed"
    FLATS = "flats"
    DRUMS = "drums"


@dataclass(frozen=True)
class PlantBased:
    """Plant-based wings; only this category carries a preparation method."""

    kind: ClassVar[CategoryKind] = CategoryKind.PLANT_BASED
    prep_method: PrepMethod | None = None


@dataclass(frozen=True)
class Boneless:
    kind: ClassVar[CategoryKind] = CategoryKind.BONELESS


@dataclass(frozen=True)
class BoneIn:
    """Bone-in wings; only this category carries a flats/drums style."""

    kind: ClassVar[CategoryKind] = CategoryKind.BONE_IN
    style: Style | None = Style.MIXED


Category = PlantBased | Boneless | BoneIn

Distribution = dict[CategoryKind, int]


@dataclass(frozen=True)
class WingMix:
    """A per-category distribution together with its conditional sub-selections."""

    quantities: Distribution
    plant_based: PlantBased = field(default_factory=PlantBased)
    bone_in: BoneIn = field(default_factory=BoneIn)

    def quantity(self, kind: CategoryKind) -> int:
        return self.quantities.get(kind, 0)

    def total(self) -> int:
        return sum(self.quantities.values())

    def categories(self) -> list[Category]:
        """Return the category variants that currently hold wings."""
        variants: dict[CategoryKind, Category] = {
            CategoryKind.PLANT_BASED: self.plant_based,
            CategoryKind.BONELESS: Boneless(),
            CategoryKind.BONE_IN: self.bone_in,
        }
        return [variants[kind] for kind in CATEGORY_ORDER if self.quantity(kind) > 0]


@dataclass(frozen=True)
class SplitSlot:
    flavor_id: str | None
    count: int


@dataclass(frozen=True)
class SplitSelection:
    """One flavor choice divided across exactly two slots."""

    first: SplitSlot
    second: SplitSlot

    @property
    def slots(self) -> tuple[SplitSlot, SplitSlot]:
        return (self.first, self.second)

    def total(self) -> int:
        return self.first.count + self.second.count


@dataclass(frozen=True)
class UnitConfiguration:
    """Every choice for one boxed meal."""

    wing_count: int
    mix: WingMix
    sauce_id: str | None = None
    split: SplitSelection | None = None
    dips: tuple[str | None, str | None] = (None, None)
    side_id: str | None = None
    dessert_id: str | None = None
    notes: str = ""


@dataclass(frozen=True)
class UnitCollection:
    """A shared template plus sparse per-unit overrides (1-based unit indices)."""

    unit_count: int
    template: UnitConfiguration
    overrides: dict[int, UnitConfiguration] = field(default_factory=dict)


class MessageKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class ValidationMessage:
    kind: MessageKind
    summary: str
    detail: str | None = None
    dismissible: bool = True


@dataclass(frozen=True)
class PriceGroup:
    """Units sharing one computed price."""

    price: Decimal
    unit_count: int
    unit_indices: tuple[int, ...]

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.unit_count


@dataclass(frozen=True)
class PriceBreakdown:
    groups: tuple[PriceGroup, ...]
    total: Decimal


@dataclass(frozen=True)
class CatalogEntry:
    """A selectable sauce, dip, side or dessert."""

    entry_id: str
    name: str
    heat_level: int | None = None
    price: Decimal | None = None


@dataclass(frozen=True)
class BoxTemplate:
    """A named boxed meal that seeds the shared template configuration."""

    template_id: str
    name: str
    tagline: str
    config: UnitConfiguration
