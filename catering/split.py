"""Two-slot sauce split with an auto-balanced second slot."""

from __future__ import annotations

from dataclasses import replace

from catering.models import SplitSelection, SplitSlot

MIN_SPLIT_TOTAL = 2


def split_offered(slot_total: int) -> bool:
    """A split needs at least one wing in each slot."""
    return slot_total >= MIN_SPLIT_TOTAL


def _balanced(split: SplitSelection, first_count: int, slot_total: int) -> SplitSelection:
    first_count = max(1, min(slot_total - 1, first_count))
    return SplitSelection(
        first=replace(split.first, count=first_count),
        second=replace(split.second, count=slot_total - first_count),
    )


def start_split(slot_total: int, flavor_id: str | None = None) -> SplitSelection | None:
    """Open a split with the current single flavor in the first (larger) slot."""
    if not split_offered(slot_total):
        return None
    return SplitSelection(
        first=SplitSlot(flavor_id=flavor_id, count=slot_total - slot_total // 2),
        second=SplitSlot(flavor_id=None, count=slot_total // 2),
    )


def set_first_slot(split: SplitSelection, new_count: int, slot_total: int) -> SplitSelection:
    """Set the first slot's count; the second slot always takes the rest."""
    if not split_offered(slot_total):
        return split
    return _balanced(split, new_count, slot_total)


def set_slot_flavor(split: SplitSelection, slot_index: int, flavor_id: str | None) -> SplitSelection:
    if slot_index == 0:
        return replace(split, first=replace(split.first, flavor_id=flavor_id))
    if slot_index == 1:
        return replace(split, second=replace(split.second, flavor_id=flavor_id))
    return split


def resize_split(split: SplitSelection, slot_total: int) -> SplitSelection | None:
    """Re-clamp a split after the wing count changed, or drop it when no longer offered."""
    if not split_offered(slot_total):
        return None
    return _balanced(split, split.first.count, slot_total)


def end_split(split: SplitSelection) -> str | None:
    """Fall back to a single flavor: the first slot's."""
    return split.first.flavor_id


def is_complete(split: SplitSelection, slot_total: int | None = None) -> bool:
    """Both slots need a flavor; counts must still add up when a total is given."""
    if not split.first.flavor_id or not split.second.flavor_id:
        return False
    if slot_total is not None and split.total() != slot_total:
        return False
    return True
