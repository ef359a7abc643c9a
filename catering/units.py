"""Shared template plus per-unit overrides for a multi-box order."""

from __future__ import annotations

from dataclasses import replace

from catering.config import MIN_UNIT_COUNT
from catering.logger import get_logger
from catering.models import UnitCollection, UnitConfiguration

logger = get_logger(__name__)


def _in_range(collection: UnitCollection, unit_index: int) -> bool:
    return 1 <= unit_index <= collection.unit_count


def new_collection(template: UnitConfiguration, unit_count: int = MIN_UNIT_COUNT) -> UnitCollection:
    return UnitCollection(unit_count=max(MIN_UNIT_COUNT, unit_count), template=template, overrides={})


def set_template(collection: UnitCollection, template: UnitConfiguration) -> UnitCollection:
    """Replace the template; overridden units keep their own configuration."""
    return replace(collection, template=template)


def set_override(collection: UnitCollection, unit_index: int, config: UnitConfiguration) -> UnitCollection:
    """Insert or replace one unit's override. Out-of-range indices are ignored."""
    if not _in_range(collection, unit_index):
        logger.debug("set_override ignored index=%d unit_count=%d", unit_index, collection.unit_count)
        return collection
    overrides = dict(collection.overrides)
    overrides[unit_index] = config
    return replace(collection, overrides=overrides)


def clear_override(collection: UnitCollection, unit_index: int) -> UnitCollection:
    """Revert one unit to the template."""
    if unit_index not in collection.overrides:
        return collection
    overrides = {index: config for index, config in collection.overrides.items() if index != unit_index}
    return replace(collection, overrides=overrides)


def clear_all_overrides(collection: UnitCollection) -> UnitCollection:
    if not collection.overrides:
        return collection
    return replace(collection, overrides={})


def set_unit_count(collection: UnitCollection, unit_count: int) -> UnitCollection:
    """Change the number of units; overrides past the new count are dropped."""
    unit_count = max(MIN_UNIT_COUNT, unit_count)
    overrides = {index: config for index, config in collection.overrides.items() if index <= unit_count}
    dropped = len(collection.overrides) - len(overrides)
    if dropped:
        logger.info("set_unit_count=%d dropped %d override(s)", unit_count, dropped)
    return replace(collection, unit_count=unit_count, overrides=overrides)


def effective_config(collection: UnitCollection, unit_index: int) -> UnitConfiguration:
    """The unit's override when one exists, otherwise the shared template."""
    override = collection.overrides.get(unit_index)
    if override is not None:
        return override
    return collection.template


def is_overridden(collection: UnitCollection, unit_index: int) -> bool:
    return unit_index in collection.overrides


def overridden_indices(collection: UnitCollection) -> list[int]:
    return sorted(collection.overrides)


def distinct_config_count(collection: UnitCollection) -> int:
    """Number of distinct effective configurations across all units."""
    distinct: list[UnitConfiguration] = []
    for unit_index in range(1, collection.unit_count + 1):
        config = effective_config(collection, unit_index)
        if config not in distinct:
            distinct.append(config)
    return len(distinct)
