"""Validation messages for a wing distribution and its conditional selections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from catering.config import HEADROOM_WARNING_LIMIT
from catering.models import (
    CATEGORY_ORDER,
    CategoryKind,
    Distribution,
    MessageKind,
    PrepMethod,
    Style,
    UnitConfiguration,
    ValidationMessage,
    WingMix,
)
from catering.split import is_complete as split_is_complete

CATEGORY_LABELS: dict[CategoryKind, str] = {
    CategoryKind.PLANT_BASED: "plant-based",
    CategoryKind.BONELESS: "boneless",
    CategoryKind.BONE_IN: "bone-in",
}


def _plural(count: int) -> str:
    return "wing" if count == 1 else "wings"


def total_mismatch(current: int, required: int) -> ValidationMessage:
    diff = required - current
    if diff > 0:
        detail = f"You need {diff} more {_plural(diff)}"
    else:
        detail = f"You have {-diff} too many {_plural(-diff)}"
    return ValidationMessage(
        kind=MessageKind.ERROR,
        summary=f"Total wings must equal {required}",
        detail=detail,
        dismissible=False,
    )


def prep_method_required() -> ValidationMessage:
    return ValidationMessage(
        kind=MessageKind.ERROR,
        summary="Please select a preparation method for plant-based wings",
        dismissible=False,
    )


def style_required() -> ValidationMessage:
    return ValidationMessage(
        kind=MessageKind.ERROR,
        summary="Please select a wing style for bone-in wings",
        dismissible=False,
    )


def approaching_max(kind: CategoryKind, current: int, maximum: int) -> ValidationMessage | None:
    """Advisory warning when a category is close to its maximum."""
    headroom = maximum - current
    if not (0 < headroom <= HEADROOM_WARNING_LIMIT):
        return None
    return ValidationMessage(
        kind=MessageKind.WARNING,
        summary=f"Only {headroom} more {CATEGORY_LABELS[kind]} {_plural(headroom)} available",
        dismissible=True,
    )


def valid_selection() -> ValidationMessage:
    return ValidationMessage(kind=MessageKind.SUCCESS, summary="Wing selection complete!", dismissible=True)


def validate(
    distribution: Distribution,
    required_total: int,
    prep_method: PrepMethod | None,
    style: Style | None,
    maximums: Mapping[CategoryKind, int] | None = None,
) -> list[ValidationMessage]:
    """
    Derive the current messages for a distribution.

    Every rule that fires is reported; the success message is appended only
    when no error was produced. Headroom warnings are advisory and only
    evaluated when per-category maximums are supplied.
    """
    messages: list[ValidationMessage] = []

    current = sum(distribution.get(kind, 0) for kind in CATEGORY_ORDER)
    if current != required_total:
        messages.append(total_mismatch(current, required_total))

    if distribution.get(CategoryKind.PLANT_BASED, 0) > 0 and prep_method is None:
        messages.append(prep_method_required())

    if distribution.get(CategoryKind.BONE_IN, 0) > 0 and style is None:
        messages.append(style_required())

    if maximums:
        for kind in CATEGORY_ORDER:
            if kind not in maximums:
                continue
            warning = approaching_max(kind, distribution.get(kind, 0), maximums[kind])
            if warning is not None:
                messages.append(warning)

    if is_valid(messages):
        messages.append(valid_selection())
    return messages


def validate_mix(
    mix: WingMix,
    required_total: int,
    maximums: Mapping[CategoryKind, int] | None = None,
) -> list[ValidationMessage]:
    return validate(mix.quantities, required_total, mix.plant_based.prep_method, mix.bone_in.style, maximums)


def is_valid(messages: Iterable[ValidationMessage]) -> bool:
    """A message list is valid when it holds no error."""
    return all(message.kind != MessageKind.ERROR for message in messages)


def _missing(summary: str) -> ValidationMessage:
    return ValidationMessage(kind=MessageKind.ERROR, summary=summary, dismissible=False)


def validate_config(config: UnitConfiguration) -> list[ValidationMessage]:
    """Messages for a whole box: its wing mix plus sauce, dips and side."""
    messages = [
        message
        for message in validate_mix(config.mix, config.wing_count)
        if message.kind != MessageKind.SUCCESS
    ]
    if config.split is not None:
        if not split_is_complete(config.split, config.wing_count):
            messages.append(_missing("Please choose both sauces for the split"))
    elif config.sauce_id is None:
        messages.append(_missing("Please select a sauce"))
    if not all(config.dips):
        messages.append(_missing("Please choose two dips"))
    if config.side_id is None:
        messages.append(_missing("Please select a side"))

    if is_valid(messages):
        messages.append(ValidationMessage(kind=MessageKind.SUCCESS, summary="Box complete!", dismissible=True))
    return messages
