"""Modal screen for editing one box configuration (the template or a single box)."""

from __future__ import annotations

from dataclasses import replace

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from catering.allocation import Preset, PRESETS, adjust_mix, apply_preset_to_mix, matching_preset
from catering.config import SPLIT_MIN_WING_COUNT, WING_COUNT_OPTIONS
from catering.data import MENU
from catering.models import CATEGORY_ORDER, BoneIn, CategoryKind, PlantBased, PrepMethod, Style, UnitConfiguration
from catering.rendering import badge_style, format_messages, format_mix_label, CATEGORY_BADGES
from catering.split import end_split, resize_split, set_first_slot, set_slot_flavor, start_split
from catering.validation import CATEGORY_LABELS, validate_config

_PREP_OPTIONS: list[PrepMethod | None] = [None, *PrepMethod]
_STYLE_OPTIONS: list[Style | None] = list(Style)


def _cycle(options: list, current: object, delta: int) -> object:
    if not options:
        return current
    if current not in options:
        return options[0]
    return options[(options.index(current) + delta) % len(options)]


def resize_wings(config: UnitConfiguration, wing_count: int) -> UnitConfiguration:
    """Change a box's wing count, keeping its preset (or dominant category) and split."""
    preset = matching_preset(config.mix.quantities, config.wing_count)
    if preset is not None:
        mix = apply_preset_to_mix(config.mix, preset, wing_count)
    else:
        dominant = max(CATEGORY_ORDER, key=config.mix.quantity)
        mix = adjust_mix(config.mix, dominant, wing_count, wing_count)

    sauce_id = config.sauce_id
    split = config.split
    if split is not None and wing_count < SPLIT_MIN_WING_COUNT:
        sauce_id = end_split(split)
        split = None
    elif split is not None:
        split = resize_split(split, wing_count)
    return replace(config, wing_count=wing_count, mix=mix, sauce_id=sauce_id, split=split)


def toggle_split(config: UnitConfiguration) -> UnitConfiguration:
    if config.split is not None:
        return replace(config, sauce_id=end_split(config.split), split=None)
    if config.wing_count < SPLIT_MIN_WING_COUNT:
        return config
    split = start_split(config.wing_count, config.sauce_id)
    if split is None:
        return config
    return replace(config, sauce_id=None, split=split)


class UnitEditorModal(ModalScreen[UnitConfiguration | None]):
    """Centered modal to edit every choice of one box configuration."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("h", "adjust(-1)", "Less"),
        ("l", "adjust(1)", "More"),
        ("left", "adjust(-1)", "Less"),
        ("right", "adjust(1)", "More"),
        ("enter", "activate", "Toggle"),
        ("ctrl+s", "save", "Save"),
    ]

    CSS = """
    UnitEditorModal {
        align: center middle;
        background: $background 60%;
    }

    #editor-dialog {
        width: 78;
        height: auto;
        max-height: 95%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #editor-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #editor-body {
        margin-bottom: 1;
        color: white;
    }

    #editor-messages {
        margin-bottom: 1;
    }

    #editor-help {
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, config: UnitConfiguration, title: str) -> None:
        super().__init__()
        self.config = config
        self.title_text = title
        self.typing_notes = False
        self.notes_input_value = ""

    def compose(self) -> ComposeResult:
        with Container(id="editor-dialog"):
            yield Static(self.title_text, id="editor-title")
            yield Static(id="editor-body")
            yield Static(id="editor-messages")
            yield Static(id="editor-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if not self.typing_notes:
            return

        if event.key == "escape":
            self.typing_notes = False
            self.notes_input_value = ""
        elif event.key == "enter":
            self.config = replace(self.config, notes=self.notes_input_value.strip())
            self.typing_notes = False
            self.notes_input_value = ""
        elif event.key == "backspace":
            self.notes_input_value = self.notes_input_value[:-1]
        elif event.is_printable and event.character:
            self.notes_input_value += event.character
        # Ignore all non-text keys while typing.
        event.stop()
        self._refresh_content()

    def _rows(self) -> list[str]:
        rows = ["wing_count", "preset", *[kind.value for kind in CATEGORY_ORDER]]
        if self.config.mix.quantity(CategoryKind.PLANT_BASED) > 0:
            rows.append("prep_method")
        if self.config.mix.quantity(CategoryKind.BONE_IN) > 0:
            rows.append("style")
        if self.config.wing_count >= SPLIT_MIN_WING_COUNT:
            rows.append("split_toggle")
        if self.config.split is not None:
            rows.extend(["split_count", "split_flavor_0", "split_flavor_1"])
        else:
            rows.append("sauce")
        rows.extend(["dip_0", "dip_1", "side", "dessert", "notes"])
        return rows

    def _current_row(self) -> str | None:
        rows = self._rows()
        if not rows:
            return None
        self.cursor_index = min(self.cursor_index, len(rows) - 1)
        return rows[self.cursor_index]

    def action_cancel(self) -> None:
        if self.typing_notes:
            return
        self.dismiss(None)

    def action_save(self) -> None:
        if self.typing_notes:
            return
        self.dismiss(self.config)

    def action_move_cursor(self, delta: int) -> None:
        if self.typing_notes:
            return
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_activate(self) -> None:
        if self.typing_notes:
            return
        row = self._current_row()
        if row == "notes":
            self.typing_notes = True
            self.notes_input_value = self.config.notes
        elif row == "split_toggle":
            self.config = toggle_split(self.config)
        else:
            self.action_adjust(1)
            return
        self._refresh_content()

    def action_adjust(self, delta: int) -> None:
        if self.typing_notes:
            return
        row = self._current_row()
        config = self.config
        sauce_ids = list(MENU.sauces)

        if row == "wing_count":
            config = resize_wings(config, _cycle(list(WING_COUNT_OPTIONS), config.wing_count, delta))
        elif row == "preset":
            current = matching_preset(config.mix.quantities, config.wing_count)
            preset = _cycle(list(Preset), current, delta)
            config = replace(config, mix=apply_preset_to_mix(config.mix, preset, config.wing_count))
        elif row in {kind.value for kind in CATEGORY_ORDER}:
            kind = CategoryKind(row)
            mix = adjust_mix(config.mix, kind, config.mix.quantity(kind) + delta, config.wing_count)
            config = replace(config, mix=mix)
        elif row == "prep_method":
            prep = _cycle(_PREP_OPTIONS, config.mix.plant_based.prep_method, delta)
            config = replace(config, mix=replace(config.mix, plant_based=PlantBased(prep_method=prep)))
        elif row == "style":
            style = _cycle(_STYLE_OPTIONS, config.mix.bone_in.style, delta)
            config = replace(config, mix=replace(config.mix, bone_in=BoneIn(style=style)))
        elif row == "split_toggle":
            config = toggle_split(config)
        elif row == "split_count" and config.split is not None:
            split = set_first_slot(config.split, config.split.first.count + delta, config.wing_count)
            config = replace(config, split=split)
        elif row in {"split_flavor_0", "split_flavor_1"} and config.split is not None:
            slot_index = int(row[-1])
            flavor = _cycle(sauce_ids, config.split.slots[slot_index].flavor_id, delta)
            config = replace(config, split=set_slot_flavor(config.split, slot_index, flavor))
        elif row == "sauce":
            config = replace(config, sauce_id=_cycle(sauce_ids, config.sauce_id, delta))
        elif row in {"dip_0", "dip_1"}:
            dips = list(config.dips)
            slot = int(row[-1])
            dips[slot] = _cycle(list(MENU.dips), dips[slot], delta)
            config = replace(config, dips=(dips[0], dips[1]))
        elif row == "side":
            config = replace(config, side_id=_cycle(list(MENU.sides), config.side_id, delta))
        elif row == "dessert":
            config = replace(config, dessert_id=_cycle(list(MENU.desserts), config.dessert_id, delta))

        self.config = config
        self._refresh_content()

    def _row_label(self, row: str) -> Text:
        config = self.config
        text = Text()
        if row == "wing_count":
            text.append(f"Wings per box: {config.wing_count}")
        elif row == "preset":
            preset = matching_preset(config.mix.quantities, config.wing_count)
            text.append("Preset: ")
            text.append(PRESETS[preset].name if preset else "Custom")
            text.append("  ")
            text.append_text(format_mix_label(config.mix))
        elif row in {kind.value for kind in CATEGORY_ORDER}:
            kind = CategoryKind(row)
            text.append(CATEGORY_BADGES[kind], style=badge_style(kind))
            text.append(f" {CATEGORY_LABELS[kind]}: {config.mix.quantity(kind)}")
        elif row == "prep_method":
            prep = config.mix.plant_based.prep_method
            text.append(f"  Prep method: {prep.value if prep else '(choose)'}")
        elif row == "style":
            style = config.mix.bone_in.style
            text.append(f"  Wing style: {style.value if style else '(choose)'}")
        elif row == "split_toggle":
            text.append(f"[{'x' if config.split is not None else ' '}] Split sauces")
        elif row == "split_count" and config.split is not None:
            text.append(f"  Split: {config.split.first.count} / {config.split.second.count}")
        elif row in {"split_flavor_0", "split_flavor_1"} and config.split is not None:
            slot = config.split.slots[int(row[-1])]
            name = MENU.name_for(slot.flavor_id) if slot.flavor_id else "(choose)"
            text.append(f"  Sauce {int(row[-1]) + 1} ({slot.count}): {name}")
        elif row == "sauce":
            text.append(f"Sauce: {MENU.name_for(config.sauce_id) if config.sauce_id else '(choose)'}")
        elif row in {"dip_0", "dip_1"}:
            dip_id = config.dips[int(row[-1])]
            text.append(f"Dip {int(row[-1]) + 1}: {MENU.name_for(dip_id) if dip_id else '(choose)'}")
        elif row == "side":
            text.append(f"Side: {MENU.name_for(config.side_id) if config.side_id else '(choose)'}")
        elif row == "dessert":
            text.append(f"Dessert: {MENU.name_for(config.dessert_id) if config.dessert_id else '(choose)'}")
        elif row == "notes":
            if self.typing_notes:
                text.append(f"Notes: {self.notes_input_value}|", style="bold")
            else:
                text.append(f"Notes: {config.notes or '-'}")
        return text

    def _refresh_content(self) -> None:
        body = self.query_one("#editor-body", Static)
        messages_widget = self.query_one("#editor-messages", Static)
        help_text = self.query_one("#editor-help", Static)

        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = max(0, len(rows) - 1)

        content = Text(style="white")
        for idx, row in enumerate(rows):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            content.append(pointer)
            content.append_text(self._row_label(row))
        body.update(content)
        messages_widget.update(format_messages(validate_config(self.config)))

        if self.typing_notes:
            help_text.update("Type notes, Enter confirm, Esc cancel typing")
        else:
            help_text.update("J/K/↑/↓ move, H/L/←/→ change, Enter toggle, Ctrl+S save, Esc cancel")
