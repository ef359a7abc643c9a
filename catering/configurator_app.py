"""Textual app for building, pricing and submitting a multi-box catering order."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from catering.config import DEFAULT_UNIT_COUNT
from catering.data import TEMPLATES
from catering.logger import get_logger
from catering.models import BoxTemplate, MessageKind, PriceBreakdown, UnitCollection
from catering.persistence import bootstrap_schema, save_order, update_order_status
from catering.price_list import BoxPricer
from catering.pricing import PriceComputationFailed, aggregate, collection_title
from catering.printer import check_printer_dependencies, print_ticket, ticket_lines
from catering.rendering import config_summary_lines, format_breakdown, format_messages, format_mix_label
from catering.unit_editor_modal import UnitEditorModal
from catering.units import (
    clear_all_overrides,
    clear_override,
    effective_config,
    is_overridden,
    new_collection,
    set_override,
    set_template,
    set_unit_count,
)
from catering.validation import validate_config

logger = get_logger(__name__)

HELP_TEXT = (
    "t/T template, +/- boxes, j/k move, Enter edit box, e edit template, "
    "r reset box, x reset all. Ctrl+S submit."
)


def first_invalid_unit(collection: UnitCollection) -> int | None:
    """Lowest box number whose configuration still has an error."""
    for unit_index in range(1, collection.unit_count + 1):
        messages = validate_config(effective_config(collection, unit_index))
        if any(message.kind == MessageKind.ERROR for message in messages):
            return unit_index
    return None


class CateringConfiguratorApp(App):
    """A Textual app for assembling multi-box catering orders."""

    TITLE = "Catering Configurator"
    SUB_TITLE = "Boxed Meals"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #units-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #summary-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
    }

    #units-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #template-info {
        border: tall $surface;
        padding: 0 1;
        margin-bottom: 1;
    }

    #pricing {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    unit_selected_index = reactive(1)

    BINDINGS = [
        ("up", "move_unit(-1)", "Previous box"),
        ("down", "move_unit(1)", "Next box"),
        ("enter", "edit_selected_unit", "Edit box"),
        # Not a priority binding: the box editor claims ctrl+s for its own save.
        ("ctrl+s", "submit_and_print", "Submit + Print"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.template_index = 0
        self.collection = new_collection(self.template.config, DEFAULT_UNIT_COUNT)
        self.system_status = ""

    @property
    def template(self) -> BoxTemplate:
        return TEMPLATES[self.template_index]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="units-pane"):
                yield Static("Boxes", classes="pane-title")
                yield Static(id="units-list")
            with Vertical(id="summary-pane"):
                yield Static(id="status-bar")
                yield Static(id="template-info")
                yield Static(id="pricing")

    def on_mount(self) -> None:
        bootstrap_schema()
        _, msg = check_printer_dependencies()
        self.system_status = msg
        logger.info("app mounted printer_status=%r", msg)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, UnitEditorModal):
            return
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character
        if key == "t":
            self._cycle_template(1)
        elif key == "T":
            self._cycle_template(-1)
        elif key in {"+", "="}:
            self._change_unit_count(1)
        elif key == "-":
            self._change_unit_count(-1)
        elif key == "j":
            self.action_move_unit(1)
        elif key == "k":
            self.action_move_unit(-1)
        elif key == "e":
            self._edit_template()
        elif key == "r":
            self._reset_selected_unit()
        elif key == "x":
            self._reset_all_units()
        else:
            return
        event.stop()

    def action_move_unit(self, delta: int) -> None:
        if isinstance(self.screen, UnitEditorModal):
            return
        count = self.collection.unit_count
        self.unit_selected_index = (self.unit_selected_index - 1 + delta) % count + 1
        self._refresh_units()

    def action_edit_selected_unit(self) -> None:
        if isinstance(self.screen, UnitEditorModal):
            return
        unit_index = self.unit_selected_index
        config = effective_config(self.collection, unit_index)

        def on_saved(result) -> None:
            if result is None:
                return
            self.collection = set_override(self.collection, unit_index, result)
            logger.info("override saved unit=%d", unit_index)
            self._refresh_all()

        self.push_screen(UnitEditorModal(config, f"Box #{unit_index}"), on_saved)

    def action_submit_and_print(self) -> None:
        if isinstance(self.screen, UnitEditorModal):
            return

        invalid = first_invalid_unit(self.collection)
        if invalid is not None:
            self.unit_selected_index = invalid
            self.system_status = f"Box #{invalid} is incomplete"
            self._refresh_all()
            return

        breakdown = self._breakdown()
        if breakdown is None:
            return

        saved = save_order(self.collection, breakdown, self.template.template_id)
        title = collection_title(self.collection, self.template.name)
        try:
            print_ticket(ticket_lines(self.collection, breakdown, title))
        except Exception as exc:
            update_order_status(saved.order_id, "PRINT_FAILED")
            self.system_status = f"Saved {saved.order_id[:8]} but print failed: {exc}"
            logger.warning("print failed order_id=%s error=%r", saved.order_id, exc)
            self._refresh_all()
            return

        update_order_status(saved.order_id, "PRINTED")
        self.collection = new_collection(self.template.config, DEFAULT_UNIT_COUNT)
        self.unit_selected_index = 1
        self.system_status = f"Saved + printed: {saved.order_id[:8]}"
        self._refresh_all()

    def _cycle_template(self, delta: int) -> None:
        self.template_index = (self.template_index + delta) % len(TEMPLATES)
        self.collection = set_template(self.collection, self.template.config)
        self.system_status = f"Template: {self.template.name}"
        self._refresh_all()

    def _edit_template(self) -> None:
        def on_saved(result) -> None:
            if result is None:
                return
            self.collection = set_template(self.collection, result)
            logger.info("template edited")
            self._refresh_all()

        self.push_screen(UnitEditorModal(self.collection.template, f"Template: {self.template.name}"), on_saved)

    def _change_unit_count(self, delta: int) -> None:
        self.collection = set_unit_count(self.collection, self.collection.unit_count + delta)
        self.unit_selected_index = min(self.unit_selected_index, self.collection.unit_count)
        self._refresh_all()

    def _reset_selected_unit(self) -> None:
        self.collection = clear_override(self.collection, self.unit_selected_index)
        self._refresh_all()

    def _reset_all_units(self) -> None:
        self.collection = clear_all_overrides(self.collection)
        self.system_status = "All boxes follow the template"
        self._refresh_all()

    def _breakdown(self) -> PriceBreakdown | None:
        pricer = BoxPricer(included_dessert_id=self.template.config.dessert_id)
        try:
            return aggregate(self.collection, pricer)
        except PriceComputationFailed as exc:
            self.system_status = str(exc)
            return None

    def _refresh_all(self) -> None:
        self._refresh_units()
        self._refresh_summary()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def unit_row_text(self, unit_index: int) -> Text:
        """One line of the box list: pointer, box number, mix badges, custom marker."""
        row = Text("➤ " if unit_index == self.unit_selected_index else "  ")
        row.append(f"#{unit_index:<3}")
        row.append_text(format_mix_label(effective_config(self.collection, unit_index).mix))
        if is_overridden(self.collection, unit_index):
            row.append(" [custom]", style="bold #ffd27f")
        return row

    def _refresh_units(self) -> None:
        try:
            units_widget = self.query_one("#units-list", Static)
        except NoMatches:
            return

        total = self.collection.unit_count
        visible_rows = self._visible_rows(units_widget)
        start, end = self._window_bounds(total, visible_rows, self.unit_selected_index - 1)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            unit_index = idx + 1
            if idx > start:
                lines.append("\n")
            lines.append_text(self.unit_row_text(unit_index))

        if end < total:
            lines.append("\n⋮", style="dim")

        units_widget.update(lines)

    def _refresh_summary(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
            template_widget = self.query_one("#template-info", Static)
            pricing_widget = self.query_one("#pricing", Static)
        except NoMatches:
            return

        status = self.system_status or "Ready"
        bar.update(f"{HELP_TEXT}\n{status}")

        info = Text()
        info.append(f"{self.template.name}", style="bold")
        info.append(f"  {self.template.tagline}\n", style="dim")
        info.append("\n".join(config_summary_lines(self.collection.template)))
        selected = effective_config(self.collection, self.unit_selected_index)
        info.append(f"\n\nBox #{self.unit_selected_index}\n", style="bold")
        info.append_text(format_messages(validate_config(selected)))
        template_widget.update(info)

        pricing = Text()
        pricing.append(collection_title(self.collection, self.template.name) + "\n", style="bold")
        breakdown = self._breakdown()
        if breakdown is not None:
            pricing.append_text(format_breakdown(breakdown))
        pricing_widget.update(pricing)
