"""
Operator app tests driven through Textual's pilot

- box editor saves into the override store
- template edits reach only non-overridden boxes
- r / x reset, ctrl+s submit from the main screen
"""

import pytest

from catering import configurator_app
from catering.configurator_app import HELP_TEXT, CateringConfiguratorApp
from catering.persistence import load_order
from catering.unit_editor_modal import UnitEditorModal
from catering.units import effective_config, is_overridden


@pytest.fixture
def app(temp_db):
    return CateringConfiguratorApp()


async def edit_selected_box(pilot, *keys):
    await pilot.press("enter")
    await pilot.press(*keys, "ctrl+s")
    await pilot.pause()


# ================================================================
# Box and template editing
# ================================================================


class TestEditing:

    @pytest.mark.asyncio
    async def test_saved_box_becomes_override(self, app):
        async with app.run_test() as pilot:
            await pilot.press("enter")
            assert isinstance(app.screen, UnitEditorModal)

            await pilot.press("l", "ctrl+s")
            await pilot.pause()

            assert not isinstance(app.screen, UnitEditorModal)
            assert is_overridden(app.collection, 1)
            assert effective_config(app.collection, 1).wing_count == 10
            assert "[custom]" in app.unit_row_text(1).plain
            assert "[custom]" not in app.unit_row_text(2).plain

    @pytest.mark.asyncio
    async def test_escape_discards_edit(self, app):
        async with app.run_test() as pilot:
            await pilot.press("enter", "l", "escape")
            await pilot.pause()

            assert not isinstance(app.screen, UnitEditorModal)
            assert app.collection.overrides == {}

    @pytest.mark.asyncio
    async def test_template_edit_skips_overridden_boxes(self, app):
        async with app.run_test() as pilot:
            await edit_selected_box(pilot, "l", "l")
            assert effective_config(app.collection, 1).wing_count == 12

            await pilot.press("e", "l", "ctrl+s")
            await pilot.pause()

            assert app.collection.template.wing_count == 10
            assert effective_config(app.collection, 5).wing_count == 10
            assert effective_config(app.collection, 1).wing_count == 12


# ================================================================
# Resets and submit
# ================================================================


class TestResetAndSubmit:

    @pytest.mark.asyncio
    async def test_reset_selected_then_all(self, app):
        async with app.run_test() as pilot:
            await edit_selected_box(pilot, "l")
            await pilot.press("j")
            await edit_selected_box(pilot, "l")
            assert sorted(app.collection.overrides) == [1, 2]

            await pilot.press("r")
            assert sorted(app.collection.overrides) == [1]

            await pilot.press("x")
            assert app.collection.overrides == {}

    @pytest.mark.asyncio
    async def test_submit_saves_and_records_print_failure(self, app, monkeypatch):
        saved_orders = []
        real_save = configurator_app.save_order

        def recording_save(*args):
            saved = real_save(*args)
            saved_orders.append(saved)
            return saved

        def failing_print(lines):
            raise RuntimeError("printer offline")

        monkeypatch.setattr(configurator_app, "save_order", recording_save)
        monkeypatch.setattr(configurator_app, "print_ticket", failing_print)
        async with app.run_test() as pilot:
            await pilot.press("ctrl+s")
            await pilot.pause()

            assert app.system_status.startswith("Saved ")
            assert "printer offline" in app.system_status

        assert len(saved_orders) == 1
        assert load_order(saved_orders[0].order_id).status == "PRINT_FAILED"


class TestHelpText:

    def test_lists_handled_keys(self):
        for hint in ("t/T template", "+/- boxes", "Enter edit box", "e edit template", "r reset box", "x reset all", "Ctrl+S"):
            assert hint in HELP_TEXT
