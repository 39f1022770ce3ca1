from __future__ import annotations

import pytest
from PySide6.QtCore import Qt

from commandbar.config import PaletteConfig
from commandbar.data import Catalog
from commandbar.services import PaletteController
from commandbar.ui import CommandPalette

from tests.factories import make_item


def _make_palette(qtbot, controller: PaletteController) -> CommandPalette:
    palette = CommandPalette(controller)
    qtbot.addWidget(palette)
    return palette


@pytest.mark.usefixtures("qt_app")
def test_open_palette_shows_dialog_with_placeholder(qtbot, writing_catalog: Catalog) -> None:
    controller = PaletteController(
        writing_catalog, PaletteConfig(placeholder_text="Search commands…")
    )
    palette = _make_palette(qtbot, controller)

    palette.open_palette()

    qtbot.waitUntil(palette.isVisible)
    assert palette.search_input.placeholderText() == "Search commands…"
    assert palette.list_widget.count() == 0


@pytest.mark.usefixtures("qt_app")
def test_typing_filters_and_arrows_move_selection(
    qtbot, controller: PaletteController
) -> None:
    palette = _make_palette(qtbot, controller)
    palette.open_palette()

    qtbot.keyClicks(palette.search_input, "fix")
    assert palette.list_widget.count() == 2
    assert palette.list_widget.currentRow() == 0

    qtbot.keyClick(palette.search_input, Qt.Key.Key_Down)
    assert palette.list_widget.currentRow() == 1
    assert controller.selected is not None
    assert controller.selected.title == "Fix Spelling"

    qtbot.keyClick(palette.search_input, Qt.Key.Key_Down)
    assert palette.list_widget.currentRow() == 0

    qtbot.keyClick(palette.search_input, Qt.Key.Key_Up)
    assert palette.list_widget.currentRow() == 1


@pytest.mark.usefixtures("qt_app")
def test_enter_runs_selected_item_and_hides(qtbot, controller: PaletteController) -> None:
    palette = _make_palette(qtbot, controller)
    palette.open_palette()
    qtbot.waitUntil(palette.isVisible)

    qtbot.keyClicks(palette.search_input, "emph")
    target = controller.selected
    qtbot.keyClick(palette.search_input, Qt.Key.Key_Return)

    assert target is not None
    assert target.action.calls == 1  # type: ignore[attr-defined]
    qtbot.waitUntil(lambda: not palette.isVisible())


@pytest.mark.usefixtures("qt_app")
def test_escape_clears_query_then_closes(qtbot, controller: PaletteController) -> None:
    palette = _make_palette(qtbot, controller)
    palette.open_palette()
    qtbot.waitUntil(palette.isVisible)

    qtbot.keyClicks(palette.search_input, "fix")
    qtbot.keyClick(palette.search_input, Qt.Key.Key_Escape)

    assert palette.search_input.text() == ""
    assert palette.isVisible()

    qtbot.keyClick(palette.search_input, Qt.Key.Key_Escape)
    qtbot.waitUntil(lambda: not palette.isVisible())
    assert controller.is_active is False


@pytest.mark.usefixtures("qt_app")
def test_hover_and_click_drive_controller(qtbot, controller: PaletteController) -> None:
    palette = _make_palette(qtbot, controller)
    palette.open_palette()
    qtbot.keyClicks(palette.search_input, "fix")

    second = palette.list_widget.item(1)
    palette.list_widget.itemEntered.emit(second)
    assert controller.state.selected_index == 1

    palette.list_widget.itemClicked.emit(second)
    assert controller.visible_items[1].action.calls == 1  # type: ignore[attr-defined]
    assert controller.is_active is False


@pytest.mark.usefixtures("qt_app")
def test_failing_action_is_logged_not_raised(qtbot) -> None:
    def fail() -> None:
        raise RuntimeError("command failed")

    controller = PaletteController(Catalog([make_item("Broken", action=fail)]))
    palette = _make_palette(qtbot, controller)
    palette.open_palette()

    qtbot.keyClicks(palette.search_input, "bro")
    qtbot.keyClick(palette.search_input, Qt.Key.Key_Return)

    assert controller.is_active is False


@pytest.mark.usefixtures("qt_app")
def test_list_height_follows_max_items_hint(qtbot) -> None:
    catalog = Catalog([make_item(f"Item {index}") for index in range(10)])
    controller = PaletteController(catalog, PaletteConfig(max_items_shown=3))
    palette = _make_palette(qtbot, controller)

    controller.set_query("item")

    assert palette.list_widget.count() == 10
    assert palette.list_widget.maximumHeight() == 3 * 32


@pytest.mark.usefixtures("qt_app")
def test_detach_stops_rendering(qtbot, controller: PaletteController) -> None:
    palette = _make_palette(qtbot, controller)
    palette.detach()

    controller.set_query("fix")

    assert palette.list_widget.count() == 0
