from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QDialog,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from commandbar.data.models import PaletteItem
from commandbar.services.palette import PaletteController
from commandbar.services.state import PaletteState
from commandbar.utils import get_logger


logger = get_logger(__name__)

ROW_HEIGHT = 32
SUBTITLE_HEIGHT = 12


class CommandPalette(QDialog):
    """Frameless dialog that renders a `PaletteController`.

    The widget holds no search or selection logic of its own: key presses and
    pointer input become controller events, and the list is rebuilt from every
    state the controller publishes.
    """

    def __init__(
        self,
        controller: PaletteController,
        *,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(
            parent, Qt.WindowType.Dialog | Qt.WindowType.FramelessWindowHint
        )
        self.setModal(True)
        self.setObjectName("CommandPalette")
        self._controller = controller
        self._items: list[PaletteItem] = []
        self._unsubscribers: list[Callable[[], None]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText(controller.config.placeholder_text)
        self.search_input.textChanged.connect(self._on_text_changed)
        self.search_input.installEventFilter(self)
        layout.addWidget(self.search_input)

        self.list_widget = QListWidget()
        self.list_widget.setMouseTracking(True)
        self.list_widget.itemEntered.connect(self._on_item_hovered)
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.list_widget, stretch=1)

        self.hint_label = QPushButton("Esc to clear or close · Enter to run")
        self.hint_label.setFlat(True)
        self.hint_label.setEnabled(False)
        layout.addWidget(self.hint_label)

        self._unsubscribers.append(controller.state_changed.subscribe(self._render))
        self._unsubscribers.append(
            controller.active_changed.subscribe(self._on_active_changed)
        )

        self.resize(520, 360)
        self._render(controller.state)

    # ----------------------------------------------------------------- Lifecycle

    def open_palette(self) -> None:
        self._run(self._controller.open)

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # ----------------------------------------------------------------- Rendering

    def _render(self, state: PaletteState) -> None:
        if self.search_input.text() != state.query:
            self.search_input.blockSignals(True)
            self.search_input.setText(state.query)
            self.search_input.blockSignals(False)

        self.list_widget.blockSignals(True)
        if not self._shows(state.visible):
            self._populate_list(state)
        index = state.selected_index
        if index is not None:
            self.list_widget.setCurrentRow(index)
        self.list_widget.blockSignals(False)

    def _shows(self, items: tuple[PaletteItem, ...]) -> bool:
        return len(items) == len(self._items) and all(
            shown is item for shown, item in zip(self._items, items)
        )

    def _populate_list(self, state: PaletteState) -> None:
        self._items = list(state.visible)
        self.list_widget.clear()
        for item in self._items:
            text = item.title
            if item.badge:
                text = f"{text}    [{item.badge}]"
            row = QListWidgetItem(text)
            if item.subtitle:
                row.setToolTip(item.subtitle)
                row.setText(f"{text}\n{item.subtitle}")
            row.setData(Qt.ItemDataRole.UserRole, str(item.id))
            self.list_widget.addItem(row)
        self.list_widget.setFixedHeight(self._list_height(state))

    def _list_height(self, state: PaletteState) -> int:
        shown = state.visible[: self._controller.config.max_items_shown]
        return sum(
            ROW_HEIGHT + (SUBTITLE_HEIGHT if item.subtitle else 0) for item in shown
        )

    def _on_active_changed(self, active: bool) -> None:
        if active:
            self.search_input.setFocus(Qt.FocusReason.ActiveWindowFocusReason)
            self._center_in_parent()
            self.show()
        else:
            self.hide()

    # ----------------------------------------------------------------- Input

    def _on_text_changed(self, text: str) -> None:
        self._run(lambda: self._controller.set_query(text))

    def _on_item_hovered(self, row: QListWidgetItem) -> None:
        item = self._item_for_row(row)
        if item is not None:
            self._run(lambda: self._controller.hover(item))

    def _on_item_clicked(self, row: QListWidgetItem) -> None:
        item = self._item_for_row(row)
        if item is not None:
            self._run(lambda: self._controller.tap(item))

    def _item_for_row(self, row: QListWidgetItem) -> PaletteItem | None:
        index = self.list_widget.row(row)
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if (
            watched is self.search_input
            and event.type() == QEvent.Type.KeyPress
            and isinstance(event, QKeyEvent)
        ):
            handler = self._key_handlers().get(int(event.key()))
            if handler is not None:
                self._run(handler)
                return True
        return super().eventFilter(watched, event)

    def _key_handlers(self) -> dict[int, Callable[[], object]]:
        return {
            int(Qt.Key.Key_Up): self._controller.select_previous,
            int(Qt.Key.Key_Down): self._controller.select_next,
            int(Qt.Key.Key_Return): self._controller.commit,
            int(Qt.Key.Key_Enter): self._controller.commit,
            int(Qt.Key.Key_Escape): self._controller.dismiss,
        }

    def _run(self, operation: Callable[[], object]) -> None:
        try:
            operation()
        except Exception:  # noqa: BLE001
            logger.exception("Palette action failed")

    def _center_in_parent(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        geometry = parent.frameGeometry()
        center = geometry.center()
        self.move(center.x() - self.width() // 2, center.y() - self.height() // 2)

    def reject(self) -> None:  # type: ignore[override]
        self._run(self._controller.close)
        super().reject()


__all__ = ["CommandPalette"]
