from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from commandbar.config.settings import PaletteConfig
from commandbar.data.catalog import Catalog
from commandbar.data.models import PaletteItem
from commandbar.search.filter import SearchFilter
from commandbar.search.tokenizer import WordTokenizer
from commandbar.services.base import EventHook
from commandbar.services.state import (
    Close,
    Commit,
    Dismiss,
    Hover,
    Open,
    PaletteEvent,
    PaletteState,
    QueryChanged,
    SelectNext,
    SelectPrevious,
    Tap,
    reduce,
)
from commandbar.utils import get_logger


logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ActivationEvent:
    item_id: UUID
    title: str


class PaletteController:
    """Owns the palette state and turns host events into state changes.

    The controller is the single source of truth for the active flag, the
    query, the visible items and the selection. Hosts render from
    ``state_changed`` and show or hide the palette from ``active_changed``.

    ``activated`` is the close signal of an activation: it fires exactly once
    per activated item, before the item's action runs, whether or not the
    palette was visible at the time. The action still runs if a subscriber
    fails, and an exception raised by the action propagates to the caller.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: PaletteConfig | None = None,
        *,
        tokenizer: WordTokenizer | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config or PaletteConfig()
        self._filter = SearchFilter(catalog, self._config, tokenizer=tokenizer)
        self._state = PaletteState()

        self.state_changed: EventHook[PaletteState] = EventHook()
        self.active_changed: EventHook[bool] = EventHook()
        self.activated: EventHook[ActivationEvent] = EventHook()

    @property
    def state(self) -> PaletteState:
        return self._state

    @property
    def config(self) -> PaletteConfig:
        return self._config

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def is_active(self) -> bool:
        return self._state.active

    @property
    def visible_items(self) -> tuple[PaletteItem, ...]:
        return self._state.visible

    @property
    def selected(self) -> PaletteItem | None:
        return self._state.selected

    # ------------------------------------------------------------------ Events

    def dispatch(self, event: PaletteEvent) -> PaletteState:
        transition = reduce(self._state, event, self._filter.visible_items)
        if transition.activated is not None:
            self._run_activation(transition.activated, transition.state)
        else:
            self._apply(transition.state)
        return self._state

    def open(self) -> PaletteState:
        return self.dispatch(Open())

    def close(self) -> PaletteState:
        return self.dispatch(Close())

    def set_query(self, text: str) -> PaletteState:
        return self.dispatch(QueryChanged(text))

    def select_next(self) -> PaletteState:
        return self.dispatch(SelectNext())

    def select_previous(self) -> PaletteState:
        return self.dispatch(SelectPrevious())

    def hover(self, item: PaletteItem) -> PaletteState:
        return self.dispatch(Hover(item))

    def tap(self, item: PaletteItem) -> PaletteState:
        return self.dispatch(Tap(item))

    def commit(self) -> PaletteState:
        return self.dispatch(Commit())

    def dismiss(self) -> PaletteState:
        return self.dispatch(Dismiss())

    def activate(self, item: PaletteItem) -> PaletteState:
        return self.dispatch(Tap(item))

    # --------------------------------------------------------------- Internals

    def _apply(self, state: PaletteState) -> None:
        assert state.is_consistent(), "palette selection points outside the visible items"
        if state is self._state:
            return
        previous = self._state
        self._state = state
        self.state_changed.emit(state)
        if previous.active != state.active:
            logger.debug("Palette visibility changed", active=state.active)
            self.active_changed.emit(state.active)

    def _run_activation(self, item: PaletteItem, state: PaletteState) -> None:
        logger.info(
            "Activating palette item",
            item_id=str(item.id),
            title=item.title,
        )
        try:
            self._apply(state)
            self.activated.emit(ActivationEvent(item_id=item.id, title=item.title))
        finally:
            item.action()


__all__ = ["ActivationEvent", "PaletteController"]
