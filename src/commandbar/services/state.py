"""Pure state reducer for the palette.

Every host interaction is an event; ``reduce`` maps the current state and an
event to the next state plus, for activating events, the item to activate.
Nothing here invokes item actions or notifies anyone; that is the
controller's job.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Sequence, Union
from uuid import UUID

from commandbar.data.models import PaletteItem


SearchFunction = Callable[[str], Sequence[PaletteItem]]


@dataclass(slots=True, frozen=True)
class PaletteState:
    query: str = ""
    visible: tuple[PaletteItem, ...] = ()
    selected_id: UUID | None = None
    active: bool = False

    @property
    def selected_index(self) -> int | None:
        if self.selected_id is None:
            return None
        for index, item in enumerate(self.visible):
            if item.id == self.selected_id:
                return index
        return None

    @property
    def selected(self) -> PaletteItem | None:
        index = self.selected_index
        if index is None:
            return None
        return self.visible[index]

    def is_consistent(self) -> bool:
        """Selection is absent iff nothing is visible, else points at a visible item."""
        if not self.visible:
            return self.selected_id is None
        return self.selected_index is not None


@dataclass(slots=True, frozen=True)
class Open:
    """Show the palette with an empty query."""


@dataclass(slots=True, frozen=True)
class Close:
    """Hide the palette without activating anything."""


@dataclass(slots=True, frozen=True)
class QueryChanged:
    text: str


@dataclass(slots=True, frozen=True)
class SelectNext:
    pass


@dataclass(slots=True, frozen=True)
class SelectPrevious:
    pass


@dataclass(slots=True, frozen=True)
class Hover:
    item: PaletteItem


@dataclass(slots=True, frozen=True)
class Tap:
    item: PaletteItem


@dataclass(slots=True, frozen=True)
class Commit:
    """Activate the current selection, if any."""


@dataclass(slots=True, frozen=True)
class Dismiss:
    """Escape: clear a non-empty query, otherwise close."""


PaletteEvent = Union[
    Open,
    Close,
    QueryChanged,
    SelectNext,
    SelectPrevious,
    Hover,
    Tap,
    Commit,
    Dismiss,
]


@dataclass(slots=True, frozen=True)
class Transition:
    state: PaletteState
    activated: PaletteItem | None = None


def _refilter(state: PaletteState, query: str, search: SearchFunction) -> PaletteState:
    visible = tuple(search(query))
    return replace(
        state,
        query=query,
        visible=visible,
        selected_id=visible[0].id if visible else None,
    )


def _step(state: PaletteState, delta: int) -> PaletteState:
    count = len(state.visible)
    if count == 0:
        return state
    index = state.selected_index
    if index is None:
        index = 0
    target = (index + delta + count) % count
    return replace(state, selected_id=state.visible[target].id)


def _deactivate(state: PaletteState) -> PaletteState:
    if not state.active:
        return state
    return replace(state, active=False)


def _activate(state: PaletteState, item: PaletteItem) -> Transition:
    return Transition(_deactivate(state), activated=item)


def reduce(state: PaletteState, event: PaletteEvent, search: SearchFunction) -> Transition:
    if isinstance(event, QueryChanged):
        return Transition(_refilter(state, event.text, search))
    if isinstance(event, SelectNext):
        return Transition(_step(state, 1))
    if isinstance(event, SelectPrevious):
        return Transition(_step(state, -1))
    if isinstance(event, Hover):
        if event.item not in state.visible:
            return Transition(state)
        return Transition(replace(state, selected_id=event.item.id))
    if isinstance(event, Tap):
        return _activate(state, event.item)
    if isinstance(event, Commit):
        selected = state.selected
        if selected is None:
            return Transition(state)
        return _activate(state, selected)
    if isinstance(event, Open):
        return Transition(replace(_refilter(state, "", search), active=True))
    if isinstance(event, Close):
        return Transition(_deactivate(state))
    if isinstance(event, Dismiss):
        if state.query:
            return Transition(_refilter(state, "", search))
        return Transition(_deactivate(state))
    raise TypeError(f"Unsupported palette event: {event!r}")


__all__ = [
    "Close",
    "Commit",
    "Dismiss",
    "Hover",
    "Open",
    "PaletteEvent",
    "PaletteState",
    "QueryChanged",
    "SearchFunction",
    "SelectNext",
    "SelectPrevious",
    "Tap",
    "Transition",
    "reduce",
]
