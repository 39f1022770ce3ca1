"""Palette state machine, activation and change notification."""

from .base import EventHook
from .palette import ActivationEvent, PaletteController
from .state import (
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
    Transition,
    reduce,
)

__all__ = [
    "ActivationEvent",
    "Close",
    "Commit",
    "Dismiss",
    "EventHook",
    "Hover",
    "Open",
    "PaletteController",
    "PaletteEvent",
    "PaletteState",
    "QueryChanged",
    "SelectNext",
    "SelectPrevious",
    "Tap",
    "Transition",
    "reduce",
]
