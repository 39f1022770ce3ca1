"""Search, selection and activation core for a keyboard-driven command palette."""

from commandbar.config import PaletteConfig, SettingsManager
from commandbar.data import Catalog, PaletteItem, SuggestionProvider
from commandbar.search import SearchFilter, WordTokenizer, matches, matching_ids, tokenize
from commandbar.services import ActivationEvent, EventHook, PaletteController, PaletteState

__version__ = "0.1.0"

__all__ = [
    "ActivationEvent",
    "Catalog",
    "EventHook",
    "PaletteConfig",
    "PaletteController",
    "PaletteItem",
    "PaletteState",
    "SearchFilter",
    "SettingsManager",
    "SuggestionProvider",
    "WordTokenizer",
    "matches",
    "matching_ids",
    "tokenize",
    "__version__",
]
