"""Item records and the static catalog."""

from .catalog import Catalog, SuggestionProvider, collect_suggestions
from .models import ItemAction, PaletteItem

__all__ = [
    "Catalog",
    "ItemAction",
    "PaletteItem",
    "SuggestionProvider",
    "collect_suggestions",
]
