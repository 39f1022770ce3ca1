from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional
from uuid import UUID

from commandbar.data.models import PaletteItem
from commandbar.utils import get_logger


logger = get_logger(__name__)

SuggestionProvider = Callable[[str], Iterable[PaletteItem]]


class Catalog:
    """Ordered set of static palette items supplied by the host.

    The palette core only reads from the catalog. Registering an item whose id
    is already present replaces it without changing its position.
    """

    def __init__(self, items: Iterable[PaletteItem] = ()) -> None:
        self._items: Dict[UUID, PaletteItem] = {}
        for item in items:
            self.register(item)

    def register(self, item: PaletteItem) -> Callable[[], None]:
        self._items[item.id] = item
        logger.debug("Registered palette item", item_id=str(item.id))

        def unregister() -> None:
            if self._items.get(item.id) is item:
                del self._items[item.id]

        return unregister

    def unregister(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)

    def get(self, item_id: UUID) -> Optional[PaletteItem]:
        return self._items.get(item_id)

    def items(self) -> List[PaletteItem]:
        return list(self._items.values())

    def __iter__(self) -> Iterator[PaletteItem]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._items)


def collect_suggestions(
    provider: SuggestionProvider | None, query: str
) -> tuple[PaletteItem, ...]:
    """Run the dynamic provider for ``query``.

    The provider runs on every keystroke, so a failing or misbehaving provider
    yields no suggestions for this query instead of breaking the filter pass.
    """

    if provider is None:
        return ()
    try:
        suggestions = tuple(provider(query))
    except Exception:  # noqa: BLE001
        logger.warning(
            "Suggestion provider failed; continuing without suggestions",
            query=query,
            exc_info=True,
        )
        return ()

    invalid = [entry for entry in suggestions if not isinstance(entry, PaletteItem)]
    if invalid:
        logger.warning(
            "Suggestion provider returned non-item entries; ignoring suggestions",
            query=query,
            invalid=len(invalid),
        )
        return ()
    return suggestions


__all__ = ["Catalog", "SuggestionProvider", "collect_suggestions"]
