from __future__ import annotations

from commandbar.config.settings import PaletteConfig
from commandbar.data.catalog import Catalog, collect_suggestions
from commandbar.data.models import PaletteItem
from commandbar.search.matcher import matches
from commandbar.search.tokenizer import WordTokenizer, shared_tokenizer
from commandbar.utils import get_logger


logger = get_logger(__name__)


class SearchFilter:
    """Compute the visible items for a query.

    An empty query shows the configured default items, not the catalog. Any
    other query shows the matching catalog items in catalog order followed by
    whatever the suggestion provider returns for it.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: PaletteConfig,
        *,
        tokenizer: WordTokenizer | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config
        self._tokenizer = tokenizer or shared_tokenizer()

    @property
    def tokenizer(self) -> WordTokenizer:
        return self._tokenizer

    def visible_items(self, query: str) -> tuple[PaletteItem, ...]:
        if not query:
            return tuple(self._config.default_items)

        include_subtitle = self._config.search_subtitles
        matched = tuple(
            item
            for item in self._catalog
            if matches(
                item.search_text(include_subtitle=include_subtitle),
                query,
                tokenizer=self._tokenizer,
            )
        )
        suggestions = collect_suggestions(
            self._config.additional_items_for_search, query
        )
        logger.debug(
            "Palette filtered",
            query_length=len(query),
            matched=len(matched),
            suggested=len(suggestions),
        )
        return matched + suggestions


__all__ = ["SearchFilter"]
