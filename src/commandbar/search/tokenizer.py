from __future__ import annotations

from typing import Dict, Tuple


Tokens = Tuple[str, ...]

WORD_SEPARATOR = " "


class WordTokenizer:
    """Split text into lowercase words, memoising the result per distinct text.

    Splitting happens on the single space character only: runs of spaces
    produce empty tokens and other whitespace stays inside the word. The cache
    is keyed by the text itself and never evicts, so only catalog texts go
    through ``tokenize``; queries change on every keystroke and use ``split``.

    Instances are not synchronised. Hosts that drive palettes from several
    threads give each palette its own tokenizer.
    """

    __slots__ = ("_cache",)

    def __init__(self) -> None:
        self._cache: Dict[str, Tokens] = {}

    def tokenize(self, text: str) -> Tokens:
        cached = self._cache.get(text)
        if cached is not None:
            return cached
        tokens = self.split(text)
        self._cache[text] = tokens
        return tokens

    @staticmethod
    def split(text: str) -> Tokens:
        """Tokenize without touching the cache."""
        return tuple(text.lower().split(WORD_SEPARATOR))

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()


_shared_tokenizer = WordTokenizer()


def shared_tokenizer() -> WordTokenizer:
    return _shared_tokenizer


def tokenize(text: str) -> Tokens:
    """Tokenize using the process-wide shared cache."""
    return _shared_tokenizer.tokenize(text)


__all__ = ["Tokens", "WORD_SEPARATOR", "WordTokenizer", "shared_tokenizer", "tokenize"]
