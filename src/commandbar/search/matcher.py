from __future__ import annotations

from typing import Iterable, List, Tuple, TypeVar

from commandbar.search.tokenizer import WordTokenizer, shared_tokenizer


IdT = TypeVar("IdT")


def matches(
    candidate: str, query: str, *, tokenizer: WordTokenizer | None = None
) -> bool:
    """Return True when every query word is a prefix of some candidate word.

    Word order on either side is irrelevant and matching is case-insensitive.
    An empty query word (from a trailing space, say) is a prefix of anything.
    """

    words = tokenizer or shared_tokenizer()
    candidate_tokens = words.tokenize(candidate)
    for query_token in words.split(query):
        if not any(token.startswith(query_token) for token in candidate_tokens):
            return False
    return True


def matching_ids(
    entries: Iterable[Tuple[str, IdT]],
    query: str,
    *,
    tokenizer: WordTokenizer | None = None,
) -> List[IdT]:
    """Ids of the ``(text, id)`` entries whose text matches, in input order."""
    return [
        entry_id
        for text, entry_id in entries
        if matches(text, query, tokenizer=tokenizer)
    ]


__all__ = ["matches", "matching_ids"]
