from __future__ import annotations

from uuid import uuid4

import pytest

from commandbar.search.matcher import matches, matching_ids
from commandbar.search.tokenizer import WordTokenizer


@pytest.mark.parametrize(
    ("candidate", "query", "expected"),
    [
        ("Fix Grammar", "fix", True),
        ("Fix Grammar", "gram", True),
        ("Fix Grammar", "fix spell", False),
        ("Fix Grammar", "", True),
        ("", "fix", False),
        ("Fix Grammar", "FIX GR", True),
        ("Fix Grammar", "grammar fix", True),
        ("Fix Grammar", "rammar", False),
        ("Fix Grammar", "fix ", True),
        ("Emphasize", "fix", False),
    ],
)
def test_prefix_covering_match(candidate: str, query: str, expected: bool) -> None:
    assert matches(candidate, query, tokenizer=WordTokenizer()) is expected


def test_one_candidate_word_may_cover_several_query_words() -> None:
    assert matches("Fix Grammar", "f fi fix", tokenizer=WordTokenizer())


def test_matches_defaults_to_shared_tokenizer() -> None:
    assert matches("Open Recent", "rec")


def test_matching_ids_preserves_input_order(tokenizer: WordTokenizer) -> None:
    ids = [uuid4(), uuid4(), uuid4()]
    entries = [("apple", ids[0]), ("banana", ids[1]), ("apricot", ids[2])]

    assert matching_ids(entries, "ap", tokenizer=tokenizer) == [ids[0], ids[2]]
    assert matching_ids(entries, "cherry", tokenizer=tokenizer) == []
