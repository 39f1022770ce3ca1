"""Tokenizing, prefix matching and filtering of palette items."""

from .filter import SearchFilter
from .matcher import matches, matching_ids
from .tokenizer import Tokens, WordTokenizer, shared_tokenizer, tokenize

__all__ = [
    "SearchFilter",
    "Tokens",
    "WordTokenizer",
    "matches",
    "matching_ids",
    "shared_tokenizer",
    "tokenize",
]
