"""Shared normalization, tokenization and overlap utilities for keyword matching."""

from __future__ import annotations

import re
from collections.abc import Iterable

MIN_TOKEN_LENGTH = 2

NORMALIZE_STRIP_PATTERN = re.compile(r"[\s\-_.,!?]")
WHITESPACE_PATTERN = re.compile(r"\s+")
# `\w` is Unicode-aware; the explicit Hangul range documents the target script.
NON_TOKEN_CHAR_PATTERN = re.compile(r"[^\w가-힣]")


def normalize(text: str) -> str:
    """Lower-case and drop whitespace/punctuation for exact-match comparison."""
    return NORMALIZE_STRIP_PATTERN.sub("", (text or "").lower())


def tokenize(text: str) -> set[str]:
    """Split free text into a set of lower-cased alphanumeric tokens."""
    tokens: set[str] = set()
    for raw in WHITESPACE_PATTERN.split((text or "").lower()):
        token = NON_TOKEN_CHAR_PATTERN.sub("", raw)
        if len(token) >= MIN_TOKEN_LENGTH:
            tokens.add(token)
    return tokens


def overlap_similarity(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> float:
    """Shared tokens divided by the size of the smaller set.

    A short phrase fully contained in a longer text scores 1.0, so
    near-duplicates phrased as subsets are caught.
    """
    set_a = set(tokens_a)
    set_b = set(tokens_b)
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / min(len(set_a), len(set_b))


def keyword_query_tokens(keyword: str) -> list[str]:
    """Whitespace tokens of a lower-cased keyword, kept in order, length >= 2."""
    lowered = (keyword or "").lower()
    return [token for token in WHITESPACE_PATTERN.split(lowered) if len(token) >= MIN_TOKEN_LENGTH]
