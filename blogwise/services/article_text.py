"""Helpers that derive post metadata from generated markdown."""

from __future__ import annotations

import re
import time

SLUG_STRIP_PATTERN = re.compile(r"[^\w\s가-힣-]")
SLUG_WHITESPACE_PATTERN = re.compile(r"\s+")
SLUG_DASHES_PATTERN = re.compile(r"-+")
TITLE_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
WHITESPACE_PATTERN = re.compile(r"\s")

EXCERPT_MAX_LENGTH = 200
# Korean reading speed in characters per minute.
READ_CHARS_PER_MINUTE = 500


def slugify(text: str, *, suffix: int | None = None) -> str:
    """URL slug from a title; a millisecond suffix keeps it unique."""
    base = SLUG_STRIP_PATTERN.sub("", text.lower())
    base = SLUG_WHITESPACE_PATTERN.sub("-", base)
    base = SLUG_DASHES_PATTERN.sub("-", base).strip("-")
    stamp = suffix if suffix is not None else int(time.time() * 1000)
    return f"{base}-{stamp}" if base else str(stamp)


def extract_title(markdown: str, fallback: str) -> str:
    match = TITLE_PATTERN.search(markdown)
    return match.group(1).strip() if match else fallback


def extract_excerpt(markdown: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """First non-heading paragraph line, truncated with an ellipsis."""
    first = next(
        (line for line in markdown.split("\n") if line.strip() and not line.startswith("#")),
        "",
    )
    if len(first) <= max_length:
        return first
    return first[:max_length].strip() + "..."


def estimate_read_time(markdown: str) -> int:
    """Reading time in whole minutes, at least one."""
    characters = len(WHITESPACE_PATTERN.sub("", markdown))
    return max(1, round(characters / READ_CHARS_PER_MINUTE))
