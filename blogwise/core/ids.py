"""Identifier helpers for stored content rows and in-memory generation jobs."""

from __future__ import annotations

import itertools
import secrets
import threading
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_JOB_COUNTER = itertools.count(1)
_JOB_COUNTER_LOCK = threading.Lock()


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    chars: list[str] = []
    current = value
    while current:
        current, remainder = divmod(current, 36)
        chars.append(_ALPHABET[remainder])
    return "".join(reversed(chars))


def generate_content_id(length: int = 24) -> str:
    """Generate a sortable lowercase identifier with a `c` prefix for content rows."""
    time_part = _to_base36(time.time_ns() // 1_000_000)
    random_len = max(length - 1 - len(time_part), 8)
    random_part = "".join(secrets.choice(_ALPHABET) for _ in range(random_len))
    return f"c{time_part}{random_part}"[:length]


def generate_job_id(prefix: str = "gen") -> str:
    """Generate a process-unique generation job id such as `gen-3-1767225600000`."""
    with _JOB_COUNTER_LOCK:
        sequence = next(_JOB_COUNTER)
    return f"{prefix}-{sequence}-{int(time.time() * 1000)}"
