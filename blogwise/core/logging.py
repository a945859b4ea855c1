"""Centralized logging configuration with JSON-formatted extras.

Log lines emitted while a generation job runs carry that job's id and the
keyword being processed, bound once through ``job_log_context``.
"""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_job_context: ContextVar[dict[str, Any]] = ContextVar("blogwise_job_context", default={})


def current_job_context() -> dict[str, Any]:
    return dict(_job_context.get())


@contextmanager
def job_log_context(job_id: str | None = None, keyword: str | None = None) -> Iterator[None]:
    """Bind job fields to every log record emitted inside the block.

    Nested blocks inherit the outer fields and may override them.
    """
    fields = current_job_context()
    if job_id is not None:
        fields["job_id"] = job_id
    if keyword is not None:
        fields["keyword"] = keyword
    token = _job_context.set(fields)
    try:
        yield
    finally:
        _job_context.reset(token)


class JobContextFilter(logging.Filter):
    """Copies the bound job fields onto records that do not set them."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _job_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class JSONExtrasFormatter(logging.Formatter):
    """Formatter that outputs a readable log line with extras as JSON.

    Output format:
        2026-01-15 10:30:45 | INFO | blogwise.services.content_pipeline | Message {"job_id": "gen-1-..."}
    """

    RESERVED_ATTRS = frozenset(
        {
            "args",
            "asctime",
            "created",
            "exc_info",
            "exc_text",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "message",
            "module",
            "msecs",
            "msg",
            "name",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "stack_info",
            "taskName",
            "thread",
            "threadName",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        base = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.message}"

        extras = {
            k: v
            for k, v in record.__dict__.items()
            if k not in self.RESERVED_ATTRS and not k.startswith("_")
        }

        if extras:
            try:
                # Keyword text is mostly Hangul; keep it readable in the log line.
                extras_str = json.dumps(extras, default=str, ensure_ascii=False)
                base = f"{base} {extras_str}"
            except (TypeError, ValueError):
                pass

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            base = f"{base}\n{record.exc_text}"

        return base


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the 'blogwise' logger with console output, job context and JSON extras."""
    logger = logging.getLogger("blogwise")
    logger.setLevel(level)

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(JobContextFilter())
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    logger.propagate = False
