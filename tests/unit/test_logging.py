"""Unit tests for job-scoped log context and the extras formatter."""

from __future__ import annotations

import json
import logging

from blogwise.core.logging import (
    JobContextFilter,
    JSONExtrasFormatter,
    current_job_context,
    job_log_context,
)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("blogwise.test", logging.INFO, __file__, 1, "Topic written", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def _extras(line: str) -> dict[str, object]:
    return json.loads(line[line.index("{") :])


def test_context_nests_and_resets() -> None:
    with job_log_context("gen-1-100", "청년 월세"):
        with job_log_context(keyword="실업급여 신청"):
            assert current_job_context() == {"job_id": "gen-1-100", "keyword": "실업급여 신청"}
        assert current_job_context() == {"job_id": "gen-1-100", "keyword": "청년 월세"}

    assert current_job_context() == {}


def test_filter_adds_job_fields_without_overriding_extras() -> None:
    record = _record(keyword="explicit")

    with job_log_context("gen-2-200", "bound"):
        assert JobContextFilter().filter(record)

    assert record.job_id == "gen-2-200"  # type: ignore[attr-defined]
    assert record.keyword == "explicit"  # type: ignore[attr-defined]


def test_formatter_keeps_hangul_readable() -> None:
    record = _record(job_id="gen-3-300", keyword="청년 월세 지원")

    line = JSONExtrasFormatter(datefmt="%Y-%m-%d").format(record)

    assert " | INFO     | blogwise.test | Topic written " in line
    assert "청년 월세 지원" in line
    assert _extras(line) == {"job_id": "gen-3-300", "keyword": "청년 월세 지원"}


def test_formatter_without_extras_has_no_json() -> None:
    line = JSONExtrasFormatter().format(_record())

    assert line.endswith("| blogwise.test | Topic written")
