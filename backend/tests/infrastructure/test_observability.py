"""Structured Logging — JSON lines carry the base fields plus known extras only."""

import json
import logging

from scholartrack.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "scholartrack.test", logging.WARNING, __file__, 1, "seeded %d", (3,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_has_base_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "WARNING"
    assert line["logger"] == "scholartrack.test"
    assert line["message"] == "seeded 3"
    assert "timestamp" in line


def test_known_extras_surface_and_others_are_dropped():
    line = json.loads(JSONFormatter().format(_record(
        error_code="DB_ERROR", path="/api/scholarships", inserted=3, request_body="x",
    )))
    assert line["error_code"] == "DB_ERROR"
    assert line["path"] == "/api/scholarships"
    assert line["inserted"] == 3
    assert "request_body" not in line
    assert "scholarship_id" not in line
