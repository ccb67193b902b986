"""Structured Logging — JSON fields and idempotent setup."""

import json
import logging

from portal.infrastructure.observability import JSONFormatter, setup_logging


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "portal.test", logging.INFO, __file__, 1, "Payment initialized", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_has_core_and_extra_fields():
    line = json.loads(JSONFormatter().format(make_record(reference="TPWBM_1_abc", user_id=None)))
    assert line["level"] == "INFO"
    assert line["logger"] == "portal.test"
    assert line["message"] == "Payment initialized"
    assert line["reference"] == "TPWBM_1_abc"
    assert "user_id" not in line


def test_setup_is_idempotent():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG", "text")
        handler = setup_logging("INFO", "json")
        portal_handlers = [h for h in root.handlers if h.get_name() == handler.get_name()]
        assert portal_handlers == [handler]
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
