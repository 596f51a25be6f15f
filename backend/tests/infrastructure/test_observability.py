"""Structured Logging — JSON formatter fields and setup idempotence."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.user_service", logging.INFO, __file__, 1,
        "User created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services.user_service"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(
            user_id=7, error_code="RESOURCE_NOT_FOUND", page=1000, size=10,
            constraint="users.email", secret="x",
        ),
    ))
    assert log["user_id"] == 7
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert (log["page"], log["size"]) == (1000, 10)
    assert log["constraint"] == "users.email"
    assert "secret" not in log


def test_setup_logging_is_idempotent():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in logging.root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for handler in logging.root.handlers[:]:
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
