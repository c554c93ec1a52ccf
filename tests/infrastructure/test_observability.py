"""Structured logging - JSON formatter fields and extras."""

import json
import logging

from marine_registry.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "marine_registry.services.taxonomy_store", logging.INFO,
        __file__, 1, "Taxonomy %s added", ("t1",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "marine_registry.services.taxonomy_store"
    assert log["message"] == "Taxonomy t1 added"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(record_id="t1", operation="addTaxonomy", unrelated="x"),
    ))
    assert log["record_id"] == "t1"
    assert log["operation"] == "addTaxonomy"
    assert "unrelated" not in log
    assert "error_code" not in log


def test_setup_logging_installs_one_root_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        assert setup_logging("debug", "text") is None
        added = [h for h in logging.root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        for handler in logging.root.handlers[:]:
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
