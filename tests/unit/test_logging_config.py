"""Tests for the contextual logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from jira_mcp.logging_config import (
    ContextualLogger,
    get_logger,
    log_operation,
    setup_logger,
)


@pytest.fixture
def logger():
    logger = setup_logger(name="jira-mcp-test", level="DEBUG")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_setup_logger_is_idempotent(logger):
    again = setup_logger(name="jira-mcp-test", level="INFO")

    assert again is logger
    assert isinstance(again, ContextualLogger)
    assert len(again.handlers) == 1
    assert again.level == logging.INFO
    assert again.propagate is False


def test_file_logging(tmp_path):
    logger = setup_logger(name="jira-mcp-file", log_to_file=True, log_dir=str(tmp_path))
    try:
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        logger.info("hello")
        assert "hello" in (tmp_path / "jira-mcp-file.log").read_text()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_records_carry_operation_context(logger):
    capture = ListHandler()
    logger.addHandler(capture)
    child = get_logger("jira-mcp-test.child")

    logger.info("outside")
    with log_operation(logger, "tool:get_issue", trace_id="abc123"):
        child.info("inside")
    logger.info("after")

    contexts = [record.context for record in capture.records if record.msg in ("outside", "inside", "after")]
    assert contexts == [
        "no-context",
        "trace_id=abc123,operation=tool:get_issue",
        "no-context",
    ]


def test_failed_operation_is_logged(logger):
    capture = ListHandler()
    logger.addHandler(capture)

    with pytest.raises(ValueError):
        with log_operation(logger, "application_startup"):
            raise ValueError("bad env")

    errors = [r.getMessage() for r in capture.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].startswith("Operation failed: application_startup after ")


def test_nested_operation_restores_outer_context(logger):
    capture = ListHandler()
    logger.addHandler(capture)

    with log_operation(logger, "tool:search_issue", trace_id="outer1"):
        with log_operation(logger, "epic_field_discovery", trace_id="inner1"):
            logger.info("inner")
        logger.info("outer")
    logger.info("after")

    contexts = {r.msg: r.context for r in capture.records if r.msg in ("inner", "outer", "after")}
    assert contexts == {
        "inner": "trace_id=inner1,operation=epic_field_discovery",
        "outer": "trace_id=outer1,operation=tool:search_issue",
        "after": "no-context",
    }
    assert not hasattr(logger, "set_context")
