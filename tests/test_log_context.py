# CUI // SP-CTI
"""Tests for ble_readiness.log_context and ble_readiness.errors."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging
import threading

import pytest

from ble_readiness.errors import ConfigurationError, InvalidValidationResultError, ReportError
from ble_readiness.log_context import (
    ExecutionLogFilter,
    clear_execution_id,
    execution_context,
    get_execution_id,
    set_execution_id,
)


@pytest.fixture(autouse=True)
def _reset_context():
    clear_execution_id()
    yield
    clear_execution_id()


def _record() -> logging.LogRecord:
    return logging.LogRecord("ble_readiness.test", logging.INFO, __file__, 1, "msg", None, None)


# ---------------------------------------------------------------------------
# Thread-local execution id
# ---------------------------------------------------------------------------
class TestExecutionContext:
    """Binding and restoring the execution id."""

    def test_default_is_none(self):
        assert get_execution_id() is None

    def test_set_and_clear(self):
        set_execution_id("exec-1")
        assert get_execution_id() == "exec-1"
        clear_execution_id()
        assert get_execution_id() is None

    def test_context_manager_binds_and_restores(self):
        with execution_context("exec-1") as bound:
            assert bound == "exec-1"
            assert get_execution_id() == "exec-1"
        assert get_execution_id() is None

    def test_nested_contexts_restore_outer(self):
        with execution_context("outer"):
            with execution_context("inner"):
                assert get_execution_id() == "inner"
            assert get_execution_id() == "outer"

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with execution_context("exec-1"):
                raise RuntimeError("boom")
        assert get_execution_id() is None

    def test_isolated_between_threads(self):
        seen = {}

        def worker():
            seen["other"] = get_execution_id()

        with execution_context("main-thread"):
            t = threading.Thread(target=worker)
            t.start()
            t.join()
        assert seen["other"] is None


class TestExecutionLogFilter:
    """Injection of execution_id into log records."""

    def test_injects_current_id(self):
        record = _record()
        with execution_context("exec-42"):
            assert ExecutionLogFilter().filter(record) is True
        assert record.execution_id == "exec-42"

    def test_placeholder_without_context(self):
        record = _record()
        ExecutionLogFilter().filter(record)
        assert record.execution_id == "-"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------
class TestErrors:
    """ReportError subclasses carry their context."""

    def test_invalid_result_error(self):
        exc = InvalidValidationResultError("bad", locations=["a.b"])
        assert isinstance(exc, ReportError)
        assert exc.component == "loader"
        assert exc.locations == ["a.b"]
        assert str(exc) == "bad"

    def test_invalid_result_error_default_locations(self):
        assert InvalidValidationResultError("bad").locations == []

    def test_configuration_error(self):
        exc = ConfigurationError("bad key", config_key="pass_threshold")
        assert isinstance(exc, ReportError)
        assert exc.component == "config"
        assert exc.config_key == "pass_threshold"
