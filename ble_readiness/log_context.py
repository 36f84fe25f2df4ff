#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Execution ID Log Context.

Every report call runs inside an execution context carrying the validation
result's execution id. The id lives in thread-local storage, so concurrent
report generation from several threads keeps log lines attributable.

Usage:
    from ble_readiness.log_context import ExecutionLogFilter, execution_context

    handler = logging.StreamHandler()
    handler.addFilter(ExecutionLogFilter())
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(execution_id)s] %(name)s: %(message)s"
    ))

    with execution_context(result.execution_id):
        summary = generator.generate_executive_summary(result)
"""

import contextlib
import logging
import threading
from typing import Iterator, Optional

_thread_local = threading.local()


def get_execution_id() -> Optional[str]:
    """Return the execution id bound to the current thread, if any."""
    return getattr(_thread_local, "execution_id", None)


def set_execution_id(execution_id: Optional[str]):
    """Bind an execution id to the current thread."""
    _thread_local.execution_id = execution_id


def clear_execution_id():
    """Clear the thread-local execution id."""
    _thread_local.execution_id = None


@contextlib.contextmanager
def execution_context(execution_id: str) -> Iterator[str]:
    """Bind ``execution_id`` for the duration of the block.

    Nested contexts restore the outer id on exit, so the orchestrator can
    wrap collaborator calls that open their own context.
    """
    previous = get_execution_id()
    set_execution_id(execution_id)
    try:
        yield execution_id
    finally:
        set_execution_id(previous)


class ExecutionLogFilter(logging.Filter):
    """Logging filter that injects execution_id into log records."""

    def filter(self, record):
        record.execution_id = get_execution_id() or "-"
        return True
