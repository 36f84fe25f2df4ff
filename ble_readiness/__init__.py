#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: validation aggregation and Go/No-Go decision engine.

Consumes the output of a BLE validation pipeline and produces the executive
summary, technical analysis, issue tracking, deployment checklist and
cross-cutting risk analysis for a production release decision.
"""

__version__ = "1.0.0"

from ble_readiness.config import ReportConfig, build_report_config, load_report_config  # noqa: F401
from ble_readiness.errors import (  # noqa: F401
    ConfigurationError,
    InvalidValidationResultError,
    ReportError,
)
from ble_readiness.loader import load_validation_result, load_validation_result_file  # noqa: F401
from ble_readiness.log_context import ExecutionLogFilter, execution_context  # noqa: F401
from ble_readiness.models import BLEValidationResult  # noqa: F401
from ble_readiness.reporting.comprehensive_report import ComprehensiveReportGenerator  # noqa: F401
