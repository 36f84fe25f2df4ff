#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Structured Exception Hierarchy.

Scoring and synthesis never raise; every engine is total over a well-typed
validation result. The only failure modes are a validation result whose shape
violates the contract (e.g. an issue category outside the known vocabulary)
and an unreadable configuration file. Both fail fast instead of silently
defaulting, since a misclassified issue would corrupt the Go/No-Go verdict.

Usage:
    from ble_readiness.errors import InvalidValidationResultError

    try:
        result = load_validation_result(payload)
    except InvalidValidationResultError as exc:
        print(exc, exc.locations)
"""

from typing import List, Optional


class ReportError(Exception):
    """Base exception for all report generation errors.

    Attributes:
        component: Name of the part of the system that raised (e.g. "loader").
    """

    def __init__(self, message: str, component: str = ""):
        super().__init__(message)
        self.component = component


class InvalidValidationResultError(ReportError):
    """The upstream validation result does not match the expected shape.

    Attributes:
        locations: Dotted field paths that failed validation
            (e.g. "criticalIssues.0.category").
    """

    def __init__(self, message: str, locations: Optional[List[str]] = None):
        super().__init__(message, component="loader")
        self.locations = list(locations or [])


class ConfigurationError(ReportError):
    """Configuration error: unreadable file or out-of-range value."""

    def __init__(self, message: str, config_key: str = ""):
        super().__init__(message, component="config")
        self.config_key = config_key
