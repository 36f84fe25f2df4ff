#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness Reporting Package: summary, analysis, tracking, checklist.

The orchestrator composes the executive summary engine with three
collaborators behind abstract interfaces so deployments can swap them.
"""

from ble_readiness.reporting.base import (  # noqa: F401
    DeploymentChecklistGenerator,
    IssueTrackerGenerator,
    TechnicalAnalysisGenerator,
    percent,
    utc_now,
)
from ble_readiness.reporting.comprehensive_report import ComprehensiveReportGenerator  # noqa: F401
from ble_readiness.reporting.deployment_checklist import DefaultDeploymentChecklistGenerator  # noqa: F401
from ble_readiness.reporting.executive_summary import ExecutiveSummaryEngine  # noqa: F401
from ble_readiness.reporting.issue_tracker import DefaultIssueTrackerGenerator  # noqa: F401
from ble_readiness.reporting.risk_analysis import build_risk_analysis  # noqa: F401
from ble_readiness.reporting.technical_analysis import DefaultTechnicalAnalysisGenerator  # noqa: F401
