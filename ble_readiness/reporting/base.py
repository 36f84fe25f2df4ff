# CUI // SP-CTI
"""Collaborator interfaces for the comprehensive report orchestrator.

The orchestrator depends only on these abstract contracts; the default
implementations live in technical_analysis, issue_tracker and
deployment_checklist and can be swapped out per deployment.
"""

import math
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable

from ble_readiness.models import BLEValidationResult
from ble_readiness.report_models import (
    DeploymentReadinessChecklist,
    IssueDatabase,
    PrioritizedIssueList,
    ProgressTracker,
    RemediationRoadmap,
    TechnicalAnalysisReport,
)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default generation clock."""
    return datetime.now(timezone.utc)


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when ``whole`` is 0."""
    if not whole:
        return 0
    return int(math.floor(part * 100 / whole + 0.5))


# ---------------------------------------------------------------------------
# Abstract base: Technical analysis
# ---------------------------------------------------------------------------
class TechnicalAnalysisGenerator(ABC):
    """Produces the implementation-level report for development teams."""

    @abstractmethod
    def generate_technical_report(self, result: BLEValidationResult) -> TechnicalAnalysisReport:
        """Build the technical analysis for one validation result."""


# ---------------------------------------------------------------------------
# Abstract base: Issue tracking
# ---------------------------------------------------------------------------
class IssueTrackerGenerator(ABC):
    """Turns raw issues into a backlog, roadmap and progress tracker.

    The four methods form a pipeline: database -> prioritized list ->
    roadmap -> tracker. Each must be callable on its own.
    """

    @abstractmethod
    def generate_issue_database(self, result: BLEValidationResult) -> IssueDatabase:
        """Collect, de-duplicate and enrich every issue in the result."""

    @abstractmethod
    def generate_prioritized_issue_list(self, issue_db: IssueDatabase) -> PrioritizedIssueList:
        """Order and bucket the issues of ``issue_db``."""

    @abstractmethod
    def generate_remediation_roadmap(
        self, issue_db: IssueDatabase, prioritized: PrioritizedIssueList
    ) -> RemediationRoadmap:
        """Plan remediation phases for the issues of ``issue_db``."""

    @abstractmethod
    def generate_progress_tracker(self, roadmap: RemediationRoadmap) -> ProgressTracker:
        """Initialise progress tracking for ``roadmap``."""


# ---------------------------------------------------------------------------
# Abstract base: Deployment checklist
# ---------------------------------------------------------------------------
class DeploymentChecklistGenerator(ABC):
    """Produces the deployment readiness checklist for DevOps teams."""

    @abstractmethod
    def generate_deployment_checklist(self, result: BLEValidationResult) -> DeploymentReadinessChecklist:
        """Evaluate every checklist item against the validation result."""
