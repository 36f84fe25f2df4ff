#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Comprehensive Report Orchestrator.

Runs the executive summary engine and the three collaborators (technical
analysis, issue tracking, deployment checklist), then synthesizes the
cross-cutting parts of the report: risk analysis, recommendation summary,
next steps and report statistics.

Every entry point sets the execution-id log context for the duration of
the call. Collaborators are injectable; a fixed ``clock`` makes the output
reproducible.

Usage:
    from ble_readiness.reporting.comprehensive_report import ComprehensiveReportGenerator

    generator = ComprehensiveReportGenerator()
    report = generator.generate_comprehensive_report(result)
    print(json.dumps(report.to_dict(), indent=2))
"""

import logging
from typing import List, Optional

from ble_readiness.config import ReportConfig, build_report_config
from ble_readiness.log_context import execution_context
from ble_readiness.models import ANALYZED_COMPONENT_FIELDS, BLEValidationResult, IssueCategory, IssueComponent
from ble_readiness.report_models import (
    ChecklistStatus,
    ComprehensiveValidationReport,
    DeploymentReadinessChecklist,
    DeploymentReadinessStatistics,
    ExecutiveSummary,
    GoNoGo,
    IssueDatabase,
    IssueStatistics,
    IssueTracking,
    RecommendationSummary,
    RemediationRoadmap,
    ReportMetadata,
    ReportStatistics,
    TechnicalAnalysisReport,
    ValidationCoverage,
    ValidationMetrics,
)
from ble_readiness.reporting.base import (
    Clock,
    DeploymentChecklistGenerator,
    IssueTrackerGenerator,
    TechnicalAnalysisGenerator,
    percent,
    utc_now,
)
from ble_readiness.reporting.deployment_checklist import DefaultDeploymentChecklistGenerator
from ble_readiness.reporting.executive_summary import ExecutiveSummaryEngine
from ble_readiness.reporting.issue_tracker import DefaultIssueTrackerGenerator
from ble_readiness.reporting.risk_analysis import build_risk_analysis
from ble_readiness.reporting.technical_analysis import DefaultTechnicalAnalysisGenerator

logger = logging.getLogger("ble_readiness.reporting.comprehensive_report")

IMMEDIATE_ISSUE_LIMIT = 3
IMMEDIATE_TECHNICAL_LIMIT = 2

SHORT_TERM_EXTRAS = [
    "Implement comprehensive monitoring and alerting",
    "Establish automated testing pipeline",
]
MEDIUM_TERM_EXTRAS = [
    "Optimize performance based on production metrics",
    "Enhance security measures based on threat analysis",
]
LONG_TERM_EXTRAS = [
    "Implement advanced analytics and machine learning",
    "Plan for scalability and feature enhancements",
]
STRATEGIC_RECOMMENDATIONS = [
    "Establish center of excellence for BLE technology",
    "Develop comprehensive testing and validation framework",
    "Create knowledge base and documentation standards",
    "Plan for technology evolution and updates",
]

VERDICT_NEXT_STEPS = {
    GoNoGo.GO: [
        "Proceed with production deployment",
        "Execute deployment checklist items",
        "Monitor system performance post-deployment",
    ],
    GoNoGo.CONDITIONAL_GO: [
        "Address critical issues identified in roadmap",
        "Implement enhanced monitoring before deployment",
        "Plan phased rollout with close monitoring",
    ],
    GoNoGo.NO_GO: [
        "Execute Phase 1 of remediation roadmap",
        "Address all deployment blocking issues",
        "Re-run validation after critical fixes",
    ],
}
CHECKLIST_FAILED_STEPS = [
    "Complete critical configuration items",
    "Resolve permission and build configuration issues",
]
CLOSING_STEPS = [
    "Schedule stakeholder review meeting",
    "Update project timeline based on findings",
    "Prepare team for implementation phase",
]


# ---------------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------------
def build_recommendation_summary(
    summary: ExecutiveSummary,
    technical: TechnicalAnalysisReport,
    roadmap: RemediationRoadmap,
) -> RecommendationSummary:
    def phase_deliverables(index: int) -> List[str]:
        phases = roadmap.execution_phases
        return list(phases[index].deliverables) if index < len(phases) else []

    immediate = [i.recommendation for i in summary.critical_issues[:IMMEDIATE_ISSUE_LIMIT]]
    immediate.extend(technical.implementation_recommendations[:IMMEDIATE_TECHNICAL_LIMIT])

    return RecommendationSummary(
        immediate_actions=immediate,
        short_term_recommendations=phase_deliverables(0) + SHORT_TERM_EXTRAS,
        medium_term_recommendations=phase_deliverables(1) + MEDIUM_TERM_EXTRAS,
        long_term_recommendations=phase_deliverables(2) + LONG_TERM_EXTRAS,
        strategic_recommendations=list(STRATEGIC_RECOMMENDATIONS),
    )


def derive_next_steps(
    summary: ExecutiveSummary,
    roadmap: RemediationRoadmap,
    checklist: DeploymentReadinessChecklist,
) -> List[str]:
    verdict = summary.go_no_go_recommendation.recommendation
    steps = list(VERDICT_NEXT_STEPS.get(verdict, VERDICT_NEXT_STEPS[GoNoGo.NO_GO]))

    if checklist.overall_readiness == ChecklistStatus.FAIL:
        steps.extend(CHECKLIST_FAILED_STEPS)

    if roadmap.execution_phases:
        steps.extend([
            f"Begin {roadmap.execution_phases[0].phase_name}",
            "Assign resources to remediation tasks",
            "Establish progress tracking and reporting",
        ])

    steps.extend(CLOSING_STEPS)
    return steps


def build_report_statistics(
    result: BLEValidationResult,
    issue_db: IssueDatabase,
    checklist: DeploymentReadinessChecklist,
) -> ReportStatistics:
    total = len(ANALYZED_COMPONENT_FIELDS)
    analyzed = len(result.analyzed_components())

    return ReportStatistics(
        validation_coverage=ValidationCoverage(
            total_components=total,
            analyzed_components=analyzed,
            coverage_percentage=percent(analyzed, total),
        ),
        issue_statistics=IssueStatistics(
            total_issues=issue_db.total_issue_count,
            critical_issues=len(issue_db.issues_by_category.get(IssueCategory.CRITICAL, [])),
            high_priority_issues=len(issue_db.issues_by_category.get(IssueCategory.HIGH, [])),
            deployment_blockers=len(issue_db.deployment_blockers),
            security_issues=issue_db.issues_by_component.get(IssueComponent.SECURITY, 0),
            performance_issues=issue_db.issues_by_component.get(IssueComponent.PERFORMANCE, 0),
        ),
        deployment_readiness=DeploymentReadinessStatistics(
            overall_readiness=checklist.overall_readiness,
            configuration_completeness=checklist.configuration_completeness.completeness_percentage,
            permission_readiness=checklist.permission_validation.completeness_percentage,
            build_config_readiness=checklist.build_configuration.completeness_percentage,
            monitoring_readiness=checklist.monitoring_setup.completeness_percentage,
            critical_missing_items=len(checklist.critical_missing_items),
        ),
        validation_metrics=ValidationMetrics(
            execution_time=result.total_execution_time or 0,
            confidence_level=result.confidence_level,
            analysis_completeness=issue_db.metadata.analysis_completeness,
            validation_version=result.validation_version,
        ),
    )


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------
class ComprehensiveReportGenerator:
    """Single entry point for every report audience.

    Args:
        config: thresholds and report metadata; defaults when omitted.
        clock: supplies every generation timestamp.
        technical_generator, issue_tracker, checklist_generator: collaborator
            overrides; the package defaults are used when omitted.
    """

    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        clock: Optional[Clock] = None,
        technical_generator: Optional[TechnicalAnalysisGenerator] = None,
        issue_tracker: Optional[IssueTrackerGenerator] = None,
        checklist_generator: Optional[DeploymentChecklistGenerator] = None,
    ):
        self.config = config or build_report_config()
        self.clock = clock or utc_now
        self.summary_engine = ExecutiveSummaryEngine(self.config)
        self.technical_generator = technical_generator or DefaultTechnicalAnalysisGenerator()
        self.issue_tracker = issue_tracker or DefaultIssueTrackerGenerator(self.clock)
        self.checklist_generator = checklist_generator or DefaultDeploymentChecklistGenerator(self.clock)

    def _issue_tracking(self, result: BLEValidationResult) -> IssueTracking:
        issue_db = self.issue_tracker.generate_issue_database(result)
        prioritized = self.issue_tracker.generate_prioritized_issue_list(issue_db)
        roadmap = self.issue_tracker.generate_remediation_roadmap(issue_db, prioritized)
        progress = self.issue_tracker.generate_progress_tracker(roadmap)
        return IssueTracking(
            issue_database=issue_db,
            prioritized_issues=prioritized,
            remediation_roadmap=roadmap,
            progress_tracker=progress,
        )

    def generate_comprehensive_report(self, result: BLEValidationResult) -> ComprehensiveValidationReport:
        with execution_context(result.execution_id):
            logger.info("Generating comprehensive report")
            summary = self.summary_engine.generate_executive_summary(result)
            technical = self.technical_generator.generate_technical_report(result)
            tracking = self._issue_tracking(result)
            checklist = self.checklist_generator.generate_deployment_checklist(result)

            issue_db = tracking.issue_database
            roadmap = tracking.remediation_roadmap
            risk = build_risk_analysis(summary, issue_db, checklist)

            report = ComprehensiveValidationReport(
                report_metadata=ReportMetadata(
                    generation_timestamp=self.clock(),
                    validation_version=result.validation_version,
                    execution_id=result.execution_id,
                    report_version=self.config.report_version,
                    generated_by=self.config.generated_by,
                ),
                executive_summary=summary,
                technical_analysis=technical,
                issue_tracking=tracking,
                deployment_readiness=checklist,
                risk_analysis=risk,
                recommendation_summary=build_recommendation_summary(summary, technical, roadmap),
                next_steps=derive_next_steps(summary, roadmap, checklist),
                report_statistics=build_report_statistics(result, issue_db, checklist),
            )
            logger.info(
                "Report complete: %s, %d issue(s), overall risk %s, checklist %s",
                summary.go_no_go_recommendation.recommendation.value,
                issue_db.total_issue_count,
                risk.overall_risk_level.value,
                checklist.overall_readiness.value,
            )
            return report

    def generate_executive_summary_only(self, result: BLEValidationResult) -> ExecutiveSummary:
        with execution_context(result.execution_id):
            return self.summary_engine.generate_executive_summary(result)

    def generate_technical_analysis_only(self, result: BLEValidationResult) -> TechnicalAnalysisReport:
        with execution_context(result.execution_id):
            return self.technical_generator.generate_technical_report(result)

    def generate_issue_tracking_only(self, result: BLEValidationResult) -> IssueTracking:
        with execution_context(result.execution_id):
            return self._issue_tracking(result)

    def generate_deployment_checklist_only(self, result: BLEValidationResult) -> DeploymentReadinessChecklist:
        with execution_context(result.execution_id):
            return self.checklist_generator.generate_deployment_checklist(result)
