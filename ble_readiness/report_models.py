#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Report Models.

Pydantic models for every report the engines produce. All are immutable and
serialize to camelCase JSON through ``to_dict()``.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ble_readiness.models import (
    CamelModel,
    ConfidenceTier,
    CriticalIssue,
    IssueCategory,
    IssueComponent,
    Rating,
    RiskLevel,
)


class GoNoGo(str, Enum):
    GO = "GO"
    CONDITIONAL_GO = "CONDITIONAL_GO"
    NO_GO = "NO_GO"


class ChecklistStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    PARTIAL = "PARTIAL"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ChecklistPriority(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ChecklistCategory(str, Enum):
    CONFIGURATION = "CONFIGURATION"
    PERMISSIONS = "PERMISSIONS"
    BUILD_CONFIG = "BUILD_CONFIG"
    MONITORING = "MONITORING"


class TaskStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    BLOCKED = "BLOCKED"
    CANCELLED = "CANCELLED"


class PhaseStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    BLOCKED = "BLOCKED"


class IssueStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"
    REOPENED = "REOPENED"


class VerificationStatus(str, Enum):
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    FAILED = "FAILED"


class DependencyType(str, Enum):
    SECURITY_FIRST = "SECURITY_FIRST"
    PRIORITY_ORDER = "PRIORITY_ORDER"
    TECHNICAL_DEPENDENCY = "TECHNICAL_DEPENDENCY"
    RESOURCE_DEPENDENCY = "RESOURCE_DEPENDENCY"


class UpdateCadence(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"


# ---------------------------------------------------------------------------
# Executive summary
# ---------------------------------------------------------------------------
class ComponentScores(CamelModel):
    native_modules: float
    bridge_layer: float
    database: float
    security: float
    performance: float
    configuration: float

    def as_list(self) -> List[float]:
        """Scores in fixed component order."""
        return [
            self.native_modules,
            self.bridge_layer,
            self.database,
            self.security,
            self.performance,
            self.configuration,
        ]


class SystemHealthRating(CamelModel):
    rating: Rating
    score: float
    component_scores: ComponentScores
    summary: str


class GoNoGoRecommendation(CamelModel):
    recommendation: GoNoGo
    justification: str
    conditions: List[str] = Field(default_factory=list)
    timeline: str
    risk_level: RiskLevel


class RiskDimension(CamelModel):
    """One risk bucket. Summary-level buckets carry no impact or timeline."""

    level: RiskLevel
    issues: List[str] = Field(default_factory=list)
    impact: Optional[str] = None
    mitigation: str
    timeline: Optional[str] = None


class RiskAssessment(CamelModel):
    overall_risk_level: RiskLevel
    security_risks: RiskDimension
    performance_risks: RiskDimension
    functional_risks: RiskDimension
    business_impact: str
    mitigation_strategies: List[str] = Field(default_factory=list)


class ConfidenceLevel(CamelModel):
    level: ConfidenceTier
    score: float
    factors: List[str] = Field(default_factory=list)


class ExecutiveSummary(CamelModel):
    execution_timestamp: datetime
    validation_version: str
    system_health_rating: SystemHealthRating
    critical_issues: List[CriticalIssue] = Field(default_factory=list)
    go_no_go_recommendation: GoNoGoRecommendation
    confidence_level: ConfidenceLevel
    risk_assessment: RiskAssessment
    key_findings: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Technical analysis
# ---------------------------------------------------------------------------
class TechnicalAnalysisReport(CamelModel):
    """Implementation-level findings; sections are free-form JSON mappings."""

    execution_timestamp: datetime
    validation_version: str
    execution_id: str
    code_review_section: Dict[str, Any] = Field(default_factory=dict)
    security_audit_section: Dict[str, Any] = Field(default_factory=dict)
    performance_analysis_section: Dict[str, Any] = Field(default_factory=dict)
    end_to_end_validation_section: Dict[str, Any] = Field(default_factory=dict)
    technical_summary: str
    implementation_recommendations: List[str] = Field(default_factory=list)
    architectural_findings: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Issue tracking
# ---------------------------------------------------------------------------
class TrackedIssue(CriticalIssue):
    related_issues: List[str] = Field(default_factory=list)
    testing_requirements: List[str] = Field(default_factory=list)
    validation_criteria: List[str] = Field(default_factory=list)


class IssueDatabaseMetadata(CamelModel):
    validation_version: str
    analysis_completeness: float
    confidence_level: Optional[ConfidenceTier] = None


class IssueDatabase(CamelModel):
    execution_id: str
    generation_timestamp: datetime
    total_issue_count: int
    issues_by_category: Dict[IssueCategory, List[TrackedIssue]]
    issues_by_severity: Dict[IssueCategory, int]
    issues_by_component: Dict[IssueComponent, int]
    all_issues: List[TrackedIssue] = Field(default_factory=list)
    deployment_blockers: List[TrackedIssue] = Field(default_factory=list)
    critical_path: List[str] = Field(default_factory=list)
    metadata: IssueDatabaseMetadata


class CriticalIssueGroup(CamelModel):
    deployment_blockers: List[TrackedIssue] = Field(default_factory=list)
    security_vulnerabilities: List[TrackedIssue] = Field(default_factory=list)
    functional_failures: List[TrackedIssue] = Field(default_factory=list)


class HighPriorityGroup(CamelModel):
    performance_bottlenecks: List[TrackedIssue] = Field(default_factory=list)
    security_concerns: List[TrackedIssue] = Field(default_factory=list)
    reliability_issues: List[TrackedIssue] = Field(default_factory=list)
    configuration_gaps: List[TrackedIssue] = Field(default_factory=list)


class MediumPriorityGroup(CamelModel):
    code_quality_issues: List[TrackedIssue] = Field(default_factory=list)
    performance_optimizations: List[TrackedIssue] = Field(default_factory=list)
    security_hardening: List[TrackedIssue] = Field(default_factory=list)
    configuration_improvements: List[TrackedIssue] = Field(default_factory=list)


class LowPriorityGroup(CamelModel):
    code_style_issues: List[TrackedIssue] = Field(default_factory=list)
    documentation_gaps: List[TrackedIssue] = Field(default_factory=list)
    future_enhancements: List[TrackedIssue] = Field(default_factory=list)


class PrioritizedIssueList(CamelModel):
    generation_timestamp: datetime
    prioritization_criteria: List[str] = Field(default_factory=list)
    ordered_issues: List[TrackedIssue] = Field(default_factory=list)
    critical_issues: CriticalIssueGroup
    high_priority_issues: HighPriorityGroup
    medium_priority_issues: MediumPriorityGroup
    low_priority_issues: LowPriorityGroup
    total_issue_count: int
    priority_distribution: Dict[IssueCategory, int]


class RemediationTask(CamelModel):
    task_id: str
    issue_id: str
    title: str
    description: str
    category: IssueCategory
    component: IssueComponent
    estimated_effort: int
    skills_required: List[str] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)
    deliverables: List[str] = Field(default_factory=list)
    acceptance_criteria: List[str] = Field(default_factory=list)
    testing_requirements: List[str] = Field(default_factory=list)


class IssueDependency(CamelModel):
    dependent_task_id: str
    prerequisite_task_id: str
    dependency_type: DependencyType
    description: str


class RemediationPhase(CamelModel):
    phase_id: str
    phase_name: str
    description: str
    tasks: List[RemediationTask] = Field(default_factory=list)
    estimated_duration: int
    dependencies: List[str] = Field(default_factory=list)
    deliverables: List[str] = Field(default_factory=list)
    success_criteria: List[str] = Field(default_factory=list)


class ResourceRequirements(CamelModel):
    development_hours: int
    testing_hours: float
    review_hours: float
    specialized_skills: List[str] = Field(default_factory=list)


class RoadmapRiskAssessment(CamelModel):
    implementation_risks: List[str] = Field(default_factory=list)
    dependency_risks: List[str] = Field(default_factory=list)
    timeline_risks: List[str] = Field(default_factory=list)
    mitigation_strategies: List[str] = Field(default_factory=list)


class RemediationMilestone(CamelModel):
    milestone_id: str
    name: str
    description: str
    target_date: Optional[datetime] = None
    deliverables: List[str] = Field(default_factory=list)
    success_criteria: List[str] = Field(default_factory=list)


class RemediationDeliverable(CamelModel):
    deliverable_id: str
    name: str
    phase: str
    description: str
    acceptance_criteria: List[str] = Field(default_factory=list)


class RemediationRoadmap(CamelModel):
    generation_timestamp: datetime
    roadmap_version: str
    execution_phases: List[RemediationPhase] = Field(default_factory=list)
    task_dependencies: List[IssueDependency] = Field(default_factory=list)
    total_estimated_effort: int
    critical_path_duration: int
    resource_requirements: ResourceRequirements
    risk_assessment: RoadmapRiskAssessment
    milestones: List[RemediationMilestone] = Field(default_factory=list)
    deliverables: List[RemediationDeliverable] = Field(default_factory=list)
    success_criteria: List[str] = Field(default_factory=list)


class PhaseTracking(CamelModel):
    phase_id: str
    phase_name: str
    status: PhaseStatus = PhaseStatus.NOT_STARTED
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    completion_percentage: float = 0.0
    tasks_completed: int = 0
    total_tasks: int
    current_task: Optional[str] = None
    blockers: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class TaskTracking(CamelModel):
    task_id: str
    phase_id: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    assignee: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    completion_percentage: float = 0.0
    actual_effort: float = 0.0
    remaining_effort: float
    blockers: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    last_updated: datetime


class IssueResolutionTracking(CamelModel):
    issue_id: str
    task_id: str
    status: IssueStatus = IssueStatus.OPEN
    resolution: Optional[str] = None
    resolution_date: Optional[datetime] = None
    verification_status: VerificationStatus = VerificationStatus.PENDING
    verification_date: Optional[datetime] = None
    reopen_count: int = 0
    last_updated: datetime


class OverallProgress(CamelModel):
    total_tasks: int
    completed_tasks: int = 0
    in_progress_tasks: int = 0
    blocked_tasks: int = 0
    overall_completion_percentage: float = 0.0
    estimated_completion_date: datetime
    actual_start_date: Optional[datetime] = None
    projected_end_date: Optional[datetime] = None


class QualityMetrics(CamelModel):
    defect_rate: float = 0.0
    rework_rate: float = 0.0
    test_pass_rate: float = 0.0


class ResourceUtilization(CamelModel):
    planned_hours: float
    actual_hours: float = 0.0
    efficiency: float = 0.0


class ProgressMetrics(CamelModel):
    velocity_tracking: List[Dict[str, Any]] = Field(default_factory=list)
    burndown_data: List[Dict[str, Any]] = Field(default_factory=list)
    quality_metrics: QualityMetrics = Field(default_factory=QualityMetrics)
    resource_utilization: ResourceUtilization


class ReportingSchedule(CamelModel):
    daily_standups: bool = True
    weekly_reports: bool = True
    milestone_reviews: bool = True
    stakeholder_updates: UpdateCadence = UpdateCadence.WEEKLY


class ProgressTracker(CamelModel):
    initialization_timestamp: datetime
    roadmap_version: str
    phase_tracking: List[PhaseTracking] = Field(default_factory=list)
    task_tracking: List[TaskTracking] = Field(default_factory=list)
    issue_resolution_tracking: List[IssueResolutionTracking] = Field(default_factory=list)
    overall_progress: OverallProgress
    metrics: ProgressMetrics
    reporting_schedule: ReportingSchedule = Field(default_factory=ReportingSchedule)


class IssueTracking(CamelModel):
    issue_database: IssueDatabase
    prioritized_issues: PrioritizedIssueList
    remediation_roadmap: RemediationRoadmap
    progress_tracker: ProgressTracker


# ---------------------------------------------------------------------------
# Deployment readiness
# ---------------------------------------------------------------------------
class DeploymentReadinessItem(CamelModel):
    id: str
    category: ChecklistCategory
    title: str
    description: str
    status: ChecklistStatus
    priority: ChecklistPriority
    evidence: List[str] = Field(default_factory=list)
    remediation: str
    validation_steps: List[str] = Field(default_factory=list)


class ChecklistSection(CamelModel):
    category: ChecklistCategory
    total_items: int
    completed_items: int
    critical_items: List[DeploymentReadinessItem] = Field(default_factory=list)
    missing_items: List[DeploymentReadinessItem] = Field(default_factory=list)
    items: List[DeploymentReadinessItem] = Field(default_factory=list)
    completeness_percentage: int
    overall_status: ChecklistStatus


class DeploymentReadinessChecklist(CamelModel):
    generation_timestamp: datetime
    validation_version: str
    execution_id: str
    configuration_completeness: ChecklistSection
    permission_validation: ChecklistSection
    build_configuration: ChecklistSection
    monitoring_setup: ChecklistSection
    overall_readiness: ChecklistStatus
    critical_missing_items: List[str] = Field(default_factory=list)
    recommended_actions: List[str] = Field(default_factory=list)
    deployment_risk: RiskLevel
    pre_deployment_tasks: List[str] = Field(default_factory=list)
    post_deployment_tasks: List[str] = Field(default_factory=list)
    rollback_procedures: List[str] = Field(default_factory=list)
    sign_off_requirements: List[str] = Field(default_factory=list)
    deployment_timeline: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Comprehensive report
# ---------------------------------------------------------------------------
class ReportMetadata(CamelModel):
    generation_timestamp: datetime
    validation_version: str
    execution_id: str
    report_version: str
    generated_by: str


class RiskAnalysis(CamelModel):
    overall_risk_level: RiskLevel
    security_risks: RiskDimension
    operational_risks: RiskDimension
    technical_risks: RiskDimension
    business_risks: RiskDimension
    risk_mitigation_plan: List[str] = Field(default_factory=list)
    contingency_plans: List[str] = Field(default_factory=list)


class RecommendationSummary(CamelModel):
    immediate_actions: List[str] = Field(default_factory=list)
    short_term_recommendations: List[str] = Field(default_factory=list)
    medium_term_recommendations: List[str] = Field(default_factory=list)
    long_term_recommendations: List[str] = Field(default_factory=list)
    strategic_recommendations: List[str] = Field(default_factory=list)


class ValidationCoverage(CamelModel):
    total_components: int
    analyzed_components: int
    coverage_percentage: int


class IssueStatistics(CamelModel):
    total_issues: int
    critical_issues: int
    high_priority_issues: int
    deployment_blockers: int
    security_issues: int
    performance_issues: int


class DeploymentReadinessStatistics(CamelModel):
    overall_readiness: ChecklistStatus
    configuration_completeness: int
    permission_readiness: int
    build_config_readiness: int
    monitoring_readiness: int
    critical_missing_items: int


class ValidationMetrics(CamelModel):
    execution_time: float
    confidence_level: Optional[ConfidenceTier] = None
    analysis_completeness: float
    validation_version: str


class ReportStatistics(CamelModel):
    validation_coverage: ValidationCoverage
    issue_statistics: IssueStatistics
    deployment_readiness: DeploymentReadinessStatistics
    validation_metrics: ValidationMetrics


class ComprehensiveValidationReport(CamelModel):
    report_metadata: ReportMetadata
    executive_summary: ExecutiveSummary
    technical_analysis: TechnicalAnalysisReport
    issue_tracking: IssueTracking
    deployment_readiness: DeploymentReadinessChecklist
    risk_analysis: RiskAnalysis
    recommendation_summary: RecommendationSummary
    next_steps: List[str] = Field(default_factory=list)
    report_statistics: ReportStatistics
