#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Structured Issue Tracker.

Builds the remediation backlog for a validation result in four steps:

    1. issue database   - flat issues plus issues derived from sub-analyses,
                          de-duplicated on (component, title) and enriched
    2. prioritized list - blockers, then category, then component criticality
    3. roadmap          - one task per issue, dependencies, three phases
    4. progress tracker - NOT_STARTED tracking for every phase, task, issue

Usage:
    from ble_readiness.reporting.issue_tracker import DefaultIssueTrackerGenerator

    tracker = DefaultIssueTrackerGenerator()
    issue_db = tracker.generate_issue_database(result)
    prioritized = tracker.generate_prioritized_issue_list(issue_db)
    roadmap = tracker.generate_remediation_roadmap(issue_db, prioritized)
    progress = tracker.generate_progress_tracker(roadmap)
"""

import logging
import math
import re
from datetime import timedelta
from typing import Dict, List, Optional, Sequence

from ble_readiness.models import (
    BLEValidationResult,
    BottleneckAnalysis,
    CodeRiskFinding,
    ConfigurationAudit,
    CriticalIssue,
    DatabaseAnalysis,
    EffortLevel,
    Evidence,
    EvidenceType,
    IssueCategory,
    IssueComponent,
    RiskLevel,
    Severity,
)
from ble_readiness.report_models import (
    CriticalIssueGroup,
    DependencyType,
    HighPriorityGroup,
    IssueDatabase,
    IssueDatabaseMetadata,
    IssueDependency,
    IssueResolutionTracking,
    LowPriorityGroup,
    MediumPriorityGroup,
    OverallProgress,
    PhaseTracking,
    PrioritizedIssueList,
    ProgressMetrics,
    ProgressTracker,
    RemediationDeliverable,
    RemediationMilestone,
    RemediationPhase,
    RemediationRoadmap,
    RemediationTask,
    ResourceRequirements,
    ResourceUtilization,
    RoadmapRiskAssessment,
    TaskTracking,
    TrackedIssue,
)
from ble_readiness.reporting.base import Clock, IssueTrackerGenerator, percent, utc_now

logger = logging.getLogger("ble_readiness.reporting.issue_tracker")

ROADMAP_VERSION = "1.0"
HOURS_PER_WEEK = 40
RELATED_ISSUE_LIMIT = 3

EFFORT_HOURS: Dict[EffortLevel, int] = {
    EffortLevel.LOW: 4,
    EffortLevel.MEDIUM: 16,
    EffortLevel.HIGH: 40,
}

CATEGORY_ORDER: Dict[IssueCategory, int] = {
    IssueCategory.CRITICAL: 0,
    IssueCategory.HIGH: 1,
    IssueCategory.MEDIUM: 2,
    IssueCategory.LOW: 3,
}

COMPONENT_ORDER: Dict[IssueComponent, int] = {
    IssueComponent.SECURITY: 0,
    IssueComponent.DATABASE: 1,
    IssueComponent.NATIVE: 2,
    IssueComponent.BRIDGE: 3,
    IssueComponent.PERFORMANCE: 4,
    IssueComponent.CONFIG: 5,
}

TRACKER_IMPACT_SUMMARIES: Dict[IssueCategory, str] = {
    IssueCategory.CRITICAL: "Prevents system functionality or creates severe security vulnerabilities",
    IssueCategory.HIGH: "Significantly impacts user experience, system reliability, or security",
    IssueCategory.MEDIUM: "Moderate impact on functionality, performance, or maintainability",
    IssueCategory.LOW: "Minor impact on code quality, documentation, or future enhancements",
}

TRACKER_REMEDIATION_SUMMARIES: Dict[EffortLevel, str] = {
    EffortLevel.LOW: "Quick fix - can be resolved in 1-4 hours with minimal testing",
    EffortLevel.MEDIUM: "Moderate effort - requires 1-3 days of development and testing",
    EffortLevel.HIGH: "Significant effort - requires 1+ weeks of development, testing, and validation",
}

COMPONENT_SKILLS: Dict[IssueComponent, List[str]] = {
    IssueComponent.NATIVE: ["iOS/Swift Development", "Android/Kotlin Development", "BLE Protocol Knowledge"],
    IssueComponent.BRIDGE: ["React Native Development", "JavaScript/TypeScript", "Native Module Integration"],
    IssueComponent.DATABASE: ["PostgreSQL/Supabase", "SQL Development", "Database Security"],
    IssueComponent.SECURITY: ["Security Analysis", "Penetration Testing", "Cryptography"],
    IssueComponent.PERFORMANCE: ["Performance Optimization", "Load Testing", "System Architecture"],
    IssueComponent.CONFIG: ["DevOps", "Configuration Management", "Deployment Automation"],
}

COMPONENT_TESTING: Dict[IssueComponent, List[str]] = {
    IssueComponent.SECURITY: [
        "Security testing and vulnerability scanning",
        "Penetration testing of affected components",
    ],
    IssueComponent.PERFORMANCE: [
        "Performance testing under load",
        "Resource utilization monitoring",
    ],
    IssueComponent.NATIVE: [
        "Platform-specific testing on iOS and Android",
        "Memory leak detection and profiling",
    ],
}

COMPONENT_DELIVERABLES: Dict[IssueComponent, List[str]] = {
    IssueComponent.SECURITY: ["Security analysis report", "Updated security documentation"],
    IssueComponent.PERFORMANCE: ["Performance test results", "Optimization recommendations"],
}

PRIORITIZATION_CRITERIA = [
    "Deployment blocking issues receive highest priority",
    "Security vulnerabilities are prioritized by severity",
    "Functional failures are prioritized over performance issues",
    "Issues affecting multiple components receive higher priority",
    "Issues with clear remediation paths are prioritized for quick wins",
]

FUNCTIONAL_COMPONENTS = (IssueComponent.NATIVE, IssueComponent.BRIDGE, IssueComponent.DATABASE)
CODE_COMPONENTS = (IssueComponent.NATIVE, IssueComponent.BRIDGE)


# ---------------------------------------------------------------------------
# Issue extraction
# ---------------------------------------------------------------------------
def _effort_for_severity(severity: str) -> EffortLevel:
    if severity in ("HIGH", "CRITICAL"):
        return EffortLevel.HIGH
    if severity == "MEDIUM":
        return EffortLevel.MEDIUM
    return EffortLevel.LOW


def _code_risk_issues(
    findings: Sequence[CodeRiskFinding], id_prefix: str, title_prefix: str, impact: str,
    component: IssueComponent = IssueComponent.NATIVE,
) -> List[CriticalIssue]:
    issues = []
    for index, finding in enumerate(findings):
        high = finding.severity == RiskLevel.HIGH
        issues.append(CriticalIssue(
            id=f"{id_prefix}-{index}",
            category=IssueCategory.HIGH if high else IssueCategory.MEDIUM,
            component=component,
            title=f"{title_prefix}: {finding.type}",
            description=finding.description,
            impact=impact,
            evidence=[Evidence(
                type=EvidenceType.CODE_REFERENCE,
                location=finding.location,
                details=finding.description,
                severity=Severity(finding.severity.value),
            )],
            recommendation=finding.recommendation,
            estimated_effort=_effort_for_severity(finding.severity.value),
            deployment_blocker=high,
        ))
    return issues


def _memory_leak_issues(findings: Sequence[CodeRiskFinding], platform: str) -> List[CriticalIssue]:
    return _code_risk_issues(
        findings,
        id_prefix=f"memory-leak-{platform.lower()}",
        title_prefix=f"{platform} Memory Leak Risk",
        impact=f"Potential memory leak in {platform} native module could cause app crashes "
               f"or performance degradation",
    )


def _threading_issues(findings: Sequence[CodeRiskFinding], platform: str) -> List[CriticalIssue]:
    return _code_risk_issues(
        findings,
        id_prefix=f"threading-{platform.lower()}",
        title_prefix=f"{platform} Threading Issue",
        impact=f"Threading issue in {platform} could cause race conditions or deadlocks",
    )


def _race_condition_issues(findings: Sequence[CodeRiskFinding]) -> List[CriticalIssue]:
    issues = []
    for index, finding in enumerate(findings):
        high = finding.severity == RiskLevel.HIGH
        issues.append(CriticalIssue(
            id=f"race-condition-{index}",
            category=IssueCategory.CRITICAL if high else IssueCategory.HIGH,
            component=IssueComponent.BRIDGE,
            title=f"Race Condition Risk: {finding.type}",
            description=finding.description,
            impact="Race condition could cause unpredictable behavior or data corruption",
            evidence=[Evidence(
                type=EvidenceType.CODE_REFERENCE,
                location=finding.location,
                details=finding.description,
                severity=Severity(finding.severity.value),
            )],
            recommendation=finding.recommendation,
            estimated_effort=EffortLevel.MEDIUM,
            deployment_blocker=high,
        ))
    return issues


def _security_finding(location: str, details: str, severity: str) -> Evidence:
    return Evidence(
        type=EvidenceType.SECURITY_FINDING,
        location=location,
        details=details,
        severity=Severity(severity),
    )


def _database_issues(database: DatabaseAnalysis) -> List[CriticalIssue]:
    issues = []
    audit = database.security_audit
    if audit is not None:
        for index, risk in enumerate(audit.sql_injection_risks):
            issues.append(CriticalIssue(
                id=f"sql-injection-{index}",
                category=IssueCategory.CRITICAL,
                component=IssueComponent.SECURITY,
                title=f"SQL Injection Risk: {risk.location}",
                description=risk.description,
                impact="SQL injection vulnerability could allow unauthorized data access",
                evidence=[_security_finding(risk.location, risk.description, "CRITICAL")],
                recommendation=risk.recommendation,
                estimated_effort=EffortLevel.HIGH,
                deployment_blocker=True,
            ))
        for index, risk in enumerate(audit.rls_bypass_risks):
            issues.append(CriticalIssue(
                id=f"rls-bypass-{index}",
                category=IssueCategory.CRITICAL,
                component=IssueComponent.SECURITY,
                title=f"RLS Bypass Risk: {risk.policy_name}",
                description=risk.description,
                impact="RLS bypass could allow cross-organization data access",
                evidence=[_security_finding(risk.policy_name, risk.description, "CRITICAL")],
                recommendation=risk.recommendation,
                estimated_effort=EffortLevel.HIGH,
                deployment_blocker=True,
            ))

    for index, function in enumerate(database.function_validation or []):
        for vuln_index, vuln in enumerate(function.security_vulnerabilities):
            issues.append(CriticalIssue(
                id=f"function-vuln-{index}-{vuln_index}",
                category=vuln.severity,
                component=IssueComponent.DATABASE,
                title=f"Database Function Vulnerability: {vuln.type}",
                description=vuln.description,
                impact="Database function vulnerability could compromise data security",
                evidence=[_security_finding(vuln.location, vuln.description, vuln.severity.value)],
                recommendation=vuln.recommendation,
                estimated_effort=_effort_for_severity(vuln.severity.value),
                deployment_blocker=vuln.severity == IssueCategory.CRITICAL,
            ))
    return issues


def _bottleneck_issues(analysis: BottleneckAnalysis) -> List[CriticalIssue]:
    issues = []
    for group, bottlenecks in analysis.grouped():
        for index, bottleneck in enumerate(bottlenecks):
            high = bottleneck.impact == RiskLevel.HIGH
            issues.append(CriticalIssue(
                id=f"bottleneck-{group}-{index}",
                category=IssueCategory.HIGH if high else IssueCategory.MEDIUM,
                component=IssueComponent.PERFORMANCE,
                title=f"Performance Bottleneck: {bottleneck.component}",
                description=bottleneck.description,
                impact="Performance bottleneck could impact system scalability and user experience",
                evidence=[Evidence(
                    type=EvidenceType.PERFORMANCE_METRIC,
                    location=bottleneck.component,
                    details=bottleneck.description,
                    severity=Severity(bottleneck.impact.value),
                )],
                recommendation=bottleneck.recommendation,
                estimated_effort=EffortLevel.HIGH if high else EffortLevel.MEDIUM,
                deployment_blocker=False,
            ))
    return issues


def _missing_config_issues(audit: ConfigurationAudit) -> List[CriticalIssue]:
    readiness = audit.deployment_readiness
    if readiness is None:
        return []
    return [
        CriticalIssue(
            id=f"config-missing-{index}",
            category=IssueCategory.HIGH,
            component=IssueComponent.CONFIG,
            title=f"Missing Configuration: {item}",
            description=f"Required configuration item is missing: {item}",
            impact="Missing configuration could prevent proper deployment or functionality",
            evidence=[Evidence(
                type=EvidenceType.CONFIG_ISSUE,
                location="Configuration Files",
                details=f"Missing: {item}",
                severity=Severity.HIGH,
            )],
            recommendation=f"Add required configuration for {item}",
            estimated_effort=EffortLevel.LOW,
            deployment_blocker=True,
        )
        for index, item in enumerate(readiness.critical_missing_items)
    ]


def extract_all_issues(result: BLEValidationResult) -> List[CriticalIssue]:
    """Flat issues followed by derived issues, first occurrence kept."""
    issues: List[CriticalIssue] = list(result.critical_issues)

    native = result.native_module_analysis
    if native is not None:
        if native.ios is not None:
            issues.extend(_memory_leak_issues(native.ios.memory_leak_risks, "iOS"))
            issues.extend(_threading_issues(native.ios.threading_issues, "iOS"))
        if native.android is not None:
            issues.extend(_memory_leak_issues(native.android.memory_leak_risks, "Android"))
            issues.extend(_threading_issues(native.android.threading_issues, "Android"))

    bridge = result.bridge_layer_analysis
    if bridge is not None and bridge.ble_context is not None:
        issues.extend(_race_condition_issues(bridge.ble_context.race_condition_risks))
        issues.extend(_memory_leak_issues(bridge.ble_context.memory_leak_risks, "BLEContext"))

    if result.database_analysis is not None:
        issues.extend(_database_issues(result.database_analysis))

    performance = result.performance_analysis
    if performance is not None and performance.bottleneck_analysis is not None:
        issues.extend(_bottleneck_issues(performance.bottleneck_analysis))

    if result.configuration_audit is not None:
        issues.extend(_missing_config_issues(result.configuration_audit))

    return deduplicate_issues(issues)


def deduplicate_issues(issues: Sequence[CriticalIssue]) -> List[CriticalIssue]:
    seen = set()
    unique = []
    for issue in issues:
        key = (issue.component, issue.title)
        if key in seen:
            continue
        seen.add(key)
        unique.append(issue)
    return unique


# ---------------------------------------------------------------------------
# Enrichment
# ---------------------------------------------------------------------------
def _related_issue_ids(issue: CriticalIssue, issues: Sequence[CriticalIssue]) -> List[str]:
    locations = {e.location for e in issue.evidence if e.location}
    related = [
        other.id for other in issues
        if other.id != issue.id and (
            other.component == issue.component
            or any(e.location in locations for e in other.evidence)
        )
    ]
    return related[:RELATED_ISSUE_LIMIT]


def testing_requirements(issue: CriticalIssue) -> List[str]:
    return COMPONENT_TESTING.get(issue.component, []) + [
        "Regression testing of affected functionality",
        "End-to-end workflow validation",
    ]


def validation_criteria(issue: CriticalIssue) -> List[str]:
    criteria = [
        "Issue reproduction steps no longer trigger the problem",
        "All related test cases pass successfully",
    ]
    if issue.deployment_blocker:
        criteria.append("Deployment readiness checklist items are satisfied")
    if issue.component == IssueComponent.SECURITY:
        criteria.append("Security scan shows no vulnerabilities in affected area")
    if issue.component == IssueComponent.PERFORMANCE:
        criteria.append("Performance metrics meet or exceed baseline requirements")
    criteria.append("Code review approval from senior developer")
    criteria.append("Documentation updated to reflect changes")
    return criteria


def enrich_issue(issue: CriticalIssue, issues: Sequence[CriticalIssue]) -> TrackedIssue:
    fields = issue.model_dump()
    fields.update(
        impact_summary=TRACKER_IMPACT_SUMMARIES[issue.category],
        remediation_summary=TRACKER_REMEDIATION_SUMMARIES[issue.estimated_effort],
        related_issues=_related_issue_ids(issue, issues),
        testing_requirements=testing_requirements(issue),
        validation_criteria=validation_criteria(issue),
    )
    return TrackedIssue(**fields)


def critical_path(issues: Sequence[TrackedIssue]) -> List[str]:
    """Blockers and CRITICAL security issues, each once, most severe first."""
    on_path: Dict[str, TrackedIssue] = {}
    for issue in issues:
        blocking_security = (
            issue.component == IssueComponent.SECURITY and issue.category == IssueCategory.CRITICAL
        )
        if issue.deployment_blocker or blocking_security:
            on_path.setdefault(issue.id, issue)
    ordered = sorted(on_path.values(), key=lambda i: CATEGORY_ORDER[i.category])
    return [i.id for i in ordered]


def prioritize_issues(issues: Sequence[TrackedIssue]) -> List[TrackedIssue]:
    return sorted(issues, key=lambda i: (
        not i.deployment_blocker,
        CATEGORY_ORDER[i.category],
        COMPONENT_ORDER[i.component],
    ))


# ---------------------------------------------------------------------------
# Roadmap helpers
# ---------------------------------------------------------------------------
def _task_deliverables(issue: TrackedIssue) -> List[str]:
    return (
        ["Code changes implementing the fix"]
        + COMPONENT_DELIVERABLES.get(issue.component, [])
        + ["Unit tests covering the fix", "Integration test validation", "Code review approval"]
    )


def identify_dependencies(tasks: Sequence[RemediationTask]) -> List[IssueDependency]:
    """Security before performance; CRITICAL before the rest of a component."""
    dependencies = []
    security = [t for t in tasks if t.component == IssueComponent.SECURITY]
    performance = [t for t in tasks if t.component == IssueComponent.PERFORMANCE]
    for prerequisite in security:
        for dependent in performance:
            dependencies.append(IssueDependency(
                dependent_task_id=dependent.task_id,
                prerequisite_task_id=prerequisite.task_id,
                dependency_type=DependencyType.SECURITY_FIRST,
                description="Security issues must be resolved before performance optimizations",
            ))

    critical = [t for t in tasks if t.category == IssueCategory.CRITICAL]
    others = [t for t in tasks if t.category != IssueCategory.CRITICAL]
    for prerequisite in critical:
        for dependent in others:
            if prerequisite.component == dependent.component:
                dependencies.append(IssueDependency(
                    dependent_task_id=dependent.task_id,
                    prerequisite_task_id=prerequisite.task_id,
                    dependency_type=DependencyType.PRIORITY_ORDER,
                    description="Critical issues in same component must be resolved first",
                ))
    return dependencies


_PHASES = [
    {
        "phase_id": "phase-1",
        "phase_name": "Critical Security and Deployment Blockers",
        "description": "Resolve all critical security vulnerabilities and deployment blocking issues",
        "dependencies": [],
        "deliverables": ["Security vulnerabilities resolved", "Deployment blockers cleared"],
        "success_criteria": [
            "All critical issues resolved", "Security scan passes", "Deployment readiness achieved",
        ],
    },
    {
        "phase_id": "phase-2",
        "phase_name": "High Priority Functional Issues",
        "description": "Address high priority functional and reliability issues",
        "dependencies": ["phase-1"],
        "deliverables": ["Functional issues resolved", "System reliability improved"],
        "success_criteria": ["All high priority issues resolved", "System stability validated"],
    },
    {
        "phase_id": "phase-3",
        "phase_name": "Performance and Quality Improvements",
        "description": "Implement performance optimizations and code quality improvements",
        "dependencies": ["phase-2"],
        "deliverables": ["Performance optimizations implemented", "Code quality improved"],
        "success_criteria": ["Performance targets met", "Code quality standards achieved"],
    },
]


def _phase_index(task: RemediationTask) -> int:
    # Every SECURITY task lands in phase 1, so later phases exclude them.
    if task.category == IssueCategory.CRITICAL or task.component == IssueComponent.SECURITY:
        return 0
    if task.category == IssueCategory.HIGH:
        return 1
    return 2


def organize_phases(tasks: Sequence[RemediationTask]) -> List[RemediationPhase]:
    buckets: List[List[RemediationTask]] = [[] for _ in _PHASES]
    for task in tasks:
        buckets[_phase_index(task)].append(task)
    return [
        RemediationPhase(
            tasks=bucket,
            estimated_duration=sum(t.estimated_effort for t in bucket),
            **entry,
        )
        for entry, bucket in zip(_PHASES, buckets)
    ]


def _slug(text: str) -> str:
    return re.sub(r"\s+", "-", text.lower())


IMPLEMENTATION_RISKS = [
    "Complex security fixes may introduce new vulnerabilities",
    "Performance optimizations may affect system stability",
    "Native module changes require extensive testing on both platforms",
    "Database changes may require migration strategies",
]
DEPENDENCY_RISKS = [
    "Dependency chains may extend timeline if prerequisites are delayed",
    "Parallel work may be limited by dependency constraints",
    "Changes to prerequisite tasks may impact dependent tasks",
]
TIMELINE_RISKS = [
    "Effort estimates may be optimistic for complex issues",
    "Testing and validation may take longer than expected",
    "Integration issues may emerge during implementation",
    "Resource availability may impact timeline",
]
ROADMAP_MITIGATION_STRATEGIES = [
    "Implement comprehensive testing strategy for all changes",
    "Conduct regular code reviews and security assessments",
    "Maintain rollback procedures for all deployments",
    "Establish clear communication channels for issue escalation",
    "Plan for additional buffer time in critical path activities",
]
ROADMAP_SUCCESS_CRITERIA = [
    "All critical and high priority issues resolved",
    "Security vulnerabilities eliminated",
    "System passes all validation tests",
    "Performance meets or exceeds requirements",
    "Deployment readiness achieved",
    "Documentation updated and complete",
    "Team trained on changes and new procedures",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
class DefaultIssueTrackerGenerator(IssueTrackerGenerator):
    """Default issue tracker; timestamps come from ``clock``."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or utc_now

    def generate_issue_database(self, result: BLEValidationResult) -> IssueDatabase:
        raw = extract_all_issues(result)
        issues = [enrich_issue(issue, raw) for issue in raw]
        logger.debug("Issue database: %d issue(s) after de-duplication", len(issues))

        return IssueDatabase(
            execution_id=result.execution_id,
            generation_timestamp=self.clock(),
            total_issue_count=len(issues),
            issues_by_category={c: [i for i in issues if i.category == c] for c in IssueCategory},
            issues_by_severity={c: sum(1 for i in issues if i.category == c) for c in IssueCategory},
            issues_by_component={c: sum(1 for i in issues if i.component == c) for c in IssueComponent},
            all_issues=issues,
            deployment_blockers=[i for i in issues if i.deployment_blocker],
            critical_path=critical_path(issues),
            metadata=IssueDatabaseMetadata(
                validation_version=result.validation_version,
                analysis_completeness=result.analysis_completeness() * 100,
                confidence_level=result.confidence_level,
            ),
        )

    def generate_prioritized_issue_list(self, issue_db: IssueDatabase) -> PrioritizedIssueList:
        ordered = prioritize_issues(issue_db.all_issues)

        def pick(category: IssueCategory, components=None, predicate=None) -> List[TrackedIssue]:
            return [
                i for i in ordered
                if i.category == category
                and (components is None or i.component in components)
                and (predicate is None or predicate(i))
            ]

        def mentions_documentation(issue: TrackedIssue) -> bool:
            return "documentation" in issue.title.lower()

        return PrioritizedIssueList(
            generation_timestamp=self.clock(),
            prioritization_criteria=list(PRIORITIZATION_CRITERIA),
            ordered_issues=ordered,
            critical_issues=CriticalIssueGroup(
                deployment_blockers=pick(IssueCategory.CRITICAL, predicate=lambda i: i.deployment_blocker),
                security_vulnerabilities=pick(IssueCategory.CRITICAL, (IssueComponent.SECURITY,)),
                functional_failures=pick(IssueCategory.CRITICAL, FUNCTIONAL_COMPONENTS),
            ),
            high_priority_issues=HighPriorityGroup(
                performance_bottlenecks=pick(IssueCategory.HIGH, (IssueComponent.PERFORMANCE,)),
                security_concerns=pick(IssueCategory.HIGH, (IssueComponent.SECURITY,)),
                reliability_issues=pick(IssueCategory.HIGH, FUNCTIONAL_COMPONENTS),
                configuration_gaps=pick(IssueCategory.HIGH, (IssueComponent.CONFIG,)),
            ),
            medium_priority_issues=MediumPriorityGroup(
                code_quality_issues=pick(IssueCategory.MEDIUM, CODE_COMPONENTS),
                performance_optimizations=pick(IssueCategory.MEDIUM, (IssueComponent.PERFORMANCE,)),
                security_hardening=pick(IssueCategory.MEDIUM, (IssueComponent.SECURITY,)),
                configuration_improvements=pick(IssueCategory.MEDIUM, (IssueComponent.CONFIG,)),
            ),
            low_priority_issues=LowPriorityGroup(
                code_style_issues=pick(IssueCategory.LOW, CODE_COMPONENTS),
                documentation_gaps=pick(IssueCategory.LOW, predicate=mentions_documentation),
                future_enhancements=pick(IssueCategory.LOW, predicate=lambda i: not mentions_documentation(i)),
            ),
            total_issue_count=len(ordered),
            priority_distribution={
                c: percent(sum(1 for i in ordered if i.category == c), len(ordered)) for c in IssueCategory
            },
        )

    def generate_remediation_roadmap(
        self, issue_db: IssueDatabase, prioritized: PrioritizedIssueList
    ) -> RemediationRoadmap:
        drafts = [
            RemediationTask(
                task_id=f"task-{issue.id}",
                issue_id=issue.id,
                title=f"Resolve: {issue.title}",
                description=issue.description,
                category=issue.category,
                component=issue.component,
                estimated_effort=EFFORT_HOURS[issue.estimated_effort],
                skills_required=list(COMPONENT_SKILLS[issue.component]),
                deliverables=_task_deliverables(issue),
                acceptance_criteria=list(issue.validation_criteria),
                testing_requirements=list(issue.testing_requirements),
            )
            for issue in issue_db.all_issues
        ]
        dependencies = identify_dependencies(drafts)
        tasks = [
            task.model_copy(update={"dependencies": [
                d.prerequisite_task_id for d in dependencies if d.dependent_task_id == task.task_id
            ]})
            for task in drafts
        ]
        phases = organize_phases(tasks)

        development_hours = sum(t.estimated_effort for t in tasks)
        skills: List[str] = []
        for task in tasks:
            skills.extend(s for s in task.skills_required if s not in skills)

        logger.debug(
            "Roadmap: %d task(s), %d dependency edge(s), %dh development",
            len(tasks), len(dependencies), development_hours,
        )
        return RemediationRoadmap(
            generation_timestamp=self.clock(),
            roadmap_version=ROADMAP_VERSION,
            execution_phases=phases,
            task_dependencies=dependencies,
            total_estimated_effort=development_hours,
            critical_path_duration=sum(p.estimated_duration for p in phases),
            resource_requirements=ResourceRequirements(
                development_hours=development_hours,
                testing_hours=development_hours * 0.5,
                review_hours=development_hours * 0.2,
                specialized_skills=skills,
            ),
            risk_assessment=RoadmapRiskAssessment(
                implementation_risks=list(IMPLEMENTATION_RISKS),
                dependency_risks=list(DEPENDENCY_RISKS),
                timeline_risks=list(TIMELINE_RISKS),
                mitigation_strategies=list(ROADMAP_MITIGATION_STRATEGIES),
            ),
            milestones=[
                RemediationMilestone(
                    milestone_id=f"milestone-{phase.phase_id}",
                    name=f"{phase.phase_name} Complete",
                    description=f"All tasks in {phase.phase_name} have been completed and validated",
                    deliverables=list(phase.deliverables),
                    success_criteria=list(phase.success_criteria),
                )
                for phase in phases
            ],
            deliverables=[
                RemediationDeliverable(
                    deliverable_id=f"{phase.phase_id}-{_slug(deliverable)}",
                    name=deliverable,
                    phase=phase.phase_name,
                    description=f"Deliverable for {phase.phase_name}: {deliverable}",
                    acceptance_criteria=[
                        f"{deliverable} meets quality standards",
                        f"{deliverable} passes validation tests",
                    ],
                )
                for phase in phases
                for deliverable in phase.deliverables
            ],
            success_criteria=list(ROADMAP_SUCCESS_CRITERIA),
        )

    def generate_progress_tracker(self, roadmap: RemediationRoadmap) -> ProgressTracker:
        now = self.clock()
        weeks = math.ceil(roadmap.total_estimated_effort / HOURS_PER_WEEK)
        phase_tasks = [(phase, task) for phase in roadmap.execution_phases for task in phase.tasks]

        return ProgressTracker(
            initialization_timestamp=now,
            roadmap_version=roadmap.roadmap_version,
            phase_tracking=[
                PhaseTracking(phase_id=p.phase_id, phase_name=p.phase_name, total_tasks=len(p.tasks))
                for p in roadmap.execution_phases
            ],
            task_tracking=[
                TaskTracking(
                    task_id=task.task_id,
                    phase_id=phase.phase_id,
                    remaining_effort=task.estimated_effort,
                    last_updated=now,
                )
                for phase, task in phase_tasks
            ],
            issue_resolution_tracking=[
                IssueResolutionTracking(issue_id=task.issue_id, task_id=task.task_id, last_updated=now)
                for _, task in phase_tasks
            ],
            overall_progress=OverallProgress(
                total_tasks=len(phase_tasks),
                estimated_completion_date=now + timedelta(weeks=weeks),
            ),
            metrics=ProgressMetrics(
                resource_utilization=ResourceUtilization(
                    planned_hours=roadmap.resource_requirements.development_hours,
                ),
            ),
        )
