#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Executive Summary Engine.

Reduces a full validation result to the stakeholder view: six component
scores, a PASS/CONDITIONAL/FAIL health rating, the top critical issues, a
Go/No-Go recommendation, a summary-level risk assessment and a confidence
level. Every function here is total over the typed input; a missing
component analysis scores 0 and forces FAIL.

Usage:
    from ble_readiness.reporting.executive_summary import ExecutiveSummaryEngine

    summary = ExecutiveSummaryEngine().generate_executive_summary(result)
    print(summary.go_no_go_recommendation.recommendation)
"""

import logging
from typing import Dict, List, Optional, Sequence

from ble_readiness.config import ReportConfig, build_report_config
from ble_readiness.models import (
    BLEValidationResult,
    ConfidenceTier,
    ConfigReadiness,
    CriticalIssue,
    EffortLevel,
    IssueCategory,
    IssueComponent,
    PerformanceTier,
    QualityTier,
    Rating,
    RiskLevel,
    SecurityTier,
)
from ble_readiness.report_models import (
    ComponentScores,
    ConfidenceLevel,
    ExecutiveSummary,
    GoNoGo,
    GoNoGoRecommendation,
    RiskAssessment,
    RiskDimension,
    SystemHealthRating,
)

logger = logging.getLogger("ble_readiness.reporting.executive_summary")


# ---------------------------------------------------------------------------
# Scoring tables (one entry per enum member)
# ---------------------------------------------------------------------------
NATIVE_RATING_SCORES: Dict[Rating, float] = {
    Rating.PASS: 1.0,
    Rating.CONDITIONAL: 0.7,
    Rating.FAIL: 0.0,
}

BRIDGE_QUALITY_SCORES: Dict[QualityTier, float] = {
    QualityTier.EXCELLENT: 1.0,
    QualityTier.GOOD: 0.8,
    QualityTier.NEEDS_IMPROVEMENT: 0.6,
    QualityTier.POOR: 0.3,
}

SECURITY_TIER_SCORES: Dict[SecurityTier, float] = {
    SecurityTier.SECURE: 1.0,
    SecurityTier.MODERATE: 0.7,
    SecurityTier.VULNERABLE: 0.3,
}

PERFORMANCE_TIER_SCORES: Dict[PerformanceTier, float] = {
    PerformanceTier.EXCELLENT: 1.0,
    PerformanceTier.GOOD: 0.8,
    PerformanceTier.ACCEPTABLE: 0.6,
    PerformanceTier.POOR: 0.3,
}

CONFIG_READINESS_SCORES: Dict[ConfigReadiness, float] = {
    ConfigReadiness.READY: 1.0,
    ConfigReadiness.NEEDS_CONFIGURATION: 0.7,
    ConfigReadiness.MISSING_CRITICAL: 0.3,
}

# Score used when a table's tier is not reported.
UNKNOWN_NATIVE_SCORE = 0.0
UNKNOWN_BRIDGE_QUALITY_SCORE = 0.0
UNKNOWN_SECURITY_TIER_SCORE = 0.3
UNKNOWN_PERFORMANCE_SCORE = 0.5
UNKNOWN_CONFIG_SCORE = 0.5

CATEGORY_WEIGHTS: Dict[IssueCategory, int] = {
    IssueCategory.CRITICAL: 4,
    IssueCategory.HIGH: 3,
    IssueCategory.MEDIUM: 2,
    IssueCategory.LOW: 1,
}

IMPACT_SUMMARIES: Dict[IssueCategory, str] = {
    IssueCategory.CRITICAL: "Prevents system functionality or creates security vulnerabilities",
    IssueCategory.HIGH: "Significantly impacts user experience or system reliability",
    IssueCategory.MEDIUM: "Moderate impact on functionality or performance",
    IssueCategory.LOW: "Minor impact on code quality or maintainability",
}

REMEDIATION_SUMMARIES: Dict[EffortLevel, str] = {
    EffortLevel.LOW: "Quick fix - can be resolved in 1-2 hours",
    EffortLevel.MEDIUM: "Moderate effort - requires 1-2 days of development",
    EffortLevel.HIGH: "Significant effort - requires 1+ weeks of development",
}

FUNCTIONAL_COMPONENTS = (IssueComponent.NATIVE, IssueComponent.BRIDGE, IssueComponent.DATABASE)

_CONFIDENCE_FACTORS: Dict[ConfidenceTier, List[str]] = {
    ConfidenceTier.HIGH: [
        "Comprehensive validation coverage",
        "Consistent results across components",
        "Thorough testing of critical paths",
    ],
    ConfidenceTier.MEDIUM: [
        "Good validation coverage with minor gaps",
        "Generally consistent results",
        "Most critical functionality tested",
    ],
    ConfidenceTier.LOW: [
        "Limited validation coverage",
        "Inconsistent or incomplete results",
        "Significant testing gaps identified",
    ],
}


def _tier_score(table: dict, tier, unknown: float) -> float:
    if tier is None:
        return unknown
    return table.get(tier, unknown)


# ---------------------------------------------------------------------------
# Component scoring
# ---------------------------------------------------------------------------
def score_native_modules(result: BLEValidationResult) -> float:
    """Mean of the iOS and Android rating scores; 0 if either is missing."""
    native = result.native_module_analysis
    if native is None or native.ios is None or native.android is None:
        return 0.0
    ios = _tier_score(NATIVE_RATING_SCORES, native.ios.overall_rating, UNKNOWN_NATIVE_SCORE)
    android = _tier_score(NATIVE_RATING_SCORES, native.android.overall_rating, UNKNOWN_NATIVE_SCORE)
    return (ios + android) / 2


def score_bridge_layer(result: BLEValidationResult) -> float:
    """Mean of the BLE context quality and BLE helper security scores."""
    bridge = result.bridge_layer_analysis
    if bridge is None:
        return 0.0
    quality = bridge.ble_context.overall_quality if bridge.ble_context else None
    security = bridge.ble_helper.overall_security if bridge.ble_helper else None
    quality_score = _tier_score(BRIDGE_QUALITY_SCORES, quality, UNKNOWN_BRIDGE_QUALITY_SCORE)
    security_score = _tier_score(SECURITY_TIER_SCORES, security, UNKNOWN_SECURITY_TIER_SCORE)
    return (quality_score + security_score) / 2


def score_database(result: BLEValidationResult) -> float:
    """Mean of the function-validation and security-audit scores.

    Function validation scores 1 only when it was reported and every
    function is SECURE (an empty list qualifies); otherwise 0.7.
    """
    database = result.database_analysis
    if database is None:
        return 0.0
    functions = database.function_validation
    if functions is not None and all(f.overall_rating == SecurityTier.SECURE for f in functions):
        function_score = 1.0
    else:
        function_score = 0.7
    rating = database.security_audit.overall_security_rating if database.security_audit else None
    security_score = _tier_score(SECURITY_TIER_SCORES, rating, UNKNOWN_SECURITY_TIER_SCORE)
    return (function_score + security_score) / 2


def score_security(result: BLEValidationResult) -> float:
    """Score from SECURITY-tagged issues: 0 on any CRITICAL one."""
    security_issues = [i for i in result.critical_issues if i.component == IssueComponent.SECURITY]
    if any(i.category == IssueCategory.CRITICAL for i in security_issues):
        return 0.0
    if not security_issues:
        return 1.0
    return max(0.3, 1 - len(security_issues) * 0.2)


def score_performance(result: BLEValidationResult) -> float:
    performance = result.performance_analysis
    if performance is None:
        return 0.0
    assessment = performance.scalability_assessment
    tier = assessment.overall_performance if assessment else None
    return _tier_score(PERFORMANCE_TIER_SCORES, tier, UNKNOWN_PERFORMANCE_SCORE)


def score_configuration(result: BLEValidationResult) -> float:
    audit = result.configuration_audit
    if audit is None:
        return 0.0
    readiness = audit.deployment_readiness.overall_readiness if audit.deployment_readiness else None
    return _tier_score(CONFIG_READINESS_SCORES, readiness, UNKNOWN_CONFIG_SCORE)


def score_components(result: BLEValidationResult) -> ComponentScores:
    return ComponentScores(
        native_modules=score_native_modules(result),
        bridge_layer=score_bridge_layer(result),
        database=score_database(result),
        security=score_security(result),
        performance=score_performance(result),
        configuration=score_configuration(result),
    )


# ---------------------------------------------------------------------------
# Health rating
# ---------------------------------------------------------------------------
def rate_system_health(scores: ComponentScores, config: ReportConfig) -> SystemHealthRating:
    """Classify component scores; any zero score is a hard FAIL."""
    values = scores.as_list()
    average = sum(values) / len(values)

    if any(v == 0 for v in values):
        rating = Rating.FAIL
        summary = "System has critical failures that prevent production deployment"
    elif average >= config.pass_threshold:
        rating = Rating.PASS
        summary = "System is ready for production deployment with minimal risk"
    elif average >= config.conditional_threshold:
        rating = Rating.CONDITIONAL
        summary = "System can proceed to production with identified issues addressed"
    else:
        rating = Rating.FAIL
        summary = "System requires significant improvements before production deployment"

    return SystemHealthRating(rating=rating, score=average, component_scores=scores, summary=summary)


# ---------------------------------------------------------------------------
# Issue ranking
# ---------------------------------------------------------------------------
def _issue_rank(issue: CriticalIssue):
    return (-CATEGORY_WEIGHTS[issue.category], not issue.deployment_blocker)


def rank_critical_issues(issues: Sequence[CriticalIssue], limit: int = 5) -> List[CriticalIssue]:
    """Top ``limit`` issues by category weight, blockers first on ties.

    ``sorted`` is stable, so equal issues keep their input order. Returned
    issues are annotated copies; ``issues`` is left untouched.
    """
    ranked = sorted(issues, key=_issue_rank)[:limit]
    return [
        issue.model_copy(update={
            "impact_summary": IMPACT_SUMMARIES[issue.category],
            "remediation_summary": REMEDIATION_SUMMARIES[issue.estimated_effort],
        })
        for issue in ranked
    ]


# ---------------------------------------------------------------------------
# Go/No-Go
# ---------------------------------------------------------------------------
def recommend_go_no_go(issues: Sequence[CriticalIssue], health: SystemHealthRating) -> GoNoGoRecommendation:
    """Deployment verdict; a single blocker forces NO_GO."""
    blockers = [i for i in issues if i.deployment_blocker]
    if blockers:
        return GoNoGoRecommendation(
            recommendation=GoNoGo.NO_GO,
            justification=f"{len(blockers)} deployment blocking issues must be resolved before production",
            conditions=[i.title for i in blockers],
            timeline="Address blocking issues before reconsidering deployment",
            risk_level=RiskLevel.HIGH,
        )

    if health.rating == Rating.PASS:
        return GoNoGoRecommendation(
            recommendation=GoNoGo.GO,
            justification="System meets all production readiness criteria with acceptable risk levels",
            conditions=[],
            timeline="Ready for immediate deployment",
            risk_level=RiskLevel.LOW,
        )

    if health.rating == Rating.CONDITIONAL:
        return GoNoGoRecommendation(
            recommendation=GoNoGo.CONDITIONAL_GO,
            justification="System can proceed with identified issues addressed during or after deployment",
            conditions=[i.title for i in issues if i.category == IssueCategory.CRITICAL],
            timeline="Deploy with monitoring and issue resolution plan",
            risk_level=RiskLevel.MEDIUM,
        )

    return GoNoGoRecommendation(
        recommendation=GoNoGo.NO_GO,
        justification="System requires significant improvements before production deployment",
        conditions=["Address all critical and high priority issues"],
        timeline="Re-evaluate after major improvements",
        risk_level=RiskLevel.HIGH,
    )


# ---------------------------------------------------------------------------
# Risk assessment
# ---------------------------------------------------------------------------
def overall_issue_risk(issues: Sequence[CriticalIssue]) -> RiskLevel:
    if any(i.category == IssueCategory.CRITICAL for i in issues):
        return RiskLevel.HIGH
    high_count = sum(1 for i in issues if i.category == IssueCategory.HIGH)
    if high_count > 2:
        return RiskLevel.HIGH
    if high_count > 0:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def _business_impact(issues: Sequence[CriticalIssue]) -> str:
    if any(i.deployment_blocker for i in issues):
        return "High business impact - deployment delays likely, potential revenue loss"
    if any(i.category == IssueCategory.CRITICAL for i in issues):
        return "Medium business impact - increased support costs, user experience issues"
    return "Low business impact - minimal operational disruption expected"


def _mitigation_strategies(issues: Sequence[CriticalIssue]) -> List[str]:
    strategies = [
        "Implement comprehensive monitoring and alerting",
        "Establish rollback procedures for rapid issue resolution",
        "Create user communication plan for known limitations",
    ]
    components = {i.component for i in issues}
    if IssueComponent.SECURITY in components:
        strategies.append("Conduct security review and penetration testing")
    if IssueComponent.PERFORMANCE in components:
        strategies.append("Implement performance monitoring and auto-scaling")
    return strategies


def assess_summary_risk(top_issues: Sequence[CriticalIssue]) -> RiskAssessment:
    """Security/performance/functional buckets over the top issues."""
    security = [i.title for i in top_issues if i.component == IssueComponent.SECURITY]
    performance = [i.title for i in top_issues if i.component == IssueComponent.PERFORMANCE]
    functional = [i.title for i in top_issues if i.component in FUNCTIONAL_COMPONENTS]

    return RiskAssessment(
        overall_risk_level=overall_issue_risk(top_issues),
        security_risks=RiskDimension(
            level=RiskLevel.HIGH if security else RiskLevel.LOW,
            issues=security,
            mitigation="Implement security fixes before production deployment",
        ),
        performance_risks=RiskDimension(
            level=RiskLevel.MEDIUM if performance else RiskLevel.LOW,
            issues=performance,
            mitigation="Monitor performance metrics and implement optimizations",
        ),
        functional_risks=RiskDimension(
            level=RiskLevel.HIGH if functional else RiskLevel.LOW,
            issues=functional,
            mitigation="Complete functional testing and bug fixes",
        ),
        business_impact=_business_impact(top_issues),
        mitigation_strategies=_mitigation_strategies(top_issues),
    )


# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------
def simulation_coverage(result: BLEValidationResult) -> float:
    """Fraction of officer flow, member flow and error handling that held.

    Without simulation data the coverage is unknown and scores 0.5.
    """
    simulation = result.end_to_end_simulation
    if simulation is None:
        return 0.5
    outcomes = [
        simulation.officer_flow is not None and simulation.officer_flow.overall_success,
        simulation.member_flow is not None and simulation.member_flow.overall_success,
        simulation.error_scenarios is not None
        and all(s.handled_gracefully for s in simulation.error_scenarios),
    ]
    return sum(1 for o in outcomes if o) / 3


def calculate_confidence(result: BLEValidationResult, config: ReportConfig) -> ConfidenceLevel:
    completeness = result.analysis_completeness()
    consistency = config.consistency_score
    coverage = simulation_coverage(result)
    score = (completeness + consistency + coverage) / 3

    if score >= config.confidence_high_threshold:
        level = ConfidenceTier.HIGH
    elif score >= config.confidence_medium_threshold:
        level = ConfidenceTier.MEDIUM
    else:
        level = ConfidenceTier.LOW
    return ConfidenceLevel(level=level, score=score, factors=list(_CONFIDENCE_FACTORS[level]))


# ---------------------------------------------------------------------------
# Findings and next steps
# ---------------------------------------------------------------------------
def extract_key_findings(result: BLEValidationResult) -> List[str]:
    findings = []
    native = result.native_module_analysis
    if native and native.ios and native.ios.overall_rating == Rating.PASS:
        findings.append("iOS native module implementation is production-ready")
    if native and native.android and native.android.overall_rating == Rating.PASS:
        findings.append("Android native module implementation is production-ready")

    database = result.database_analysis
    if database and database.security_audit and database.security_audit.overall_security_rating == SecurityTier.SECURE:
        findings.append("Database security measures are comprehensive and effective")

    performance = result.performance_analysis
    assessment = performance.scalability_assessment if performance else None
    if assessment and assessment.overall_performance == PerformanceTier.EXCELLENT:
        findings.append("System demonstrates excellent scalability for target user load")
    return findings


_NEXT_STEPS: Dict[Rating, List[str]] = {
    Rating.PASS: [
        "Proceed with production deployment",
        "Implement monitoring and alerting systems",
        "Prepare user training and documentation",
    ],
    Rating.CONDITIONAL: [
        "Address identified critical issues",
        "Implement additional monitoring for known risks",
        "Plan phased rollout with close monitoring",
    ],
    Rating.FAIL: [
        "Address all critical and high priority issues",
        "Re-run comprehensive validation after fixes",
        "Consider additional testing phases",
    ],
}


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class ExecutiveSummaryEngine:
    """Builds the ExecutiveSummary for a validation result."""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or build_report_config()

    def generate_executive_summary(self, result: BLEValidationResult) -> ExecutiveSummary:
        scores = score_components(result)
        logger.debug("Component scores: %s", scores.model_dump())

        health = rate_system_health(scores, self.config)
        top_issues = rank_critical_issues(result.critical_issues, self.config.top_issue_limit)
        verdict = recommend_go_no_go(result.critical_issues, health)
        risk = assess_summary_risk(top_issues)
        confidence = calculate_confidence(result, self.config)

        logger.info(
            "Health %s (score %.3f), verdict %s, confidence %s",
            health.rating.value, health.score, verdict.recommendation.value, confidence.level.value,
        )
        return ExecutiveSummary(
            execution_timestamp=result.execution_timestamp,
            validation_version=result.validation_version,
            system_health_rating=health,
            critical_issues=top_issues,
            go_no_go_recommendation=verdict,
            confidence_level=confidence,
            risk_assessment=risk,
            key_findings=extract_key_findings(result),
            next_steps=list(_NEXT_STEPS[health.rating]),
        )
