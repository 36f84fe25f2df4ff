#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Cross-cutting Risk Analysis.

Levels the security, operational, technical and business risk dimensions of
a report independently, then rolls them up into one overall level.
"""

import logging
from typing import Iterable, List

from ble_readiness.models import IssueCategory, IssueComponent, RiskLevel
from ble_readiness.report_models import (
    DeploymentReadinessChecklist,
    ExecutiveSummary,
    GoNoGo,
    IssueDatabase,
    RiskAnalysis,
    RiskDimension,
)

logger = logging.getLogger("ble_readiness.reporting.risk_analysis")

TECHNICAL_COMPONENTS = (
    IssueComponent.NATIVE,
    IssueComponent.BRIDGE,
    IssueComponent.DATABASE,
    IssueComponent.PERFORMANCE,
)
TECHNICAL_ISSUE_LIMIT = 5

RISK_MITIGATION_PLAN = [
    "Establish risk monitoring and escalation procedures",
    "Implement regular risk assessment reviews",
    "Maintain contingency plans for high-risk scenarios",
    "Ensure clear communication channels for risk reporting",
    "Allocate additional resources for high-risk areas",
    "Implement automated monitoring for early risk detection",
]

CONTINGENCY_PLANS = [
    "Rollback procedures for deployment failures",
    "Alternative implementation approaches for technical issues",
    "Emergency response procedures for security incidents",
    "Stakeholder communication plan for project delays",
    "Resource reallocation strategies for timeline pressures",
    "Third-party vendor engagement for specialized expertise",
]


def analyze_security_risks(issue_db: IssueDatabase) -> RiskDimension:
    security = [i for i in issue_db.all_issues if i.component == IssueComponent.SECURITY]
    critical = any(i.category == IssueCategory.CRITICAL for i in security)

    if critical:
        level = RiskLevel.HIGH
    elif security:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW
    return RiskDimension(
        level=level,
        issues=[i.title for i in security],
        impact=(
            "Critical security vulnerabilities could lead to data breaches or unauthorized access"
            if critical else "Security concerns may impact user trust and compliance"
        ),
        mitigation="Implement security fixes and conduct penetration testing",
        timeline="Immediate (1-2 days)" if critical else "Short-term (1 week)",
    )


def analyze_operational_risks(checklist: DeploymentReadinessChecklist) -> RiskDimension:
    """Pass-through of the checklist's own deployment risk."""
    level = checklist.deployment_risk
    issues = list(checklist.critical_missing_items)
    if checklist.monitoring_setup.missing_items:
        issues.append("Monitoring and alerting gaps")

    high = level == RiskLevel.HIGH
    return RiskDimension(
        level=level,
        issues=issues,
        impact="Deployment failures or operational issues likely" if high else "Some operational challenges expected",
        mitigation="Complete deployment readiness checklist and implement monitoring",
        timeline="Immediate (1-3 days)" if high else "Short-term (3-5 days)",
    )


def analyze_technical_risks(issue_db: IssueDatabase) -> RiskDimension:
    technical = [i for i in issue_db.all_issues if i.component in TECHNICAL_COMPONENTS]
    critical = any(i.category == IssueCategory.CRITICAL for i in technical)

    if critical:
        level = RiskLevel.HIGH
    elif len(technical) > 3:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW
    return RiskDimension(
        level=level,
        issues=[i.title for i in technical[:TECHNICAL_ISSUE_LIMIT]],
        impact=(
            "System functionality may be compromised or unreliable"
            if critical else "Some technical challenges may impact performance or maintainability"
        ),
        mitigation="Address technical issues through development and testing",
        timeline="Short-term (1-2 weeks)" if critical else "Medium-term (2-4 weeks)",
    )


def analyze_business_risks(summary: ExecutiveSummary, issue_db: IssueDatabase) -> RiskDimension:
    no_go = summary.go_no_go_recommendation.recommendation == GoNoGo.NO_GO
    blockers = len(issue_db.deployment_blockers)

    if no_go:
        level = RiskLevel.HIGH
    elif blockers:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW

    issues = []
    if no_go:
        issues.append("Deployment not recommended")
    if blockers:
        issues.append(f"{blockers} deployment blocking issues")
    return RiskDimension(
        level=level,
        issues=issues,
        impact=(
            "Project timeline delays, potential budget overruns, stakeholder confidence impact"
            if no_go else "Minor timeline adjustments may be needed"
        ),
        mitigation="Execute remediation roadmap and maintain stakeholder communication",
        timeline="Medium-term (4-8 weeks)" if no_go else "Short-term (1-2 weeks)",
    )


def roll_up_risk(levels: Iterable[RiskLevel]) -> RiskLevel:
    """HIGH on any HIGH or on two or more MEDIUMs."""
    levels = list(levels)
    medium = levels.count(RiskLevel.MEDIUM)
    if RiskLevel.HIGH in levels or medium > 1:
        return RiskLevel.HIGH
    if medium:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def build_risk_analysis(
    summary: ExecutiveSummary,
    issue_db: IssueDatabase,
    checklist: DeploymentReadinessChecklist,
) -> RiskAnalysis:
    security = analyze_security_risks(issue_db)
    operational = analyze_operational_risks(checklist)
    technical = analyze_technical_risks(issue_db)
    business = analyze_business_risks(summary, issue_db)
    dimensions: List[RiskDimension] = [security, operational, technical, business]

    overall = roll_up_risk(d.level for d in dimensions)
    logger.debug(
        "Risk levels security=%s operational=%s technical=%s business=%s overall=%s",
        security.level.value, operational.level.value, technical.level.value,
        business.level.value, overall.value,
    )
    return RiskAnalysis(
        overall_risk_level=overall,
        security_risks=security,
        operational_risks=operational,
        technical_risks=technical,
        business_risks=business,
        risk_mitigation_plan=list(RISK_MITIGATION_PLAN),
        contingency_plans=list(CONTINGENCY_PLANS),
    )
