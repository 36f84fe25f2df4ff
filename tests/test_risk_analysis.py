# CUI // SP-CTI
"""Tests for ble_readiness.reporting.risk_analysis."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from ble_readiness.loader import load_validation_result
from ble_readiness.models import RiskLevel
from ble_readiness.reporting.deployment_checklist import DefaultDeploymentChecklistGenerator
from ble_readiness.reporting.executive_summary import ExecutiveSummaryEngine
from ble_readiness.reporting.issue_tracker import DefaultIssueTrackerGenerator
from ble_readiness.reporting.risk_analysis import (
    CONTINGENCY_PLANS,
    RISK_MITIGATION_PLAN,
    analyze_business_risks,
    analyze_operational_risks,
    analyze_security_risks,
    analyze_technical_risks,
    build_risk_analysis,
    roll_up_risk,
)


@pytest.fixture
def analyze(fixed_clock):
    """Run the three upstream generators and the risk analysis on a result."""

    def _analyze(result):
        summary = ExecutiveSummaryEngine().generate_executive_summary(result)
        issue_db = DefaultIssueTrackerGenerator(fixed_clock).generate_issue_database(result)
        checklist = DefaultDeploymentChecklistGenerator(fixed_clock).generate_deployment_checklist(result)
        return summary, issue_db, checklist, build_risk_analysis(summary, issue_db, checklist)

    return _analyze


# ---------------------------------------------------------------------------
# Roll-up
# ---------------------------------------------------------------------------
class TestRollUpRisk:
    """Overall level from the four dimension levels."""

    @pytest.mark.parametrize("levels, expected", [
        ([RiskLevel.LOW] * 4, RiskLevel.LOW),
        ([RiskLevel.MEDIUM, RiskLevel.LOW, RiskLevel.LOW, RiskLevel.LOW], RiskLevel.MEDIUM),
        ([RiskLevel.MEDIUM, RiskLevel.MEDIUM, RiskLevel.LOW, RiskLevel.LOW], RiskLevel.HIGH),
        ([RiskLevel.HIGH, RiskLevel.LOW, RiskLevel.LOW, RiskLevel.LOW], RiskLevel.HIGH),
    ])
    def test_roll_up(self, levels, expected):
        assert roll_up_risk(levels) == expected

    def test_accepts_generator(self):
        assert roll_up_risk(level for level in [RiskLevel.LOW, RiskLevel.MEDIUM]) == RiskLevel.MEDIUM


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------
class TestRiskDimensions:
    """Each dimension is leveled from its own evidence."""

    def test_healthy_result_is_low_everywhere(self, healthy_result, analyze):
        _, _, _, risk = analyze(healthy_result)
        assert risk.overall_risk_level == RiskLevel.LOW
        for dimension in (risk.security_risks, risk.operational_risks, risk.technical_risks, risk.business_risks):
            assert dimension.level == RiskLevel.LOW
        assert risk.business_risks.issues == []
        assert risk.risk_mitigation_plan == RISK_MITIGATION_PLAN
        assert risk.contingency_plans == CONTINGENCY_PLANS

    def test_critical_security_issue_is_high(self, make_result, make_issue, analyze):
        issue = make_issue("CRITICAL", "SECURITY", title="Token leak")
        _, issue_db, _, risk = analyze(make_result(criticalIssues=[issue.to_dict()]))
        security = analyze_security_risks(issue_db)
        assert security.level == RiskLevel.HIGH
        assert security.issues == ["Token leak"]
        assert security.timeline == "Immediate (1-2 days)"
        assert risk.overall_risk_level == RiskLevel.HIGH

    def test_non_critical_security_issue_is_medium(self, make_result, make_issue, fixed_clock):
        result = make_result(criticalIssues=[make_issue("MEDIUM", "SECURITY").to_dict()])
        issue_db = DefaultIssueTrackerGenerator(fixed_clock).generate_issue_database(result)
        assert analyze_security_risks(issue_db).level == RiskLevel.MEDIUM

    def test_technical_risk_counts_technical_components(self, make_result, make_issue, fixed_clock):
        issues = [make_issue("LOW", component) for component in ("NATIVE", "BRIDGE", "DATABASE", "PERFORMANCE")]
        result = make_result(criticalIssues=[i.to_dict() for i in issues])
        issue_db = DefaultIssueTrackerGenerator(fixed_clock).generate_issue_database(result)
        technical = analyze_technical_risks(issue_db)
        assert technical.level == RiskLevel.MEDIUM
        assert len(technical.issues) == 4

    def test_technical_issue_titles_capped(self, make_result, make_issue, fixed_clock):
        result = make_result(criticalIssues=[make_issue("LOW", "NATIVE").to_dict() for _ in range(7)])
        issue_db = DefaultIssueTrackerGenerator(fixed_clock).generate_issue_database(result)
        assert len(analyze_technical_risks(issue_db).issues) == 5

    def test_config_issues_are_not_technical(self, make_result, make_issue, fixed_clock):
        result = make_result(criticalIssues=[make_issue("CRITICAL", "CONFIG").to_dict()])
        issue_db = DefaultIssueTrackerGenerator(fixed_clock).generate_issue_database(result)
        assert analyze_technical_risks(issue_db).level == RiskLevel.LOW

    def test_operational_passes_checklist_risk_through(self, healthy_result_data, fixed_clock):
        del healthy_result_data["configurationAudit"]["easConfig"]
        result = load_validation_result(healthy_result_data)
        checklist = DefaultDeploymentChecklistGenerator(fixed_clock).generate_deployment_checklist(result)
        operational = analyze_operational_risks(checklist)
        assert operational.level == checklist.deployment_risk == RiskLevel.HIGH
        assert "EAS Production Profile" in operational.issues
        assert "Monitoring and alerting gaps" not in operational.issues

    def test_business_risk_from_verdict_and_blockers(self, make_result, make_issue, analyze):
        blocker = make_issue("LOW", "CONFIG", blocker=True)
        summary, issue_db, _, risk = analyze(make_result(criticalIssues=[blocker.to_dict()]))
        business = analyze_business_risks(summary, issue_db)
        assert business.level == RiskLevel.HIGH
        assert business.issues == ["Deployment not recommended", "1 deployment blocking issues"]
        assert risk.business_risks == business

    def test_two_medium_dimensions_roll_up_high(self, make_result, make_issue, analyze):
        issues = [make_issue("HIGH", "SECURITY")] + [make_issue("LOW", "NATIVE") for _ in range(4)]
        _, _, _, risk = analyze(make_result(criticalIssues=[i.to_dict() for i in issues]))
        assert risk.security_risks.level == RiskLevel.MEDIUM
        assert risk.technical_risks.level == RiskLevel.MEDIUM
        assert risk.overall_risk_level == RiskLevel.HIGH
