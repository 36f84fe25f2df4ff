# CUI // SP-CTI
"""Tests for ble_readiness.reporting.executive_summary."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from ble_readiness.config import build_report_config
from ble_readiness.loader import load_validation_result
from ble_readiness.models import (
    ConfidenceTier,
    ConfigReadiness,
    IssueCategory,
    PerformanceTier,
    QualityTier,
    Rating,
    RiskLevel,
    SecurityTier,
)
from ble_readiness.report_models import ComponentScores, GoNoGo
from ble_readiness.reporting.executive_summary import (
    BRIDGE_QUALITY_SCORES,
    CONFIG_READINESS_SCORES,
    NATIVE_RATING_SCORES,
    PERFORMANCE_TIER_SCORES,
    SECURITY_TIER_SCORES,
    ExecutiveSummaryEngine,
    assess_summary_risk,
    calculate_confidence,
    rank_critical_issues,
    rate_system_health,
    recommend_go_no_go,
    score_components,
    score_database,
    score_security,
    simulation_coverage,
)

CONFIG = build_report_config()


def _scores(*values) -> ComponentScores:
    names = ("native_modules", "bridge_layer", "database", "security", "performance", "configuration")
    return ComponentScores(**dict(zip(names, values)))


def _conditional_data(data: dict) -> dict:
    """Healthy data degraded to an average of 0.8667 (CONDITIONAL)."""
    data["bridgeLayerAnalysis"]["bleContext"]["overallQuality"] = "GOOD"
    data["performanceAnalysis"]["scalabilityAssessment"]["overallPerformance"] = "ACCEPTABLE"
    data["configurationAudit"]["deploymentReadiness"]["overallReadiness"] = "NEEDS_CONFIGURATION"
    return data


# ---------------------------------------------------------------------------
# Scoring tables
# ---------------------------------------------------------------------------
class TestScoringTables:
    """Every table covers every member of its vocabulary."""

    @pytest.mark.parametrize("table, enum", [
        (NATIVE_RATING_SCORES, Rating),
        (BRIDGE_QUALITY_SCORES, QualityTier),
        (SECURITY_TIER_SCORES, SecurityTier),
        (PERFORMANCE_TIER_SCORES, PerformanceTier),
        (CONFIG_READINESS_SCORES, ConfigReadiness),
    ])
    def test_table_is_exhaustive(self, table, enum):
        assert set(table) == set(enum)

    @pytest.mark.parametrize("table", [
        NATIVE_RATING_SCORES, BRIDGE_QUALITY_SCORES, SECURITY_TIER_SCORES,
        PERFORMANCE_TIER_SCORES, CONFIG_READINESS_SCORES,
    ])
    def test_scores_within_unit_interval(self, table):
        assert all(0.0 <= v <= 1.0 for v in table.values())


# ---------------------------------------------------------------------------
# Component scores
# ---------------------------------------------------------------------------
class TestComponentScores:
    """Per-component scoring from the validation result."""

    def test_healthy_result_scores_one(self, healthy_result):
        assert score_components(healthy_result).as_list() == [1.0] * 6

    def test_missing_components_score_zero(self, missing_component_result):
        scores = score_components(missing_component_result)
        assert scores.performance == 0.0
        assert scores.native_modules == 1.0

    def test_missing_platform_scores_native_zero(self, healthy_result_data):
        del healthy_result_data["nativeModuleAnalysis"]["android"]
        result = load_validation_result(healthy_result_data)
        assert score_components(result).native_modules == 0.0

    def test_unknown_bridge_security_uses_default(self, healthy_result_data):
        del healthy_result_data["bridgeLayerAnalysis"]["bleHelper"]["overallSecurity"]
        result = load_validation_result(healthy_result_data)
        assert score_components(result).bridge_layer == pytest.approx((1.0 + 0.3) / 2)

    def test_function_validation_not_reported(self, healthy_result_data):
        del healthy_result_data["databaseAnalysis"]["functionValidation"]
        result = load_validation_result(healthy_result_data)
        assert score_database(result) == pytest.approx(0.85)

    def test_function_validation_empty_list_scores_full(self, healthy_result_data):
        healthy_result_data["databaseAnalysis"]["functionValidation"] = []
        result = load_validation_result(healthy_result_data)
        assert score_database(result) == 1.0

    def test_unknown_performance_tier(self, healthy_result_data):
        del healthy_result_data["performanceAnalysis"]["scalabilityAssessment"]
        result = load_validation_result(healthy_result_data)
        assert score_components(result).performance == 0.5

    def test_security_score_from_issues(self, make_result, make_issue):
        one_high = make_result(criticalIssues=[make_issue("HIGH", "SECURITY").to_dict()])
        assert score_security(one_high) == pytest.approx(0.8)

        many = make_result(criticalIssues=[make_issue("MEDIUM", "SECURITY").to_dict() for _ in range(5)])
        assert score_security(many) == pytest.approx(0.3)

        critical = make_result(criticalIssues=[make_issue("CRITICAL", "SECURITY").to_dict()])
        assert score_security(critical) == 0.0


# ---------------------------------------------------------------------------
# Health rating
# ---------------------------------------------------------------------------
class TestSystemHealthRating:
    """PASS/CONDITIONAL/FAIL classification."""

    def test_pass(self):
        health = rate_system_health(_scores(1, 1, 1, 1, 1, 0.9), CONFIG)
        assert health.rating == Rating.PASS

    def test_conditional(self):
        health = rate_system_health(_scores(0.8, 0.8, 0.8, 0.8, 0.8, 0.8), CONFIG)
        assert health.rating == Rating.CONDITIONAL
        assert health.score == pytest.approx(0.8)

    def test_low_average_fails(self):
        assert rate_system_health(_scores(0.5, 0.5, 0.5, 0.5, 0.5, 0.5), CONFIG).rating == Rating.FAIL

    @pytest.mark.parametrize("index", range(6))
    def test_any_zero_score_fails(self, index):
        values = [1.0] * 6
        values[index] = 0.0
        health = rate_system_health(_scores(*values), CONFIG)
        assert health.rating == Rating.FAIL
        assert "critical failures" in health.summary

    def test_thresholds_come_from_config(self):
        strict = build_report_config({"pass_threshold": 0.99})
        assert rate_system_health(_scores(1, 1, 1, 1, 1, 0.9), strict).rating == Rating.CONDITIONAL

    @pytest.mark.parametrize("index", range(6))
    @pytest.mark.parametrize("base, better", [(0.3, 0.7), (0.7, 1.0), (0.0, 0.3)])
    def test_upgrading_one_component_never_lowers_rating(self, index, base, better):
        order = {Rating.FAIL: 0, Rating.CONDITIONAL: 1, Rating.PASS: 2}
        values = [0.8] * 6
        values[index] = base
        before = rate_system_health(_scores(*values), CONFIG).rating
        values[index] = better
        after = rate_system_health(_scores(*values), CONFIG).rating
        assert order[after] >= order[before]


# ---------------------------------------------------------------------------
# Issue ranking
# ---------------------------------------------------------------------------
class TestRankCriticalIssues:
    """Top-N selection by category weight and blocker status."""

    def test_orders_by_category_then_blocker(self, make_issue):
        low = make_issue("LOW")
        high = make_issue("HIGH")
        critical = make_issue("CRITICAL")
        critical_blocker = make_issue("CRITICAL", blocker=True)
        ranked = rank_critical_issues([low, high, critical, critical_blocker])
        assert [i.id for i in ranked] == [critical_blocker.id, critical.id, high.id, low.id]

    def test_equal_weights_keep_input_order(self, make_issue):
        issues = [make_issue("LOW"), make_issue("CRITICAL"), make_issue("HIGH"), make_issue("CRITICAL")]
        ranked = rank_critical_issues(issues)
        assert [i.id for i in ranked[:2]] == [issues[1].id, issues[3].id]

    def test_limit(self, make_issue):
        issues = [make_issue("MEDIUM") for _ in range(8)]
        assert len(rank_critical_issues(issues)) == 5
        assert len(rank_critical_issues(issues, limit=3)) == 3

    def test_stable_for_equal_issues(self, make_issue):
        issues = [make_issue("HIGH") for _ in range(4)]
        assert [i.id for i in rank_critical_issues(issues)] == [i.id for i in issues]

    def test_annotates_copies_without_mutating(self, make_issue):
        issue = make_issue("CRITICAL", effort="HIGH")
        ranked = rank_critical_issues([issue])[0]
        assert ranked.impact_summary == "Prevents system functionality or creates security vulnerabilities"
        assert ranked.remediation_summary == "Significant effort - requires 1+ weeks of development"
        assert issue.impact_summary is None
        assert issue.remediation_summary is None

    def test_empty(self):
        assert rank_critical_issues([]) == []


# ---------------------------------------------------------------------------
# Go/No-Go
# ---------------------------------------------------------------------------
class TestGoNoGo:
    """Deployment verdict rules."""

    def test_go_on_pass_without_blockers(self):
        health = rate_system_health(_scores(1, 1, 1, 1, 1, 1), CONFIG)
        verdict = recommend_go_no_go([], health)
        assert verdict.recommendation == GoNoGo.GO
        assert verdict.risk_level == RiskLevel.LOW
        assert verdict.conditions == []

    def test_blocker_forces_no_go_even_when_healthy(self, make_issue):
        health = rate_system_health(_scores(1, 1, 1, 1, 1, 1), CONFIG)
        blocker = make_issue("LOW", blocker=True, title="Missing APP_UUID")
        verdict = recommend_go_no_go([blocker], health)
        assert verdict.recommendation == GoNoGo.NO_GO
        assert verdict.conditions == ["Missing APP_UUID"]
        assert verdict.justification.startswith("1 deployment blocking issues")

    def test_conditional_lists_critical_titles_in_input_order(self, make_issue):
        health = rate_system_health(_scores(0.8, 0.8, 0.8, 0.8, 0.8, 0.8), CONFIG)
        first = make_issue("CRITICAL", title="First")
        other = make_issue("HIGH", title="Other")
        second = make_issue("CRITICAL", title="Second")
        verdict = recommend_go_no_go([first, other, second], health)
        assert verdict.recommendation == GoNoGo.CONDITIONAL_GO
        assert verdict.conditions == ["First", "Second"]
        assert verdict.risk_level == RiskLevel.MEDIUM

    def test_fail_without_blockers_is_no_go(self):
        health = rate_system_health(_scores(0, 1, 1, 1, 1, 1), CONFIG)
        verdict = recommend_go_no_go([], health)
        assert verdict.recommendation == GoNoGo.NO_GO
        assert verdict.conditions == ["Address all critical and high priority issues"]


# ---------------------------------------------------------------------------
# Risk assessment and confidence
# ---------------------------------------------------------------------------
class TestSummaryRisk:
    """Summary-level risk buckets over the top issues."""

    def test_no_issues_is_low(self):
        risk = assess_summary_risk([])
        assert risk.overall_risk_level == RiskLevel.LOW
        assert risk.business_impact.startswith("Low business impact")
        assert len(risk.mitigation_strategies) == 3

    def test_buckets_and_extras(self, make_issue):
        issues = [make_issue("HIGH", "SECURITY"), make_issue("MEDIUM", "PERFORMANCE"), make_issue("HIGH", "BRIDGE")]
        risk = assess_summary_risk(issues)
        assert risk.security_risks.level == RiskLevel.HIGH
        assert risk.performance_risks.level == RiskLevel.MEDIUM
        assert risk.functional_risks.level == RiskLevel.HIGH
        assert risk.overall_risk_level == RiskLevel.MEDIUM
        assert "Conduct security review and penetration testing" in risk.mitigation_strategies
        assert "Implement performance monitoring and auto-scaling" in risk.mitigation_strategies

    def test_three_high_issues_is_high(self, make_issue):
        assert assess_summary_risk([make_issue("HIGH") for _ in range(3)]).overall_risk_level == RiskLevel.HIGH

    def test_blocker_business_impact(self, make_issue):
        risk = assess_summary_risk([make_issue("MEDIUM", blocker=True)])
        assert risk.business_impact.startswith("High business impact")


class TestConfidence:
    """Confidence from completeness, consistency and simulation coverage."""

    def test_healthy_result_is_high(self, healthy_result):
        confidence = calculate_confidence(healthy_result, CONFIG)
        assert confidence.score == pytest.approx((1 + 0.85 + 1) / 3)
        assert confidence.level == ConfidenceTier.HIGH
        assert len(confidence.factors) == 3

    def test_missing_simulation_coverage_is_half(self, missing_component_result):
        assert simulation_coverage(missing_component_result) == 0.5

    def test_missing_components_lower_confidence(self, missing_component_result):
        confidence = calculate_confidence(missing_component_result, CONFIG)
        assert confidence.score == pytest.approx((4 / 6 + 0.85 + 0.5) / 3)
        assert confidence.level == ConfidenceTier.LOW

    def test_error_scenarios_not_run_count_as_unhandled(self, healthy_result_data):
        del healthy_result_data["endToEndSimulation"]["errorScenarios"]
        result = load_validation_result(healthy_result_data)
        assert simulation_coverage(result) == pytest.approx(2 / 3)

    def test_empty_error_scenarios_count_as_handled(self, healthy_result_data):
        healthy_result_data["endToEndSimulation"]["errorScenarios"] = []
        result = load_validation_result(healthy_result_data)
        assert simulation_coverage(result) == 1.0

    def test_consistency_score_is_configurable(self, healthy_result):
        config = build_report_config({"consistency_score": 0.4})
        assert calculate_confidence(healthy_result, config).score == pytest.approx((1 + 0.4 + 1) / 3)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class TestExecutiveSummaryEngine:
    """End-to-end executive summary generation."""

    def test_healthy_result(self, healthy_result):
        summary = ExecutiveSummaryEngine().generate_executive_summary(healthy_result)
        assert summary.system_health_rating.rating == Rating.PASS
        assert summary.go_no_go_recommendation.recommendation == GoNoGo.GO
        assert summary.execution_timestamp == healthy_result.execution_timestamp
        assert summary.next_steps[0] == "Proceed with production deployment"
        assert len(summary.key_findings) == 4

    def test_conditional_result(self, healthy_result_data):
        result = load_validation_result(_conditional_data(healthy_result_data))
        summary = ExecutiveSummaryEngine().generate_executive_summary(result)
        assert summary.system_health_rating.rating == Rating.CONDITIONAL
        assert summary.go_no_go_recommendation.recommendation == GoNoGo.CONDITIONAL_GO
        assert summary.next_steps[0] == "Address identified critical issues"

    def test_missing_component_forces_fail(self, missing_component_result):
        summary = ExecutiveSummaryEngine().generate_executive_summary(missing_component_result)
        assert summary.system_health_rating.rating == Rating.FAIL
        assert summary.go_no_go_recommendation.recommendation == GoNoGo.NO_GO

    def test_top_issue_limit_from_config(self, make_result, make_issue):
        result = make_result(criticalIssues=[make_issue("LOW").to_dict() for _ in range(6)])
        engine = ExecutiveSummaryEngine(build_report_config({"top_issue_limit": 2}))
        assert len(engine.generate_executive_summary(result).critical_issues) == 2

    def test_input_issues_untouched(self, make_result, make_issue):
        result = make_result(criticalIssues=[make_issue("CRITICAL").to_dict()])
        ExecutiveSummaryEngine().generate_executive_summary(result)
        assert result.critical_issues[0].impact_summary is None

    def test_idempotent(self, healthy_result):
        engine = ExecutiveSummaryEngine()
        first = engine.generate_executive_summary(healthy_result).to_dict()
        assert engine.generate_executive_summary(healthy_result).to_dict() == first

    def test_logs_verdict(self, healthy_result, caplog):
        with caplog.at_level("INFO", logger="ble_readiness.reporting.executive_summary"):
            ExecutiveSummaryEngine().generate_executive_summary(healthy_result)
        assert any("verdict GO" in r.getMessage() for r in caplog.records)

    def test_category_weights_drive_summary_order(self, make_result, make_issue):
        issues = [make_issue("LOW"), make_issue("CRITICAL")]
        result = make_result(criticalIssues=[i.to_dict() for i in issues])
        summary = ExecutiveSummaryEngine().generate_executive_summary(result)
        assert summary.critical_issues[0].category == IssueCategory.CRITICAL
