# CUI // SP-CTI
"""Tests for ble_readiness.cli."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import json
import logging

import pytest

from ble_readiness.cli import build_parser, main


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; put the original handlers back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_result(tmp_path):
    def _write(data, name="result.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


class TestParser:
    """Argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["--input", "r.json"])
        assert args.section == "full"
        assert args.config is None
        assert not args.gate

    def test_input_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_section_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--input", "r.json", "--section", "everything"])


class TestMain:
    """End-to-end CLI runs."""

    def test_full_report(self, write_result, healthy_result_data, capsys):
        assert main(["--input", write_result(healthy_result_data)]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["reportMetadata"]["executionId"] == "exec-2026-0001"
        assert report["executiveSummary"]["goNoGoRecommendation"]["recommendation"] == "GO"

    @pytest.mark.parametrize("section, key", [
        ("executive", "systemHealthRating"),
        ("technical", "codeReviewSection"),
        ("issues", "issueDatabase"),
        ("deployment", "overallReadiness"),
    ])
    def test_sections(self, write_result, healthy_result_data, capsys, section, key):
        assert main(["--input", write_result(healthy_result_data), "--section", section]) == 0
        assert key in json.loads(capsys.readouterr().out)

    def test_gate_passes_on_go(self, write_result, healthy_result_data):
        assert main(["--input", write_result(healthy_result_data), "--gate"]) == 0

    def test_gate_fails_on_no_go(self, write_result, healthy_result_data, capsys):
        healthy_result_data["criticalIssues"] = [{
            "id": "blk-1", "category": "CRITICAL", "component": "SECURITY",
            "title": "Hardcoded key", "deploymentBlocker": True,
        }]
        path = write_result(healthy_result_data)
        assert main(["--input", path, "--gate", "--section", "deployment"]) == 1
        assert "overallReadiness" in json.loads(capsys.readouterr().out)

    def test_invalid_input_exits_2(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{oops", encoding="utf-8")
        assert main(["--input", str(path)]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")

    def test_missing_input_exits_2(self, tmp_path):
        assert main(["--input", str(tmp_path / "absent.json")]) == 2

    def test_bad_config_exits_2(self, write_result, healthy_result_data, tmp_path, capsys):
        config = tmp_path / "bad.yaml"
        config.write_text("ble_report:\n  pass_threshold: 3\n", encoding="utf-8")
        assert main(["--input", write_result(healthy_result_data), "--config", str(config)]) == 2
        assert "pass_threshold" in capsys.readouterr().err

    def test_config_changes_verdict(self, write_result, healthy_result_data, tmp_path):
        healthy_result_data["performanceAnalysis"]["scalabilityAssessment"]["overallPerformance"] = "GOOD"
        config = tmp_path / "strict.yaml"
        config.write_text("ble_report:\n  pass_threshold: 0.99\n  conditional_threshold: 0.98\n",
                          encoding="utf-8")
        path = write_result(healthy_result_data)
        assert main(["--input", path, "--gate"]) == 0
        assert main(["--input", path, "--gate", "--config", str(config)]) == 1
