# CUI // SP-CTI
"""Tests for ble_readiness.config."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from ble_readiness.config import (
    DEFAULT_CONFIG_PATH,
    ReportConfig,
    build_report_config,
    load_report_config,
)
from ble_readiness.errors import ConfigurationError, ReportError


class TestBuildReportConfig:
    """Defaults and validation of overrides."""

    def test_defaults(self):
        config = build_report_config()
        assert config.pass_threshold == 0.9
        assert config.conditional_threshold == 0.7
        assert config.confidence_high_threshold == 0.9
        assert config.confidence_medium_threshold == 0.7
        assert config.consistency_score == 0.85
        assert config.top_issue_limit == 5
        assert config.report_version == "1.0"
        assert config.generated_by == "BLE System Validation Framework"

    def test_defaults_match_dataclass_defaults(self):
        assert build_report_config() == ReportConfig()

    def test_override(self):
        config = build_report_config({"pass_threshold": 0.95, "top_issue_limit": 3})
        assert config.pass_threshold == 0.95
        assert config.top_issue_limit == 3

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_report_config({"pass_treshold": 0.9})
        assert exc_info.value.config_key == "pass_treshold"

    def test_fraction_out_of_range(self):
        with pytest.raises(ConfigurationError, match="within"):
            build_report_config({"consistency_score": 1.5})

    def test_fraction_not_a_number(self):
        with pytest.raises(ConfigurationError, match="number"):
            build_report_config({"pass_threshold": "high"})

    def test_conditional_above_pass(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_report_config({"conditional_threshold": 0.95})
        assert exc_info.value.config_key == "conditional_threshold"

    def test_top_issue_limit_positive(self):
        with pytest.raises(ConfigurationError):
            build_report_config({"top_issue_limit": 0})

    def test_config_is_frozen(self):
        config = build_report_config()
        with pytest.raises(Exception):
            config.pass_threshold = 0.5

    def test_to_dict(self):
        assert build_report_config().to_dict()["top_issue_limit"] == 5


class TestLoadReportConfig:
    """Reading YAML configuration files."""

    def test_shipped_file_matches_defaults(self):
        assert DEFAULT_CONFIG_PATH.exists()
        assert load_report_config() == build_report_config()

    def test_missing_file_yields_defaults(self, tmp_path):
        assert load_report_config(tmp_path / "absent.yaml") == build_report_config()

    def test_section_overrides(self, tmp_path):
        path = tmp_path / "report.yaml"
        path.write_text("ble_report:\n  pass_threshold: 0.8\n  conditional_threshold: 0.6\n")
        config = load_report_config(path)
        assert config.pass_threshold == 0.8
        assert config.conditional_threshold == 0.6

    def test_empty_file_yields_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_report_config(path) == build_report_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("ble_report: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_report_config(path)

    def test_non_mapping_section(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("ble_report:\n  - 1\n  - 2\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_report_config(path)
        assert exc_info.value.config_key == "ble_report"

    def test_out_of_range_value_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("ble_report:\n  confidence_high_threshold: 2\n")
        with pytest.raises(ReportError):
            load_report_config(path)
