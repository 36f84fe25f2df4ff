#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Report Configuration.

Tunables for the decision engine are read from args/ble_report_config.yaml
(key ``ble_report``) and overlaid on built-in defaults. The defaults reproduce
the reference thresholds exactly, so a missing file changes nothing.

Usage:
    from ble_readiness.config import load_report_config

    config = load_report_config()                      # args/ble_report_config.yaml
    config = load_report_config("/etc/ble/report.yaml")
"""

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ble_readiness.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "args" / "ble_report_config.yaml"
CONFIG_SECTION = "ble_report"

logger = logging.getLogger("ble_readiness.config")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG: Dict[str, Any] = {
    "pass_threshold": 0.9,
    "conditional_threshold": 0.7,
    "confidence_high_threshold": 0.9,
    "confidence_medium_threshold": 0.7,
    "consistency_score": 0.85,
    "top_issue_limit": 5,
    "report_version": "1.0",
    "generated_by": "BLE System Validation Framework",
}

_FRACTION_KEYS = (
    "pass_threshold",
    "conditional_threshold",
    "confidence_high_threshold",
    "confidence_medium_threshold",
    "consistency_score",
)


@dataclasses.dataclass(frozen=True)
class ReportConfig:
    """Immutable engine configuration shared by every report generator."""

    pass_threshold: float = _DEFAULT_CONFIG["pass_threshold"]
    conditional_threshold: float = _DEFAULT_CONFIG["conditional_threshold"]
    confidence_high_threshold: float = _DEFAULT_CONFIG["confidence_high_threshold"]
    confidence_medium_threshold: float = _DEFAULT_CONFIG["confidence_medium_threshold"]
    consistency_score: float = _DEFAULT_CONFIG["consistency_score"]
    top_issue_limit: int = _DEFAULT_CONFIG["top_issue_limit"]
    report_version: str = _DEFAULT_CONFIG["report_version"]
    generated_by: str = _DEFAULT_CONFIG["generated_by"]

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


def _validate(values: Dict[str, Any]):
    for key in _FRACTION_KEYS:
        value = values[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"{key} must be a number, got {value!r}", config_key=key)
        if not 0.0 <= float(value) <= 1.0:
            raise ConfigurationError(f"{key} must be within [0, 1], got {value}", config_key=key)

    if values["conditional_threshold"] > values["pass_threshold"]:
        raise ConfigurationError(
            "conditional_threshold must not exceed pass_threshold",
            config_key="conditional_threshold",
        )
    if values["confidence_medium_threshold"] > values["confidence_high_threshold"]:
        raise ConfigurationError(
            "confidence_medium_threshold must not exceed confidence_high_threshold",
            config_key="confidence_medium_threshold",
        )

    limit = values["top_issue_limit"]
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ConfigurationError(
            f"top_issue_limit must be a positive integer, got {limit!r}",
            config_key="top_issue_limit",
        )

    for key in ("report_version", "generated_by"):
        if not isinstance(values[key], str):
            raise ConfigurationError(f"{key} must be a string", config_key=key)


def build_report_config(overrides: Optional[Dict[str, Any]] = None) -> ReportConfig:
    """Merge ``overrides`` over the defaults and validate the result."""
    overrides = overrides or {}
    unknown = sorted(set(overrides) - set(_DEFAULT_CONFIG))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_key=unknown[0],
        )

    values = {**_DEFAULT_CONFIG, **overrides}
    _validate(values)
    return ReportConfig(**values)


def load_report_config(path: Optional[Union[str, Path]] = None) -> ReportConfig:
    """Load the report configuration from YAML.

    Args:
        path: Config file; defaults to args/ble_report_config.yaml. A missing
            file yields the built-in defaults.

    Raises:
        ConfigurationError: The file cannot be read or parsed, or holds an
            out-of-range value.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug("No report config at %s, using defaults", config_path)
        return build_report_config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping")
    section = raw.get(CONFIG_SECTION, {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{CONFIG_SECTION}' in {config_path} must be a mapping",
            config_key=CONFIG_SECTION,
        )

    config = build_report_config(section)
    logger.debug("Loaded report config from %s", config_path)
    return config
