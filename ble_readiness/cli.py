#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness Report CLI.

Reads a validation result JSON file and prints the selected report as JSON.

Usage:
    ble-readiness-report --input validation-result.json
    ble-readiness-report --input result.json --section executive
    ble-readiness-report --input result.json --section deployment --config args/ble_report_config.yaml
    ble-readiness-report --input result.json --gate          # exit 1 on NO_GO
    python -m ble_readiness.cli --input result.json --verbose

Exit codes:
    0  report generated (and, with --gate, verdict is not NO_GO)
    1  --gate given and the Go/No-Go verdict is NO_GO
    2  input or configuration error
"""

import argparse
import json
import logging
import sys

from ble_readiness.config import load_report_config
from ble_readiness.errors import ReportError
from ble_readiness.loader import load_validation_result_file
from ble_readiness.log_context import ExecutionLogFilter
from ble_readiness.report_models import GoNoGo
from ble_readiness.reporting.comprehensive_report import ComprehensiveReportGenerator

logger = logging.getLogger("ble_readiness.cli")

LOG_FORMAT = "%(asctime)s [%(execution_id)s] %(name)s %(levelname)s: %(message)s"

SECTIONS = ("full", "executive", "technical", "issues", "deployment")


def _configure_logging(verbose: bool):
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(ExecutionLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BLE Production Readiness Report")
    parser.add_argument("--input", required=True, help="Validation result JSON file")
    parser.add_argument("--section", choices=SECTIONS, default="full",
                        help="Report section to print (default: full)")
    parser.add_argument("--config", default=None,
                        help="Report config YAML (default: args/ble_report_config.yaml)")
    parser.add_argument("--gate", action="store_true", help="Exit 1 if the verdict is NO_GO")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_report_config(args.config)
        result = load_validation_result_file(args.input)
    except ReportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    generator = ComprehensiveReportGenerator(config=config)
    summary = None
    if args.section == "full":
        report = generator.generate_comprehensive_report(result)
        summary = report.executive_summary
    elif args.section == "executive":
        report = summary = generator.generate_executive_summary_only(result)
    elif args.section == "technical":
        report = generator.generate_technical_analysis_only(result)
    elif args.section == "issues":
        report = generator.generate_issue_tracking_only(result)
    else:
        report = generator.generate_deployment_checklist_only(result)

    print(json.dumps(report.to_dict(), indent=2))

    if args.gate:
        if summary is None:
            summary = generator.generate_executive_summary_only(result)
        verdict = summary.go_no_go_recommendation.recommendation
        logger.info("Gate verdict: %s", verdict.value)
        return 1 if verdict == GoNoGo.NO_GO else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
