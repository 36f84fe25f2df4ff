#!/usr/bin/env python3
# CUI // SP-CTI
"""Shared pytest fixtures for the BLE readiness test suite.

Centralizes the validation result builders (healthy result in wire form,
missing-component variants), the issue factory and a fixed clock so every
engine test starts from the same data.
"""

import copy
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from ble_readiness.loader import load_validation_result  # noqa: E402
from ble_readiness.models import CriticalIssue, Evidence  # noqa: E402


FIXED_NOW = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Healthy validation result (camelCase wire form)
# ---------------------------------------------------------------------------
def _flow(name: str) -> dict:
    return {
        "flowName": name,
        "steps": [
            {"stepName": "start", "operation": "init", "success": True, "executionTime": 12.5},
            {"stepName": "finish", "operation": "submit", "success": True, "executionTime": 30.0},
        ],
        "overallSuccess": True,
        "executionTime": 42.5,
        "errors": [],
        "dataIntegrity": {
            "dataConsistency": True,
            "foreignKeyIntegrity": True,
            "constraintViolations": [],
            "overallRating": "PASS",
        },
    }


HEALTHY_RESULT = {
    "executionId": "exec-2026-0001",
    "executionTimestamp": "2026-03-01T12:00:00Z",
    "validationVersion": "2.4.0",
    "overallStatus": "PASS",
    "productionReadiness": "PRODUCTION_READY",
    "confidenceLevel": "HIGH",
    "criticalIssues": [],
    "allRecommendations": [],
    "totalExecutionTime": 1520.0,
    "totalIssuesFound": 0,
    "nativeModuleAnalysis": {
        "ios": {
            "permissionHandling": {"status": "PASS", "message": "CBManager authorization handled"},
            "memoryLeakRisks": [],
            "threadingIssues": [],
            "overallRating": "PASS",
        },
        "android": {
            "permissionHandling": {"status": "PASS", "message": "Runtime permissions requested"},
            "memoryLeakRisks": [],
            "threadingIssues": [],
            "overallRating": "PASS",
        },
    },
    "bridgeLayerAnalysis": {
        "bleContext": {
            "broadcastingStateManagement": {"passed": True, "score": 1.0},
            "scanningStateManagement": {"passed": True, "score": 1.0},
            "eventListenersCleanup": {"passed": True, "score": 1.0},
            "errorHandling": {"passed": True, "score": 1.0},
            "raceConditionRisks": [],
            "memoryLeakRisks": [],
            "overallQuality": "EXCELLENT",
        },
        "bleHelper": {
            "sessionTokenGeneration": {"passed": True, "riskLevel": "LOW"},
            "collisionResistance": {"riskLevel": "LOW"},
            "overallSecurity": "SECURE",
        },
        "permissionFlow": {
            "recoveryGuidance": {"passed": True},
            "gracefulDegradation": {"passed": True},
            "overallRating": "EXCELLENT",
        },
    },
    "databaseAnalysis": {
        "functionValidation": [
            {"functionName": "create_session_secure", "securityVulnerabilities": [], "overallRating": "SECURE"},
        ],
        "securityAudit": {
            "sqlInjectionRisks": [],
            "rlsBypassRisks": [],
            "informationDisclosureRisks": [],
            "accessControlValidation": {
                "organizationIsolation": {"status": "PASS"},
                "roleBasedAccess": {"status": "PASS"},
                "overallRating": "SECURE",
            },
            "overallSecurityRating": "SECURE",
        },
    },
    "endToEndSimulation": {
        "officerFlow": _flow("officer"),
        "memberFlow": _flow("member"),
        "errorScenarios": [
            {"scenarioName": "bluetooth_disabled", "handledGracefully": True, "userImpact": "MINOR"},
        ],
    },
    "performanceAnalysis": {
        "scalabilityAssessment": {
            "maxConcurrentUsers": 300,
            "averageResponseTime": 180.0,
            "errorRate": 0.01,
            "bottlenecks": [],
            "overallPerformance": "EXCELLENT",
        },
        "bottleneckAnalysis": {},
    },
    "configurationAudit": {
        "appConfig": {
            "appUUIDPresence": {"status": "PASS"},
            "iosPermissions": [
                {"permission": "NSBluetoothAlwaysUsageDescription", "declared": True, "required": True,
                 "status": "VALID"},
                {"permission": "NSLocationWhenInUseUsageDescription", "declared": True, "required": True,
                 "status": "VALID"},
            ],
            "iosBackgroundModes": {"bluetoothCentral": True, "bluetoothPeripheral": True, "status": "COMPLETE"},
            "androidPermissions": [
                {"permission": "android.permission.BLUETOOTH_SCAN", "declared": True, "required": True,
                 "status": "VALID"},
                {"permission": "android.permission.BLUETOOTH_ADVERTISE", "declared": True, "required": True,
                 "status": "VALID"},
                {"permission": "android.permission.ACCESS_FINE_LOCATION", "declared": True, "required": True,
                 "status": "VALID"},
            ],
            "expoPluginConfiguration": {"nativeModulesConfigured": True, "status": "VALID"},
            "overallReadiness": "READY",
        },
        "easConfig": {
            "productionProfile": {"status": "PASS"},
            "nativeModuleSupport": {"status": "PASS"},
            "environmentVariables": {"status": "PASS"},
            "overallReadiness": "READY",
        },
        "deploymentReadiness": {
            "configurationCompleteness": 100,
            "criticalMissingItems": [],
            "deploymentRisk": "LOW",
            "overallReadiness": "READY",
        },
    },
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def healthy_result_data():
    """Independent copy of the healthy result in wire form."""
    return copy.deepcopy(HEALTHY_RESULT)


@pytest.fixture
def make_result(healthy_result_data):
    """Factory: healthy result with top-level keys replaced or dropped."""

    def _make(drop=(), **overrides):
        data = copy.deepcopy(healthy_result_data)
        for key in drop:
            data.pop(key, None)
        data.update(overrides)
        return load_validation_result(data)

    return _make


@pytest.fixture
def healthy_result(make_result):
    return make_result()


@pytest.fixture
def missing_component_result(make_result):
    """Four of six component analyses present (no simulation or performance)."""
    return make_result(drop=("endToEndSimulation", "performanceAnalysis"))


@pytest.fixture
def make_issue():
    """Factory for CriticalIssue with sensible defaults."""
    counter = {"n": 0}

    def _make(category="HIGH", component="NATIVE", blocker=False, effort="MEDIUM",
              title=None, location="", **kwargs):
        counter["n"] += 1
        n = counter["n"]
        return CriticalIssue(
            id=kwargs.pop("id", f"issue-{n}"),
            category=category,
            component=component,
            title=title or f"{component.title()} issue {n}",
            description=kwargs.pop("description", f"Description of issue {n}"),
            impact=kwargs.pop("impact", "Impact"),
            evidence=[Evidence(location=location)] if location else [],
            recommendation=kwargs.pop("recommendation", f"Fix issue {n}"),
            estimated_effort=effort,
            deployment_blocker=blocker,
            **kwargs,
        )

    return _make


@pytest.fixture
def fixed_clock():
    """Clock returning the same instant on every call."""
    return lambda: FIXED_NOW
