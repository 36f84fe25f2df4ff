#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Deployment Readiness Checklist.

Evaluates a fixed registry of checklist items against a validation result
and rolls them up into four sections (configuration, permissions, build
configuration, monitoring), an overall readiness status, a deployment risk
level and a deployment timeline.

Each registry entry pairs the static item text with an evaluator that reads
the validation result and returns ``(status, evidence)``. Evidence that the
result does not carry yields FAIL; monitoring items, which static validation
cannot observe, stay PARTIAL.

Usage:
    from ble_readiness.reporting.deployment_checklist import DefaultDeploymentChecklistGenerator

    checklist = DefaultDeploymentChecklistGenerator().generate_deployment_checklist(result)
    print(checklist.overall_readiness, checklist.deployment_risk)
"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from ble_readiness.models import (
    AppConfigAudit,
    BLEValidationResult,
    BridgeCheck,
    CheckStatus,
    EASConfigAudit,
    PermissionStatus,
    PluginStatus,
    Rating,
    RiskLevel,
    SecurityTier,
    ValidationCheck,
)
from ble_readiness.report_models import (
    ChecklistCategory,
    ChecklistPriority,
    ChecklistSection,
    ChecklistStatus,
    DeploymentReadinessChecklist,
    DeploymentReadinessItem,
)
from ble_readiness.reporting.base import Clock, DeploymentChecklistGenerator, percent, utc_now

logger = logging.getLogger("ble_readiness.reporting.deployment_checklist")

Evaluation = Tuple[ChecklistStatus, List[str]]

READY_THRESHOLD = 90
PARTIAL_THRESHOLD = 70
REQUIRED_IOS_PERMISSIONS = ("NSBluetoothAlwaysUsageDescription", "NSLocationWhenInUseUsageDescription")
REQUIRED_ANDROID_PERMISSIONS = ("BLUETOOTH_SCAN", "BLUETOOTH_ADVERTISE", "ACCESS_FINE_LOCATION")

NO_APP_CONFIG = "App configuration audit not available"
NO_EAS_CONFIG = "EAS configuration audit not available"


# ---------------------------------------------------------------------------
# Evidence readers
# ---------------------------------------------------------------------------
def _app_config(result: BLEValidationResult) -> Optional[AppConfigAudit]:
    audit = result.configuration_audit
    return audit.app_config if audit is not None else None


def _eas_config(result: BLEValidationResult) -> Optional[EASConfigAudit]:
    audit = result.configuration_audit
    return audit.eas_config if audit is not None else None


def _status(passed: bool) -> ChecklistStatus:
    return ChecklistStatus.PASS if passed else ChecklistStatus.FAIL


def _check_passed(check: Optional[ValidationCheck]) -> bool:
    return check is not None and check.status == CheckStatus.PASS


def _bridge_passed(check: Optional[BridgeCheck]) -> bool:
    return check is not None and check.passed


def _check_evidence(label: str, check: Optional[ValidationCheck]) -> List[str]:
    if check is None:
        return [f"{label}: not reported"]
    evidence = [f"{label}: {check.status.value}"]
    if check.message:
        evidence.append(check.message)
    return evidence


def _permission_evaluation(declarations, required: Sequence[str]) -> Evaluation:
    by_name = {d.permission.split(".")[-1]: d for d in declarations}
    evidence = [f"{d.permission}: {d.status.value}" for d in declarations]
    missing = [name for name in required if name not in by_name]
    evidence.extend(f"{name}: not declared" for name in missing)
    passed = not missing and all(by_name[name].status == PermissionStatus.VALID for name in required)
    return _status(passed), evidence


# ---------------------------------------------------------------------------
# Configuration evaluators
# ---------------------------------------------------------------------------
def _eval_app_uuid(result: BLEValidationResult) -> Evaluation:
    app = _app_config(result)
    if app is None:
        return ChecklistStatus.FAIL, [NO_APP_CONFIG]
    if _check_passed(app.app_uuid_presence):
        return ChecklistStatus.PASS, ["APP_UUID found in app.json configuration"]
    return ChecklistStatus.FAIL, ["APP_UUID missing from app.json configuration"]


def _eval_ios_permissions(result: BLEValidationResult) -> Evaluation:
    app = _app_config(result)
    if app is None:
        return ChecklistStatus.FAIL, [NO_APP_CONFIG]
    return _permission_evaluation(app.ios_permissions, REQUIRED_IOS_PERMISSIONS)


def _eval_android_permissions(result: BLEValidationResult) -> Evaluation:
    app = _app_config(result)
    if app is None:
        return ChecklistStatus.FAIL, [NO_APP_CONFIG]
    return _permission_evaluation(app.android_permissions, REQUIRED_ANDROID_PERMISSIONS)


def _eval_background_modes(result: BLEValidationResult) -> Evaluation:
    app = _app_config(result)
    modes = app.ios_background_modes if app is not None else None
    if modes is None:
        return ChecklistStatus.FAIL, ["iOS background modes not reported"]

    def state(enabled: bool) -> str:
        return "enabled" if enabled else "disabled"

    return _status(modes.bluetooth_central and modes.bluetooth_peripheral), [
        f"bluetooth-central: {state(modes.bluetooth_central)}",
        f"bluetooth-peripheral: {state(modes.bluetooth_peripheral)}",
    ]


def _eval_expo_plugins(result: BLEValidationResult) -> Evaluation:
    app = _app_config(result)
    plugins = app.expo_plugin_configuration if app is not None else None
    if plugins is not None and plugins.status == PluginStatus.VALID:
        return ChecklistStatus.PASS, ["Expo plugins properly configured"]
    return ChecklistStatus.FAIL, ["Expo plugin configuration issues detected"]


def _eval_environment_variables(result: BLEValidationResult) -> Evaluation:
    eas = _eas_config(result)
    if eas is None:
        return ChecklistStatus.FAIL, [NO_EAS_CONFIG]
    check = eas.environment_variables
    return _status(_check_passed(check)), _check_evidence("Environment variables", check)


# ---------------------------------------------------------------------------
# Permission evaluators
# ---------------------------------------------------------------------------
def _native_permission_check(result: BLEValidationResult, platform: str) -> Optional[ValidationCheck]:
    native = result.native_module_analysis
    analysis = getattr(native, platform, None) if native is not None else None
    return analysis.permission_handling if analysis is not None else None


def _eval_ios_permission_handling(result: BLEValidationResult) -> Evaluation:
    check = _native_permission_check(result, "ios")
    return _status(_check_passed(check)), _check_evidence("iOS permission handling", check)


def _eval_android_permission_handling(result: BLEValidationResult) -> Evaluation:
    check = _native_permission_check(result, "android")
    return _status(_check_passed(check)), _check_evidence("Android permission handling", check)


def _permission_flow_check(result: BLEValidationResult, attribute: str) -> Optional[BridgeCheck]:
    bridge = result.bridge_layer_analysis
    flow = bridge.permission_flow if bridge is not None else None
    return getattr(flow, attribute) if flow is not None else None


def _bridge_evidence(label: str, check: Optional[BridgeCheck]) -> List[str]:
    if check is None:
        return [f"{label}: not reported"]
    return [f"{label}: {'passed' if check.passed else 'failed'}"] + list(check.issues)


def _eval_permission_error_handling(result: BLEValidationResult) -> Evaluation:
    check = _permission_flow_check(result, "graceful_degradation")
    return _status(_bridge_passed(check)), _bridge_evidence("Graceful degradation", check)


def _eval_permission_recovery(result: BLEValidationResult) -> Evaluation:
    check = _permission_flow_check(result, "recovery_guidance")
    return _status(_bridge_passed(check)), _bridge_evidence("Recovery guidance", check)


# ---------------------------------------------------------------------------
# Build configuration evaluators
# ---------------------------------------------------------------------------
def _eval_production_profile(result: BLEValidationResult) -> Evaluation:
    eas = _eas_config(result)
    if eas is not None and _check_passed(eas.production_profile):
        return ChecklistStatus.PASS, ["EAS production profile configured"]
    return ChecklistStatus.FAIL, ["EAS production profile missing or invalid"]


def _eval_native_module_build(result: BLEValidationResult) -> Evaluation:
    eas = _eas_config(result)
    if eas is None:
        return ChecklistStatus.FAIL, [NO_EAS_CONFIG]
    check = eas.native_module_support
    return _status(_check_passed(check)), _check_evidence("Native module support", check)


def _platform_build(result: BLEValidationResult, platform: str, label: str) -> Evaluation:
    eas = _eas_config(result)
    native = result.native_module_analysis
    analysis = getattr(native, platform, None) if native is not None else None
    rating = analysis.overall_rating if analysis is not None else None

    support = eas is not None and _check_passed(eas.native_module_support)
    evidence = [
        f"Native module support: {'PASS' if support else 'not confirmed'}",
        f"{label} native module rating: {rating.value if rating is not None else 'not reported'}",
    ]
    return _status(support and rating is not None and rating != Rating.FAIL), evidence


def _eval_ios_build(result: BLEValidationResult) -> Evaluation:
    return _platform_build(result, "ios", "iOS")


def _eval_android_build(result: BLEValidationResult) -> Evaluation:
    return _platform_build(result, "android", "Android")


def _eval_production_environment(result: BLEValidationResult) -> Evaluation:
    eas = _eas_config(result)
    if eas is None:
        return ChecklistStatus.FAIL, [NO_EAS_CONFIG]
    passed = _check_passed(eas.environment_variables) and _check_passed(eas.production_profile)
    return _status(passed), (
        _check_evidence("Environment variables", eas.environment_variables)
        + _check_evidence("Production profile", eas.production_profile)
    )


def _eval_security_build(result: BLEValidationResult) -> Evaluation:
    database = result.database_analysis
    audit = database.security_audit if database is not None else None
    db_rating = audit.overall_security_rating if audit is not None else None

    bridge = result.bridge_layer_analysis
    helper = bridge.ble_helper if bridge is not None else None
    token_rating = helper.overall_security if helper is not None else None

    ratings = (db_rating, token_rating)
    passed = all(r is not None and r != SecurityTier.VULNERABLE for r in ratings)
    return _status(passed), [
        f"Database security rating: {db_rating.value if db_rating else 'not reported'}",
        f"Token security rating: {token_rating.value if token_rating else 'not reported'}",
    ]


# ---------------------------------------------------------------------------
# Monitoring evaluators
# ---------------------------------------------------------------------------
def _partial(evidence: str) -> Callable[[BLEValidationResult], Evaluation]:
    def evaluate(result: BLEValidationResult) -> Evaluation:
        return ChecklistStatus.PARTIAL, [evidence]
    return evaluate


def _eval_database_monitoring(result: BLEValidationResult) -> Evaluation:
    status = ChecklistStatus.PASS if result.database_analysis is not None else ChecklistStatus.PARTIAL
    return status, ["Database monitoring available through Supabase dashboard"]


# ---------------------------------------------------------------------------
# Item registry
# ---------------------------------------------------------------------------
class ChecklistItemSpec(NamedTuple):
    category: ChecklistCategory
    priority: ChecklistPriority
    title: str
    description: str
    remediation: str
    validation_steps: Tuple[str, ...]
    evaluate: Callable[[BLEValidationResult], Evaluation]


_CONF = ChecklistCategory.CONFIGURATION
_PERM = ChecklistCategory.PERMISSIONS
_BUILD = ChecklistCategory.BUILD_CONFIG
_MON = ChecklistCategory.MONITORING
_CRIT = ChecklistPriority.CRITICAL
_HIGH = ChecklistPriority.HIGH
_MED = ChecklistPriority.MEDIUM

ITEM_REGISTRY: Dict[str, ChecklistItemSpec] = {
    # Configuration
    "app-uuid-config": ChecklistItemSpec(
        _CONF, _CRIT, "APP_UUID Configuration",
        "Verify APP_UUID is properly configured in app.json",
        "Add APP_UUID to app.json extra configuration",
        ("Check app.json for APP_UUID in extra section", "Verify UUID format is valid",
         "Confirm UUID is unique for organization"),
        _eval_app_uuid,
    ),
    "ios-permissions-config": ChecklistItemSpec(
        _CONF, _CRIT, "iOS Permissions Configuration",
        "Verify all required iOS permissions are declared",
        "Add missing iOS permission declarations to app.json",
        ("Check NSBluetoothAlwaysUsageDescription", "Check NSLocationWhenInUseUsageDescription",
         "Verify permission descriptions are user-friendly"),
        _eval_ios_permissions,
    ),
    "ios-background-modes": ChecklistItemSpec(
        _CONF, _HIGH, "iOS Background Modes",
        "Verify iOS background modes are properly configured",
        "Add bluetooth-central and bluetooth-peripheral to background modes",
        ("Check background modes in app.json", "Verify bluetooth-central is enabled",
         "Verify bluetooth-peripheral is enabled"),
        _eval_background_modes,
    ),
    "android-permissions-config": ChecklistItemSpec(
        _CONF, _CRIT, "Android Permissions Configuration",
        "Verify all required Android permissions are declared",
        "Add missing Android permission declarations to app.json",
        ("Check BLUETOOTH_SCAN permission", "Check BLUETOOTH_ADVERTISE permission",
         "Check ACCESS_FINE_LOCATION permission", "Verify API level 31+ permissions"),
        _eval_android_permissions,
    ),
    "expo-plugin-config": ChecklistItemSpec(
        _CONF, _HIGH, "Expo Plugin Configuration",
        "Verify native modules are properly configured as Expo plugins",
        "Configure native modules as Expo plugins in app.json",
        ("Check plugins array in app.json", "Verify BLE native modules are listed",
         "Confirm plugin configuration is valid"),
        _eval_expo_plugins,
    ),
    "environment-variables": ChecklistItemSpec(
        _CONF, _HIGH, "Environment Variables",
        "Verify all required environment variables are configured",
        "Configure missing environment variables",
        ("Check EXPO_PUBLIC_BLE_ENABLED variable", "Verify Supabase configuration variables",
         "Confirm production vs development settings"),
        _eval_environment_variables,
    ),
    # Permissions
    "ios-bluetooth-permission": ChecklistItemSpec(
        _PERM, _CRIT, "iOS Bluetooth Permission",
        "Verify iOS Bluetooth permission is properly requested and handled",
        "Implement proper iOS Bluetooth permission request flow",
        ("Check CBCentralManager authorization request", "Verify permission status handling",
         "Test permission denial scenarios"),
        _eval_ios_permission_handling,
    ),
    "ios-location-permission": ChecklistItemSpec(
        _PERM, _CRIT, "iOS Location Permission",
        "Verify iOS location permission is properly requested for BLE scanning",
        "Implement proper iOS location permission request flow",
        ("Check CLLocationManager authorization request", "Verify whenInUse permission is sufficient",
         "Test location permission denial scenarios"),
        _eval_ios_permission_handling,
    ),
    "android-bluetooth-scan-permission": ChecklistItemSpec(
        _PERM, _CRIT, "Android Bluetooth Scan Permission",
        "Verify Android BLUETOOTH_SCAN permission (API 31+)",
        "Implement Android 12+ BLUETOOTH_SCAN permission request",
        ("Check runtime permission request for BLUETOOTH_SCAN", "Verify API level 31+ handling",
         "Test permission denial scenarios"),
        _eval_android_permission_handling,
    ),
    "android-bluetooth-advertise-permission": ChecklistItemSpec(
        _PERM, _CRIT, "Android Bluetooth Advertise Permission",
        "Verify Android BLUETOOTH_ADVERTISE permission (API 31+)",
        "Implement Android 12+ BLUETOOTH_ADVERTISE permission request",
        ("Check runtime permission request for BLUETOOTH_ADVERTISE", "Verify API level 31+ handling",
         "Test permission denial scenarios"),
        _eval_android_permission_handling,
    ),
    "android-location-permission": ChecklistItemSpec(
        _PERM, _CRIT, "Android Location Permission",
        "Verify Android ACCESS_FINE_LOCATION permission for BLE scanning",
        "Implement Android location permission request flow",
        ("Check runtime permission request for ACCESS_FINE_LOCATION", "Verify location services requirement",
         "Test location permission denial scenarios"),
        _eval_android_permission_handling,
    ),
    "permission-error-handling": ChecklistItemSpec(
        _PERM, _HIGH, "Permission Error Handling",
        "Verify graceful handling of permission denials",
        "Implement comprehensive permission error handling",
        ("Test permission denial scenarios", "Verify user guidance for denied permissions",
         "Check fallback behavior implementation"),
        _eval_permission_error_handling,
    ),
    "permission-recovery-guidance": ChecklistItemSpec(
        _PERM, _MED, "Permission Recovery Guidance",
        "Verify clear user guidance for permission recovery",
        "Implement clear permission recovery instructions",
        ("Check user guidance messages", "Verify settings navigation instructions",
         "Test permission re-request flow"),
        _eval_permission_recovery,
    ),
    # Build configuration
    "eas-production-profile": ChecklistItemSpec(
        _BUILD, _CRIT, "EAS Production Profile",
        "Verify EAS production build profile is properly configured",
        "Configure EAS production profile in eas.json",
        ("Check eas.json production profile exists", "Verify production build settings",
         "Confirm distribution configuration"),
        _eval_production_profile,
    ),
    "native-module-build-config": ChecklistItemSpec(
        _BUILD, _CRIT, "Native Module Build Configuration",
        "Verify native modules are properly configured for production builds",
        "Configure native module build settings for production",
        ("Check native module compilation settings", "Verify iOS build configuration",
         "Verify Android build configuration"),
        _eval_native_module_build,
    ),
    "ios-build-settings": ChecklistItemSpec(
        _BUILD, _HIGH, "iOS Build Settings",
        "Verify iOS-specific build settings for production",
        "Configure iOS production build settings",
        ("Check iOS deployment target", "Verify code signing configuration",
         "Confirm provisioning profile settings"),
        _eval_ios_build,
    ),
    "android-build-settings": ChecklistItemSpec(
        _BUILD, _HIGH, "Android Build Settings",
        "Verify Android-specific build settings for production",
        "Configure Android production build settings",
        ("Check Android API level requirements", "Verify signing configuration",
         "Confirm ProGuard/R8 settings"),
        _eval_android_build,
    ),
    "production-environment-config": ChecklistItemSpec(
        _BUILD, _CRIT, "Production Environment Configuration",
        "Verify production environment variables and settings",
        "Configure production environment variables",
        ("Check production Supabase configuration", "Verify API endpoints", "Confirm feature flags"),
        _eval_production_environment,
    ),
    "security-build-config": ChecklistItemSpec(
        _BUILD, _HIGH, "Security Build Configuration",
        "Verify security-related build configurations",
        "Configure security build settings",
        ("Check code obfuscation settings", "Verify certificate pinning", "Confirm debug flag removal"),
        _eval_security_build,
    ),
    # Monitoring
    "application-monitoring": ChecklistItemSpec(
        _MON, _HIGH, "Application Performance Monitoring",
        "Verify APM solution is configured for production monitoring",
        "Configure APM solution (e.g., Sentry, Bugsnag)",
        ("Check APM SDK integration", "Verify error tracking configuration",
         "Confirm performance monitoring setup"),
        _partial("Application monitoring partially configured"),
    ),
    "ble-operation-monitoring": ChecklistItemSpec(
        _MON, _HIGH, "BLE Operation Monitoring",
        "Verify BLE-specific operation monitoring and logging",
        "Implement BLE operation monitoring and metrics",
        ("Check BLE success/failure rate tracking", "Verify session creation monitoring",
         "Confirm attendance submission tracking"),
        _partial("BLE operation monitoring needs implementation"),
    ),
    "database-monitoring": ChecklistItemSpec(
        _MON, _MED, "Database Performance Monitoring",
        "Verify database performance monitoring is configured",
        "Configure database performance monitoring",
        ("Check Supabase monitoring dashboard", "Verify query performance tracking",
         "Confirm connection pool monitoring"),
        _eval_database_monitoring,
    ),
    "user-analytics": ChecklistItemSpec(
        _MON, _MED, "User Analytics and Behavior Tracking",
        "Verify user analytics are configured for usage insights",
        "Configure user analytics (e.g., Amplitude, Mixpanel)",
        ("Check analytics SDK integration", "Verify event tracking configuration",
         "Confirm user journey tracking"),
        _partial("User analytics partially configured"),
    ),
    "alerting-configuration": ChecklistItemSpec(
        _MON, _HIGH, "Alerting and Notification Setup",
        "Verify alerting is configured for critical issues",
        "Configure alerting for critical metrics and errors",
        ("Check error rate alerting", "Verify performance threshold alerts", "Confirm escalation procedures"),
        _partial("Alerting configuration needs enhancement"),
    ),
    "log-management": ChecklistItemSpec(
        _MON, _MED, "Log Management and Aggregation",
        "Verify log management solution is configured",
        "Configure log aggregation and management",
        ("Check log aggregation setup", "Verify log retention policies", "Confirm log search capabilities"),
        _partial("Log management partially configured"),
    ),
    "health-checks": ChecklistItemSpec(
        _MON, _MED, "Health Check Endpoints",
        "Verify health check endpoints are implemented",
        "Implement health check endpoints",
        ("Check application health endpoint", "Verify database connectivity check",
         "Confirm external service health checks"),
        _partial("Health check endpoints need implementation"),
    ),
}

FINAL_ACTIONS = [
    "Conduct final pre-deployment testing",
    "Prepare rollback procedures",
    "Set up monitoring and alerting",
]

PRE_DEPLOYMENT_TASKS = [
    "Complete all critical configuration items",
    "Verify all permissions are properly configured",
    "Test build configuration in staging environment",
    "Validate monitoring and alerting setup",
    "Conduct final security review",
    "Prepare deployment documentation",
    "Brief deployment team on procedures",
]

POST_DEPLOYMENT_TASKS = [
    "Monitor application performance and error rates",
    "Verify BLE functionality in production environment",
    "Check user permission flows on real devices",
    "Monitor database performance and connection usage",
    "Validate real-time subscription functionality",
    "Collect user feedback and usage analytics",
    "Review and adjust monitoring thresholds",
]

ROLLBACK_PROCEDURES = [
    "Maintain previous version deployment artifacts",
    "Document rollback decision criteria and thresholds",
    "Prepare database rollback scripts if schema changes exist",
    "Establish communication plan for rollback scenarios",
    "Test rollback procedures in staging environment",
    "Define rollback authorization and approval process",
    "Plan user communication for rollback scenarios",
]

SIGN_OFF_REQUIREMENTS = [
    "Technical lead approval on code changes and architecture",
    "Security team approval on security configurations",
    "DevOps team approval on deployment configuration",
    "Product owner approval on feature completeness",
    "QA team approval on testing completion",
    "Stakeholder approval on deployment timeline",
    "Legal/Compliance approval if handling sensitive data",
]

TIMELINE_CRITICAL = [
    "Phase 1: Address critical configuration issues (1-2 days)",
    "Phase 2: Complete high priority items (2-3 days)",
    "Phase 3: Final testing and validation (1-2 days)",
    "Phase 4: Deployment execution (1 day)",
    "Total estimated timeline: 5-8 days",
]
TIMELINE_HIGH = [
    "Phase 1: Complete high priority items (1-2 days)",
    "Phase 2: Final testing and validation (1 day)",
    "Phase 3: Deployment execution (1 day)",
    "Total estimated timeline: 3-4 days",
]
TIMELINE_READY = [
    "Phase 1: Final validation and testing (1 day)",
    "Phase 2: Deployment execution (1 day)",
    "Total estimated timeline: 2 days",
]


# ---------------------------------------------------------------------------
# Roll-up rules
# ---------------------------------------------------------------------------
def evaluate_items(result: BLEValidationResult) -> List[DeploymentReadinessItem]:
    items = []
    for item_id, entry in ITEM_REGISTRY.items():
        status, evidence = entry.evaluate(result)
        items.append(DeploymentReadinessItem(
            id=item_id,
            category=entry.category,
            title=entry.title,
            description=entry.description,
            status=status,
            priority=entry.priority,
            evidence=evidence,
            remediation=entry.remediation,
            validation_steps=list(entry.validation_steps),
        ))
    return items


def _failed(items: Sequence[DeploymentReadinessItem], priority: ChecklistPriority) -> List[DeploymentReadinessItem]:
    return [i for i in items if i.priority == priority and i.status == ChecklistStatus.FAIL]


def build_section(category: ChecklistCategory, items: Sequence[DeploymentReadinessItem]) -> ChecklistSection:
    passed = sum(1 for i in items if i.status == ChecklistStatus.PASS)
    if _failed(items, ChecklistPriority.CRITICAL):
        status = ChecklistStatus.FAIL
    elif passed == len(items):
        status = ChecklistStatus.PASS
    else:
        status = ChecklistStatus.PARTIAL

    return ChecklistSection(
        category=category,
        total_items=len(items),
        completed_items=passed,
        critical_items=[i for i in items if i.priority == ChecklistPriority.CRITICAL],
        missing_items=[i for i in items if i.status == ChecklistStatus.FAIL],
        items=list(items),
        completeness_percentage=percent(passed, len(items)),
        overall_status=status,
    )


def overall_readiness(items: Sequence[DeploymentReadinessItem]) -> ChecklistStatus:
    if _failed(items, ChecklistPriority.CRITICAL):
        return ChecklistStatus.FAIL
    completeness = percent(sum(1 for i in items if i.status == ChecklistStatus.PASS), len(items))
    if completeness >= READY_THRESHOLD:
        return ChecklistStatus.PASS
    if completeness >= PARTIAL_THRESHOLD:
        return ChecklistStatus.PARTIAL
    return ChecklistStatus.FAIL


def deployment_risk(items: Sequence[DeploymentReadinessItem]) -> RiskLevel:
    failed_high = len(_failed(items, ChecklistPriority.HIGH))
    if _failed(items, ChecklistPriority.CRITICAL) or failed_high > 2:
        return RiskLevel.HIGH
    if failed_high:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def recommended_actions(items: Sequence[DeploymentReadinessItem]) -> List[str]:
    actions: List[str] = []
    for action in [i.remediation for i in items if i.status == ChecklistStatus.FAIL] + FINAL_ACTIONS:
        if action not in actions:
            actions.append(action)
    return actions


def deployment_timeline(items: Sequence[DeploymentReadinessItem]) -> List[str]:
    if _failed(items, ChecklistPriority.CRITICAL):
        return list(TIMELINE_CRITICAL)
    if _failed(items, ChecklistPriority.HIGH):
        return list(TIMELINE_HIGH)
    return list(TIMELINE_READY)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
class DefaultDeploymentChecklistGenerator(DeploymentChecklistGenerator):
    """Registry-driven checklist; timestamps come from ``clock``."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or utc_now

    def generate_deployment_checklist(self, result: BLEValidationResult) -> DeploymentReadinessChecklist:
        items = evaluate_items(result)
        sections = {
            category: build_section(category, [i for i in items if i.category == category])
            for category in ChecklistCategory
        }
        readiness = overall_readiness(items)
        risk = deployment_risk(items)
        logger.debug(
            "Checklist: %d/%d items pass, readiness=%s risk=%s",
            sum(1 for i in items if i.status == ChecklistStatus.PASS), len(items),
            readiness.value, risk.value,
        )

        return DeploymentReadinessChecklist(
            generation_timestamp=self.clock(),
            validation_version=result.validation_version,
            execution_id=result.execution_id,
            configuration_completeness=sections[ChecklistCategory.CONFIGURATION],
            permission_validation=sections[ChecklistCategory.PERMISSIONS],
            build_configuration=sections[ChecklistCategory.BUILD_CONFIG],
            monitoring_setup=sections[ChecklistCategory.MONITORING],
            overall_readiness=readiness,
            critical_missing_items=[i.title for i in _failed(items, ChecklistPriority.CRITICAL)],
            recommended_actions=recommended_actions(items),
            deployment_risk=risk,
            pre_deployment_tasks=list(PRE_DEPLOYMENT_TASKS),
            post_deployment_tasks=list(POST_DEPLOYMENT_TASKS),
            rollback_procedures=list(ROLLBACK_PROCEDURES),
            sign_off_requirements=list(SIGN_OFF_REQUIREMENTS),
            deployment_timeline=deployment_timeline(items),
        )
