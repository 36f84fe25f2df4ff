#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Validation Result Models.

Pydantic models for the upstream validation result consumed by the report
engines. Field names are snake_case in Python and camelCase on the wire.

Closed vocabularies are str Enums, so a value outside the vocabulary is a
validation error at load time rather than a silent misclassification later.
Tier fields on sub-results are Optional: ``None`` means "tier not reported"
and scores with the conservative default of each scoring table.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------
class IssueCategory(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class IssueComponent(str, Enum):
    NATIVE = "NATIVE"
    BRIDGE = "BRIDGE"
    DATABASE = "DATABASE"
    SECURITY = "SECURITY"
    PERFORMANCE = "PERFORMANCE"
    CONFIG = "CONFIG"


class EffortLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"


class CheckStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    CONDITIONAL = "CONDITIONAL"
    PENDING = "PENDING"
    SKIPPED = "SKIPPED"


class Rating(str, Enum):
    PASS = "PASS"
    CONDITIONAL = "CONDITIONAL"
    FAIL = "FAIL"


class QualityTier(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"
    POOR = "POOR"


class SecurityTier(str, Enum):
    SECURE = "SECURE"
    MODERATE = "MODERATE"
    VULNERABLE = "VULNERABLE"


class PerformanceTier(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    ACCEPTABLE = "ACCEPTABLE"
    POOR = "POOR"


class ConfigReadiness(str, Enum):
    READY = "READY"
    NEEDS_CONFIGURATION = "NEEDS_CONFIGURATION"
    MISSING_CRITICAL = "MISSING_CRITICAL"


class ConfidenceTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ProductionReadiness(str, Enum):
    PRODUCTION_READY = "PRODUCTION_READY"
    NEEDS_FIXES = "NEEDS_FIXES"
    MAJOR_ISSUES = "MAJOR_ISSUES"
    NOT_READY = "NOT_READY"


class EvidenceType(str, Enum):
    CODE_REFERENCE = "CODE_REFERENCE"
    TEST_RESULT = "TEST_RESULT"
    PERFORMANCE_METRIC = "PERFORMANCE_METRIC"
    SECURITY_FINDING = "SECURITY_FINDING"
    CONFIG_ISSUE = "CONFIG_ISSUE"


class PermissionStatus(str, Enum):
    VALID = "VALID"
    MISSING = "MISSING"
    INVALID = "INVALID"


class PluginStatus(str, Enum):
    VALID = "VALID"
    NEEDS_CONFIGURATION = "NEEDS_CONFIGURATION"
    INVALID = "INVALID"


class BackgroundModeStatus(str, Enum):
    COMPLETE = "COMPLETE"
    PARTIAL = "PARTIAL"
    MISSING = "MISSING"


class UserImpact(str, Enum):
    NONE = "NONE"
    MINOR = "MINOR"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------
class Evidence(CamelModel):
    type: EvidenceType = EvidenceType.CODE_REFERENCE
    location: str = ""
    details: str = ""
    severity: Optional[Severity] = None
    line_number: Optional[int] = None
    code_snippet: Optional[str] = None


class CriticalIssue(CamelModel):
    """One issue raised by an upstream validator.

    ``impact_summary`` and ``remediation_summary`` are derived annotations;
    the engines attach them to copies and never to the caller's object.
    """

    id: str
    category: IssueCategory
    component: IssueComponent
    title: str
    description: str = ""
    impact: str = ""
    evidence: List[Evidence] = Field(default_factory=list)
    recommendation: str = ""
    estimated_effort: EffortLevel = EffortLevel.MEDIUM
    deployment_blocker: bool = False
    impact_summary: Optional[str] = None
    remediation_summary: Optional[str] = None


class ValidationCheck(CamelModel):
    """Outcome of a single upstream check (status plus message)."""

    id: str = ""
    name: str = ""
    status: CheckStatus
    severity: Optional[Severity] = None
    category: Optional[IssueComponent] = None
    message: str = ""
    recommendations: List[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS


class CodeRiskFinding(CamelModel):
    """Memory leak, threading or race condition finding in source code."""

    type: str = ""
    location: str = ""
    description: str = ""
    severity: RiskLevel = RiskLevel.MEDIUM
    recommendation: str = ""


# ---------------------------------------------------------------------------
# Native modules
# ---------------------------------------------------------------------------
class IOSAnalysis(CamelModel):
    core_bluetooth_integration: Optional[ValidationCheck] = None
    module_registration: Optional[ValidationCheck] = None
    i_beacon_configuration: Optional[ValidationCheck] = None
    permission_handling: Optional[ValidationCheck] = None
    background_mode_support: Optional[ValidationCheck] = None
    memory_leak_risks: List[CodeRiskFinding] = Field(default_factory=list)
    threading_issues: List[CodeRiskFinding] = Field(default_factory=list)
    overall_rating: Optional[Rating] = None


class AndroidAnalysis(CamelModel):
    bluetooth_le_integration: Optional[ValidationCheck] = None
    alt_beacon_library_usage: Optional[ValidationCheck] = None
    permission_handling: Optional[ValidationCheck] = None
    dual_scanning_mode: Optional[ValidationCheck] = None
    beacon_transmitter_setup: Optional[ValidationCheck] = None
    memory_leak_risks: List[CodeRiskFinding] = Field(default_factory=list)
    threading_issues: List[CodeRiskFinding] = Field(default_factory=list)
    overall_rating: Optional[Rating] = None


class NativeModuleAnalysis(CamelModel):
    ios: Optional[IOSAnalysis] = None
    android: Optional[AndroidAnalysis] = None


# ---------------------------------------------------------------------------
# Bridge layer
# ---------------------------------------------------------------------------
class BridgeCheck(CamelModel):
    passed: bool = False
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    score: float = 0.0


class SecurityCheck(BridgeCheck):
    vulnerabilities: List[str] = Field(default_factory=list)
    risk_level: Optional[RiskLevel] = None


class CollisionAnalysis(CamelModel):
    hash_space_size: Optional[float] = None
    expected_collision_rate: Optional[float] = None
    collision_probability: Optional[float] = None
    max_recommended_sessions: Optional[int] = None
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    risk_level: Optional[RiskLevel] = None


class BLEContextAnalysis(CamelModel):
    native_module_imports: Optional[BridgeCheck] = None
    permission_request_flow: Optional[BridgeCheck] = None
    broadcasting_state_management: Optional[BridgeCheck] = None
    scanning_state_management: Optional[BridgeCheck] = None
    event_listeners_cleanup: Optional[BridgeCheck] = None
    error_handling: Optional[BridgeCheck] = None
    race_condition_risks: List[CodeRiskFinding] = Field(default_factory=list)
    memory_leak_risks: List[CodeRiskFinding] = Field(default_factory=list)
    overall_quality: Optional[QualityTier] = None


class BLEHelperAnalysis(CamelModel):
    session_token_generation: Optional[SecurityCheck] = None
    token_hashing_algorithm: Optional[SecurityCheck] = None
    organization_code_mapping: Optional[BridgeCheck] = None
    uuid_validation: Optional[BridgeCheck] = None
    distance_calculation: Optional[BridgeCheck] = None
    collision_resistance: Optional[CollisionAnalysis] = None
    overall_security: Optional[SecurityTier] = None


class PermissionFlowAnalysis(CamelModel):
    platform_detection: Optional[BridgeCheck] = None
    permission_status_tracking: Optional[BridgeCheck] = None
    recovery_guidance: Optional[BridgeCheck] = None
    graceful_degradation: Optional[BridgeCheck] = None
    overall_rating: Optional[QualityTier] = None


class BridgeLayerAnalysis(CamelModel):
    ble_context: Optional[BLEContextAnalysis] = None
    ble_helper: Optional[BLEHelperAnalysis] = None
    permission_flow: Optional[PermissionFlowAnalysis] = None


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------
class SecurityVulnerability(CamelModel):
    type: str = ""
    severity: IssueCategory
    description: str = ""
    location: str = ""
    recommendation: str = ""
    cve_reference: Optional[str] = None


class FunctionValidation(CamelModel):
    function_name: Optional[str] = None
    syntax_validation: Optional[ValidationCheck] = None
    security_definer_usage: Optional[ValidationCheck] = None
    rls_compliance: Optional[ValidationCheck] = None
    input_validation: Optional[ValidationCheck] = None
    error_handling: Optional[ValidationCheck] = None
    performance_optimization: Optional[ValidationCheck] = None
    security_vulnerabilities: List[SecurityVulnerability] = Field(default_factory=list)
    overall_rating: Optional[SecurityTier] = None


class SQLInjectionRisk(CamelModel):
    location: str = ""
    risk_level: RiskLevel = RiskLevel.HIGH
    description: str = ""
    recommendation: str = ""


class RLSBypassRisk(CamelModel):
    policy_name: str = ""
    bypass_method: str = ""
    risk_level: RiskLevel = RiskLevel.HIGH
    description: str = ""
    recommendation: str = ""


class InformationDisclosureRisk(CamelModel):
    type: str = ""
    location: str = ""
    sensitive_data: str = ""
    risk_level: RiskLevel = RiskLevel.MEDIUM
    recommendation: str = ""


class AccessControlResult(CamelModel):
    authentication_validation: Optional[ValidationCheck] = None
    authorization_validation: Optional[ValidationCheck] = None
    role_based_access: Optional[ValidationCheck] = None
    organization_isolation: Optional[ValidationCheck] = None
    overall_rating: Optional[SecurityTier] = None


class DatabaseSecurityAudit(CamelModel):
    sql_injection_risks: List[SQLInjectionRisk] = Field(default_factory=list)
    rls_bypass_risks: List[RLSBypassRisk] = Field(default_factory=list)
    information_disclosure_risks: List[InformationDisclosureRisk] = Field(default_factory=list)
    access_control_validation: Optional[AccessControlResult] = None
    overall_security_rating: Optional[SecurityTier] = None


class DatabaseAnalysis(CamelModel):
    # None (not reported) and [] (nothing to validate) score differently.
    function_validation: Optional[List[FunctionValidation]] = None
    security_audit: Optional[DatabaseSecurityAudit] = None
    performance_test: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# End-to-end simulation
# ---------------------------------------------------------------------------
class SimulationStep(CamelModel):
    step_name: str = ""
    operation: str = ""
    input: Any = None
    expected_output: Any = None
    actual_output: Any = None
    success: bool = False
    execution_time: float = 0.0
    notes: List[str] = Field(default_factory=list)


class SimulationError(CamelModel):
    step: str = ""
    error_type: str = ""
    message: str = ""
    severity: IssueCategory = IssueCategory.MEDIUM


class DataIntegrityResult(CamelModel):
    data_consistency: bool = False
    foreign_key_integrity: bool = False
    constraint_violations: List[str] = Field(default_factory=list)
    overall_rating: Optional[Rating] = None


class FlowSimulation(CamelModel):
    flow_name: str = ""
    steps: List[SimulationStep] = Field(default_factory=list)
    overall_success: bool = False
    execution_time: float = 0.0
    errors: List[SimulationError] = Field(default_factory=list)
    data_integrity: Optional[DataIntegrityResult] = None


class ErrorScenario(CamelModel):
    scenario_name: str = ""
    error_type: str = ""
    trigger_condition: str = ""
    expected_behavior: str = ""
    actual_behavior: str = ""
    handled_gracefully: bool = False
    user_impact: Optional[UserImpact] = None


class EndToEndSimulation(CamelModel):
    officer_flow: Optional[FlowSimulation] = None
    member_flow: Optional[FlowSimulation] = None
    # None (not run) counts as unhandled; [] counts as all handled.
    error_scenarios: Optional[List[ErrorScenario]] = None


# ---------------------------------------------------------------------------
# Performance
# ---------------------------------------------------------------------------
class PerformanceBottleneck(CamelModel):
    component: str = ""
    description: str = ""
    impact: RiskLevel = RiskLevel.MEDIUM
    recommendation: str = ""


class ScalabilityAssessment(CamelModel):
    max_concurrent_users: int = 0
    average_response_time: float = 0.0
    error_rate: float = 0.0
    bottlenecks: List[PerformanceBottleneck] = Field(default_factory=list)
    overall_performance: Optional[PerformanceTier] = None


class BatteryUsageProfile(CamelModel):
    estimated_drain_per_hour: float = 0.0
    unit: str = ""
    comparison_to_baseline: str = ""
    sustainability_assessment: str = ""


class MemoryUsageProfile(CamelModel):
    baseline_usage: float = 0.0
    peak_usage: float = 0.0
    average_usage: float = 0.0
    unit: str = ""
    leak_risk: Optional[RiskLevel] = None


class CPUUsageProfile(CamelModel):
    average_usage: float = 0.0
    peak_usage: float = 0.0
    unit: str = ""
    thermal_impact: Optional[RiskLevel] = None


class NetworkUsageProfile(CamelModel):
    average_bandwidth: float = 0.0
    peak_bandwidth: float = 0.0
    unit: str = ""
    data_efficiency: Optional[str] = None


class ResourceUsageEstimate(CamelModel):
    battery_drain_estimate: Optional[BatteryUsageProfile] = None
    memory_consumption: Optional[MemoryUsageProfile] = None
    cpu_utilization: Optional[CPUUsageProfile] = None
    network_bandwidth: Optional[NetworkUsageProfile] = None
    sustainability_rating: Optional[str] = None


class BottleneckAnalysis(CamelModel):
    database_bottlenecks: List[PerformanceBottleneck] = Field(default_factory=list)
    native_module_bottlenecks: List[PerformanceBottleneck] = Field(default_factory=list)
    bridge_layer_bottlenecks: List[PerformanceBottleneck] = Field(default_factory=list)
    system_level_bottlenecks: List[PerformanceBottleneck] = Field(default_factory=list)

    def grouped(self) -> List[Tuple[str, List[PerformanceBottleneck]]]:
        """Bottleneck lists keyed by their wire name, in a fixed order."""
        return [
            ("databaseBottlenecks", self.database_bottlenecks),
            ("nativeModuleBottlenecks", self.native_module_bottlenecks),
            ("bridgeLayerBottlenecks", self.bridge_layer_bottlenecks),
            ("systemLevelBottlenecks", self.system_level_bottlenecks),
        ]


class PerformanceAnalysis(CamelModel):
    scalability_assessment: Optional[ScalabilityAssessment] = None
    resource_usage: Optional[ResourceUsageEstimate] = None
    bottleneck_analysis: Optional[BottleneckAnalysis] = None


# ---------------------------------------------------------------------------
# Configuration audit
# ---------------------------------------------------------------------------
class PermissionDeclaration(CamelModel):
    permission: str
    declared: bool = False
    required: bool = False
    usage_description: Optional[str] = None
    status: PermissionStatus = PermissionStatus.MISSING


class BackgroundModeValidation(CamelModel):
    bluetooth_central: bool = False
    bluetooth_peripheral: bool = False
    background_processing: bool = False
    status: Optional[BackgroundModeStatus] = None


class PluginConfiguration(CamelModel):
    native_modules_configured: bool = False
    build_settings_valid: bool = False
    dependencies_resolved: bool = False
    status: Optional[PluginStatus] = None


class AppConfigAudit(CamelModel):
    app_uuid_presence: Optional[ValidationCheck] = Field(default=None, alias="appUUIDPresence")
    ios_permissions: List[PermissionDeclaration] = Field(default_factory=list)
    ios_background_modes: Optional[BackgroundModeValidation] = None
    android_permissions: List[PermissionDeclaration] = Field(default_factory=list)
    expo_plugin_configuration: Optional[PluginConfiguration] = None
    overall_readiness: Optional[ConfigReadiness] = None


class EASConfigAudit(CamelModel):
    development_profile: Optional[ValidationCheck] = None
    production_profile: Optional[ValidationCheck] = None
    native_module_support: Optional[ValidationCheck] = None
    environment_variables: Optional[ValidationCheck] = None
    overall_readiness: Optional[ConfigReadiness] = None


class DeploymentReadinessAssessment(CamelModel):
    configuration_completeness: float = 0.0
    critical_missing_items: List[str] = Field(default_factory=list)
    recommended_optimizations: List[str] = Field(default_factory=list)
    deployment_risk: Optional[RiskLevel] = None
    overall_readiness: Optional[ConfigReadiness] = None


class ConfigurationAudit(CamelModel):
    app_config: Optional[AppConfigAudit] = None
    eas_config: Optional[EASConfigAudit] = None
    deployment_readiness: Optional[DeploymentReadinessAssessment] = None


# ---------------------------------------------------------------------------
# Aggregate result
# ---------------------------------------------------------------------------
ANALYZED_COMPONENT_FIELDS = (
    "native_module_analysis",
    "bridge_layer_analysis",
    "database_analysis",
    "end_to_end_simulation",
    "performance_analysis",
    "configuration_audit",
)


class BLEValidationResult(CamelModel):
    """Full output of one upstream validation run.

    Each of the six component analyses is optional; an absent analysis
    means the component was not analyzed and scores as a failure.
    """

    execution_id: str
    execution_timestamp: datetime
    validation_version: str

    overall_status: Optional[CheckStatus] = None
    production_readiness: Optional[ProductionReadiness] = None
    confidence_level: Optional[ConfidenceTier] = None
    critical_issues: List[CriticalIssue] = Field(default_factory=list)
    all_recommendations: List[str] = Field(default_factory=list)

    total_execution_time: Optional[float] = None
    total_issues_found: int = 0

    native_module_analysis: Optional[NativeModuleAnalysis] = None
    bridge_layer_analysis: Optional[BridgeLayerAnalysis] = None
    database_analysis: Optional[DatabaseAnalysis] = None
    end_to_end_simulation: Optional[EndToEndSimulation] = None
    performance_analysis: Optional[PerformanceAnalysis] = None
    configuration_audit: Optional[ConfigurationAudit] = None

    def analyzed_components(self) -> List[str]:
        """Names of the component analyses present in this result."""
        return [name for name in ANALYZED_COMPONENT_FIELDS if getattr(self, name) is not None]

    def analysis_completeness(self) -> float:
        """Fraction of the six component analyses present, in [0, 1]."""
        return len(self.analyzed_components()) / len(ANALYZED_COMPONENT_FIELDS)
