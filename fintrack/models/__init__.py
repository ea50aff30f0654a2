"""
Data Models Package

This package contains all Pydantic models used in fintrack.
Records describe what the user keeps; metrics describe what we derive.
"""

from fintrack.models.records import (
    Asset,
    AssetType,
    Currency,
    Goal,
    GoalsProgress,
    Installment,
    LIQUID_ASSET_TYPES,
    Liability,
    LiabilityType,
    PaymentCalendarDay,
    Profile,
    Receivable,
    ReceivableStatus,
    RiskProfile,
    Subscription,
    Transaction,
    TransactionCategory,
    TransactionType,
)
from fintrack.models.metrics import (
    CATEGORY_FIELDS,
    CFOReportData,
    FinancialOverview,
    FinancialSnapshot,
    FinancialStatus,
    FinancialStatusLevel,
    HealthScore,
    HealthScoreParams,
    Recommendation,
    RecommendationIcon,
    RecommendationParams,
    RecommendationType,
    ReserveItem,
    SafeToSpendExplanation,
    SafeToSpendMode,
    SafeToSpendParams,
    ScoreBreakdown,
    ScoreCategory,
    UNKNOWN_SCORE,
)
from fintrack.models.validation import (
    ValidationIssue,
    ValidationResult,
)
from fintrack.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Record models
    "Asset",
    "AssetType",
    "Currency",
    "Goal",
    "GoalsProgress",
    "Installment",
    "LIQUID_ASSET_TYPES",
    "Liability",
    "LiabilityType",
    "PaymentCalendarDay",
    "Profile",
    "Receivable",
    "ReceivableStatus",
    "RiskProfile",
    "Subscription",
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    # Metric models
    "CATEGORY_FIELDS",
    "CFOReportData",
    "FinancialOverview",
    "FinancialSnapshot",
    "FinancialStatus",
    "FinancialStatusLevel",
    "HealthScore",
    "HealthScoreParams",
    "Recommendation",
    "RecommendationIcon",
    "RecommendationParams",
    "RecommendationType",
    "ReserveItem",
    "SafeToSpendExplanation",
    "SafeToSpendMode",
    "SafeToSpendParams",
    "ScoreBreakdown",
    "ScoreCategory",
    "UNKNOWN_SCORE",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
