"""
Audit Models for fintrack

Every change to the ledger and every computed overview is recorded.
This provides:
1. Traceability of how a number on the dashboard came about
2. Debugging information when a score looks wrong
3. A history of record changes

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.
    """
    # Ledger changes
    RECORD_ADDED = "record_added"
    RECORD_UPDATED = "record_updated"
    RECORD_REMOVED = "record_removed"
    RECORD_REJECTED = "record_rejected"
    LEDGER_CLEARED = "ledger_cleared"

    # Metric computation
    SNAPSHOT_BUILT = "snapshot_built"
    HEALTH_SCORE_COMPUTED = "health_score_computed"
    SAFE_TO_SPEND_COMPUTED = "safe_to_spend_computed"
    RECOMMENDATIONS_GENERATED = "recommendations_generated"
    OVERVIEW_GENERATED = "overview_generated"

    # System events
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'asset', 'liability', 'overview')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one overview build)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.record_added("asset", asset.id, asset.name)
        event = AuditEventBuilder.overview_generated(score, correlation_id)
    """

    @staticmethod
    def record_added(
        record_kind: str,
        record_id: UUID,
        name: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_ADDED,
            entity_type=record_kind,
            entity_id=record_id,
            description=f"{record_kind.capitalize()} added: {name}",
            details={"name": name},
        )

    @staticmethod
    def record_updated(
        record_kind: str,
        record_id: UUID,
        fields: list[str],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_UPDATED,
            entity_type=record_kind,
            entity_id=record_id,
            description=f"{record_kind.capitalize()} updated",
            details={"fields": sorted(fields)},
        )

    @staticmethod
    def record_removed(
        record_kind: str,
        record_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_REMOVED,
            entity_type=record_kind,
            entity_id=record_id,
            description=f"{record_kind.capitalize()} removed",
        )

    @staticmethod
    def record_rejected(
        record_kind: str,
        errors: list[str],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type=record_kind,
            description=f"{record_kind.capitalize()} rejected with {len(errors)} errors",
            details={"errors": errors},
        )

    @staticmethod
    def ledger_cleared(record_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_CLEARED,
            severity=AuditSeverity.WARNING,
            entity_type="ledger",
            description=f"Ledger cleared ({record_count} records removed)",
            details={"record_count": record_count},
        )

    @staticmethod
    def snapshot_built(
        net_worth: float,
        monthly_income: float,
        income_source: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SNAPSHOT_BUILT,
            entity_type="snapshot",
            correlation_id=correlation_id,
            description=f"Snapshot built with net worth {net_worth:,.2f}",
            details={
                "net_worth": net_worth,
                "monthly_income": monthly_income,
                "income_source": income_source,
            },
        )

    @staticmethod
    def health_score_computed(
        overall: float,
        category_label: str,
        unknown_categories: list[str],
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HEALTH_SCORE_COMPUTED,
            entity_type="health_score",
            correlation_id=correlation_id,
            description=f"Health score computed: {overall:.1f} ({category_label})",
            details={
                "overall": overall,
                "category": category_label,
                "unknown_categories": unknown_categories,
            },
        )

    @staticmethod
    def safe_to_spend_computed(
        mode: str,
        recommended_mode: str,
        amount: float,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAFE_TO_SPEND_COMPUTED,
            entity_type="safe_to_spend",
            correlation_id=correlation_id,
            description=f"Safe to spend computed in {mode} mode: {amount:,.2f}",
            details={
                "mode": mode,
                "recommended_mode": recommended_mode,
                "amount": amount,
            },
        )

    @staticmethod
    def recommendations_generated(
        personalized_ids: list[str],
        total_count: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECOMMENDATIONS_GENERATED,
            entity_type="recommendations",
            correlation_id=correlation_id,
            description=(
                f"{len(personalized_ids)} personalized recommendations "
                f"({total_count} total)"
            ),
            details={
                "personalized": personalized_ids,
                "total_count": total_count,
            },
        )

    @staticmethod
    def overview_generated(
        health_score: float,
        safe_to_spend: float,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.OVERVIEW_GENERATED,
            entity_type="overview",
            correlation_id=correlation_id,
            description="Financial overview generated",
            details={
                "health_score": health_score,
                "safe_to_spend": safe_to_spend,
            },
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )
