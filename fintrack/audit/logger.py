"""
Audit Logger

DESIGN DECISION: Every change to the ledger and every computed overview
is logged. This provides:
1. Traceability of how a dashboard number came about
2. Debugging capability when a score looks wrong
3. A history the user can inspect

The audit logger:
- Writes structured events through structlog
- Keeps the most recent events in a bounded in-memory trail
- Supports correlation IDs to trace related events

The calculation core never logs. Only the ledger and the overview
service talk to this module.
"""

import logging
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from fintrack.config import LoggingSettings, get_settings
from fintrack.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


_configured = False


def configure_logging(settings: Optional[LoggingSettings] = None, force: bool = False) -> None:
    """
    Configure structlog on top of stdlib logging.

    Runs once per process unless force is set. DEBUG_MODE overrides the
    configured level with DEBUG.
    """
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings().logging
    level = "DEBUG" if get_settings().app.debug_mode else settings.level

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("fintrack").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for the current session's history)
    """

    def __init__(self, max_events: Optional[int] = None):
        """
        Initialize audit logger.

        Args:
            max_events: Size of the in-memory trail. Oldest events are
                        dropped first. Defaults to LOG_AUDIT_TRAIL_SIZE.
        """
        configure_logging()
        if max_events is None:
            max_events = get_settings().logging.audit_trail_size
        self._events: deque[AuditEvent] = deque(maxlen=max_events)
        self._logger = structlog.get_logger("fintrack.audit").bind(
            environment=get_settings().app.app_environment
        )

    @property
    def events(self) -> list[AuditEvent]:
        """Trail contents, oldest first."""
        return list(self._events)

    def events_for(self, correlation_id: UUID) -> list[AuditEvent]:
        """Events sharing one correlation ID, oldest first."""
        return [e for e in self._events if e.correlation_id == correlation_id]

    def clear(self) -> None:
        self._events.clear()

    def log(self, event: AuditEvent) -> AuditEvent:
        """
        Log an audit event.

        Writes at the level matching the event severity and appends it
        to the trail.
        """
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)
        return event

    def log_record_added(self, record_kind: str, record_id: UUID, name: str) -> None:
        """Log a record entering the ledger."""
        self.log(AuditEventBuilder.record_added(record_kind, record_id, name))

    def log_record_updated(self, record_kind: str, record_id: UUID, fields: list[str]) -> None:
        """Log a record update."""
        self.log(AuditEventBuilder.record_updated(record_kind, record_id, fields))

    def log_record_removed(self, record_kind: str, record_id: UUID) -> None:
        """Log a record removal."""
        self.log(AuditEventBuilder.record_removed(record_kind, record_id))

    def log_record_rejected(self, record_kind: str, errors: list[str]) -> None:
        """Log a record the validator refused."""
        self.log(AuditEventBuilder.record_rejected(record_kind, errors))

    def log_ledger_cleared(self, record_count: int) -> None:
        self.log(AuditEventBuilder.ledger_cleared(record_count))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an error."""
        self.log(AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., one overview build).
    Pass it through all subsequent operations.
    """
    return uuid4()
