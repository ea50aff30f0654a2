"""
Exceptions for fintrack

The calculation core never raises: every edge case has a policy branch.
These exceptions belong to the layers around it (ledger, validation).
"""

from typing import Optional

from fintrack.models.validation import ValidationResult


class FinTrackError(Exception):
    """Base exception for fintrack."""
    pass


class RecordValidationError(FinTrackError):
    """A record failed validation and was not stored."""

    def __init__(self, record_kind: str, result: ValidationResult):
        self.record_kind = record_kind
        self.result = result
        messages = "; ".join(
            issue.message for issue in result.issues if issue.severity == "error"
        )
        super().__init__(f"Invalid {record_kind}: {messages}")


class RecordNotFoundError(FinTrackError):
    """No record with the given id exists in the ledger."""

    def __init__(self, record_kind: str, record_id: str, message: Optional[str] = None):
        self.record_kind = record_kind
        self.record_id = record_id
        super().__init__(message or f"{record_kind} not found: {record_id}")


class DuplicateRecordError(FinTrackError):
    """A record with the same id is already in the ledger."""

    def __init__(self, record_kind: str, record_id: str):
        self.record_kind = record_kind
        self.record_id = record_id
        super().__init__(f"{record_kind} already exists: {record_id}")
