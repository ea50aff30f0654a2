"""Record validation."""

from fintrack.validation.validator import MAX_SAFE_AMOUNT, RecordValidator

__all__ = [
    "MAX_SAFE_AMOUNT",
    "RecordValidator",
]
