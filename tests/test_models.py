"""
Tests for fintrack

Test strategy:
1. Unit tests for individual components (models, calculators, validators)
2. Integration tests for the ledger and overview flows
3. No network or storage in tests
"""

import pytest
from datetime import date
from uuid import uuid4

from pydantic import ValidationError

from fintrack.models import (
    Asset,
    AssetType,
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    Currency,
    FinancialSnapshot,
    Goal,
    HealthScore,
    Installment,
    LIQUID_ASSET_TYPES,
    Profile,
    Transaction,
    TransactionCategory,
    TransactionType,
    UNKNOWN_SCORE,
    ValidationIssue,
    ValidationResult,
)


class TestRecordModels:
    """Tests for the record models."""

    def test_asset_creation(self):
        """Test Asset model creation and defaults."""
        asset = Asset(type=AssetType.LIQUID, name="Nakit", value=1000)
        assert asset.currency == Currency.TRY
        assert asset.id is not None
        assert asset.created_at.tzinfo is not None

    def test_asset_strips_whitespace(self):
        """Test that string fields are stripped."""
        asset = Asset(type="term", name="  Vadeli  ", value=1000)
        assert asset.name == "Vadeli"
        assert asset.type == AssetType.TERM

    def test_unknown_vocabulary_rejected(self):
        """Test that closed vocabularies are enforced by the model."""
        with pytest.raises(ValidationError):
            Asset(type="crypto", name="Coin", value=1)

    def test_negative_amounts_are_not_coerced(self):
        """Test that business rules are left to the validator."""
        asset = Asset(type=AssetType.LIQUID, name="Nakit", value=-5)
        assert asset.value == -5

    def test_liquid_asset_types(self):
        assert LIQUID_ASSET_TYPES == {AssetType.LIQUID, AssetType.GOLD_CURRENCY}

    def test_transaction(self):
        transaction = Transaction(
            type="income",
            category="salary",
            amount=100,
            date=date(2024, 6, 1),
        )
        assert transaction.type == TransactionType.INCOME
        assert transaction.category == TransactionCategory.SALARY
        assert transaction.description == ""

    def test_payment_day_range(self):
        with pytest.raises(ValidationError):
            Installment(
                name="Telefon",
                installment_amount=100,
                remaining_months=1,
                payment_day=32,
                end_date=date(2025, 1, 1),
            )


class TestGoal:

    def test_progress(self):
        assert Goal(name="Tatil", target_amount=4000, current_amount=1000).progress == 25

    def test_progress_capped(self):
        goal = Goal(name="Tatil", target_amount=1000, current_amount=1500)
        assert goal.progress == 100
        assert goal.is_completed

    def test_zero_target(self):
        assert Goal(name="Tatil", target_amount=0).progress == 0

    def test_progress_is_serialized(self):
        goal = Goal(name="Tatil", target_amount=1000, current_amount=500)
        assert goal.model_dump()["progress"] == 50


class TestProfile:

    def test_declared_income(self):
        profile = Profile(salary=10000, additional_income=2500)
        assert profile.declared_monthly_income == 12500

    def test_empty_profile(self):
        assert Profile().declared_monthly_income == 0


class TestMetricModels:
    """Tests for frozen metric models."""

    def test_snapshot_is_frozen(self):
        snapshot = FinancialSnapshot(
            net_worth=0,
            total_assets=0,
            total_liabilities=0,
            liquid_assets=0,
            monthly_installments=0,
            monthly_income=0,
        )
        with pytest.raises(ValidationError):
            snapshot.net_worth = 1
        assert not snapshot.has_financial_data

    def test_receivables_count_as_financial_data(self):
        snapshot = FinancialSnapshot(
            net_worth=500,
            total_assets=0,
            total_liabilities=0,
            total_receivables=500,
            liquid_assets=0,
            monthly_installments=0,
            monthly_income=0,
        )
        assert snapshot.has_financial_data

    def test_health_score_known_view(self):
        score = HealthScore(
            overall=50,
            liquidity=UNKNOWN_SCORE,
            debt_management=0,
            asset_quality=80,
            installment_management=100,
        )
        assert score.known("liquidity") is None
        assert score.known("debt_management") == 0
        assert not score.is_known("liquidity")
        assert score.is_known("asset_quality")

    def test_health_score_unknown_category(self):
        score = HealthScore(
            overall=50,
            liquidity=1,
            debt_management=1,
            asset_quality=1,
            installment_management=1,
        )
        with pytest.raises(KeyError):
            score.known("overall")

    def test_health_score_overall_range(self):
        with pytest.raises(ValidationError):
            HealthScore(
                overall=101,
                liquidity=1,
                debt_management=1,
                asset_quality=1,
                installment_management=1,
            )


class TestValidationModels:

    def test_validation_issue_severity(self):
        with pytest.raises(ValidationError):
            ValidationIssue(field="name", issue_type="missing", message="x", severity="fatal")

    def test_validation_result_counts(self):
        result = ValidationResult(
            record_kind="asset",
            is_valid=False,
            issues=[
                ValidationIssue(field="name", issue_type="missing", message="a", severity="error"),
                ValidationIssue(field="value", issue_type="negative", message="b", severity="error"),
                ValidationIssue(field="due_date", issue_type="overdue", message="c", severity="warning"),
            ],
        )
        assert result.has_errors
        assert result.error_count == 2
        assert result.errors == ["a", "b"]


class TestAuditModels:
    """Tests for audit models."""

    def test_audit_event_creation(self):
        event = AuditEvent(
            event_type=AuditEventType.RECORD_ADDED,
            description="Asset added: Nakit",
        )
        assert event.event_id is not None
        assert event.severity == AuditSeverity.INFO

    def test_builder_record_added(self):
        record_id = uuid4()
        event = AuditEventBuilder.record_added("asset", record_id, "Nakit")
        assert event.entity_type == "asset"
        assert event.entity_id == record_id
        assert event.description == "Asset added: Nakit"

    def test_builder_ledger_cleared_is_warning(self):
        event = AuditEventBuilder.ledger_cleared(4)
        assert event.severity == AuditSeverity.WARNING
        assert event.details == {"record_count": 4}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
