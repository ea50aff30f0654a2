"""
Tests for the finance ledger: record lifecycle and aggregation.
"""

from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from fintrack.audit import AuditLogger
from fintrack.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    RecordValidationError,
)
from fintrack.ledger import FinanceLedger
from fintrack.models import (
    Asset,
    AssetType,
    AuditEventType,
    Currency,
    Goal,
    Installment,
    Liability,
    LiabilityType,
    Profile,
    Receivable,
    Subscription,
    Transaction,
    TransactionCategory,
    TransactionType,
)


@pytest.fixture
def audit_logger():
    return AuditLogger(max_events=100)


@pytest.fixture
def ledger(validator, audit_logger):
    return FinanceLedger(validator=validator, audit_logger=audit_logger)


def income(amount, day):
    return Transaction(
        type=TransactionType.INCOME,
        category=TransactionCategory.SALARY,
        amount=amount,
        date=day,
    )


def expense(amount, day):
    return Transaction(
        type=TransactionType.EXPENSE,
        category=TransactionCategory.FOOD,
        amount=amount,
        date=day,
    )


class TestRecordLifecycle:
    """Tests for add, update and remove."""

    def test_add_and_get(self, ledger, cash):
        ledger.add(cash)
        assert ledger.get("asset", cash.id) == cash
        assert ledger.get("asset", str(cash.id)) == cash
        assert ledger.record_count == 1

    def test_invalid_record_is_rejected(self, ledger, audit_logger):
        bad = Asset(type=AssetType.LIQUID, name="Nakit", value=-100)
        with pytest.raises(RecordValidationError) as exc_info:
            ledger.add(bad)

        assert exc_info.value.record_kind == "asset"
        assert exc_info.value.result.errors == ["Varlık değeri negatif olamaz"]
        assert "Varlık değeri negatif olamaz" in str(exc_info.value)
        assert ledger.assets == []
        assert audit_logger.events[-1].event_type == AuditEventType.RECORD_REJECTED

    def test_duplicate_id_is_rejected(self, ledger, cash):
        """Test that adding the same record twice does not double-count it."""
        ledger.add(cash)
        with pytest.raises(DuplicateRecordError):
            ledger.add(cash)
        assert ledger.total_assets == 50000
        assert len(ledger.assets) == 1

    def test_stored_record_cannot_be_changed_in_place(self, ledger, cash):
        ledger.add(cash)
        with pytest.raises(ValidationError):
            cash.value = -5000
        assert ledger.total_assets == 50000

    def test_update(self, ledger, cash):
        ledger.add(cash)
        updated = ledger.update("asset", cash.id, value=60000, name="Maaş Hesabı")

        assert updated.id == cash.id
        assert updated.value == 60000
        assert updated.name == "Maaş Hesabı"
        assert updated.created_at == cash.created_at
        assert updated.updated_at >= cash.updated_at
        assert ledger.total_assets == 60000

    def test_update_is_validated(self, ledger, cash):
        ledger.add(cash)
        with pytest.raises(RecordValidationError):
            ledger.update("asset", cash.id, value=-1)
        assert ledger.get("asset", cash.id).value == 50000

    def test_update_with_wrong_type_raises_model_error(self, ledger, cash):
        ledger.add(cash)
        with pytest.raises(ValidationError):
            ledger.update("asset", cash.id, type="house")

    def test_update_cannot_change_id(self, ledger, cash):
        ledger.add(cash)
        with pytest.raises(ValueError, match="id"):
            ledger.update("asset", cash.id, id=uuid4())

    def test_remove(self, ledger, cash, loan):
        ledger.add(cash)
        ledger.add(loan)
        removed = ledger.remove("asset", cash.id)
        assert removed == cash
        assert ledger.assets == []
        assert ledger.liabilities == [loan]

    def test_unknown_id(self, ledger):
        with pytest.raises(RecordNotFoundError):
            ledger.remove("asset", uuid4())
        with pytest.raises(RecordNotFoundError):
            ledger.update("liability", uuid4(), current_debt=1)

    def test_unknown_kind(self, ledger):
        with pytest.raises(ValueError):
            ledger.remove("house", uuid4())

    def test_transactions_newest_first(self, ledger):
        ledger.add(expense(10, date(2024, 6, 1)))
        ledger.add(expense(20, date(2024, 6, 10)))
        ledger.add(expense(30, date(2024, 5, 20)))
        assert [t.amount for t in ledger.transactions] == [20, 10, 30]

    def test_clear(self, ledger, audit_logger, cash, loan):
        ledger.add(cash)
        ledger.add(loan)
        ledger.clear()
        assert ledger.record_count == 0
        assert audit_logger.events[-1].event_type == AuditEventType.LEDGER_CLEARED
        assert audit_logger.events[-1].details["record_count"] == 2

    def test_changes_are_audited(self, ledger, audit_logger, cash):
        ledger.add(cash)
        ledger.update("asset", cash.id, value=1)
        ledger.remove("asset", cash.id)
        assert [e.event_type for e in audit_logger.events] == [
            AuditEventType.RECORD_ADDED,
            AuditEventType.RECORD_UPDATED,
            AuditEventType.RECORD_REMOVED,
        ]

    def test_works_without_audit_logger(self, validator, cash):
        ledger = FinanceLedger(validator=validator)
        ledger.add(cash)
        assert ledger.total_assets == 50000


class TestTotals:
    """Tests for aggregation."""

    def test_liquid_assets_include_gold_and_currency(self, ledger, cash):
        ledger.add(cash)
        ledger.add(Asset(type=AssetType.GOLD_CURRENCY, name="Altın", value=10000))
        ledger.add(Asset(type=AssetType.TERM, name="Vadeli", value=30000))
        ledger.add(Asset(type=AssetType.FUNDS, name="Fon", value=5000))

        assert ledger.total_assets == 95000
        assert ledger.liquid_assets == 60000
        assert ledger.assets_by_type() == {
            "liquid": 50000,
            "gold_currency": 10000,
            "term": 30000,
            "funds": 5000,
        }

    def test_net_worth_includes_receivables(self, ledger, cash, loan):
        ledger.add(cash)
        ledger.add(loan)
        ledger.add(Receivable(debtor="Ali", amount=2000, due_date=date(2024, 7, 1)))
        assert ledger.net_worth == 42000

    def test_liabilities_by_type(self, ledger, loan):
        ledger.add(loan)
        ledger.add(Liability(type=LiabilityType.CREDIT_CARD, name="Kart", current_debt=3000))
        assert ledger.liabilities_by_type() == {"personal_debt": 10000, "credit_card": 3000}

    def test_monthly_income_and_expense(self, ledger):
        ledger.add(income(10000, date(2024, 6, 1)))
        ledger.add(income(5000, date(2024, 5, 1)))
        ledger.add(expense(1200, date(2024, 6, 3)))
        ledger.add(expense(800, date(2023, 6, 3)))
        ledger.add(Subscription(name="Müzik", price=60))
        ledger.add(Subscription(name="Eski", price=100, active=False))

        as_of = date(2024, 6, 15)
        assert ledger.monthly_income(as_of) == 10000
        assert ledger.monthly_expense(as_of) == 1260
        assert ledger.total_subscriptions == 60

    def test_goals_progress(self, ledger):
        ledger.add(Goal(name="Tatil", target_amount=1000, current_amount=1000))
        ledger.add(Goal(name="Araba", target_amount=4000, current_amount=1000))

        progress = ledger.goals_progress()
        assert progress.total_goals == 2
        assert progress.completed_goals == 1
        assert progress.average_progress == 62.5

    def test_no_goals(self, ledger):
        assert ledger.goals_progress().total_goals == 0


class TestPaymentCalendar:

    def test_events_for_date(self, ledger, phone_plan):
        ledger.add(phone_plan)
        ledger.add(Receivable(debtor="Ali", amount=500, due_date=date(2024, 7, 20)))
        ledger.add(Liability(
            type=LiabilityType.CREDIT_CARD,
            name="Kart",
            current_debt=100,
            due_date=date(2024, 7, 20),
        ))

        day = ledger.events_for_date(date(2024, 7, 20))
        assert day.total_count == 3

        assert ledger.events_for_date(date(2024, 7, 21)).total_count == 0

    def test_installment_stops_after_end_date(self, ledger, phone_plan):
        ledger.add(phone_plan)
        assert ledger.events_for_date(date(2025, 4, 20)).installments == [phone_plan]
        assert ledger.events_for_date(date(2025, 5, 20)).installments == []


class TestSnapshot:
    """Tests for building the calculator inputs."""

    def test_declared_income_wins(self, ledger, cash, loan, phone_plan, profile):
        ledger.add(cash)
        ledger.add(loan)
        ledger.add(phone_plan)
        ledger.add(income(3000, date(2024, 6, 1)))

        snapshot = ledger.build_snapshot(profile, as_of=date(2024, 6, 15))
        assert snapshot.monthly_income == 10000
        assert snapshot.net_worth == 40000
        assert snapshot.liquid_assets == 50000
        assert snapshot.monthly_installments == 2000
        assert snapshot.currency == Currency.TRY

    def test_falls_back_to_transactions(self, ledger):
        ledger.add(income(3000, date(2024, 6, 1)))
        snapshot = ledger.build_snapshot(Profile(), as_of=date(2024, 6, 15))
        assert snapshot.monthly_income == 3000
        assert ledger.resolve_monthly_income(Profile(), date(2024, 6, 15)) == (3000, "transactions")

    def test_expenses_fall_back_to_profile(self, ledger, profile):
        snapshot = ledger.build_snapshot(profile, as_of=date(2024, 6, 15))
        assert snapshot.monthly_expenses == 5000

    def test_tracked_expenses_preferred(self, ledger, profile):
        ledger.add(expense(700, date(2024, 6, 2)))
        snapshot = ledger.build_snapshot(profile, as_of=date(2024, 6, 15))
        assert snapshot.monthly_expenses == 700

    def test_currency_falls_back_to_default(self, ledger, cash):
        ledger.add(cash)
        assert ledger.build_snapshot().currency == Currency.TRY
        assert ledger.build_snapshot(default_currency=Currency.EUR).currency == Currency.EUR

    def test_profile_currency_wins(self, ledger):
        snapshot = ledger.build_snapshot(
            Profile(currency=Currency.USD), default_currency=Currency.EUR
        )
        assert snapshot.currency == Currency.USD

    def test_findeks_from_profile(self, ledger):
        snapshot = ledger.build_snapshot(Profile(findeks_score=1500))
        assert snapshot.findeks_score == 1500

    def test_empty_ledger_has_no_financial_data(self, ledger):
        assert not ledger.build_snapshot().has_financial_data


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
