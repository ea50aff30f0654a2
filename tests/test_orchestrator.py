"""
Tests for the overview orchestrator.

The standard ledger holds 50000 cash, a 10000 loan and a 2000/month
installment, with a declared salary of 10000. Its health score is
20 + 15 + 15 + 7 + 10 + 5 + 10 = 82.
"""

import math
from datetime import date

import pytest

from fintrack.audit import AuditLogger
from fintrack.config import AppSettings
from fintrack.ledger import FinanceLedger
from fintrack.models import (
    Asset,
    AssetType,
    AuditEventType,
    AuditSeverity,
    Currency,
    Liability,
    LiabilityType,
    Profile,
    SafeToSpendMode,
    UNKNOWN_SCORE,
)
from fintrack.orchestrator import FinancialOverviewService


AS_OF = date(2024, 6, 15)


@pytest.fixture
def ledger(validator, cash, loan, phone_plan):
    ledger = FinanceLedger(validator=validator)
    ledger.add(cash)
    ledger.add(loan)
    ledger.add(phone_plan)
    return ledger


@pytest.fixture
def audit_logger():
    return AuditLogger(max_events=100)


@pytest.fixture
def service(audit_logger):
    return FinancialOverviewService(
        settings=AppSettings(default_safe_to_spend_mode="balanced"),
        audit_logger=audit_logger,
    )


class TestBuildOverview:
    """Tests for the composed metrics."""

    def test_snapshot_and_status(self, service, ledger, profile):
        overview = service.build_overview(ledger, profile, as_of=AS_OF)

        assert overview.snapshot.net_worth == 40000
        assert overview.financial_status.label == "Güçlü"
        assert overview.liquid_net_worth == 40000
        assert overview.debt_to_asset_ratio == 0.2
        assert overview.months_covered == 10

    def test_safe_to_spend_uses_configured_default(self, service, ledger, profile):
        overview = service.build_overview(ledger, profile, as_of=AS_OF)
        assert overview.safe_to_spend_mode == SafeToSpendMode.BALANCED
        assert overview.safe_to_spend.safe_to_spend == 33000
        assert overview.recommended_mode == SafeToSpendMode.BALANCED

    def test_explicit_mode_wins(self, service, ledger, profile):
        overview = service.build_overview(ledger, profile, mode="conservative", as_of=AS_OF)
        assert overview.safe_to_spend_mode == SafeToSpendMode.CONSERVATIVE
        assert overview.safe_to_spend.safe_to_spend == 4000

    def test_auto_mode_follows_recommendation(self, validator, profile):
        ledger = FinanceLedger(validator=validator)
        ledger.add(Asset(type=AssetType.LIQUID, name="Nakit", value=100000))
        ledger.add(Liability(type=LiabilityType.PERSONAL_DEBT, name="Borç", current_debt=10000))
        service = FinancialOverviewService(settings=AppSettings(default_safe_to_spend_mode="auto"))

        overview = service.build_overview(ledger, profile, as_of=AS_OF)
        assert overview.safe_to_spend_mode == SafeToSpendMode.AGGRESSIVE
        assert overview.safe_to_spend.safe_to_spend == 100000

    def test_health_and_recommendations(self, service, ledger, profile):
        overview = service.build_overview(ledger, profile, as_of=AS_OF)

        assert overview.health_score.overall == 82
        assert overview.score_category.label == "Mükemmel"
        assert len(overview.score_breakdown) == 4
        assert overview.recommendations[0].id == "invest"
        assert len(overview.recommendations) == 16

    def test_report_data(self, service, ledger, profile):
        overview = service.build_overview(ledger, profile, as_of=AS_OF)
        report = overview.report_data

        assert report.health_score == 82
        assert report.assets_by_type == {"liquid": 50000}
        assert report.liabilities_by_type == {"personal_debt": 10000}
        assert report.goals_progress.total_goals == 0

    def test_empty_ledger(self, service, validator):
        overview = service.build_overview(FinanceLedger(validator=validator), Profile(), as_of=AS_OF)

        assert overview.health_score.overall == 0
        assert overview.health_score.liquidity == UNKNOWN_SCORE
        assert overview.safe_to_spend.safe_to_spend == 0
        assert overview.debt_to_asset_ratio == 0
        assert overview.recommendations[0].id == "emergency-fund"

    def test_debt_only_ratio_is_infinite(self, service, validator):
        ledger = FinanceLedger(validator=validator)
        ledger.add(Liability(type=LiabilityType.PERSONAL_DEBT, name="Borç", current_debt=5000))
        overview = service.build_overview(ledger, Profile(), as_of=AS_OF)
        assert overview.debt_to_asset_ratio == math.inf


class TestOverviewAudit:

    def test_events_share_a_correlation_id(self, service, audit_logger, ledger, profile):
        service.build_overview(ledger, profile, as_of=AS_OF)

        events = audit_logger.events
        assert [e.event_type for e in events] == [
            AuditEventType.SNAPSHOT_BUILT,
            AuditEventType.SAFE_TO_SPEND_COMPUTED,
            AuditEventType.HEALTH_SCORE_COMPUTED,
            AuditEventType.RECOMMENDATIONS_GENERATED,
            AuditEventType.OVERVIEW_GENERATED,
        ]
        correlation_id = events[0].correlation_id
        assert correlation_id is not None
        assert audit_logger.events_for(correlation_id) == events

    def test_event_details(self, service, audit_logger, ledger, profile):
        service.build_overview(ledger, profile, as_of=AS_OF)
        snapshot, spend, health, recommendations, _ = audit_logger.events

        assert snapshot.details["income_source"] == "declared"
        assert spend.details["mode"] == "balanced"
        assert health.details["unknown_categories"] == []
        assert recommendations.details["personalized"] == ["invest"]


class TestSettingsDefaults:

    def test_currency_without_profile_comes_from_settings(self, validator, cash):
        ledger = FinanceLedger(validator=validator)
        ledger.add(cash)
        service = FinancialOverviewService(settings=AppSettings(default_currency="EUR"))

        overview = service.build_overview(ledger, as_of=AS_OF)
        assert overview.snapshot.currency == Currency.EUR
        assert overview.report_data.currency == Currency.EUR

    def test_currency_setting_read_from_env(self, monkeypatch, validator):
        monkeypatch.setenv("DEFAULT_CURRENCY", "GBP")
        overview = FinancialOverviewService().build_overview(
            FinanceLedger(validator=validator), as_of=AS_OF
        )
        assert overview.snapshot.currency == Currency.GBP


class TestOverviewFailure:

    def test_failure_is_audited_and_reraised(self, service, audit_logger, ledger, monkeypatch):
        def broken_snapshot(*args, **kwargs):
            raise ValueError("snapshot unavailable")

        monkeypatch.setattr(ledger, "build_snapshot", broken_snapshot)
        with pytest.raises(ValueError, match="snapshot unavailable"):
            service.build_overview(ledger, as_of=AS_OF)

        event = audit_logger.events[-1]
        assert event.event_type == AuditEventType.SYSTEM_ERROR
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "snapshot unavailable"
        assert event.details == {"operation": "build_overview"}
        assert event.correlation_id is not None

    def test_failure_after_first_step_shares_correlation_id(
        self, service, audit_logger, ledger, profile, monkeypatch
    ):
        def broken_status(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("fintrack.orchestrator.get_financial_status", broken_status)
        with pytest.raises(RuntimeError):
            service.build_overview(ledger, profile, as_of=AS_OF)

        snapshot_event, error_event = audit_logger.events
        assert snapshot_event.event_type == AuditEventType.SNAPSHOT_BUILT
        assert error_event.event_type == AuditEventType.SYSTEM_ERROR
        assert error_event.correlation_id == snapshot_event.correlation_id


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
