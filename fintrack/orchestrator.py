"""
Main Orchestrator for fintrack

This module ties the ledger, the calculation core and the recommendation
engine together into one flow:

    ledger + profile -> snapshot -> metrics -> overview

DESIGN DECISION: The orchestrator enforces the boundaries:
- Calculators only ever see a FinancialSnapshot, never raw records
- Configuration is read here, never inside the calculators
- Every step is audited under one correlation ID, failures included

This is the "glue" the dashboard, the report and the AI prompt builder
all call, so they can never disagree about a number.
"""

from datetime import date
from typing import Optional, Union
from uuid import UUID

from fintrack.audit import AuditLogger, create_correlation_id
from fintrack.calculations import (
    calculate_category_scores,
    calculate_debt_to_asset_ratio,
    calculate_debt_to_income_ratio,
    calculate_liquid_net_worth,
    calculate_months_covered,
    get_financial_status,
    get_safe_to_spend_explanation,
    get_score_breakdown,
    get_score_category,
    recommend_safe_to_spend_mode,
    resolve_mode,
    round_half_up,
)
from fintrack.config import AppSettings, get_settings
from fintrack.ledger import FinanceLedger
from fintrack.models import (
    CATEGORY_FIELDS,
    AuditEventBuilder,
    CFOReportData,
    FinancialOverview,
    FinancialSnapshot,
    HealthScore,
    Profile,
    SafeToSpendMode,
)
from fintrack.recommendations import get_general_tips, get_personalized_recommendations


class FinancialOverviewService:
    """
    Builds the complete financial overview for a ledger and profile.

    Flow:
    1. Snapshot -> aggregate records into scalars
    2. Status   -> net worth tier and debt ratios
    3. Spending -> safe-to-spend under the chosen posture
    4. Health   -> overall score, categories, breakdown
    5. Advice   -> personalized recommendations and tips
    6. Report   -> metric inputs for the AI report collaborator
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._settings = settings or get_settings().app
        self._audit_logger = audit_logger

    def resolve_mode(
        self,
        snapshot: FinancialSnapshot,
        mode: Union[SafeToSpendMode, str, None] = None,
    ) -> SafeToSpendMode:
        """
        Pick the safe-to-spend posture.

        An explicit mode wins. Otherwise the configured default is used,
        and 'auto' means the posture recommended for this snapshot.
        """
        if mode is not None:
            return resolve_mode(mode)
        if self._settings.uses_recommended_mode:
            return recommend_safe_to_spend_mode(snapshot.safe_to_spend_params())
        return resolve_mode(self._settings.default_safe_to_spend_mode)

    def build_report_data(
        self,
        ledger: FinanceLedger,
        snapshot: FinancialSnapshot,
        health_score: HealthScore,
    ) -> CFOReportData:
        """Metric inputs handed to the AI report collaborator."""
        return CFOReportData(
            net_worth=snapshot.net_worth,
            total_assets=snapshot.total_assets,
            total_liabilities=snapshot.total_liabilities,
            liquid_assets=snapshot.liquid_assets,
            monthly_income=snapshot.monthly_income,
            monthly_installments=snapshot.monthly_installments,
            health_score=round_half_up(health_score.overall),
            currency=snapshot.currency,
            findeks_score=snapshot.findeks_score,
            assets_by_type=ledger.assets_by_type(),
            liabilities_by_type=ledger.liabilities_by_type(),
            goals_progress=ledger.goals_progress(),
        )

    def build_overview(
        self,
        ledger: FinanceLedger,
        profile: Optional[Profile] = None,
        mode: Union[SafeToSpendMode, str, None] = None,
        as_of: Optional[date] = None,
    ) -> FinancialOverview:
        """
        Compute every derived metric in one pass.

        Args:
            ledger: Records to aggregate
            profile: Declared income, findeks score, currency
            mode: Safe-to-spend posture; None uses the configured default
            as_of: Day that defines "this month" (default today)

        Any exception from a step is logged as a system error under this
        build's correlation ID, then re-raised.
        """
        correlation_id = create_correlation_id()
        try:
            return self._compose(ledger, profile, mode, as_of, correlation_id)
        except Exception as e:
            if self._audit_logger:
                self._audit_logger.log_error(
                    error_type=type(e).__name__,
                    error_message=str(e),
                    details={"operation": "build_overview"},
                    correlation_id=correlation_id,
                )
            raise

    def _compose(
        self,
        ledger: FinanceLedger,
        profile: Optional[Profile],
        mode: Union[SafeToSpendMode, str, None],
        as_of: Optional[date],
        correlation_id: UUID,
    ) -> FinancialOverview:
        # 1. Snapshot
        snapshot = ledger.build_snapshot(
            profile, as_of, default_currency=self._settings.default_currency
        )
        if self._audit_logger:
            _, income_source = ledger.resolve_monthly_income(profile, as_of)
            self._audit_logger.log(AuditEventBuilder.snapshot_built(
                net_worth=snapshot.net_worth,
                monthly_income=snapshot.monthly_income,
                income_source=income_source,
                correlation_id=correlation_id,
            ))

        # 2. Status
        financial_status = get_financial_status(snapshot.net_worth)

        # 3. Spending
        spend_params = snapshot.safe_to_spend_params()
        recommended_mode = recommend_safe_to_spend_mode(spend_params)
        chosen_mode = self.resolve_mode(snapshot, mode)
        safe_to_spend = get_safe_to_spend_explanation(spend_params, chosen_mode)
        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.safe_to_spend_computed(
                mode=chosen_mode.value,
                recommended_mode=recommended_mode.value,
                amount=safe_to_spend.safe_to_spend,
                correlation_id=correlation_id,
            ))

        # 4. Health
        score_params = snapshot.health_score_params()
        health_score = calculate_category_scores(score_params)
        score_category = get_score_category(health_score.overall)
        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.health_score_computed(
                overall=health_score.overall,
                category_label=score_category.label,
                unknown_categories=[
                    name for name in CATEGORY_FIELDS
                    if not health_score.is_known(name)
                ],
                correlation_id=correlation_id,
            ))

        # 5. Advice
        personalized = get_personalized_recommendations(
            snapshot.recommendation_params(health_score.overall)
        )
        recommendations = personalized + get_general_tips()
        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.recommendations_generated(
                personalized_ids=[r.id for r in personalized],
                total_count=len(recommendations),
                correlation_id=correlation_id,
            ))

        # 6. Report
        overview = FinancialOverview(
            snapshot=snapshot,
            financial_status=financial_status,
            liquid_net_worth=calculate_liquid_net_worth(
                snapshot.liquid_assets, snapshot.total_liabilities
            ),
            debt_to_asset_ratio=calculate_debt_to_asset_ratio(
                snapshot.total_assets, snapshot.total_liabilities
            ),
            debt_to_income_ratio=calculate_debt_to_income_ratio(
                snapshot.total_liabilities, snapshot.monthly_income
            ),
            safe_to_spend_mode=chosen_mode,
            recommended_mode=recommended_mode,
            safe_to_spend=safe_to_spend,
            months_covered=calculate_months_covered(
                snapshot.liquid_assets, snapshot.monthly_expenses
            ),
            health_score=health_score,
            score_category=score_category,
            score_breakdown=get_score_breakdown(score_params),
            recommendations=recommendations,
            report_data=self.build_report_data(ledger, snapshot, health_score),
        )

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.overview_generated(
                health_score=health_score.overall,
                safe_to_spend=safe_to_spend.safe_to_spend,
                correlation_id=correlation_id,
            ))

        return overview
