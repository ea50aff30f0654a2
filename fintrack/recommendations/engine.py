"""
Recommendation Engine

Rule-driven, personalized advice first, then the general tip pool.

DESIGN DECISION: Each rule is checked on its own. Rules never suppress
each other, so a user can receive every personalized item at once.

DESIGN DECISION: The emergency-fund rule estimates monthly expenses as
half of monthly income. This is a known simplification kept on purpose:
the recommendation inputs carry no expense figure.
"""

from fintrack.calculations.rounding import percent_text
from fintrack.models.metrics import (
    Recommendation,
    RecommendationIcon,
    RecommendationParams,
    RecommendationType,
)
from fintrack.recommendations.tips import GENERAL_TIPS


EXPENSE_TO_INCOME_ESTIMATE = 0.5
EMERGENCY_FUND_TARGET_MONTHS = 3
HIGH_DEBT_RATIO = 0.5
HIGH_INSTALLMENT_BURDEN = 0.4
INVEST_HEALTH_SCORE = 80


def get_general_tips() -> list[Recommendation]:
    """The static tip pool, in display order."""
    return list(GENERAL_TIPS)


def get_personalized_recommendations(params: RecommendationParams) -> list[Recommendation]:
    """Only the rule-driven items, in rule order."""
    recommendations = []

    # 1. Emergency fund
    monthly_expenses = params.monthly_income * EXPENSE_TO_INCOME_ESTIMATE
    emergency_fund_months = (
        params.liquid_assets / monthly_expenses
        if monthly_expenses > 0
        else 0
    )
    if emergency_fund_months < EMERGENCY_FUND_TARGET_MONTHS:
        recommendations.append(Recommendation(
            id="emergency-fund",
            title="Acil Durum Fonu Oluşturun",
            description=(
                "Likit varlıklarınız hedeflediğimiz 3 aylık gider tutarının "
                "altında. Beklenmedik durumlar için kenara nakit ayırmayı düşünün."
            ),
            type=RecommendationType.WARNING,
            icon=RecommendationIcon.SHIELD,
        ))

    # 2. Debt-to-asset ratio
    if params.total_assets > 0:
        debt_ratio = params.total_liabilities / params.total_assets
        if debt_ratio > HIGH_DEBT_RATIO:
            recommendations.append(Recommendation(
                id="high-debt",
                title="Borç Yükünüzü Hafifletin",
                description=(
                    f"Varlıklarınızın %{percent_text(debt_ratio * 100)}'i kadar "
                    "borcunuz var. Bu oranı %30'un altına çekmek finansal "
                    "özgürlüğünüzü artırır."
                ),
                type=RecommendationType.ACTION,
                icon=RecommendationIcon.ALERT_TRIANGLE,
            ))

    # 3. Installment burden
    if params.monthly_income > 0:
        burden = params.monthly_installments / params.monthly_income
        if burden > HIGH_INSTALLMENT_BURDEN:
            recommendations.append(Recommendation(
                id="high-installments",
                title="Aylık Taksitleriniz Yüksek",
                description=(
                    f"Gelirinizin %{percent_text(burden * 100)}'i taksitlere "
                    "gidiyor. Yeni bir borçlanma yapmadan önce mevcutları "
                    "azaltmaya odaklanın."
                ),
                type=RecommendationType.WARNING,
                icon=RecommendationIcon.TARGET,
            ))

    # 4. Healthy and cash-rich
    if (
        params.health_score > INVEST_HEALTH_SCORE
        and params.liquid_assets > params.monthly_income * 3
    ):
        recommendations.append(Recommendation(
            id="invest",
            title="Yatırım Fırsatlarını Değerlendirin",
            description=(
                "Finansal sağlığınız harika! Fazla nakitinizi enflasyona karşı "
                "korumak için yatırım fonu, hisse senedi veya altına "
                "yönlendirebilirsiniz."
            ),
            type=RecommendationType.SUCCESS,
            icon=RecommendationIcon.TRENDING_UP,
        ))

    return recommendations


def get_recommendations(params: RecommendationParams) -> list[Recommendation]:
    """
    Full recommendation list: personalized items, then all general tips.

    The result always holds at least the fifteen general tips.
    """
    return get_personalized_recommendations(params) + get_general_tips()
