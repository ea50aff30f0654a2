"""
Health Score Engine

Three views of financial health over the same inputs:

1. calculate_health_score: the 0-100 overall score, seven additive factors
   (net worth 20, debt/asset 15, debt/income 15, installments 10,
   liquidity 10, findeks 15, emergency fund 15), clamped to [0, 100].
2. calculate_category_scores: four independent 0-100 sub-scores, each -1
   (UNKNOWN_SCORE) when there is no data to judge it. These use their own
   formulas and are NOT sub-totals of the overall score.
3. get_score_breakdown: four of the seven factors with explanatory text,
   for display only.

Ratio thresholds are strict comparisons. Zero denominators are replaced
by fixed stand-in ratios that push the factor into a defined tier.
"""

import math

from fintrack.calculations.colors import AMBER, CYAN, GREEN, RED
from fintrack.calculations.rounding import percent_text, round_half_up
from fintrack.models.metrics import (
    HealthScore,
    HealthScoreParams,
    ScoreBreakdown,
    ScoreCategory,
    UNKNOWN_SCORE,
)


# Stand-in ratios for zero denominators
NO_ASSETS_DEBT_RATIO = 1
NO_INCOME_DEBT_TO_INCOME_RATIO = 999
NO_INCOME_INSTALLMENT_BURDEN = 1
NO_DEBT_LIQUIDITY_RATIO = 2

ASSET_QUALITY_NET_WORTH_TARGET = 10000


def _debt_ratio_points(debt_ratio: float) -> int:
    if debt_ratio < 0.3:
        return 15
    if debt_ratio < 0.5:
        return 10
    if debt_ratio < 0.7:
        return 5
    return -10


def _debt_to_income_points(debt_to_income: float) -> int:
    if debt_to_income < 2:
        return 15
    if debt_to_income < 3:
        return 10
    if debt_to_income < 5:
        return 5
    return -10


def _installment_points(burden: float) -> int:
    if burden < 0.2:
        return 10
    if burden < 0.3:
        return 7
    if burden < 0.4:
        return 4
    return -5


def _liquidity_points(liquidity_ratio: float) -> int:
    if liquidity_ratio > 1:
        return 10
    if liquidity_ratio > 0.5:
        return 7
    if liquidity_ratio > 0.3:
        return 4
    return -5


def _findeks_points(findeks_score) -> int:
    # 0 and None both mean "not provided"
    if not findeks_score:
        return 5
    if findeks_score >= 1700:
        return 15
    if findeks_score >= 1500:
        return 10
    if findeks_score >= 1300:
        return 5
    if findeks_score < 1100:
        return -10
    return 0


def _emergency_fund_points(months: float) -> int:
    if months >= 6:
        return 15
    if months >= 3:
        return 10
    if months >= 1:
        return 5
    return -5


def _category_score(value: float) -> int:
    """Integer category score. NaN is indeterminate; infinities pin to 0 or 100."""
    if math.isnan(value):
        return UNKNOWN_SCORE
    if math.isinf(value):
        return 100 if value > 0 else 0
    return round_half_up(value)


def calculate_health_score(params: HealthScoreParams) -> float:
    """
    Calculate the overall financial health score (0-100).

    The raw sum can leave [0, 100] (e.g. heavy penalties); it is clamped
    on return.
    """
    score = 0.0

    # 1. Net worth
    if params.net_worth > 0:
        score += 20
    elif params.net_worth < 0:
        score -= min(20, abs(params.net_worth) / 1000)

    # 2. Debt-to-asset ratio
    debt_to_asset = (
        params.total_liabilities / params.total_assets
        if params.total_assets > 0
        else NO_ASSETS_DEBT_RATIO
    )
    score += _debt_ratio_points(debt_to_asset)

    # 3. Debt-to-income ratio, against annual income
    debt_to_income = (
        params.total_liabilities / (params.monthly_income * 12)
        if params.monthly_income > 0
        else NO_INCOME_DEBT_TO_INCOME_RATIO
    )
    score += _debt_to_income_points(debt_to_income)

    # 4. Installment burden
    installment_burden = (
        params.monthly_installments / params.monthly_income
        if params.monthly_income > 0
        else NO_INCOME_INSTALLMENT_BURDEN
    )
    score += _installment_points(installment_burden)

    # 5. Liquidity ratio
    if params.total_liabilities > 0:
        liquidity_ratio = params.liquid_assets / params.total_liabilities
    elif params.liquid_assets > 0:
        liquidity_ratio = NO_DEBT_LIQUIDITY_RATIO
    else:
        liquidity_ratio = 0
    score += _liquidity_points(liquidity_ratio)

    # 6. Findeks credit score
    score += _findeks_points(params.findeks_score)

    # 7. Emergency fund, in months of income
    emergency_fund_months = (
        params.liquid_assets / params.monthly_income
        if params.monthly_income > 0
        else 0
    )
    score += _emergency_fund_points(emergency_fund_months)

    return max(0, min(100, score))


def calculate_category_scores(params: HealthScoreParams) -> HealthScore:
    """
    Calculate the four category sub-scores plus the overall score.

    A category is UNKNOWN_SCORE only when both quantities that define it
    are zero. A poor ratio gives 0, never -1.
    """
    if params.total_liabilities > 0:
        liquidity = min(100, params.liquid_assets / params.total_liabilities * 100)
    elif params.liquid_assets > 0:
        liquidity = 100
    else:
        liquidity = UNKNOWN_SCORE

    if params.total_assets > 0:
        debt_management = max(0, 100 - params.total_liabilities / params.total_assets * 100)
    elif params.total_liabilities > 0:
        debt_management = 0
    else:
        debt_management = UNKNOWN_SCORE

    if params.total_assets == 0 and params.total_liabilities == 0:
        asset_quality = UNKNOWN_SCORE
    elif params.net_worth > 0:
        asset_quality = min(100, params.net_worth / ASSET_QUALITY_NET_WORTH_TARGET * 100)
    else:
        asset_quality = 0

    if params.monthly_income > 0:
        installment_management = max(
            0, 100 - params.monthly_installments / params.monthly_income * 100
        )
    elif params.monthly_installments > 0:
        installment_management = 0
    else:
        installment_management = UNKNOWN_SCORE

    return HealthScore(
        overall=calculate_health_score(params),
        liquidity=_category_score(liquidity),
        debt_management=_category_score(debt_management),
        asset_quality=_category_score(asset_quality),
        installment_management=_category_score(installment_management),
    )


def get_score_breakdown(params: HealthScoreParams) -> list[ScoreBreakdown]:
    """
    Explain four of the seven factors: net worth, debt ratio, liquidity
    and installment burden.

    Points here are for display and do not add up to the overall score.
    """
    breakdown = []

    # Net worth
    if params.net_worth > 0:
        net_worth_score = 20
    elif params.net_worth < 0:
        net_worth_score = -20
    else:
        net_worth_score = 0
    breakdown.append(ScoreBreakdown(
        category="Net Değer",
        score=net_worth_score,
        max_score=20,
        description=(
            "Pozitif net değeriniz var"
            if params.net_worth > 0
            else "Negatif net değer: varlıklarınız borçlarınızı karşılamıyor"
        ),
        recommendation=(
            "Acil olarak borçlarınızı azaltmaya odaklanın"
            if params.net_worth < 0
            else None
        ),
        color=GREEN if params.net_worth > 0 else RED,
    ))

    # Debt-to-asset ratio
    debt_ratio = (
        params.total_liabilities / params.total_assets
        if params.total_assets > 0
        else NO_ASSETS_DEBT_RATIO
    )
    breakdown.append(ScoreBreakdown(
        category="Borç Oranı",
        score=_debt_ratio_points(debt_ratio),
        max_score=15,
        description=f"Borçlarınız varlıklarınızın %{percent_text(debt_ratio * 100, 1)}'ini oluşturuyor",
        recommendation=(
            "Borç oranınız yüksek. Yeni borçlanmadan kaçının"
            if debt_ratio > 0.5
            else None
        ),
        color=GREEN if debt_ratio < 0.5 else AMBER,
    ))

    # Liquidity
    liquidity_ratio = (
        params.liquid_assets / params.total_liabilities
        if params.total_liabilities > 0
        else NO_DEBT_LIQUIDITY_RATIO
    )
    breakdown.append(ScoreBreakdown(
        category="Likidite",
        score=_liquidity_points(liquidity_ratio),
        max_score=10,
        description=f"Likit varlıklarınız borçlarınızın %{percent_text(liquidity_ratio * 100)}'i",
        recommendation=(
            "Acil durum fonu oluşturmaya öncelik verin"
            if liquidity_ratio < 0.5
            else None
        ),
        color=GREEN if liquidity_ratio > 0.5 else RED,
    ))

    # Installment burden
    installment_burden = (
        params.monthly_installments / params.monthly_income
        if params.monthly_income > 0
        else 0
    )
    breakdown.append(ScoreBreakdown(
        category="Taksit Yükü",
        score=_installment_points(installment_burden),
        max_score=10,
        description=f"Aylık taksitleriniz gelirinizin %{percent_text(installment_burden * 100)}'i",
        recommendation=(
            "Taksit yükünüz yüksek. Yeni taksitli alışverişten kaçının"
            if installment_burden > 0.3
            else None
        ),
        color=GREEN if installment_burden < 0.3 else AMBER,
    ))

    return breakdown


def get_score_category(score: float) -> ScoreCategory:
    """Tier of an overall score: 80, 60 and 40 are the breakpoints."""
    if score >= 80:
        return ScoreCategory(
            label="Mükemmel",
            color=GREEN,
            description="Finansal sağlığınız çok iyi durumda",
        )
    if score >= 60:
        return ScoreCategory(
            label="İyi",
            color=CYAN,
            description="Finansal sağlığınız iyi seviyede",
        )
    if score >= 40:
        return ScoreCategory(
            label="Orta",
            color=AMBER,
            description="Finansal sağlığınızı iyileştirmeye çalışın",
        )
    return ScoreCategory(
        label="Dikkat",
        color=RED,
        description="Finansal sağlığınız risk altında",
    )
