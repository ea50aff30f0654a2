"""
Safe-To-Spend Calculator

How much of the liquid assets can be spent at will, under three reserve
postures:

    conservative: all liabilities + 3 months income + 3 months installments
    balanced:     1.5 months income + this month's installments
    aggressive:   this month's installments

The result is liquid assets minus the reserve, never below zero.
"""

from typing import Union

from fintrack.models.metrics import (
    ReserveItem,
    SafeToSpendExplanation,
    SafeToSpendMode,
    SafeToSpendParams,
)


# Stand-in ratio when there are no liquid assets to compare debt against
NO_LIQUIDITY_DEBT_RATIO = 999

MODE_LABELS = {
    SafeToSpendMode.CONSERVATIVE: "Muhafazakâr",
    SafeToSpendMode.BALANCED: "Dengeli",
    SafeToSpendMode.AGGRESSIVE: "Agresif",
}

MODE_DESCRIPTIONS = {
    SafeToSpendMode.CONSERVATIVE: (
        "En güvenli seçenek. Tüm borçlar, 3 aylık acil fon ve gelecek 3 ay "
        "taksitleri rezerve edilir."
    ),
    SafeToSpendMode.BALANCED: (
        "Dengeli yaklaşım. 1.5 aylık acil fon ve bu ayki taksitler rezerve edilir."
    ),
    SafeToSpendMode.AGGRESSIVE: (
        "Risk alıcı yaklaşım. Sadece bu ayki zorunlu ödemeler rezerve edilir."
    ),
}


def resolve_mode(mode: Union[SafeToSpendMode, str, None]) -> SafeToSpendMode:
    """Map a mode name to a posture. Anything unrecognized means balanced."""
    try:
        return SafeToSpendMode(mode)
    except ValueError:
        return SafeToSpendMode.BALANCED


def get_reserves(
    params: SafeToSpendParams,
    mode: Union[SafeToSpendMode, str] = SafeToSpendMode.BALANCED,
) -> list[ReserveItem]:
    """
    The terms of a posture's reserve formula, in formula order.

    Every safe-to-spend figure is derived from these same items, so the
    explanation and the amount can never disagree.
    """
    resolved = resolve_mode(mode)

    if resolved is SafeToSpendMode.CONSERVATIVE:
        return [
            ReserveItem(label="Tüm Borçlar", amount=params.total_liabilities),
            ReserveItem(label="3 Aylık Acil Fon", amount=params.monthly_income * 3),
            ReserveItem(label="3 Aylık Taksitler", amount=params.monthly_installments * 3),
        ]

    if resolved is SafeToSpendMode.AGGRESSIVE:
        return [
            ReserveItem(label="Bu Ayki Taksitler", amount=params.monthly_installments),
        ]

    return [
        ReserveItem(label="1.5 Aylık Acil Fon", amount=params.monthly_income * 1.5),
        ReserveItem(label="Bu Ayki Taksitler", amount=params.monthly_installments * 1),
    ]


def _spendable(params: SafeToSpendParams, mode: SafeToSpendMode) -> float:
    reserved = sum(item.amount for item in get_reserves(params, mode))
    return max(0, params.liquid_assets - reserved)


def get_safe_to_spend_conservative(params: SafeToSpendParams) -> float:
    """Reserve all debt, a 3-month buffer and 3 months of installments."""
    return _spendable(params, SafeToSpendMode.CONSERVATIVE)


def get_safe_to_spend_balanced(params: SafeToSpendParams) -> float:
    """Reserve a 1.5-month buffer and this month's installments."""
    return _spendable(params, SafeToSpendMode.BALANCED)


def get_safe_to_spend_aggressive(params: SafeToSpendParams) -> float:
    """Reserve only this month's installments."""
    return _spendable(params, SafeToSpendMode.AGGRESSIVE)


def calculate_safe_to_spend(
    params: SafeToSpendParams,
    mode: Union[SafeToSpendMode, str] = SafeToSpendMode.BALANCED,
) -> float:
    """
    Safe-to-spend amount for the given posture.

    Unknown modes fall back to balanced rather than raising.
    """
    resolved = resolve_mode(mode)
    if resolved is SafeToSpendMode.CONSERVATIVE:
        return get_safe_to_spend_conservative(params)
    if resolved is SafeToSpendMode.AGGRESSIVE:
        return get_safe_to_spend_aggressive(params)
    return get_safe_to_spend_balanced(params)


def get_safe_to_spend_explanation(
    params: SafeToSpendParams,
    mode: Union[SafeToSpendMode, str] = SafeToSpendMode.BALANCED,
) -> SafeToSpendExplanation:
    """Reserve line items, resulting amount and description for a posture."""
    resolved = resolve_mode(mode)
    return SafeToSpendExplanation(
        mode=MODE_LABELS[resolved],
        reserves=get_reserves(params, resolved),
        safe_to_spend=calculate_safe_to_spend(params, resolved),
        description=MODE_DESCRIPTIONS[resolved],
    )


def calculate_months_covered(
    liquid_assets: float,
    monthly_expenses: float,
) -> float:
    """How many months of expenses the liquid assets cover (0 without expenses)."""
    if monthly_expenses <= 0:
        return 0
    return liquid_assets / monthly_expenses


def recommend_safe_to_spend_mode(params: SafeToSpendParams) -> SafeToSpendMode:
    """
    Pick a posture from the shape of the finances.

    The conservative triggers are checked before the aggressive one.
    """
    debt_ratio = (
        params.total_liabilities / params.liquid_assets
        if params.liquid_assets > 0
        else NO_LIQUIDITY_DEBT_RATIO
    )
    installment_burden = (
        params.monthly_installments / params.monthly_income
        if params.monthly_income > 0
        else 1
    )
    emergency_fund_months = (
        params.liquid_assets / params.monthly_income
        if params.monthly_income > 0
        else 0
    )

    # High debt or heavy installments
    if debt_ratio > 2 or installment_burden > 0.4:
        return SafeToSpendMode.CONSERVATIVE

    # Thin emergency fund
    if emergency_fund_months < 2:
        return SafeToSpendMode.CONSERVATIVE

    if debt_ratio < 0.5 and installment_burden < 0.2 and emergency_fund_months > 6:
        return SafeToSpendMode.AGGRESSIVE

    return SafeToSpendMode.BALANCED
