"""
Net Worth Calculator

Combines asset, receivable and liability totals into net worth and the
ratios built on it.

Division by zero is handled by policy: a zero denominator with a positive
numerator yields math.inf, which callers must special-case before display.
"""

import math

from fintrack.calculations.colors import AMBER, CYAN, GREEN, RED
from fintrack.models.metrics import FinancialStatus, FinancialStatusLevel


STRONG_NET_WORTH = 10000
RISK_NET_WORTH = -10000


def calculate_net_worth(
    total_assets: float,
    total_liabilities: float,
    total_receivables: float = 0,
) -> float:
    """Net worth: (assets + receivables) - liabilities."""
    return total_assets + total_receivables - total_liabilities


def calculate_liquid_net_worth(
    liquid_assets: float,
    total_liabilities: float,
) -> float:
    """Net worth counting only liquid assets, for short-term solvency."""
    return liquid_assets - total_liabilities


def calculate_debt_to_asset_ratio(
    total_assets: float,
    total_liabilities: float,
) -> float:
    """
    Liabilities over assets.

    With no assets: math.inf if there is any debt, otherwise 0.
    """
    if total_assets == 0:
        return math.inf if total_liabilities > 0 else 0
    return total_liabilities / total_assets


def calculate_debt_to_income_ratio(
    total_liabilities: float,
    monthly_income: float,
) -> float:
    """
    Liabilities over ANNUAL income (monthly income * 12).

    With no income: math.inf if there is any debt, otherwise 0.
    """
    annual_income = monthly_income * 12
    if annual_income == 0:
        return math.inf if total_liabilities > 0 else 0
    return total_liabilities / annual_income


def get_financial_status(net_worth: float) -> FinancialStatus:
    """
    Classify net worth into one of five tiers.

    Breakpoints are absolute amounts: 10000, 0 and -10000.
    """
    if net_worth > STRONG_NET_WORTH:
        return FinancialStatus(
            status=FinancialStatusLevel.POSITIVE,
            label="Güçlü",
            color=GREEN,
            description="Net değeriniz güçlü pozisyonda",
        )

    if net_worth > 0:
        return FinancialStatus(
            status=FinancialStatusLevel.POSITIVE,
            label="Pozitif",
            color=CYAN,
            description="Net değeriniz pozitif",
        )

    if net_worth == 0:
        return FinancialStatus(
            status=FinancialStatusLevel.NEUTRAL,
            label="Dengede",
            color=AMBER,
            description="Varlıklarınız ve borçlarınız dengede",
        )

    if net_worth > RISK_NET_WORTH:
        return FinancialStatus(
            status=FinancialStatusLevel.NEGATIVE,
            label="Dikkat",
            color=AMBER,
            description="Net değeriniz negatif, borç azaltmaya öncelik verin",
        )

    return FinancialStatus(
        status=FinancialStatusLevel.NEGATIVE,
        label="Risk",
        color=RED,
        description="Net değeriniz ciddi şekilde negatif, acil önlem gerekli",
    )
