"""
Calculation Core

Pure functions over already-aggregated scalars. Nothing here reads
settings, logs, or raises for bad numbers: every edge case is a policy
branch that returns a defined value.
"""

from fintrack.calculations.health_score import (
    calculate_category_scores,
    calculate_health_score,
    get_score_breakdown,
    get_score_category,
)
from fintrack.calculations.net_worth import (
    calculate_debt_to_asset_ratio,
    calculate_debt_to_income_ratio,
    calculate_liquid_net_worth,
    calculate_net_worth,
    get_financial_status,
)
from fintrack.calculations.rounding import round_half_up
from fintrack.calculations.safe_to_spend import (
    calculate_months_covered,
    calculate_safe_to_spend,
    get_reserves,
    get_safe_to_spend_aggressive,
    get_safe_to_spend_balanced,
    get_safe_to_spend_conservative,
    get_safe_to_spend_explanation,
    recommend_safe_to_spend_mode,
    resolve_mode,
)

__all__ = [
    # Net worth
    "calculate_net_worth",
    "calculate_liquid_net_worth",
    "calculate_debt_to_asset_ratio",
    "calculate_debt_to_income_ratio",
    "get_financial_status",
    # Safe to spend
    "calculate_safe_to_spend",
    "calculate_months_covered",
    "get_reserves",
    "get_safe_to_spend_aggressive",
    "get_safe_to_spend_balanced",
    "get_safe_to_spend_conservative",
    "get_safe_to_spend_explanation",
    "recommend_safe_to_spend_mode",
    "resolve_mode",
    # Health score
    "calculate_health_score",
    "calculate_category_scores",
    "get_score_breakdown",
    "get_score_category",
    "round_half_up",
]
