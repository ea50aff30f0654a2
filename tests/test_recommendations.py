"""
Tests for the recommendation engine.
"""

import math

import pytest

from fintrack.models import (
    Recommendation,
    RecommendationIcon,
    RecommendationParams,
    RecommendationType,
)
from fintrack.recommendations import (
    GENERAL_TIPS,
    get_general_tips,
    get_personalized_recommendations,
    get_recommendations,
)


TIP_ORDER = [
    "budget-rule",
    "compound-interest",
    "track-habit",
    "credit-score",
    "impulse-buying",
    "diversification",
    "subscription-audit",
    "financial-goals",
    "inflation-protection",
    "mental-health",
    "side-hustle",
    "cooking",
    "insurance",
    "negotiate",
    "home-equity",
]


def make_params(**overrides):
    values = dict(
        net_worth=20000,
        total_assets=50000,
        total_liabilities=30000,
        liquid_assets=20000,
        monthly_income=10000,
        monthly_installments=2500,
        health_score=64,
    )
    values.update(overrides)
    return RecommendationParams(**values)


def personalized_ids(params):
    return [r.id for r in get_personalized_recommendations(params)]


class TestGeneralTips:
    """Tests for the static tip pool."""

    def test_order(self):
        assert [tip.id for tip in GENERAL_TIPS] == TIP_ORDER

    def test_pool_is_immutable(self):
        assert isinstance(GENERAL_TIPS, tuple)
        with pytest.raises(ValueError):
            GENERAL_TIPS[0].title = "changed"

    def test_get_general_tips_returns_a_copy(self):
        tips = get_general_tips()
        tips.clear()
        assert len(get_general_tips()) == 15

    def test_vocabulary(self):
        tip = GENERAL_TIPS[0]
        assert tip.type == RecommendationType.INFO
        assert tip.icon == RecommendationIcon.BOOK_OPEN
        assert GENERAL_TIPS[-1].icon == RecommendationIcon.HOME


class TestPersonalizedRules:
    """Tests for the four rule-driven items."""

    def test_high_debt(self):
        """Test the debt ratio rule and its rounded percentage."""
        recommendations = get_personalized_recommendations(make_params())
        assert [r.id for r in recommendations] == ["high-debt"]
        assert recommendations[0].description.startswith("Varlıklarınızın %60'i kadar")
        assert recommendations[0].type == RecommendationType.ACTION

    def test_no_income_triggers_emergency_fund(self):
        params = make_params(
            total_assets=0,
            total_liabilities=0,
            liquid_assets=0,
            monthly_income=0,
            monthly_installments=0,
            health_score=0,
        )
        assert personalized_ids(params) == ["emergency-fund"]

    def test_emergency_fund_uses_half_income_as_expenses(self):
        """Test 14999 / (10000 * 0.5) < 3 but 15000 / 5000 is not."""
        assert "emergency-fund" in personalized_ids(make_params(liquid_assets=14999))
        assert "emergency-fund" not in personalized_ids(make_params(liquid_assets=15000))

    def test_high_installments(self):
        recommendations = get_personalized_recommendations(
            make_params(total_liabilities=0, monthly_installments=5000)
        )
        assert [r.id for r in recommendations] == ["high-installments"]
        assert "%50'i taksitlere" in recommendations[0].description

    def test_invest(self):
        params = make_params(
            total_assets=100000,
            total_liabilities=0,
            liquid_assets=100000,
            monthly_installments=0,
            health_score=90,
        )
        assert personalized_ids(params) == ["invest"]

    def test_invest_needs_score_above_80(self):
        params = make_params(
            total_liabilities=0,
            liquid_assets=100000,
            monthly_installments=0,
            health_score=80,
        )
        assert personalized_ids(params) == []

    def test_rules_are_independent(self):
        params = make_params(
            total_assets=10000,
            total_liabilities=9000,
            liquid_assets=0,
            monthly_installments=6000,
        )
        assert personalized_ids(params) == ["emergency-fund", "high-debt", "high-installments"]


class TestNonFiniteInputs:

    def test_infinite_installments(self):
        """Test that an unbounded burden still renders a description."""
        recommendations = get_personalized_recommendations(
            make_params(total_liabilities=0, monthly_installments=math.inf, monthly_income=1)
        )
        installments = [r for r in recommendations if r.id == "high-installments"]
        assert len(installments) == 1
        assert installments[0].description.startswith("Gelirinizin %∞'i taksitlere")

    def test_nan_inputs_give_tips(self):
        nan = math.nan
        params = make_params(
            total_assets=nan,
            total_liabilities=nan,
            liquid_assets=nan,
            monthly_income=nan,
            monthly_installments=nan,
        )
        assert [r.id for r in get_recommendations(params)][-15:] == TIP_ORDER


class TestGetRecommendations:

    def test_personalized_then_tips(self):
        recommendations = get_recommendations(make_params())
        assert [r.id for r in recommendations] == ["high-debt"] + TIP_ORDER
        assert all(isinstance(r, Recommendation) for r in recommendations)

    def test_tips_always_present(self):
        params = make_params(total_liabilities=0, liquid_assets=20000)
        assert [r.id for r in get_recommendations(params)] == TIP_ORDER

    def test_deterministic(self):
        assert get_recommendations(make_params()) == get_recommendations(make_params())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
