"""
Metric Models for fintrack

Inputs and outputs of the calculation core.

Inputs are already-aggregated scalars (the ledger does the summing).
Outputs are plain records the UI, report and AI-prompt layers consume.

DESIGN DECISION: All metric models are frozen. Calculators cannot mutate
what they are given, and two calls with equal inputs return equal outputs.

DESIGN DECISION: Category scores keep the -1 sentinel for "not enough data"
(UNKNOWN_SCORE) because downstream consumers branch on that exact value.
HealthScore.known() offers the Optional view for Python callers.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fintrack.models.records import Currency, GoalsProgress


UNKNOWN_SCORE = -1

CATEGORY_FIELDS = (
    "liquidity",
    "debt_management",
    "asset_quality",
    "installment_management",
)


# =============================================================================
# ENUMS
# =============================================================================

class SafeToSpendMode(str, Enum):
    """Reserve postures for the safe-to-spend allowance."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


class FinancialStatusLevel(str, Enum):
    """Coarse sign of net worth."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class RecommendationType(str, Enum):
    """Closed vocabulary the UI maps to a visual style."""
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"
    ACTION = "action"


class RecommendationIcon(str, Enum):
    """Closed vocabulary the UI maps to an icon asset."""
    SHIELD = "shield"
    TRENDING_UP = "trending-up"
    ALERT_TRIANGLE = "alert-triangle"
    TARGET = "target"
    ZAP = "zap"
    BOOK_OPEN = "book-open"
    PIGGY_BANK = "piggy-bank"
    CREDIT_CARD = "credit-card"
    SMILE = "smile"
    COFFEE = "coffee"
    BRIEFCASE = "briefcase"
    HOME = "home"


# =============================================================================
# CALCULATOR INPUTS
# =============================================================================

class SafeToSpendParams(BaseModel):
    """Inputs shared by every safe-to-spend posture."""
    model_config = ConfigDict(frozen=True)

    liquid_assets: float
    total_liabilities: float
    monthly_installments: float
    monthly_income: float


class HealthScoreParams(BaseModel):
    """Inputs for the health score engine."""
    model_config = ConfigDict(frozen=True)

    net_worth: float
    total_assets: float
    total_liabilities: float
    liquid_assets: float
    monthly_installments: float
    monthly_income: float
    findeks_score: Optional[float] = Field(
        default=None,
        description="Credit bureau score; None (or 0) counts as not provided"
    )


class RecommendationParams(BaseModel):
    """Inputs for the recommendation engine."""
    model_config = ConfigDict(frozen=True)

    net_worth: float
    total_assets: float
    total_liabilities: float
    liquid_assets: float
    monthly_income: float
    monthly_installments: float
    health_score: float


class FinancialSnapshot(BaseModel):
    """
    Aggregate financial snapshot.

    Everything the calculators need, already summed by the ledger.
    """
    model_config = ConfigDict(frozen=True)

    net_worth: float
    total_assets: float
    total_liabilities: float
    total_receivables: float = 0.0
    liquid_assets: float
    monthly_installments: float
    monthly_income: float
    monthly_expenses: float = 0.0
    findeks_score: Optional[int] = None
    currency: Currency = Currency.TRY

    @property
    def has_financial_data(self) -> bool:
        """True when there is anything at all to score."""
        return (
            self.total_assets > 0
            or self.total_liabilities > 0
            or self.monthly_income > 0
            or self.total_receivables > 0
            or self.monthly_installments > 0
        )

    def health_score_params(self) -> HealthScoreParams:
        return HealthScoreParams(
            net_worth=self.net_worth,
            total_assets=self.total_assets,
            total_liabilities=self.total_liabilities,
            liquid_assets=self.liquid_assets,
            monthly_installments=self.monthly_installments,
            monthly_income=self.monthly_income,
            findeks_score=self.findeks_score,
        )

    def safe_to_spend_params(self) -> SafeToSpendParams:
        return SafeToSpendParams(
            liquid_assets=self.liquid_assets,
            total_liabilities=self.total_liabilities,
            monthly_installments=self.monthly_installments,
            monthly_income=self.monthly_income,
        )

    def recommendation_params(self, health_score: float) -> RecommendationParams:
        return RecommendationParams(
            net_worth=self.net_worth,
            total_assets=self.total_assets,
            total_liabilities=self.total_liabilities,
            liquid_assets=self.liquid_assets,
            monthly_income=self.monthly_income,
            monthly_installments=self.monthly_installments,
            health_score=health_score,
        )


# =============================================================================
# CALCULATOR OUTPUTS
# =============================================================================

class FinancialStatus(BaseModel):
    """Net worth tier."""
    model_config = ConfigDict(frozen=True)

    status: FinancialStatusLevel
    label: str
    color: str
    description: str


class ReserveItem(BaseModel):
    """One term of a safe-to-spend reserve formula."""
    model_config = ConfigDict(frozen=True)

    label: str
    amount: float


class SafeToSpendExplanation(BaseModel):
    """Decomposition of a safe-to-spend result for display."""
    model_config = ConfigDict(frozen=True)

    mode: str = Field(..., description="Display name of the posture")
    reserves: list[ReserveItem]
    safe_to_spend: float = Field(..., ge=0)
    description: str

    @property
    def total_reserved(self) -> float:
        return sum(item.amount for item in self.reserves)


class HealthScore(BaseModel):
    """
    Overall health score plus four category sub-scores.

    `overall` is the unrounded seven-factor score in [0, 100].
    Category scores are integers in [0, 100], or UNKNOWN_SCORE (-1) when
    there is no data to judge them. -1 is never a low score.
    """
    model_config = ConfigDict(frozen=True)

    overall: float = Field(..., ge=0, le=100)
    liquidity: int
    debt_management: int
    asset_quality: int
    installment_management: int

    def is_known(self, category: str) -> bool:
        """Check whether a category score could be computed."""
        return self._category_value(category) != UNKNOWN_SCORE

    def known(self, category: str) -> Optional[int]:
        """Get a category score, or None when it is indeterminate."""
        value = self._category_value(category)
        return None if value == UNKNOWN_SCORE else value

    def _category_value(self, category: str) -> int:
        if category not in CATEGORY_FIELDS:
            raise KeyError(f"Unknown health score category: {category}")
        return getattr(self, category)


class ScoreBreakdown(BaseModel):
    """One explanatory line of the health score breakdown."""
    model_config = ConfigDict(frozen=True)

    category: str
    score: float
    max_score: float
    description: str
    recommendation: Optional[str] = None
    color: str


class ScoreCategory(BaseModel):
    """Tier of the overall health score."""
    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    description: str


class Recommendation(BaseModel):
    """A single piece of advice."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    type: RecommendationType
    icon: RecommendationIcon


# =============================================================================
# REPORTING
# =============================================================================

class CFOReportData(BaseModel):
    """
    Metrics handed to the AI report collaborator.

    Only the input side: generating the narrative is out of scope here.
    """
    model_config = ConfigDict(frozen=True)

    net_worth: float
    total_assets: float
    total_liabilities: float
    liquid_assets: float
    monthly_income: float
    monthly_installments: float
    health_score: int
    currency: Currency
    findeks_score: Optional[int] = None
    assets_by_type: dict[str, float] = Field(default_factory=dict)
    liabilities_by_type: dict[str, float] = Field(default_factory=dict)
    goals_progress: Optional[GoalsProgress] = None


class FinancialOverview(BaseModel):
    """Everything the dashboard needs, computed in one pass."""
    model_config = ConfigDict(frozen=True)

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    snapshot: FinancialSnapshot
    financial_status: FinancialStatus
    liquid_net_worth: float
    debt_to_asset_ratio: float
    debt_to_income_ratio: float
    safe_to_spend_mode: SafeToSpendMode
    recommended_mode: SafeToSpendMode
    safe_to_spend: SafeToSpendExplanation
    months_covered: float
    health_score: HealthScore
    score_category: ScoreCategory
    score_breakdown: list[ScoreBreakdown]
    recommendations: list[Recommendation]
    report_data: CFOReportData
