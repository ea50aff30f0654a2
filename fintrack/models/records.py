"""
Financial Record Models for fintrack

These are the raw records a user keeps: assets, liabilities, receivables,
installments, transactions, subscriptions, goals and the profile.

The calculation core never sees these directly. The ledger aggregates them
into a FinancialSnapshot of plain scalars first.

DESIGN DECISION: Models enforce structure (types, closed vocabularies).
Business rules (non-negative amounts, length limits, limits vs debt) are
checked by the RecordValidator so that problems are REPORTED, not coerced.
Amounts are plain floats; currencies pass through without conversion.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Currency(str, Enum):
    """Currencies a record can be denominated in."""
    TRY = "TRY"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class AssetType(str, Enum):
    """
    Asset kinds.

    LIQUID and GOLD_CURRENCY count as liquid assets (immediately spendable).
    TERM deposits and FUNDS do not.
    """
    LIQUID = "liquid"
    TERM = "term"
    GOLD_CURRENCY = "gold_currency"
    FUNDS = "funds"


LIQUID_ASSET_TYPES = frozenset({AssetType.LIQUID, AssetType.GOLD_CURRENCY})


class LiabilityType(str, Enum):
    """Liability kinds."""
    CREDIT_CARD = "credit_card"
    PERSONAL_DEBT = "personal_debt"


class ReceivableStatus(str, Enum):
    """Collection status of money owed to the user."""
    PENDING = "pending"
    PARTIAL = "partial"
    COLLECTED = "collected"


class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class TransactionCategory(str, Enum):
    """Transaction categories (expense categories first, then income)."""
    FOOD = "food"
    TRANSPORT = "transport"
    RENT = "rent"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    HEALTH = "health"
    EDUCATION = "education"
    OTHER_EXPENSE = "other_expense"
    SALARY = "salary"
    FREELANCE = "freelance"
    INVESTMENT = "investment"
    GIFT = "gift"
    OTHER_INCOME = "other_income"


class RiskProfile(str, Enum):
    """Self-declared risk appetite on the profile."""
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


# =============================================================================
# RECORDS
# =============================================================================

class RecordBase(BaseModel):
    """
    Identity and timestamps shared by every stored record.

    Records are frozen: a stored record can only change through the
    ledger, which validates the new version before replacing it.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique record ID"
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="When the record was added"
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        description="Last update timestamp"
    )


class Asset(RecordBase):
    """Something the user owns."""

    type: AssetType
    name: str = Field(..., description="Display name of the asset")
    value: float = Field(..., description="Current value")
    currency: Currency = Currency.TRY
    details: Optional[str] = None


class Liability(RecordBase):
    """Something the user owes (credit card balance or personal debt)."""

    type: LiabilityType
    name: str
    current_debt: float = Field(..., description="Outstanding balance")
    total_limit: Optional[float] = Field(
        default=None,
        description="Credit limit, for credit cards"
    )
    due_date: Optional[date] = None
    debtor_name: Optional[str] = None
    apr: Optional[float] = Field(
        default=None,
        description="Annual percentage rate"
    )
    min_payment: Optional[float] = None
    currency: Currency = Currency.TRY
    details: Optional[str] = None


class Receivable(RecordBase):
    """Money owed TO the user. Counts positively towards net worth."""

    debtor: str
    amount: float
    due_date: date
    status: ReceivableStatus = ReceivableStatus.PENDING
    currency: Currency = Currency.TRY
    details: Optional[str] = None


class Installment(RecordBase):
    """A committed monthly payment plan."""

    name: str
    installment_amount: float = Field(..., description="Monthly payment")
    remaining_months: int
    payment_day: int = Field(
        default=15,
        ge=1,
        le=31,
        description="Day of month the payment is due"
    )
    end_date: date
    total_amount: Optional[float] = None
    category: Optional[str] = None
    currency: Currency = Currency.TRY
    details: Optional[str] = None


class Transaction(RecordBase):
    """A realized income or expense."""

    type: TransactionType
    category: TransactionCategory
    amount: float
    currency: Currency = Currency.TRY
    description: str = ""
    date: date


class Subscription(RecordBase):
    """A recurring monthly charge."""

    name: str
    price: float
    currency: Currency = Currency.TRY
    renewal_day: int = Field(default=1, ge=1, le=31)
    category: Optional[str] = None
    details: Optional[str] = None
    active: bool = True


class Goal(RecordBase):
    """A savings target."""

    name: str
    target_amount: float
    current_amount: float = 0.0
    deadline: Optional[date] = None
    currency: Currency = Currency.TRY
    icon: Optional[str] = None
    color: Optional[str] = None

    @computed_field
    @property
    def progress(self) -> float:
        """Completion percentage, capped at 100. Zero target means 0."""
        if self.target_amount == 0:
            return 0.0
        return min(100.0, self.current_amount / self.target_amount * 100)

    @property
    def is_completed(self) -> bool:
        return self.progress >= 100


class Profile(BaseModel):
    """
    The user's profile.

    Declared income (salary + additional income) takes precedence over
    realized income transactions when building a snapshot.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    findeks_score: Optional[int] = Field(
        default=None,
        description="Credit bureau score (300-1900); None when unknown"
    )
    salary: Optional[float] = None
    additional_income: Optional[float] = None
    currency: Currency = Currency.TRY
    monthly_expenses: Optional[float] = None
    dependents: Optional[int] = None
    risk_profile: Optional[RiskProfile] = None

    @property
    def declared_monthly_income(self) -> float:
        return (self.salary or 0) + (self.additional_income or 0)


# =============================================================================
# AGGREGATED VIEWS OVER RECORDS
# =============================================================================

class GoalsProgress(BaseModel):
    """Summary of savings goals for reports."""
    model_config = ConfigDict(frozen=True)

    total_goals: int = 0
    completed_goals: int = 0
    average_progress: float = 0.0


class PaymentCalendarDay(BaseModel):
    """Everything falling due on a single calendar day."""
    model_config = ConfigDict(frozen=True)

    day: date
    receivables: list[Receivable] = Field(default_factory=list)
    liabilities: list[Liability] = Field(default_factory=list)
    installments: list[Installment] = Field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.receivables) + len(self.liabilities) + len(self.installments)
