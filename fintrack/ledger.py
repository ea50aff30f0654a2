"""
Finance Ledger

In-memory store of the user's records, and the aggregation that turns
them into the plain scalars the calculation core consumes.

DESIGN DECISION: Nothing enters the ledger unvalidated.
Every add and update runs the RecordValidator; a record with errors is
rejected with RecordValidationError and the ledger is left unchanged.
Warnings do not block.

DESIGN DECISION: The ledger is not persistence. It holds records for the
lifetime of the object; saving and loading them is someone else's job.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union
from uuid import UUID

from fintrack.audit import AuditLogger
from fintrack.calculations.net_worth import calculate_net_worth
from fintrack.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    RecordValidationError,
)
from fintrack.models.metrics import FinancialSnapshot
from fintrack.models.records import (
    Asset,
    Currency,
    Goal,
    GoalsProgress,
    Installment,
    LIQUID_ASSET_TYPES,
    Liability,
    PaymentCalendarDay,
    Profile,
    Receivable,
    Subscription,
    Transaction,
    TransactionType,
)
from fintrack.validation import RecordValidator


Record = Union[Asset, Liability, Receivable, Installment, Goal, Transaction, Subscription]

RECORD_KINDS = {
    "asset": Asset,
    "liability": Liability,
    "receivable": Receivable,
    "installment": Installment,
    "goal": Goal,
    "transaction": Transaction,
    "subscription": Subscription,
}

# Fields an update may not touch
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})

INCOME_SOURCE_DECLARED = "declared"
INCOME_SOURCE_TRANSACTIONS = "transactions"


def _kind_of(record: Record) -> str:
    for kind, model in RECORD_KINDS.items():
        if isinstance(record, model):
            return kind
    raise TypeError(f"Not a ledger record: {type(record).__name__}")


def _display_name(record: Record) -> str:
    if isinstance(record, Receivable):
        return record.debtor
    if isinstance(record, Transaction):
        return record.description or record.category.value
    return record.name


def _same_month(day: date, as_of: date) -> bool:
    return day.year == as_of.year and day.month == as_of.month


class FinanceLedger:
    """
    Holds records per kind and answers aggregate questions about them.

    Usage:
        ledger = FinanceLedger()
        ledger.add(Asset(type=AssetType.LIQUID, name="Vadesiz", value=50000))
        snapshot = ledger.build_snapshot(profile)
    """

    def __init__(
        self,
        validator: Optional[RecordValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._validator = validator or RecordValidator()
        self._audit_logger = audit_logger
        self._records: dict[str, list[Record]] = {kind: [] for kind in RECORD_KINDS}

    # =========================================================================
    # RECORD ACCESS
    # =========================================================================

    @property
    def assets(self) -> list[Asset]:
        return list(self._records["asset"])

    @property
    def liabilities(self) -> list[Liability]:
        return list(self._records["liability"])

    @property
    def receivables(self) -> list[Receivable]:
        return list(self._records["receivable"])

    @property
    def installments(self) -> list[Installment]:
        return list(self._records["installment"])

    @property
    def goals(self) -> list[Goal]:
        return list(self._records["goal"])

    @property
    def transactions(self) -> list[Transaction]:
        """Transactions, newest first."""
        return list(self._records["transaction"])

    @property
    def subscriptions(self) -> list[Subscription]:
        return list(self._records["subscription"])

    @property
    def record_count(self) -> int:
        return sum(len(records) for records in self._records.values())

    def get(self, kind: str, record_id: Union[UUID, str]) -> Record:
        """Find a record by kind and id, or raise RecordNotFoundError."""
        return self._records[self._check_kind(kind)][self._index_of(kind, record_id)]

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, record: Record) -> Record:
        """
        Validate and store a record.

        Records are frozen, so the stored object cannot be changed behind
        the validator's back.

        Raises:
            RecordValidationError: the validator reported errors.
            DuplicateRecordError: a record with this id is already stored.
        """
        kind = _kind_of(record)
        if any(stored.id == record.id for stored in self._records[kind]):
            raise DuplicateRecordError(kind, str(record.id))
        self._validate(kind, record)

        self._records[kind].append(record)
        if kind == "transaction":
            self._sort_transactions()

        if self._audit_logger:
            self._audit_logger.log_record_added(kind, record.id, _display_name(record))

        return record

    def update(self, kind: str, record_id: Union[UUID, str], **changes) -> Record:
        """
        Apply field changes to a stored record.

        The changed record is rebuilt through its model, so type errors
        surface as pydantic ValidationError, then it is validated like a
        new record. On any failure the stored record is unchanged.
        """
        kind = self._check_kind(kind)
        protected = PROTECTED_FIELDS.intersection(changes)
        if protected:
            raise ValueError(f"Cannot change {', '.join(sorted(protected))}")

        index = self._index_of(kind, record_id)
        current = self._records[kind][index]

        data = current.model_dump()
        data.update(changes)
        data["updated_at"] = datetime.now(timezone.utc)
        updated = RECORD_KINDS[kind].model_validate(data)

        self._validate(kind, updated)

        self._records[kind][index] = updated
        if kind == "transaction":
            self._sort_transactions()

        if self._audit_logger:
            self._audit_logger.log_record_updated(kind, updated.id, list(changes))

        return updated

    def remove(self, kind: str, record_id: Union[UUID, str]) -> Record:
        """Remove and return a stored record."""
        kind = self._check_kind(kind)
        removed = self._records[kind].pop(self._index_of(kind, record_id))

        if self._audit_logger:
            self._audit_logger.log_record_removed(kind, removed.id)

        return removed

    def clear(self) -> None:
        """Drop every record of every kind."""
        count = self.record_count
        for records in self._records.values():
            records.clear()

        if self._audit_logger:
            self._audit_logger.log_ledger_cleared(count)

    def _validate(self, kind: str, record: Record) -> None:
        result = self._validator.validate(record)
        if not result.is_valid:
            if self._audit_logger:
                self._audit_logger.log_record_rejected(kind, result.errors)
            raise RecordValidationError(kind, result)

    def _check_kind(self, kind: str) -> str:
        if kind not in RECORD_KINDS:
            raise ValueError(f"Unknown record kind: {kind}")
        return kind

    def _index_of(self, kind: str, record_id: Union[UUID, str]) -> int:
        target = record_id if isinstance(record_id, UUID) else UUID(str(record_id))
        for index, record in enumerate(self._records[kind]):
            if record.id == target:
                return index
        raise RecordNotFoundError(kind, str(record_id))

    def _sort_transactions(self) -> None:
        self._records["transaction"].sort(key=lambda t: t.date, reverse=True)

    # =========================================================================
    # TOTALS
    # =========================================================================

    @property
    def total_assets(self) -> float:
        return sum(asset.value for asset in self._records["asset"])

    @property
    def total_liabilities(self) -> float:
        return sum(liability.current_debt for liability in self._records["liability"])

    @property
    def total_receivables(self) -> float:
        return sum(receivable.amount for receivable in self._records["receivable"])

    @property
    def total_installments(self) -> float:
        """Sum of monthly installment payments."""
        return sum(inst.installment_amount for inst in self._records["installment"])

    @property
    def liquid_assets(self) -> float:
        """Assets of the liquid kinds: cash and gold/foreign currency."""
        return sum(
            asset.value
            for asset in self._records["asset"]
            if asset.type in LIQUID_ASSET_TYPES
        )

    @property
    def net_worth(self) -> float:
        return calculate_net_worth(
            self.total_assets,
            self.total_liabilities,
            self.total_receivables,
        )

    @property
    def total_subscriptions(self) -> float:
        """Monthly cost of active subscriptions."""
        return sum(sub.price for sub in self._records["subscription"] if sub.active)

    def assets_by_type(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for asset in self._records["asset"]:
            totals[asset.type.value] = totals.get(asset.type.value, 0) + asset.value
        return totals

    def liabilities_by_type(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for liability in self._records["liability"]:
            key = liability.type.value
            totals[key] = totals.get(key, 0) + liability.current_debt
        return totals

    def monthly_income(self, as_of: Optional[date] = None) -> float:
        """Income transactions in the calendar month of as_of (default today)."""
        as_of = as_of or date.today()
        return sum(
            t.amount
            for t in self._records["transaction"]
            if t.type == TransactionType.INCOME and _same_month(t.date, as_of)
        )

    def monthly_expense(self, as_of: Optional[date] = None) -> float:
        """Expense transactions in the month of as_of plus active subscriptions."""
        as_of = as_of or date.today()
        spent = sum(
            t.amount
            for t in self._records["transaction"]
            if t.type == TransactionType.EXPENSE and _same_month(t.date, as_of)
        )
        return spent + self.total_subscriptions

    def goals_progress(self) -> GoalsProgress:
        goals = self._records["goal"]
        if not goals:
            return GoalsProgress()
        return GoalsProgress(
            total_goals=len(goals),
            completed_goals=sum(1 for goal in goals if goal.is_completed),
            average_progress=sum(goal.progress for goal in goals) / len(goals),
        )

    def events_for_date(self, day: date) -> PaymentCalendarDay:
        """
        Everything due on one day.

        Installments recur on their payment_day each month until end_date.
        """
        return PaymentCalendarDay(
            day=day,
            receivables=[r for r in self._records["receivable"] if r.due_date == day],
            liabilities=[
                liability for liability in self._records["liability"]
                if liability.due_date == day
            ],
            installments=[
                inst for inst in self._records["installment"]
                if inst.payment_day == day.day and day <= inst.end_date
            ],
        )

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def resolve_monthly_income(
        self,
        profile: Optional[Profile] = None,
        as_of: Optional[date] = None,
    ) -> tuple[float, str]:
        """
        Monthly income for scoring, and where it came from.

        Declared income (salary + additional income) wins when positive;
        otherwise this month's income transactions are used.
        """
        declared = profile.declared_monthly_income if profile else 0
        if declared > 0:
            return declared, INCOME_SOURCE_DECLARED
        return self.monthly_income(as_of), INCOME_SOURCE_TRANSACTIONS

    def build_snapshot(
        self,
        profile: Optional[Profile] = None,
        as_of: Optional[date] = None,
        default_currency: Currency = Currency.TRY,
    ) -> FinancialSnapshot:
        """
        Aggregate every record into the scalars the calculators need.

        The currency is the profile's, or default_currency without a profile.
        """
        monthly_income, _ = self.resolve_monthly_income(profile, as_of)

        monthly_expenses = self.monthly_expense(as_of)
        if monthly_expenses <= 0 and profile and profile.monthly_expenses:
            monthly_expenses = profile.monthly_expenses

        return FinancialSnapshot(
            net_worth=self.net_worth,
            total_assets=self.total_assets,
            total_liabilities=self.total_liabilities,
            total_receivables=self.total_receivables,
            liquid_assets=self.liquid_assets,
            monthly_installments=self.total_installments,
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            findeks_score=profile.findeks_score if profile else None,
            currency=profile.currency if profile else default_currency,
        )
