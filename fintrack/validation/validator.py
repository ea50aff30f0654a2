"""
Two-Stage Record Validation

DESIGN DECISION: Validation happens in two distinct stages:

STAGE 1 - SCHEMA VALIDATION:
- Required names present and not blank
- Length limits on names and free text
- Closed vocabularies (currency, record type, status)

STAGE 2 - SEMANTIC VALIDATION:
- Amounts non-negative and below MAX_SAFE_AMOUNT
- Ranges (APR, remaining months, findeks)
- Cross-field consistency (debt vs limit)
- Suspicious but possible values, reported as warnings

Stage 2 only runs when stage 1 passes, so a record with a missing name
does not also get a pile of follow-on range complaints.

IMPORTANT: Validation NEVER silently fixes issues.
It reports them; the ledger decides whether to reject the record.
User-facing messages are Turkish, matching the rest of the product.
"""

import math
from datetime import date
from typing import Callable, Optional

from fintrack.models.records import (
    Asset,
    AssetType,
    Currency,
    Goal,
    Installment,
    Liability,
    LiabilityType,
    Receivable,
    ReceivableStatus,
    Subscription,
    Transaction,
    TransactionType,
)
from fintrack.models.validation import ValidationIssue, ValidationResult


MAX_SAFE_AMOUNT = 2 ** 53 - 1
MAX_NAME_LENGTH = 100
MAX_DETAILS_LENGTH = 500
MAX_REMAINING_MONTHS = 600
MIN_FINDEKS_SCORE = 300
MAX_FINDEKS_SCORE = 1900

_Stage = Callable[[object], list[ValidationIssue]]


def _error(field: str, issue_type: str, message: str, suggested_fix: Optional[str] = None) -> ValidationIssue:
    return ValidationIssue(
        field=field,
        issue_type=issue_type,
        message=message,
        severity="error",
        suggested_fix=suggested_fix,
    )


def _warning(field: str, issue_type: str, message: str, suggested_fix: Optional[str] = None) -> ValidationIssue:
    return ValidationIssue(
        field=field,
        issue_type=issue_type,
        message=message,
        severity="warning",
        suggested_fix=suggested_fix,
    )


def _check_name(field: str, value: Optional[str], label: str) -> list[ValidationIssue]:
    if value is None or value.strip() == "":
        return [_error(field, "missing", f"{label} gereklidir")]
    if len(value) > MAX_NAME_LENGTH:
        return [_error(
            field,
            "too_long",
            f"{label} çok uzun (maksimum {MAX_NAME_LENGTH} karakter)",
            suggested_fix="Daha kısa bir ad kullanın",
        )]
    return []


def _check_details(value: Optional[str]) -> list[ValidationIssue]:
    if value and len(value) > MAX_DETAILS_LENGTH:
        return [_error(
            "details",
            "too_long",
            f"Detay metni çok uzun (maksimum {MAX_DETAILS_LENGTH} karakter)",
        )]
    return []


def _check_amount(field: str, value: Optional[float], label: str) -> list[ValidationIssue]:
    if value is None:
        return [_error(field, "missing", f"{label} gereklidir")]
    if math.isnan(value):
        return [_error(field, "invalid_value", f"{label} geçerli bir sayı olmalıdır")]
    if value < 0:
        return [_error(field, "out_of_range", f"{label} negatif olamaz")]
    if value > MAX_SAFE_AMOUNT:
        return [_error(field, "out_of_range", f"{label} çok büyük")]
    return []


def _check_vocabulary(field: str, value: object, vocabulary: type, message: str) -> list[ValidationIssue]:
    try:
        vocabulary(value)
    except ValueError:
        return [_error(field, "invalid_value", message)]
    return []


def _check_currency(value: object) -> list[ValidationIssue]:
    return _check_vocabulary("currency", value, Currency, "Geçersiz para birimi")


class RecordValidator:
    """
    Validates records through a two-stage pipeline.

    Stage 1: Schema validation (presence, length, vocabulary)
    Stage 2: Semantic validation (ranges, consistency, suspicious values)
    """

    def __init__(self, today: Optional[date] = None):
        """
        Initialize validator.

        Args:
            today: Reference date for date-based warnings.
                   If None, the current date is used on every call.
        """
        self._today = today

    def _reference_date(self) -> date:
        return self._today or date.today()

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def _run(self, record_kind: str, record: object, schema: _Stage, semantic: _Stage) -> ValidationResult:
        all_issues = list(schema(record))

        schema_valid = not any(issue.severity == "error" for issue in all_issues)
        if schema_valid:
            all_issues.extend(semantic(record))

        warnings = [issue.message for issue in all_issues if issue.severity == "warning"]
        is_valid = not any(issue.severity == "error" for issue in all_issues)

        return ValidationResult(
            record_kind=record_kind,
            is_valid=is_valid,
            issues=all_issues,
            warnings=warnings,
        )

    def validate(self, record: object) -> ValidationResult:
        """Validate any ledger record by dispatching on its type."""
        validators = {
            Asset: self.validate_asset,
            Liability: self.validate_liability,
            Receivable: self.validate_receivable,
            Installment: self.validate_installment,
            Transaction: self.validate_transaction,
            Subscription: self.validate_subscription,
            Goal: self.validate_goal,
        }
        for record_type, validator in validators.items():
            if isinstance(record, record_type):
                return validator(record)
        raise TypeError(f"No validator for {type(record).__name__}")

    # -------------------------------------------------------------------------
    # Assets
    # -------------------------------------------------------------------------

    def _asset_schema(self, asset: Asset) -> list[ValidationIssue]:
        issues = _check_name("name", asset.name, "Varlık adı")
        issues += _check_currency(asset.currency)
        issues += _check_vocabulary("type", asset.type, AssetType, "Geçersiz varlık tipi")
        issues += _check_details(asset.details)
        return issues

    def _asset_semantic(self, asset: Asset) -> list[ValidationIssue]:
        return _check_amount("value", asset.value, "Varlık değeri")

    def validate_asset(self, asset: Asset) -> ValidationResult:
        return self._run("asset", asset, self._asset_schema, self._asset_semantic)

    # -------------------------------------------------------------------------
    # Liabilities
    # -------------------------------------------------------------------------

    def _liability_schema(self, liability: Liability) -> list[ValidationIssue]:
        issues = _check_name("name", liability.name, "Borç adı")
        issues += _check_currency(liability.currency)
        issues += _check_vocabulary("type", liability.type, LiabilityType, "Geçersiz borç tipi")
        issues += _check_details(liability.details)
        return issues

    def _liability_semantic(self, liability: Liability) -> list[ValidationIssue]:
        issues = _check_amount("current_debt", liability.current_debt, "Borç tutarı")

        if liability.total_limit is not None and liability.total_limit < 0:
            issues.append(_error("total_limit", "out_of_range", "Toplam limit negatif olamaz"))

        if (
            liability.total_limit is not None
            and liability.current_debt > liability.total_limit
        ):
            issues.append(_error(
                "current_debt",
                "inconsistent",
                "Güncel borç toplam limitten büyük olamaz",
                suggested_fix="Limit veya borç tutarını kontrol edin",
            ))

        if liability.apr is not None and (liability.apr < 0 or liability.apr > 100):
            issues.append(_error("apr", "out_of_range", "Faiz oranı 0-100 arasında olmalıdır"))

        if (
            liability.min_payment is not None
            and liability.min_payment > liability.current_debt
        ):
            issues.append(_warning(
                "min_payment",
                "suspicious_value",
                "Asgari ödeme güncel borçtan büyük görünüyor",
                suggested_fix="Asgari ödeme tutarını kontrol edin",
            ))

        return issues

    def validate_liability(self, liability: Liability) -> ValidationResult:
        return self._run("liability", liability, self._liability_schema, self._liability_semantic)

    # -------------------------------------------------------------------------
    # Receivables
    # -------------------------------------------------------------------------

    def _receivable_schema(self, receivable: Receivable) -> list[ValidationIssue]:
        issues = _check_name("debtor", receivable.debtor, "Borçlu adı")
        issues += _check_currency(receivable.currency)
        issues += _check_vocabulary("status", receivable.status, ReceivableStatus, "Geçersiz durum")
        issues += _check_details(receivable.details)
        return issues

    def _receivable_semantic(self, receivable: Receivable) -> list[ValidationIssue]:
        issues = _check_amount("amount", receivable.amount, "Alacak tutarı")

        if (
            receivable.status != ReceivableStatus.COLLECTED
            and receivable.due_date < self._reference_date()
        ):
            issues.append(_warning(
                "due_date",
                "overdue",
                f"Vade tarihi ({receivable.due_date.isoformat()}) geçmiş",
                suggested_fix="Alacak tahsil edildiyse durumunu güncelleyin",
            ))

        return issues

    def validate_receivable(self, receivable: Receivable) -> ValidationResult:
        return self._run("receivable", receivable, self._receivable_schema, self._receivable_semantic)

    # -------------------------------------------------------------------------
    # Installments
    # -------------------------------------------------------------------------

    def _installment_schema(self, installment: Installment) -> list[ValidationIssue]:
        issues = _check_name("name", installment.name, "Taksit adı")
        issues += _check_currency(installment.currency)
        issues += _check_details(installment.details)
        return issues

    def _installment_semantic(self, installment: Installment) -> list[ValidationIssue]:
        issues = _check_amount("installment_amount", installment.installment_amount, "Taksit tutarı")

        if installment.remaining_months < 0:
            issues.append(_error("remaining_months", "out_of_range", "Kalan ay sayısı negatif olamaz"))
        if installment.remaining_months > MAX_REMAINING_MONTHS:
            issues.append(_error(
                "remaining_months",
                "out_of_range",
                f"Kalan ay sayısı çok büyük (maksimum {MAX_REMAINING_MONTHS})",
            ))

        if installment.total_amount is not None:
            issues += _check_amount("total_amount", installment.total_amount, "Toplam tutar")

        if installment.remaining_months > 0 and installment.end_date < self._reference_date():
            issues.append(_warning(
                "end_date",
                "inconsistent",
                "Bitiş tarihi geçmiş ama kalan ay sayısı sıfır değil",
                suggested_fix="Bitiş tarihini veya kalan ay sayısını kontrol edin",
            ))

        return issues

    def validate_installment(self, installment: Installment) -> ValidationResult:
        return self._run("installment", installment, self._installment_schema, self._installment_semantic)

    # -------------------------------------------------------------------------
    # Transactions, subscriptions, goals
    # -------------------------------------------------------------------------

    def _transaction_schema(self, transaction: Transaction) -> list[ValidationIssue]:
        issues = _check_currency(transaction.currency)
        issues += _check_vocabulary("type", transaction.type, TransactionType, "Geçersiz işlem tipi")
        if len(transaction.description) > MAX_DETAILS_LENGTH:
            issues.append(_error(
                "description",
                "too_long",
                f"Açıklama çok uzun (maksimum {MAX_DETAILS_LENGTH} karakter)",
            ))
        return issues

    def _transaction_semantic(self, transaction: Transaction) -> list[ValidationIssue]:
        issues = _check_amount("amount", transaction.amount, "İşlem tutarı")

        if transaction.date > self._reference_date():
            issues.append(_warning(
                "date",
                "future_date",
                f"İşlem tarihi ({transaction.date.isoformat()}) gelecekte",
                suggested_fix="Tarihin doğru olduğunu kontrol edin",
            ))

        return issues

    def validate_transaction(self, transaction: Transaction) -> ValidationResult:
        return self._run("transaction", transaction, self._transaction_schema, self._transaction_semantic)

    def _subscription_schema(self, subscription: Subscription) -> list[ValidationIssue]:
        issues = _check_name("name", subscription.name, "Abonelik adı")
        issues += _check_currency(subscription.currency)
        issues += _check_details(subscription.details)
        return issues

    def _subscription_semantic(self, subscription: Subscription) -> list[ValidationIssue]:
        return _check_amount("price", subscription.price, "Abonelik ücreti")

    def validate_subscription(self, subscription: Subscription) -> ValidationResult:
        return self._run("subscription", subscription, self._subscription_schema, self._subscription_semantic)

    def _goal_schema(self, goal: Goal) -> list[ValidationIssue]:
        issues = _check_name("name", goal.name, "Hedef adı")
        issues += _check_currency(goal.currency)
        return issues

    def _goal_semantic(self, goal: Goal) -> list[ValidationIssue]:
        issues = _check_amount("target_amount", goal.target_amount, "Hedef tutarı")
        issues += _check_amount("current_amount", goal.current_amount, "Biriken tutar")
        return issues

    def validate_goal(self, goal: Goal) -> ValidationResult:
        return self._run("goal", goal, self._goal_schema, self._goal_semantic)

    # -------------------------------------------------------------------------
    # Profile fields
    # -------------------------------------------------------------------------

    def validate_findeks_score(self, score: float) -> ValidationResult:
        """Findeks must be an integer in 300-1900. Both problems are reported."""
        issues = []

        if score < MIN_FINDEKS_SCORE or score > MAX_FINDEKS_SCORE:
            issues.append(_error(
                "findeks_score",
                "out_of_range",
                f"Findeks notu {MIN_FINDEKS_SCORE}-{MAX_FINDEKS_SCORE} arasında olmalıdır",
            ))

        if not float(score).is_integer():
            issues.append(_error("findeks_score", "invalid_value", "Findeks notu tam sayı olmalıdır"))

        return ValidationResult(
            record_kind="findeks_score",
            is_valid=not issues,
            issues=issues,
        )

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a user-friendly summary of validation results.

        This is what we show to non-technical users.
        """
        if result.is_valid and not result.warnings:
            return "✅ Tüm kontroller başarılı."

        lines = []

        if result.has_errors:
            lines.append("❌ Kayıt kaydedilemedi:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("⚠️ Lütfen şunları kontrol edin:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        return "\n".join(lines)
