"""Shared fixtures: settings isolation and sample records."""

from datetime import date

import pytest

from fintrack.config import get_settings
from fintrack.models import (
    Asset,
    AssetType,
    Installment,
    Liability,
    LiabilityType,
    Profile,
)
from fintrack.validation import RecordValidator


SETTINGS_ENV_VARS = (
    "APP_ENVIRONMENT",
    "DEBUG_MODE",
    "DEFAULT_CURRENCY",
    "DEFAULT_SAFE_TO_SPEND_MODE",
    "LOG_LEVEL",
    "LOG_JSON_OUTPUT",
    "LOG_AUDIT_TRAIL_SIZE",
)

TODAY = date(2024, 6, 15)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """No .env file and no settings variables leak into a test."""
    monkeypatch.chdir(tmp_path)
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def validator():
    return RecordValidator(today=TODAY)


@pytest.fixture
def cash():
    return Asset(type=AssetType.LIQUID, name="Vadesiz Hesap", value=50000)


@pytest.fixture
def loan():
    return Liability(type=LiabilityType.PERSONAL_DEBT, name="İhtiyaç Kredisi", current_debt=10000)


@pytest.fixture
def phone_plan():
    return Installment(
        name="Telefon",
        installment_amount=2000,
        remaining_months=10,
        payment_day=20,
        end_date=date(2025, 4, 20),
    )


@pytest.fixture
def profile():
    return Profile(name="Ayşe", salary=10000, monthly_expenses=5000)
