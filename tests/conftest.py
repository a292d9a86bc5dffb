"""Canonical test fixtures used across all tests.

Fixture: $450K purchase, 20% down, 3% closing, 6.5% rate, 30yr fixed.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from roi_pro.api.app import app
from roi_pro.api.deps import get_scenario_store
from roi_pro.data.scenarios import ScenarioStore
from roi_pro.models.assumptions import BASELINE_CONFIG, ProjectionConfig, Strategy, with_overrides


@pytest.fixture
def primary_config() -> ProjectionConfig:
    """Owner-occupied home, baseline assumptions, 30-year horizon."""
    return BASELINE_CONFIG


@pytest.fixture
def rental_config() -> ProjectionConfig:
    """Same purchase held as a rental with 8% management."""
    return with_overrides(
        BASELINE_CONFIG,
        name="Rental",
        strategy=Strategy.RENTAL,
        monthly_rent=Decimal("3200"),
        vacancy_pct=Decimal("5"),
        management_fee_pct=Decimal("8"),
        horizon_years=10,
    )


@pytest.fixture
def cash_flowing_rental_config() -> ProjectionConfig:
    """Cheap rental with strong rent: positive cash flow from year 1."""
    return with_overrides(
        BASELINE_CONFIG,
        name="Cash Cow",
        strategy=Strategy.RENTAL,
        purchase_price=Decimal("200000"),
        down_payment_pct=Decimal("25"),
        monthly_rent=Decimal("2600"),
        property_tax=Decimal("2400"),
        insurance=Decimal("900"),
        horizon_years=30,
    )


@pytest.fixture
def all_cash_config() -> ProjectionConfig:
    return with_overrides(
        BASELINE_CONFIG,
        name="All Cash",
        strategy=Strategy.RENTAL,
        down_payment_pct=Decimal("100"),
        horizon_years=10,
    )


@pytest.fixture
def zero_rate_config() -> ProjectionConfig:
    return with_overrides(
        BASELINE_CONFIG,
        name="Zero Rate",
        interest_rate_pct=Decimal("0"),
        horizon_years=30,
    )


@pytest.fixture
def scenario_store(tmp_path) -> ScenarioStore:
    """File-backed SQLite store, isolated per test."""
    return ScenarioStore(f"sqlite:///{tmp_path / 'scenarios.db'}")


@pytest.fixture
def client(scenario_store):
    """API client whose scenario routes use the per-test store."""
    app.dependency_overrides[get_scenario_store] = lambda: scenario_store
    yield TestClient(app)
    app.dependency_overrides.clear()
