"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class ProjectionRequest(BaseModel):
    """Scenario inputs. Omitted fields are seeded from the baseline template.

    Rates are percentages: 6.5 means 6.5%.
    """
    name: str | None = Field(None, max_length=100)
    strategy: Literal["primary", "rental"] | None = None

    purchase_price: Decimal | None = Field(None, gt=0)
    closing_cost_pct: Decimal | None = Field(None, ge=0, le=100)
    down_payment_pct: Decimal | None = Field(None, ge=0, le=100)

    interest_rate_pct: Decimal | None = Field(None, ge=0, le=100)
    loan_term_years: int | None = Field(None, ge=1, le=50)
    extra_monthly_payment: Decimal | None = Field(None, ge=0)

    monthly_rent: Decimal | None = Field(None, ge=0)
    vacancy_pct: Decimal | None = Field(None, ge=0, le=100)
    management_fee_pct: Decimal | None = Field(None, ge=0, le=100)

    property_tax: Decimal | None = Field(None, ge=0)
    insurance: Decimal | None = Field(None, ge=0)
    hoa: Decimal | None = Field(None, ge=0)
    maintenance_pct: Decimal | None = Field(None, ge=0, le=100)

    appreciation_pct: Decimal | None = Field(None, ge=-100, le=100)
    inflation_pct: Decimal | None = Field(None, ge=-100, le=100)

    household_income: Decimal | None = Field(None, ge=0)
    horizon_years: int | None = Field(None, ge=1, le=50)


class ComparisonRequest(BaseModel):
    a: ProjectionRequest
    b: ProjectionRequest


# ---- Response schemas ----

class ExpenseBreakdownResponse(BaseModel):
    tax: Decimal
    insurance: Decimal
    hoa: Decimal
    maintenance: Decimal
    management: Decimal
    vacancy_loss: Decimal
    mortgage: Decimal


class YearRecordResponse(BaseModel):
    year: int
    property_value: Decimal
    loan_balance: Decimal
    equity: Decimal
    effective_gross_income: Decimal
    operating_expenses: Decimal
    noi: Decimal
    debt_service: Decimal
    cash_flow: Decimal
    interest_paid: Decimal
    principal_paid: Decimal
    cumulative_cash_flow: Decimal
    cumulative_total_cost: Decimal
    cumulative_interest: Decimal
    breakdown: ExpenseBreakdownResponse


class MetricsResponse(BaseModel):
    # Ratios are null when undefined (e.g. DTI with zero household income)
    cap_rate: Decimal | None = None
    cash_on_cash: Decimal | None = None
    dscr: Decimal | None = None
    front_end_dti: Decimal | None = None
    noi: Decimal
    monthly_income: Decimal
    break_even_year: int | None = None
    affordability: str
    before_tax_irr: Decimal | None = None


class ProjectionResponse(BaseModel):
    name: str
    strategy: str
    monthly_pi: Decimal | None = None
    total_monthly_payment: Decimal | None = None
    down_payment: Decimal
    closing_costs: Decimal
    initial_investment: Decimal
    total_roi: Decimal | None = None
    payoff_year: int | None = None
    metrics: MetricsResponse
    yearly: list[YearRecordResponse]


class ScenarioSnapshotResponse(BaseModel):
    name: str
    initial_investment: Decimal
    monthly_cash_flow: Decimal
    cap_rate: Decimal | None = None
    final_equity: Decimal
    total_roi: Decimal | None = None


class EquityPointResponse(BaseModel):
    year: int
    equity_a: Decimal
    equity_b: Decimal


class ComparisonResponse(BaseModel):
    a: ScenarioSnapshotResponse
    b: ScenarioSnapshotResponse
    equity_curve: list[EquityPointResponse]


class ScenarioListResponse(BaseModel):
    names: list[str]
