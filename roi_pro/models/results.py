from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class AffordabilityBand(Enum):
    """Front-end DTI bands: <= 28% conservative, <= 36% moderate."""
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class ExpenseBreakdown:
    tax: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    hoa: Decimal = Decimal("0")  # Annualized
    maintenance: Decimal = Decimal("0")
    management: Decimal = Decimal("0")
    vacancy_loss: Decimal = Decimal("0")
    mortgage: Decimal = Decimal("0")  # Debt service actually paid


@dataclass(frozen=True)
class YearRecord:
    year: int

    # Balance sheet
    property_value: Decimal = Decimal("0")  # At start of year
    loan_balance: Decimal = Decimal("0")  # At end of year, floored at 0
    equity: Decimal = Decimal("0")  # Value - loan balance, may be negative

    # Operations
    effective_gross_income: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")
    noi: Decimal = Decimal("0")
    debt_service: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")

    # Debt breakdown
    interest_paid: Decimal = Decimal("0")
    principal_paid: Decimal = Decimal("0")

    # Running totals
    cumulative_cash_flow: Decimal = Decimal("0")
    cumulative_total_cost: Decimal = Decimal("0")
    cumulative_interest: Decimal = Decimal("0")

    breakdown: ExpenseBreakdown = field(default_factory=ExpenseBreakdown)


@dataclass(frozen=True)
class ProjectionMetrics:
    cap_rate: Decimal = Decimal("0")  # %
    cash_on_cash: Decimal = Decimal("0")  # %
    dscr: Decimal = Decimal("0")
    front_end_dti: Decimal = Decimal("0")  # %
    noi: Decimal = Decimal("0")  # Year 1
    monthly_income: Decimal = Decimal("0")  # Household
    break_even_year: int | None = None  # None = not within horizon
    affordability: AffordabilityBand = AffordabilityBand.CONSERVATIVE
    before_tax_irr: Decimal | None = None  # Fraction, None = no root


@dataclass(frozen=True)
class ProjectionResult:
    monthly_pi: Decimal = Decimal("0")
    total_monthly_payment: Decimal = Decimal("0")  # P&I + tax + insurance + HOA
    down_payment: Decimal = Decimal("0")
    closing_costs: Decimal = Decimal("0")
    initial_investment: Decimal = Decimal("0")
    yearly: list[YearRecord] = field(default_factory=list)
    final: YearRecord | None = None
    total_roi: Decimal = Decimal("0")  # %
    payoff_year: int | None = None  # None = not within horizon
    metrics: ProjectionMetrics = field(default_factory=ProjectionMetrics)
