"""Summary investment metrics and affordability ratios.

Pure functions over the finished yearly sequence. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import brentq

from roi_pro.engine.ratios import percent
from roi_pro.models.results import AffordabilityBand, ProjectionMetrics, YearRecord

FOUR_PLACES = Decimal("0.0001")

CONSERVATIVE_DTI = Decimal("28")
MODERATE_DTI = Decimal("36")


def total_roi(final: YearRecord, initial_investment: Decimal) -> Decimal:
    """Equity plus net cash extracted, relative to capital deployed, in %.

    Cumulative cash flow is seeded at -initial_investment, so adding the
    investment back gives the investor's total position.
    """
    total_profit = final.equity + final.cumulative_cash_flow
    return percent(total_profit - (-initial_investment), initial_investment)


def cap_rate(year_one: YearRecord, purchase_price: Decimal) -> Decimal:
    return percent(year_one.noi, purchase_price)


def cash_on_cash(year_one: YearRecord, initial_investment: Decimal) -> Decimal:
    return percent(year_one.cash_flow, initial_investment)


def dscr(year_one: YearRecord) -> Decimal:
    """NOI / debt service. An all-cash purchase has no debt to cover: 0."""
    if year_one.debt_service > 0:
        return year_one.noi / year_one.debt_service
    return Decimal("0")


def break_even_year(yearly: list[YearRecord]) -> int | None:
    """First year cumulative cash flow is non-negative."""
    return next((y.year for y in yearly if y.cumulative_cash_flow >= 0), None)


def payoff_year(yearly: list[YearRecord]) -> int | None:
    """First year the loan balance reaches zero."""
    return next((y.year for y in yearly if y.loan_balance <= 0), None)


def total_monthly_payment(
    monthly_pi: Decimal,
    annual_tax: Decimal,
    annual_insurance: Decimal,
    monthly_hoa: Decimal,
) -> Decimal:
    """P&I + tax + insurance + HOA, from purchase-year inputs."""
    return monthly_pi + annual_tax / 12 + annual_insurance / 12 + monthly_hoa


def front_end_dti(monthly_housing: Decimal, monthly_income: Decimal) -> Decimal:
    return percent(monthly_housing, monthly_income)


def affordability_band(dti: Decimal) -> AffordabilityBand:
    if dti.is_nan():
        return AffordabilityBand.AGGRESSIVE
    if dti <= CONSERVATIVE_DTI:
        return AffordabilityBand.CONSERVATIVE
    if dti <= MODERATE_DTI:
        return AffordabilityBand.MODERATE
    return AffordabilityBand.AGGRESSIVE


def compute_irr(cash_flows: list[Decimal]) -> Decimal | None:
    """Annual IRR of a cash flow vector, cash_flows[0] at time zero.

    Uses Brent's method on the NPV function, searching -50% to 1000%.
    Returns None when no root lies in that range.
    """
    if len(cash_flows) < 2:
        return None

    cf_float = [float(cf) for cf in cash_flows]
    if not all(math.isfinite(cf) for cf in cf_float):
        return None

    def npv(rate: float) -> float:
        return sum(cf / (1 + rate) ** t for t, cf in enumerate(cf_float))

    try:
        irr = brentq(npv, -0.5, 10.0, xtol=1e-8, maxiter=1000)
    except ValueError:
        return None
    return Decimal(str(irr)).quantize(FOUR_PLACES, ROUND_HALF_UP)


def before_tax_irr(yearly: list[YearRecord], initial_investment: Decimal) -> Decimal | None:
    """IRR of buying, holding through the horizon and walking away with the equity."""
    if not yearly:
        return None
    flows = [-initial_investment] + [y.cash_flow for y in yearly]
    flows[-1] += yearly[-1].equity
    return compute_irr(flows)


def summarize(
    yearly: list[YearRecord],
    purchase_price: Decimal,
    initial_investment: Decimal,
    monthly_housing: Decimal,
    household_income: Decimal,
) -> ProjectionMetrics:
    """Year-1 ratios, break-even and affordability for a finished projection."""
    year_one = yearly[0]
    monthly_income = household_income / 12
    dti = front_end_dti(monthly_housing, monthly_income)
    return ProjectionMetrics(
        cap_rate=cap_rate(year_one, purchase_price),
        cash_on_cash=cash_on_cash(year_one, initial_investment),
        dscr=dscr(year_one),
        front_end_dti=dti,
        noi=year_one.noi,
        monthly_income=monthly_income,
        break_even_year=break_even_year(yearly),
        affordability=affordability_band(dti),
        before_tax_irr=before_tax_irr(yearly, initial_investment),
    )

