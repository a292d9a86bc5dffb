"""Projection orchestrator: amortization, escalation and metrics over the horizon.

Pure computation. No I/O. ProjectionConfig in, ProjectionResult out.
"""

import logging
from decimal import Decimal

from roi_pro.models.assumptions import ProjectionConfig
from roi_pro.models.results import ExpenseBreakdown, ProjectionResult, YearRecord

from roi_pro.engine.debt import LoanState, amortize_year, loan_state, monthly_payment, monthly_rate
from roi_pro.engine.cashflow import CurrentFigures, EscalationRates, operating_year
from roi_pro.engine.metrics import (
    payoff_year,
    summarize,
    total_monthly_payment,
    total_roi,
)

logger = logging.getLogger(__name__)


def run_projection(config: ProjectionConfig) -> ProjectionResult:
    """Project the purchase year by year over ``config.horizon_years``.

    Year 1 uses the inputs as given; rent, tax, insurance and HOA escalate by
    inflation and the property value by appreciation from year 2 onward.
    """
    monthly_pi = monthly_payment(
        config.loan_amount, config.interest_rate_pct, config.loan_term_years
    )
    rate = monthly_rate(config.interest_rate_pct)
    initial_investment = config.initial_investment

    figures = CurrentFigures.from_config(config)
    rates = EscalationRates.from_config(config)

    balance = config.loan_amount
    cumulative_cash_flow = -initial_investment
    cumulative_total_cost = initial_investment
    cumulative_interest = Decimal("0")

    yearly: list[YearRecord] = []
    for year in range(1, config.horizon_years + 1):
        debt = amortize_year(balance, rate, monthly_pi, config.extra_monthly_payment)
        balance = debt.ending_balance
        if debt.payoff_month is not None:
            logger.debug("%s: loan paid off in year %d month %d", config.name, year, debt.payoff_month)

        ops = operating_year(config, figures)
        cash_flow = ops.noi - debt.debt_service

        cumulative_cash_flow += cash_flow
        cumulative_total_cost += -cash_flow
        cumulative_interest += debt.interest

        loan_balance = balance if loan_state(balance) is LoanState.ACCRUING else Decimal("0")
        yearly.append(YearRecord(
            year=year,
            property_value=figures.property_value,
            loan_balance=loan_balance,
            equity=figures.property_value - loan_balance,
            effective_gross_income=ops.income.effective_gross_income,
            operating_expenses=ops.operating_expenses,
            noi=ops.noi,
            debt_service=debt.debt_service,
            cash_flow=cash_flow,
            interest_paid=debt.interest,
            principal_paid=debt.principal,
            cumulative_cash_flow=cumulative_cash_flow,
            cumulative_total_cost=cumulative_total_cost,
            cumulative_interest=cumulative_interest,
            breakdown=ExpenseBreakdown(
                tax=figures.property_tax,
                insurance=figures.insurance,
                hoa=figures.hoa,
                maintenance=ops.maintenance,
                management=ops.income.management_fee,
                vacancy_loss=ops.income.vacancy_loss,
                mortgage=debt.debt_service,
            ),
        ))

        figures = figures.escalate(rates)

    monthly_housing = total_monthly_payment(
        monthly_pi, config.property_tax, config.insurance, config.hoa
    )
    final = yearly[-1]
    metrics = summarize(
        yearly,
        purchase_price=config.purchase_price,
        initial_investment=initial_investment,
        monthly_housing=monthly_housing,
        household_income=config.household_income,
    )

    roi = total_roi(final, initial_investment)
    paid_off = payoff_year(yearly)
    logger.debug(
        "Projected %s over %d years: ROI %s%%, payoff year %s",
        config.name, config.horizon_years, roi, paid_off,
    )

    return ProjectionResult(
        monthly_pi=monthly_pi,
        total_monthly_payment=monthly_housing,
        down_payment=config.down_payment,
        closing_costs=config.closing_costs,
        initial_investment=initial_investment,
        yearly=yearly,
        final=final,
        total_roi=roi,
        payoff_year=paid_off,
        metrics=metrics,
    )
