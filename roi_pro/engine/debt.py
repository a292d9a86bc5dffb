"""Mortgage payment and in-year amortization.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from roi_pro.engine.ratios import ZERO, HUNDRED, divide

MONTHS_PER_YEAR = 12

# Residue of an unrounded payment schedule; anything below it is paid off
HALF_CENT = Decimal("0.005")


class LoanState(Enum):
    ACCRUING = "accruing"
    PAID_OFF = "paid_off"


@dataclass(frozen=True)
class AmortizationYear:
    interest: Decimal
    principal: Decimal
    debt_service: Decimal  # Total actually paid, extra payments included
    ending_balance: Decimal
    payoff_month: int | None = None  # Month (1-12) the final payment landed in


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / HUNDRED / MONTHS_PER_YEAR


def monthly_payment(loan_amount: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Fixed monthly principal + interest payment, unrounded.

    M = P * r(1+r)^n / ((1+r)^n - 1). A 0% loan is repaid straight-line, P / n.
    """
    n = term_years * MONTHS_PER_YEAR
    if annual_rate_pct == 0:
        return divide(loan_amount, Decimal(n))

    r = monthly_rate(annual_rate_pct)
    factor = (1 + r) ** n
    return divide(loan_amount * r * factor, factor - 1)


def loan_state(balance: Decimal) -> LoanState:
    return LoanState.ACCRUING if balance > HALF_CENT else LoanState.PAID_OFF


def amortize_year(
    balance: Decimal,
    rate: Decimal,
    payment: Decimal,
    extra_payment: Decimal = ZERO,
) -> AmortizationYear:
    """Run twelve monthly payments against ``balance``.

    Args:
        balance: Loan balance at the start of the year
        rate: Monthly interest rate as a fraction
        payment: Fixed monthly principal + interest payment
        extra_payment: Flat additional principal paid every month

    A month that starts PAID_OFF contributes nothing. The month in which the
    scheduled principal plus extra covers the balance (to within half a
    cent) retires exactly the balance and moves the loan to PAID_OFF.
    """
    total_interest = ZERO
    total_principal = ZERO
    total_paid = ZERO
    payoff_month = None

    for month in range(1, MONTHS_PER_YEAR + 1):
        if loan_state(balance) is LoanState.PAID_OFF:
            continue

        interest = balance * rate
        principal = payment - interest + extra_payment
        paid = payment + extra_payment

        if principal >= balance - HALF_CENT:
            principal = balance
            paid = balance + interest
            payoff_month = month

        balance -= principal
        total_interest += interest
        total_principal += principal
        total_paid += paid

    return AmortizationYear(
        interest=total_interest,
        principal=total_principal,
        debt_service=total_paid,
        ending_balance=balance,
        payoff_month=payoff_month,
    )
