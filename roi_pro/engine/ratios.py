"""Division that never raises.

Decimal traps division by zero by default. The engine is total over numeric
input, so a zero denominator yields a non-finite Decimal instead:
x/0 -> +/-Infinity, 0/0 -> NaN.
"""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")
INFINITY = Decimal("Infinity")
NAN = Decimal("NaN")


def divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator == 0:
        if numerator.is_nan() or numerator == 0:
            return NAN
        return INFINITY if numerator > 0 else -INFINITY
    return numerator / denominator


def percent(numerator: Decimal, denominator: Decimal) -> Decimal:
    return divide(numerator, denominator) * HUNDRED
