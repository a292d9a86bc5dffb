"""CSV export of a projection's yearly sequence."""

import csv
import io
from decimal import Decimal, ROUND_HALF_UP
from typing import TextIO

from roi_pro.config import settings
from roi_pro.models.results import ProjectionResult

HEADERS = ["Year", "Value", "Loan", "Equity", "Cash Flow", "Cumulative Cash Flow"]


def _fmt(value: Decimal | int, places: int) -> str:
    value = Decimal(value)
    if not value.is_finite():
        return str(value)
    return str(value.quantize(Decimal(1).scaleb(-places), ROUND_HALF_UP))


def yearly_rows(result: ProjectionResult, places: int | None = None) -> list[list[str]]:
    """One row per year: year, value, loan, equity, cash flow, cumulative cash flow."""
    places = settings.export_decimal_places if places is None else places
    return [
        [
            _fmt(y.year, places),
            _fmt(y.property_value, places),
            _fmt(y.loan_balance, places),
            _fmt(y.equity, places),
            _fmt(y.cash_flow, places),
            _fmt(y.cumulative_cash_flow, places),
        ]
        for y in result.yearly
    ]


def write_csv(result: ProjectionResult, out: TextIO, places: int | None = None) -> None:
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(HEADERS)
    writer.writerows(yearly_rows(result, places))


def to_csv(result: ProjectionResult, places: int | None = None) -> str:
    buf = io.StringIO()
    write_csv(result, buf, places)
    return buf.getvalue()


def export_filename(scenario_name: str) -> str:
    return f"{scenario_name}_analysis.csv"
