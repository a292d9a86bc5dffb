"""Command-line projection runner.

Usage:
    python -m roi_pro.cli --price 450000 --down 20 --rate 6.5
    python -m roi_pro.cli --strategy rental --rent 2800 --management 8 --csv out.csv
    python -m roi_pro.cli --scenario "Duplex" --years 10
    python -m roi_pro.cli --name "Duplex" --strategy rental --save
"""

import argparse
import logging
import sys

from roi_pro.config import settings
from roi_pro.data.export import export_filename, write_csv
from roi_pro.data.scenarios import ScenarioNotFound, ScenarioStore
from roi_pro.engine.projection import run_projection
from roi_pro.models.assumptions import BASELINE_CONFIG, with_overrides
from roi_pro.models.results import ProjectionResult

# flag -> (config field, type, help)
CONFIG_FLAGS = {
    "--name": ("name", str, "Scenario name"),
    "--strategy": ("strategy", str, "primary or rental"),
    "--price": ("purchase_price", float, "Purchase price"),
    "--closing": ("closing_cost_pct", float, "Closing costs, % of price"),
    "--down": ("down_payment_pct", float, "Down payment, % of price"),
    "--rate": ("interest_rate_pct", float, "Annual interest rate, %"),
    "--term": ("loan_term_years", int, "Loan term in years"),
    "--extra": ("extra_monthly_payment", float, "Extra principal paid each month"),
    "--rent": ("monthly_rent", float, "Monthly rent"),
    "--vacancy": ("vacancy_pct", float, "Vacancy rate, %"),
    "--management": ("management_fee_pct", float, "Management fee, % of collected rent"),
    "--tax": ("property_tax", float, "Annual property tax"),
    "--insurance": ("insurance", float, "Annual insurance"),
    "--hoa": ("hoa", float, "Monthly HOA"),
    "--maintenance": ("maintenance_pct", float, "Annual maintenance, % of value"),
    "--appreciation": ("appreciation_pct", float, "Annual appreciation, %"),
    "--inflation": ("inflation_pct", float, "Annual inflation, %"),
    "--income": ("household_income", float, "Annual household income"),
    "--years": ("horizon_years", int, "Years to simulate"),
}


def _year_label(year: int | None) -> str:
    return f"Year {year}" if year is not None else "N/A"


def print_summary(name: str, result: ProjectionResult) -> None:
    m = result.metrics
    end = result.final
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")
    print(f"  Cash needed:        ${result.initial_investment:,.0f}")
    print(f"  Monthly P&I:        ${result.monthly_pi:,.2f}")
    print(f"  Monthly payment:    ${result.total_monthly_payment:,.2f}  (P&I + tax + ins + HOA)")
    print(f"  Front-end DTI:      {m.front_end_dti:.1f}%  ({m.affordability.value})")
    print(f"  Year 1 NOI:         ${m.noi:,.0f}")
    print(f"  Cap rate:           {m.cap_rate:.2f}%")
    print(f"  Cash on cash:       {m.cash_on_cash:.2f}%")
    print(f"  DSCR:               {m.dscr:.2f}")
    print(f"  Break-even:         {_year_label(m.break_even_year)}")
    print(f"  Loan paid off:      {_year_label(result.payoff_year)}")
    print(f"  Equity (year {end.year}):   ${end.equity:,.0f}")
    print(f"  Total ROI:          {result.total_roi:.1f}%")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Real estate purchase projection")
    for flag, (dest, kind, help_text) in CONFIG_FLAGS.items():
        parser.add_argument(flag, dest=dest, type=kind, default=None, help=help_text)
    parser.add_argument("--scenario", help="Start from a saved scenario instead of the baseline")
    parser.add_argument("--save", action="store_true", help="Save the resulting scenario")
    parser.add_argument("--csv", nargs="?", const="", default=None,
                        help="Write yearly rows to CSV (default file: <name>_analysis.csv)")
    parser.add_argument("--db", default=None, help="Scenario database URL")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    overrides = {
        dest: getattr(args, dest)
        for dest, _, _ in CONFIG_FLAGS.values()
        if getattr(args, dest) is not None
    }

    base = BASELINE_CONFIG
    store = None
    if args.scenario or args.save:
        store = ScenarioStore(database_url=args.db)
    if args.scenario:
        try:
            base = store.load(args.scenario)
        except ScenarioNotFound as e:
            parser.error(str(e))

    try:
        config = with_overrides(base, **overrides)
    except ValueError as e:
        parser.error(str(e))
    if not 1 <= config.horizon_years <= 50:
        parser.error("--years must be between 1 and 50")
    if config.purchase_price <= 0:
        parser.error("--price must be positive")

    result = run_projection(config)
    print_summary(config.name, result)

    if args.csv is not None:
        path = args.csv or export_filename(config.name)
        with open(path, "w", newline="") as fh:
            write_csv(result, fh)
        print(f"  Wrote {len(result.yearly)} rows to {path}")

    if args.save:
        store.save(config)
        print(f"  Saved scenario {config.name!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
