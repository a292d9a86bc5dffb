"""Side-by-side comparison of two purchase scenarios."""

from dataclasses import dataclass, field
from decimal import Decimal

from roi_pro.models.assumptions import ProjectionConfig
from roi_pro.models.results import ProjectionResult
from roi_pro.engine.projection import run_projection


@dataclass(frozen=True)
class ScenarioSnapshot:
    name: str
    initial_investment: Decimal
    monthly_cash_flow: Decimal  # Year 1 cash flow / 12
    cap_rate: Decimal
    final_equity: Decimal
    total_roi: Decimal


@dataclass(frozen=True)
class EquityPoint:
    year: int
    equity_a: Decimal
    equity_b: Decimal


@dataclass(frozen=True)
class ScenarioComparison:
    a: ScenarioSnapshot
    b: ScenarioSnapshot
    equity_curve: list[EquityPoint] = field(default_factory=list)


def _snapshot(name: str, result: ProjectionResult) -> ScenarioSnapshot:
    return ScenarioSnapshot(
        name=name,
        initial_investment=result.initial_investment,
        monthly_cash_flow=result.yearly[0].cash_flow / 12,
        cap_rate=result.metrics.cap_rate,
        final_equity=result.final.equity,
        total_roi=result.total_roi,
    )


def compare(config_a: ProjectionConfig, config_b: ProjectionConfig) -> ScenarioComparison:
    """Run both scenarios and line their equity up on A's years.

    When B has a shorter horizon its missing years show zero equity.
    """
    result_a = run_projection(config_a)
    result_b = run_projection(config_b)

    curve = [
        EquityPoint(
            year=record.year,
            equity_a=record.equity,
            equity_b=result_b.yearly[i].equity if i < len(result_b.yearly) else Decimal("0"),
        )
        for i, record in enumerate(result_a.yearly)
    ]

    return ScenarioComparison(
        a=_snapshot(config_a.name, result_a),
        b=_snapshot(config_b.name, result_b),
        equity_curve=curve,
    )
