"""Engine results -> API response models."""

from decimal import Decimal, ROUND_HALF_UP

from roi_pro.api.schemas import (
    ComparisonResponse,
    EquityPointResponse,
    ExpenseBreakdownResponse,
    MetricsResponse,
    ProjectionRequest,
    ProjectionResponse,
    ScenarioSnapshotResponse,
    YearRecordResponse,
)
from roi_pro.engine.comparison import ScenarioComparison, ScenarioSnapshot
from roi_pro.models.assumptions import (
    BASELINE_CONFIG,
    ProjectionConfig,
    config_to_dict,
    with_overrides,
)
from roi_pro.models.results import ProjectionResult, YearRecord

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def money(value: Decimal) -> Decimal | None:
    """Round to cents; non-finite values become None (JSON null)."""
    if not value.is_finite():
        return None
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def ratio(value: Decimal | None) -> Decimal | None:
    if value is None or not value.is_finite():
        return None
    return value.quantize(FOUR_PLACES, ROUND_HALF_UP)


def build_config(req: ProjectionRequest, base: ProjectionConfig = BASELINE_CONFIG) -> ProjectionConfig:
    """Seed unset request fields from ``base``."""
    return with_overrides(base, **req.model_dump(exclude_none=True))


def config_to_request(config: ProjectionConfig) -> ProjectionRequest:
    return ProjectionRequest(**config_to_dict(config))


def _year_to_response(y: YearRecord) -> YearRecordResponse:
    b = y.breakdown
    return YearRecordResponse(
        year=y.year,
        property_value=money(y.property_value),
        loan_balance=money(y.loan_balance),
        equity=money(y.equity),
        effective_gross_income=money(y.effective_gross_income),
        operating_expenses=money(y.operating_expenses),
        noi=money(y.noi),
        debt_service=money(y.debt_service),
        cash_flow=money(y.cash_flow),
        interest_paid=money(y.interest_paid),
        principal_paid=money(y.principal_paid),
        cumulative_cash_flow=money(y.cumulative_cash_flow),
        cumulative_total_cost=money(y.cumulative_total_cost),
        cumulative_interest=money(y.cumulative_interest),
        breakdown=ExpenseBreakdownResponse(
            tax=money(b.tax),
            insurance=money(b.insurance),
            hoa=money(b.hoa),
            maintenance=money(b.maintenance),
            management=money(b.management),
            vacancy_loss=money(b.vacancy_loss),
            mortgage=money(b.mortgage),
        ),
    )


def result_to_response(config: ProjectionConfig, result: ProjectionResult) -> ProjectionResponse:
    m = result.metrics
    return ProjectionResponse(
        name=config.name,
        strategy=config.strategy.value,
        monthly_pi=money(result.monthly_pi),
        total_monthly_payment=money(result.total_monthly_payment),
        down_payment=money(result.down_payment),
        closing_costs=money(result.closing_costs),
        initial_investment=money(result.initial_investment),
        total_roi=ratio(result.total_roi),
        payoff_year=result.payoff_year,
        metrics=MetricsResponse(
            cap_rate=ratio(m.cap_rate),
            cash_on_cash=ratio(m.cash_on_cash),
            dscr=ratio(m.dscr),
            front_end_dti=ratio(m.front_end_dti),
            noi=money(m.noi),
            monthly_income=money(m.monthly_income),
            break_even_year=m.break_even_year,
            affordability=m.affordability.value,
            before_tax_irr=m.before_tax_irr,
        ),
        yearly=[_year_to_response(y) for y in result.yearly],
    )


def _snapshot_to_response(s: ScenarioSnapshot) -> ScenarioSnapshotResponse:
    return ScenarioSnapshotResponse(
        name=s.name,
        initial_investment=money(s.initial_investment),
        monthly_cash_flow=money(s.monthly_cash_flow),
        cap_rate=ratio(s.cap_rate),
        final_equity=money(s.final_equity),
        total_roi=ratio(s.total_roi),
    )


def comparison_to_response(comparison: ScenarioComparison) -> ComparisonResponse:
    return ComparisonResponse(
        a=_snapshot_to_response(comparison.a),
        b=_snapshot_to_response(comparison.b),
        equity_curve=[
            EquityPointResponse(
                year=p.year,
                equity_a=money(p.equity_a),
                equity_b=money(p.equity_b),
            )
            for p in comparison.equity_curve
        ],
    )
