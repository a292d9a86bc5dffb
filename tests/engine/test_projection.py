from decimal import Decimal

from roi_pro.engine.projection import run_projection
from roi_pro.models.assumptions import with_overrides


class TestProjection:
    def test_one_record_per_year(self, primary_config, rental_config):
        assert len(run_projection(primary_config).yearly) == 30
        assert len(run_projection(rental_config).yearly) == 10

    def test_years_sequential(self, rental_config):
        result = run_projection(rental_config)
        for i, record in enumerate(result.yearly):
            assert record.year == i + 1
        assert result.final is result.yearly[-1]

    def test_purchase_scenario(self, primary_config):
        """$450K, 20% down, 3% closing, 6.5%, 30yr, one-year horizon."""
        result = run_projection(with_overrides(primary_config, horizon_years=1))
        assert result.down_payment == Decimal("90000")
        assert result.closing_costs == Decimal("13500")
        assert result.initial_investment == Decimal("103500")
        assert abs(result.monthly_pi - Decimal("2275.20")) <= Decimal("0.5")
        # 12 payments of ~2275.44 less ~4023.80 of principal
        assert abs(result.yearly[0].interest_paid - Decimal("23281.54")) < Decimal("5")
        assert result.yearly[0].cumulative_interest == result.yearly[0].interest_paid

    def test_cumulative_cash_flow_chain(self, rental_config):
        result = run_projection(rental_config)
        previous = -result.initial_investment
        for record in result.yearly:
            assert record.cumulative_cash_flow == previous + record.cash_flow
            previous = record.cumulative_cash_flow

    def test_cumulative_total_cost_mirrors_cash_flow(self, rental_config):
        result = run_projection(rental_config)
        for record in result.yearly:
            assert abs(record.cumulative_total_cost + record.cumulative_cash_flow) < Decimal("0.000001")

    def test_loan_balance_non_increasing(self, primary_config):
        result = run_projection(primary_config)
        previous = primary_config.loan_amount
        for record in result.yearly:
            assert record.loan_balance <= previous
            assert record.loan_balance >= 0
            previous = record.loan_balance

    def test_equity_is_value_less_balance(self, rental_config):
        for record in run_projection(rental_config).yearly:
            assert record.equity == record.property_value - record.loan_balance

    def test_property_value_appreciates_from_year_two(self, primary_config):
        result = run_projection(primary_config)
        assert result.yearly[0].property_value == Decimal("450000")
        assert result.yearly[1].property_value == Decimal("450000") * Decimal("1.035")

    def test_expenses_escalate_with_inflation(self, rental_config):
        result = run_projection(rental_config)
        y1, y2 = result.yearly[0].breakdown, result.yearly[1].breakdown
        assert y1.tax == Decimal("5000")
        assert y2.tax == Decimal("5000") * Decimal("1.025")
        assert y2.insurance == Decimal("1200") * Decimal("1.025")

    def test_breakdown_mortgage_is_debt_service(self, rental_config):
        for record in run_projection(rental_config).yearly:
            assert record.breakdown.mortgage == record.debt_service

    def test_total_roi(self, rental_config):
        result = run_projection(rental_config)
        final = result.final
        ii = result.initial_investment
        expected = (final.equity + final.cumulative_cash_flow + ii) / ii * 100
        assert abs(result.total_roi - expected) < Decimal("0.000001")

    def test_deterministic(self, rental_config):
        assert run_projection(rental_config) == run_projection(rental_config)


class TestOwnerOccupied:
    def test_no_rental_terms(self, primary_config):
        for record in run_projection(primary_config).yearly:
            assert record.effective_gross_income == 0
            assert record.breakdown.vacancy_loss == 0
            assert record.breakdown.management == 0

    def test_cash_flow_is_costs_plus_mortgage(self, primary_config):
        for record in run_projection(primary_config).yearly:
            b = record.breakdown
            assert record.cash_flow == -(b.tax + b.insurance + b.hoa + b.maintenance) - record.debt_service

    def test_never_breaks_even(self, primary_config):
        assert run_projection(primary_config).metrics.break_even_year is None

    def test_affordability(self, primary_config):
        """~$2,792/month against $10,000/month income."""
        m = run_projection(primary_config).metrics
        assert Decimal("27.5") < m.front_end_dti < Decimal("28")
        assert m.affordability.value == "conservative"
        assert m.monthly_income == Decimal("10000")

    def test_rent_is_ignored(self, primary_config):
        a = run_projection(primary_config)
        b = run_projection(with_overrides(primary_config, monthly_rent=Decimal("9999")))
        assert a.final.cash_flow == b.final.cash_flow


class TestPayoff:
    def test_extra_payment_pays_off_early(self, primary_config):
        config = with_overrides(primary_config, extra_monthly_payment=Decimal("2000"))
        result = run_projection(config)
        year = result.payoff_year
        assert year is not None and year < 30
        assert result.yearly[year - 1].loan_balance == 0
        assert result.yearly[year - 2].loan_balance > 0

    def test_debt_service_stops_after_payoff(self, primary_config):
        config = with_overrides(primary_config, extra_monthly_payment=Decimal("2000"))
        result = run_projection(config)
        payoff = result.yearly[result.payoff_year - 1]
        full_year = (result.monthly_pi + Decimal("2000")) * 12
        assert payoff.debt_service < full_year
        for record in result.yearly[result.payoff_year:]:
            assert record.debt_service == 0
            assert record.breakdown.mortgage == 0
            assert record.equity == record.property_value

    def test_no_payoff_within_short_horizon(self, rental_config):
        assert run_projection(rental_config).payoff_year is None

    def test_payoff_lands_in_final_term_year(self, primary_config):
        """Unrounded payments leave a sub-cent residue at month 360; the loan still retires in year 30."""
        result = run_projection(with_overrides(primary_config, horizon_years=35))
        assert result.payoff_year == 30
        assert result.yearly[29].loan_balance == 0
        assert result.yearly[30].debt_service == 0
        assert result.yearly[30].interest_paid == 0

    def test_payoff_lands_in_final_term_year_other_terms(self, primary_config):
        for rate, term in [("6.5", 15), ("5.25", 30), ("7", 30), ("4.75", 30)]:
            config = with_overrides(
                primary_config, interest_rate_pct=rate, loan_term_years=term, horizon_years=term + 5
            )
            result = run_projection(config)
            assert result.payoff_year == term
            assert result.yearly[term].debt_service == 0

    def test_zero_rate(self, zero_rate_config):
        result = run_projection(zero_rate_config)
        assert result.monthly_pi == Decimal("1000")
        assert result.final.cumulative_interest == 0
        assert result.payoff_year == 30


class TestMetrics:
    def test_cap_rate_and_coc_ignore_horizon(self, rental_config):
        short = run_projection(with_overrides(rental_config, horizon_years=10))
        long = run_projection(with_overrides(rental_config, horizon_years=30))
        assert short.metrics.cap_rate == long.metrics.cap_rate
        assert short.metrics.cash_on_cash == long.metrics.cash_on_cash
        assert short.metrics.dscr == long.metrics.dscr

    def test_cap_rate_uses_year_one_noi(self, rental_config):
        result = run_projection(rental_config)
        assert result.metrics.noi == result.yearly[0].noi
        assert result.metrics.cap_rate == result.yearly[0].noi / Decimal("450000") * 100

    def test_all_cash_dscr_is_zero(self, all_cash_config):
        result = run_projection(all_cash_config)
        assert result.monthly_pi == 0
        assert result.yearly[0].debt_service == 0
        assert result.metrics.dscr == Decimal("0")
        assert result.payoff_year == 1

    def test_positive_cash_flow_breaks_even(self, cash_flowing_rental_config):
        result = run_projection(cash_flowing_rental_config)
        year = result.metrics.break_even_year
        assert year is not None
        assert result.yearly[year - 1].cumulative_cash_flow >= 0
        assert result.yearly[year - 2].cumulative_cash_flow < 0

    def test_strong_cash_flow_drives_total_cost_below_initial(self, cash_flowing_rental_config):
        result = run_projection(cash_flowing_rental_config)
        assert result.final.cumulative_total_cost < result.initial_investment
        assert result.final.cumulative_total_cost < 0

    def test_irr_is_reported(self, rental_config):
        assert run_projection(rental_config).metrics.before_tax_irr is not None

    def test_zero_income_dti_is_infinite(self, primary_config):
        result = run_projection(with_overrides(primary_config, household_income=Decimal("0")))
        assert result.metrics.front_end_dti == Decimal("Infinity")
        assert len(result.yearly) == 30


class TestDegenerateInputs:
    def test_negative_equity_from_collapsing_value(self, primary_config):
        config = with_overrides(primary_config, appreciation_pct=-100, horizon_years=10)
        result = run_projection(config)
        assert len(result.yearly) == 10
        assert result.yearly[1].property_value == 0
        assert result.final.equity < 0
        assert result.final.equity == -result.final.loan_balance

    def test_negative_equity_from_loan_above_value(self, primary_config):
        config = with_overrides(primary_config, down_payment_pct=-50, horizon_years=10)
        result = run_projection(config)
        assert len(result.yearly) == 10
        assert config.loan_amount == Decimal("675000")
        assert result.yearly[0].equity < 0

    def test_negative_price_still_projects(self, rental_config):
        config = with_overrides(rental_config, purchase_price=-450000, horizon_years=5)
        result = run_projection(config)
        assert len(result.yearly) == 5
        assert result.final is result.yearly[-1]
        assert result.initial_investment == Decimal("-103500")
        for record in result.yearly:
            assert record.loan_balance == 0
            assert record.debt_service == 0
