from decimal import Decimal

from roi_pro.engine.comparison import compare
from roi_pro.engine.projection import run_projection


class TestCompare:
    def test_snapshots(self, primary_config, rental_config):
        comparison = compare(primary_config, rental_config)
        rental = run_projection(rental_config)

        assert comparison.a.name == "Property A"
        assert comparison.b.name == "Rental"
        assert comparison.b.initial_investment == Decimal("103500")
        assert comparison.b.monthly_cash_flow == rental.yearly[0].cash_flow / 12
        assert comparison.b.cap_rate == rental.metrics.cap_rate
        assert comparison.b.final_equity == rental.final.equity
        assert comparison.b.total_roi == rental.total_roi

    def test_equity_curve_follows_first_scenario(self, primary_config, rental_config):
        comparison = compare(primary_config, rental_config)
        home = run_projection(primary_config)

        assert len(comparison.equity_curve) == 30
        assert [p.year for p in comparison.equity_curve] == list(range(1, 31))
        for point, record in zip(comparison.equity_curve, home.yearly):
            assert point.equity_a == record.equity

    def test_shorter_second_scenario_pads_with_zero(self, primary_config, rental_config):
        comparison = compare(primary_config, rental_config)
        rental = run_projection(rental_config)

        assert comparison.equity_curve[9].equity_b == rental.yearly[9].equity
        for point in comparison.equity_curve[10:]:
            assert point.equity_b == 0

    def test_longer_second_scenario_is_truncated(self, primary_config, rental_config):
        comparison = compare(rental_config, primary_config)
        assert len(comparison.equity_curve) == 10
        # B's final equity still reflects its own horizon
        assert comparison.b.final_equity == run_projection(primary_config).final.equity
