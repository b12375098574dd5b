from __future__ import annotations

import math
from math import isclose

import pytest
from pydantic import ValidationError

from investment_calc.core.currency import CurrencyConverter
from investment_calc.core.errors import InvalidCurrency, InvalidHorizon
from investment_calc.core.facade import ProjectionInput, run_projection


def make_input(**overrides) -> ProjectionInput:
    values = dict(
        monthly_contribution=2500.0,
        starting_balance=0.0,
        annual_yield_percent=2.5,
        horizon_years=3,
        currency="BGN",
    )
    values.update(overrides)
    return ProjectionInput(**values)


def test_one_year_in_pivot_currency_matches_reference():
    balance = 0.0
    for _ in range(12):
        balance = (balance + 2500) * (1 + 0.025 / 12)

    result = run_projection(make_input(horizon_years=1))

    assert isclose(result.total_savings, balance, abs_tol=1e-6)
    assert isclose(result.yearly_breakdown[0].end_balance, balance, abs_tol=1e-6)


def test_three_years_in_pivot_currency():
    result = run_projection(make_input())

    assert len(result.yearly_breakdown) == 3
    assert all(row.contribution == pytest.approx(30000.0) for row in result.yearly_breakdown)
    assert all(row.total_return > 0 for row in result.yearly_breakdown)
    assert result.total_savings == pytest.approx(result.yearly_breakdown[-1].end_balance)


def test_earnings_derive_from_total_savings():
    result = run_projection(make_input(horizon_years=5, starting_balance=1000.0))

    assert result.daily_earnings == pytest.approx(result.total_savings * 0.025 / 365)
    assert result.monthly_earnings == pytest.approx(result.total_savings * 0.025 / 12)
    assert result.yearly_earnings == pytest.approx(result.total_savings * 0.025)


@pytest.mark.parametrize("years", [1, 3, 30])
def test_zero_yield_total_is_plain_sum(years):
    result = run_projection(
        make_input(annual_yield_percent=0.0, starting_balance=700.0, horizon_years=years)
    )
    assert result.total_savings == pytest.approx(700.0 + 2500.0 * years * 12)


def test_display_currency_scales_amounts_not_ratios():
    converter = CurrencyConverter()
    in_bgn = run_projection(make_input(currency="BGN"), converter)
    in_usd = run_projection(
        make_input(
            currency="USD",
            monthly_contribution=converter.convert(2500.0, "BGN", "USD"),
        ),
        converter,
    )

    assert in_usd.currency == "USD"
    assert in_usd.total_savings == pytest.approx(in_bgn.total_savings * 0.55)
    for usd_row, bgn_row in zip(in_usd.yearly_breakdown, in_bgn.yearly_breakdown):
        assert usd_row.end_balance == pytest.approx(bgn_row.end_balance * 0.55)
        assert usd_row.contribution == pytest.approx(bgn_row.contribution * 0.55)
        assert usd_row.total_return == pytest.approx(bgn_row.total_return)


def test_same_inputs_in_any_currency_give_same_return_rates():
    in_eur = run_projection(make_input(currency="EUR"))
    in_bgn = run_projection(make_input(currency="BGN"))

    assert in_eur.total_savings == pytest.approx(in_bgn.total_savings)
    assert [row.total_return for row in in_eur.yearly_breakdown] == pytest.approx(
        [row.total_return for row in in_bgn.yearly_breakdown]
    )


def test_mock_rates(mock_converter):
    result = run_projection(make_input(currency="XAA", monthly_contribution=200.0), mock_converter)

    # 200 XAA = 100 pivot units a month
    assert result.yearly_breakdown[0].contribution == pytest.approx(2400.0)


def test_period_summaries():
    result = run_projection(make_input())
    summaries = {row.period: row for row in result.period_summaries()}

    assert set(summaries) == {"daily", "monthly", "yearly"}
    assert summaries["yearly"].return_rate == pytest.approx(2.5)
    assert summaries["monthly"].return_rate == pytest.approx(2.5 / 12)
    assert summaries["daily"].return_rate == pytest.approx(2.5 / 365)


def test_period_summaries_with_nothing_invested():
    result = run_projection(make_input(monthly_contribution=0.0))

    assert result.total_savings == 0.0
    assert all(math.isnan(row.return_rate) for row in result.period_summaries())


def test_unknown_currency():
    with pytest.raises(InvalidCurrency):
        run_projection(make_input(currency="GBP"))


@pytest.mark.parametrize("years", [0, -1, 2.5, True, "3", None])
def test_invalid_horizon(years):
    with pytest.raises(InvalidHorizon):
        run_projection(make_input(horizon_years=years))


def test_negative_amounts_rejected():
    with pytest.raises(ValidationError):
        make_input(monthly_contribution=-1.0)
    with pytest.raises(ValidationError):
        make_input(starting_balance=-0.01)


def test_monotonic_in_yield():
    totals = [
        run_projection(make_input(annual_yield_percent=apy, horizon_years=10)).total_savings
        for apy in (-20.0, -2.0, 0.0, 1.0, 2.5, 8.0, 25.0)
    ]
    assert all(lower < higher for lower, higher in zip(totals, totals[1:]))
