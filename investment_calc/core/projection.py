"""Month-by-month compound projection with fixed monthly contributions."""

from __future__ import annotations

from investment_calc.core.errors import InvalidHorizon

MONTHS_PER_YEAR = 12


def monthly_rate(annual_yield_percent: float) -> float:
    """Nominal annual yield in percent -> simple monthly rate as a decimal."""
    return annual_yield_percent / 100 / MONTHS_PER_YEAR


def compound_months(
    balance: float,
    months: int,
    monthly_contribution: float,
    annual_yield_percent: float,
) -> float:
    """Advance ``balance`` by ``months`` steps.

    Each month the contribution is added first, then the month's interest
    accrues on balance + contribution.
    """
    rate = monthly_rate(annual_yield_percent)
    for _ in range(months):
        balance = (balance + monthly_contribution) * (1 + rate)
    return balance


def project_balance(
    months: int,
    monthly_contribution: float,
    starting_balance: float,
    annual_yield_percent: float,
) -> float:
    """
    Balance after ``months`` months of contributions.

    Projections are anchored on the first year:
      1) Up to 12 months: compound from ``starting_balance``.
      2) Beyond 12 months: project the first year, then keep compounding the
         remaining months from that balance.

    The result equals a straight 1..months iteration; the split keeps every
    projection anchored on the same first-year balance that the yearly
    breakdown starts from. ``months == 0`` returns ``starting_balance``.
    """
    if isinstance(months, bool) or not isinstance(months, int) or months < 0:
        raise InvalidHorizon(months, "month count must be an integer >= 0")

    if months <= MONTHS_PER_YEAR:
        return compound_months(
            float(starting_balance), months, monthly_contribution, annual_yield_percent
        )

    first_year = project_balance(
        MONTHS_PER_YEAR, monthly_contribution, starting_balance, annual_yield_percent
    )
    return compound_months(
        first_year,
        months - MONTHS_PER_YEAR,
        monthly_contribution,
        annual_yield_percent,
    )
