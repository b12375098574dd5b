"""Year-by-year snapshots of a projection."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict

from investment_calc.core.earnings import percent_of
from investment_calc.core.errors import InvalidHorizon
from investment_calc.core.projection import (
    MONTHS_PER_YEAR,
    compound_months,
    project_balance,
)


class BreakdownMode(str, Enum):
    RECOMPUTE = "recompute"
    INCREMENTAL = "incremental"


class YearRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    start_balance: float
    contribution: float
    interest: float
    end_balance: float
    # interest / (start_balance + contribution) * 100; non-finite when that base is 0
    total_return: float


def validate_horizon(horizon_years: object) -> int:
    if isinstance(horizon_years, bool) or not isinstance(horizon_years, int) or horizon_years < 1:
        raise InvalidHorizon(horizon_years)
    return horizon_years


def yearly_breakdown(
    monthly_contribution: float,
    starting_balance: float,
    horizon_years: int,
    annual_yield_percent: float,
    mode: BreakdownMode = BreakdownMode.RECOMPUTE,
) -> List[YearRow]:
    """
    Build one row per year, 1..horizon_years.

    Year 1 starts at ``starting_balance``; every later year starts at the
    previous year's end balance.

    RECOMPUTE (default) derives each year's end balance from month 0 with
    ``project_balance(year * 12, ...)``, so rounding error never carries over
    from one row into the next. Total work grows with horizon_years squared.

    INCREMENTAL compounds 12 more months onto the previous end balance. It is
    linear in horizon_years. With the current monthly step both modes run the
    same float operations and give identical rows; they only diverge if the
    step rule changes.
    """
    horizon_years = validate_horizon(horizon_years)
    mode = BreakdownMode(mode)
    yearly_contribution = monthly_contribution * MONTHS_PER_YEAR

    rows: List[YearRow] = []
    year_end = float(starting_balance)
    for year in range(1, horizon_years + 1):
        year_start = year_end
        if mode is BreakdownMode.INCREMENTAL and year > 1:
            year_end = compound_months(
                year_start, MONTHS_PER_YEAR, monthly_contribution, annual_yield_percent
            )
        else:
            year_end = project_balance(
                year * MONTHS_PER_YEAR,
                monthly_contribution,
                starting_balance,
                annual_yield_percent,
            )

        interest = year_end - year_start - yearly_contribution
        rows.append(
            YearRow(
                year=year,
                start_balance=year_start,
                contribution=yearly_contribution,
                interest=interest,
                end_balance=year_end,
                total_return=percent_of(interest, year_start + yearly_contribution),
            )
        )

    return rows
