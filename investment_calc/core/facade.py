"""Runs a full projection in the pivot currency and reports it in the caller's."""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from investment_calc.core.breakdown import (
    BreakdownMode,
    YearRow,
    validate_horizon,
    yearly_breakdown,
)
from investment_calc.core.currency import CurrencyConverter
from investment_calc.core.earnings import derive_earnings, percent_of
from investment_calc.core.projection import MONTHS_PER_YEAR, project_balance

logger = logging.getLogger(__name__)


class ProjectionInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    monthly_contribution: float = Field(ge=0)
    starting_balance: float = Field(ge=0)
    annual_yield_percent: float
    # not coerced; run_projection raises InvalidHorizon for anything but an int >= 1
    horizon_years: SkipValidation[int]
    currency: str


class PeriodSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: Literal["daily", "monthly", "yearly"]
    total_savings: float
    earnings: float
    return_rate: float


class ProjectionResult(BaseModel):
    """All monetary fields are in ``currency``."""

    model_config = ConfigDict(frozen=True)

    currency: str
    total_savings: float
    daily_earnings: float
    monthly_earnings: float
    yearly_earnings: float
    yearly_breakdown: List[YearRow]

    def period_summaries(self) -> List[PeriodSummary]:
        return [
            PeriodSummary(
                period=period,
                total_savings=self.total_savings,
                earnings=earnings,
                return_rate=percent_of(earnings, self.total_savings),
            )
            for period, earnings in (
                ("daily", self.daily_earnings),
                ("monthly", self.monthly_earnings),
                ("yearly", self.yearly_earnings),
            )
        ]


def run_projection(
    request: ProjectionInput,
    converter: Optional[CurrencyConverter] = None,
    mode: BreakdownMode = BreakdownMode.RECOMPUTE,
) -> ProjectionResult:
    """
    Order of operations:
      1) Convert contribution and starting balance into the pivot currency.
      2) Project total savings over horizon_years * 12 months.
      3) Derive daily/monthly/yearly earnings from the total.
      4) Build the yearly breakdown from the same pivot inputs.
      5) Convert every amount back; total_return ratios are left as is.
    """
    horizon_years = validate_horizon(request.horizon_years)
    converter = converter or CurrencyConverter()
    currency = request.currency

    contribution = converter.to_pivot(request.monthly_contribution, currency)
    starting = converter.to_pivot(request.starting_balance, currency)

    breakdown = yearly_breakdown(
        contribution,
        starting,
        horizon_years,
        request.annual_yield_percent,
        mode=mode,
    )
    total_savings = project_balance(
        horizon_years * MONTHS_PER_YEAR,
        contribution,
        starting,
        request.annual_yield_percent,
    )
    earnings = derive_earnings(total_savings, request.annual_yield_percent)

    logger.debug(
        "projection %s: %d years at %s%% -> %.2f %s",
        currency,
        horizon_years,
        request.annual_yield_percent,
        total_savings,
        converter.pivot,
    )

    def back(amount: float) -> float:
        return converter.from_pivot(amount, currency)

    return ProjectionResult(
        currency=currency,
        total_savings=back(total_savings),
        daily_earnings=back(earnings.daily),
        monthly_earnings=back(earnings.monthly),
        yearly_earnings=back(earnings.yearly),
        yearly_breakdown=[
            YearRow(
                year=row.year,
                start_balance=back(row.start_balance),
                contribution=back(row.contribution),
                interest=back(row.interest),
                end_balance=back(row.end_balance),
                total_return=row.total_return,
            )
            for row in breakdown
        ],
    )
