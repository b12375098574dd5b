"""Data contracts for the projection endpoint."""

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investment_calc.core.errors import ensure_finite
from investment_calc.core.facade import ProjectionInput, ProjectionResult


def finite_or_none(value: float) -> Optional[float]:
    """Ratios with a zero base come back non-finite; the API shows them as null."""
    return value if math.isfinite(value) else None


class ProjectionRequest(BaseModel):
    """Form inputs; defaults match the calculator's initial state."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    monthly_contribution: float = Field(2500.0, ge=0, description="Amount invested every month.")
    starting_balance: float = Field(0.0, ge=0, description="Balance before the first month.")
    annual_yield_percent: float = Field(
        2.5,
        description="Annual percentage yield, e.g. 2.5 for 2.5%. May be zero or negative.",
    )
    horizon_years: int = Field(3, ge=1, description="Investment period in whole years.")
    currency: str = Field("BGN", min_length=1)

    def to_input(self, max_horizon_years: int) -> ProjectionInput:
        return ProjectionInput(
            monthly_contribution=self.monthly_contribution,
            starting_balance=self.starting_balance,
            annual_yield_percent=self.annual_yield_percent,
            horizon_years=min(self.horizon_years, max_horizon_years),
            currency=self.currency,
        )


class PeriodSummaryOut(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    period: str
    total_savings: float
    earnings: float
    return_rate: Optional[float]


class YearRowOut(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    year: int = Field(..., ge=1)
    start_balance: float
    contribution: float
    interest: float
    end_balance: float
    total_return: Optional[float]


class ProjectionResponse(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    currency: str
    symbol: str
    total_savings: float
    daily_earnings: float
    monthly_earnings: float
    yearly_earnings: float
    summary: List[PeriodSummaryOut]
    yearly_breakdown: List[YearRowOut]

    @classmethod
    def from_result(cls, result: ProjectionResult, symbol: str) -> "ProjectionResponse":
        """Money values that overflowed raise NonFiniteResult; ratios become null."""
        return cls(
            currency=result.currency,
            symbol=symbol,
            total_savings=ensure_finite("total_savings", result.total_savings),
            daily_earnings=ensure_finite("daily_earnings", result.daily_earnings),
            monthly_earnings=ensure_finite("monthly_earnings", result.monthly_earnings),
            yearly_earnings=ensure_finite("yearly_earnings", result.yearly_earnings),
            summary=[
                PeriodSummaryOut(
                    period=row.period,
                    total_savings=ensure_finite("total_savings", row.total_savings),
                    earnings=ensure_finite(f"{row.period}_earnings", row.earnings),
                    return_rate=finite_or_none(row.return_rate),
                )
                for row in result.period_summaries()
            ],
            yearly_breakdown=[
                YearRowOut(
                    year=row.year,
                    start_balance=ensure_finite(f"year {row.year} start_balance", row.start_balance),
                    contribution=ensure_finite(f"year {row.year} contribution", row.contribution),
                    interest=ensure_finite(f"year {row.year} interest", row.interest),
                    end_balance=ensure_finite(f"year {row.year} end_balance", row.end_balance),
                    total_return=finite_or_none(row.total_return),
                )
                for row in result.yearly_breakdown
            ],
        )
