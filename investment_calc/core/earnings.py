"""Point-in-time earnings estimates derived from a projected principal."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from investment_calc.core.projection import MONTHS_PER_YEAR

DAYS_PER_YEAR = 365


class Earnings(BaseModel):
    """Simple (non-compounding) earnings on a principal, one figure per period."""

    model_config = ConfigDict(frozen=True)

    daily: float
    monthly: float
    yearly: float


def daily_earnings(principal: float, annual_yield_percent: float) -> float:
    return principal * (annual_yield_percent / 100 / DAYS_PER_YEAR)


def monthly_earnings(principal: float, annual_yield_percent: float) -> float:
    return principal * (annual_yield_percent / 100 / MONTHS_PER_YEAR)


def yearly_earnings(principal: float, annual_yield_percent: float) -> float:
    return principal * (annual_yield_percent / 100)


def derive_earnings(principal: float, annual_yield_percent: float) -> Earnings:
    return Earnings(
        daily=daily_earnings(principal, annual_yield_percent),
        monthly=monthly_earnings(principal, annual_yield_percent),
        yearly=yearly_earnings(principal, annual_yield_percent),
    )


def percent_of(part: float, whole: float) -> float:
    """
    ``part / whole * 100``.

    A zero ``whole`` gives a non-finite result instead of raising: ``nan``
    for 0/0 and a signed infinity otherwise. Callers render it as "N/A".
    """
    if whole == 0:
        if part == 0 or math.isnan(part):
            return math.nan
        return math.copysign(math.inf, part) * math.copysign(1.0, whole)
    return part / whole * 100
