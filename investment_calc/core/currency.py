"""Currency table and conversion through a common pivot currency."""

from __future__ import annotations

import math
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, model_validator

from investment_calc.core.errors import InvalidCurrency


class CurrencyTable(BaseModel):
    """Static exchange-rate configuration.

    ``rates[code]`` is how many units of ``code`` one pivot unit buys
    (1 BGN = 0.55 USD), so the pivot's own rate is exactly 1.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pivot: str
    rates: Dict[str, float]
    symbols: Dict[str, str]

    @model_validator(mode="after")
    def ensure_validity(self) -> "CurrencyTable":
        errors: List[str] = []
        if self.rates.get(self.pivot) != 1:
            errors.append(f"pivot currency {self.pivot} must have a rate of exactly 1")
        for code, rate in self.rates.items():
            if not math.isfinite(rate) or rate <= 0:
                errors.append(f"rate for {code} must be a positive finite number")
            if code not in self.symbols:
                errors.append(f"missing symbol for {code}")
        if errors:
            raise ValueError("; ".join(errors))
        return self

    def codes(self) -> List[str]:
        return list(self.rates)


DEFAULT_CURRENCY_TABLE = CurrencyTable(
    pivot="BGN",
    rates={"BGN": 1.0, "USD": 0.55, "EUR": 0.51},
    symbols={"BGN": "BGN", "USD": "$", "EUR": "€"},
)


class CurrencyConverter:
    """Converts amounts between the currencies of one ``CurrencyTable``."""

    def __init__(self, table: CurrencyTable = DEFAULT_CURRENCY_TABLE):
        self.table = table

    @property
    def pivot(self) -> str:
        return self.table.pivot

    def currencies(self) -> List[str]:
        return self.table.codes()

    def rate(self, code: str) -> float:
        try:
            return self.table.rates[code]
        except (KeyError, TypeError):
            raise InvalidCurrency(code) from None

    def symbol(self, code: str) -> str:
        self.rate(code)
        return self.table.symbols[code]

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        # look up both rates so unknown codes fail even when from == to
        from_rate = self.rate(from_currency)
        to_rate = self.rate(to_currency)
        return amount / from_rate * to_rate

    def to_pivot(self, amount: float, code: str) -> float:
        return self.convert(amount, code, self.pivot)

    def from_pivot(self, amount: float, code: str) -> float:
        return self.convert(amount, self.pivot, code)
