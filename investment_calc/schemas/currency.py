"""Data contracts for currency listing and conversion."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CurrencyInfo(BaseModel):
    code: str
    symbol: str
    rate: float = Field(..., gt=0, description="Units of this currency per pivot unit.")


class CurrencyListResponse(BaseModel):
    pivot: str
    currencies: List[CurrencyInfo]


class ConversionRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    amount: float
    from_currency: str = Field(..., min_length=1)
    to_currency: str = Field(..., min_length=1)


class ConversionResponse(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    amount: float
    currency: str
    symbol: str
