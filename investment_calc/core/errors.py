"""Exceptions raised by the calculation engine."""

from __future__ import annotations

import math


class CalculatorError(ValueError):
    """Base class for every error the engine raises."""


class InvalidCurrency(CalculatorError):
    def __init__(self, code: object):
        super().__init__(f"unknown currency code: {code!r}")
        self.code = code


class InvalidHorizon(CalculatorError):
    def __init__(self, value: object, message: str = "horizon must be an integer >= 1"):
        super().__init__(f"{message} (got {value!r})")
        self.value = value


class NonFiniteResult(CalculatorError):
    def __init__(self, field: str, value: float):
        super().__init__(f"{field} is not a finite number ({value!r}); inputs are out of range")
        self.field = field
        self.value = value


def ensure_finite(field: str, value: float) -> float:
    if not math.isfinite(value):
        raise NonFiniteResult(field, value)
    return value
