"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from investment_calc.core.currency import CurrencyConverter
from investment_calc.core.errors import CalculatorError, ensure_finite
from investment_calc.core.facade import run_projection
from investment_calc.core.ping import get_ping_message, get_service_version
from investment_calc.schemas.currency import (
    ConversionRequest,
    ConversionResponse,
    CurrencyInfo,
    CurrencyListResponse,
)
from investment_calc.schemas.ping import PingResponse
from investment_calc.schemas.projection import ProjectionRequest, ProjectionResponse

logger = logging.getLogger(__name__)

CONVERTER_EXTENSION = "investment_calc.converter"

api_bp = Blueprint("api", __name__)


def _converter() -> CurrencyConverter:
    return current_app.extensions[CONVERTER_EXTENSION]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload on %s: %d error(s)", request.path, exc.error_count())
    return (
        jsonify(
            {"detail": exc.errors(include_url=False, include_context=False, include_input=False)}
        ),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(CalculatorError)
def _handle_calculator_error(exc: CalculatorError):
    logger.warning("calculation failed on %s: %s", request.path, exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_service_version())
    return jsonify(response.model_dump())


@api_bp.get("/currencies")
def currencies() -> Any:
    """Supported currencies with their symbols and rates."""
    converter = _converter()
    response = CurrencyListResponse(
        pivot=converter.pivot,
        currencies=[
            CurrencyInfo(code=code, symbol=converter.symbol(code), rate=converter.rate(code))
            for code in converter.currencies()
        ],
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/convert")
def convert() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ConversionRequest.model_validate(raw_payload)
    converter = _converter()
    response = ConversionResponse(
        amount=ensure_finite(
            "amount",
            converter.convert(payload.amount, payload.from_currency, payload.to_currency),
        ),
        currency=payload.to_currency,
        symbol=converter.symbol(payload.to_currency),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Summary and yearly breakdown for one set of calculator inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    settings = current_app.config["SETTINGS"]
    converter = _converter()

    result = run_projection(payload.to_input(settings.max_horizon_years), converter)
    response = ProjectionResponse.from_result(result, converter.symbol(result.currency))
    return jsonify(response.model_dump())
