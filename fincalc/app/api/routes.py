"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from http import HTTPStatus
from typing import Any, Callable, Dict, Mapping, Type

from flask import Blueprint, abort, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from fincalc.core.catalog import CALCULATORS
from fincalc.core.emi import calculate_emi, calculate_step_up_emi
from fincalc.core.income_tax import calculate_income_tax
from fincalc.core.lumpsum import calculate_lumpsum
from fincalc.core.sip import calculate_sip, calculate_step_up_sip
from fincalc.core.summary import (
    summarize_growth,
    summarize_income_tax,
    summarize_loan,
    summarize_withdrawal,
)
from fincalc.core.swp import calculate_step_up_swp, calculate_swp
from fincalc.schemas.common import CalculationInput, PingResponse, SplitSummary
from fincalc.schemas.emi import EmiInput, StepUpEmiInput
from fincalc.schemas.income_tax import IncomeTaxInput
from fincalc.schemas.lumpsum import LumpsumInput
from fincalc.schemas.sip import SipInput, StepUpSipInput
from fincalc.schemas.swp import StepUpSwpInput, SwpInput

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _no_options(_config: Mapping[str, Any]) -> Dict[str, Any]:
    return {}


def _solver_options(config: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "tolerance": float(config["STEP_UP_EMI_TOLERANCE"]),
        "max_iterations": int(config["STEP_UP_EMI_MAX_ITERATIONS"]),
    }


@dataclass(frozen=True)
class Calculation:
    """How one calculator is served: its input contract, engine and summary."""

    input_model: Type[CalculationInput]
    engine: Callable[..., BaseModel]
    summarize: Callable[[Any], SplitSummary]
    options: Callable[[Mapping[str, Any]], Dict[str, Any]] = field(default=_no_options)


CALCULATIONS: Dict[str, Calculation] = {
    "sip": Calculation(SipInput, calculate_sip, summarize_growth),
    "step-up-sip": Calculation(StepUpSipInput, calculate_step_up_sip, summarize_growth),
    "lumpsum": Calculation(LumpsumInput, calculate_lumpsum, summarize_growth),
    "emi": Calculation(EmiInput, calculate_emi, summarize_loan),
    "step-up-emi": Calculation(StepUpEmiInput, calculate_step_up_emi, summarize_loan, _solver_options),
    "swp": Calculation(SwpInput, calculate_swp, summarize_withdrawal),
    "step-up-swp": Calculation(StepUpSwpInput, calculate_step_up_swp, summarize_withdrawal),
    "income-tax": Calculation(IncomeTaxInput, calculate_income_tax, summarize_income_tax),
}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Malformed or non-JSON bodies."""
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/calculators")
def calculators() -> Any:
    """List the calculators this service can run."""
    return jsonify([calculator.model_dump() for calculator in CALCULATORS])


@api_bp.post("/calc/<slug>")
def calculate(slug: str) -> Any:
    """Run one calculator on the posted inputs and return its result with a display summary."""
    calculation = CALCULATIONS.get(slug)
    if calculation is None:
        abort(HTTPStatus.NOT_FOUND)

    raw_payload = request.get_json(force=True, silent=False)
    payload = calculation.input_model.model_validate(raw_payload)

    engine = partial(calculation.engine, **calculation.options(current_app.config))
    result = engine(payload)
    logger.info("calculated %s", slug)

    return jsonify(
        {
            "result": result.model_dump(),
            "summary": calculation.summarize(result).model_dump(),
        }
    )
