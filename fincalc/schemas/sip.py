"""Data contracts for SIP and step-up SIP calculations."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from fincalc.schemas.common import (
    CalculationInput,
    CalculationResult,
    amount_field,
    rate_field,
    step_up_field,
    years_field,
)


class SipInput(CalculationInput):
    """Inputs for a fixed monthly investment plan."""

    monthly_investment: float = amount_field("Amount invested every month.")
    expected_return: float = rate_field("Expected annual return in percent (e.g. 12 for 12%).")
    years: int = years_field("Investment horizon in whole years.")


class StepUpSipInput(SipInput):
    """Inputs for a monthly investment that grows every year."""

    annual_step_up: float = step_up_field()


class SipYearRow(BaseModel):
    """Single row of a SIP schedule."""

    year: int = Field(..., ge=1)
    investment: int
    total_invested: int
    interest_earned: int
    year_end_value: int


class SipResult(CalculationResult):
    total_investment: int
    estimated_returns: int
    future_value: int
    yearly_breakdown: List[SipYearRow]
