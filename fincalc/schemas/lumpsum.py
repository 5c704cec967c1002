"""Data contracts for one-time (lumpsum) investments."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from fincalc.schemas.common import CalculationInput, CalculationResult, amount_field, rate_field, years_field


class LumpsumInput(CalculationInput):
    total_investment: float = amount_field("One-time amount invested at the start.")
    expected_return: float = rate_field("Expected annual return in percent, compounded yearly.")
    years: int = years_field("Investment horizon in whole years.")


class LumpsumYearRow(BaseModel):
    year: int = Field(..., ge=1)
    year_start_value: int
    interest_earned: int
    year_end_value: int


class LumpsumResult(CalculationResult):
    total_investment: int
    estimated_returns: int
    future_value: int
    yearly_breakdown: List[LumpsumYearRow]
