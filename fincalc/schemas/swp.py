"""Data contracts for systematic withdrawal plans (flat and step-up)."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from fincalc.schemas.common import (
    CalculationInput,
    CalculationResult,
    amount_field,
    rate_field,
    step_up_field,
    years_field,
)


class SwpInput(CalculationInput):
    total_investment: float = amount_field("Corpus invested at the start.")
    monthly_withdrawal: float = amount_field("Amount withdrawn every month.")
    expected_return: float = rate_field("Expected annual return on the remaining corpus, in percent.")
    years: int = years_field("Withdrawal horizon in whole years.")


class StepUpSwpInput(SwpInput):
    annual_step_up: float = step_up_field()


class SwpYearRow(BaseModel):
    year: int = Field(..., ge=1)
    withdrawal: int
    total_withdrawn: int
    balance_start: int
    balance_end: int = Field(..., ge=0)


class SwpResult(CalculationResult):
    """
    Withdrawal outcome.

    `depletion_month` is the 1-based month in which the corpus ran out, or
    None when it lasted the whole horizon. `remaining_balance` is not capped
    and can exceed `initial_investment` when returns outpace withdrawals.
    """

    initial_investment: int
    total_withdrawal: int
    remaining_balance: int
    yearly_breakdown: List[SwpYearRow]
    depletion_month: Optional[int] = None

    @property
    def depleted(self) -> bool:
        return self.depletion_month is not None
