"""Data contracts for loan EMI and step-up EMI calculations."""

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


class EmiInput(CalculationInput):
    """Inputs required to amortize a loan with a fixed monthly installment."""

    loan_amount: float = amount_field("Principal borrowed.")
    interest_rate: float = rate_field("Annual interest rate in percent (e.g. 8.5 for 8.5%).")
    tenure_years: int = years_field("Loan tenure in whole years.")


class StepUpEmiInput(EmiInput):
    """Inputs for a loan whose installment rises every year but still closes within the tenure."""

    annual_step_up: float = step_up_field()


class EmiYearRow(BaseModel):
    """Twelve months of repayments, with the balance left at year end."""

    year: int = Field(..., ge=1)
    emi_paid: int
    principal_paid: int
    interest_paid: int
    outstanding_balance: int = Field(..., ge=0)


class StepUpEmiYearRow(EmiYearRow):
    # installment in force during this year
    monthly_emi: int


class EmiResult(CalculationResult):
    emi: int
    loan_amount: int
    total_interest: int
    total_payment: int
    yearly_breakdown: List[EmiYearRow]


class StepUpEmiResult(CalculationResult):
    """
    Step-up EMI outcome.

    `first_month_emi` is the installment solved for year 1. `converged` is
    False when the solver hit its iteration cap before the leftover balance
    fell within tolerance; `residual_balance` is that leftover.
    """

    first_month_emi: int
    loan_amount: int
    total_interest: int
    total_payment: int
    converged: bool
    iterations: int
    residual_balance: float
    yearly_breakdown: List[StepUpEmiYearRow]
