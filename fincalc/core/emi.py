"""EMI and step-up EMI calculation logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List

from fincalc.core.rates import (
    monthly_rate,
    standard_emi,
    step_up_factor,
    stepped_amount,
    tenure_months,
    to_currency,
)
from fincalc.core.simulation import amortize, leftover_balance
from fincalc.schemas.emi import (
    EmiInput,
    EmiResult,
    EmiYearRow,
    StepUpEmiInput,
    StepUpEmiResult,
    StepUpEmiYearRow,
)

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1.0
DEFAULT_MAX_ITERATIONS = 100


def calculate_emi(request: EmiInput) -> EmiResult:
    """Fixed-installment amortization with a yearly repayment schedule."""
    rate = monthly_rate(request.interest_rate)
    months = tenure_months(request.tenure_years)
    emi = standard_emi(request.loan_amount, rate, months)

    years = amortize(request.loan_amount, rate, request.tenure_years, lambda _year: emi)

    total_payment = emi * months
    # nothing is repaid without a tenure, so there is no interest either
    total_interest = total_payment - request.loan_amount if total_payment else 0.0

    logger.debug("EMI for %s at %s%% over %s months: %.2f", request.loan_amount, request.interest_rate, months, emi)
    return EmiResult(
        emi=to_currency(emi),
        loan_amount=to_currency(request.loan_amount),
        total_interest=to_currency(total_interest),
        total_payment=to_currency(total_payment),
        yearly_breakdown=[
            EmiYearRow(
                year=row.year,
                emi_paid=to_currency(row.paid),
                principal_paid=to_currency(row.principal),
                interest_paid=to_currency(row.interest),
                outstanding_balance=to_currency(row.closing_balance),
            )
            for row in years
        ],
    )


# -----------------------------
# Step-up EMI
# -----------------------------


@dataclass
class InstallmentSolution:
    installment: float
    converged: bool
    iterations: int
    residual: float


def solve_initial_installment(
    principal: float,
    rate: float,
    years: int,
    step_up_percent: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> InstallmentSolution:
    """
    Find the first-year installment that clears `principal` in exactly `years`
    when the installment rises by `step_up_percent` every year.

    The leftover balance is linear and decreasing in the installment, so it is
    bracketed between zero (nothing repaid) and the flat EMI (which overpays
    whenever the installment steps up) and bisected until the leftover is
    within `tolerance`. When the cap is reached first, the candidate with the
    smallest leftover is returned with converged=False.
    """
    months = tenure_months(years)
    if months == 0 or principal == 0:
        return InstallmentSolution(installment=0.0, converged=True, iterations=0, residual=0.0)

    if rate == 0:
        factor = step_up_factor(step_up_percent)
        weight = sum(12 * factor**year for year in range(years))
        return InstallmentSolution(installment=principal / weight, converged=True, iterations=0, residual=0.0)

    def residual_for(installment: float) -> float:
        return leftover_balance(principal, rate, years, partial(stepped_amount, installment, step_up_percent))

    low = 0.0
    high = standard_emi(principal, rate, months)
    best = InstallmentSolution(installment=high, converged=False, iterations=0, residual=residual_for(high))
    if step_up_percent == 0 or abs(best.residual) < tolerance:
        best.converged = True
        return best

    for iteration in range(1, max_iterations + 1):
        candidate = (low + high) / 2
        residual = residual_for(candidate)
        if abs(residual) < abs(best.residual):
            best = InstallmentSolution(installment=candidate, converged=False, iterations=iteration, residual=residual)
        if abs(residual) < tolerance:
            best.converged = True
            logger.debug("Step-up EMI solved in %s iterations: %.4f (leftover %.6f)", iteration, candidate, residual)
            return best
        if residual > 0:
            low = candidate
        else:
            high = candidate

    best.iterations = max_iterations
    logger.warning(
        "Step-up EMI solver stopped after %s iterations with leftover %.4f (tolerance %s)",
        max_iterations,
        best.residual,
        tolerance,
    )
    return best


def calculate_step_up_emi(
    request: StepUpEmiInput,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> StepUpEmiResult:
    """
    Loan repaid with an installment that rises every year and still closes within the tenure.

    Steps:
      1) solve for the first-year installment (see solve_initial_installment)
      2) re-run the schedule with that installment, stepping it up at the first
         month of every year after year 1 and stopping once the loan is repaid
    """
    rate = monthly_rate(request.interest_rate)
    solution = solve_initial_installment(
        request.loan_amount,
        rate,
        request.tenure_years,
        request.annual_step_up,
        tolerance=tolerance,
        max_iterations=max_iterations,
    )

    installment_for_year: Callable[[int], float] = partial(stepped_amount, solution.installment, request.annual_step_up)
    years = amortize(request.loan_amount, rate, request.tenure_years, installment_for_year, stop_at_payoff=True)

    total_payment = sum(row.paid for row in years)
    total_interest = sum(row.interest for row in years)

    rows: List[StepUpEmiYearRow] = [
        StepUpEmiYearRow(
            year=row.year,
            monthly_emi=to_currency(row.installment),
            emi_paid=to_currency(row.paid),
            principal_paid=to_currency(row.principal),
            interest_paid=to_currency(row.interest),
            outstanding_balance=to_currency(row.closing_balance),
        )
        for row in years
    ]

    return StepUpEmiResult(
        first_month_emi=to_currency(solution.installment),
        loan_amount=to_currency(request.loan_amount),
        total_interest=to_currency(total_interest),
        total_payment=to_currency(total_payment),
        converged=solution.converged,
        iterations=solution.iterations,
        residual_balance=solution.residual,
        yearly_breakdown=rows,
    )
