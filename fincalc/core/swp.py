"""Systematic withdrawal plan (SWP) calculation logic."""

from __future__ import annotations

import logging
from functools import partial

from fincalc.core.rates import monthly_rate, stepped_amount, to_currency
from fincalc.core.simulation import AmountForYear, deplete
from fincalc.schemas.swp import StepUpSwpInput, SwpInput, SwpResult, SwpYearRow

logger = logging.getLogger(__name__)


def _run(corpus: float, annual_rate: float, years: int, withdrawal_for_year: AmountForYear) -> SwpResult:
    run = deplete(corpus, monthly_rate(annual_rate), years, withdrawal_for_year)

    if run.depletion_month is not None:
        logger.debug("Corpus %s depleted in month %s", corpus, run.depletion_month)

    return SwpResult(
        initial_investment=to_currency(corpus),
        total_withdrawal=to_currency(run.total_withdrawn),
        remaining_balance=to_currency(run.final_balance),
        depletion_month=run.depletion_month,
        yearly_breakdown=[
            SwpYearRow(
                year=row.year,
                withdrawal=to_currency(row.withdrawn),
                total_withdrawn=to_currency(row.total_withdrawn),
                balance_start=to_currency(row.opening_balance),
                balance_end=to_currency(row.closing_balance),
            )
            for row in run.rows
        ],
    )


def calculate_swp(request: SwpInput) -> SwpResult:
    """Fixed monthly withdrawals from a corpus growing at `expected_return` percent a year."""
    return _run(
        request.total_investment,
        request.expected_return,
        request.years,
        lambda _year: request.monthly_withdrawal,
    )


def calculate_step_up_swp(request: StepUpSwpInput) -> SwpResult:
    """Monthly withdrawal raised by `annual_step_up` percent before the first withdrawal of every year after year 1."""
    return _run(
        request.total_investment,
        request.expected_return,
        request.years,
        partial(stepped_amount, request.monthly_withdrawal, request.annual_step_up),
    )
