"""SIP and step-up SIP calculation logic."""

from __future__ import annotations

import logging
from functools import partial
from typing import List

from fincalc.core.rates import (
    MONTHS_PER_YEAR,
    monthly_rate,
    sip_future_value,
    stepped_amount,
    tenure_months,
    to_currency,
)
from fincalc.core.simulation import accumulate
from fincalc.schemas.sip import SipInput, SipResult, SipYearRow, StepUpSipInput

logger = logging.getLogger(__name__)


def calculate_sip(request: SipInput) -> SipResult:
    """
    Future value of a fixed monthly investment (closed form, annuity due).

    Each yearly row re-evaluates the same closed form at 12 * year months, so
    the last row always matches the headline future value.
    """
    rate = monthly_rate(request.expected_return)
    months = tenure_months(request.years)
    amount = request.monthly_investment

    future_value = sip_future_value(amount, rate, months)
    total_investment = amount * months

    rows: List[SipYearRow] = []
    for year in range(1, request.years + 1):
        elapsed = tenure_months(year)
        value = sip_future_value(amount, rate, elapsed)
        invested = amount * elapsed
        rows.append(
            SipYearRow(
                year=year,
                investment=to_currency(amount * MONTHS_PER_YEAR),
                total_invested=to_currency(invested),
                interest_earned=to_currency(value - invested),
                year_end_value=to_currency(value),
            )
        )

    logger.debug("SIP %s/month for %s months -> %.2f", amount, months, future_value)
    return SipResult(
        total_investment=to_currency(total_investment),
        estimated_returns=to_currency(future_value - total_investment),
        future_value=to_currency(future_value),
        yearly_breakdown=rows,
    )


def calculate_step_up_sip(request: StepUpSipInput) -> SipResult:
    """
    Monthly investment raised by `annual_step_up` percent at the start of every year after the first.

    No closed form exists once the contribution changes, so the balance is
    simulated month by month.
    """
    rate = monthly_rate(request.expected_return)
    years = accumulate(
        rate,
        request.years,
        partial(stepped_amount, request.monthly_investment, request.annual_step_up),
    )

    future_value = years[-1].closing_balance if years else 0.0
    total_investment = years[-1].total_contributed if years else 0.0

    rows = [
        SipYearRow(
            year=row.year,
            investment=to_currency(row.contributed),
            total_invested=to_currency(row.total_contributed),
            interest_earned=to_currency(row.growth),
            year_end_value=to_currency(row.closing_balance),
        )
        for row in years
    ]

    logger.debug(
        "Step-up SIP %s/month +%s%%/year over %s years -> %.2f",
        request.monthly_investment,
        request.annual_step_up,
        request.years,
        future_value,
    )
    return SipResult(
        total_investment=to_currency(total_investment),
        estimated_returns=to_currency(future_value - total_investment),
        future_value=to_currency(future_value),
        yearly_breakdown=rows,
    )
