"""Lumpsum (one-time investment) calculation logic."""

from __future__ import annotations

import logging
from typing import List

from fincalc.core.rates import to_currency
from fincalc.schemas.lumpsum import LumpsumInput, LumpsumResult, LumpsumYearRow

logger = logging.getLogger(__name__)


def calculate_lumpsum(request: LumpsumInput) -> LumpsumResult:
    """Compound a single investment once per year: FV = P * (1 + r/100) ** years."""
    annual_rate = request.expected_return / 100

    rows: List[LumpsumYearRow] = []
    value = float(request.total_investment)
    for year in range(1, request.years + 1):
        start = value
        interest = start * annual_rate
        value = start * (1 + annual_rate)
        rows.append(
            LumpsumYearRow(
                year=year,
                year_start_value=to_currency(start),
                interest_earned=to_currency(interest),
                year_end_value=to_currency(value),
            )
        )

    future_value = request.total_investment * (1 + annual_rate) ** request.years
    logger.debug(
        "Lumpsum %s at %s%% for %s years -> %.2f",
        request.total_investment,
        request.expected_return,
        request.years,
        future_value,
    )

    return LumpsumResult(
        total_investment=to_currency(request.total_investment),
        estimated_returns=to_currency(future_value - request.total_investment),
        future_value=to_currency(future_value),
        yearly_breakdown=rows,
    )
