"""Rate, period and rounding helpers shared by every calculator."""

from __future__ import annotations

import math

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage (e.g. 12 for 12%) into a monthly decimal rate."""
    return annual_rate_percent / 12 / 100


def tenure_months(years: int) -> int:
    return years * MONTHS_PER_YEAR


def step_up_factor(step_up_percent: float) -> float:
    return 1 + step_up_percent / 100


def stepped_amount(base: float, step_up_percent: float, year: int) -> float:
    """Amount paid in a given (1-indexed) year when `base` rises by step_up_percent every year after the first."""
    amount = base
    factor = step_up_factor(step_up_percent)
    for _ in range(1, year):
        amount *= factor
    return amount


def _compound_gain(rate: float, months: int) -> float:
    """(1 + rate) ** months - 1, kept accurate for rates too small to change 1 + rate."""
    return math.expm1(months * math.log1p(rate))


def standard_emi(principal: float, rate: float, months: int) -> float:
    """
    Fixed installment that amortizes `principal` over `months` at monthly `rate`.

    Zero tenure or zero principal gives a zero installment; a zero rate
    degenerates to an even split of the principal.
    """
    if months == 0 or principal == 0:
        return 0.0
    if rate == 0:
        return principal / months
    growth = (1 + rate) ** months
    return principal * rate * growth / _compound_gain(rate, months)


def sip_future_value(monthly_investment: float, rate: float, months: int) -> float:
    """Annuity-due future value of `months` equal monthly contributions."""
    if rate == 0:
        return monthly_investment * months
    return monthly_investment * (_compound_gain(rate, months) / rate) * (1 + rate)


def to_currency(value: float) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    if value < 0:
        return -int(-value + 0.5)
    return int(value + 0.5)
