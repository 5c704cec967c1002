"""Rupee and duration formatting for calculator results."""

from __future__ import annotations

from fincalc.core.rates import MONTHS_PER_YEAR, to_currency

CRORE = 10_000_000
LAKH = 100_000


def group_indian(number: int) -> str:
    """Group digits the Indian way: 12,34,56,789."""
    digits = str(abs(number))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])
    return f"-{digits}" if number < 0 else digits


def format_inr(value: float) -> str:
    return f"₹ {group_indian(to_currency(value))}"


def format_compact_inr(value: float) -> str:
    """Short axis label: ₹1.2Cr, ₹45.0L or ₹12K."""
    if value >= CRORE:
        return f"₹{value / CRORE:.1f}Cr"
    if value >= LAKH:
        return f"₹{value / LAKH:.1f}L"
    return f"₹{value / 1000:.0f}K"


def format_months(months: int) -> str:
    years, rest = divmod(months, MONTHS_PER_YEAR)
    year_word = "year" if years == 1 else "years"
    month_word = "month" if rest == 1 else "months"
    return f"{years} {year_word} {rest} {month_word}"


def format_ratio(ratio: float, noun: str) -> str:
    """Caption for a ratio: below 1 as a percentage ("45.2% Returns"), otherwise as a multiple ("2.50x Returns")."""
    if ratio < 1:
        return f"{ratio * 100:.1f}% {noun}"
    return f"{ratio:.2f}x {noun}"
