"""Two-part split summaries shown next to each calculator's headline numbers."""

from __future__ import annotations

from typing import Union

from fincalc.core.formatting import format_compact_inr, format_inr, format_months, format_ratio
from fincalc.schemas.common import SplitSummary
from fincalc.schemas.emi import EmiResult, StepUpEmiResult
from fincalc.schemas.income_tax import IncomeTaxResult
from fincalc.schemas.lumpsum import LumpsumResult
from fincalc.schemas.sip import SipResult
from fincalc.schemas.swp import SwpResult


def _share(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def summarize_growth(result: Union[SipResult, LumpsumResult]) -> SplitSummary:
    """Invested vs returns, as shares of the future value."""
    ratio = result.estimated_returns / result.total_investment if result.total_investment > 0 else 0.0
    return SplitSummary(
        left_label="Invested",
        left_percentage=_share(result.total_investment, result.future_value),
        right_label="Returns",
        right_percentage=_share(result.estimated_returns, result.future_value),
        caption=format_ratio(ratio, "Returns"),
        headline=format_inr(result.future_value),
        headline_short=format_compact_inr(result.future_value),
    )


def summarize_loan(result: Union[EmiResult, StepUpEmiResult]) -> SplitSummary:
    """Principal vs interest, as shares of the total payment."""
    installment = result.first_month_emi if isinstance(result, StepUpEmiResult) else result.emi
    interest_share = _share(result.total_interest, result.total_payment)
    summary = SplitSummary(
        left_label="Principal",
        left_percentage=_share(result.loan_amount, result.total_payment),
        right_label="Interest",
        right_percentage=interest_share,
        caption=f"{interest_share:.1f}% Interest",
        headline=format_inr(installment),
        headline_short=format_compact_inr(installment),
    )
    if isinstance(result, StepUpEmiResult) and not result.converged:
        summary.notes.append(
            f"Installment solver did not fully converge; about {format_inr(result.residual_balance)} may remain outstanding."
        )
    return summary


def summarize_withdrawal(result: SwpResult) -> SplitSummary:
    """Withdrawn vs remaining, as shares of the initial corpus (the remainder may exceed 100%)."""
    remaining_share = _share(result.remaining_balance, result.initial_investment)
    summary = SplitSummary(
        left_label="Withdrawn",
        left_percentage=_share(result.total_withdrawal, result.initial_investment),
        right_label="Remaining",
        right_percentage=remaining_share,
        caption=format_ratio(remaining_share / 100, "Remaining"),
        headline=format_inr(result.remaining_balance),
        headline_short=format_compact_inr(result.remaining_balance),
    )
    if result.depletion_month is not None:
        summary.notes.append(f"Fund depleted after {format_months(result.depletion_month)}")
    return summary


def summarize_income_tax(result: IncomeTaxResult) -> SplitSummary:
    """Tax vs net income, as shares of the gross income."""
    return SplitSummary(
        left_label="Tax",
        left_percentage=_share(result.total_tax, result.gross_income),
        right_label="Net Income",
        right_percentage=_share(result.net_income, result.gross_income),
        caption=f"{result.effective_tax_rate:.1f}% Tax Rate",
        headline=format_inr(result.total_tax),
        headline_short=format_compact_inr(result.total_tax),
    )
