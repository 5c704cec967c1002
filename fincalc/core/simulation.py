"""
Month-by-month simulators shared by the calculators.

Each family walks the horizon one month at a time and groups the months into
1-indexed years. The amount moved each month (installment, contribution,
withdrawal) is looked up once per year through `amount_for_year`, which is how
flat and step-up variants share one loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from fincalc.core.rates import MONTHS_PER_YEAR

AmountForYear = Callable[[int], float]


# -----------------------------
# Loan amortization
# -----------------------------


@dataclass
class AmortizationYear:
    year: int
    installment: float
    paid: float
    principal: float
    interest: float
    closing_balance: float


def amortize(
    principal: float,
    rate: float,
    years: int,
    amount_for_year: AmountForYear,
    stop_at_payoff: bool = False,
) -> List[AmortizationYear]:
    """
    Repay `principal` at monthly `rate`, one installment per month.

    Order of operations (per month, only while a balance is outstanding):
      1) interest = balance * rate
      2) principal part = installment - interest
      3) the month that would push the balance below zero repays only what was
         outstanding; the overshoot is taken off both the principal part and
         the installment recorded for that month.
    """
    balance = float(principal)
    rows: List[AmortizationYear] = []

    for year in range(1, years + 1):
        installment = amount_for_year(year)
        paid = 0.0
        principal_paid = 0.0
        interest_paid = 0.0

        for _ in range(MONTHS_PER_YEAR):
            if balance <= 0:
                break
            interest = balance * rate
            principal_part = installment - interest
            payment = installment
            if principal_part > balance:
                overshoot = principal_part - balance
                principal_part -= overshoot
                payment -= overshoot

            balance -= principal_part
            paid += payment
            principal_paid += principal_part
            interest_paid += interest

        balance = max(balance, 0.0)
        rows.append(
            AmortizationYear(
                year=year,
                installment=installment,
                paid=paid,
                principal=principal_paid,
                interest=interest_paid,
                closing_balance=balance,
            )
        )

        if stop_at_payoff and balance <= 0:
            break

    return rows


def leftover_balance(principal: float, rate: float, years: int, amount_for_year: AmountForYear) -> float:
    """Balance left after the full horizon, without any floor (negative means overpaid)."""
    balance = float(principal)
    for year in range(1, years + 1):
        installment = amount_for_year(year)
        for _ in range(MONTHS_PER_YEAR):
            balance = balance * (1 + rate) - installment
    return balance


# -----------------------------
# Contribution growth
# -----------------------------


@dataclass
class GrowthYear:
    year: int
    contributed: float
    total_contributed: float
    closing_balance: float

    @property
    def growth(self) -> float:
        return self.closing_balance - self.total_contributed


def accumulate(rate: float, years: int, amount_for_year: AmountForYear) -> List[GrowthYear]:
    """Invest at the start of each month and compound: balance = (balance + contribution) * (1 + rate)."""
    balance = 0.0
    total = 0.0
    rows: List[GrowthYear] = []

    for year in range(1, years + 1):
        contribution = amount_for_year(year)
        contributed = 0.0
        for _ in range(MONTHS_PER_YEAR):
            balance = (balance + contribution) * (1 + rate)
            contributed += contribution
        total += contributed
        rows.append(
            GrowthYear(
                year=year,
                contributed=contributed,
                total_contributed=total,
                closing_balance=balance,
            )
        )

    return rows


# -----------------------------
# Withdrawal depletion
# -----------------------------


@dataclass
class WithdrawalYear:
    year: int
    withdrawn: float
    total_withdrawn: float
    opening_balance: float
    closing_balance: float


@dataclass
class WithdrawalRun:
    rows: List[WithdrawalYear] = field(default_factory=list)
    final_balance: float = 0.0
    total_withdrawn: float = 0.0
    interest_earned: float = 0.0
    depletion_month: Optional[int] = None


def deplete(corpus: float, rate: float, years: int, amount_for_year: AmountForYear) -> WithdrawalRun:
    """
    Grow `corpus` monthly and withdraw from it until the horizon ends or it runs dry.

    The month the balance would reach zero is the depletion month: only the
    grown balance is withdrawn that month (never the full nominal amount) and
    the simulation stops there, so an empty corpus is depleted in month 1.
    Without depletion the natural remaining balance is kept as is, even when
    it ends above the starting corpus.
    """
    run = WithdrawalRun(final_balance=float(corpus))
    balance = float(corpus)

    for year in range(1, years + 1):
        withdrawal = amount_for_year(year)
        opening = balance
        withdrawn = 0.0

        for month in range(1, MONTHS_PER_YEAR + 1):
            interest = balance * rate
            grown = balance + interest
            run.interest_earned += interest

            if grown - withdrawal <= 0:
                withdrawn += grown
                run.depletion_month = (year - 1) * MONTHS_PER_YEAR + month
                balance = 0.0
                break

            withdrawn += withdrawal
            balance = grown - withdrawal

        run.total_withdrawn += withdrawn
        run.rows.append(
            WithdrawalYear(
                year=year,
                withdrawn=withdrawn,
                total_withdrawn=run.total_withdrawn,
                opening_balance=opening,
                closing_balance=balance,
            )
        )

        if balance <= 0:
            break

    run.final_balance = balance
    return run
