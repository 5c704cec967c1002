from __future__ import annotations

from functools import partial

import pytest

from fincalc.core.rates import monthly_rate, stepped_amount
from fincalc.core.simulation import deplete
from fincalc.core.swp import calculate_step_up_swp, calculate_swp
from fincalc.schemas.swp import StepUpSwpInput, SwpInput


def test_returns_outpacing_withdrawals_are_not_capped():
    """1% a month on 10 lakh earns more than the 5,000 withdrawn, so the corpus keeps growing."""
    result = calculate_swp(SwpInput(total_investment=1_000_000, monthly_withdrawal=5000, expected_return=12, years=10))

    assert result.depletion_month is None
    assert not result.depleted
    assert result.total_withdrawal == 600_000
    assert result.remaining_balance > result.initial_investment
    assert len(result.yearly_breakdown) == 10
    assert result.yearly_breakdown[-1].balance_end == result.remaining_balance
    assert [row.withdrawal for row in result.yearly_breakdown] == [60000] * 10


def test_exact_depletion_without_growth():
    result = calculate_swp(SwpInput(total_investment=100_000, monthly_withdrawal=10_000, expected_return=0, years=5))

    assert result.depletion_month == 10
    assert result.total_withdrawal == 100_000
    assert result.remaining_balance == 0
    assert len(result.yearly_breakdown) == 1
    assert result.yearly_breakdown[0].balance_end == 0


def test_final_withdrawal_is_capped_at_what_is_left():
    result = calculate_swp(SwpInput(total_investment=95_000, monthly_withdrawal=10_000, expected_return=0, years=2))

    assert result.depletion_month == 10
    # nine full withdrawals, then only the 5,000 left
    assert result.total_withdrawal == 95_000
    assert result.yearly_breakdown[0].withdrawal == 95_000


def test_depletion_stops_the_simulation():
    result = calculate_swp(SwpInput(total_investment=500_000, monthly_withdrawal=20_000, expected_return=8, years=10))

    assert result.depletion_month is not None
    depletion_year = (result.depletion_month - 1) // 12 + 1
    assert len(result.yearly_breakdown) == depletion_year
    assert result.yearly_breakdown[-1].balance_end == 0
    assert result.remaining_balance == 0
    ends = [row.balance_end for row in result.yearly_breakdown]
    assert ends == sorted(ends, reverse=True)


@pytest.mark.parametrize(
    "corpus, withdrawal, rate, years, step_up",
    [
        (500_000, 20_000, 8, 10, 0),
        (1_000_000, 9_000, 10, 30, 10),
        (2_500_000, 25_000, 6, 20, 5),
        (100_000, 100_000, 12, 1, 0),
        (750_000, 1_000, 12, 5, 0),
    ],
)
def test_withdrawals_never_exceed_corpus_plus_growth(corpus, withdrawal, rate, years, step_up):
    run = deplete(corpus, monthly_rate(rate), years, partial(stepped_amount, withdrawal, step_up))

    assert run.total_withdrawn <= corpus + run.interest_earned + 1e-3
    if run.depletion_month is not None:
        assert run.final_balance == 0
        assert run.rows[-1].closing_balance == 0


def test_step_up_swp_raises_withdrawal_each_year():
    result = calculate_step_up_swp(
        StepUpSwpInput(
            total_investment=5_000_000,
            monthly_withdrawal=10_000,
            expected_return=10,
            years=3,
            annual_step_up=10,
        )
    )

    assert [row.withdrawal for row in result.yearly_breakdown] == [120000, 132000, 145200]
    assert result.total_withdrawal == 397200
    assert result.yearly_breakdown[1].balance_start == result.yearly_breakdown[0].balance_end


def test_step_up_applies_before_the_first_withdrawal_of_the_year():
    result = calculate_step_up_swp(
        StepUpSwpInput(
            total_investment=300_000,
            monthly_withdrawal=20_000,
            expected_return=0,
            years=3,
            annual_step_up=50,
        )
    )

    # 240,000 in year 1 leaves 60,000: two withdrawals of 30,000 in year 2
    assert result.depletion_month == 14
    assert [row.withdrawal for row in result.yearly_breakdown] == [240000, 60000]
    assert result.total_withdrawal == 300_000


def test_step_up_depletes_sooner_than_flat():
    flat = calculate_swp(SwpInput(total_investment=2_000_000, monthly_withdrawal=15_000, expected_return=8, years=30))
    stepped = calculate_step_up_swp(
        StepUpSwpInput(
            total_investment=2_000_000,
            monthly_withdrawal=15_000,
            expected_return=8,
            years=30,
            annual_step_up=7,
        )
    )

    assert stepped.depletion_month is not None
    assert flat.depletion_month is None or stepped.depletion_month < flat.depletion_month


def test_zero_step_up_matches_flat_swp():
    flat = calculate_swp(SwpInput(total_investment=800_000, monthly_withdrawal=12_000, expected_return=9, years=15))
    stepped = calculate_step_up_swp(
        StepUpSwpInput(
            total_investment=800_000,
            monthly_withdrawal=12_000,
            expected_return=9,
            years=15,
            annual_step_up=0,
        )
    )

    assert stepped == flat


def test_empty_corpus_is_depleted_in_the_first_month():
    result = calculate_swp(SwpInput(total_investment=0, monthly_withdrawal=1000, expected_return=8, years=2))

    assert result.depletion_month == 1
    assert result.depleted
    assert result.total_withdrawal == 0
    assert result.remaining_balance == 0
    assert len(result.yearly_breakdown) == 1
