"""Catalog of the available calculators, keyed by the slug used in the API path."""

from __future__ import annotations

from typing import List

from fincalc.schemas.common import CalculatorInfo

CALCULATORS: List[CalculatorInfo] = [
    CalculatorInfo(slug="sip", title="SIP Calculator", description="Calculate returns on your Systematic Investment Plan"),
    CalculatorInfo(slug="swp", title="SWP Calculator", description="Plan your Systematic Withdrawal Plan"),
    CalculatorInfo(
        slug="step-up-swp",
        title="SWP Step Up Calculator",
        description="Calculate withdrawals with step-up increments",
    ),
    CalculatorInfo(
        slug="step-up-sip",
        title="Step Up SIP Calculator",
        description="Calculate SIP with increasing contributions",
    ),
    CalculatorInfo(
        slug="lumpsum",
        title="Lumpsum Calculator",
        description="Calculate returns on one-time investments",
    ),
    CalculatorInfo(slug="emi", title="EMI Calculator", description="Calculate your loan EMI payments"),
    CalculatorInfo(
        slug="step-up-emi",
        title="EMI Step Up Calculator",
        description="Calculate EMI with step-up payments",
    ),
    CalculatorInfo(
        slug="income-tax",
        title="Income Tax Calculator",
        description="Estimate your income tax liability",
    ),
]
