"""Data contracts for the income tax calculator."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from fincalc.schemas.common import CalculationInput, CalculationResult, amount_field


class IncomeTaxInput(CalculationInput):
    gross_income: float = amount_field("Gross annual income.")
    deduction_80c: float = amount_field("Deduction claimed under section 80C.", default=0.0)
    deduction_80d: float = amount_field("Deduction claimed under section 80D.", default=0.0)
    other_deductions: float = amount_field("Any other deductions.", default=0.0)

    @property
    def total_deductions(self) -> float:
        return self.deduction_80c + self.deduction_80d + self.other_deductions


class TaxSlabRow(BaseModel):
    """Income falling in one slab and the tax charged on it."""

    slab: str
    income: int
    rate: int
    tax: int


class IncomeTaxResult(CalculationResult):
    gross_income: int
    total_deductions: int
    taxable_income: int
    tax_before_cess: int
    cess: int
    total_tax: int
    net_income: int
    effective_tax_rate: float
    slab_breakdown: List[TaxSlabRow] = Field(default_factory=list)
