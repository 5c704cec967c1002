"""Progressive slab income tax (new regime) with health & education cess."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from fincalc.core.rates import to_currency
from fincalc.schemas.income_tax import IncomeTaxInput, IncomeTaxResult, TaxSlabRow

logger = logging.getLogger(__name__)

CESS_RATE = 0.04
LAKH = 100_000


@dataclass(frozen=True)
class TaxSlab:
    lower: float
    upper: Optional[float]  # None => no upper limit
    rate: int  # percent

    @property
    def width(self) -> Optional[float]:
        return None if self.upper is None else self.upper - self.lower

    @property
    def label(self) -> str:
        if self.upper is None:
            return f"Above ₹{self.lower / LAKH:.0f}L"
        return f"₹{self.lower / LAKH:.0f}L - ₹{self.upper / LAKH:.0f}L"


# New tax regime, FY 2025-26
NEW_REGIME_SLABS: Sequence[TaxSlab] = (
    TaxSlab(0, 4 * LAKH, 0),
    TaxSlab(4 * LAKH, 8 * LAKH, 5),
    TaxSlab(8 * LAKH, 12 * LAKH, 10),
    TaxSlab(12 * LAKH, 16 * LAKH, 15),
    TaxSlab(16 * LAKH, 20 * LAKH, 20),
    TaxSlab(20 * LAKH, 24 * LAKH, 25),
    TaxSlab(24 * LAKH, None, 30),
)


def calculate_income_tax(request: IncomeTaxInput, slabs: Sequence[TaxSlab] = NEW_REGIME_SLABS) -> IncomeTaxResult:
    """
    Walk the slabs in ascending order, taxing the part of the taxable income
    that falls in each one, then add cess on the summed slab tax.

    Only slabs that actually receive income appear in the breakdown.
    """
    gross = request.gross_income
    deductions = request.total_deductions
    taxable = max(0.0, gross - deductions)

    breakdown: List[TaxSlabRow] = []
    slab_tax_total = 0.0
    remaining = taxable
    for slab in slabs:
        if remaining <= 0:
            break
        income = remaining if slab.width is None else min(remaining, slab.width)
        tax = income * slab.rate / 100
        slab_tax_total += tax
        if income > 0:
            breakdown.append(
                TaxSlabRow(slab=slab.label, income=to_currency(income), rate=slab.rate, tax=to_currency(tax))
            )
        remaining -= income

    cess = slab_tax_total * CESS_RATE
    total_tax = slab_tax_total + cess
    net_income = gross - total_tax
    effective_rate = total_tax / gross * 100 if gross > 0 else 0.0

    logger.debug("Income tax on %s (taxable %s): %.2f", gross, taxable, total_tax)
    return IncomeTaxResult(
        gross_income=to_currency(gross),
        total_deductions=to_currency(deductions),
        taxable_income=to_currency(taxable),
        tax_before_cess=to_currency(slab_tax_total),
        cess=to_currency(cess),
        total_tax=to_currency(total_tax),
        net_income=to_currency(net_income),
        effective_tax_rate=effective_rate,
        slab_breakdown=breakdown,
    )
