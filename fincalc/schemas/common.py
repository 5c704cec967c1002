"""Shared pydantic pieces: input bounds, the ping/catalog payloads and result summaries."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Upper bounds keep every calculation finite: 100 years at 100% a year stays
# well inside float range for any amount up to MAX_AMOUNT.
MAX_AMOUNT = 1_000_000_000_000
MAX_RATE_PERCENT = 100
MAX_YEARS = 100


class CalculationInput(BaseModel):
    """Base for every calculator's inputs: immutable, no unknown fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class CalculationResult(BaseModel):
    """Base for every calculator's result snapshot."""

    model_config = ConfigDict(frozen=True)


def amount_field(description: str, default: Optional[float] = None):
    if default is None:
        return Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description=description)
    return Field(default, ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description=description)


def rate_field(description: str):
    return Field(..., ge=0, le=MAX_RATE_PERCENT, allow_inf_nan=False, description=description)


def years_field(description: str):
    return Field(..., ge=0, le=MAX_YEARS, description=description)


def step_up_field():
    return Field(
        0.0,
        ge=0,
        le=MAX_RATE_PERCENT,
        allow_inf_nan=False,
        description="Annual increase of the recurring amount, in percent (e.g. 10 for 10%).",
    )


class PingResponse(BaseModel):
    message: str


class CalculatorInfo(BaseModel):
    """One entry of the calculator catalog."""

    slug: str
    title: str
    description: str


class SplitSummary(BaseModel):
    """Two-part split of a headline total, e.g. principal vs interest."""

    left_label: str
    left_percentage: float
    right_label: str
    right_percentage: float
    caption: str
    headline: str
    headline_short: str
    notes: List[str] = Field(default_factory=list)

