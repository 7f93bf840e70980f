"""Data contracts for loan schedules and affordability checks."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoanPayment(BaseModel):
    """Single row of a level-payment amortization schedule."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float = Field(..., ge=0)


class LoanSchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: float
    total_payment: float
    total_interest: float
    payments: List[LoanPayment]


class Affordability(BaseModel):
    model_config = ConfigDict(frozen=True)

    affordable: bool
    max_affordable_payment: float
    reason: Optional[str] = None


class LoanSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    interest_rate: float
    term_months: int
    down_payment_percentage: float
    monthly_payment: float
    within_budget: bool


class LoanOffer(BaseModel):
    """One loan length evaluated against an income-based payment ceiling."""

    model_config = ConfigDict(frozen=True)

    name: str
    years: int
    rate: float
    amount: float
    monthly_payment: float
    total_interest: float
    total_payment: float
    affordable: bool
    payment_to_income_ratio: float


class LoanComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_loan_amount: float
    max_monthly_payment: float
    recommendations: List[LoanOffer]
    all_offers: List[LoanOffer]


class LoanScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0, le=0.2)
    term_months: int = Field(..., ge=1, le=600)


class AffordabilityRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthly_income: float = Field(..., ge=0)
    monthly_expenses: float = Field(..., ge=0)
    monthly_loan_payment: float = Field(..., ge=0)
    safety_margin_percentage: Optional[float] = Field(default=None, ge=0, le=100)


class LoanSuggestionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_price: float = Field(..., gt=0)
    monthly_budget: float = Field(..., ge=0)
    available_rates: List[float] = Field(..., min_length=1)


class LoanOffersRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_amount: float = Field(..., gt=0)
    available_down_payment: float = Field(..., ge=0)
    annual_income: float = Field(..., gt=0)
