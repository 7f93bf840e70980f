"""Data contracts for the pay-in-full vs. finance comparison."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Recommendation(str, Enum):
    PAY_IN_FULL = "pay_in_full"
    FINANCE = "finance"


class MonthlyOpportunityPoint(BaseModel):
    """Investment value for one month, with the outstanding loan netted off."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    investment_contribution: float
    investment_value: float
    net_worth: float
    loan_balance: Optional[float] = None
    loan_payment: Optional[float] = None


class OpportunityAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_invested: float
    investment_returns: float
    final_value: float
    monthly_projections: List[MonthlyOpportunityPoint]


class LumpSumScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_method: Literal["lump_sum"] = "lump_sum"
    initial_payment: float
    remaining_savings: float
    investment_return: float
    projected_years: float
    monthly_investment: float
    final_assets: float
    total_cost: float
    opportunity: OpportunityAnalysis


class LoanScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_method: Literal["loan"] = "loan"
    down_payment: float
    loan_amount: float
    interest_rate: float
    loan_term_months: int
    monthly_payment: float
    total_interest: float
    total_cost: float
    remaining_savings: float
    investment_return: float
    monthly_investment: float = Field(..., description="Capacity left after the loan payment.")
    final_assets: float
    opportunity: OpportunityAnalysis


class PurchaseSimulation(BaseModel):
    model_config = ConfigDict(frozen=True)

    goal_id: str
    product_name: str
    product_price: float
    current_savings: float
    lump_sum_scenario: LumpSumScenario
    loan_scenario: LoanScenario
    recommendation: Recommendation
    total_difference: float


class SweepPoint(BaseModel):
    """ROI of financing at one down-payment percentage."""

    model_config = ConfigDict(frozen=True)

    down_payment: int
    roi: float
    final_assets: float
    total_cost: float
    monthly_payment: float
    feasible: bool


class DownPaymentSweep(BaseModel):
    model_config = ConfigDict(frozen=True)

    optimal_down_payment: int
    max_roi: float
    roi_analysis: List[SweepPoint]


class LoanTerms(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    down_payment_percentage: float = Field(..., ge=0, le=100)
    interest_rate: float = Field(..., ge=0, le=0.2)
    term_months: int = Field(..., ge=1, le=600)


class PurchaseSimulationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    goal_id: str = "goal"
    product_name: str = ""
    product_price: float = Field(..., gt=0)
    current_savings: float = Field(..., ge=0)
    loan_terms: LoanTerms
    investment_return: float = Field(..., ge=-0.5, le=0.5)
    projected_years: float = Field(..., gt=0, le=50)
    monthly_investment_capacity: float = Field(..., ge=0)


class DownPaymentSweepRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_price: float = Field(..., gt=0)
    current_savings: float = Field(..., ge=0)
    loan_interest_rate: float = Field(..., ge=0, le=0.2)
    loan_term_months: int = Field(..., ge=1, le=600)
    investment_return: float = Field(..., ge=-0.5, le=0.5)
    projected_years: float = Field(..., gt=0, le=50)
    monthly_investment_capacity: float = Field(..., ge=0)
    min_down_payment: int = Field(default=0, ge=0, le=100)
    max_down_payment: int = Field(default=100, ge=0, le=100)
