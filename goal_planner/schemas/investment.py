"""Data contracts for savings and investment projections."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from goal_planner.schemas.common import Horizon


class MonthlyProjectionPoint(BaseModel):
    """One month of an investment trajectory."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    contribution: float
    cumulative_contribution: float
    period_return: float
    cumulative_return: float
    total_value: float
    progress_percent: float = Field(..., description="Share of the target reached, 0-100.")


class InvestmentScenario(BaseModel):
    """Outcome of the trajectory at one return assumption."""

    model_config = ConfigDict(frozen=True)

    annual_return: float
    horizon: Horizon
    projected_months: Optional[int] = None
    total_value: float
    total_returns: float


class InvestmentScenarios(BaseModel):
    model_config = ConfigDict(frozen=True)

    conservative: InvestmentScenario
    expected: InvestmentScenario
    optimistic: InvestmentScenario


class ValueBands(BaseModel):
    """End values after a fixed number of years at three return assumptions."""

    model_config = ConfigDict(frozen=True)

    optimistic: float
    expected: float
    pessimistic: float


class InvestmentSimulation(BaseModel):
    model_config = ConfigDict(frozen=True)

    goal_id: str
    current_amount: float
    target_amount: float
    monthly_investment: float
    annual_return: float
    horizon: Horizon
    projected_months: Optional[int] = None
    projected_completion_date: Optional[date] = None
    total_invested: float
    total_returns: float
    monthly_projections: List[MonthlyProjectionPoint]
    scenarios: InvestmentScenarios


class CompoundInterestPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    principal: float
    interest: float
    balance: float


class CompoundInterestResult(BaseModel):
    """Monthly growth of a lump sum with no further contributions."""

    model_config = ConfigDict(frozen=True)

    future_value: float
    total_interest: float
    monthly_breakdown: List[CompoundInterestPoint]


class InvestmentSimulationRequest(BaseModel):
    """Inputs for projecting when a goal is reached by monthly investing."""

    model_config = ConfigDict(extra="forbid")

    goal_id: str = "goal"
    current_amount: float = Field(..., ge=0)
    target_amount: float = Field(..., gt=0)
    monthly_investment: float = Field(..., ge=0)
    annual_return: float = Field(..., ge=-0.5, le=0.5, description="Decimal fraction, 0.05 = 5%.")
    start_date: Optional[date] = None


class RequiredPaymentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_amount: float = Field(..., ge=0)
    target_amount: float = Field(..., gt=0)
    annual_rate: float = Field(..., ge=-0.5, le=0.5)
    years: float = Field(..., gt=0, le=100)


class RequiredPaymentResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    required_monthly_payment: float


class CompoundInterestRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=-0.5, le=0.5)
    years: float = Field(..., gt=0, le=100)


class PlanCheckRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_amount: float
    current_amount: float
    monthly_amount: float
    years: float
