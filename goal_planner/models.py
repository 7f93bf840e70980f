from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from goal_planner.domain.validation import (
    validate_interest_rate,
    validate_portfolio_allocation,
)

GoalCategory = Literal["house", "car", "education", "travel", "retirement", "emergency", "other"]
Priority = Literal["high", "medium", "low"]
RiskTolerance = Literal["low", "medium", "high"]


class Goal(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = "goal"
    title: str = ""
    target_amount: float = Field(gt=0, le=999_999_999_999)
    current_amount: float = Field(default=0.0, ge=0, le=999_999_999_999)
    deadline: date
    category: GoalCategory = "other"
    priority: Priority = "medium"


class SavingsPlan(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    goal_id: str
    monthly_amount: float = Field(ge=0)
    interest_rate: float
    compounding_frequency: Literal["monthly", "quarterly", "annually"] = "monthly"
    is_active: bool = True

    @model_validator(mode="after")
    def ensure_rate(self) -> "SavingsPlan":
        message = validate_interest_rate(self.interest_rate, "savings")
        if message:
            raise ValueError(message)
        return self


class PortfolioAllocation(BaseModel):
    """Percentages per asset class; must add up to 100."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stocks: float = Field(ge=0, le=100)
    bonds: float = Field(ge=0, le=100)
    cash: float = Field(ge=0, le=100)
    others: float = Field(default=0.0, ge=0, le=100)

    @model_validator(mode="after")
    def ensure_total(self) -> "PortfolioAllocation":
        message = validate_portfolio_allocation(self.stocks, self.bonds, self.cash, self.others)
        if message:
            raise ValueError(message)
        return self


class InvestmentPlan(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    goal_id: str
    monthly_amount: float = Field(ge=0)
    expected_return: float
    risk_level: RiskTolerance = "medium"
    portfolio_allocation: Optional[PortfolioAllocation] = None
    is_active: bool = True

    @model_validator(mode="after")
    def ensure_rate(self) -> "InvestmentPlan":
        message = validate_interest_rate(self.expected_return, "investment")
        if message:
            raise ValueError(message)
        return self


class GoalPlanRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    goal: Goal
    savings_plans: List[SavingsPlan] = Field(default_factory=list)
    investment_plans: List[InvestmentPlan] = Field(default_factory=list)
    today: Optional[date] = None


class AllocationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    time_horizon: float = Field(gt=0, le=50, description="Years.")
    risk_tolerance: RiskTolerance
