"""Data contracts for the combined goal calculator and portfolio helpers."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from goal_planner.schemas.common import Horizon
from goal_planner.schemas.investment import ValueBands


class GoalProgressPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    savings_balance: float
    investment_value: float
    total_progress: float
    progress_percentage: float


class GoalPlan(BaseModel):
    """Where the active plans for a goal lead, and what it would take otherwise."""

    model_config = ConfigDict(frozen=True)

    goal_id: str
    horizon: Horizon
    target_date: Optional[date] = None
    required_monthly_payment: float
    total_savings_needed: float
    monthly_progress: List[GoalProgressPoint]
    scenarios: ValueBands


class RiskProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: Literal["conservative", "moderate", "aggressive"]
    expected_return: float
    volatility: float
    description: str


class AllocationRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    stocks: float
    bonds: float
    cash: float
    expected_return: float
    risk_level: Literal["low", "medium", "high"]
    time_horizon: float
