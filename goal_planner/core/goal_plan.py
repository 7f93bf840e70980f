"""Combine a goal's active savings and investment plans into one projection."""

from __future__ import annotations

import logging
import math
from datetime import date
from itertools import islice
from typing import List, Optional, Sequence

from goal_planner.config import (
    DEFAULT_INVESTMENT_RETURN,
    DEFAULT_SAVINGS_RATE,
    MAX_HORIZON_MONTHS,
    SCENARIO_VOLATILITY,
)
from goal_planner.core.scenarios import project_value_bands
from goal_planner.core.solver import completion_date, iterate_balance, required_payment, required_periods
from goal_planner.models import Goal, InvestmentPlan, SavingsPlan
from goal_planner.schemas.goal import GoalPlan, GoalProgressPoint

logger = logging.getLogger(__name__)


def _average(values: List[float], default: float) -> float:
    return sum(values) / len(values) if values else default


def years_until(deadline: date, today: date) -> float:
    return (deadline - today).days / 365.25


def calculate_goal_plan(
    goal: Goal,
    savings_plans: Sequence[SavingsPlan],
    investment_plans: Sequence[InvestmentPlan],
    today: Optional[date] = None,
    *,
    volatility: float = SCENARIO_VOLATILITY,
    max_months: int = MAX_HORIZON_MONTHS,
) -> GoalPlan:
    """
    Project a goal under the plans attached to it.

    - Savings and investment balances grow separately at the average rate of
      their active plans (0.2% / 5% when there are none); the current amount
      starts on the savings side.
    - The completion horizon uses the combined monthly amount at the mean of
      the two rates.
    - The progress series stops at the deadline, at completion, or at the
      horizon ceiling, whichever comes first.
    """
    today = today or date.today()

    savings = [plan for plan in savings_plans if plan.goal_id == goal.id and plan.is_active]
    investments = [plan for plan in investment_plans if plan.goal_id == goal.id and plan.is_active]

    monthly_savings = sum(plan.monthly_amount for plan in savings)
    monthly_investment = sum(plan.monthly_amount for plan in investments)
    savings_rate = _average([plan.interest_rate for plan in savings], DEFAULT_SAVINGS_RATE)
    investment_return = _average([plan.expected_return for plan in investments], DEFAULT_INVESTMENT_RETURN)

    horizon = required_periods(
        goal.current_amount,
        goal.target_amount,
        monthly_savings + monthly_investment,
        (savings_rate + investment_return) / 2 / 12,
        max_months=max_months,
    )

    years = max(0.0, years_until(goal.deadline, today))
    months = min(horizon.months_or(max_months), int(math.floor(years * 12)))

    progress: List[GoalProgressPoint] = []
    savings_stream = iterate_balance(goal.current_amount, savings_rate / 12, monthly_savings)
    investment_stream = iterate_balance(0.0, investment_return / 12, monthly_investment)
    for month, ((savings_balance, _), (investment_value, _)) in enumerate(
        islice(zip(savings_stream, investment_stream), months), start=1
    ):
        total = savings_balance + investment_value
        progress.append(
            GoalProgressPoint(
                month=month,
                savings_balance=round(savings_balance, 2),
                investment_value=round(investment_value, 2),
                total_progress=round(total, 2),
                progress_percentage=round(total / goal.target_amount * 100, 2),
            )
        )
        if total >= goal.target_amount:
            break

    if not horizon.is_reached:
        logger.info("goal %s cannot be reached with current plans", goal.id)

    return GoalPlan(
        goal_id=goal.id,
        horizon=horizon,
        target_date=completion_date(horizon, today),
        required_monthly_payment=round(
            required_payment(goal.current_amount, goal.target_amount, investment_return, years), 2
        ),
        total_savings_needed=round(max(0.0, goal.target_amount - goal.current_amount), 2),
        monthly_progress=progress,
        scenarios=project_value_bands(goal.current_amount, monthly_investment, investment_return, volatility, years),
    )
