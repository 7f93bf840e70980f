"""Month-by-month investment trajectories and optimistic/expected/conservative bands."""

from __future__ import annotations

import logging
from datetime import date
from itertools import islice
from typing import List, Optional, Tuple

from goal_planner.config import (
    CONSERVATIVE_RETURN_FLOOR,
    MAX_HORIZON_MONTHS,
    SCENARIO_VOLATILITY,
    TRAJECTORY_POINT_LIMIT,
)
from goal_planner.core.compounding import annuity_future_value, compound_growth
from goal_planner.core.solver import completion_date, iterate_balance, required_periods
from goal_planner.schemas.investment import (
    InvestmentScenario,
    InvestmentScenarios,
    InvestmentSimulation,
    MonthlyProjectionPoint,
    ValueBands,
)

logger = logging.getLogger(__name__)


def balance_after(current: float, monthly_rate: float, contribution: float, months: int) -> float:
    """Balance after replaying the recurrence ``months`` times."""
    balance = current
    for balance, _ in islice(iterate_balance(current, monthly_rate, contribution), months):
        pass
    return balance


def _progress(total_value: float, target: float) -> float:
    if target <= 0:
        return 100.0
    return round(min(total_value / target * 100, 100.0), 2)


def project_trajectory(
    current: float,
    target: float,
    monthly_investment: float,
    annual_return: float,
    *,
    max_months: int = MAX_HORIZON_MONTHS,
    point_limit: int = TRAJECTORY_POINT_LIMIT,
) -> List[MonthlyProjectionPoint]:
    """
    Build the reported month series toward ``target``.

    The series ends on the first month the total meets the target, and never
    holds more than ``point_limit`` points even if the goal is further away.
    """
    horizon = required_periods(current, target, monthly_investment, annual_return / 12, max_months=max_months)
    months = min(horizon.months_or(max_months), point_limit)

    points: List[MonthlyProjectionPoint] = []
    cumulative_contribution = 0.0
    cumulative_return = 0.0

    stream = iterate_balance(current, annual_return / 12, monthly_investment)
    for month, (total_value, period_return) in enumerate(islice(stream, months), start=1):
        cumulative_contribution += monthly_investment
        cumulative_return += period_return
        points.append(
            MonthlyProjectionPoint(
                month=month,
                contribution=round(monthly_investment, 2),
                cumulative_contribution=round(cumulative_contribution, 2),
                period_return=round(period_return, 2),
                cumulative_return=round(cumulative_return, 2),
                total_value=round(total_value, 2),
                progress_percent=_progress(total_value, target),
            )
        )
        if total_value >= target:
            break

    return points


def band_returns(
    expected_return: float,
    *,
    volatility: float = SCENARIO_VOLATILITY,
    floor: float = CONSERVATIVE_RETURN_FLOOR,
) -> Tuple[float, float, float]:
    """Return ``(conservative, expected, optimistic)`` annual returns.

    The conservative return is floored, but never above the expected one.
    """
    conservative = min(expected_return, max(floor, expected_return - volatility))
    optimistic = expected_return + volatility
    return conservative, expected_return, optimistic


def _scenario(
    current: float,
    target: float,
    monthly_investment: float,
    annual_return: float,
    max_months: int,
) -> InvestmentScenario:
    horizon = required_periods(current, target, monthly_investment, annual_return / 12, max_months=max_months)
    if not horizon.is_reached:
        return InvestmentScenario(
            annual_return=annual_return,
            horizon=horizon,
            projected_months=None,
            total_value=round(target, 2),
            total_returns=0.0,
        )

    value = balance_after(current, annual_return / 12, monthly_investment, horizon.months)
    returns = value - current - monthly_investment * horizon.months
    return InvestmentScenario(
        annual_return=annual_return,
        horizon=horizon,
        projected_months=horizon.months,
        total_value=round(value, 2),
        total_returns=round(returns, 2),
    )


def calculate_investment_scenarios(
    current: float,
    target: float,
    monthly_investment: float,
    expected_return: float,
    *,
    volatility: float = SCENARIO_VOLATILITY,
    floor: float = CONSERVATIVE_RETURN_FLOOR,
    max_months: int = MAX_HORIZON_MONTHS,
) -> InvestmentScenarios:
    conservative, expected, optimistic = band_returns(expected_return, volatility=volatility, floor=floor)
    return InvestmentScenarios(
        conservative=_scenario(current, target, monthly_investment, conservative, max_months),
        expected=_scenario(current, target, monthly_investment, expected, max_months),
        optimistic=_scenario(current, target, monthly_investment, optimistic, max_months),
    )


def calculate_investment_simulation(
    goal_id: str,
    current: float,
    target: float,
    monthly_investment: float,
    annual_return: float,
    *,
    start: Optional[date] = None,
    volatility: float = SCENARIO_VOLATILITY,
    floor: float = CONSERVATIVE_RETURN_FLOOR,
    max_months: int = MAX_HORIZON_MONTHS,
    point_limit: int = TRAJECTORY_POINT_LIMIT,
) -> InvestmentSimulation:
    """Project when ``target`` is reached by investing ``monthly_investment`` a month.

    Totals cover the full horizon when the goal is reachable, otherwise the
    presentation window of ``point_limit`` months.
    """
    monthly_rate = annual_return / 12
    horizon = required_periods(current, target, monthly_investment, monthly_rate, max_months=max_months)
    projections = project_trajectory(
        current,
        target,
        monthly_investment,
        annual_return,
        max_months=max_months,
        point_limit=point_limit,
    )

    window = horizon.months if horizon.is_reached else len(projections)
    final_value = balance_after(current, monthly_rate, monthly_investment, window)
    total_invested = monthly_investment * window
    total_returns = final_value - current - total_invested

    if not horizon.is_reached:
        logger.info("goal %s unreachable within %d months at %.2f/month", goal_id, max_months, monthly_investment)

    return InvestmentSimulation(
        goal_id=goal_id,
        current_amount=round(current, 2),
        target_amount=round(target, 2),
        monthly_investment=round(monthly_investment, 2),
        annual_return=annual_return,
        horizon=horizon,
        projected_months=horizon.months,
        projected_completion_date=completion_date(horizon, start),
        total_invested=round(total_invested, 2),
        total_returns=round(total_returns, 2),
        monthly_projections=projections,
        scenarios=calculate_investment_scenarios(
            current,
            target,
            monthly_investment,
            annual_return,
            volatility=volatility,
            floor=floor,
            max_months=max_months,
        ),
    )


def project_value_bands(
    principal: float,
    monthly_payment: float,
    expected_return: float,
    volatility: float,
    years: float,
) -> ValueBands:
    """
    End values after ``years`` at expected +/- volatility.

    Lump sum compounds annually, contributions monthly; the pessimistic
    return is floored at zero.
    """

    def end_value(annual_return: float) -> float:
        return compound_growth(principal, annual_return, years) + annuity_future_value(
            monthly_payment, annual_return / 12, years * 12
        )

    return ValueBands(
        optimistic=round(end_value(expected_return + volatility), 2),
        expected=round(end_value(expected_return), 2),
        pessimistic=round(end_value(max(0.0, expected_return - volatility)), 2),
    )


__all__ = [
    "balance_after",
    "band_returns",
    "calculate_investment_scenarios",
    "calculate_investment_simulation",
    "project_trajectory",
    "project_value_bands",
]
