"""Inversions of the savings recurrence: months needed, or payment needed."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, Optional, Tuple

from dateutil.relativedelta import relativedelta

from goal_planner.config import MAX_HORIZON_MONTHS
from goal_planner.schemas.common import Horizon

logger = logging.getLogger(__name__)


def step_balance(balance: float, periodic_rate: float, contribution: float) -> Tuple[float, float]:
    """Advance one period: grow ``balance`` then add ``contribution``.

    Returns ``(new_balance, period_return)``.
    """
    period_return = balance * periodic_rate
    return balance + period_return + contribution, period_return


def iterate_balance(balance: float, periodic_rate: float, contribution: float) -> Iterator[Tuple[float, float]]:
    """Endless stream of ``step_balance`` results starting from ``balance``."""
    while True:
        balance, period_return = step_balance(balance, periodic_rate, contribution)
        yield balance, period_return


def required_periods(
    current: float,
    target: float,
    payment: float,
    periodic_rate: float,
    *,
    max_months: int = MAX_HORIZON_MONTHS,
) -> Horizon:
    """Smallest number of periods after which the balance meets ``target``."""
    if current >= target:
        return Horizon.reached_in(0)
    if payment <= 0:
        logger.debug("no contribution toward target %.2f; horizon unreachable", target)
        return Horizon.unreachable()

    for month, (balance, _) in enumerate(iterate_balance(current, periodic_rate, payment), start=1):
        if balance >= target:
            return Horizon.reached_in(month)
        if month >= max_months:
            break

    logger.debug("target %.2f not reached within %d months", target, max_months)
    return Horizon.unreachable()


def required_payment(current: float, target: float, annual_rate: float, years: float) -> float:
    """Monthly contribution that grows ``current`` into ``target`` over ``years``."""
    if years <= 0:
        return 0.0

    monthly_rate = annual_rate / 12
    total_months = years * 12

    shortfall = target - current * (1 + monthly_rate) ** total_months
    if shortfall <= 0:
        return 0.0

    if monthly_rate == 0:
        return shortfall / total_months
    return shortfall * monthly_rate / ((1 + monthly_rate) ** total_months - 1)


def completion_date(horizon: Horizon, start: Optional[date] = None) -> Optional[date]:
    """Calendar date the horizon ends on, or ``None`` when it is unreachable."""
    if not horizon.is_reached:
        return None
    start = start or date.today()
    return start + relativedelta(months=horizon.months)
