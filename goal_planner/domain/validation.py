"""Caller-side input guards.

The calculation engine assumes well-formed numbers; these checks run before a
request reaches it. Single-value checks return an error message or ``None``;
plan-level checks return every problem found.
"""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

MAX_AMOUNT = 999_999_999_999
ALLOCATION_TOLERANCE = 0.01
MAX_PLAN_YEARS = 50

RateKind = Literal["savings", "investment", "loan"]

# Inclusive (low, high) bounds per rate kind, as decimal fractions.
RATE_BOUNDS = {
    "savings": (0.0, 0.1),
    "investment": (-0.5, 0.5),
    "loan": (0.0, 0.2),
}


class PlanValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_amount(amount: float) -> Optional[str]:
    if amount != amount:  # NaN
        return "amount must be a number"
    if amount < 0:
        return "amount must be 0 or more"
    if amount > MAX_AMOUNT:
        return "amount is too large"
    return None


def validate_percentage(percentage: float, minimum: float = 0, maximum: float = 100) -> Optional[str]:
    if percentage != percentage:
        return "percentage must be a number"
    if percentage < minimum:
        return f"percentage must be at least {minimum:g}%"
    if percentage > maximum:
        return f"percentage must be at most {maximum:g}%"
    return None


def validate_interest_rate(rate: float, kind: RateKind) -> Optional[str]:
    low, high = RATE_BOUNDS[kind]
    if rate < low:
        return f"{kind} rate must be at least {low:.0%}"
    if rate > high:
        return f"{kind} rate must be at most {high:.0%}"
    return None


def validate_portfolio_allocation(stocks: float, bonds: float, cash: float, others: float = 0.0) -> Optional[str]:
    total = stocks + bonds + cash + others
    if abs(total - 100) > ALLOCATION_TOLERANCE:
        return f"portfolio allocation must total 100% (got {total:g}%)"
    return None


def validate_future_date(value: date, today: Optional[date] = None) -> Optional[str]:
    today = today or date.today()
    if value <= today:
        return "date must be in the future"
    return None


def validate_financial_plan(
    target_amount: float,
    current_amount: float,
    monthly_amount: float,
    years: float,
) -> List[str]:
    errors: List[str] = []

    if target_amount <= current_amount:
        errors.append("target amount must be greater than the current amount")
    if monthly_amount <= 0:
        errors.append("monthly amount must be greater than 0")
    if years <= 0:
        errors.append("years must be greater than 0")
    if years > MAX_PLAN_YEARS:
        errors.append(f"years must be {MAX_PLAN_YEARS} or fewer")

    # plain contributions should cover at least half the gap
    required = target_amount - current_amount
    total_saved = monthly_amount * 12 * years
    if total_saved < required * 0.5:
        errors.append("monthly amount is too low to reach the target; save more or extend the timeline")

    return errors


def ensure_financial_plan(
    target_amount: float,
    current_amount: float,
    monthly_amount: float,
    years: float,
) -> None:
    """Raise :class:`PlanValidationError` if the plan has any problem."""
    errors = validate_financial_plan(target_amount, current_amount, monthly_amount, years)
    if errors:
        raise PlanValidationError(errors)
