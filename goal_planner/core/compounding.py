"""Compounding and amortization primitives.

Rates are annual decimal fractions (0.05 = 5%) unless a parameter says
``periodic_rate``. Every formula that divides by a rate has a zero-rate branch.
"""

from __future__ import annotations

from typing import List

from goal_planner.schemas.investment import CompoundInterestPoint, CompoundInterestResult


def compound_growth(principal: float, annual_rate: float, years: float) -> float:
    return principal * (1 + annual_rate) ** years


def annuity_future_value(payment: float, periodic_rate: float, periods: float) -> float:
    """Future value of ``periods`` end-of-period payments."""
    if periodic_rate == 0:
        return payment * periods
    return payment * (((1 + periodic_rate) ** periods - 1) / periodic_rate)


def present_value(future_value: float, annual_rate: float, years: float) -> float:
    return future_value / (1 + annual_rate) ** years


def level_payment(principal: float, annual_rate: float, total_months: int) -> float:
    """Fixed monthly payment that amortizes ``principal`` over ``total_months``."""
    if annual_rate == 0:
        return principal / total_months

    monthly_rate = annual_rate / 12
    factor = (1 + monthly_rate) ** total_months
    return principal * (monthly_rate * factor) / (factor - 1)


def future_value(current_amount: float, monthly_contribution: float, annual_rate: float, years: float) -> float:
    """Value of a starting balance plus monthly contributions, compounded monthly."""
    monthly_rate = annual_rate / 12
    total_months = years * 12
    grown_current = current_amount * (1 + monthly_rate) ** total_months
    return grown_current + annuity_future_value(monthly_contribution, monthly_rate, total_months)


def real_value(nominal_value: float, inflation_rate: float, years: float) -> float:
    """Deflate a future nominal amount into today's money."""
    return nominal_value / (1 + inflation_rate) ** years


def compound_interest_schedule(principal: float, annual_rate: float, years: float) -> CompoundInterestResult:
    """Month-by-month growth of a lump sum over ``floor(years * 12)`` months."""
    monthly_rate = annual_rate / 12
    total_months = int(years * 12)

    balance = principal
    total_interest = 0.0
    breakdown: List[CompoundInterestPoint] = []

    for month in range(1, total_months + 1):
        interest = balance * monthly_rate
        balance += interest
        total_interest += interest
        breakdown.append(
            CompoundInterestPoint(
                month=month,
                principal=round(principal, 2),
                interest=round(interest, 2),
                balance=round(balance, 2),
            )
        )

    return CompoundInterestResult(
        future_value=round(balance, 2),
        total_interest=round(total_interest, 2),
        monthly_breakdown=breakdown,
    )
