"""Pay-in-full vs. finance-and-invest-the-difference comparison.

Conventions:
  - Both branches invest whatever savings are left after the upfront payment
    and add a monthly contribution for the whole analysis horizon.
  - Pay in full: contribution is the full monthly investment capacity.
  - Finance: contribution is the capacity minus the loan payment, floored at 0.
    Net worth nets the outstanding loan balance off the investment value while
    the loan is running.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import islice
from typing import List

from goal_planner.core.compounding import level_payment
from goal_planner.core.loans import amortize
from goal_planner.core.solver import iterate_balance
from goal_planner.schemas.purchase import (
    LoanScenario,
    LoanTerms,
    LumpSumScenario,
    MonthlyOpportunityPoint,
    OpportunityAnalysis,
    PurchaseSimulation,
    Recommendation,
)

logger = logging.getLogger(__name__)


@dataclass
class FinanceTrack:
    """Unrounded figures for the finance branch."""

    down_payment: float
    loan_amount: float
    monthly_payment: float
    total_interest: float
    total_cost: float
    remaining_savings: float
    net_monthly_investment: float
    investment_values: List[float]
    final_value: float


def horizon_months(years: float) -> int:
    """Whole months in ``years``, rounding halves up."""
    return int(math.floor(years * 12 + 0.5))


def investment_values(initial_amount: float, monthly_investment: float, annual_return: float, months: int) -> List[float]:
    stream = iterate_balance(initial_amount, annual_return / 12, monthly_investment)
    return [value for value, _ in islice(stream, months)]


def _opportunity(
    initial_amount: float,
    monthly_investment: float,
    values: List[float],
    points: List[MonthlyOpportunityPoint],
) -> OpportunityAnalysis:
    final_value = values[-1] if values else initial_amount
    total_invested = initial_amount + monthly_investment * len(values)
    return OpportunityAnalysis(
        total_invested=round(total_invested, 2),
        investment_returns=round(final_value - total_invested, 2),
        final_value=round(final_value, 2),
        monthly_projections=points,
    )


def calculate_opportunity_analysis(
    initial_amount: float,
    monthly_investment: float,
    annual_return: float,
    months: int,
) -> OpportunityAnalysis:
    """Investment track with no loan attached."""
    values = investment_values(initial_amount, monthly_investment, annual_return, months)
    points = [
        MonthlyOpportunityPoint(
            month=month,
            investment_contribution=round(monthly_investment, 2),
            investment_value=round(value, 2),
            net_worth=round(value, 2),
        )
        for month, value in enumerate(values, start=1)
    ]
    return _opportunity(initial_amount, monthly_investment, values, points)


def calculate_lump_sum_scenario(
    product_price: float,
    current_savings: float,
    investment_return: float,
    projected_years: float,
    monthly_investment: float,
) -> LumpSumScenario:
    remaining_savings = max(0.0, current_savings - product_price)
    opportunity = calculate_opportunity_analysis(
        remaining_savings,
        monthly_investment,
        investment_return,
        horizon_months(projected_years),
    )
    return LumpSumScenario(
        initial_payment=round(product_price, 2),
        remaining_savings=round(remaining_savings, 2),
        investment_return=investment_return,
        projected_years=projected_years,
        monthly_investment=round(monthly_investment, 2),
        final_assets=opportunity.final_value,
        total_cost=round(product_price, 2),
        opportunity=opportunity,
    )


def finance_track(
    product_price: float,
    current_savings: float,
    down_payment_percentage: float,
    loan_interest_rate: float,
    loan_term_months: int,
    investment_return: float,
    projected_years: float,
    monthly_investment_capacity: float,
) -> FinanceTrack:
    down_payment = product_price * (down_payment_percentage / 100)
    loan_amount = product_price - down_payment
    monthly_payment = level_payment(loan_amount, loan_interest_rate, loan_term_months)
    total_interest = monthly_payment * loan_term_months - loan_amount

    remaining_savings = max(0.0, current_savings - down_payment)
    net_monthly_investment = max(0.0, monthly_investment_capacity - monthly_payment)
    values = investment_values(
        remaining_savings,
        net_monthly_investment,
        investment_return,
        horizon_months(projected_years),
    )

    return FinanceTrack(
        down_payment=down_payment,
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_cost=product_price + total_interest,
        remaining_savings=remaining_savings,
        net_monthly_investment=net_monthly_investment,
        investment_values=values,
        final_value=values[-1] if values else remaining_savings,
    )


def calculate_loan_scenario(
    product_price: float,
    current_savings: float,
    down_payment_percentage: float,
    loan_interest_rate: float,
    loan_term_months: int,
    investment_return: float,
    projected_years: float,
    monthly_investment_capacity: float,
) -> LoanScenario:
    track = finance_track(
        product_price,
        current_savings,
        down_payment_percentage,
        loan_interest_rate,
        loan_term_months,
        investment_return,
        projected_years,
        monthly_investment_capacity,
    )
    return loan_scenario_from_track(track, loan_interest_rate, loan_term_months, investment_return)


def loan_scenario_from_track(
    track: FinanceTrack,
    loan_interest_rate: float,
    loan_term_months: int,
    investment_return: float,
) -> LoanScenario:
    """Round a finance track into a scenario, overlaying the loan balance per month."""
    overlay_months = min(len(track.investment_values), loan_term_months)
    balances = [balance for _, _, balance in amortize(track.loan_amount, loan_interest_rate, track.monthly_payment, overlay_months)]

    points: List[MonthlyOpportunityPoint] = []
    for month, value in enumerate(track.investment_values, start=1):
        in_term = month <= loan_term_months
        loan_balance = balances[month - 1] if in_term else 0.0
        points.append(
            MonthlyOpportunityPoint(
                month=month,
                investment_contribution=round(track.net_monthly_investment, 2),
                investment_value=round(value, 2),
                net_worth=round(value - loan_balance, 2),
                loan_balance=round(loan_balance, 2),
                loan_payment=round(track.monthly_payment, 2) if in_term else 0.0,
            )
        )

    opportunity = _opportunity(track.remaining_savings, track.net_monthly_investment, track.investment_values, points)
    return LoanScenario(
        down_payment=round(track.down_payment, 2),
        loan_amount=round(track.loan_amount, 2),
        interest_rate=loan_interest_rate,
        loan_term_months=loan_term_months,
        monthly_payment=round(track.monthly_payment, 2),
        total_interest=round(track.total_interest, 2),
        total_cost=round(track.total_cost, 2),
        remaining_savings=round(track.remaining_savings, 2),
        investment_return=investment_return,
        monthly_investment=round(track.net_monthly_investment, 2),
        final_assets=opportunity.final_value,
        opportunity=opportunity,
    )


def calculate_purchase_simulation(
    goal_id: str,
    product_name: str,
    product_price: float,
    current_savings: float,
    loan_terms: LoanTerms,
    investment_return: float,
    projected_years: float,
    monthly_investment_capacity: float,
) -> PurchaseSimulation:
    lump_sum = calculate_lump_sum_scenario(
        product_price,
        current_savings,
        investment_return,
        projected_years,
        monthly_investment_capacity,
    )
    track = finance_track(
        product_price,
        current_savings,
        loan_terms.down_payment_percentage,
        loan_terms.interest_rate,
        loan_terms.term_months,
        investment_return,
        projected_years,
        monthly_investment_capacity,
    )
    loan = loan_scenario_from_track(track, loan_terms.interest_rate, loan_terms.term_months, investment_return)

    lump_sum_values = investment_values(
        max(0.0, current_savings - product_price),
        monthly_investment_capacity,
        investment_return,
        horizon_months(projected_years),
    )
    lump_sum_net_worth = lump_sum_values[-1] if lump_sum_values else max(0.0, current_savings - product_price)
    # financing is penalised by what it costs over the cash price
    loan_net_worth = track.final_value - (track.total_cost - product_price)
    difference = lump_sum_net_worth - loan_net_worth
    # a zero difference favours financing
    recommendation = Recommendation.PAY_IN_FULL if difference > 0 else Recommendation.FINANCE

    logger.debug("purchase %s: %s by %.2f", goal_id, recommendation.value, difference)
    return PurchaseSimulation(
        goal_id=goal_id,
        product_name=product_name,
        product_price=round(product_price, 2),
        current_savings=round(current_savings, 2),
        lump_sum_scenario=lump_sum,
        loan_scenario=loan,
        recommendation=recommendation,
        total_difference=float(round(abs(difference))),
    )


def calculate_roi(initial_investment: float, final_assets: float, total_cost: float) -> float:
    """Percent gain of ``final_assets`` over ``total_cost``.

    ``initial_investment`` is accepted for symmetry with the scenario inputs; the
    return is measured against what the purchase cost.
    """
    if total_cost <= 0:
        return 0.0
    return (final_assets - total_cost) / total_cost * 100


__all__ = [
    "FinanceTrack",
    "calculate_loan_scenario",
    "calculate_lump_sum_scenario",
    "calculate_opportunity_analysis",
    "calculate_purchase_simulation",
    "calculate_roi",
    "finance_track",
    "horizon_months",
    "investment_values",
    "loan_scenario_from_track",
]
