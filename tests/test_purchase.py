from __future__ import annotations

from math import isclose

import pytest

from goal_planner.core.compounding import level_payment
from goal_planner.core.purchase import (
    calculate_loan_scenario,
    calculate_lump_sum_scenario,
    calculate_opportunity_analysis,
    calculate_purchase_simulation,
    calculate_roi,
    horizon_months,
)
from goal_planner.schemas.purchase import LoanTerms, Recommendation


def test_roi_examples():
    assert calculate_roi(1000, 1000, 1000) == 0
    assert calculate_roi(1000, 1100, 1000) == 10
    assert calculate_roi(1000, 1100, 0) == 0


def test_horizon_months_rounds_half_up():
    assert horizon_months(1) == 12
    assert horizon_months(2.5) == 30
    assert horizon_months(0.125) == 2


def test_opportunity_analysis_totals():
    analysis = calculate_opportunity_analysis(1000, 100, 0.0, 12)

    assert analysis.total_invested == 2200
    assert analysis.final_value == 2200
    assert analysis.investment_returns == 0
    assert len(analysis.monthly_projections) == 12
    assert analysis.monthly_projections[0].net_worth == 1100


def test_lump_sum_spends_savings_first():
    scenario = calculate_lump_sum_scenario(30_000, 20_000, 0.05, 3, 500)

    assert scenario.remaining_savings == 0
    assert scenario.total_cost == 30_000
    assert len(scenario.opportunity.monthly_projections) == 36
    assert scenario.final_assets == scenario.opportunity.final_value


@pytest.mark.parametrize("rate", [0.01, 0.035, 0.12])
def test_financing_costs_at_least_the_price(rate):
    scenario = calculate_loan_scenario(25_000, 10_000, 20, rate, 60, 0.05, 5, 1000)
    assert scenario.total_cost >= 25_000
    assert scenario.total_interest > 0


def test_zero_rate_financing_costs_exactly_the_price():
    scenario = calculate_loan_scenario(24_000, 10_000, 0, 0.0, 24, 0.05, 2, 2000)

    assert scenario.total_cost == 24_000
    assert scenario.total_interest == 0
    assert scenario.monthly_payment == 1000


def test_loan_payment_crowds_out_investment():
    scenario = calculate_loan_scenario(30_000, 5_000, 10, 0.05, 36, 0.05, 3, 300)

    assert scenario.monthly_payment > 300
    assert scenario.monthly_investment == 0
    for point in scenario.opportunity.monthly_projections:
        assert point.investment_contribution == 0


def test_loan_balance_overlay_and_net_worth():
    scenario = calculate_loan_scenario(12_000, 20_000, 0, 0.06, 12, 0.04, 2, 2000)
    points = scenario.opportunity.monthly_projections

    assert len(points) == 24
    balances = [point.loan_balance for point in points[:12]]
    assert balances == sorted(balances, reverse=True)
    assert isclose(points[11].loan_balance, 0.0, abs_tol=0.01)

    for point in points[:12]:
        assert point.loan_payment == scenario.monthly_payment
        assert isclose(point.net_worth, point.investment_value - point.loan_balance, abs_tol=0.02)
    for point in points[12:]:
        assert point.loan_balance == 0
        assert point.loan_payment == 0
        assert point.net_worth == point.investment_value


def test_costly_loan_without_returns_recommends_paying_in_full():
    price, rate = 12_000, 0.06
    simulation = calculate_purchase_simulation(
        "car",
        "Compact car",
        price,
        20_000,
        LoanTerms(down_payment_percentage=0, interest_rate=rate, term_months=12),
        0.0,
        1,
        2000,
    )

    interest = level_payment(price, rate, 12) * 12 - price
    assert simulation.recommendation == Recommendation.PAY_IN_FULL
    # the loan pays interest once in cost and once in crowded-out investment
    assert simulation.total_difference == pytest.approx(2 * interest, abs=1)
    assert simulation.total_difference == round(simulation.total_difference)


def test_identical_outcomes_favour_financing():
    """Fully funded, interest-free 'loan' matches paying in full exactly."""
    simulation = calculate_purchase_simulation(
        "tv",
        "Television",
        1000,
        1000,
        LoanTerms(down_payment_percentage=100, interest_rate=0.0, term_months=12),
        0.05,
        2,
        100,
    )

    assert simulation.lump_sum_scenario.final_assets == simulation.loan_scenario.final_assets
    assert simulation.total_difference == 0
    assert simulation.recommendation == Recommendation.FINANCE


def test_cheap_loan_with_strong_returns_recommends_financing():
    simulation = calculate_purchase_simulation(
        "house",
        "Apartment",
        100_000,
        120_000,
        LoanTerms(down_payment_percentage=0, interest_rate=0.005, term_months=120),
        0.08,
        10,
        2000,
    )

    assert simulation.recommendation == Recommendation.FINANCE
    assert simulation.total_difference > 0
