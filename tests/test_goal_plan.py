from __future__ import annotations

from datetime import date

import pytest

from goal_planner.core.goal_plan import calculate_goal_plan, years_until
from goal_planner.models import Goal, InvestmentPlan, SavingsPlan

TODAY = date(2024, 1, 1)


@pytest.fixture()
def goal() -> Goal:
    return Goal(id="g1", title="New car", target_amount=12_000, current_amount=0, deadline=date(2026, 1, 1), category="car")


@pytest.fixture()
def plans():
    savings = [SavingsPlan(goal_id="g1", monthly_amount=600, interest_rate=0.0)]
    investments = [InvestmentPlan(goal_id="g1", monthly_amount=400, expected_return=0.0)]
    return savings, investments


def test_years_until_uses_julian_year():
    assert years_until(date(2025, 1, 1), TODAY) == 366 / 365.25


def test_plan_reaches_goal_with_combined_contributions(goal, plans):
    savings, investments = plans
    plan = calculate_goal_plan(goal, savings, investments, TODAY)

    assert plan.horizon.is_reached
    assert plan.horizon.months == 12
    assert plan.target_date == date(2025, 1, 1)
    assert len(plan.monthly_progress) == 12

    last = plan.monthly_progress[-1]
    assert last.savings_balance == 7200
    assert last.investment_value == 4800
    assert last.total_progress == 12_000
    assert last.progress_percentage == 100
    assert plan.total_savings_needed == 12_000


def test_inactive_and_foreign_plans_are_ignored(goal, plans):
    savings, investments = plans
    noise_savings = savings + [
        SavingsPlan(goal_id="g1", monthly_amount=5000, interest_rate=0.05, is_active=False),
        SavingsPlan(goal_id="other", monthly_amount=5000, interest_rate=0.05),
    ]
    noise_investments = investments + [
        InvestmentPlan(goal_id="other", monthly_amount=5000, expected_return=0.3),
    ]

    assert calculate_goal_plan(goal, noise_savings, noise_investments, TODAY) == calculate_goal_plan(
        goal, savings, investments, TODAY
    )


def test_progress_stops_at_deadline(plans):
    savings, investments = plans
    goal = Goal(id="g1", target_amount=100_000, deadline=date(2024, 7, 1))
    plan = calculate_goal_plan(goal, savings, investments, TODAY)

    assert plan.horizon.is_reached
    assert len(plan.monthly_progress) == 5
    assert plan.monthly_progress[-1].total_progress == 5000


def test_completed_goal():
    goal = Goal(id="g1", target_amount=5000, current_amount=6000, deadline=date(2025, 1, 1))
    plan = calculate_goal_plan(goal, [], [], TODAY)

    assert plan.horizon.months == 0
    assert plan.target_date == TODAY
    assert plan.monthly_progress == []
    assert plan.total_savings_needed == 0
    assert plan.required_monthly_payment == 0


def test_without_plans_goal_is_unreachable():
    goal = Goal(id="g1", target_amount=5000, current_amount=1000, deadline=date(2026, 1, 1))
    plan = calculate_goal_plan(goal, [], [], TODAY)

    assert not plan.horizon.is_reached
    assert plan.target_date is None
    assert len(plan.monthly_progress) == 24
    assert plan.required_monthly_payment > 0
    assert plan.scenarios.pessimistic <= plan.scenarios.expected <= plan.scenarios.optimistic


def test_past_deadline_has_no_progress(goal, plans):
    savings, investments = plans
    plan = calculate_goal_plan(goal, savings, investments, date(2027, 1, 1))

    assert plan.monthly_progress == []
    assert plan.required_monthly_payment == 0
