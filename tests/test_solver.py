from __future__ import annotations

from datetime import date
from math import isclose

from goal_planner.core.scenarios import balance_after
from goal_planner.core.solver import (
    completion_date,
    required_payment,
    required_periods,
    step_balance,
)
from goal_planner.schemas.common import Horizon


def test_step_balance_reports_period_return():
    balance, period_return = step_balance(1000, 0.01, 50)
    assert isclose(period_return, 10.0)
    assert isclose(balance, 1060.0)


def test_goal_already_met_needs_zero_periods():
    assert required_periods(5000, 5000, 100, 0.01) == Horizon.reached_in(0)
    assert required_periods(6000, 5000, 0, 0.01).months == 0


def test_no_contribution_is_unreachable():
    for payment in (0, -10):
        horizon = required_periods(1000, 5000, payment, 0.01)
        assert not horizon.is_reached
        assert horizon.months is None


def test_zero_rate_counts_whole_payments():
    horizon = required_periods(0, 1000, 300, 0.0)
    assert horizon.is_reached
    assert horizon.months == 4


def test_ceiling_makes_target_unreachable():
    assert not required_periods(0, 1_000_000, 10, 0.0).is_reached
    assert not required_periods(0, 1000, 1, 0.0, max_months=999).is_reached
    assert required_periods(0, 1000, 1, 0.0, max_months=1000).months == 1000


def test_required_payment_round_trip_reaches_target():
    current, target, rate, years = 1000.0, 50000.0, 0.06, 10
    payment = required_payment(current, target, rate, years)

    assert payment > 0
    assert isclose(balance_after(current, rate / 12, payment, years * 12), target, abs_tol=0.01)


def test_required_payment_without_interest():
    assert isclose(required_payment(0, 12000, 0.0, 1), 1000.0)


def test_required_payment_is_zero_when_current_covers_target():
    assert required_payment(100000, 50000, 0.03, 5) == 0
    assert required_payment(0, 50000, 0.03, 0) == 0


def test_completion_date_adds_calendar_months():
    start = date(2024, 1, 31)
    assert completion_date(Horizon.reached_in(1), start) == date(2024, 2, 29)
    assert completion_date(Horizon.reached_in(0), start) == start
    assert completion_date(Horizon.unreachable(), start) is None
