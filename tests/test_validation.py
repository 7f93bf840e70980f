from __future__ import annotations

from datetime import date

import pytest

from goal_planner.domain.validation import (
    PlanValidationError,
    ensure_financial_plan,
    validate_amount,
    validate_financial_plan,
    validate_future_date,
    validate_interest_rate,
    validate_percentage,
    validate_portfolio_allocation,
)


def test_amount_bounds():
    assert validate_amount(0) is None
    assert validate_amount(-1)
    assert validate_amount(1e13)
    assert validate_amount(float("nan"))


def test_percentage_bounds():
    assert validate_percentage(50) is None
    assert validate_percentage(101)
    assert validate_percentage(5, minimum=10)


@pytest.mark.parametrize(
    ("rate", "kind", "ok"),
    [
        (0.05, "savings", True),
        (0.2, "savings", False),
        (-0.2, "investment", True),
        (-0.6, "investment", False),
        (0.2, "loan", True),
        (-0.01, "loan", False),
    ],
)
def test_interest_rate_bounds(rate, kind, ok):
    assert (validate_interest_rate(rate, kind) is None) == ok


def test_portfolio_allocation_total():
    assert validate_portfolio_allocation(50, 30, 20) is None
    assert "100%" in validate_portfolio_allocation(50, 30, 30)


def test_future_date():
    today = date(2024, 6, 1)
    assert validate_future_date(date(2024, 6, 2), today) is None
    assert validate_future_date(today, today)


def test_sound_plan_has_no_errors():
    assert validate_financial_plan(50_000, 10_000, 1000, 3) == []


def test_plan_collects_every_problem():
    errors = validate_financial_plan(1000, 2000, 0, 0)
    assert len(errors) == 3


def test_plan_flags_contributions_far_below_gap():
    errors = validate_financial_plan(100_000, 0, 100, 5)
    assert errors == ["monthly amount is too low to reach the target; save more or extend the timeline"]


def test_ensure_plan_raises_with_all_errors():
    with pytest.raises(PlanValidationError) as excinfo:
        ensure_financial_plan(100_000, 0, 50, 60)
    assert len(excinfo.value.errors) == 2
    assert isinstance(excinfo.value, ValueError)
