from __future__ import annotations

from math import isclose

from goal_planner.core.loans import (
    amortization_schedule,
    amortize,
    check_loan_affordability,
    compare_loan_offers,
    suggest_optimal_loan_terms,
)


def test_schedule_pays_off_the_loan():
    schedule = amortization_schedule(20_000, 0.05, 48)
    balances = [row.remaining_balance for row in schedule.payments]

    assert len(schedule.payments) == 48
    assert balances[-1] == 0.0
    assert balances == sorted(balances, reverse=True)
    assert isclose(schedule.total_interest, schedule.total_payment - 20_000, abs_tol=0.05)


def test_interest_portion_shrinks_over_time():
    schedule = amortization_schedule(100_000, 0.06, 120)
    first, last = schedule.payments[0], schedule.payments[-1]

    assert first.interest_portion == 500.0
    assert last.interest_portion < first.interest_portion
    assert last.principal_portion > first.principal_portion


def test_zero_rate_schedule_is_straight_line():
    schedule = amortization_schedule(1200, 0.0, 12)

    assert schedule.monthly_payment == 100
    assert schedule.total_interest == 0
    assert [row.remaining_balance for row in schedule.payments[:3]] == [1100, 1000, 900]


def test_amortize_never_goes_negative():
    rows = amortize(1000, 0.0, 400, 4)
    assert [balance for _, _, balance in rows] == [600, 200, 0, 0]


def test_affordability_respects_safety_margin():
    result = check_loan_affordability(5000, 3000, 1500)
    assert result.affordable
    assert result.max_affordable_payment == 1600
    assert result.reason is None

    result = check_loan_affordability(5000, 3000, 1700)
    assert not result.affordable
    assert result.reason

    assert check_loan_affordability(5000, 3000, 2000, safety_margin_percentage=0).affordable


def test_suggestion_picks_best_rate_and_shortest_term():
    suggestion = suggest_optimal_loan_terms(25_000, 1000, [0.05, 0.03])

    assert suggestion.interest_rate == 0.03
    assert suggestion.term_months == 36
    assert suggestion.within_budget
    assert suggestion.monthly_payment <= 800


def test_suggestion_falls_back_when_nothing_fits():
    suggestion = suggest_optimal_loan_terms(25_000, 10, [0.04])

    assert suggestion.term_months == 12
    assert not suggestion.within_budget


def test_loan_offers_against_income():
    comparison = compare_loan_offers(300_000, 60_000, 120_000)

    assert comparison.max_loan_amount == 240_000
    assert comparison.max_monthly_payment == 2500
    assert [offer.name for offer in comparison.all_offers] == ["short", "medium", "long"]
    assert [offer.name for offer in comparison.recommendations] == ["medium", "long"]

    short = comparison.all_offers[0]
    assert not short.affordable
    assert isclose(short.payment_to_income_ratio, short.monthly_payment * 12 / 120_000, abs_tol=1e-4)
