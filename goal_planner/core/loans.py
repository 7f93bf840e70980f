"""Level-payment loans: schedules, affordability and term suggestions."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from goal_planner.config import (
    AFFORDABILITY_SAFETY_MARGIN_PCT,
    DEFAULT_LOAN_OFFERS,
    MAX_PAYMENT_TO_INCOME,
)
from goal_planner.core.compounding import level_payment
from goal_planner.schemas.loan import (
    Affordability,
    LoanComparison,
    LoanOffer,
    LoanPayment,
    LoanSchedule,
    LoanSuggestion,
)

logger = logging.getLogger(__name__)


def amortize(principal: float, annual_rate: float, payment: float, months: int) -> List[Tuple[float, float, float]]:
    """
    Split ``months`` payments into ``(principal_portion, interest_portion, balance)``.

    The balance is clamped at zero and never increases.
    """
    monthly_rate = annual_rate / 12
    balance = principal
    rows: List[Tuple[float, float, float]] = []
    for _ in range(months):
        interest = balance * monthly_rate
        principal_portion = payment - interest
        balance = max(0.0, balance - principal_portion)
        rows.append((principal_portion, interest, balance))
    return rows


def amortization_schedule(principal: float, annual_rate: float, term_months: int) -> LoanSchedule:
    payment = level_payment(principal, annual_rate, term_months)
    rows = amortize(principal, annual_rate, payment, term_months)

    payments: List[LoanPayment] = []
    total_interest = 0.0
    for month, (principal_portion, interest, balance) in enumerate(rows, start=1):
        total_interest += interest
        if month == term_months:
            # level payment leaves only float dust on the last period
            balance = 0.0
        payments.append(
            LoanPayment(
                month=month,
                payment=round(payment, 2),
                principal_portion=round(principal_portion, 2),
                interest_portion=round(interest, 2),
                remaining_balance=round(balance, 2),
            )
        )

    return LoanSchedule(
        monthly_payment=round(payment, 2),
        total_payment=round(payment * term_months, 2),
        total_interest=round(total_interest, 2),
        payments=payments,
    )


def check_loan_affordability(
    monthly_income: float,
    monthly_expenses: float,
    monthly_loan_payment: float,
    safety_margin_percentage: float = AFFORDABILITY_SAFETY_MARGIN_PCT,
) -> Affordability:
    """A payment is affordable if it fits in free cash flow minus a safety margin."""
    available = monthly_income - monthly_expenses
    max_payment = available - available * (safety_margin_percentage / 100)

    if monthly_loan_payment > max_payment:
        return Affordability(
            affordable=False,
            max_affordable_payment=round(max_payment, 2),
            reason=f"monthly payment exceeds what income allows (available: {max_payment:,.0f})",
        )
    return Affordability(affordable=True, max_affordable_payment=round(max_payment, 2))


def suggest_optimal_loan_terms(
    product_price: float,
    monthly_budget: float,
    available_rates: Sequence[float],
    down_payment_percentage: float = 20.0,
) -> LoanSuggestion:
    """
    Pick the cheapest rate and the shortest term (in whole years, up to 30)
    whose payment fits 80% of ``monthly_budget``.

    Falls back to a 12 month term flagged ``within_budget=False`` when no term fits.
    """
    best_rate = min(available_rates)
    loan_amount = product_price * (1 - down_payment_percentage / 100)

    term = 12
    within_budget = False
    for months in range(12, 361, 12):
        if level_payment(loan_amount, best_rate, months) <= monthly_budget * 0.8:
            term = months
            within_budget = True
            break

    return LoanSuggestion(
        interest_rate=best_rate,
        term_months=term,
        down_payment_percentage=down_payment_percentage,
        monthly_payment=round(level_payment(loan_amount, best_rate, term), 2),
        within_budget=within_budget,
    )


def compare_loan_offers(
    target_amount: float,
    available_down_payment: float,
    annual_income: float,
    offers: Sequence[Tuple[str, int, float]] = DEFAULT_LOAN_OFFERS,
) -> LoanComparison:
    max_loan = target_amount - available_down_payment
    max_monthly_payment = annual_income * MAX_PAYMENT_TO_INCOME / 12

    evaluated: List[LoanOffer] = []
    for name, years, rate in offers:
        months = years * 12
        payment = level_payment(max_loan, rate, months)
        total_payment = payment * months
        evaluated.append(
            LoanOffer(
                name=name,
                years=years,
                rate=rate,
                amount=round(max_loan, 2),
                monthly_payment=round(payment, 2),
                total_interest=round(total_payment - max_loan, 2),
                total_payment=round(total_payment, 2),
                affordable=payment <= max_monthly_payment,
                payment_to_income_ratio=(payment * 12) / annual_income if annual_income > 0 else 0.0,
            )
        )

    logger.debug("%d of %d loan offers affordable", sum(o.affordable for o in evaluated), len(evaluated))
    return LoanComparison(
        max_loan_amount=round(max_loan, 2),
        max_monthly_payment=round(max_monthly_payment, 2),
        recommendations=[offer for offer in evaluated if offer.affordable],
        all_offers=evaluated,
    )
