"""Down-payment sweep for the finance branch."""

from __future__ import annotations

import logging
from typing import List

from goal_planner.core.purchase import calculate_roi, finance_track
from goal_planner.schemas.purchase import DownPaymentSweep, SweepPoint

logger = logging.getLogger(__name__)


def find_optimal_down_payment(
    product_price: float,
    current_savings: float,
    loan_interest_rate: float,
    loan_term_months: int,
    investment_return: float,
    projected_years: float,
    monthly_investment_capacity: float,
    min_down_payment: int = 0,
    max_down_payment: int = 100,
) -> DownPaymentSweep:
    """
    Evaluate every whole-percent down payment in ``[min, max]``.

    Percentages whose down payment exceeds savings stay in the output with
    ``feasible=False`` and ROI of ``-inf``. Ties keep the lowest percentage.
    """
    analysis: List[SweepPoint] = []
    max_roi = float("-inf")
    optimal = min_down_payment

    for pct in range(min_down_payment, max_down_payment + 1):
        if product_price * (pct / 100) > current_savings:
            analysis.append(
                SweepPoint(
                    down_payment=pct,
                    roi=float("-inf"),
                    final_assets=0.0,
                    total_cost=0.0,
                    monthly_payment=0.0,
                    feasible=False,
                )
            )
            continue

        track = finance_track(
            product_price,
            current_savings,
            pct,
            loan_interest_rate,
            loan_term_months,
            investment_return,
            projected_years,
            monthly_investment_capacity,
        )
        roi = calculate_roi(current_savings, track.final_value, track.total_cost)
        analysis.append(
            SweepPoint(
                down_payment=pct,
                roi=roi,
                final_assets=round(track.final_value, 2),
                total_cost=round(track.total_cost, 2),
                monthly_payment=round(track.monthly_payment, 2),
                feasible=True,
            )
        )

        if roi > max_roi:
            max_roi = roi
            optimal = pct

    logger.debug("optimal down payment %d%% (roi %.4f)", optimal, max_roi)
    return DownPaymentSweep(optimal_down_payment=optimal, max_roi=max_roi, roi_analysis=analysis)
