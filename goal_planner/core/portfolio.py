"""Asset-allocation helpers: expected portfolio return and risk-based presets."""

from __future__ import annotations

from typing import Dict, List

from goal_planner.models import PortfolioAllocation, RiskTolerance
from goal_planner.schemas.goal import AllocationRecommendation, RiskProfile

# Long-run annual return assumed per asset class.
ASSET_CLASS_RETURNS: Dict[str, float] = {
    "stocks": 0.08,
    "bonds": 0.03,
    "cash": 0.001,
    "others": 0.05,
}

RISK_PROFILES: List[RiskProfile] = [
    RiskProfile(
        level="conservative",
        expected_return=0.03,
        volatility=0.05,
        description="Stability first: bond-heavy portfolio",
    ),
    RiskProfile(
        level="moderate",
        expected_return=0.06,
        volatility=0.12,
        description="Balanced mix of stocks and bonds",
    ),
    RiskProfile(
        level="aggressive",
        expected_return=0.10,
        volatility=0.20,
        description="Growth first: equity-heavy portfolio",
    ),
]

# Starting percentages per risk tolerance.
BASE_ALLOCATIONS: Dict[str, Dict[str, float]] = {
    "low": {"stocks": 20, "bonds": 60, "cash": 20},
    "medium": {"stocks": 50, "bonds": 30, "cash": 20},
    "high": {"stocks": 70, "bonds": 20, "cash": 10},
}

EXPECTED_RETURNS: Dict[str, float] = {
    "low": 0.03,
    "medium": 0.05,
    "high": 0.08,
}


def calculate_portfolio_return(allocation: PortfolioAllocation) -> float:
    """Weighted annual return of an allocation given in percent."""
    return (
        allocation.stocks / 100 * ASSET_CLASS_RETURNS["stocks"]
        + allocation.bonds / 100 * ASSET_CLASS_RETURNS["bonds"]
        + allocation.cash / 100 * ASSET_CLASS_RETURNS["cash"]
        + allocation.others / 100 * ASSET_CLASS_RETURNS["others"]
    )


def recommend_allocation(time_horizon: float, risk_tolerance: RiskTolerance) -> AllocationRecommendation:
    """
    Start from the preset for ``risk_tolerance`` and tilt it by horizon:
    more stocks beyond 10 years, fewer under 3. Cash takes up the remainder.
    """
    allocation = dict(BASE_ALLOCATIONS[risk_tolerance])

    if time_horizon > 10:
        allocation["stocks"] = min(allocation["stocks"] + 10, 80)
        allocation["bonds"] = max(allocation["bonds"] - 5, 10)
    elif time_horizon < 3:
        allocation["stocks"] = max(allocation["stocks"] - 10, 10)
        allocation["bonds"] = min(allocation["bonds"] + 5, 70)
    allocation["cash"] = 100 - allocation["stocks"] - allocation["bonds"]

    return AllocationRecommendation(
        stocks=allocation["stocks"],
        bonds=allocation["bonds"],
        cash=allocation["cash"],
        expected_return=EXPECTED_RETURNS[risk_tolerance],
        risk_level=risk_tolerance,
        time_horizon=time_horizon,
    )
