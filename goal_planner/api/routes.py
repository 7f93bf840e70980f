"""HTTP routes for the Flask API."""

import math
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from goal_planner.config import Settings
from goal_planner.core.compounding import compound_interest_schedule
from goal_planner.core.goal_plan import calculate_goal_plan
from goal_planner.core.loans import (
    amortization_schedule,
    check_loan_affordability,
    compare_loan_offers,
    suggest_optimal_loan_terms,
)
from goal_planner.core.optimization import find_optimal_down_payment
from goal_planner.core.portfolio import RISK_PROFILES, calculate_portfolio_return, recommend_allocation
from goal_planner.core.purchase import calculate_purchase_simulation
from goal_planner.core.scenarios import calculate_investment_simulation
from goal_planner.core.solver import required_payment
from goal_planner.domain.validation import PlanValidationError, ensure_financial_plan
from goal_planner.models import AllocationRequest, GoalPlanRequest, PortfolioAllocation
from goal_planner.schemas.investment import (
    CompoundInterestRequest,
    InvestmentSimulationRequest,
    PlanCheckRequest,
    RequiredPaymentRequest,
    RequiredPaymentResponse,
)
from goal_planner.schemas.loan import (
    AffordabilityRequest,
    LoanOffersRequest,
    LoanScheduleRequest,
    LoanSuggestionRequest,
)
from goal_planner.schemas.purchase import DownPaymentSweepRequest, PurchaseSimulationRequest

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _respond(result: BaseModel) -> Any:
    return jsonify(result.model_dump(mode="json"))


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(PlanValidationError)
def _handle_plan_error(exc: PlanValidationError):
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    return jsonify({"status": "ok"})


@api_bp.post("/investment/simulation")
def investment_simulation() -> Any:
    """Months to goal, trajectory and scenario bands for monthly investing."""
    payload = InvestmentSimulationRequest.model_validate(_payload())
    settings = _settings()
    result = calculate_investment_simulation(
        payload.goal_id,
        payload.current_amount,
        payload.target_amount,
        payload.monthly_investment,
        payload.annual_return,
        start=payload.start_date,
        volatility=settings.scenario_volatility,
        floor=settings.conservative_return_floor,
        max_months=settings.max_horizon_months,
        point_limit=settings.trajectory_point_limit,
    )
    return _respond(result)


@api_bp.post("/investment/required-payment")
def investment_required_payment() -> Any:
    payload = RequiredPaymentRequest.model_validate(_payload())
    amount = required_payment(payload.current_amount, payload.target_amount, payload.annual_rate, payload.years)
    return _respond(RequiredPaymentResponse(required_monthly_payment=round(amount, 2)))


@api_bp.post("/investment/compound-interest")
def investment_compound_interest() -> Any:
    payload = CompoundInterestRequest.model_validate(_payload())
    return _respond(compound_interest_schedule(payload.principal, payload.annual_rate, payload.years))


@api_bp.post("/plans/check")
def plan_check() -> Any:
    """Reject plans that cannot work before any projection is run."""
    payload = PlanCheckRequest.model_validate(_payload())
    ensure_financial_plan(
        payload.target_amount,
        payload.current_amount,
        payload.monthly_amount,
        payload.years,
    )
    return jsonify({"ok": True})


@api_bp.post("/loans/schedule")
def loan_schedule() -> Any:
    payload = LoanScheduleRequest.model_validate(_payload())
    return _respond(amortization_schedule(payload.principal, payload.annual_rate, payload.term_months))


@api_bp.post("/loans/affordability")
def loan_affordability() -> Any:
    payload = AffordabilityRequest.model_validate(_payload())
    margin = payload.safety_margin_percentage
    if margin is None:
        margin = _settings().affordability_safety_margin_pct
    result = check_loan_affordability(
        payload.monthly_income,
        payload.monthly_expenses,
        payload.monthly_loan_payment,
        margin,
    )
    return _respond(result)


@api_bp.post("/loans/suggestion")
def loan_suggestion() -> Any:
    payload = LoanSuggestionRequest.model_validate(_payload())
    return _respond(suggest_optimal_loan_terms(payload.product_price, payload.monthly_budget, payload.available_rates))


@api_bp.post("/loans/offers")
def loan_offers() -> Any:
    payload = LoanOffersRequest.model_validate(_payload())
    return _respond(compare_loan_offers(payload.target_amount, payload.available_down_payment, payload.annual_income))


@api_bp.post("/purchase/simulation")
def purchase_simulation() -> Any:
    """Pay in full vs. finance and invest the difference."""
    payload = PurchaseSimulationRequest.model_validate(_payload())
    result = calculate_purchase_simulation(
        payload.goal_id,
        payload.product_name,
        payload.product_price,
        payload.current_savings,
        payload.loan_terms,
        payload.investment_return,
        payload.projected_years,
        payload.monthly_investment_capacity,
    )
    return _respond(result)


@api_bp.post("/purchase/optimal-down-payment")
def purchase_optimal_down_payment() -> Any:
    payload = DownPaymentSweepRequest.model_validate(_payload())
    if payload.min_down_payment > payload.max_down_payment:
        raise PlanValidationError(["min_down_payment must not exceed max_down_payment"])

    sweep = find_optimal_down_payment(
        payload.product_price,
        payload.current_savings,
        payload.loan_interest_rate,
        payload.loan_term_months,
        payload.investment_return,
        payload.projected_years,
        payload.monthly_investment_capacity,
        payload.min_down_payment,
        payload.max_down_payment,
    )

    # JSON has no infinity; infeasible points report a null ROI
    body = sweep.model_dump(mode="json")
    for row in body["roi_analysis"]:
        if not row["feasible"]:
            row["roi"] = None
    if body["max_roi"] is None or math.isinf(body["max_roi"]):
        body["max_roi"] = None
    return jsonify(body)


@api_bp.post("/goals/plan")
def goal_plan() -> Any:
    payload = GoalPlanRequest.model_validate(_payload())
    settings = _settings()
    result = calculate_goal_plan(
        payload.goal,
        payload.savings_plans,
        payload.investment_plans,
        payload.today,
        volatility=settings.scenario_volatility,
        max_months=settings.max_horizon_months,
    )
    return _respond(result)


@api_bp.get("/portfolio/risk-profiles")
def portfolio_risk_profiles() -> Any:
    return jsonify([profile.model_dump() for profile in RISK_PROFILES])


@api_bp.post("/portfolio/return")
def portfolio_return() -> Any:
    allocation = PortfolioAllocation.model_validate(_payload())
    return jsonify({"expected_return": calculate_portfolio_return(allocation)})


@api_bp.post("/portfolio/recommendation")
def portfolio_recommendation() -> Any:
    payload = AllocationRequest.model_validate(_payload())
    return _respond(recommend_allocation(payload.time_horizon, payload.risk_tolerance))
