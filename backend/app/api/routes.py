"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.health import get_health
from backend.core.overview import build_balance_summary, category_breakdown
from backend.core.projection import InvalidProjectionInput, project_investment_breakdown
from backend.core.savings import InvalidSavingsInput, calculate_savings_rate
from backend.core.simulation import simulate_goal, simulate_standard, summarize_investment
from backend.domain.simulations import SimulationNotFound, SimulationStore
from backend.schemas.investment import (
    GoalPayload,
    ProjectionPayload,
    SimulatePayload,
    SimulationUpdatePayload,
    SummaryPayload,
)
from backend.schemas.overview import (
    OverviewPayload,
    OverviewResponse,
    SavingsRatePayload,
    SavingsRateResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _json_body() -> Any:
    return request.get_json(force=True, silent=False)


def _store() -> SimulationStore:
    return current_app.extensions["simulation_store"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected request to %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidProjectionInput)
def _handle_invalid_projection(exc: InvalidProjectionInput):
    logger.info("rejected projection input on %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidSavingsInput)
def _handle_invalid_savings(exc: InvalidSavingsInput):
    return jsonify({"error": [str(exc)]}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(SimulationNotFound)
def _handle_not_found(exc: SimulationNotFound):
    return jsonify({"error": [str(exc)]}), HTTPStatus.NOT_FOUND


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(get_health(current_app.config["SETTINGS"]).model_dump())


@api_bp.post("/investments/projection")
def projection() -> Any:
    """Project the final balance of a compounding investment."""
    payload = ProjectionPayload.model_validate(_json_body())
    breakdown = project_investment_breakdown(payload.to_request())
    return jsonify(breakdown.model_dump(mode="json"))


@api_bp.post("/investments/simulate")
def simulate() -> Any:
    payload = SimulatePayload.model_validate(_json_body())
    result = simulate_standard(
        payload.initialAmount,
        payload.monthlyContribution,
        payload.interestRate,
        payload.months,
    )
    return jsonify(result.model_dump())


@api_bp.post("/investments/goal")
def goal() -> Any:
    payload = GoalPayload.model_validate(_json_body())
    result = simulate_goal(
        payload.goalAmount,
        payload.initialAmount,
        payload.monthlyContribution,
        payload.interestRate,
        max_months=current_app.config["SETTINGS"].GOAL_MAX_MONTHS,
    )
    return jsonify(result.model_dump())


@api_bp.post("/investments/summary")
def summary() -> Any:
    payload = SummaryPayload.model_validate(_json_body())
    result = summarize_investment(
        payload.initialAmount,
        payload.monthlyContribution,
        payload.annualReturnRate,
        payload.timePeriodMonths,
    )
    return jsonify(result.model_dump())


@api_bp.post("/savings-rate")
def savings_rate() -> Any:
    payload = SavingsRatePayload.model_validate(_json_body())
    rate = calculate_savings_rate(payload.totalIncome, payload.totalExpenses)
    response = SavingsRateResponse(defined=rate.defined, savingsRate=rate.percent)
    return jsonify(response.model_dump())


@api_bp.post("/overview")
def overview() -> Any:
    """Balance summary plus per-category breakdowns for the dashboard."""
    payload = OverviewPayload.model_validate(_json_body())
    total_income = sum(entry.amount for entry in payload.incomes)
    total_expenses = sum(entry.amount for entry in payload.expenses)
    response = OverviewResponse(
        balance=build_balance_summary(total_income, total_expenses),
        incomeByCategory=category_breakdown(payload.incomes),
        expensesByCategory=category_breakdown(payload.expenses),
    )
    return jsonify(response.model_dump())


@api_bp.get("/investment-simulations")
def list_simulations() -> Any:
    return jsonify([record.model_dump(mode="json") for record in _store().list()])


@api_bp.post("/investment-simulations")
def create_simulation() -> Any:
    """Run a projection and save it with its finalAmount."""
    payload = ProjectionPayload.model_validate(_json_body())
    record = _store().create(payload.to_request(), name=payload.name)
    return jsonify(record.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.get("/investment-simulations/<simulation_id>")
def get_simulation(simulation_id: str) -> Any:
    return jsonify(_store().get(simulation_id).model_dump(mode="json"))


@api_bp.delete("/investment-simulations/<simulation_id>")
def delete_simulation(simulation_id: str) -> Any:
    _store().delete(simulation_id)
    response: Dict[str, str] = {"message": "Investment simulation deleted successfully"}
    return jsonify(response)


@api_bp.put("/investment-simulations/<simulation_id>")
def update_simulation(simulation_id: str) -> Any:
    """Change saved inputs and store the recalculated finalAmount."""
    payload = SimulationUpdatePayload.model_validate(_json_body())
    record = _store().update(simulation_id, payload.model_dump(exclude_unset=True))
    return jsonify(record.model_dump(mode="json"))


@api_bp.get("/investment-simulations/<simulation_id>/calculate")
def calculate_simulation(simulation_id: str) -> Any:
    """Saved simulation with its full projection breakdown attached."""
    record = _store().get(simulation_id)
    calculation = project_investment_breakdown(record.to_request())
    return jsonify({**record.model_dump(mode="json"), "calculation": calculation.model_dump(mode="json")})
