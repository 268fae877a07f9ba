"""Month-by-month investment simulations."""

from __future__ import annotations

import math
from typing import List

from pydantic import BaseModel, Field, ValidationError

from backend.core.projection import MONTHS_PER_YEAR, InvalidProjectionInput

DEFAULT_GOAL_MAX_MONTHS = 600
# 100 years of months and a 100% annual rate bound every simulation
MAX_SIMULATION_MONTHS = 1200
MAX_INTEREST_RATE = 100.0


class MonthlyPoint(BaseModel):
    """Balance at the end of a month."""

    month: int = Field(..., ge=0)
    value: float
    interest: float
    invested: float


class SimulationResult(BaseModel):
    finalAmount: float
    totalInvested: float
    totalInterest: float
    monthlyBreakdown: List[MonthlyPoint]


class GoalSimulationResult(SimulationResult):
    monthsToReach: int = Field(..., ge=0)
    reached: bool


class InvestmentSummary(BaseModel):
    futureValue: float
    totalContributions: float
    totalReturns: float
    monthlyReturn: float
    roi: float
    timePeriodYears: float


class _MonthlyInputs(BaseModel):
    initialAmount: float = Field(ge=0, allow_inf_nan=False)
    monthlyContribution: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    interestRate: float = Field(ge=0, le=MAX_INTEREST_RATE, allow_inf_nan=False)


class _StandardInputs(_MonthlyInputs):
    months: int = Field(ge=1, le=MAX_SIMULATION_MONTHS)


class _GoalInputs(_MonthlyInputs):
    goalAmount: float = Field(gt=0, allow_inf_nan=False)
    maxMonths: int = Field(default=DEFAULT_GOAL_MAX_MONTHS, ge=1, le=MAX_SIMULATION_MONTHS)


def _validated(model: type, **values):
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidProjectionInput.from_validation_error(exc) from exc


def _check_finite(*amounts: float) -> None:
    if not all(math.isfinite(amount) for amount in amounts):
        raise InvalidProjectionInput(["simulation overflows: amounts too large"])


def round_currency(amount: float) -> float:
    return round(amount, 2)


def simulate_standard(
    initial_amount: float,
    monthly_contribution: float,
    interest_rate: float,
    months: int,
) -> SimulationResult:
    """
    Simulate a fixed number of months.

    Each month the current balance earns interest at interest_rate / 100 / 12,
    then the contribution is deposited (it earns nothing that month).
    """
    inputs = _validated(
        _StandardInputs,
        initialAmount=initial_amount,
        monthlyContribution=monthly_contribution,
        interestRate=interest_rate,
        months=months,
    )
    monthly_rate = inputs.interestRate / 100 / MONTHS_PER_YEAR

    balance = inputs.initialAmount
    invested = inputs.initialAmount
    breakdown: List[MonthlyPoint] = []
    for month in range(1, inputs.months + 1):
        interest = balance * monthly_rate
        balance += interest + inputs.monthlyContribution
        invested += inputs.monthlyContribution
        breakdown.append(MonthlyPoint(month=month, value=balance, interest=interest, invested=invested))

    _check_finite(balance, invested)

    return SimulationResult(
        finalAmount=balance,
        totalInvested=invested,
        totalInterest=balance - invested,
        monthlyBreakdown=breakdown,
    )


def simulate_goal(
    goal_amount: float,
    initial_amount: float,
    monthly_contribution: float,
    interest_rate: float,
    max_months: int = DEFAULT_GOAL_MAX_MONTHS,
) -> GoalSimulationResult:
    """Run months until the balance reaches goal_amount or max_months is hit."""
    inputs = _validated(
        _GoalInputs,
        goalAmount=goal_amount,
        initialAmount=initial_amount,
        monthlyContribution=monthly_contribution,
        interestRate=interest_rate,
        maxMonths=max_months,
    )
    monthly_rate = inputs.interestRate / 100 / MONTHS_PER_YEAR

    balance = inputs.initialAmount
    invested = inputs.initialAmount
    breakdown = [MonthlyPoint(month=0, value=balance, interest=0.0, invested=invested)]

    month = 0
    while balance < inputs.goalAmount and month < inputs.maxMonths:
        month += 1
        interest = balance * monthly_rate
        balance += interest + inputs.monthlyContribution
        invested += inputs.monthlyContribution
        breakdown.append(MonthlyPoint(month=month, value=balance, interest=interest, invested=invested))

    _check_finite(balance, invested)

    return GoalSimulationResult(
        monthsToReach=month,
        reached=balance >= inputs.goalAmount,
        finalAmount=balance,
        totalInvested=invested,
        totalInterest=balance - invested,
        monthlyBreakdown=breakdown,
    )


def summarize_investment(
    initial_amount: float,
    monthly_contribution: float,
    annual_return_rate: float,
    time_period_months: int,
) -> InvestmentSummary:
    result = simulate_standard(initial_amount, monthly_contribution, annual_return_rate, time_period_months)
    returns = result.finalAmount - result.totalInvested
    roi = returns / result.totalInvested * 100 if result.totalInvested > 0 else 0.0

    return InvestmentSummary(
        futureValue=round_currency(result.finalAmount),
        totalContributions=round_currency(result.totalInvested),
        totalReturns=round_currency(returns),
        # monthly rate as a percentage, e.g. 12% a year -> 1.0
        monthlyReturn=round_currency(annual_return_rate / MONTHS_PER_YEAR),
        roi=round_currency(roi),
        timePeriodYears=round_currency(time_period_months / MONTHS_PER_YEAR),
    )
