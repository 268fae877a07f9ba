from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


PERIODS_PER_YEAR: Dict[CompoundingFrequency, int] = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.ANNUALLY: 1,
}

MONTHS_PER_YEAR = 12


class InvalidProjectionInput(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidProjectionInput":
        messages: List[str] = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()))
            messages.append(f"{location}: {error['msg']}" if location else error["msg"])
        return cls(messages)


class InvestmentProjectionRequest(BaseModel):
    """Inputs for a single projection. Amounts in currency units, rate in percent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialAmount: float = Field(ge=0, allow_inf_nan=False)
    monthlyContribution: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    annualRatePercent: float = Field(ge=0, allow_inf_nan=False)
    timeframeYears: int = Field(ge=1)
    compoundingFrequency: CompoundingFrequency = CompoundingFrequency.MONTHLY

    @field_validator("compoundingFrequency", mode="before")
    @classmethod
    def default_when_absent(cls, value: Any) -> Any:
        # only a missing value falls back to monthly; unknown strings still fail
        return CompoundingFrequency.MONTHLY if value is None else value


class ProjectionBreakdown(BaseModel):
    model_config = ConfigDict(extra="forbid")

    compoundingFrequency: CompoundingFrequency
    periodsPerYear: int
    totalPeriods: int
    principalComponent: float
    contributionComponent: float
    finalAmount: float
    totalContributed: float
    totalInterest: float


def validate_projection_request(payload: Mapping[str, Any]) -> InvestmentProjectionRequest:
    """Build a request from raw values, converting pydantic errors to InvalidProjectionInput."""
    try:
        return InvestmentProjectionRequest.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidProjectionInput.from_validation_error(exc) from exc


def periods_per_year(frequency: Union[CompoundingFrequency, str]) -> int:
    try:
        frequency = CompoundingFrequency(frequency)
    except ValueError:
        raise InvalidProjectionInput([f"unknown compounding frequency: {frequency!r}"]) from None
    return PERIODS_PER_YEAR[frequency]


def project_investment_breakdown(request: InvestmentProjectionRequest) -> ProjectionBreakdown:
    """
    Project the balance at the end of the horizon.

    Steps:
      1) rate = annualRatePercent / 100, split evenly over the compounding periods.
      2) Principal grows as initialAmount * (1 + r)^n.
      3) The monthly contribution is rescaled to one deposit per compounding
         period (monthly * 12 / periodsPerYear) and accumulated as an ordinary
         annuity: deposit * ((1 + r)^n - 1) / r.
      4) With r == 0 the annuity collapses to deposit * n.

    (1 + r)^n - 1 is taken as expm1(n * log1p(r)) so tiny positive rates
    do not round 1 + r down to 1.0.
    """
    periods = periods_per_year(request.compoundingFrequency)
    rate_per_period = (request.annualRatePercent / 100) / periods
    total_periods = periods * request.timeframeYears

    try:
        growth_minus_one = math.expm1(total_periods * math.log1p(rate_per_period))
    except OverflowError as exc:
        raise InvalidProjectionInput(["projection overflows: rate or timeframe too large"]) from exc

    principal_component = request.initialAmount * (1 + growth_minus_one)

    contribution_component = 0.0
    if request.monthlyContribution > 0:
        contribution_per_period = request.monthlyContribution * (MONTHS_PER_YEAR / periods)
        if rate_per_period == 0:
            contribution_component = contribution_per_period * total_periods
        else:
            contribution_component = contribution_per_period * growth_minus_one / rate_per_period

    final_amount = principal_component + contribution_component
    if not math.isfinite(final_amount):
        raise InvalidProjectionInput(["projection overflows: rate or timeframe too large"])

    total_contributed = (
        request.initialAmount
        + request.monthlyContribution * MONTHS_PER_YEAR * request.timeframeYears
    )

    logger.debug(
        "projected %s over %d periods: principal=%.4f contributions=%.4f",
        request.compoundingFrequency.value,
        total_periods,
        principal_component,
        contribution_component,
    )

    return ProjectionBreakdown(
        compoundingFrequency=request.compoundingFrequency,
        periodsPerYear=periods,
        totalPeriods=total_periods,
        principalComponent=principal_component,
        contributionComponent=contribution_component,
        finalAmount=final_amount,
        totalContributed=total_contributed,
        totalInterest=final_amount - total_contributed,
    )


def project_investment(request: InvestmentProjectionRequest) -> float:
    return project_investment_breakdown(request).finalAmount


def calculate_compound_interest(
    initial_amount: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    timeframe_years: int,
    compounding_frequency: Optional[Union[CompoundingFrequency, str]] = None,
) -> float:
    """Positional form of project_investment; raises InvalidProjectionInput on bad input."""
    request = validate_projection_request(
        {
            "initialAmount": initial_amount,
            "monthlyContribution": monthly_contribution,
            "annualRatePercent": annual_rate_percent,
            "timeframeYears": timeframe_years,
            "compoundingFrequency": compounding_frequency,
        }
    )
    return project_investment(request)
