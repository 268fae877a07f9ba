"""Data contracts for the investment endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.core.projection import (
    CompoundingFrequency,
    InvestmentProjectionRequest,
    validate_projection_request,
)


class ProjectionPayload(BaseModel):
    """Wire shape of a projection; range checks happen in the engine request."""

    model_config = ConfigDict(extra="forbid")

    initialAmount: float
    monthlyContribution: float = 0.0
    interestRate: float = Field(..., description="Nominal annual rate in percent (12 means 12%).")
    timeframeYears: int
    compoundingFrequency: Optional[CompoundingFrequency] = None
    name: Optional[str] = Field(default=None, max_length=120)

    def to_request(self) -> InvestmentProjectionRequest:
        return validate_projection_request(
            {
                "initialAmount": self.initialAmount,
                "monthlyContribution": self.monthlyContribution,
                "annualRatePercent": self.interestRate,
                "timeframeYears": self.timeframeYears,
                "compoundingFrequency": self.compoundingFrequency,
            }
        )


class SimulatePayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initialAmount: float
    monthlyContribution: float = 0.0
    interestRate: float
    months: int


class GoalPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    goalAmount: float
    initialAmount: float = 0.0
    monthlyContribution: float = 0.0
    interestRate: float


class SummaryPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initialAmount: float
    monthlyContribution: float = 0.0
    annualReturnRate: float
    timePeriodMonths: int


class SimulationUpdatePayload(BaseModel):
    """Partial update of a saved simulation; omitted fields keep their values."""

    model_config = ConfigDict(extra="forbid")

    initialAmount: Optional[float] = None
    monthlyContribution: Optional[float] = None
    interestRate: Optional[float] = None
    timeframeYears: Optional[int] = None
    compoundingFrequency: Optional[CompoundingFrequency] = None
    name: Optional[str] = Field(default=None, max_length=120)
