"""Data contracts for the dashboard endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.core.overview import BalanceSummary, CategoryAmount, CategoryBreakdown


class SavingsRatePayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    totalIncome: float = Field(..., ge=0, allow_inf_nan=False)
    totalExpenses: float = Field(..., ge=0, allow_inf_nan=False)


class SavingsRateResponse(BaseModel):
    defined: bool
    savingsRate: Optional[float] = None


class OverviewPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    incomes: List[CategoryAmount] = Field(default_factory=list)
    expenses: List[CategoryAmount] = Field(default_factory=list)


class OverviewResponse(BaseModel):
    balance: BalanceSummary
    incomeByCategory: List[CategoryBreakdown]
    expensesByCategory: List[CategoryBreakdown]
