"""Savings rate: share of income left after expenses, as a percentage."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class InvalidSavingsInput(ValueError):
    pass


class UndefinedSavingsRate(ArithmeticError):
    """Raised when a savings rate is requested for a period with no income."""


class SavingsRate(BaseModel):
    """Either a defined percentage or an explicit 'not applicable'."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    defined: bool
    percent: Optional[float] = None

    @classmethod
    def of(cls, percent: float) -> "SavingsRate":
        return cls(defined=True, percent=percent)

    @classmethod
    def undefined(cls) -> "SavingsRate":
        return cls(defined=False)

    def value(self) -> float:
        if not self.defined or self.percent is None:
            raise UndefinedSavingsRate("savings rate is undefined when total income is zero")
        return self.percent


class _Totals(BaseModel):
    totalIncome: float = Field(ge=0, allow_inf_nan=False)
    totalExpenses: float = Field(ge=0, allow_inf_nan=False)


def calculate_savings_rate(total_income: float, total_expenses: float) -> SavingsRate:
    """
    ((income - expenses) / income) * 100.

    Negative when spending exceeds income. Zero income yields an undefined
    rate rather than 0%, which would read as break-even.
    """
    try:
        totals = _Totals(totalIncome=total_income, totalExpenses=total_expenses)
    except ValidationError as exc:
        raise InvalidSavingsInput(
            "; ".join(f"{error['loc'][0]}: {error['msg']}" for error in exc.errors())
        ) from exc

    if totals.totalIncome == 0:
        return SavingsRate.undefined()
    return SavingsRate.of((totals.totalIncome - totals.totalExpenses) / totals.totalIncome * 100)
