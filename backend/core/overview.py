"""Dashboard figures derived from income and expense totals."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from backend.core.savings import calculate_savings_rate


class CategoryAmount(BaseModel):
    categoryId: str
    categoryName: str
    amount: float = Field(ge=0, allow_inf_nan=False)


class CategoryBreakdown(BaseModel):
    categoryId: str
    categoryName: str
    amount: float
    percentage: float


class BalanceSummary(BaseModel):
    totalIncome: float
    totalExpenses: float
    balance: float
    # None when there is no income to compare against
    savingsRate: Optional[float] = None


def build_balance_summary(total_income: float, total_expenses: float) -> BalanceSummary:
    rate = calculate_savings_rate(total_income, total_expenses)
    return BalanceSummary(
        totalIncome=total_income,
        totalExpenses=total_expenses,
        balance=total_income - total_expenses,
        savingsRate=rate.percent if rate.defined else None,
    )


def category_breakdown(entries: Iterable[CategoryAmount]) -> List[CategoryBreakdown]:
    """Sum entries per category; percentages are of the grand total, 0 if it is 0."""
    totals: Dict[str, float] = {}
    names: Dict[str, str] = {}
    for entry in entries:
        totals[entry.categoryId] = totals.get(entry.categoryId, 0.0) + entry.amount
        names.setdefault(entry.categoryId, entry.categoryName)

    grand_total = sum(totals.values())
    rows = [
        CategoryBreakdown(
            categoryId=category_id,
            categoryName=names[category_id],
            amount=amount,
            percentage=(amount / grand_total * 100) if grand_total > 0 else 0.0,
        )
        for category_id, amount in totals.items()
    ]
    return sorted(rows, key=lambda row: row.amount, reverse=True)
