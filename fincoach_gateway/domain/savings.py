"""Savings engine - expense grouping, scenario savings and compound growth projections"""

import math
from typing import Dict, Iterable, List, Sequence
from fincoach_gateway.domain.models import (
    Expense,
    ExpenseType,
    SavingsScenario,
    CompoundInterestProjection,
)
from fincoach_gateway.domain.exceptions import InvalidInputError
from fincoach_gateway.utils.currency import round_half_up

DEFAULT_ANNUAL_RATE = 0.10
DEFAULT_HORIZONS = (5, 10, 15, 20, 30)

PROJECTION_TOO_LARGE = "Projection is too large to compute; shorten the horizon or lower the rate"

# Category name -> SavingsScenario field. Checked before the luxury fallback.
CATEGORY_REDUCTION_FIELDS = {
    "dining": "dining_reduction",
    "entertainment": "entertainment_reduction",
    "shopping": "shopping_reduction",
    "subscriptions": "subscription_reduction",
    "transportation": "transportation_reduction",
}


def categorize_expenses(expenses: Iterable[Expense]) -> Dict[str, List[Expense]]:
    """
    Group expenses by their already-assigned type.

    Buckets appear in first-seen order and keep input order. Types outside
    needs/wants/luxuries get their own bucket; a missing key means zero.
    """
    buckets: Dict[str, List[Expense]] = {}
    for expense in expenses:
        buckets.setdefault(expense.type, []).append(expense)
    return buckets


def expense_totals_by_type(expenses: Iterable[Expense]) -> Dict[str, float]:
    """Summed amount per type bucket"""
    return {
        expense_type: sum(e.amount for e in bucket)
        for expense_type, bucket in categorize_expenses(expenses).items()
    }


def _reduction_for(expense: Expense, scenario: SavingsScenario) -> float:
    field_name = CATEGORY_REDUCTION_FIELDS.get(expense.category.lower())
    if field_name is not None:
        return getattr(scenario, field_name)

    if expense.type == ExpenseType.LUXURIES:
        return scenario.luxury_reduction

    return 0


def calculate_potential_savings(expenses: Iterable[Expense], scenario: SavingsScenario) -> int:
    """
    Monthly savings if the scenario's percentage cuts were applied.

    Rules:
    - Category match (case-insensitive) wins: "dining" typed as luxuries still uses dining_reduction
    - Unmatched categories typed luxuries use luxury_reduction
    - Everything else contributes nothing
    - Percentages are not clamped; >100 or negative values scale linearly

    Only the aggregate is rounded, never the individual terms.

    Raises:
        InvalidInputError: the total overflows to infinity
    """
    total = sum(
        expense.amount * (_reduction_for(expense, scenario) / 100)
        for expense in expenses
    )
    if not math.isfinite(total):
        raise InvalidInputError("Potential savings are too large to compute")
    return round_half_up(total)


def calculate_compound_interest(
    monthly_contribution: float,
    annual_rate: float = DEFAULT_ANNUAL_RATE,
    years: float = 10,
) -> CompoundInterestProjection:
    """
    Project a recurring monthly contribution with monthly compounding.

    Future value of an ordinary annuity (contribution at period end):
        FV = P * ((1 + r)^n - 1) / r,  r = annual_rate / 12,  n = years * 12

    A zero rate grows nothing: FV equals total contributions.

    Raises:
        InvalidInputError: negative contribution, negative years, a monthly rate <= -100%,
            or a result too large to represent
    """
    if monthly_contribution < 0:
        raise InvalidInputError("Monthly contribution cannot be negative")
    if years < 0:
        raise InvalidInputError("Projection years cannot be negative")

    monthly_rate = annual_rate / 12
    if monthly_rate <= -1:
        raise InvalidInputError("Annual rate must be greater than -1200%")

    total_months = years * 12
    total_contributions = monthly_contribution * total_months

    try:
        if monthly_rate == 0:
            future_value = total_contributions
        else:
            future_value = monthly_contribution * (((1 + monthly_rate) ** total_months - 1) / monthly_rate)
    except OverflowError as e:
        raise InvalidInputError(PROJECTION_TOO_LARGE) from e

    if not (math.isfinite(future_value) and math.isfinite(total_contributions)):
        raise InvalidInputError(PROJECTION_TOO_LARGE)

    interest_earned = future_value - total_contributions

    return CompoundInterestProjection(
        years=years,
        future_value=round_half_up(future_value),
        total_contributions=round_half_up(total_contributions),
        interest_earned=round_half_up(interest_earned),
        monthly_contribution=monthly_contribution,
    )


def project_savings_horizons(
    monthly_contribution: float,
    annual_rate: float = DEFAULT_ANNUAL_RATE,
    horizons: Sequence[float] = DEFAULT_HORIZONS,
) -> List[CompoundInterestProjection]:
    """Projection table for each horizon, in the order given"""
    return [calculate_compound_interest(monthly_contribution, annual_rate, years) for years in horizons]
