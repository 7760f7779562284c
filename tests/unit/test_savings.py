"""Unit tests for expense grouping, scenario savings and compound projections"""

import pytest
from fincoach_gateway.domain.models import Expense, ExpenseType, SavingsScenario
from fincoach_gateway.domain.savings import (
    categorize_expenses,
    expense_totals_by_type,
    calculate_potential_savings,
    calculate_compound_interest,
    project_savings_horizons,
)
from fincoach_gateway.domain.exceptions import InvalidInputError
from fincoach_gateway.utils.currency import round_half_up


def test_categorize_expenses_keeps_every_expense_once(sample_expenses):
    """Union of all buckets is exactly the input"""
    buckets = categorize_expenses(sample_expenses)

    flattened = [e for bucket in buckets.values() for e in bucket]
    assert sorted(e.id for e in flattened) == sorted(e.id for e in sample_expenses)
    assert len(flattened) == len(sample_expenses)
    assert set(buckets) == {ExpenseType.NEEDS, ExpenseType.WANTS, ExpenseType.LUXURIES}
    assert [e.id for e in buckets[ExpenseType.NEEDS]] == ["1", "2", "3"]


def test_categorize_expenses_empty():
    assert categorize_expenses([]) == {}


def test_categorize_expenses_unknown_type_gets_own_bucket():
    expenses = [Expense(id="x", category="misc", amount=10, type="optional")]
    assert list(categorize_expenses(expenses)) == ["optional"]


def test_expense_totals_by_type(sample_expenses):
    totals = expense_totals_by_type(sample_expenses)

    assert totals == {"needs": 1800, "wants": 650, "luxuries": 575}


def test_potential_savings_zero_scenario(sample_expenses):
    """No cuts, no savings"""
    assert calculate_potential_savings(sample_expenses, SavingsScenario()) == 0


def test_potential_savings_per_category(sample_expenses):
    scenario = SavingsScenario(
        dining_reduction=50,  # 150
        entertainment_reduction=20,  # 30
        shopping_reduction=10,  # 20
        subscription_reduction=100,  # 75
        transportation_reduction=5,  # 10
        luxury_reduction=30,  # travel: 150
    )

    assert calculate_potential_savings(sample_expenses, scenario) == 435


def test_potential_savings_category_match_beats_luxury_type():
    """dining typed as luxuries still uses the dining cut"""
    expenses = [Expense(id="1", category="dining", amount=100, type=ExpenseType.LUXURIES)]
    scenario = SavingsScenario(dining_reduction=10, luxury_reduction=50)

    assert calculate_potential_savings(expenses, scenario) == 10


def test_potential_savings_category_is_case_insensitive():
    expenses = [Expense(id="1", category="Dining", amount=200, type=ExpenseType.WANTS)]

    assert calculate_potential_savings(expenses, SavingsScenario(dining_reduction=25)) == 50


def test_potential_savings_ignores_unmatched_non_luxuries():
    """rent is neither a scenario category nor a luxury"""
    expenses = [Expense(id="1", category="rent", amount=1000, type=ExpenseType.NEEDS)]
    scenario = SavingsScenario(luxury_reduction=50, dining_reduction=50)

    assert calculate_potential_savings(expenses, scenario) == 0


def test_potential_savings_rounds_aggregate_not_terms():
    """1.25 + 1.25 = 2.5 -> 3 (rounding each term would give 2)"""
    expenses = [
        Expense(id="1", category="dining", amount=1.25, type=ExpenseType.WANTS),
        Expense(id="2", category="shopping", amount=1.25, type=ExpenseType.WANTS),
    ]
    scenario = SavingsScenario(dining_reduction=100, shopping_reduction=100)

    assert calculate_potential_savings(expenses, scenario) == 3


def test_potential_savings_out_of_range_percentages_scale_linearly():
    expenses = [Expense(id="1", category="dining", amount=100, type=ExpenseType.WANTS)]

    assert calculate_potential_savings(expenses, SavingsScenario(dining_reduction=150)) == 150
    assert calculate_potential_savings(expenses, SavingsScenario(dining_reduction=-10)) == -10


def test_compound_interest_matches_annuity_formula():
    """FV = P * ((1 + r)^n - 1) / r"""
    result = calculate_compound_interest(100, 0.10, 10)

    monthly_rate = 0.10 / 12
    expected = 100 * (((1 + monthly_rate) ** 120 - 1) / monthly_rate)

    assert result.future_value == round_half_up(expected)
    assert result.total_contributions == 12000
    assert result.years == 10
    assert result.monthly_contribution == 100


@pytest.mark.parametrize(
    "monthly, rate, years",
    [(100, 0.10, 10), (2500, 0.07, 30), (333.33, 0.12, 3), (1, 0.05, 1), (750, -0.02, 5)],
)
def test_compound_interest_identity(monthly, rate, years):
    """future value = contributions + interest, within rounding"""
    result = calculate_compound_interest(monthly, rate, years)

    assert abs(result.future_value - (result.total_contributions + result.interest_earned)) <= 1


def test_compound_interest_grows_with_positive_rate():
    result = calculate_compound_interest(1000, 0.10, 5)

    assert result.future_value > result.total_contributions
    assert result.interest_earned > 0


def test_compound_interest_zero_contribution():
    result = calculate_compound_interest(0, 0.10, 20)

    assert result.future_value == 0
    assert result.total_contributions == 0
    assert result.interest_earned == 0


def test_compound_interest_zero_rate():
    """Zero rate is guarded, not a division by zero"""
    result = calculate_compound_interest(100, 0, 5)

    assert result.future_value == 6000
    assert result.total_contributions == 6000
    assert result.interest_earned == 0


def test_compound_interest_zero_years():
    result = calculate_compound_interest(500, 0.10, 0)

    assert result.future_value == 0
    assert result.total_contributions == 0


def test_compound_interest_rejects_negative_inputs():
    with pytest.raises(InvalidInputError):
        calculate_compound_interest(-100, 0.10, 5)

    with pytest.raises(InvalidInputError):
        calculate_compound_interest(100, 0.10, -1)

    with pytest.raises(InvalidInputError):
        calculate_compound_interest(100, -12, 5)


def test_project_savings_horizons_default_table():
    projections = project_savings_horizons(100)

    assert [p.years for p in projections] == [5, 10, 15, 20, 30]
    values = [p.future_value for p in projections]
    assert values == sorted(values)


def test_end_to_end_scenario_is_deterministic():
    """Scenario savings fed into a projection give the same result every time"""
    expenses = [
        Expense(id="1", category="dining", amount=200, type=ExpenseType.WANTS),
        Expense(id="2", category="rent", amount=1000, type=ExpenseType.NEEDS),
    ]
    savings = calculate_potential_savings(expenses, SavingsScenario(dining_reduction=50))

    assert savings == 100
    assert calculate_compound_interest(savings, 0.10, 10) == calculate_compound_interest(savings, 0.10, 10)


@pytest.mark.parametrize(
    "monthly, rate, years",
    [(100, 0.10, 10000), (100, 100, 100), (1e308, 0.10, 100), (1e308, 0, 100)],
)
def test_compound_interest_rejects_unrepresentable_projection(monthly, rate, years):
    """Long horizons, extreme rates or huge contributions are rejected, not overflowed"""
    with pytest.raises(InvalidInputError, match="too large"):
        calculate_compound_interest(monthly, rate, years)


def test_project_savings_horizons_rejects_overflowing_horizon():
    with pytest.raises(InvalidInputError):
        project_savings_horizons(100, 0.10, [5, 10000])


def test_potential_savings_rejects_overflowing_total():
    expenses = [
        Expense(id="1", category="dining", amount=1e308, type=ExpenseType.WANTS),
        Expense(id="2", category="shopping", amount=1e308, type=ExpenseType.WANTS),
    ]
    scenario = SavingsScenario(dining_reduction=100, shopping_reduction=100)

    with pytest.raises(InvalidInputError):
        calculate_potential_savings(expenses, scenario)
