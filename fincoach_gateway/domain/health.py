"""Financial health heuristics - bounded 0-100 scores derived from income, spend and reserves"""

from fincoach_gateway.domain.models import AffordabilityScore, FinancialHealthScore, HealthBreakdown
from fincoach_gateway.domain.exceptions import InvalidInputError
from fincoach_gateway.utils.currency import round_half_up

COMPONENT_MAX = 25.0

# 3 months of expenses in the emergency fund earns the full 25 points
EMERGENCY_POINTS_PER_MONTH = 8.33


def _require_income(monthly_income: float) -> None:
    # Zero income is rejected everywhere rather than producing inf/NaN rates
    if monthly_income == 0:
        raise InvalidInputError("Monthly income must be non-zero")


def _clamp(value: float, low: float = 0.0, high: float = COMPONENT_MAX) -> float:
    return max(low, min(value, high))


def calculate_savings_health_score(
    monthly_income: float,
    total_expenses: float,
    potential_savings: float,
) -> float:
    """
    Score the savings rate reachable after applying potential savings.

    Bands (first match wins, rate in %):
    - >= 20: excellent, 90 + (rate - 20) * 0.5, capped at 100
    - >= 15: good, 70 + (rate - 15) * 4
    - >= 10: fair, 50 + (rate - 10) * 4
    - >= 5:  poor, 30 + (rate - 5) * 4
    - < 5:   critical, rate * 6, floored at 0

    Raises:
        InvalidInputError: monthly_income is zero or negative
    """
    # A negative income would invert the bands: more savings, lower score
    if monthly_income <= 0:
        raise InvalidInputError("Monthly income must be positive")

    rate = ((monthly_income - total_expenses + potential_savings) / monthly_income) * 100

    if rate >= 20:
        return min(90 + (rate - 20) * 0.5, 100.0)
    elif rate >= 15:
        return 70 + (rate - 15) * 4
    elif rate >= 10:
        return 50 + (rate - 10) * 4
    elif rate >= 5:
        return 30 + (rate - 5) * 4
    else:
        return max(rate * 6, 0.0)


def savings_health_band(score: float) -> str:
    """Label for a savings health score"""
    if score >= 90:
        return "excellent"
    elif score >= 70:
        return "good"
    elif score >= 50:
        return "fair"
    elif score >= 30:
        return "poor"
    else:
        return "critical"


def calculate_financial_health_score(
    monthly_income: float,
    total_expenses: float,
    emergency_fund: float,
    total_debt: float,
    current_savings: float,
) -> FinancialHealthScore:
    """
    Four equally weighted components, each clamped to [0, 25]:
    - savings:    savings rate % * 5 (5% saved = full marks)
    - emergency:  months of expenses covered * 8.33 (3 months = full marks)
    - debt:       25 - debt-to-annual-income % * 0.5
    - net_worth:  current savings / monthly income * 2

    Total is the rounded sum of the unrounded components.

    Raises:
        InvalidInputError: monthly_income is zero
    """
    _require_income(monthly_income)

    savings_rate = (monthly_income - total_expenses) / monthly_income * 100
    emergency_months = emergency_fund / max(total_expenses, 1)
    debt_to_income = total_debt / (monthly_income * 12) * 100

    savings = _clamp(savings_rate * 5)
    emergency = _clamp(emergency_months * EMERGENCY_POINTS_PER_MONTH)
    debt = _clamp(COMPONENT_MAX - debt_to_income * 0.5)
    net_worth = _clamp(current_savings / monthly_income * 2)

    return FinancialHealthScore(
        score=round_half_up(savings + emergency + debt + net_worth),
        breakdown=HealthBreakdown(
            savings=round_half_up(savings),
            emergency=round_half_up(emergency),
            debt=round_half_up(debt),
            net_worth=round_half_up(net_worth),
        ),
    )


def calculate_emergency_fund_target(monthly_expenses: float, months: int = 6) -> float:
    """Recommended emergency reserve"""
    return monthly_expenses * months


def calculate_debt_to_income_ratio(monthly_debt_payments: float, monthly_income: float) -> float:
    """Monthly debt service as a % of monthly income"""
    _require_income(monthly_income)
    return monthly_debt_payments / monthly_income * 100


def calculate_net_worth(assets: float, liabilities: float) -> float:
    return assets - liabilities


def calculate_affordability_score(
    monthly_income: float,
    total_expenses: float,
    emergency_fund: float,
) -> AffordabilityScore:
    """
    Household affordability: up to 40 points for savings rate (2 per %),
    up to 60 for emergency cover (10 per month of expenses).

    Status: excellent >= 80, good >= 60, warning >= 40, otherwise critical.
    """
    _require_income(monthly_income)

    savings_rate = (monthly_income - total_expenses) / monthly_income * 100
    emergency_months = emergency_fund / (total_expenses or 1)

    score = min(savings_rate * 2, 40) + min(emergency_months * 10, 60)

    if score >= 80:
        status = "excellent"
    elif score >= 60:
        status = "good"
    elif score >= 40:
        status = "warning"
    else:
        status = "critical"

    return AffordabilityScore(score=score, status=status)
