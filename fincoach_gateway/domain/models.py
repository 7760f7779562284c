"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
import datetime
from typing import Dict, Optional


class ExpenseType:
    """Fixed three-way classification assigned at data-entry time"""

    NEEDS = "needs"
    WANTS = "wants"
    LUXURIES = "luxuries"


@dataclass
class Expense:
    """Single recorded outlay"""

    id: str
    category: str
    amount: float
    type: str  # "needs", "wants" or "luxuries"
    description: str = ""
    date: Optional[datetime.date] = None
    is_recurring: bool = False


@dataclass
class SavingsScenario:
    """Hypothetical percentage cuts per spending group"""

    dining_reduction: float = 0
    entertainment_reduction: float = 0
    shopping_reduction: float = 0
    subscription_reduction: float = 0
    transportation_reduction: float = 0
    luxury_reduction: float = 0


@dataclass
class CompoundInterestProjection:
    """Future value of a recurring monthly contribution"""

    years: float
    future_value: int
    total_contributions: int
    interest_earned: int
    monthly_contribution: float


@dataclass
class HealthBreakdown:
    """Per-component points, each in [0, 25]"""

    savings: int
    emergency: int
    debt: int
    net_worth: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "savings": self.savings,
            "emergency": self.emergency,
            "debt": self.debt,
            "net_worth": self.net_worth,
        }


@dataclass
class FinancialHealthScore:
    """Four-component health score in [0, 100]"""

    score: int
    breakdown: HealthBreakdown


@dataclass
class AffordabilityScore:
    """Savings rate + emergency cover score in [0, 100] with a status label"""

    score: float
    status: str  # "excellent", "good", "warning" or "critical"


@dataclass
class XPProgress:
    """Experience earned inside the current level"""

    current: int
    required: int

    @property
    def percent(self) -> float:
        return self.current / self.required * 100


@dataclass
class ExperienceAward:
    """Outcome of granting XP for a user action"""

    action: str
    points: int
    experience: int
    level: int
    leveled_up: bool = field(default=False)
