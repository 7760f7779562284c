"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, conint
import datetime
from typing import Dict, List, Optional

from fincoach_gateway.domain.models import Expense, SavingsScenario

MAX_PROJECTION_YEARS = 100
MAX_ANNUAL_RATE = 1.0  # 100% a year


class ExpenseSchema(BaseModel):
    """Single expense as exchanged with clients"""

    id: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    type: str = Field(..., description="needs | wants | luxuries")
    description: str = ""
    date: Optional[datetime.date] = None
    is_recurring: bool = False

    def to_domain(self) -> Expense:
        return Expense(**self.model_dump())

    @classmethod
    def from_domain(cls, expense: Expense) -> "ExpenseSchema":
        return cls(**vars(expense))


class ScenarioSchema(BaseModel):
    """Percentage cuts; not clamped here, the UI restricts the range"""

    dining_reduction: float = Field(0, allow_inf_nan=False)
    entertainment_reduction: float = Field(0, allow_inf_nan=False)
    shopping_reduction: float = Field(0, allow_inf_nan=False)
    subscription_reduction: float = Field(0, allow_inf_nan=False)
    transportation_reduction: float = Field(0, allow_inf_nan=False)
    luxury_reduction: float = Field(0, allow_inf_nan=False)

    def to_domain(self) -> SavingsScenario:
        return SavingsScenario(**self.model_dump())


class CategorizeRequest(BaseModel):
    """Request body for POST /v1/expenses/categorize"""

    expenses: List[ExpenseSchema]


class CategorizeResponse(BaseModel):
    """Response for POST /v1/expenses/categorize"""

    buckets: Dict[str, List[ExpenseSchema]]
    totals: Dict[str, float]


class ImportResponse(BaseModel):
    """Response for POST /v1/expenses/import"""

    row_count: int
    expenses: List[ExpenseSchema]


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/savings/projection"""

    monthly_contribution: float = Field(..., ge=0, allow_inf_nan=False)
    annual_rate: Optional[float] = Field(None, gt=-12, le=MAX_ANNUAL_RATE, allow_inf_nan=False)
    years: float = Field(..., ge=0, le=MAX_PROJECTION_YEARS)


class ProjectionSchema(BaseModel):
    """Compound growth projection"""

    years: float
    future_value: int
    total_contributions: int
    interest_earned: int
    monthly_contribution: float
    future_value_display: str = ""


class SimulationRequest(BaseModel):
    """Request body for POST /v1/savings/simulate"""

    expenses: List[ExpenseSchema]
    scenario: ScenarioSchema = Field(default_factory=ScenarioSchema)
    monthly_income: float = Field(..., gt=0, allow_inf_nan=False)
    annual_rate: Optional[float] = Field(None, gt=-12, le=MAX_ANNUAL_RATE, allow_inf_nan=False)
    horizons: Optional[List[conint(ge=0, le=MAX_PROJECTION_YEARS)]] = Field(None, min_length=1)


class SimulationResponse(BaseModel):
    """Response for POST /v1/savings/simulate"""

    total_expenses: float
    potential_savings: int
    potential_savings_display: str
    health_score: float
    health_band: str
    projections: List[ProjectionSchema]


class HealthScoreRequest(BaseModel):
    """Request body for POST /v1/health/score"""

    monthly_income: float = Field(..., gt=0, allow_inf_nan=False)
    total_expenses: float = Field(..., ge=0, allow_inf_nan=False)
    emergency_fund: float = Field(0, ge=0, allow_inf_nan=False)
    total_debt: float = Field(0, ge=0, allow_inf_nan=False)
    current_savings: float = Field(0, allow_inf_nan=False)
    monthly_debt_payments: float = Field(0, ge=0, allow_inf_nan=False)


class HealthScoreResponse(BaseModel):
    """Response for POST /v1/health/score"""

    score: int
    breakdown: Dict[str, int]
    emergency_fund_target: float
    debt_to_income_ratio: float
    net_worth: float


class AffordabilityRequest(BaseModel):
    """Request body for POST /v1/health/affordability"""

    monthly_income: float = Field(..., gt=0, allow_inf_nan=False)
    total_expenses: float = Field(..., ge=0, allow_inf_nan=False)
    emergency_fund: float = Field(0, ge=0, allow_inf_nan=False)


class AffordabilityResponse(BaseModel):
    """Response for POST /v1/health/affordability"""

    score: float
    status: str


class ProgressResponse(BaseModel):
    """Response for GET /v1/progress"""

    experience: int
    level: int
    current: int
    required: int


class AwardRequest(BaseModel):
    """Request body for POST /v1/progress/award"""

    experience: int = Field(..., ge=0)
    action: str = Field(..., min_length=1)


class AwardResponse(BaseModel):
    """Response for POST /v1/progress/award"""

    action: str
    points: int
    experience: int
    level: int
    leveled_up: bool
