"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from fincoach_gateway.api.main import create_app
from fincoach_gateway.domain.models import Expense, ExpenseType


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """A month of mixed spending"""
    return [
        Expense(id="1", category="rent", amount=1200, type=ExpenseType.NEEDS),
        Expense(id="2", category="groceries", amount=400, type=ExpenseType.NEEDS),
        Expense(id="3", category="transportation", amount=200, type=ExpenseType.NEEDS),
        Expense(id="4", category="dining", amount=300, type=ExpenseType.WANTS),
        Expense(id="5", category="entertainment", amount=150, type=ExpenseType.WANTS),
        Expense(id="6", category="shopping", amount=200, type=ExpenseType.WANTS),
        Expense(id="7", category="subscriptions", amount=75, type=ExpenseType.LUXURIES),
        Expense(id="8", category="travel", amount=500, type=ExpenseType.LUXURIES),
    ]


@pytest.fixture
def expense_payload() -> list[dict]:
    """Two-expense request body used by the simulator tests"""
    return [
        {"id": "e1", "category": "dining", "amount": 200, "type": "wants"},
        {"id": "e2", "category": "rent", "amount": 1000, "type": "needs"},
    ]
