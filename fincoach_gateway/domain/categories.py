"""Static category -> expense type lookup used when expenses are created"""

from types import MappingProxyType
from fincoach_gateway.domain.models import ExpenseType

CATEGORY_TYPES = MappingProxyType(
    {
        "rent": ExpenseType.NEEDS,
        "utilities": ExpenseType.NEEDS,
        "groceries": ExpenseType.NEEDS,
        "transportation": ExpenseType.NEEDS,
        "insurance": ExpenseType.NEEDS,
        "healthcare": ExpenseType.NEEDS,
        "debt payments": ExpenseType.NEEDS,
        "dining": ExpenseType.WANTS,
        "entertainment": ExpenseType.WANTS,
        "shopping": ExpenseType.WANTS,
        "subscriptions": ExpenseType.LUXURIES,
        "hobbies": ExpenseType.LUXURIES,
        "travel": ExpenseType.LUXURIES,
        "gifts": ExpenseType.LUXURIES,
    }
)


def normalize_category(category: str) -> str:
    return category.strip().lower()


def classify_category(category: str) -> str:
    """Expense type for a category name; unknown categories are luxuries"""
    return CATEGORY_TYPES.get(normalize_category(category), ExpenseType.LUXURIES)
