"""Expense CSV import - parses category/amount/description rows into typed expenses"""

import csv
import io
import uuid
from typing import List, Optional
from fincoach_gateway.domain.models import Expense
from fincoach_gateway.domain.categories import classify_category, normalize_category
from fincoach_gateway.domain.exceptions import InvalidCSVError
from fincoach_gateway.utils.currency import is_valid_amount, parse_indian_amount

CSV_FIELDS = ("category", "amount", "description")

SAMPLE_ROWS = [
    ("rent", "1200", "Monthly rent payment"),
    ("utilities", "150", "Electricity, water, internet"),
    ("groceries", "400", "Weekly grocery shopping"),
    ("transportation", "200", "Gas and car maintenance"),
    ("insurance", "250", "Health and auto insurance"),
    ("dining", "300", "Restaurants and takeout"),
    ("entertainment", "150", "Movies, games, events"),
    ("shopping", "200", "Clothing and misc purchases"),
    ("subscriptions", "75", "Netflix, Spotify, etc."),
    ("hobbies", "100", "Books, art supplies, etc."),
]


def _parse_amount(raw: Optional[str]) -> float:
    # Plain numbers or Indian shorthand ("1,200", "2.5L"); invalid or out-of-range amounts count as 0
    amount = parse_indian_amount(raw or "")
    return amount if is_valid_amount(amount) else 0.0


def parse_expenses_csv(text: str, max_rows: Optional[int] = None) -> List[Expense]:
    """
    Parse an expense CSV with a header row (category, amount, description).

    Requirements:
    - Blank lines are skipped
    - Category is stripped and lowercased, then typed via the category table
    - Amounts may use Indian shorthand ("1,20,000", "2.5L", "15k")
    - Every row needs a category and an amount in (0, 99.99 crore]

    Raises:
        InvalidCSVError: missing header columns, an invalid row (1-based data row
            number in the message), or more than max_rows rows
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")), skipinitialspace=True)

    if reader.fieldnames is None:
        raise InvalidCSVError("CSV is empty")

    headers = {name.strip().lower() for name in reader.fieldnames if name}
    missing = {"category", "amount"} - headers
    if missing:
        raise InvalidCSVError(f"CSV is missing required columns: {', '.join(sorted(missing))}")

    expenses = []
    row_number = 0
    for row in reader:
        row = {(k or "").strip().lower(): v for k, v in row.items()}
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue

        row_number += 1
        if max_rows is not None and row_number > max_rows:
            raise InvalidCSVError(f"CSV has more than {max_rows} rows")

        category = normalize_category(row.get("category") or "")
        amount = _parse_amount(row.get("amount"))
        description = (row.get("description") or "").strip()

        if not category or amount <= 0:
            raise InvalidCSVError(
                f"Invalid data in row {row_number}: category and amount are required"
            )

        expenses.append(
            Expense(
                id=f"csv-{row_number}-{uuid.uuid4().hex}",
                category=category,
                amount=amount,
                type=classify_category(category),
                description=description,
            )
        )

    return expenses


def generate_sample_csv() -> str:
    """Ten-row example file users can download and edit"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_FIELDS)
    writer.writerows(SAMPLE_ROWS)
    return buffer.getvalue()
