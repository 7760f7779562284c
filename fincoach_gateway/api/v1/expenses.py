"""Expense endpoints - categorization and CSV import"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from fincoach_gateway.api.v1.schemas import CategorizeRequest, CategorizeResponse, ExpenseSchema, ImportResponse
from fincoach_gateway.api.dependencies import get_request_id, get_settings
from fincoach_gateway.config import Settings
from fincoach_gateway.domain.savings import categorize_expenses, expense_totals_by_type
from fincoach_gateway.domain.csv_import import parse_expenses_csv, generate_sample_csv
from fincoach_gateway.domain.exceptions import InvalidCSVError
from fincoach_gateway.infrastructure.observability.metrics import csv_rows_imported_counter, csv_import_failures_counter
from fincoach_gateway.infrastructure.observability.logging import log_csv_import

router = APIRouter()


@router.post("/expenses/categorize", response_model=CategorizeResponse)
def categorize(request_body: CategorizeRequest):
    """Group expenses into needs / wants / luxuries buckets with per-bucket totals"""
    expenses = [e.to_domain() for e in request_body.expenses]

    buckets = categorize_expenses(expenses)

    return CategorizeResponse(
        buckets={
            expense_type: [ExpenseSchema.from_domain(e) for e in bucket]
            for expense_type, bucket in buckets.items()
        },
        totals=expense_totals_by_type(expenses),
    )


@router.post("/expenses/import", response_model=ImportResponse)
async def import_expenses(
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Import expenses from a raw CSV body.

    Expected header: category,amount,description
    Types are assigned from the static category table.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        csv_import_failures_counter.inc()
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded")

    try:
        expenses = parse_expenses_csv(text, max_rows=app_settings.csv_max_rows)
    except InvalidCSVError as e:
        csv_import_failures_counter.inc()
        logging.warning(f"Invalid CSV: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    csv_rows_imported_counter.inc(len(expenses))
    duration_ms = (time.time() - start_time) * 1000
    log_csv_import(request_id, len(expenses), duration_ms)

    return ImportResponse(
        row_count=len(expenses),
        expenses=[ExpenseSchema.from_domain(e) for e in expenses],
    )


@router.get("/expenses/sample-csv", response_class=PlainTextResponse)
def sample_csv():
    """Downloadable example CSV"""
    return PlainTextResponse(
        generate_sample_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="sample-expenses.csv"'},
    )
