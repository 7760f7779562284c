"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from fincoach_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_simulation(
    request_id: str,
    expense_count: int,
    potential_savings: int,
    health_score: float,
    health_band: str,
    duration_ms: float,
) -> None:
    """Log structured savings simulation outcome"""
    logging.info(
        "Savings simulation completed",
        extra={
            "request_id": request_id,
            "step": "simulation_complete",
            "expense_count": expense_count,
            "potential_savings": potential_savings,
            "health_score": round(health_score, 2),
            "health_band": health_band,
            "duration_ms": duration_ms,
        },
    )


def log_health_score(request_id: str, score: int, breakdown: Dict[str, int]) -> None:
    """Log structured four-component health score"""
    logging.info(
        "Health score computed",
        extra={
            "request_id": request_id,
            "step": "health_score_complete",
            "score": score,
            "breakdown": breakdown,
        },
    )


def log_csv_import(request_id: str, row_count: int, duration_ms: float) -> None:
    """Log structured CSV import outcome"""
    logging.info(
        "Expense CSV imported",
        extra={
            "request_id": request_id,
            "step": "csv_import_complete",
            "row_count": row_count,
            "duration_ms": duration_ms,
        },
    )
