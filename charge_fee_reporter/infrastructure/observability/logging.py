"""Structured JSON logging on stderr, keeping stdout for the report"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter
from charge_fee_reporter.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name or settings.service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "WARNING", service_name: str | None = None) -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_charge_report(charge_id: str, fee_detail_count: int, duration_ms: float) -> None:
    """Log structured report outcome"""
    logging.info(
        "Charge report completed",
        extra={
            "charge_id": charge_id,
            "step": "report_complete",
            "fee_detail_count": fee_detail_count,
            "duration_ms": duration_ms,
        },
    )
