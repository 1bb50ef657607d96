"""Environment-driven settings and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

import structlog

from .errors import InvalidArgumentError, errmsg
from .validation import require_non_negative

DEFAULT_TAX_RATE = "0"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    tax_rate: float = 0.0
    log_level: str = DEFAULT_LOG_LEVEL
    customer: str = ""


def load_settings() -> Settings:
    """Load settings from the environment.

    Environment variables:
        CHECKOUT_TAX_RATE: Tax percentage applied at checkout (default: 0)
        CHECKOUT_LOG_LEVEL: Minimum log level name (default: INFO)
        CHECKOUT_CUSTOMER: Customer name shown on order summaries
    """
    raw_rate = os.environ.get("CHECKOUT_TAX_RATE", DEFAULT_TAX_RATE)
    try:
        tax_rate = float(raw_rate)
    except ValueError as e:
        raise InvalidArgumentError(errmsg.TAX_RATE_INVALID, e) from e
    require_non_negative(tax_rate, errmsg.TAX_RATE_NEGATIVE)

    return Settings(
        tax_rate=tax_rate,
        log_level=os.environ.get("CHECKOUT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        customer=os.environ.get("CHECKOUT_CUSTOMER", ""),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL, file: Optional[TextIO] = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps.

    Logs go to stderr unless ``file`` is given, keeping stdout for output.
    """
    min_level = logging.getLevelName(level.upper())
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=file or sys.stderr),
        cache_logger_on_first_use=False,
    )
