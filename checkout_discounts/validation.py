"""Validation helpers for constructor and call-time precondition checks.

Eliminates repeated validation boilerplate across items, rules and the cart.
"""

import math
from typing import Any

from .errors import InvalidArgumentError


def require_present(value: Any, error_msg: str) -> None:
    """Require that a value is not None."""
    if value is None:
        raise InvalidArgumentError(error_msg)


def require_text(value: Any, error_msg: str) -> None:
    """Require that a value is a non-empty string."""
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(error_msg)


def require_int(value: Any, error_msg: str) -> None:
    """Require that a value is an integer (bool excluded)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(error_msg)


def require_positive(value: int, error_msg: str) -> None:
    """Require that a value is greater than zero."""
    if value <= 0:
        raise InvalidArgumentError(error_msg)


def require_non_negative(value: float, error_msg: str) -> None:
    """Require that a value is finite and zero or greater."""
    if not math.isfinite(value) or value < 0:
        raise InvalidArgumentError(error_msg)


def require_percentage(value: float, error_msg: str) -> None:
    """Require that a value lies within [0, 100]. NaN is rejected."""
    if not 0 <= value <= 100:
        raise InvalidArgumentError(error_msg)
