"""
Input checks shared by the calculation modules.

All checks run before any arithmetic and raise InvalidArgumentError.
"""

import math
from decimal import Decimal
from numbers import Real

from mortgage_engine.errors import InvalidArgumentError, NumericOverflowError


def _require_number(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidArgumentError(name, value, "a number")
    try:
        value = float(value)
    except OverflowError:
        raise InvalidArgumentError(name, value, "finite") from None
    if not math.isfinite(value):
        raise InvalidArgumentError(name, value, "finite")
    return value


def require_finite(name: str, value) -> float:
    return _require_number(name, value)


def require_non_negative(name: str, value) -> float:
    value = _require_number(name, value)
    if value < 0:
        raise InvalidArgumentError(name, value, ">= 0")
    return value


def require_positive(name: str, value) -> float:
    value = _require_number(name, value)
    if value <= 0:
        raise InvalidArgumentError(name, value, "> 0")
    return value


def require_years(name: str, value) -> int:
    """Loan terms and horizons are whole, positive numbers of years."""
    value = require_positive(name, value)
    if not value.is_integer():
        raise InvalidArgumentError(name, value, "a whole number of years")
    return int(value)


def ensure_finite(label: str, value: float) -> float:
    """Surface inf/NaN intermediates instead of letting them propagate."""
    if not math.isfinite(value):
        raise NumericOverflowError(f"{label} is not finite ({value!r})")
    return value
