"""
Rate Scenario Comparison

Evaluates the payment formula for one loan across many candidate rates in a
single vectorized pass.
"""

import logging
from typing import List, Sequence

import numpy as np

from mortgage_engine import policy
from mortgage_engine.calculations.validation import (
    require_non_negative,
    require_years,
)
from mortgage_engine.errors import InvalidArgumentError, NumericOverflowError
from mortgage_engine.models import RateScenario

logger = logging.getLogger(__name__)


def payment_curve(
    principal: float, rates_percent: Sequence[float], term_years: int
) -> np.ndarray:
    """
    Monthly payments for each annual rate (in percent).

    Zero rates amortize straight-line, matching monthly_payment().

    Raises:
        InvalidArgumentError: If any rate is negative or not finite
        NumericOverflowError: If any payment is not finite
    """
    principal = require_non_negative("principal", principal)
    term_years = require_years("term_years", term_years)

    rates = np.asarray(rates_percent, dtype=float)
    if rates.ndim != 1:
        raise InvalidArgumentError("rates_percent", rates_percent, "a flat sequence")
    if not np.all(np.isfinite(rates)) or np.any(rates < 0):
        raise InvalidArgumentError(
            "rates_percent", rates_percent, "finite and >= 0"
        )

    monthly = rates / 100 / policy.MONTHS_PER_YEAR
    periods = term_years * policy.MONTHS_PER_YEAR

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        factor = (1 + monthly) ** periods
        amortizing = principal * monthly * factor / (factor - 1)
        payments = np.where(factor == 1, principal / periods, amortizing)

    if not np.all(np.isfinite(payments)):
        raise NumericOverflowError(
            f"payment is not finite for rates {rates[~np.isfinite(payments)].tolist()}"
        )
    return payments


def compare_rate_scenarios(
    principal: float, rates_percent: Sequence[float], term_years: int
) -> List[RateScenario]:
    """
    Compare monthly payment and lifetime interest across candidate rates.

    Args:
        principal: Loan principal amount
        rates_percent: Annual rates in percent, in the order to report them
        term_years: Loan term in whole years

    Returns:
        One RateScenario per rate, monetary values rounded to cents
    """
    payments = payment_curve(principal, rates_percent, term_years)
    periods = int(term_years) * policy.MONTHS_PER_YEAR
    totals = payments * periods

    logger.debug(
        f"Compared {len(payments)} rate scenarios for {principal} over {term_years}y"
    )

    places = policy.MONEY_DECIMAL_PLACES
    return [
        RateScenario(
            annual_rate_percent=float(rate),
            monthly_payment=round(float(payment), places),
            total_payment=round(float(total), places),
            total_interest=round(float(total) - float(principal), places),
        )
        for rate, payment, total in zip(
            np.asarray(rates_percent, dtype=float), payments, totals
        )
    ]
