"""
Loan Payment Calculations

The level-payment (annuity) formula and its inverse. Every other module
derives its payments from these two functions.
"""

import logging

from mortgage_engine import policy
from mortgage_engine.calculations.validation import (
    ensure_finite,
    require_finite,
    require_non_negative,
    require_years,
)
from mortgage_engine.errors import NumericOverflowError

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert a nominal annual percentage (6.5 = 6.5%) to a monthly rate."""
    return annual_rate_percent / 100 / policy.MONTHS_PER_YEAR


def compound_factor(rate: float, periods: int) -> float:
    """Return (1 + rate) ** periods, raising NumericOverflowError if it blows up."""
    try:
        factor = (1 + rate) ** periods
    except OverflowError as e:
        raise NumericOverflowError(
            f"(1 + {rate!r}) ** {periods} overflowed: {e}"
        ) from e
    return ensure_finite("compound factor", factor)


def monthly_payment(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    """
    Calculate the fixed monthly principal and interest payment.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Nominal annual rate in percent (e.g., 6.5 for 6.5%)
        term_years: Loan term in whole years

    Returns:
        Unrounded monthly payment

    Raises:
        InvalidArgumentError: If principal or rate is negative or the term is not
            a positive whole number of years
        NumericOverflowError: If the compounding factor is not finite
    """
    principal = require_non_negative("principal", principal)
    annual_rate_percent = require_non_negative(
        "annual_rate_percent", annual_rate_percent
    )
    term_years = require_years("term_years", term_years)

    rate = monthly_rate(annual_rate_percent)
    periods = term_years * policy.MONTHS_PER_YEAR

    if rate == 0:
        return principal / periods

    factor = compound_factor(rate, periods)
    if factor == 1:
        # rate below float resolution; the annuity limit is straight-line
        return principal / periods

    payment = principal * rate * factor / (factor - 1)

    return ensure_finite("monthly payment", payment)


def principal_from_payment(
    payment: float, annual_rate_percent: float, term_years: int
) -> float:
    """
    Reverse the payment formula: the largest principal a payment can amortize.

    Args:
        payment: Monthly payment budget; anything <= 0 supports no loan
        annual_rate_percent: Nominal annual rate in percent
        term_years: Loan term in whole years

    Returns:
        Unrounded principal amount
    """
    annual_rate_percent = require_non_negative(
        "annual_rate_percent", annual_rate_percent
    )
    term_years = require_years("term_years", term_years)
    payment = require_finite("payment", payment)

    if payment <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_percent)
    periods = term_years * policy.MONTHS_PER_YEAR

    if rate == 0:
        return payment * periods

    factor = compound_factor(rate, periods)
    if factor == 1:
        return payment * periods

    principal = payment * (factor - 1) / (rate * factor)

    logger.debug(
        f"Payment {payment:.2f} at {annual_rate_percent}% over {term_years}y "
        f"supports principal {principal:.2f}"
    )
    return ensure_finite("principal", principal)
