"""
Loan Amortization Calculations

Expands a fixed-rate loan into its month-by-month schedule of interest,
principal and outstanding balance.
"""

import logging
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from mortgage_engine import policy
from mortgage_engine.calculations.payment import (
    compound_factor,
    monthly_payment,
    monthly_rate,
)
from mortgage_engine.calculations.validation import (
    ensure_finite,
    require_non_negative,
    require_years,
)
from mortgage_engine.errors import InvalidArgumentError, NumericOverflowError
from mortgage_engine.models import AmortizationEntry, AnnualAmortization

logger = logging.getLogger(__name__)

# Drift allowed in the final balance before it is written off, per period
RESIDUAL_TOLERANCE = 0.01
# Relative drift allowed on very large principals
RESIDUAL_RELATIVE_TOLERANCE = 1e-9


def generate_schedule(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    start_date: Optional[date] = None,
) -> List[AmortizationEntry]:
    """
    Generate a full amortization schedule.

    Each call regenerates the schedule from period 1. The balance never goes
    negative and is exactly zero after the final payment.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Nominal annual rate in percent
        term_years: Loan term in whole years
        start_date: Date of the first payment; entries carry no dates if omitted

    Returns:
        One entry per month, term_years * 12 entries in period order

    Raises:
        NumericOverflowError: If the payment is too imprecise to repay the
            principal (only at extreme rates)
    """
    payment = monthly_payment(principal, annual_rate_percent, term_years)
    rate = monthly_rate(float(annual_rate_percent))
    periods = int(term_years) * policy.MONTHS_PER_YEAR

    schedule = []
    balance = float(principal)
    cumulative_interest = 0.0
    cumulative_principal = 0.0

    for period in range(1, periods + 1):
        interest = balance * rate
        principal_pmt = payment - interest

        balance -= principal_pmt
        cumulative_interest += interest
        cumulative_principal += principal_pmt

        if period == periods:
            _check_residual(balance, float(principal), periods)
            balance = 0.0
        elif balance < 0:
            balance = 0.0

        payment_date = None
        if start_date is not None:
            payment_date = start_date + relativedelta(months=period - 1)

        schedule.append(
            AmortizationEntry(
                period=period,
                payment_date=payment_date,
                payment=payment,
                principal_portion=principal_pmt,
                interest_portion=interest,
                remaining_balance=balance,
                cumulative_interest=cumulative_interest,
                cumulative_principal=cumulative_principal,
            )
        )

    logger.debug(
        f"Generated {periods}-period schedule for {principal} at "
        f"{annual_rate_percent}% (payment {payment:.2f})"
    )
    return schedule


def _check_residual(balance: float, principal: float, periods: int) -> None:
    """Only rounding drift may be written off by the final payment."""
    tolerance = max(
        RESIDUAL_TOLERANCE * periods, RESIDUAL_RELATIVE_TOLERANCE * principal
    )
    if abs(balance) > tolerance:
        raise NumericOverflowError(
            f"schedule leaves {balance!r} unpaid after {periods} periods; "
            f"the payment lost precision at this rate"
        )


def total_interest(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    """Total interest paid over the life of the loan (closed form)."""
    payment = monthly_payment(principal, annual_rate_percent, term_years)
    return payment * int(term_years) * policy.MONTHS_PER_YEAR - float(principal)


def remaining_balance(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    payments_made: int,
) -> float:
    """
    Calculate the outstanding balance after N monthly payments.

    Useful for deriving the current balance of an existing loan before
    analyzing a refinance.
    """
    payment = monthly_payment(principal, annual_rate_percent, term_years)
    principal = float(principal)
    payments_made = require_non_negative("payments_made", payments_made)
    if not payments_made.is_integer():
        raise InvalidArgumentError("payments_made", payments_made, "a whole number")
    payments_made = int(payments_made)

    if payments_made >= int(term_years) * policy.MONTHS_PER_YEAR:
        return 0.0

    rate = monthly_rate(float(annual_rate_percent))
    if rate == 0:
        return max(0.0, principal - payment * payments_made)

    factor = compound_factor(rate, payments_made)
    balance = principal * factor - payment * ((factor - 1) / rate)

    return max(0.0, ensure_finite("remaining balance", balance))


def summarize_by_year(schedule: List[AmortizationEntry]) -> List[AnnualAmortization]:
    """
    Roll a monthly schedule up into loan years.

    The ending balance of a year is the balance after its last payment.
    """
    annual_data = []
    current_year = None
    year_principal = 0.0
    year_interest = 0.0
    ending_balance = 0.0

    for entry in schedule:
        entry_year = (entry.period - 1) // policy.MONTHS_PER_YEAR + 1

        if current_year is not None and entry_year != current_year:
            annual_data.append(
                AnnualAmortization(
                    year=current_year,
                    principal=year_principal,
                    interest=year_interest,
                    ending_balance=ending_balance,
                )
            )
            year_principal = 0.0
            year_interest = 0.0

        current_year = entry_year
        year_principal += entry.principal_portion
        year_interest += entry.interest_portion
        ending_balance = entry.remaining_balance

    # Push final year
    if current_year is not None:
        annual_data.append(
            AnnualAmortization(
                year=current_year,
                principal=year_principal,
                interest=year_interest,
                ending_balance=ending_balance,
            )
        )

    return annual_data
