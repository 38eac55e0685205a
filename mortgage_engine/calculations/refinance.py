"""
Refinance Analysis

Compares the payment on an existing loan with a new loan for the same
outstanding balance and decides whether closing costs are recovered quickly
enough to justify refinancing.
"""

import logging
import math

from mortgage_engine import policy
from mortgage_engine.calculations.payment import monthly_payment
from mortgage_engine.calculations.validation import (
    ensure_finite,
    require_non_negative,
    require_years,
)
from mortgage_engine.models import RefinanceResult

logger = logging.getLogger(__name__)


def calculate_break_even_periods(closing_costs: float, monthly_savings: float) -> int:
    """Months of savings needed to recover closing costs; 0 if it never happens."""
    if monthly_savings <= 0:
        return 0
    return math.ceil(
        ensure_finite("break-even periods", closing_costs / monthly_savings)
    )


def _recommendation(
    is_recommended: bool, monthly_savings: float, break_even_periods: int
) -> str:
    if is_recommended:
        return (
            f"Refinancing is recommended. You'll save ${monthly_savings:,.2f}/month "
            f"and break even in {break_even_periods} months."
        )
    if monthly_savings <= 0:
        return "Refinancing would increase your monthly payment."
    return (
        f"Break-even period of {break_even_periods} months may be too long "
        f"to justify refinancing."
    )


def analyze_refinance(
    current_balance: float,
    current_rate_percent: float,
    current_remaining_years: int,
    new_rate_percent: float,
    new_term_years: int,
    closing_costs: float,
) -> RefinanceResult:
    """
    Analyze refinancing the outstanding balance of an existing loan.

    Savings are only counted over the shorter of the two remaining terms.
    A refinance is recommended when it saves money overall and pays back
    its closing costs within REFINANCE_MAX_BREAK_EVEN_MONTHS.

    Args:
        current_balance: Outstanding balance, also the new loan's principal
        current_rate_percent: Rate on the existing loan, in percent
        current_remaining_years: Years left on the existing loan
        new_rate_percent: Rate on the new loan, in percent
        new_term_years: Term of the new loan in years
        closing_costs: Up-front cost of refinancing

    Returns:
        RefinanceResult with monetary values rounded to cents
    """
    current_balance = require_non_negative("current_balance", current_balance)
    current_rate_percent = require_non_negative(
        "current_rate_percent", current_rate_percent
    )
    new_rate_percent = require_non_negative("new_rate_percent", new_rate_percent)
    closing_costs = require_non_negative("closing_costs", closing_costs)
    current_remaining_years = require_years(
        "current_remaining_years", current_remaining_years
    )
    new_term_years = require_years("new_term_years", new_term_years)

    current_payment = monthly_payment(
        current_balance, current_rate_percent, current_remaining_years
    )
    new_payment = monthly_payment(current_balance, new_rate_percent, new_term_years)

    monthly_savings = current_payment - new_payment
    break_even_periods = calculate_break_even_periods(closing_costs, monthly_savings)

    comparison_months = (
        min(current_remaining_years, new_term_years) * policy.MONTHS_PER_YEAR
    )
    total_savings = monthly_savings * comparison_months - closing_costs

    is_recommended = (
        total_savings > 0
        and break_even_periods <= policy.REFINANCE_MAX_BREAK_EVEN_MONTHS
    )

    logger.debug(
        f"Refinance {current_rate_percent}%/{current_remaining_years}y -> "
        f"{new_rate_percent}%/{new_term_years}y: savings {monthly_savings:.2f}/month, "
        f"break-even {break_even_periods} months"
    )

    places = policy.MONEY_DECIMAL_PLACES
    return RefinanceResult(
        current_payment=round(current_payment, places),
        new_payment=round(new_payment, places),
        monthly_savings=round(monthly_savings, places),
        break_even_periods=break_even_periods,
        total_savings=round(total_savings, places),
        is_recommended=is_recommended,
        recommendation=_recommendation(
            is_recommended, monthly_savings, break_even_periods
        ),
    )
