"""
Affordability Calculations

Derives the largest loan a borrower can carry from the front-end (housing)
and back-end (total debt) payment-to-income limits.
"""

import logging

from mortgage_engine import policy
from mortgage_engine.calculations.payment import principal_from_payment
from mortgage_engine.calculations.validation import (
    require_non_negative,
    require_positive,
    require_years,
)
from mortgage_engine.models import AffordabilityResult

logger = logging.getLogger(__name__)


def max_housing_payment(monthly_income: float, monthly_debts: float) -> float:
    """
    Largest monthly mortgage payment allowed by both payment-to-income limits.

    Returns:
        The smaller of the front-end budget and the back-end budget net of
        existing debts, never below zero
    """
    front_end = monthly_income * policy.FRONT_END_RATIO
    back_end = monthly_income * policy.BACK_END_RATIO - monthly_debts
    return max(0.0, min(front_end, back_end))


def calculate_affordability(
    annual_income: float,
    monthly_debts: float,
    down_payment: float,
    interest_rate_percent: float,
    term_years: int,
) -> AffordabilityResult:
    """
    Calculate the maximum loan and home price a borrower can afford.

    Args:
        annual_income: Gross annual income
        monthly_debts: Existing monthly debt payments (cards, auto, student)
        down_payment: Cash available for the down payment
        interest_rate_percent: Expected annual rate in percent
        term_years: Loan term in whole years

    Returns:
        AffordabilityResult with monetary values rounded to cents
    """
    annual_income = require_positive("annual_income", annual_income)
    monthly_debts = require_non_negative("monthly_debts", monthly_debts)
    down_payment = require_non_negative("down_payment", down_payment)
    interest_rate_percent = require_non_negative(
        "interest_rate_percent", interest_rate_percent
    )
    term_years = require_years("term_years", term_years)

    monthly_income = annual_income / policy.MONTHS_PER_YEAR
    available = max_housing_payment(monthly_income, monthly_debts)

    max_loan = principal_from_payment(available, interest_rate_percent, term_years)
    max_home_price = max_loan + down_payment

    dti_percent = (monthly_debts + available) / monthly_income * 100
    is_affordable = (
        dti_percent <= policy.MAX_DEBT_TO_INCOME_RATIO * 100 and available > 0
    )

    logger.debug(
        f"Affordability: income {monthly_income:.2f}/month, debts {monthly_debts:.2f}, "
        f"payment budget {available:.2f}, max loan {max_loan:.2f}"
    )

    places = policy.MONEY_DECIMAL_PLACES
    return AffordabilityResult(
        max_loan_amount=round(max(0.0, max_loan), places),
        max_home_price=round(max(0.0, max_home_price), places),
        recommended_payment=round(available, places),
        debt_to_income_ratio_percent=round(dti_percent, places),
        is_affordable=is_affordable,
    )
