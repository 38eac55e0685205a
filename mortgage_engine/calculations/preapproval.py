"""
Pre-Approval Evaluation

Applies the four eligibility rules (debt-to-income, credit score, down
payment, employment), prices the loan from the credit score tier and, for
eligible borrowers, back-solves the maximum 30-year loan.
"""

import logging
from typing import List

from mortgage_engine import policy
from mortgage_engine.calculations.payment import principal_from_payment
from mortgage_engine.calculations.validation import (
    require_non_negative,
    require_positive,
)
from mortgage_engine.errors import InvalidArgumentError
from mortgage_engine.models import PreApprovalResult

logger = logging.getLogger(__name__)

DEBT_TO_INCOME_CHECK = "debt_to_income"
CREDIT_SCORE_CHECK = "credit_score"
DOWN_PAYMENT_CHECK = "down_payment"
EMPLOYMENT_CHECK = "employment"


def passes_debt_to_income(monthly_debts: float, monthly_income: float) -> bool:
    return monthly_debts / monthly_income <= policy.MAX_DEBT_TO_INCOME_RATIO


def passes_credit_score(credit_score: int) -> bool:
    return credit_score >= policy.MIN_CREDIT_SCORE


def passes_down_payment(down_payment: float) -> bool:
    return down_payment >= policy.MIN_DOWN_PAYMENT


def passes_employment(employment_status: str) -> bool:
    """Any status other than unemployed passes; comparison ignores case."""
    return (
        employment_status.strip().casefold()
        != policy.UNEMPLOYED_STATUS.casefold()
    )


def estimated_rate_percent(credit_score: int) -> float:
    """Annual rate offered for a credit score; tier minimums are inclusive."""
    for min_score, rate in policy.RATE_TIERS:
        if credit_score >= min_score:
            return rate
    return policy.BASE_RATE_PERCENT


def _decline_reasons(
    failed_checks: List[str], dti_ratio: float, credit_score: int
) -> List[str]:
    reasons = []
    if DEBT_TO_INCOME_CHECK in failed_checks:
        reasons.append(
            f"debt-to-income ratio is {dti_ratio:.2%} "
            f"(should be ≤ {policy.MAX_DEBT_TO_INCOME_RATIO:.0%})"
        )
    if CREDIT_SCORE_CHECK in failed_checks:
        reasons.append(
            f"credit score is {credit_score} (should be ≥ {policy.MIN_CREDIT_SCORE})"
        )
    if DOWN_PAYMENT_CHECK in failed_checks:
        reasons.append(
            f"down payment should be at least ${policy.MIN_DOWN_PAYMENT:,.0f}"
        )
    if EMPLOYMENT_CHECK in failed_checks:
        reasons.append("employment verification is required")
    return reasons


def check_pre_approval(
    annual_income: float,
    monthly_debts: float,
    down_payment: float,
    credit_score: int,
    employment_status: str,
) -> PreApprovalResult:
    """
    Evaluate a borrower for mortgage pre-approval.

    All four checks are always evaluated so that a declined borrower is told
    every reason at once.

    Args:
        annual_income: Gross annual income
        monthly_debts: Existing monthly debt payments
        down_payment: Cash available for the down payment
        credit_score: FICO-style credit score
        employment_status: e.g. "Employed", "Self-Employed", "Unemployed"

    Returns:
        PreApprovalResult; max_loan_amount is 0 unless eligible
    """
    annual_income = require_positive("annual_income", annual_income)
    monthly_debts = require_non_negative("monthly_debts", monthly_debts)
    down_payment = require_non_negative("down_payment", down_payment)
    score = require_non_negative("credit_score", credit_score)
    if not score.is_integer():
        raise InvalidArgumentError("credit_score", credit_score, "a whole number")
    credit_score = int(score)
    if not isinstance(employment_status, str):
        raise InvalidArgumentError("employment_status", employment_status, "text")

    monthly_income = annual_income / policy.MONTHS_PER_YEAR
    dti_ratio = monthly_debts / monthly_income

    failed_checks = []
    if not passes_debt_to_income(monthly_debts, monthly_income):
        failed_checks.append(DEBT_TO_INCOME_CHECK)
    if not passes_credit_score(credit_score):
        failed_checks.append(CREDIT_SCORE_CHECK)
    if not passes_down_payment(down_payment):
        failed_checks.append(DOWN_PAYMENT_CHECK)
    if not passes_employment(employment_status):
        failed_checks.append(EMPLOYMENT_CHECK)

    is_eligible = not failed_checks
    rate = estimated_rate_percent(credit_score)

    max_loan = 0.0
    if is_eligible:
        payment_budget = monthly_income * policy.FRONT_END_RATIO - monthly_debts
        max_loan = principal_from_payment(
            payment_budget, rate, policy.PRE_APPROVAL_TERM_YEARS
        )

    places = policy.MONEY_DECIMAL_PLACES
    max_loan = round(max(0.0, max_loan), places)

    if is_eligible:
        message = (
            f"Congratulations! You may qualify for a mortgage up to ${max_loan:,.0f}."
        )
    else:
        reasons = _decline_reasons(failed_checks, dti_ratio, credit_score)
        message = f"To improve your chances: {', '.join(reasons)}."

    logger.debug(
        f"Pre-approval: eligible={is_eligible}, failed={failed_checks}, "
        f"rate={rate}%, max loan {max_loan:.2f}"
    )

    return PreApprovalResult(
        is_eligible=is_eligible,
        max_loan_amount=max_loan,
        estimated_rate_percent=rate,
        message=message,
        debt_to_income_ratio_percent=round(dti_ratio * 100, places),
        failed_checks=tuple(failed_checks),
    )
