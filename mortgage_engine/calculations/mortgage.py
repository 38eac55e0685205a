"""
Mortgage Summary

Full payment breakdown for a home purchase: principal and interest plus the
escrow and association line items a borrower actually pays each month.
"""

import logging
from datetime import date
from typing import Optional

from mortgage_engine import policy
from mortgage_engine.calculations.amortization import generate_schedule
from mortgage_engine.calculations.validation import (
    require_non_negative,
    require_positive,
    require_years,
)
from mortgage_engine.errors import InvalidArgumentError
from mortgage_engine.models import LoanTerms, MortgageSummary

logger = logging.getLogger(__name__)


def required_annual_income(monthly_payment: float) -> float:
    """Gross annual income needed to keep a payment within the front-end ratio."""
    return monthly_payment / policy.FRONT_END_RATIO * policy.MONTHS_PER_YEAR


def calculate_mortgage(
    property_price: float,
    down_payment: float,
    interest_rate_percent: float,
    term_years: int,
    annual_property_tax: float = 0.0,
    annual_insurance: float = 0.0,
    monthly_pmi: float = 0.0,
    monthly_hoa: float = 0.0,
    start_date: Optional[date] = None,
) -> MortgageSummary:
    """
    Calculate the monthly cost of financing a purchase.

    Taxes and insurance are given as annual amounts and reported monthly.
    PMI and HOA dues are already monthly. None of them are part of the
    principal and interest payment.

    Args:
        property_price: Purchase price
        down_payment: Cash paid up front
        interest_rate_percent: Annual rate in percent
        term_years: Loan term in whole years
        annual_property_tax: Yearly property tax bill
        annual_insurance: Yearly homeowner's insurance premium
        monthly_pmi: Private mortgage insurance per month
        monthly_hoa: Homeowners association dues per month
        start_date: First payment date for the schedule

    Returns:
        MortgageSummary with monetary values rounded to cents and the
        unrounded amortization schedule
    """
    property_price = require_positive("property_price", property_price)
    down_payment = require_non_negative("down_payment", down_payment)
    if down_payment > property_price:
        raise InvalidArgumentError("down_payment", down_payment, "<= property_price")
    interest_rate_percent = require_non_negative(
        "interest_rate_percent", interest_rate_percent
    )
    term_years = require_years("term_years", term_years)
    annual_property_tax = require_non_negative(
        "annual_property_tax", annual_property_tax
    )
    annual_insurance = require_non_negative("annual_insurance", annual_insurance)
    monthly_pmi = require_non_negative("monthly_pmi", monthly_pmi)
    monthly_hoa = require_non_negative("monthly_hoa", monthly_hoa)

    terms = LoanTerms(
        principal=property_price - down_payment,
        annual_rate_percent=interest_rate_percent,
        term_years=term_years,
    )
    schedule = generate_schedule(
        terms.principal, terms.annual_rate_percent, terms.term_years, start_date
    )
    # Every entry carries the same level payment
    payment = schedule[0].payment

    monthly_property_tax = annual_property_tax / policy.MONTHS_PER_YEAR
    monthly_insurance = annual_insurance / policy.MONTHS_PER_YEAR
    total_monthly = (
        payment + monthly_property_tax + monthly_insurance + monthly_pmi + monthly_hoa
    )
    total_payment = payment * terms.number_of_payments

    down_payment_percent = down_payment / property_price * 100

    logger.debug(
        f"Mortgage on {property_price} with {down_payment} down: "
        f"P&I {payment:.2f}, total monthly {total_monthly:.2f}"
    )

    places = policy.MONEY_DECIMAL_PLACES
    return MortgageSummary(
        terms=terms,
        principal_and_interest=round(payment, places),
        monthly_property_tax=round(monthly_property_tax, places),
        monthly_insurance=round(monthly_insurance, places),
        monthly_pmi=round(monthly_pmi, places),
        monthly_hoa=round(monthly_hoa, places),
        total_monthly_payment=round(total_monthly, places),
        total_payment=round(total_payment, places),
        total_interest=round(total_payment - terms.principal, places),
        down_payment_percent=round(down_payment_percent, places),
        loan_to_value_percent=round(100 - down_payment_percent, places),
        required_annual_income=round(required_annual_income(payment), places),
        schedule=tuple(schedule),
    )
