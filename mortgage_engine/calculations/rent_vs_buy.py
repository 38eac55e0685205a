"""
Rent vs Buy Comparison

Year-by-year simulation of the cumulative cost of owning against the
cumulative cost of renting. Rent escalation and home appreciation are both
path-dependent, so the comparison is stepped rather than solved in closed form.
"""

import logging

from mortgage_engine import policy
from mortgage_engine.calculations.payment import compound_factor, monthly_payment
from mortgage_engine.calculations.validation import (
    ensure_finite,
    require_non_negative,
    require_positive,
    require_years,
)
from mortgage_engine.errors import InvalidArgumentError
from mortgage_engine.models import RentVsBuyResult, RentVsBuyYear

logger = logging.getLogger(__name__)


def compare_rent_vs_buy(
    home_price: float,
    down_payment: float,
    interest_rate_percent: float,
    loan_term_years: int,
    monthly_rent: float,
    property_tax_rate_percent: float,
    annual_insurance: float,
    maintenance_rate_percent: float,
    rent_increase_rate_percent: float,
    appreciation_rate_percent: float,
    years_to_analyze: int,
) -> RentVsBuyResult:
    """
    Compare buying a home with renting over a fixed horizon.

    Buying starts with the down payment as a sunk cost. Each year adds twelve
    mortgage payments, property tax and maintenance (as a percent of the
    purchase price) and the annual insurance premium, then credits the
    appreciation accrued on the home so far. Renting adds twelve months of
    rent, which then escalates for the following year.

    Args:
        home_price: Purchase price
        down_payment: Cash paid up front; the rest is financed
        interest_rate_percent: Mortgage rate in percent
        loan_term_years: Mortgage term in years
        monthly_rent: Starting monthly rent
        property_tax_rate_percent: Annual tax as a percent of the price
        annual_insurance: Annual homeowner's insurance premium
        maintenance_rate_percent: Annual upkeep as a percent of the price
        rent_increase_rate_percent: Annual rent growth in percent
        appreciation_rate_percent: Annual home appreciation in percent
        years_to_analyze: Simulation horizon in years

    Returns:
        RentVsBuyResult; break_even_year is the first year buying costs less
        than renting, or 0 if that never happens within the horizon
    """
    home_price = require_positive("home_price", home_price)
    down_payment = require_non_negative("down_payment", down_payment)
    if down_payment > home_price:
        raise InvalidArgumentError("down_payment", down_payment, "<= home_price")
    monthly_rent = require_non_negative("monthly_rent", monthly_rent)
    property_tax_rate_percent = require_non_negative(
        "property_tax_rate_percent", property_tax_rate_percent
    )
    annual_insurance = require_non_negative("annual_insurance", annual_insurance)
    maintenance_rate_percent = require_non_negative(
        "maintenance_rate_percent", maintenance_rate_percent
    )
    rent_increase_rate_percent = require_non_negative(
        "rent_increase_rate_percent", rent_increase_rate_percent
    )
    appreciation_rate_percent = require_non_negative(
        "appreciation_rate_percent", appreciation_rate_percent
    )
    interest_rate_percent = require_non_negative(
        "interest_rate_percent", interest_rate_percent
    )
    loan_term_years = require_years("loan_term_years", loan_term_years)
    years_to_analyze = require_years("years_to_analyze", years_to_analyze)

    loan_amount = home_price - down_payment
    payment = monthly_payment(loan_amount, interest_rate_percent, loan_term_years)

    annual_mortgage = payment * policy.MONTHS_PER_YEAR
    annual_property_tax = home_price * (property_tax_rate_percent / 100)
    annual_maintenance = home_price * (maintenance_rate_percent / 100)
    annual_ownership_cost = (
        annual_mortgage + annual_property_tax + annual_insurance + annual_maintenance
    )

    buying_cost = down_payment
    renting_cost = 0.0
    current_rent = monthly_rent
    break_even_year = 0
    yearly = []
    places = policy.MONEY_DECIMAL_PLACES

    for year in range(1, years_to_analyze + 1):
        home_value = home_price * compound_factor(
            appreciation_rate_percent / 100, year
        )
        buying_cost += annual_ownership_cost
        buying_cost -= home_value - home_price

        rent_paid = current_rent
        renting_cost += rent_paid * policy.MONTHS_PER_YEAR
        current_rent *= 1 + rent_increase_rate_percent / 100

        ensure_finite("cumulative renting cost", renting_cost)
        ensure_finite("cumulative buying cost", buying_cost)

        if break_even_year == 0 and buying_cost < renting_cost:
            break_even_year = year

        yearly.append(
            RentVsBuyYear(
                year=year,
                cumulative_buying_cost=round(buying_cost, places),
                cumulative_renting_cost=round(renting_cost, places),
                home_value=round(home_value, places),
                monthly_rent=round(rent_paid, places),
            )
        )

    logger.debug(
        f"Rent vs buy over {years_to_analyze}y: buying {buying_cost:.2f}, "
        f"renting {renting_cost:.2f}, break-even year {break_even_year}"
    )

    return RentVsBuyResult(
        cumulative_buying_cost=round(buying_cost, places),
        cumulative_renting_cost=round(renting_cost, places),
        break_even_year=break_even_year,
        yearly=tuple(yearly),
    )
