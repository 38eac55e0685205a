"""
Mortgage calculation engine.

Loan payments, amortization schedules, refinance economics, affordability
limits, pre-approval eligibility and rent-versus-buy comparisons.
"""

from mortgage_engine.calculations.affordability import calculate_affordability
from mortgage_engine.calculations.amortization import (
    generate_schedule,
    remaining_balance,
    summarize_by_year,
    total_interest,
)
from mortgage_engine.calculations.mortgage import calculate_mortgage
from mortgage_engine.calculations.payment import monthly_payment, principal_from_payment
from mortgage_engine.calculations.preapproval import check_pre_approval
from mortgage_engine.calculations.refinance import analyze_refinance
from mortgage_engine.calculations.rent_vs_buy import compare_rent_vs_buy
from mortgage_engine.calculations.scenarios import compare_rate_scenarios
from mortgage_engine.errors import (
    InvalidArgumentError,
    MortgageEngineError,
    NumericOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    "analyze_refinance",
    "calculate_affordability",
    "calculate_mortgage",
    "check_pre_approval",
    "compare_rate_scenarios",
    "compare_rent_vs_buy",
    "generate_schedule",
    "monthly_payment",
    "principal_from_payment",
    "remaining_balance",
    "summarize_by_year",
    "total_interest",
    "InvalidArgumentError",
    "MortgageEngineError",
    "NumericOverflowError",
]
