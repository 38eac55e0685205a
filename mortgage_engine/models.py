"""
Value types returned by the calculation engine.

All models are frozen: a result is built once by a single call and never
mutated afterwards.
"""

from datetime import date
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from mortgage_engine import policy


class FrozenModel(BaseModel):
    """Immutable base for engine value types."""

    class Config:
        frozen = True


class LoanTerms(FrozenModel):
    """Principal, nominal annual rate (percent) and whole-year term of a loan."""

    principal: float = Field(ge=0)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(gt=0)

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / policy.MONTHS_PER_YEAR

    @property
    def number_of_payments(self) -> int:
        return self.term_years * policy.MONTHS_PER_YEAR


class AmortizationEntry(FrozenModel):
    """One period of an amortization schedule."""

    period: int = Field(ge=1)
    payment_date: Optional[date] = None
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float = Field(ge=0)
    cumulative_interest: float
    cumulative_principal: float


class AnnualAmortization(FrozenModel):
    """Schedule entries rolled up into a loan year."""

    year: int = Field(ge=1)
    principal: float
    interest: float
    ending_balance: float = Field(ge=0)


class RefinanceResult(FrozenModel):
    current_payment: float
    new_payment: float
    monthly_savings: float
    break_even_periods: int = Field(ge=0)
    total_savings: float
    is_recommended: bool
    recommendation: str


class AffordabilityResult(FrozenModel):
    max_loan_amount: float = Field(ge=0)
    max_home_price: float = Field(ge=0)
    recommended_payment: float = Field(ge=0)
    debt_to_income_ratio_percent: float
    is_affordable: bool


class PreApprovalResult(FrozenModel):
    is_eligible: bool
    max_loan_amount: float = Field(ge=0)
    estimated_rate_percent: float
    message: str
    debt_to_income_ratio_percent: float = 0.0
    failed_checks: Tuple[str, ...] = ()


class RentVsBuyYear(FrozenModel):
    """Running totals at the end of one simulated year."""

    year: int = Field(ge=1)
    cumulative_buying_cost: float
    cumulative_renting_cost: float
    home_value: float
    monthly_rent: float


class RentVsBuyResult(FrozenModel):
    cumulative_buying_cost: float
    cumulative_renting_cost: float
    break_even_year: int = Field(ge=0)  # 0 = buying never overtakes renting
    yearly: Tuple[RentVsBuyYear, ...] = ()


class MortgageSummary(FrozenModel):
    """Monthly payment breakdown for a purchase, with its schedule."""

    terms: LoanTerms
    principal_and_interest: float = Field(ge=0)
    monthly_property_tax: float = Field(ge=0)
    monthly_insurance: float = Field(ge=0)
    monthly_pmi: float = Field(ge=0)
    monthly_hoa: float = Field(ge=0)
    total_monthly_payment: float = Field(ge=0)
    total_payment: float = Field(ge=0)
    total_interest: float
    down_payment_percent: float
    loan_to_value_percent: float
    required_annual_income: float = Field(ge=0)
    schedule: Tuple[AmortizationEntry, ...] = ()


class RateScenario(FrozenModel):
    annual_rate_percent: float
    monthly_payment: float
    total_payment: float
    total_interest: float
