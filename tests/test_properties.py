"""
Invariant Tests

Properties that must hold for every valid input, checked over a spread of
loans rather than single examples.
"""

import inspect

import pytest

from mortgage_engine import (
    analyze_refinance,
    calculate_affordability,
    check_pre_approval,
    compare_rent_vs_buy,
    generate_schedule,
    monthly_payment,
    total_interest,
)
from mortgage_engine import policy
from mortgage_engine.calculations import affordability, preapproval

LOANS = [
    (400000, 6.5, 30),
    (250000, 3.25, 15),
    (150000, 12.0, 10),
    (90000, 0.01, 5),
    (500000, 0, 20),
    (1, 8.0, 1),
    (0, 5.0, 30),
    (750000, 4.875, 40),
]


class TestPaymentProperties:
    """Test payment formula invariants."""

    @pytest.mark.parametrize("rate", [0.5, 3.0, 6.5, 10.0, 18.0])
    def test_longer_term_means_smaller_payment(self, rate):
        """Test payment strictly decreases as the term grows."""
        payments = [monthly_payment(300000, rate, years) for years in range(1, 41)]
        assert all(a > b for a, b in zip(payments, payments[1:]))

    @pytest.mark.parametrize("principal, years", [(300000, 15), (123456.78, 7), (1, 1)])
    def test_zero_rate_exact(self, principal, years):
        """Test zero rate is exactly principal over number of payments."""
        assert monthly_payment(principal, 0, years) == principal / (years * 12)


class TestScheduleProperties:
    """Test amortization schedule invariants."""

    @pytest.mark.parametrize("principal, rate, years", LOANS)
    def test_terminal_balance_is_zero(self, principal, rate, years):
        """Test the last balance is exactly zero."""
        assert generate_schedule(principal, rate, years)[-1].remaining_balance == 0

    @pytest.mark.parametrize("principal, rate, years", LOANS)
    def test_balance_never_increases(self, principal, rate, years):
        """Test balances are non-negative and monotonically non-increasing."""
        balances = [e.remaining_balance for e in generate_schedule(principal, rate, years)]
        assert all(b >= 0 for b in balances)
        assert all(a >= b for a, b in zip(balances, balances[1:]))

    @pytest.mark.parametrize("principal, rate, years", LOANS)
    def test_principal_sums_to_loan(self, principal, rate, years):
        """Test principal portions repay the loan within a cent per period."""
        schedule = generate_schedule(principal, rate, years)
        repaid = sum(e.principal_portion for e in schedule)
        assert repaid == pytest.approx(principal, abs=0.01 * len(schedule))

    @pytest.mark.parametrize("principal, rate, years", LOANS)
    def test_interest_sums_to_total_interest(self, principal, rate, years):
        """Test stepped interest agrees with the closed form."""
        schedule = generate_schedule(principal, rate, years)
        paid = sum(e.interest_portion for e in schedule)
        assert paid == pytest.approx(
            total_interest(principal, rate, years), abs=0.01 * len(schedule)
        )


class TestRefinanceProperties:
    """Test refinance invariants."""

    @pytest.mark.parametrize(
        "current_rate, current_years, new_rate, new_years",
        [(6.0, 30, 6.0, 30), (6.0, 30, 7.0, 30), (5.0, 25, 5.5, 20), (4.0, 10, 4.0, 5)],
    )
    def test_no_savings_without_better_terms(
        self, current_rate, current_years, new_rate, new_years
    ):
        """Test a rate that is no lower over a term that is no longer saves nothing."""
        result = analyze_refinance(
            250000, current_rate, current_years, new_rate, new_years, 4000
        )
        assert result.monthly_savings <= 0
        assert result.break_even_periods == 0
        assert not result.is_recommended

    @pytest.mark.parametrize("closing_costs", [0, 1500, 5000, 25000, 80000])
    def test_recommendation_branches_exclusive(self, closing_costs):
        """Test exactly one recommendation branch is chosen."""
        result = analyze_refinance(300000, 7.0, 28, 6.25, 30, closing_costs)
        branches = [
            result.recommendation.startswith("Refinancing is recommended."),
            result.recommendation == "Refinancing would increase your monthly payment.",
            "may be too long" in result.recommendation,
        ]
        assert sum(branches) == 1
        assert branches[0] == result.is_recommended


class TestSharedPolicy:
    """Test policy constants are defined once and shared."""

    def test_modules_share_policy(self):
        """Test both underwriting modules read the same policy module."""
        assert affordability.policy is policy
        assert preapproval.policy is policy

    @pytest.mark.parametrize("literal", ["0.28", "0.36", "0.43", "620", "10000"])
    def test_no_duplicated_thresholds(self, literal):
        """Test thresholds are not re-declared as literals."""
        assert literal not in inspect.getsource(affordability)
        assert literal not in inspect.getsource(preapproval)

    def test_threshold_values(self):
        """Test the policy thresholds."""
        assert policy.FRONT_END_RATIO == 0.28
        assert policy.BACK_END_RATIO == 0.36
        assert policy.MAX_DEBT_TO_INCOME_RATIO == 0.43
        assert policy.MIN_CREDIT_SCORE == 620
        assert policy.MIN_DOWN_PAYMENT == 10000
        assert policy.REFINANCE_MAX_BREAK_EVEN_MONTHS == 60


class TestIdempotence:
    """Test repeated calls give bit-identical results."""

    def test_schedule(self):
        first = generate_schedule(400000, 6.5, 30)
        second = generate_schedule(400000, 6.5, 30)
        assert [e.model_dump() for e in first] == [e.model_dump() for e in second]

    def test_results(self, rent_vs_buy_inputs):
        calls = [
            lambda: monthly_payment(400000, 6.5, 30),
            lambda: analyze_refinance(300000, 7.5, 25, 6.0, 30, 5000),
            lambda: calculate_affordability(95000, 650, 30000, 6.75, 30),
            lambda: check_pre_approval(95000, 650, 30000, 705, "Employed"),
            lambda: compare_rent_vs_buy(**rent_vs_buy_inputs),
        ]
        for call in calls:
            assert call() == call()
