"""
Known-Value Parity Tests

Benchmark scenarios with published or hand-checked results. Payments are
compared to the cent; decisions and break-even points exactly.
"""

import pytest

from mortgage_engine import (
    analyze_refinance,
    check_pre_approval,
    compare_rent_vs_buy,
    generate_schedule,
    monthly_payment,
)

pytestmark = pytest.mark.parity


# =============================================================================
# BENCHMARK PAYMENTS (principal, rate %, years) -> monthly P&I
# =============================================================================

PAYMENT_BENCHMARKS = [
    (400000, 6.5, 30, 2528.27),
    (200000, 6.0, 30, 1199.10),
    (300000, 6.0, 30, 1798.65),
    (1000000, 5.0, 30, 5368.22),
    (100000, 5.0, 15, 790.79),
]


@pytest.mark.parametrize("principal, rate, years, expected", PAYMENT_BENCHMARKS)
def test_payment_benchmarks(principal, rate, years, expected):
    """Test payments match published amortization tables."""
    assert monthly_payment(principal, rate, years) == pytest.approx(expected, abs=0.01)


def test_conventional_30_year_fixed():
    """$400k at 6.5% for 30 years."""
    assert round(monthly_payment(400000, 6.5, 30), 2) == 2528.27


def test_zero_rate_15_year_schedule():
    """$300k interest-free over 15 years amortizes in flat installments."""
    schedule = generate_schedule(300000, 0, 15)
    assert len(schedule) == 180
    for entry in schedule:
        assert entry.interest_portion == 0
        assert entry.principal_portion == 300000 / 180
    assert schedule[-1].remaining_balance == 0


def test_refinance_7_5_to_6_percent():
    """Refinance $300k from 7.5%/25y to 6%/30y with $5,000 closing costs."""
    result = analyze_refinance(300000, 7.5, 25, 6.0, 30, 5000)
    assert result.current_payment == pytest.approx(2216.97, abs=0.02)
    assert result.new_payment == pytest.approx(1798.65, abs=0.01)
    assert result.monthly_savings > 0
    assert 0 < result.break_even_periods <= 60
    assert result.total_savings > 0
    assert result.is_recommended


def test_pre_approval_down_payment_shortfall():
    """Credit score passes, but the down payment is under $10,000."""
    result = check_pre_approval(40000, 3000, 5000, 650, "Employed")
    assert not result.is_eligible
    assert result.estimated_rate_percent == 7.5
    assert "down payment" in result.message


def test_rent_vs_buy_ten_year_horizon(rent_vs_buy_inputs):
    """$400k home vs $2,200 rent over 10 years."""
    result = compare_rent_vs_buy(**rent_vs_buy_inputs)
    assert 1 <= result.break_even_year <= 10
    assert result.break_even_year == 4
    assert result.cumulative_buying_cost < result.cumulative_renting_cost
