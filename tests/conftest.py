"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mortgage_engine.config import get_settings


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "parity: marks known-value benchmark tests")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def conventional_loan():
    """$400k, 6.5%, 30-year fixed."""
    return {"principal": 400000, "annual_rate_percent": 6.5, "term_years": 30}


@pytest.fixture
def rent_vs_buy_inputs():
    """Typical purchase of a $400k home against $2,200/month rent."""
    return {
        "home_price": 400000,
        "down_payment": 80000,
        "interest_rate_percent": 6.5,
        "loan_term_years": 30,
        "monthly_rent": 2200,
        "property_tax_rate_percent": 1.2,
        "annual_insurance": 1500,
        "maintenance_rate_percent": 1.0,
        "rent_increase_rate_percent": 3,
        "appreciation_rate_percent": 3,
        "years_to_analyze": 10,
    }
