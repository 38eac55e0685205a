"""
Mortgage Calculation Engine

Pure, deterministic calculation modules. Every payment in the engine is
derived from the level-payment formula in ``payment``.
"""

from mortgage_engine.calculations import (
    payment,
    amortization,
    refinance,
    affordability,
    preapproval,
    rent_vs_buy,
    mortgage,
    scenarios,
)

__all__ = [
    "payment",
    "amortization",
    "refinance",
    "affordability",
    "preapproval",
    "rent_vs_buy",
    "mortgage",
    "scenarios",
]
