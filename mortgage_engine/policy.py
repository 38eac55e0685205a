"""
Underwriting Policy Constants

Every threshold used by more than one calculation is defined here once.
These are fixed lending policy, not tunable settings.
"""

MONTHS_PER_YEAR = 12

# Results are rounded to cents when a result model is built
MONEY_DECIMAL_PLACES = 2

# Payment-to-income ratios
FRONT_END_RATIO = 0.28  # housing payment only
BACK_END_RATIO = 0.36  # housing plus all other monthly debts
MAX_DEBT_TO_INCOME_RATIO = 0.43

# Pre-approval
MIN_CREDIT_SCORE = 620
MIN_DOWN_PAYMENT = 10000.0
UNEMPLOYED_STATUS = "Unemployed"
PRE_APPROVAL_TERM_YEARS = 30

# (minimum credit score, annual rate percent), best tier first
RATE_TIERS = (
    (740, 6.5),
    (680, 7.0),
)
BASE_RATE_PERCENT = 7.5

# Refinancing must pay back closing costs within five years
REFINANCE_MAX_BREAK_EVEN_MONTHS = 60
