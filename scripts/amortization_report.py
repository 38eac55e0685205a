#!/usr/bin/env python3
"""
Print a loan summary and yearly amortization table.

Usage:
    python scripts/amortization_report.py 400000 6.5 30
    python scripts/amortization_report.py 400000 6.5 30 --start 2026-01-01
"""

import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
from datetime import date

from mortgage_engine import (
    MortgageEngineError,
    generate_schedule,
    monthly_payment,
    summarize_by_year,
    total_interest,
)
from mortgage_engine.config import configure_logging


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("principal", type=float)
    parser.add_argument("rate", type=float, help="annual rate in percent")
    parser.add_argument("years", type=int)
    parser.add_argument("--start", type=date.fromisoformat, default=None)
    args = parser.parse_args()

    configure_logging()

    try:
        payment = monthly_payment(args.principal, args.rate, args.years)
        schedule = generate_schedule(args.principal, args.rate, args.years, args.start)
        interest = total_interest(args.principal, args.rate, args.years)
    except MortgageEngineError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Loan: ${args.principal:,.2f} at {args.rate}% for {args.years} years")
    print(f"  Monthly payment: ${payment:,.2f}")
    print(f"  Total interest:  ${interest:,.2f}")
    if args.start:
        print(f"  Final payment:   {schedule[-1].payment_date.isoformat()}")

    print(f"\n{'Year':>4} {'Principal':>14} {'Interest':>14} {'Balance':>14}")
    for year in summarize_by_year(schedule):
        print(
            f"{year.year:>4} {year.principal:>14,.2f} "
            f"{year.interest:>14,.2f} {year.ending_balance:>14,.2f}"
        )


if __name__ == "__main__":
    main()
