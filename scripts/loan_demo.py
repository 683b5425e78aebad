#!/usr/bin/env python3
"""Walk through the loan organizer features on the console.

Builds a personal loan, a mortgage and an auto loan, prints their terms
and schedules, compares them, exercises the stateless calculator, and
finishes with a generated sample portfolio.

Settings come from the environment (see ``LoanOrganizerConfig.from_env``)
and can be overridden on the command line.
"""

import argparse
from datetime import date
from decimal import Decimal

from loan_organizer import calculator
from loan_organizer.config import LoanOrganizerConfig
from loan_organizer.generators import SampleLoanGenerator
from loan_organizer.loan_types import auto, auto_loan, mortgage, mortgage_loan
from loan_organizer.logging import get_logger, setup_logging
from loan_organizer.models import LoanAccount, LoanType
from loan_organizer.sinks import ConsoleSink
from loan_organizer.store import LoanPortfolio

logger = get_logger(__name__)


def demonstrate_basic_loan(sink: ConsoleSink, config: LoanOrganizerConfig, extra_payment: Decimal) -> LoanAccount:
    print("\n--- BASIC LOAN ---")
    loan = LoanAccount("Personal Loan", LoanType.PERSONAL, 10000, "0.075", 36, config=config.loan)
    sink.write_loan(loan)
    sink.write_schedule(loan.loan_name, loan.iter_amortization_schedule())

    print("\nMonthly payment at alternative terms:")
    for months in (36, 60, 72):
        print(f"  {months} months: {calculator.format_currency(loan.calculate_monthly_payment(months))}")

    savings = loan.calculate_savings_with_extra_payments(extra_payment)
    months_saved = loan.calculate_months_saved_with_extra_payments(extra_payment)
    print(
        f"\nPaying an extra {calculator.format_currency(extra_payment)} per month saves "
        f"{calculator.format_currency(savings)} in interest and {months_saved} months"
    )

    loan.record_payment(loan.calculate_monthly_payment(), date.today(), "First payment")
    loan.record_payment(-100, date.today(), "Invalid payment")
    sink.write_batch("payments", loan.payment_history)
    return loan


def demonstrate_mortgage(sink: ConsoleSink, config: LoanOrganizerConfig) -> LoanAccount:
    print("\n--- MORTGAGE ---")
    loan = mortgage_loan(
        "Home Loan",
        200000,
        "0.04",
        360,
        address="123 Main St, Anytown, USA",
        property_value=250000,
        down_payment=50000,
        escrow_included=True,
        escrow_amount=350,
        config=config.loan,
    )
    sink.write_loan(loan)
    print(f"Loan-to-Value: {calculator.format_percent(mortgage.calculate_loan_to_value_ratio(loan))}")
    print(f"PMI Required: {'Yes' if mortgage.is_pmi_required(loan) else 'No'}")
    print(f"Total Monthly Payment: {calculator.format_currency(mortgage.calculate_total_monthly_payment(loan))}")
    print(f"Equity: {calculator.format_currency(mortgage.calculate_equity(loan))}")
    return loan


def demonstrate_auto_loan(sink: ConsoleSink, config: LoanOrganizerConfig) -> LoanAccount:
    print("\n--- AUTO LOAN ---")
    loan = auto_loan(
        "Car Loan",
        25000,
        "0.0399",
        60,
        make="Toyota",
        model="Camry",
        year=date.today().year,
        vin="4T1BF1FK5CU123456",
        vehicle_value=30000,
        is_new=True,
        config=config.loan,
    )
    sink.write_loan(loan)
    print(f"Loan-to-Value: {calculator.format_percent(auto.calculate_loan_to_value_ratio(loan))}")
    for years in range(1, 4):
        value = auto.estimate_current_value(loan, years)
        underwater = "underwater" if auto.is_loan_underwater(loan, years) else "above water"
        print(f"  After {years} year(s): vehicle worth {calculator.format_currency(value)}, {underwater}")
    return loan


def demonstrate_calculator() -> None:
    print("\n--- CALCULATOR ---")
    print(f"Monthly payment ($10,000, 5%, 36 months): "
          f"{calculator.format_currency(calculator.calculate_monthly_payment(10000, '0.05', 36))}")
    print(f"Total interest: "
          f"{calculator.format_currency(calculator.calculate_total_interest(10000, '0.05', 36))}")
    months = calculator.calculate_months_until_payoff(10000, "0.05", 250)
    print(f"Months to pay off $10,000 at $250/month: {months if months is not None else 'never'}")
    affordable = calculator.calculate_affordable_loan_amount(300, "0.05", 36)
    print(f"Affordable principal at $300/month for 36 months: {calculator.format_currency(affordable)}")


def demonstrate_portfolio(sink: ConsoleSink, loans: list[LoanAccount], config: LoanOrganizerConfig, count: int) -> None:
    print("\n--- PORTFOLIO ---")
    portfolio = LoanPortfolio()
    for loan in loans:
        portfolio.add_loan(loan)

    generator = SampleLoanGenerator(seed=config.seed, config=config.loan)
    for loan in generator.generate_batch(count):
        portfolio.add_loan(loan)

    sink.write_batch("loans", list(portfolio))
    print(f"Loans: {len(portfolio)}")
    print(f"Total principal: {calculator.format_currency(portfolio.total_principal())}")
    print(f"Combined monthly payment: {calculator.format_currency(portfolio.total_monthly_payment())}")
    print(f"Total interest: {calculator.format_currency(portfolio.total_interest())}")
    cheapest = portfolio.cheapest_loan()
    if cheapest is not None:
        print(f"Cheapest loan: {cheapest}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Loan organizer demonstration")
    parser.add_argument("--seed", type=int, default=None, help="Seed for generated sample loans")
    parser.add_argument(
        "--extra-payment",
        type=Decimal,
        default=Decimal("50"),
        help="Extra monthly payment for the savings example (default: 50)",
    )
    parser.add_argument("--samples", type=int, default=5, help="Generated sample loans (default: 5)")
    parser.add_argument("--rows", type=int, default=None, help="Schedule rows to print")
    parser.add_argument("--log-level", default=None, help="Log level (default: from LOG_LEVEL or INFO)")
    args = parser.parse_args()

    config = LoanOrganizerConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.rows is not None:
        config.output.max_schedule_rows = args.rows
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info("Running demo (seed=%s, samples=%d)", config.seed, args.samples)
    sink = ConsoleSink(pretty=config.output.pretty, max_records=config.output.max_schedule_rows)

    print("=" * 60)
    print("LOAN ORGANIZER DEMONSTRATION")
    print("=" * 60)

    personal = demonstrate_basic_loan(sink, config, args.extra_payment)
    home = demonstrate_mortgage(sink, config)
    car = demonstrate_auto_loan(sink, config)

    print("\n--- COMPARISON ---")
    print(calculator.compare_loan_costs(personal, car))

    demonstrate_calculator()
    demonstrate_portfolio(sink, [personal, home, car], config, args.samples)
    sink.close()


if __name__ == "__main__":
    main()
