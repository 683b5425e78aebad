"""Stateless loan calculations.

The same formulas ``LoanAccount`` uses, callable with plain
``(principal, annual_rate, term_in_months)`` arguments for callers that
do not want to build a loan. Inputs go through the same validators as
the entity, so out-of-domain values raise the same errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_CEILING, Decimal
from typing import Any

from loan_organizer import amortization
from loan_organizer.exceptions import InvalidPaymentAmountError, InvalidPrincipalError
from loan_organizer.formatting import format_currency, format_date, format_percent
from loan_organizer.models import LoanAccount, PaymentDetails
from loan_organizer.validation import (
    ZERO,
    to_decimal,
    validate_interest_rate,
    validate_payment_amount,
    validate_principal,
    validate_term,
)

__all__ = [
    "LoanComparison",
    "calculate_affordable_loan_amount",
    "calculate_monthly_payment",
    "calculate_months_until_payoff",
    "calculate_remaining_balance",
    "calculate_total_interest",
    "calculate_total_loan_cost",
    "compare_loan_costs",
    "format_currency",
    "format_date",
    "format_percent",
    "generate_amortization_schedule",
]


def calculate_monthly_payment(principal: Any, annual_interest_rate: Any, term_in_months: int) -> Decimal:
    return amortization.monthly_payment(
        validate_principal(principal),
        validate_interest_rate(annual_interest_rate),
        validate_term(term_in_months),
    )


def calculate_total_loan_cost(principal: Any, annual_interest_rate: Any, term_in_months: int) -> Decimal:
    """Sum of all level payments over the term."""
    return calculate_monthly_payment(principal, annual_interest_rate, term_in_months) * term_in_months


def calculate_total_interest(principal: Any, annual_interest_rate: Any, term_in_months: int) -> Decimal:
    total_cost = calculate_total_loan_cost(principal, annual_interest_rate, term_in_months)
    return total_cost - validate_principal(principal)


def generate_amortization_schedule(
    principal: Any,
    annual_interest_rate: Any,
    term_in_months: int,
    start_date: date | None = None,
) -> list[PaymentDetails]:
    """Month-by-month schedule; ``start_date`` defaults to today."""
    return list(
        amortization.iter_schedule(
            validate_principal(principal),
            validate_interest_rate(annual_interest_rate),
            validate_term(term_in_months),
            start_date or date.today(),
        )
    )


def calculate_remaining_balance(
    principal: Any,
    annual_interest_rate: Any,
    term_in_months: int,
    start_date: date,
    as_of_date: date,
) -> Decimal:
    """Scheduled balance on ``as_of_date`` for a loan starting on ``start_date``."""
    loan = LoanAccount(
        "Balance calculation",
        "GENERAL",
        principal,
        annual_interest_rate,
        term_in_months,
        start_date,
    )
    return loan.calculate_remaining_balance(as_of_date)


def calculate_months_until_payoff(
    principal: Any,
    annual_interest_rate: Any,
    monthly_payment: Any,
) -> int | None:
    """Number of level payments needed to retire ``principal``.

    Returns
    -------
    int | None
        ``0`` when principal or payment is not positive, ``None`` when
        the payment never covers the monthly interest.
    """
    balance = to_decimal(principal, InvalidPrincipalError, "Principal amount")
    payment = to_decimal(monthly_payment, InvalidPaymentAmountError, "Monthly payment")
    if balance <= ZERO or payment <= ZERO:
        return 0

    rate = amortization.monthly_rate(validate_interest_rate(annual_interest_rate))
    if rate == ZERO:
        return int((balance / payment).to_integral_value(rounding=ROUND_CEILING))

    if payment <= balance * rate:
        return None

    months = (payment / (payment - balance * rate)).ln() / (1 + rate).ln()
    return int(months.to_integral_value(rounding=ROUND_CEILING))


def calculate_affordable_loan_amount(
    max_monthly_payment: Any,
    annual_interest_rate: Any,
    term_in_months: int,
) -> Decimal:
    """Largest principal whose level payment fits ``max_monthly_payment``."""
    payment = validate_payment_amount(max_monthly_payment)
    rate = amortization.monthly_rate(validate_interest_rate(annual_interest_rate))
    n = validate_term(term_in_months)
    if rate == ZERO:
        return payment * n
    return payment / (rate / (1 - (1 + rate) ** -n))


@dataclass(frozen=True)
class LoanComparison:
    """Outcome of comparing the total cost of two loans."""

    first: LoanAccount
    second: LoanAccount
    first_total_cost: Decimal
    second_total_cost: Decimal

    @property
    def is_tie(self) -> bool:
        return self.first_total_cost == self.second_total_cost

    @property
    def cheaper(self) -> LoanAccount | None:
        """The loan with the lower total cost, or ``None`` on a tie."""
        if self.first_total_cost < self.second_total_cost:
            return self.first
        if self.second_total_cost < self.first_total_cost:
            return self.second
        return None

    @property
    def difference(self) -> Decimal:
        return abs(self.first_total_cost - self.second_total_cost)

    @property
    def message(self) -> str:
        cheaper = self.cheaper
        if cheaper is None:
            return "Both loans have the same total cost"
        return f"{cheaper.loan_name} has a lower total cost by {format_currency(self.difference)}"

    def __str__(self) -> str:
        return self.message


def compare_loan_costs(loan1: LoanAccount, loan2: LoanAccount) -> LoanComparison:
    """Compare principal plus total interest of two loans."""
    return LoanComparison(
        first=loan1,
        second=loan2,
        first_total_cost=loan1.calculate_total_cost(),
        second_total_cost=loan2.calculate_total_cost(),
    )
