"""Fixed-rate amortization formulas.

All functions here are pure and assume already-validated inputs: a
positive ``Decimal`` principal, an annual rate in [0, 1] and a term of
at least one month. Interest compounds monthly at ``annual_rate / 12``.
"""

from datetime import date
from decimal import Decimal
from itertools import islice
from typing import Iterator

from dateutil.relativedelta import relativedelta

from loan_organizer.logging import get_logger
from loan_organizer.models.payment import PaymentDetails

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12
ZERO = Decimal("0")


def monthly_rate(annual_rate: Decimal) -> Decimal:
    return annual_rate / MONTHS_PER_YEAR


def monthly_payment(principal: Decimal, annual_rate: Decimal, number_of_payments: int) -> Decimal:
    """Level payment that retires ``principal`` in ``number_of_payments`` months.

    ``P * r / (1 - (1 + r) ** -n)``, or ``P / n`` when the rate is zero.
    """
    rate = monthly_rate(annual_rate)
    if rate == ZERO:
        return principal / number_of_payments
    return principal * (rate / (1 - (1 + rate) ** -number_of_payments))


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic; Jan 31 + 1 month is the last day of February."""
    return start + relativedelta(months=months)


def whole_months_between(start: date, end: date) -> int:
    """Number of complete calendar months from ``start`` to ``end``."""
    delta = relativedelta(end, start)
    return delta.years * MONTHS_PER_YEAR + delta.months


def iter_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_in_months: int,
    start_date: date,
) -> Iterator[PaymentDetails]:
    """Yield one ``PaymentDetails`` per month from 1 to ``term_in_months``.

    The last row pays off whatever balance is left, so accumulated
    rounding never leaves a residual; its ``monthly_payment`` is the
    corrected amount.
    """
    payment = monthly_payment(principal, annual_rate, term_in_months)
    rate = monthly_rate(annual_rate)
    balance = principal

    for month in range(1, term_in_months + 1):
        interest = balance * rate
        principal_part = payment - interest
        row_payment = payment

        if month == term_in_months:
            principal_part = balance
            row_payment = principal_part + interest

        balance -= principal_part
        if balance < ZERO:
            balance = ZERO

        yield PaymentDetails(
            month=month,
            payment_date=add_months(start_date, month),
            monthly_payment=row_payment,
            principal_payment=principal_part,
            interest_payment=interest,
            remaining_balance=balance,
        )


def balance_after(
    principal: Decimal,
    annual_rate: Decimal,
    term_in_months: int,
    start_date: date,
    months_elapsed: int,
) -> Decimal:
    """Remaining balance once ``months_elapsed`` scheduled payments are made."""
    if months_elapsed <= 0:
        return principal

    balance = principal
    rows = iter_schedule(principal, annual_rate, term_in_months, start_date)
    for row in islice(rows, months_elapsed):
        balance = row.remaining_balance

    logger.debug("Balance after %d of %d months: %s", months_elapsed, term_in_months, balance)
    return max(ZERO, balance)


def simulate_extra_payments(
    principal: Decimal,
    annual_rate: Decimal,
    term_in_months: int,
    extra_payment: Decimal,
) -> tuple[Decimal, int]:
    """Pay ``extra_payment`` on top of the level payment every month.

    Returns
    -------
    tuple[Decimal, int]
        Total interest paid and the number of payments until payoff
        (capped at ``term_in_months``).
    """
    payment = monthly_payment(principal, annual_rate, term_in_months) + extra_payment
    rate = monthly_rate(annual_rate)
    balance = principal
    total_interest = ZERO
    payments_needed = 0

    while balance > ZERO and payments_needed < term_in_months:
        interest = balance * rate
        principal_part = payment - interest

        if principal_part >= balance:
            # Final payment: only the interest due on what is left
            total_interest += balance * rate
            balance = ZERO
        else:
            balance -= principal_part
            total_interest += interest

        payments_needed += 1

    return total_interest, payments_needed
