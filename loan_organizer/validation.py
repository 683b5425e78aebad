"""Domain-constraint validators shared by loan entities and the calculator.

Each validator returns the normalised value (``Decimal`` for money and
rates, ``LoanType`` for types) or raises the matching
:class:`~loan_organizer.exceptions.LoanValidationError` subclass.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from loan_organizer.exceptions import (
    InvalidCollateralError,
    InvalidInterestRateError,
    InvalidLoanNameError,
    InvalidLoanTypeError,
    InvalidPaymentAmountError,
    InvalidPrincipalError,
    InvalidStartDateError,
    InvalidTermError,
)
from loan_organizer.models.enums import LoanType

MIN_TERM_MONTHS = 1
MAX_TERM_MONTHS = 600  # 50 years
MIN_INTEREST_RATE = Decimal("0")
MAX_INTEREST_RATE = Decimal("1")

ZERO = Decimal("0")


def to_decimal(value: Any, error: type[Exception], label: str) -> Decimal:
    """Convert ``value`` to ``Decimal`` through its string form.

    Going through ``str`` keeps ``0.05`` as ``Decimal("0.05")`` instead of
    the binary float expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise error(f"{label} must be a number, got {value!r}")
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise error(f"{label} must be a number, got {value!r}") from e
    if not result.is_finite():
        raise error(f"{label} must be finite, got {value!r}")
    return result


def validate_principal(principal: Any) -> Decimal:
    """Principal must be strictly positive."""
    amount = to_decimal(principal, InvalidPrincipalError, "Principal amount")
    if amount <= ZERO:
        raise InvalidPrincipalError("Principal amount must be greater than zero")
    return amount


def validate_interest_rate(annual_interest_rate: Any) -> Decimal:
    """Rate is an annual fraction in [0, 1] (0.05 for 5%)."""
    rate = to_decimal(annual_interest_rate, InvalidInterestRateError, "Interest rate")
    if rate < MIN_INTEREST_RATE:
        raise InvalidInterestRateError("Interest rate cannot be negative")
    if rate > MAX_INTEREST_RATE:
        raise InvalidInterestRateError(
            "Interest rate should be expressed as a decimal (e.g., 0.05 for 5%)"
        )
    return rate


def validate_term(term_in_months: Any) -> int:
    """Term is a whole number of months in [1, 600]."""
    if isinstance(term_in_months, bool) or not isinstance(term_in_months, int):
        raise InvalidTermError(f"Loan term must be a whole number of months, got {term_in_months!r}")
    if term_in_months < MIN_TERM_MONTHS:
        raise InvalidTermError("Loan term must be greater than zero")
    if term_in_months > MAX_TERM_MONTHS:
        raise InvalidTermError(f"Loan term exceeds maximum allowed ({MAX_TERM_MONTHS} months)")
    return term_in_months


def validate_loan_name(loan_name: Any) -> str:
    if not isinstance(loan_name, str) or not loan_name.strip():
        raise InvalidLoanNameError("Loan name cannot be empty")
    return loan_name


def validate_loan_type(loan_type: Any) -> LoanType:
    """Accept a ``LoanType`` or its name in any case (``"auto"``, ``"Auto"``)."""
    if isinstance(loan_type, LoanType):
        return loan_type
    if not isinstance(loan_type, str) or not loan_type.strip():
        raise InvalidLoanTypeError("Loan type cannot be empty")
    try:
        return LoanType(loan_type.strip().upper())
    except ValueError as e:
        valid = ", ".join(t.value for t in LoanType)
        raise InvalidLoanTypeError(f"Unknown loan type {loan_type!r} (expected one of {valid})") from e


def validate_payment_amount(amount: Any) -> Decimal:
    value = to_decimal(amount, InvalidPaymentAmountError, "Payment amount")
    if value <= ZERO:
        raise InvalidPaymentAmountError("Payment amount must be greater than zero")
    return value


def validate_extra_payment(amount: Any) -> Decimal:
    """Extra monthly payments may be zero but never negative."""
    value = to_decimal(amount, InvalidPaymentAmountError, "Extra payment")
    if value < ZERO:
        raise InvalidPaymentAmountError("Extra payment cannot be negative")
    return value


def validate_asset_value(value: Any, label: str) -> Decimal:
    amount = to_decimal(value, InvalidCollateralError, label)
    if amount <= ZERO:
        raise InvalidCollateralError(f"{label} must be greater than zero")
    return amount


def validate_non_negative(value: Any, label: str) -> Decimal:
    amount = to_decimal(value, InvalidCollateralError, label)
    if amount < ZERO:
        raise InvalidCollateralError(f"{label} cannot be negative")
    return amount


def validate_start_date(start_date: Any) -> date:
    """Start date must be a plain ``date``; a ``datetime`` is truncated to its day."""
    if isinstance(start_date, datetime):
        return start_date.date()
    if not isinstance(start_date, date):
        raise InvalidStartDateError(f"Start date must be a date, got {start_date!r}")
    return start_date
