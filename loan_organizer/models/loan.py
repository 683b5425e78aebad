"""Loan account entity."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterator

from loan_organizer import amortization
from loan_organizer.config import LoanConfig
from loan_organizer.exceptions import InvalidLoanTypeError, InvalidPaymentAmountError
from loan_organizer.formatting import format_currency, format_percent
from loan_organizer.logging import get_logger
from loan_organizer.models.enums import LoanType
from loan_organizer.models.payment import Payment, PaymentDetails
from loan_organizer.models.variants import LoanDetails, PropertyDetails, VehicleDetails
from loan_organizer.validation import (
    ZERO,
    validate_extra_payment,
    validate_interest_rate,
    validate_loan_name,
    validate_loan_type,
    validate_principal,
    validate_start_date,
    validate_term,
)

logger = get_logger(__name__)

_UNSET: Any = object()

# Which details payload each loan type carries
_DETAILS_FOR_TYPE: dict[LoanType, type | None] = {
    LoanType.PERSONAL: None,
    LoanType.GENERAL: None,
    LoanType.AUTO: VehicleDetails,
    LoanType.MORTGAGE: PropertyDetails,
}


def _check_details(loan_type: LoanType, details: LoanDetails | None) -> None:
    expected = _DETAILS_FOR_TYPE[loan_type]
    if expected is None and details is not None:
        raise InvalidLoanTypeError(
            f"{loan_type.label} loans carry no details, got {type(details).__name__}"
        )
    if expected is not None and not isinstance(details, expected):
        raise InvalidLoanTypeError(f"{loan_type.label} loans require {expected.__name__}")


class LoanAccount:
    """Fixed-rate, monthly-compounding installment loan.

    Every computation reads the loan's current fields; nothing is cached,
    so changing the principal, rate, term or start date is reflected by
    the next call. Setters validate before assigning and leave the loan
    unchanged when they raise.

    Parameters
    ----------
    loan_name : str
        Non-blank display name.
    loan_type : LoanType | str
        Loan type; strings are matched case-insensitively.
    principal : Decimal | int | float | str
        Amount borrowed, greater than zero.
    annual_interest_rate : Decimal | float | str | None
        Annual rate as a fraction in [0, 1]. Defaults to
        ``config.default_interest_rate``.
    term_in_months : int | None
        Term in [1, 600] months. Defaults to ``config.default_term_months``.
    start_date : date | None
        Loan start; defaults to today.
    details : VehicleDetails | PropertyDetails | None
        Type-specific payload, required for AUTO and MORTGAGE loans.
    is_active : bool
        Whether the loan is still open.
    config : LoanConfig | None
        Source of default rate and term.

    Raises
    ------
    LoanValidationError
        If any argument violates its domain constraint.
    """

    def __init__(
        self,
        loan_name: str,
        loan_type: LoanType | str,
        principal: Any,
        annual_interest_rate: Any = None,
        term_in_months: int | None = None,
        start_date: date | None = None,
        *,
        details: LoanDetails | None = None,
        is_active: bool = True,
        config: LoanConfig | None = None,
    ) -> None:
        self._config = config or LoanConfig()
        if annual_interest_rate is None:
            annual_interest_rate = self._config.default_interest_rate
        if term_in_months is None:
            term_in_months = self._config.default_term_months

        self._loan_name = validate_loan_name(loan_name)
        self._loan_type = validate_loan_type(loan_type)
        self._principal = validate_principal(principal)
        self._annual_interest_rate = validate_interest_rate(annual_interest_rate)
        self._term_in_months = validate_term(term_in_months)
        _check_details(self._loan_type, details)
        self._details = details
        self._start_date = date.today() if start_date is None else validate_start_date(start_date)
        self._maturity_date = amortization.add_months(self._start_date, self._term_in_months)
        self._payment_history: list[Payment] = []
        self.is_active = is_active

        logger.debug("Created loan %r (%s)", self._loan_name, self._loan_type.value)

    # ------------------------------------------------------------------
    # Validated accessors
    # ------------------------------------------------------------------

    @property
    def loan_name(self) -> str:
        return self._loan_name

    @loan_name.setter
    def loan_name(self, value: str) -> None:
        self._loan_name = validate_loan_name(value)

    @property
    def loan_type(self) -> LoanType:
        return self._loan_type

    @loan_type.setter
    def loan_type(self, value: LoanType | str) -> None:
        loan_type = validate_loan_type(value)
        _check_details(loan_type, self._details)
        self._loan_type = loan_type

    @property
    def principal(self) -> Decimal:
        return self._principal

    @principal.setter
    def principal(self, value: Any) -> None:
        self._principal = validate_principal(value)

    @property
    def annual_interest_rate(self) -> Decimal:
        return self._annual_interest_rate

    @annual_interest_rate.setter
    def annual_interest_rate(self, value: Any) -> None:
        self._annual_interest_rate = validate_interest_rate(value)

    @property
    def term_in_months(self) -> int:
        return self._term_in_months

    @term_in_months.setter
    def term_in_months(self, value: int) -> None:
        self.update_terms(term_in_months=validate_term(value))

    @property
    def start_date(self) -> date:
        return self._start_date

    @start_date.setter
    def start_date(self, value: date) -> None:
        self.update_terms(start_date=validate_start_date(value))

    @property
    def maturity_date(self) -> date:
        """``start_date`` plus ``term_in_months`` calendar months."""
        return self._maturity_date

    @property
    def details(self) -> LoanDetails | None:
        return self._details

    @details.setter
    def details(self, value: LoanDetails | None) -> None:
        _check_details(self._loan_type, value)
        self._details = value

    @property
    def config(self) -> LoanConfig:
        return self._config

    @property
    def payment_history(self) -> list[Payment]:
        """Recorded payments in recording order (a copy)."""
        return list(self._payment_history)

    def update_terms(
        self,
        *,
        loan_name: str | None = None,
        loan_type: LoanType | str | None = None,
        principal: Any = None,
        annual_interest_rate: Any = None,
        term_in_months: int | None = None,
        start_date: date = _UNSET,
        details: LoanDetails | None = _UNSET,
    ) -> None:
        """Change several fields at once.

        Every supplied value is validated before any is assigned, so the
        loan either takes all of them or none. ``maturity_date`` is
        re-derived in the same step.
        """
        new_name = self._loan_name if loan_name is None else validate_loan_name(loan_name)
        new_type = self._loan_type if loan_type is None else validate_loan_type(loan_type)
        new_principal = self._principal if principal is None else validate_principal(principal)
        new_rate = (
            self._annual_interest_rate
            if annual_interest_rate is None
            else validate_interest_rate(annual_interest_rate)
        )
        new_term = self._term_in_months if term_in_months is None else validate_term(term_in_months)
        new_start = self._start_date if start_date is _UNSET else validate_start_date(start_date)
        new_details = self._details if details is _UNSET else details
        _check_details(new_type, new_details)

        self._loan_name = new_name
        self._loan_type = new_type
        self._principal = new_principal
        self._annual_interest_rate = new_rate
        self._term_in_months = new_term
        self._start_date = new_start
        self._details = new_details
        self._maturity_date = amortization.add_months(new_start, new_term)

    # ------------------------------------------------------------------
    # Amortization
    # ------------------------------------------------------------------

    def calculate_monthly_payment(self, number_of_payments: int | None = None) -> Decimal:
        """Level monthly payment for this principal and rate.

        ``number_of_payments`` prices an alternative term without touching
        the loan; it defaults to ``term_in_months``.
        """
        n = self._term_in_months if number_of_payments is None else validate_term(number_of_payments)
        return amortization.monthly_payment(self._principal, self._annual_interest_rate, n)

    def calculate_total_interest(self) -> Decimal:
        return self.calculate_monthly_payment() * self._term_in_months - self._principal

    def calculate_total_cost(self) -> Decimal:
        """Principal plus total interest."""
        return self._principal + self.calculate_total_interest()

    def iter_amortization_schedule(self) -> Iterator[PaymentDetails]:
        """Lazily yield schedule rows for months 1..term_in_months."""
        return amortization.iter_schedule(
            self._principal,
            self._annual_interest_rate,
            self._term_in_months,
            self._start_date,
        )

    def generate_amortization_schedule(self) -> list[PaymentDetails]:
        """Full schedule, recomputed on every call."""
        schedule = list(self.iter_amortization_schedule())
        logger.debug("Generated %d-row schedule for %r", len(schedule), self._loan_name)
        return schedule

    def calculate_remaining_balance(self, as_of_date: date) -> Decimal:
        """Scheduled balance on ``as_of_date``.

        The full principal before the start date, zero after maturity,
        otherwise the balance after the number of whole months elapsed.
        """
        if as_of_date < self._start_date:
            return self._principal
        if as_of_date > self._maturity_date:
            return ZERO

        months_passed = amortization.whole_months_between(self._start_date, as_of_date)
        return amortization.balance_after(
            self._principal,
            self._annual_interest_rate,
            self._term_in_months,
            self._start_date,
            months_passed,
        )

    def calculate_savings_with_extra_payments(self, extra_payment: Any) -> Decimal:
        """Interest saved by paying ``extra_payment`` more every month.

        Raises
        ------
        InvalidPaymentAmountError
            If ``extra_payment`` is negative.
        """
        extra = validate_extra_payment(extra_payment)
        if extra == ZERO:
            return ZERO

        total_interest, _ = amortization.simulate_extra_payments(
            self._principal, self._annual_interest_rate, self._term_in_months, extra
        )
        return max(ZERO, self.calculate_total_interest() - total_interest)

    def calculate_months_saved_with_extra_payments(self, extra_payment: Any) -> int:
        """Months cut from the term by paying ``extra_payment`` more every month."""
        extra = validate_extra_payment(extra_payment)
        if extra == ZERO:
            return 0

        _, payments_needed = amortization.simulate_extra_payments(
            self._principal, self._annual_interest_rate, self._term_in_months, extra
        )
        return self._term_in_months - payments_needed

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def record_payment(
        self,
        amount: Any,
        payment_date: date | None = None,
        notes: str = "",
    ) -> bool:
        """Append a payment to the history.

        Returns
        -------
        bool
            ``True`` if recorded, ``False`` if ``amount`` is not positive
            (the history is left unchanged).
        """
        try:
            payment = Payment(amount=amount, date=payment_date or date.today(), notes=notes)
        except InvalidPaymentAmountError as e:
            logger.warning("Rejected payment of %r on %r: %s", amount, self._loan_name, e)
            return False

        self._payment_history.append(payment)
        logger.debug("Recorded payment of %s on %r", payment.amount, self._loan_name)
        return True

    def total_paid(self) -> Decimal:
        return sum((p.amount for p in self._payment_history), ZERO)

    def __repr__(self) -> str:
        return (
            f"LoanAccount(loan_name={self._loan_name!r}, loan_type={self._loan_type.value}, "
            f"principal={self._principal}, annual_interest_rate={self._annual_interest_rate}, "
            f"term_in_months={self._term_in_months}, start_date={self._start_date.isoformat()})"
        )

    def __str__(self) -> str:
        summary = (
            f"{self._loan_type.label} Loan: {self._loan_name} - "
            f"{format_currency(self._principal)} at "
            f"{format_percent(self._annual_interest_rate)} for {self._term_in_months} months"
        )
        if isinstance(self._details, VehicleDetails):
            d = self._details
            summary += f" on {d.year} {d.make} {d.model}"
        elif isinstance(self._details, PropertyDetails):
            summary += f" on property at {self._details.address}"
        return summary
