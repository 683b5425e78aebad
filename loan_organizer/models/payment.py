"""Payment models: recorded payments and amortization schedule rows."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from loan_organizer.validation import validate_payment_amount


@dataclass(frozen=True)
class Payment:
    """A payment actually made against a loan.

    Raises
    ------
    InvalidPaymentAmountError
        If ``amount`` is not greater than zero.
    """

    amount: Decimal
    date: date
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", validate_payment_amount(self.amount))


@dataclass(frozen=True)
class PaymentDetails:
    """One row of an amortization schedule."""

    month: int  # 1..term_in_months
    payment_date: date
    monthly_payment: Decimal
    principal_payment: Decimal
    interest_payment: Decimal
    remaining_balance: Decimal
