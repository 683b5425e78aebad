"""Mortgages: loan-to-value, PMI, escrow and equity."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from loan_organizer.config import LoanConfig
from loan_organizer.exceptions import InvalidEntityStateError
from loan_organizer.models import LoanAccount, LoanType, PropertyDetails

# PMI applies strictly above this loan-to-value ratio
PMI_LTV_THRESHOLD = Decimal("0.80")


def mortgage_loan(
    loan_name: str,
    principal: Any,
    annual_interest_rate: Any,
    term_in_months: int,
    address: str,
    property_value: Any,
    down_payment: Any = Decimal("0"),
    escrow_included: bool = False,
    escrow_amount: Any = Decimal("0"),
    start_date: date | None = None,
    *,
    config: LoanConfig | None = None,
) -> LoanAccount:
    """Create a MORTGAGE loan secured by the described property."""
    prop = PropertyDetails(
        address=address,
        property_value=property_value,
        down_payment=down_payment,
        escrow_included=escrow_included,
        escrow_amount=escrow_amount,
    )
    return LoanAccount(
        loan_name,
        LoanType.MORTGAGE,
        principal,
        annual_interest_rate,
        term_in_months,
        start_date,
        details=prop,
        config=config,
    )


def property_of(loan: LoanAccount) -> PropertyDetails:
    if not isinstance(loan.details, PropertyDetails):
        raise InvalidEntityStateError(f"Loan {loan.loan_name!r} is not a mortgage")
    return loan.details


def calculate_loan_to_value_ratio(loan: LoanAccount) -> Decimal:
    return loan.principal / property_of(loan).property_value


def is_pmi_required(loan: LoanAccount) -> bool:
    return calculate_loan_to_value_ratio(loan) > PMI_LTV_THRESHOLD


def calculate_total_monthly_payment(loan: LoanAccount) -> Decimal:
    """Principal and interest, plus escrow when it is collected with the payment."""
    prop = property_of(loan)
    base_payment = loan.calculate_monthly_payment()
    if prop.escrow_included:
        return base_payment + prop.escrow_amount
    return base_payment


def calculate_equity(loan: LoanAccount) -> Decimal:
    return property_of(loan).property_value - loan.principal
