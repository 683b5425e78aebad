"""Auto loans: vehicle depreciation, loan-to-value and underwater checks."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from dateutil.relativedelta import relativedelta

from loan_organizer.config import LoanConfig
from loan_organizer.exceptions import InvalidCollateralError, InvalidEntityStateError
from loan_organizer.models import LoanAccount, LoanType, VehicleDetails

NEW_VEHICLE_FIRST_YEAR_DEPRECIATION = Decimal("0.20")
ANNUAL_DEPRECIATION = Decimal("0.10")


def auto_loan(
    loan_name: str,
    principal: Any,
    annual_interest_rate: Any,
    term_in_months: int,
    make: str,
    model: str,
    year: int,
    vin: str,
    vehicle_value: Any,
    is_new: bool,
    start_date: date | None = None,
    *,
    config: LoanConfig | None = None,
) -> LoanAccount:
    """Create an AUTO loan secured by the described vehicle."""
    vehicle = VehicleDetails(
        make=make,
        model=model,
        year=year,
        vin=vin,
        vehicle_value=vehicle_value,
        is_new=is_new,
    )
    return LoanAccount(
        loan_name,
        LoanType.AUTO,
        principal,
        annual_interest_rate,
        term_in_months,
        start_date,
        details=vehicle,
        config=config,
    )


def vehicle_of(loan: LoanAccount) -> VehicleDetails:
    if not isinstance(loan.details, VehicleDetails):
        raise InvalidEntityStateError(f"Loan {loan.loan_name!r} is not an auto loan")
    return loan.details


def estimate_current_value(loan: LoanAccount, age_in_years: int) -> Decimal:
    """Vehicle value after ``age_in_years`` years of depreciation.

    A new vehicle loses 20% in its first year, a used one 10%; every
    later year takes another 10% off the already-depreciated value.
    """
    if age_in_years < 0:
        raise InvalidCollateralError("Vehicle age cannot be negative")

    vehicle = vehicle_of(loan)
    value = vehicle.vehicle_value
    for year in range(age_in_years):
        if year == 0 and vehicle.is_new:
            value *= 1 - NEW_VEHICLE_FIRST_YEAR_DEPRECIATION
        else:
            value *= 1 - ANNUAL_DEPRECIATION
    return value


def calculate_loan_to_value_ratio(loan: LoanAccount) -> Decimal:
    return loan.principal / vehicle_of(loan).vehicle_value


def is_loan_underwater(loan: LoanAccount, age_in_years: int) -> bool:
    """Whether the scheduled balance exceeds the vehicle's estimated value."""
    current_value = estimate_current_value(loan, age_in_years)
    as_of = loan.start_date + relativedelta(years=age_in_years)
    return loan.calculate_remaining_balance(as_of) > current_value
