"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from loan_organizer.loan_types import auto_loan, mortgage_loan
from loan_organizer.models import LoanAccount, LoanType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def start_date() -> date:
    """Fixed loan start date."""
    return date(2025, 1, 15)


@pytest.fixture
def personal_loan(start_date: date) -> LoanAccount:
    """$10,000 at 5% over 60 months."""
    return LoanAccount("Test Loan", LoanType.PERSONAL, 10000, "0.05", 60, start_date)


@pytest.fixture
def new_car_loan(start_date: date) -> LoanAccount:
    """$25,000 at 3.99% over 60 months on a new $30,000 vehicle."""
    return auto_loan(
        "Car Loan",
        25000,
        "0.0399",
        60,
        make="Toyota",
        model="Camry",
        year=2025,
        vin="ABC123XYZ456",
        vehicle_value=30000,
        is_new=True,
        start_date=start_date,
    )


@pytest.fixture
def home_loan(start_date: date) -> LoanAccount:
    """$200,000 at 4% over 30 years on a $250,000 property, escrow $350."""
    return mortgage_loan(
        "Home Loan",
        200000,
        "0.04",
        360,
        address="123 Main St, Anytown, USA",
        property_value=250000,
        down_payment=50000,
        escrow_included=True,
        escrow_amount=350,
        start_date=start_date,
    )
