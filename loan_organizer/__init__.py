"""Loan organizer: fixed-rate loan amortization and loan-type metrics."""

# Models load first: the validators they use import models.enums
from loan_organizer.models import (
    LoanAccount,
    LoanType,
    Payment,
    PaymentDetails,
    PropertyDetails,
    VehicleDetails,
)
from loan_organizer.calculator import LoanComparison, compare_loan_costs
from loan_organizer.config import LoanConfig, LoanOrganizerConfig
from loan_organizer.loan_types import auto_loan, mortgage_loan
from loan_organizer.store import LoanPortfolio

__version__ = "1.0.0"

__all__ = [
    "LoanAccount",
    "LoanComparison",
    "LoanConfig",
    "LoanOrganizerConfig",
    "LoanPortfolio",
    "LoanType",
    "Payment",
    "PaymentDetails",
    "PropertyDetails",
    "VehicleDetails",
    "__version__",
    "auto_loan",
    "compare_loan_costs",
    "mortgage_loan",
]
