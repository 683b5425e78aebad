"""Loan domain models."""

from loan_organizer.models.enums import LoanType
from loan_organizer.models.payment import Payment, PaymentDetails
from loan_organizer.models.variants import LoanDetails, PropertyDetails, VehicleDetails
from loan_organizer.models.loan import LoanAccount

__all__ = [
    "LoanAccount",
    "LoanDetails",
    "LoanType",
    "Payment",
    "PaymentDetails",
    "PropertyDetails",
    "VehicleDetails",
]
