"""Custom exception hierarchy for loan-organizer."""


class LoanOrganizerError(Exception):
    """Base exception for all loan-organizer errors."""


class LoanValidationError(LoanOrganizerError):
    """Raised when a value violates a loan domain constraint."""


class InvalidPrincipalError(LoanValidationError):
    """Raised when a principal amount is not greater than zero."""


class InvalidInterestRateError(LoanValidationError):
    """Raised when an annual interest rate is outside [0.0, 1.0]."""


class InvalidTermError(LoanValidationError):
    """Raised when a loan term is outside [1, 600] months."""


class InvalidLoanNameError(LoanValidationError):
    """Raised when a loan name is empty or blank."""


class InvalidLoanTypeError(LoanValidationError):
    """Raised when a loan type is empty, blank or unknown."""


class InvalidPaymentAmountError(LoanValidationError):
    """Raised when a payment amount is not greater than zero."""


class InvalidStartDateError(LoanValidationError):
    """Raised when a loan start date is not a calendar date."""


class InvalidCollateralError(LoanValidationError):
    """Raised when vehicle or property details are out of range."""


class EntityNotFoundError(LoanOrganizerError):
    """Raised when a referenced entity does not exist."""


class LoanNotFoundError(EntityNotFoundError):
    """Raised when a loan name is not present in a portfolio."""


class DuplicateLoanError(LoanOrganizerError):
    """Raised when a loan name is already present in a portfolio."""


class InvalidEntityStateError(LoanOrganizerError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(LoanOrganizerError):
    """Raised when configuration is invalid or missing."""
