"""Auto and mortgage loan constructors and metrics.

Each module works on a plain ``LoanAccount`` whose ``details`` carries
the type-specific payload.
"""

from loan_organizer.loan_types import auto, mortgage
from loan_organizer.loan_types.auto import auto_loan
from loan_organizer.loan_types.mortgage import mortgage_loan

__all__ = ["auto", "auto_loan", "mortgage", "mortgage_loan"]
