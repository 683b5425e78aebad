"""In-memory collections of loans."""

from loan_organizer.store.portfolio import LoanPortfolio

__all__ = ["LoanPortfolio"]
