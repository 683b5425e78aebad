"""Name-keyed loan portfolio with aggregate metrics."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from loan_organizer.exceptions import DuplicateLoanError, LoanNotFoundError
from loan_organizer.logging import get_logger
from loan_organizer.models import LoanAccount, LoanType

logger = get_logger(__name__)

ZERO = Decimal("0")


@dataclass
class LoanPortfolio:
    """In-memory store for loans, keyed by loan name at insertion time."""

    loans: dict[str, LoanAccount] = field(default_factory=dict)

    # Relationship index
    _loans_by_type: dict[LoanType, list[str]] = field(default_factory=dict)

    def add_loan(self, loan: LoanAccount) -> None:
        """Add a loan to the portfolio."""
        if loan.loan_name in self.loans:
            raise DuplicateLoanError(f"Loan {loan.loan_name!r} already exists")

        self.loans[loan.loan_name] = loan
        self._loans_by_type.setdefault(loan.loan_type, []).append(loan.loan_name)
        logger.info("Added %s loan %r", loan.loan_type.value, loan.loan_name)

    def get_loan(self, loan_name: str) -> LoanAccount:
        try:
            return self.loans[loan_name]
        except KeyError:
            raise LoanNotFoundError(f"Loan {loan_name!r} not found") from None

    def remove_loan(self, loan_name: str) -> LoanAccount:
        loan = self.get_loan(loan_name)
        del self.loans[loan_name]
        for names in self._loans_by_type.values():
            if loan_name in names:
                names.remove(loan_name)
        logger.info("Removed loan %r", loan_name)
        return loan

    def loans_by_type(self, loan_type: LoanType) -> list[LoanAccount]:
        return [self.loans[name] for name in self._loans_by_type.get(loan_type, [])]

    def active_loans(self) -> list[LoanAccount]:
        return [loan for loan in self.loans.values() if loan.is_active]

    def total_principal(self) -> Decimal:
        return sum((loan.principal for loan in self.active_loans()), ZERO)

    def total_monthly_payment(self) -> Decimal:
        """Combined level payment of all active loans (escrow excluded)."""
        return sum((loan.calculate_monthly_payment() for loan in self.active_loans()), ZERO)

    def total_interest(self) -> Decimal:
        return sum((loan.calculate_total_interest() for loan in self.active_loans()), ZERO)

    def cheapest_loan(self) -> LoanAccount | None:
        """Active loan with the lowest total cost, or ``None`` when empty."""
        active = self.active_loans()
        if not active:
            return None
        return min(active, key=lambda loan: loan.calculate_total_cost())

    def __len__(self) -> int:
        return len(self.loans)

    def __iter__(self) -> Iterator[LoanAccount]:
        return iter(self.loans.values())

    def __contains__(self, loan_name: object) -> bool:
        return loan_name in self.loans
