"""Tests for LoanPortfolio."""

from datetime import date

import pytest

from loan_organizer.exceptions import DuplicateLoanError, EntityNotFoundError, LoanNotFoundError
from loan_organizer.models import LoanAccount, LoanType
from loan_organizer.store import LoanPortfolio


@pytest.fixture
def portfolio(
    personal_loan: LoanAccount, new_car_loan: LoanAccount, home_loan: LoanAccount
) -> LoanPortfolio:
    store = LoanPortfolio()
    for loan in (personal_loan, new_car_loan, home_loan):
        store.add_loan(loan)
    return store


class TestLoanPortfolio:
    """Tests for adding, looking up and removing loans."""

    def test_empty(self) -> None:
        store = LoanPortfolio()

        assert len(store) == 0
        assert store.cheapest_loan() is None
        assert store.total_principal() == 0

    def test_add_and_get(self, portfolio: LoanPortfolio, personal_loan: LoanAccount) -> None:
        assert len(portfolio) == 3
        assert "Test Loan" in portfolio
        assert portfolio.get_loan("Test Loan") is personal_loan

    def test_duplicate_name(self, portfolio: LoanPortfolio, start_date: date) -> None:
        clash = LoanAccount("Test Loan", LoanType.GENERAL, 500, "0.05", 12, start_date)

        with pytest.raises(DuplicateLoanError):
            portfolio.add_loan(clash)

        assert len(portfolio) == 3

    def test_get_missing(self, portfolio: LoanPortfolio) -> None:
        with pytest.raises(LoanNotFoundError):
            portfolio.get_loan("Boat Loan")

    def test_missing_is_entity_not_found(self, portfolio: LoanPortfolio) -> None:
        with pytest.raises(EntityNotFoundError):
            portfolio.remove_loan("Boat Loan")

    def test_remove(self, portfolio: LoanPortfolio, new_car_loan: LoanAccount) -> None:
        removed = portfolio.remove_loan("Car Loan")

        assert removed is new_car_loan
        assert "Car Loan" not in portfolio
        assert portfolio.loans_by_type(LoanType.AUTO) == []

    def test_iteration_order(self, portfolio: LoanPortfolio) -> None:
        assert [loan.loan_name for loan in portfolio] == ["Test Loan", "Car Loan", "Home Loan"]

    def test_loans_by_type(self, portfolio: LoanPortfolio, home_loan: LoanAccount) -> None:
        assert portfolio.loans_by_type(LoanType.MORTGAGE) == [home_loan]
        assert portfolio.loans_by_type(LoanType.GENERAL) == []


class TestPortfolioMetrics:
    """Tests for aggregate metrics over active loans."""

    def test_total_principal(self, portfolio: LoanPortfolio) -> None:
        assert portfolio.total_principal() == 235000

    def test_inactive_loans_excluded(self, portfolio: LoanPortfolio, home_loan: LoanAccount) -> None:
        home_loan.is_active = False

        assert home_loan not in portfolio.active_loans()
        assert portfolio.total_principal() == 35000

    def test_total_monthly_payment(
        self,
        portfolio: LoanPortfolio,
        personal_loan: LoanAccount,
        new_car_loan: LoanAccount,
        home_loan: LoanAccount,
    ) -> None:
        expected = sum(
            loan.calculate_monthly_payment() for loan in (personal_loan, new_car_loan, home_loan)
        )

        assert portfolio.total_monthly_payment() == expected

    def test_total_interest(self, portfolio: LoanPortfolio, personal_loan: LoanAccount) -> None:
        assert portfolio.total_interest() > personal_loan.calculate_total_interest()

    def test_cheapest_loan(self, portfolio: LoanPortfolio, personal_loan: LoanAccount) -> None:
        assert portfolio.cheapest_loan() is personal_loan

    def test_cheapest_skips_inactive(
        self, portfolio: LoanPortfolio, personal_loan: LoanAccount, new_car_loan: LoanAccount
    ) -> None:
        personal_loan.is_active = False

        assert portfolio.cheapest_loan() is new_car_loan
