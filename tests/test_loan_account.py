"""Tests for LoanAccount calculations and payment tracking."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from loan_organizer.exceptions import InvalidPaymentAmountError, InvalidTermError
from loan_organizer.models import LoanAccount, LoanType, Payment


class TestMonthlyPayment:
    """Tests for calculate_monthly_payment."""

    def test_standard_loan(self, personal_loan: LoanAccount) -> None:
        assert float(personal_loan.calculate_monthly_payment()) == pytest.approx(188.71, abs=0.01)

    def test_alternative_term(self, personal_loan: LoanAccount) -> None:
        payment = personal_loan.calculate_monthly_payment(36)

        assert float(payment) == pytest.approx(299.71, abs=0.01)
        assert personal_loan.term_in_months == 60

    def test_alternative_term_validated(self, personal_loan: LoanAccount) -> None:
        with pytest.raises(InvalidTermError):
            personal_loan.calculate_monthly_payment(0)

    def test_zero_rate(self) -> None:
        loan = LoanAccount("Family", LoanType.PERSONAL, 1200, 0, 12, date(2025, 1, 1))

        assert loan.calculate_monthly_payment() == Decimal("100")

    def test_single_month(self) -> None:
        loan = LoanAccount("Bridge", LoanType.GENERAL, 1200, "0.12", 1, date(2025, 1, 1))

        assert float(loan.calculate_monthly_payment()) == pytest.approx(1212)

    def test_reflects_principal_change(self, personal_loan: LoanAccount) -> None:
        before = personal_loan.calculate_monthly_payment()
        personal_loan.principal = 20000

        assert float(personal_loan.calculate_monthly_payment()) == pytest.approx(float(before * 2))


class TestTotals:
    """Tests for total interest and total cost."""

    def test_total_interest(self, start_date: date) -> None:
        loan = LoanAccount("Three Year", LoanType.PERSONAL, 10000, "0.05", 36, start_date)

        assert float(loan.calculate_total_interest()) == pytest.approx(789.56, abs=1.0)

    def test_total_cost(self, personal_loan: LoanAccount) -> None:
        total_cost = personal_loan.calculate_total_cost()

        assert total_cost == personal_loan.principal + personal_loan.calculate_total_interest()
        assert float(total_cost) == pytest.approx(float(personal_loan.calculate_monthly_payment() * 60))

    def test_zero_rate_has_no_interest(self) -> None:
        loan = LoanAccount("Family", LoanType.PERSONAL, 1200, 0, 12, date(2025, 1, 1))

        assert loan.calculate_total_interest() == Decimal("0")


class TestAmortizationSchedule:
    """Tests for generate_amortization_schedule."""

    def test_length(self, personal_loan: LoanAccount) -> None:
        assert len(personal_loan.generate_amortization_schedule()) == 60

    def test_first_row(self, personal_loan: LoanAccount) -> None:
        first = personal_loan.generate_amortization_schedule()[0]

        assert first.month == 1
        assert first.payment_date == date(2025, 2, 15)
        assert float(first.monthly_payment) == pytest.approx(188.71, abs=0.01)
        assert float(first.interest_payment) == pytest.approx(41.67, abs=0.01)
        assert float(first.principal_payment) == pytest.approx(147.05, abs=0.01)
        assert float(first.remaining_balance) == pytest.approx(9852.95, abs=0.01)

    def test_last_row_pays_off(self, personal_loan: LoanAccount) -> None:
        last = personal_loan.generate_amortization_schedule()[-1]

        assert last.month == 60
        assert last.payment_date == personal_loan.maturity_date
        assert last.remaining_balance == Decimal("0")
        assert float(last.monthly_payment) == pytest.approx(188.71, abs=0.01)

    def test_principal_sums_to_loan(self, personal_loan: LoanAccount) -> None:
        schedule = personal_loan.generate_amortization_schedule()
        total_principal = sum(row.principal_payment for row in schedule)

        assert float(total_principal) == pytest.approx(10000, abs=0.01)

    def test_balance_never_increases(self, personal_loan: LoanAccount) -> None:
        balances = [row.remaining_balance for row in personal_loan.generate_amortization_schedule()]

        assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
        assert all(balance >= 0 for balance in balances)

    def test_rows_split_payment(self, personal_loan: LoanAccount) -> None:
        for row in personal_loan.generate_amortization_schedule():
            assert float(row.principal_payment + row.interest_payment) == pytest.approx(
                float(row.monthly_payment), abs=1e-9
            )

    def test_zero_rate_schedule(self) -> None:
        loan = LoanAccount("Family", LoanType.PERSONAL, 1200, 0, 12, date(2025, 1, 1))
        schedule = loan.generate_amortization_schedule()

        assert all(row.interest_payment == 0 for row in schedule)
        assert all(row.principal_payment == Decimal("100") for row in schedule)
        assert schedule[-1].remaining_balance == 0

    def test_recomputed_after_change(self, personal_loan: LoanAccount) -> None:
        before = personal_loan.generate_amortization_schedule()
        personal_loan.update_terms(principal=5000, term_in_months=24)
        after = personal_loan.generate_amortization_schedule()

        assert len(after) == 24
        assert after[0].interest_payment < before[0].interest_payment

    def test_iterator_matches_list(self, personal_loan: LoanAccount) -> None:
        assert list(personal_loan.iter_amortization_schedule()) == (
            personal_loan.generate_amortization_schedule()
        )

    def test_end_of_month_dates(self) -> None:
        loan = LoanAccount("Month End", LoanType.PERSONAL, 3000, "0.05", 3, date(2025, 1, 31))
        dates = [row.payment_date for row in loan.generate_amortization_schedule()]

        assert dates == [date(2025, 2, 28), date(2025, 3, 31), date(2025, 4, 30)]


class TestRemainingBalance:
    """Tests for calculate_remaining_balance."""

    def test_before_start(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_remaining_balance(date(2024, 12, 31)) == Decimal("10000")

    def test_on_start_date(self, personal_loan: LoanAccount, start_date: date) -> None:
        assert personal_loan.calculate_remaining_balance(start_date) == Decimal("10000")

    def test_partial_month_counts_nothing(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_remaining_balance(date(2025, 2, 14)) == Decimal("10000")

    def test_after_one_month(self, personal_loan: LoanAccount) -> None:
        balance = personal_loan.calculate_remaining_balance(date(2025, 2, 15))

        assert float(balance) == pytest.approx(9852.95, abs=0.01)

    def test_after_one_year(self, personal_loan: LoanAccount) -> None:
        balance = personal_loan.calculate_remaining_balance(date(2026, 1, 15))

        assert Decimal("7000") < balance < Decimal("10000")
        assert float(balance) == pytest.approx(8194.45, abs=2.0)

    def test_matches_schedule(self, personal_loan: LoanAccount) -> None:
        row = personal_loan.generate_amortization_schedule()[23]

        assert personal_loan.calculate_remaining_balance(row.payment_date) == row.remaining_balance

    def test_at_maturity(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_remaining_balance(personal_loan.maturity_date) == 0

    def test_after_maturity(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_remaining_balance(date(2031, 1, 1)) == 0

    def test_follows_start_date_change(self, personal_loan: LoanAccount) -> None:
        personal_loan.start_date = date(2026, 1, 15)

        assert personal_loan.calculate_remaining_balance(date(2026, 1, 15)) == Decimal("10000")


class TestExtraPayments:
    """Tests for extra payment savings."""

    def test_savings_positive(self, personal_loan: LoanAccount) -> None:
        savings = personal_loan.calculate_savings_with_extra_payments(50)

        assert Decimal("200") < savings < Decimal("400")

    def test_larger_extra_saves_more(self, personal_loan: LoanAccount) -> None:
        small = personal_loan.calculate_savings_with_extra_payments(50)
        large = personal_loan.calculate_savings_with_extra_payments(200)

        assert large > small

    def test_zero_extra(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_savings_with_extra_payments(0) == 0
        assert personal_loan.calculate_months_saved_with_extra_payments(0) == 0

    def test_negative_extra_rejected(self, personal_loan: LoanAccount) -> None:
        with pytest.raises(InvalidPaymentAmountError):
            personal_loan.calculate_savings_with_extra_payments(-10)

        with pytest.raises(InvalidPaymentAmountError):
            personal_loan.calculate_months_saved_with_extra_payments(-10)

    def test_months_saved(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.calculate_months_saved_with_extra_payments(50) == 13

    def test_extra_covering_balance(self, personal_loan: LoanAccount) -> None:
        """An extra payment larger than the principal retires the loan in one month."""
        assert personal_loan.calculate_months_saved_with_extra_payments(20000) == 59
        savings = personal_loan.calculate_savings_with_extra_payments(20000)

        first_month_interest = Decimal("10000") * Decimal("0.05") / 12
        expected = personal_loan.calculate_total_interest() - first_month_interest
        assert float(savings) == pytest.approx(float(expected), abs=1e-6)

    def test_zero_rate_saves_no_interest(self) -> None:
        loan = LoanAccount("Family", LoanType.PERSONAL, 1200, 0, 12, date(2025, 1, 1))

        assert loan.calculate_savings_with_extra_payments(100) == 0
        assert loan.calculate_months_saved_with_extra_payments(100) == 6


class TestRecordPayment:
    """Tests for record_payment."""

    def test_records_payment(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.record_payment("188.71", date(2025, 2, 15), "First payment") is True

        assert personal_loan.payment_history == [
            Payment(amount=Decimal("188.71"), date=date(2025, 2, 15), notes="First payment")
        ]

    def test_keeps_recording_order(self, personal_loan: LoanAccount) -> None:
        personal_loan.record_payment(200, date(2025, 3, 15))
        personal_loan.record_payment(100, date(2025, 2, 15))

        assert [p.amount for p in personal_loan.payment_history] == [Decimal("200"), Decimal("100")]

    def test_date_defaults_to_today(self, personal_loan: LoanAccount) -> None:
        personal_loan.record_payment(100)

        assert personal_loan.payment_history[0].date == date.today()

    @pytest.mark.parametrize("amount", [0, -100])
    def test_rejects_non_positive(
        self, personal_loan: LoanAccount, amount: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="loan_organizer"):
            assert personal_loan.record_payment(amount, date(2025, 2, 15)) is False

        assert personal_loan.payment_history == []
        assert "Rejected payment" in caplog.text

    def test_total_paid(self, personal_loan: LoanAccount) -> None:
        personal_loan.record_payment("188.71", date(2025, 2, 15))
        personal_loan.record_payment("200.00", date(2025, 3, 15))
        personal_loan.record_payment(-5, date(2025, 4, 15))

        assert personal_loan.total_paid() == Decimal("388.71")

    def test_total_paid_empty(self, personal_loan: LoanAccount) -> None:
        assert personal_loan.total_paid() == Decimal("0")
