"""Console sink for loan summaries and amortization schedules."""

import json
from typing import Any, Iterable

from loan_organizer.formatting import format_currency, format_date, format_percent
from loan_organizer.models import LoanAccount, PaymentDetails
from loan_organizer.sinks.serialization import round_schedule_row, to_dict


class ConsoleSink:
    """Output loans and schedules to console (stdout)."""

    SCHEDULE_HEADER = ("Month", "Date", "Payment", "Principal", "Interest", "Balance")

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records or schedule rows to print (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console as JSON."""
        self._banner(f"Entity: {entity_type} ({len(records)} records)")

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                print(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._count(entity_type, len(records))

    def write_loan(self, loan: LoanAccount) -> None:
        """Print the human-readable terms of a loan."""
        self._banner(str(loan))
        print(f"Name: {loan.loan_name}")
        print(f"Type: {loan.loan_type.label}")
        print(f"Principal: {format_currency(loan.principal)}")
        print(f"Interest Rate: {format_percent(loan.annual_interest_rate)}")
        print(f"Term: {loan.term_in_months} months")
        print(f"Start Date: {format_date(loan.start_date)}")
        print(f"Maturity Date: {format_date(loan.maturity_date)}")
        print(f"Monthly Payment: {format_currency(loan.calculate_monthly_payment())}")
        print(f"Total Interest: {format_currency(loan.calculate_total_interest())}")
        print(f"Total Cost: {format_currency(loan.calculate_total_cost())}")
        self._count("loans", 1)

    def write_schedule(self, loan_name: str, schedule: Iterable[PaymentDetails]) -> None:
        """Print schedule rows as an aligned table."""
        self._banner(f"Amortization schedule: {loan_name}")
        print("{:>5}  {:>10}  {:>12}  {:>12}  {:>12}  {:>14}".format(*self.SCHEDULE_HEADER))

        shown = 0
        total = 0
        for row in schedule:
            total += 1
            if self.max_records is not None and shown >= self.max_records:
                continue
            row = round_schedule_row(row)
            print(
                f"{row.month:>5}  {format_date(row.payment_date):>10}  "
                f"{format_currency(row.monthly_payment):>12}  "
                f"{format_currency(row.principal_payment):>12}  "
                f"{format_currency(row.interest_payment):>12}  "
                f"{format_currency(row.remaining_balance):>14}"
            )
            shown += 1

        if total > shown:
            print(f"... ({total - shown} remaining payments omitted)")

        self._count("schedule_rows", total)

    def close(self) -> None:
        """Print summary and close."""
        self._banner("Console Sink Summary")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _banner(self, title: str) -> None:
        print(f"\n{'='*60}")
        print(title)
        print("=" * 60)

    def _count(self, entity_type: str, n: int) -> None:
        self._counts[entity_type] = self._counts.get(entity_type, 0) + n
