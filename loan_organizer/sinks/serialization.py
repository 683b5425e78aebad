"""Shared serialization utilities for sinks."""

from dataclasses import asdict, fields, is_dataclass, replace
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from loan_organizer.models import LoanAccount, PaymentDetails

CENT = Decimal("0.01")


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, LoanAccount):
        return loan_summary(obj)
    elif is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def round_schedule_row(row: PaymentDetails) -> PaymentDetails:
    """Round a schedule row to cents for display.

    Payment, interest and balance are rounded half up; the principal is the
    rounded payment minus the rounded interest, so the displayed split still
    adds up to the displayed payment.
    """
    payment = _round_money(row.monthly_payment)
    interest = _round_money(row.interest_payment)
    return replace(
        row,
        monthly_payment=payment,
        principal_payment=payment - interest,
        interest_payment=interest,
        remaining_balance=_round_money(row.remaining_balance),
    )


def schedule_row_to_dict(row: PaymentDetails) -> dict:
    """Convert a schedule row rounded with ``round_schedule_row``.

    Uses ``fields()`` + ``getattr`` rather than ``asdict()``; rows are
    flat and schedules can run to 600 rows.
    """
    rounded = round_schedule_row(row)
    return {f.name: serialize_value(getattr(rounded, f.name)) for f in fields(rounded)}


def loan_summary(loan: LoanAccount) -> dict:
    """Key terms and computed totals of a loan."""
    summary: dict[str, Any] = {
        "loan_name": loan.loan_name,
        "loan_type": loan.loan_type,
        "principal": loan.principal,
        "annual_interest_rate": loan.annual_interest_rate,
        "term_in_months": loan.term_in_months,
        "start_date": loan.start_date,
        "maturity_date": loan.maturity_date,
        "monthly_payment": _round_money(loan.calculate_monthly_payment()),
        "total_interest": _round_money(loan.calculate_total_interest()),
        "total_cost": _round_money(loan.calculate_total_cost()),
        "is_active": loan.is_active,
    }
    if loan.details is not None:
        summary["details"] = asdict(loan.details)
    return {k: serialize_value(v) for k, v in summary.items()}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def _round_money(value: Any) -> Any:
    if isinstance(value, Decimal):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    return value
