"""Output sinks for rendering loans and schedules."""

from loan_organizer.sinks.console import ConsoleSink
from loan_organizer.sinks.serialization import (
    loan_summary,
    round_schedule_row,
    schedule_row_to_dict,
    to_dict,
)

__all__ = ["ConsoleSink", "loan_summary", "round_schedule_row", "schedule_row_to_dict", "to_dict"]
