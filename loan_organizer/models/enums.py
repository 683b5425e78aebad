"""Enumeration types for loan entities."""

from enum import Enum


class LoanType(str, Enum):
    PERSONAL = "PERSONAL"
    AUTO = "AUTO"
    MORTGAGE = "MORTGAGE"
    GENERAL = "GENERAL"

    @property
    def label(self) -> str:
        """Display name (e.g. ``"Mortgage"``)."""
        return self.value.capitalize()
