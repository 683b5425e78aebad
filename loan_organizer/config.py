"""Configuration management for loan-organizer."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from loan_organizer.exceptions import ConfigurationError
from loan_organizer.validation import MAX_TERM_MONTHS, MIN_TERM_MONTHS


@dataclass
class LoanConfig:
    """Defaults applied when a loan is created without explicit terms."""

    default_interest_rate: Decimal = Decimal("0.05")
    default_term_months: int = 60


@dataclass
class OutputConfig:
    """Console output configuration."""

    max_schedule_rows: int | None = 12
    pretty: bool = True


@dataclass
class LoanOrganizerConfig:
    """Main configuration for loan-organizer."""

    loan: LoanConfig = field(default_factory=LoanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LoanOrganizerConfig":
        """Create config from environment variables."""
        import os

        loan = LoanConfig(
            default_interest_rate=_parse_rate(os.getenv("LOAN_DEFAULT_RATE", "0.05")),
            default_term_months=_parse_term(os.getenv("LOAN_DEFAULT_TERM", "60")),
        )

        max_rows = os.getenv("MAX_SCHEDULE_ROWS")
        output = OutputConfig(
            max_schedule_rows=_parse_int("MAX_SCHEDULE_ROWS", max_rows) if max_rows else None,
            pretty=os.getenv("PRETTY_OUTPUT", "true").lower() == "true",
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            loan=loan,
            output=output,
            seed=_parse_int("SEED", os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _parse_rate(raw: str) -> Decimal:
    try:
        rate = Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"LOAN_DEFAULT_RATE is not a number: {raw!r}") from e
    if not Decimal("0") <= rate <= Decimal("1"):
        raise ConfigurationError(
            f"LOAN_DEFAULT_RATE must be a fraction between 0 and 1, got {raw!r}"
        )
    return rate


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} is not an integer: {raw!r}") from e


def _parse_term(raw: str) -> int:
    term = _parse_int("LOAN_DEFAULT_TERM", raw)
    if not MIN_TERM_MONTHS <= term <= MAX_TERM_MONTHS:
        raise ConfigurationError(
            f"LOAN_DEFAULT_TERM must be between {MIN_TERM_MONTHS} and {MAX_TERM_MONTHS} months, got {raw!r}"
        )
    return term
