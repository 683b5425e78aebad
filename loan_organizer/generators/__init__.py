"""Sample loan generators for demos and tests."""

from loan_organizer.generators.base import BaseGenerator
from loan_organizer.generators.loan import SampleLoanGenerator

__all__ = ["BaseGenerator", "SampleLoanGenerator"]
