"""Sample loan generator."""

from datetime import date
from decimal import Decimal
from typing import Iterator

from loan_organizer.config import LoanConfig
from loan_organizer.generators.base import BaseGenerator
from loan_organizer.loan_types import auto_loan, mortgage_loan
from loan_organizer.models import LoanAccount, LoanType

# VIN alphabet excludes I, O and Q
VIN_LETTERS = "ABCDEFGHJKLMNPRSTUVWXYZ"


class SampleLoanGenerator(BaseGenerator):
    """Generate plausible personal, auto and mortgage loans."""

    LOAN_TYPES = [LoanType.PERSONAL, LoanType.AUTO, LoanType.MORTGAGE]

    VEHICLES = {
        "Toyota": ["Camry", "Corolla", "RAV4", "Tacoma"],
        "Honda": ["Accord", "Civic", "CR-V"],
        "Ford": ["F-150", "Escape", "Mustang"],
        "Subaru": ["Outback", "Forester"],
        "Tesla": ["Model 3", "Model Y"],
    }

    # Annual rate ranges by loan type, in basis points
    INTEREST_RATES = {
        LoanType.PERSONAL: (600, 1800),  # 6-18%
        LoanType.AUTO: (300, 900),  # 3-9%
        LoanType.MORTGAGE: (300, 750),  # 3-7.5%
    }

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        config: LoanConfig | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.config = config or LoanConfig()

    def generate(self, loan_type: LoanType | None = None) -> LoanAccount:
        """Generate one loan.

        Parameters
        ----------
        loan_type : LoanType | None
            PERSONAL, AUTO or MORTGAGE; random when omitted.

        Returns
        -------
        LoanAccount
            Generated loan, with vehicle or property details for AUTO and
            MORTGAGE.
        """
        if loan_type is None:
            loan_type = self.fake.random_element(self.LOAN_TYPES)

        if loan_type == LoanType.AUTO:
            return self.generate_auto()
        if loan_type == LoanType.MORTGAGE:
            return self.generate_mortgage()
        return self.generate_personal()

    def generate_batch(self, count: int) -> Iterator[LoanAccount]:
        """Generate ``count`` loans of random types with unique names."""
        for i in range(1, count + 1):
            loan = self.generate()
            loan.loan_name = f"{loan.loan_name} #{i}"
            yield loan

    def generate_personal(self) -> LoanAccount:
        principal = Decimal(self.fake.random_int(min=1, max=50) * 1000)
        return LoanAccount(
            f"{self.fake.last_name()} Personal Loan",
            LoanType.PERSONAL,
            principal,
            self._rate(LoanType.PERSONAL),
            self.fake.random_element([12, 24, 36, 48, 60]),
            self._start_date(),
            config=self.config,
        )

    def generate_auto(self) -> LoanAccount:
        make = self.fake.random_element(list(self.VEHICLES))
        model = self.fake.random_element(self.VEHICLES[make])
        is_new = self.fake.boolean(chance_of_getting_true=60)
        start = self._start_date()
        year = start.year if is_new else start.year - self.fake.random_int(min=1, max=8)

        vehicle_value = Decimal(self.fake.random_int(min=12, max=60) * 1000)
        # Financed share of the vehicle price: 70-100%
        financed = Decimal(self.fake.random_int(min=70, max=100)) / 100

        return auto_loan(
            f"{year} {make} {model}",
            (vehicle_value * financed).quantize(Decimal("1")),
            self._rate(LoanType.AUTO),
            self.fake.random_element([36, 48, 60, 72]),
            make=make,
            model=model,
            year=year,
            vin=self.fake.bothify("?" * 3 + "#" * 6 + "?" * 2 + "#" * 6, letters=VIN_LETTERS),
            vehicle_value=vehicle_value,
            is_new=is_new,
            start_date=start,
            config=self.config,
        )

    def generate_mortgage(self) -> LoanAccount:
        property_value = Decimal(self.fake.random_int(min=150, max=1200) * 1000)
        # Down payment 3.5-30%
        down_payment_pct = Decimal(self.fake.random_int(min=35, max=300)) / 1000
        down_payment = (property_value * down_payment_pct).quantize(Decimal("1"))
        escrow_included = self.fake.boolean(chance_of_getting_true=70)
        escrow_amount = Decimal(self.fake.random_int(min=150, max=900)) if escrow_included else Decimal("0")

        address = self.fake.address().replace("\n", ", ")
        return mortgage_loan(
            f"{self.fake.street_name()} Mortgage",
            property_value - down_payment,
            self._rate(LoanType.MORTGAGE),
            self.fake.random_element([180, 240, 360]),
            address=address,
            property_value=property_value,
            down_payment=down_payment,
            escrow_included=escrow_included,
            escrow_amount=escrow_amount,
            start_date=self._start_date(),
            config=self.config,
        )

    def _rate(self, loan_type: LoanType) -> Decimal:
        low, high = self.INTEREST_RATES[loan_type]
        return Decimal(self.fake.random_int(min=low, max=high)) / 10000

    def _start_date(self) -> date:
        return self.fake.date_between(start_date="-3y", end_date="today")
