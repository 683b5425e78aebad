"""Type-specific loan details.

A loan carries at most one of these as its ``details``; the payload kind
must agree with the loan's ``LoanType`` (``VehicleDetails`` for AUTO,
``PropertyDetails`` for MORTGAGE, none otherwise). Instances are frozen:
use ``dataclasses.replace`` to derive a changed copy, which re-runs
validation.
"""

from dataclasses import dataclass
from decimal import Decimal

from loan_organizer.validation import validate_asset_value, validate_non_negative


@dataclass(frozen=True)
class VehicleDetails:
    """Financed vehicle for an auto loan."""

    make: str
    model: str
    year: int
    vin: str
    vehicle_value: Decimal
    is_new: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "vehicle_value", validate_asset_value(self.vehicle_value, "Vehicle value")
        )


@dataclass(frozen=True)
class PropertyDetails:
    """Mortgaged property, with optional escrow collected monthly."""

    address: str
    property_value: Decimal
    down_payment: Decimal = Decimal("0")
    escrow_included: bool = False
    escrow_amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "property_value", validate_asset_value(self.property_value, "Property value")
        )
        object.__setattr__(
            self, "down_payment", validate_non_negative(self.down_payment, "Down payment")
        )
        object.__setattr__(
            self, "escrow_amount", validate_non_negative(self.escrow_amount, "Escrow amount")
        )


LoanDetails = VehicleDetails | PropertyDetails
