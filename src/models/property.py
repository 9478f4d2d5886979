from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PropertyInputs:
    # Purchase & financing
    purchase_price: Decimal
    own_funds: Decimal  # Owner's cash contribution
    mortgage_amount: Decimal
    interest_rate: Decimal  # Annual, percent (e.g. Decimal("5") for 5%)
    loan_term_years: Decimal

    # Income
    expected_rent: Decimal  # Monthly
    occupancy: Decimal  # Percent, 0-100 (not clamped)

    # Operating expenses (monthly unless noted)
    repair_fund: Decimal
    management: Decimal
    insurance: Decimal
    property_tax: Decimal  # Annual
    utilities: Decimal
    internet: Decimal
    other_costs: Decimal
    unexpected_costs: Decimal


@dataclass(frozen=True)
class Scenario:
    """A named, saved set of property inputs."""
    id: str
    name: str
    inputs: PropertyInputs
    created_at: datetime | None = None
