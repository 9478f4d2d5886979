"""Canonical test fixtures used across all engine tests.

Fixture: 3M CZK apartment, 2.4M mortgage at 5% over 30 years, 14K monthly rent.
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.models.property import PropertyInputs, Scenario


def _zero_inputs(**overrides) -> PropertyInputs:
    """All-zero inputs with 100% occupancy, overridden per test."""
    base = PropertyInputs(
        purchase_price=Decimal("0"),
        own_funds=Decimal("0"),
        mortgage_amount=Decimal("0"),
        interest_rate=Decimal("0"),
        loan_term_years=Decimal("0"),
        expected_rent=Decimal("0"),
        occupancy=Decimal("100"),
        repair_fund=Decimal("0"),
        management=Decimal("0"),
        insurance=Decimal("0"),
        property_tax=Decimal("0"),
        utilities=Decimal("0"),
        internet=Decimal("0"),
        other_costs=Decimal("0"),
        unexpected_costs=Decimal("0"),
    )
    return replace(base, **overrides)


@pytest.fixture
def make_inputs():
    """Factory for sparse inputs: only the fields a test cares about."""
    return _zero_inputs


@pytest.fixture
def canonical_inputs() -> PropertyInputs:
    """Financed apartment with a small positive cash flow."""
    return PropertyInputs(
        purchase_price=Decimal("3000000"),
        own_funds=Decimal("600000"),
        mortgage_amount=Decimal("2400000"),
        interest_rate=Decimal("5"),
        loan_term_years=Decimal("30"),
        expected_rent=Decimal("18000"),
        occupancy=Decimal("95"),
        repair_fund=Decimal("500"),
        management=Decimal("800"),
        insurance=Decimal("300"),
        property_tax=Decimal("2400"),
        utilities=Decimal("0"),
        internet=Decimal("0"),
        other_costs=Decimal("200"),
        unexpected_costs=Decimal("300"),
    )


@pytest.fixture
def negative_inputs() -> PropertyInputs:
    """Unfinanced: 10K rent against 11K operating costs (-1,000/month)."""
    return _zero_inputs(
        purchase_price=Decimal("2000000"),
        own_funds=Decimal("2000000"),
        expected_rent=Decimal("10000"),
        other_costs=Decimal("11000"),
    )


@pytest.fixture
def negative_scenario(negative_inputs) -> Scenario:
    return Scenario(id="neg-1", name="Studio", inputs=negative_inputs)
