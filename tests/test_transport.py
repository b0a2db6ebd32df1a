"""Tests for transport subsidy eligibility."""

from datetime import date
from decimal import Decimal

import pytest

from labor_cost_engine.calculators.transport import TransportSubsidy
from labor_cost_engine.calculators.types import InputDomainError

MARCH_2024 = date(2024, 3, 1)


class TestTransportSubsidy:
    """Test the two-minimum-wage ceiling and proximity flag."""

    def test_below_ceiling_pays_subsidy(self, parameters):
        subsidy = TransportSubsidy(parameters, Decimal("1300000"), MARCH_2024)

        assert subsidy.eligible is True
        assert subsidy.amount == Decimal("162000")

    def test_at_ceiling_not_eligible(self, parameters):
        """The ceiling itself is excluded."""
        subsidy = TransportSubsidy(parameters, Decimal("2600000"), MARCH_2024)

        assert subsidy.ceiling == Decimal("2600000")
        assert subsidy.eligible is False
        assert subsidy.amount == Decimal("0")

    def test_one_peso_below_ceiling(self, parameters):
        subsidy = TransportSubsidy(parameters, Decimal("2599999"), MARCH_2024)
        assert subsidy.amount == Decimal("162000")

    def test_lives_near_workplace(self, parameters):
        subsidy = TransportSubsidy(
            parameters, Decimal("1300000"), MARCH_2024, lives_near_workplace=True
        )

        assert subsidy.eligible is True
        assert subsidy.amount == Decimal("0")

        subsidy.change_lives_near_workplace(False)
        assert subsidy.amount == Decimal("162000")

    def test_change_wage_base(self, parameters):
        subsidy = TransportSubsidy(parameters, Decimal("1300000"), MARCH_2024)
        subsidy.change_wage_base(Decimal("3000000"))

        assert subsidy.wage_base == Decimal("3000000")
        assert subsidy.amount == Decimal("0")

    def test_negative_base_rejected(self, parameters):
        with pytest.raises(InputDomainError):
            TransportSubsidy(parameters, Decimal("-1"), MARCH_2024)

        subsidy = TransportSubsidy(parameters, Decimal("1300000"), MARCH_2024)
        with pytest.raises(InputDomainError):
            subsidy.change_wage_base(Decimal("-1"))
        assert subsidy.wage_base == Decimal("1300000")
