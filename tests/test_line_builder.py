"""Tests for provision line builder."""

from decimal import Decimal

from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.types import BenefitKind, ContributionKind


class TestProvisionLineBuilder:
    """Test provision line builder functionality."""

    def test_round_to_pesos(self):
        """Test rounding to whole pesos, half away from zero."""
        assert ProvisionLineBuilder.round_to_pesos(Decimal("52000.5")) == Decimal("52001")
        assert ProvisionLineBuilder.round_to_pesos(Decimal("52000.49")) == Decimal("52000")
        assert ProvisionLineBuilder.round_to_pesos(Decimal("-2.5")) == Decimal("-3")

    def test_round_to_cents(self):
        """Test rounding to 2 decimal places."""
        assert ProvisionLineBuilder.round_to_cents(Decimal("0.125")) == Decimal("0.13")
        assert ProvisionLineBuilder.round_to_cents(Decimal("10.124")) == Decimal("10.12")
        assert ProvisionLineBuilder.round_to_cents(Decimal("-0.125")) == Decimal("-0.13")

    def test_create_contribution_line(self):
        """Contribution lines are rounded to pesos."""
        line = ProvisionLineBuilder.create_contribution_line(
            kind=ContributionKind.HEALTH,
            name="Salud",
            description="Aporte a salud por el empleador",
            amount=Decimal("110500.5"),
        )

        assert line.kind == ContributionKind.HEALTH
        assert line.amount == Decimal("110501")

    def test_create_benefit_line(self):
        """Benefit lines are rounded to cents."""
        line = ProvisionLineBuilder.create_benefit_line(
            kind=BenefitKind.SERVICE_BONUS,
            name="Prima",
            description="Prima de servicios",
            amount=Decimal("1462000") / 12,
        )

        assert line.kind == BenefitKind.SERVICE_BONUS
        assert line.amount == Decimal("121833.33")

    def test_sum_lines(self):
        lines = [
            ProvisionLineBuilder.create_contribution_line(
                ContributionKind.PENSION, "Pensión", "", Decimal("156000")
            ),
            ProvisionLineBuilder.create_benefit_line(
                BenefitKind.VACATION, "Vacaciones", "", Decimal("54166.666")
            ),
        ]
        assert ProvisionLineBuilder.sum_lines(lines) == Decimal("210166.67")
        assert ProvisionLineBuilder.sum_lines([]) == Decimal("0")


class TestLinesHash:
    """Test deterministic line hashing."""

    def test_same_lines_same_hash(self):
        line = ProvisionLineBuilder.create_contribution_line(
            ContributionKind.PENSION, "Pensión", "", Decimal("156000")
        )
        assert ProvisionLineBuilder.compute_lines_hash([line]) == (
            ProvisionLineBuilder.compute_lines_hash([line])
        )

    def test_amount_changes_hash(self):
        first = ProvisionLineBuilder.create_contribution_line(
            ContributionKind.PENSION, "Pensión", "", Decimal("156000")
        )
        second = ProvisionLineBuilder.create_contribution_line(
            ContributionKind.PENSION, "Pensión", "", Decimal("156001")
        )
        assert ProvisionLineBuilder.compute_lines_hash([first]) != (
            ProvisionLineBuilder.compute_lines_hash([second])
        )
