"""Tests for the liquidation service."""

from datetime import date
from decimal import Decimal

import pytest

from labor_cost_engine.calculators.parameters import ParameterNotFoundError
from labor_cost_engine.calculators.types import (
    ContributionKind,
    InputDomainError,
    OvertimeCategory,
    RiskClass,
    SalaryKind,
)
from labor_cost_engine.services.liquidation_service import (
    LiquidationInput,
    LiquidationService,
)


@pytest.fixture
def service(parameters) -> LiquidationService:
    return LiquidationService(parameters, engine_version="test")


class TestLiquidate:
    """Test request-driven liquidation."""

    def test_applies_configuration(self, service):
        liquidation = service.build(
            LiquidationInput(
                base_wage=Decimal("1300000"),
                on_date=date(2024, 3, 1),
                lives_near_workplace=True,
                risk_class=RiskClass.III,
                taxable_pay=Decimal("100000"),
                non_taxable_pay=Decimal("50000"),
                overtime={OvertimeCategory.HED: 3, OvertimeCategory.RN: 0},
            )
        )

        assert liquidation.risk_class == RiskClass.III
        assert liquidation.lives_near_workplace is True
        assert liquidation.taxable_pay == Decimal("100000")
        assert liquidation.non_taxable_pay == Decimal("50000")
        assert liquidation.overtime_quantity("HED") == 3
        assert liquidation.overtime_items() == [
            (OvertimeCategory.HED, 3, Decimal("20745"))
        ]

    def test_liquidate_returns_snapshot(self, service):
        snapshot = service.liquidate(
            LiquidationInput(base_wage=Decimal("1300000"), on_date=date(2024, 3, 1))
        )

        assert snapshot.total_cost == Decimal("1989239.33")
        assert snapshot.line(ContributionKind.PENSION).amount == Decimal("156000")

    def test_same_input_same_calculation_id(self, service):
        data = LiquidationInput(
            base_wage=Decimal("20000000"),
            on_date=date(2024, 3, 1),
            salary_kind=SalaryKind.INTEGRAL,
        )
        assert service.liquidate(data).calculation_id == (
            service.liquidate(data).calculation_id
        )


class TestQuoteOvertime:
    """Test overtime quotes."""

    def test_quote_from_hourly_rate(self, service):
        quote = service.quote_overtime({"HED": 3, "HEN": 1}, hourly_rate=10000)

        assert quote.hourly_rate == Decimal("10000")
        assert [item.category for item in quote.items] == [
            OvertimeCategory.HED,
            OvertimeCategory.HEN,
        ]
        assert quote.items[0].amount == Decimal("37500")
        assert quote.items[0].multiplier == Decimal("1.25")
        assert quote.items[0].description == "Hora extra diurna"
        assert quote.items[1].amount == Decimal("17500")
        assert quote.total == Decimal("55000")

    def test_quote_from_monthly_wage(self, service):
        quote = service.quote_overtime(
            {OvertimeCategory.HED: 3},
            monthly_wage=Decimal("1300000"),
            on_date=date(2024, 3, 1),
        )

        assert quote.hourly_rate == Decimal("1300000") / 235
        assert quote.total == Decimal("20745")

    def test_quote_requires_rate_source(self, service):
        with pytest.raises(InputDomainError):
            service.quote_overtime({"HED": 1}, monthly_wage=Decimal("1300000"))

    def test_quote_unknown_year(self, service):
        with pytest.raises(ParameterNotFoundError):
            service.quote_overtime(
                {"HED": 1}, monthly_wage=Decimal("1300000"), on_date=date(2031, 1, 1)
            )

    def test_quote_rejects_unknown_category(self, service):
        with pytest.raises(InputDomainError):
            service.quote_overtime({"HEX": 1}, hourly_rate=10000)


class TestDescribeParameters:
    """Test the yearly parameter summary."""

    def test_summary_uses_year_end(self, service):
        summary = service.describe_parameters(2024)

        assert summary.year == 2024
        assert summary.minimum_wage == Decimal("1300000")
        assert summary.transport_subsidy == Decimal("162000")
        assert summary.monthly_working_hours == 230
        assert summary.integral_salary_minimum == Decimal("16900000")
        assert summary.ordinary_hourly_rate == Decimal("1300000") / 230

    def test_unknown_year(self, service):
        with pytest.raises(ParameterNotFoundError):
            service.describe_parameters(2019)

    def test_overtime_catalogue(self, service):
        catalogue = service.overtime_catalogue()

        assert len(catalogue) == 11
        assert catalogue[0] == (
            OvertimeCategory.HED,
            "Hora extra diurna",
            Decimal("1.25"),
        )
