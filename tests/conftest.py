"""Pytest fixtures for labor cost engine tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from labor_cost_engine.calculators.engine import PayrollLiquidation
from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.calculators.types import RemunerationTotals, SalaryKind

# 2024: minimum wage 1,300,000; transport subsidy 162,000; 235 hours until July 15
MARCH_2024 = date(2024, 3, 1)
MINIMUM_WAGE_2024 = Decimal("1300000")


@pytest.fixture
def parameters() -> AnnualParameters:
    """Default legal parameter table."""
    return AnnualParameters()


@pytest.fixture
def minimum_wage_liquidation(parameters: AnnualParameters) -> PayrollLiquidation:
    """Ordinary worker earning the 2024 minimum wage."""
    return PayrollLiquidation(
        parameters,
        MINIMUM_WAGE_2024,
        SalaryKind.ORDINARY,
        MARCH_2024,
        engine_version="test",
    )


@pytest.fixture
def integral_liquidation(parameters: AnnualParameters) -> PayrollLiquidation:
    """Integral-salary worker earning 20,000,000 in 2024."""
    return PayrollLiquidation(
        parameters,
        Decimal("20000000"),
        SalaryKind.INTEGRAL,
        MARCH_2024,
        engine_version="test",
    )


@pytest.fixture
def make_totals():
    """Factory for remuneration totals used by rule-engine tests."""

    def _make_totals(
        taxable: str,
        accrued: str | None = None,
        contribution_base: str | None = None,
        integral: bool = False,
    ) -> RemunerationTotals:
        return RemunerationTotals(
            taxable_total=Decimal(taxable),
            accrued_total=Decimal(accrued if accrued is not None else taxable),
            contribution_base_total=Decimal(
                contribution_base if contribution_base is not None else taxable
            ),
            integral=integral,
        )

    return _make_totals
