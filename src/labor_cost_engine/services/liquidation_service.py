"""Liquidation service - drives the engine from request data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from labor_cost_engine.calculators.engine import PayrollLiquidation
from labor_cost_engine.calculators.overtime import OvertimeLedger
from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.calculators.types import (
    OVERTIME_DESCRIPTIONS,
    OVERTIME_MULTIPLIERS,
    InputDomainError,
    LiquidationSnapshot,
    OvertimeCategory,
    RiskClass,
    SalaryKind,
    to_decimal,
)


@dataclass
class LiquidationInput:
    """Already-validated inputs for one liquidation."""

    base_wage: Decimal
    on_date: date
    salary_kind: SalaryKind = SalaryKind.ORDINARY
    lives_near_workplace: bool = False
    risk_class: RiskClass = RiskClass.I
    taxable_pay: Decimal = Decimal("0")
    non_taxable_pay: Decimal = Decimal("0")
    overtime: dict[OvertimeCategory | str, int] = field(default_factory=dict)


@dataclass
class OvertimeQuoteItem:
    """Quoted amount for one overtime category."""

    category: OvertimeCategory
    description: str
    multiplier: Decimal
    hours: int
    amount: Decimal


@dataclass
class OvertimeQuote:
    """Quoted overtime for a set of categories."""

    hourly_rate: Decimal
    items: list[OvertimeQuoteItem]
    total: Decimal


@dataclass
class ParameterSummary:
    """Legal parameters in force at the end of a year."""

    year: int
    minimum_wage: Decimal
    transport_subsidy: Decimal
    monthly_working_hours: int
    integral_salary_minimum: Decimal
    ordinary_hourly_rate: Decimal


class LiquidationService:
    """Service for one-shot liquidations and related queries.

    Operations:
    - liquidate: configure a PayrollLiquidation and return its snapshot
    - quote_overtime: price overtime hours without a full liquidation
    - describe_parameters: legal parameters for a year
    - overtime_catalogue: categories with descriptions and multipliers
    """

    def __init__(self, parameters: AnnualParameters, engine_version: str | None = None):
        self.parameters = parameters
        self.engine_version = engine_version

    def build(self, data: LiquidationInput) -> PayrollLiquidation:
        """Create a configured liquidation session.

        Configuration order: risk class, proximity, taxable pay,
        non-taxable pay, then overtime per category.
        """
        liquidation = PayrollLiquidation(
            self.parameters,
            data.base_wage,
            data.salary_kind,
            data.on_date,
            engine_version=self.engine_version,
        )
        liquidation.change_risk(data.risk_class)
        liquidation.change_lives_near_workplace(data.lives_near_workplace)

        if data.taxable_pay:
            liquidation.change_taxable_pay(data.taxable_pay)
        if data.non_taxable_pay:
            liquidation.change_non_taxable_pay(data.non_taxable_pay)

        for category, hours in data.overtime.items():
            if hours:
                liquidation.register_overtime(category, hours)

        return liquidation

    def liquidate(self, data: LiquidationInput) -> LiquidationSnapshot:
        return self.build(data).liquidate()

    def quote_overtime(
        self,
        hours: dict[Any, int],
        hourly_rate: Any | None = None,
        monthly_wage: Any | None = None,
        on_date: date | None = None,
    ) -> OvertimeQuote:
        """Price overtime hours.

        Uses hourly_rate when given; otherwise monthly_wage divided by the
        monthly working hours in force on on_date.
        """
        rate = self._resolve_hourly_rate(hourly_rate, monthly_wage, on_date)
        ledger = OvertimeLedger(rate)
        for category, quantity in hours.items():
            ledger.register_quantity(category, quantity)

        items = [
            OvertimeQuoteItem(
                category=category,
                description=OVERTIME_DESCRIPTIONS[category],
                multiplier=OVERTIME_MULTIPLIERS[category],
                hours=quantity,
                amount=amount,
            )
            for category, quantity, amount in ledger.items()
        ]
        return OvertimeQuote(hourly_rate=ledger.hourly_rate, items=items, total=ledger.total)

    def describe_parameters(self, year: int) -> ParameterSummary:
        on_date = date(year, 12, 31)
        return ParameterSummary(
            year=year,
            minimum_wage=self.parameters.minimum_wage(on_date),
            transport_subsidy=self.parameters.transport_subsidy(on_date),
            monthly_working_hours=self.parameters.monthly_working_hours(on_date),
            integral_salary_minimum=self.parameters.integral_salary_minimum(on_date),
            ordinary_hourly_rate=self.parameters.ordinary_hourly_rate(on_date),
        )

    @staticmethod
    def overtime_catalogue() -> list[tuple[OvertimeCategory, str, Decimal]]:
        return [
            (category, OVERTIME_DESCRIPTIONS[category], OVERTIME_MULTIPLIERS[category])
            for category in OvertimeCategory
        ]

    def _resolve_hourly_rate(
        self,
        hourly_rate: Any | None,
        monthly_wage: Any | None,
        on_date: date | None,
    ) -> Decimal:
        if hourly_rate is not None:
            return to_decimal(hourly_rate, "hourly_rate")
        if monthly_wage is None or on_date is None:
            raise InputDomainError(
                "hourly_rate", "provide hourly_rate, or monthly_wage with on_date"
            )
        wage = to_decimal(monthly_wage, "monthly_wage")
        if wage <= 0:
            raise InputDomainError("monthly_wage", "must be greater than zero")
        return wage / self.parameters.monthly_working_hours(on_date)
