"""Payroll liquidation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from labor_cost_engine.calculators.benefits import SocialBenefitEngine
from labor_cost_engine.calculators.contributions import SocialContributionEngine
from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.overtime import OvertimeLedger
from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.calculators.remuneration import RemunerationAggregate
from labor_cost_engine.calculators.transport import TransportSubsidy
from labor_cost_engine.calculators.types import (
    InputDomainError,
    LiquidationSnapshot,
    LiquidationStatus,
    OvertimeCategory,
    PayrollExpenses,
    RemunerationTotals,
    RiskClass,
    SalaryKind,
)
from labor_cost_engine.calculators.wage import WageProfile
from labor_cost_engine.config import get_settings


class PayrollLiquidation:
    """Monthly employer cost of one worker.

    Owns the wage profile, remuneration aggregate, transport subsidy,
    overtime ledger and risk class of a single liquidation session.

    Every setter updates its owning component and then runs
    _recompute_dependents(), which refreshes:
    1) Aggregate wage and salary kind from the wage profile
    2) Overtime hourly rate (wage / monthly hours)
    3) Aggregate overtime total from the ledger
    4) Transport-subsidy wage base (wage + extra taxable pay)

    liquidate() only reads that state and returns an immutable snapshot.
    Not thread-safe; use one instance per caller.
    """

    def __init__(
        self,
        parameters: AnnualParameters,
        base_wage: Any,
        salary_kind: SalaryKind,
        on_date: date,
        engine_version: str | None = None,
    ):
        self.parameters = parameters
        self.engine_version = engine_version or get_settings().engine_version
        self.contribution_engine = SocialContributionEngine()
        self.benefit_engine = SocialBenefitEngine()

        self._wage = WageProfile(parameters, base_wage, salary_kind, on_date)
        self._remuneration = RemunerationAggregate(
            self._wage.base_wage, integral=self._wage.is_integral
        )
        self._transport = TransportSubsidy(
            parameters, self._remuneration.transport_subsidy_base, on_date
        )
        self._overtime = OvertimeLedger(self._ordinary_hourly_rate())
        self._risk_class = RiskClass.I
        self._status = LiquidationStatus.CONFIGURED

    # === Read access ===

    @property
    def status(self) -> LiquidationStatus:
        return self._status

    @property
    def on_date(self) -> date:
        return self._wage.effective_date

    @property
    def base_wage(self) -> Decimal:
        return self._wage.base_wage

    @property
    def salary_kind(self) -> SalaryKind:
        return self._wage.salary_kind

    @property
    def is_integral(self) -> bool:
        return self._wage.is_integral

    @property
    def risk_class(self) -> RiskClass:
        return self._risk_class

    @property
    def taxable_pay(self) -> Decimal:
        return self._remuneration.extra_taxable_pay

    @property
    def non_taxable_pay(self) -> Decimal:
        return self._remuneration.non_taxable_pay

    @property
    def hourly_rate(self) -> Decimal:
        return self._overtime.hourly_rate

    @property
    def overtime_total(self) -> Decimal:
        return self._overtime.total

    @property
    def lives_near_workplace(self) -> bool:
        return self._transport.lives_near_workplace

    @property
    def transport_subsidy_applies(self) -> bool:
        return self._transport.eligible

    @property
    def transport_subsidy_base(self) -> Decimal:
        return self._transport.wage_base

    @property
    def transport_subsidy_amount(self) -> Decimal:
        return self._transport.amount

    def totals(self) -> RemunerationTotals:
        return self._remuneration.totals()

    def overtime_quantity(self, category: OvertimeCategory | str) -> int:
        return self._overtime.quantity(category)

    def overtime_amount(self, category: OvertimeCategory | str) -> Decimal:
        return self._overtime.category_amount(category)

    def overtime_items(self) -> list[tuple[OvertimeCategory, int, Decimal]]:
        return self._overtime.items()

    # === Mutators ===

    def change_wage(self, base_wage: Any) -> None:
        self._wage.change_wage(base_wage)
        self._recompute_dependents()

    def change_salary_kind(self, salary_kind: SalaryKind | str) -> None:
        self._wage.change_salary_kind(salary_kind)
        self._recompute_dependents()

    def change_risk(self, risk_class: RiskClass | str) -> None:
        try:
            self._risk_class = RiskClass(risk_class)
        except ValueError:
            raise InputDomainError("risk_class", f"unknown risk class {risk_class!r}")
        self._recompute_dependents()

    def register_overtime(self, category: OvertimeCategory | str, hours: int) -> None:
        self._overtime.register_quantity(category, hours)
        self._recompute_dependents()

    def change_lives_near_workplace(self, lives_near: bool) -> None:
        self._transport.change_lives_near_workplace(lives_near)
        self._recompute_dependents()

    def change_taxable_pay(self, amount: Any) -> None:
        self._remuneration.change_taxable_pay(amount)
        self._recompute_dependents()

    def change_non_taxable_pay(self, amount: Any) -> None:
        self._remuneration.change_non_taxable_pay(amount)
        self._recompute_dependents()

    # === Liquidation ===

    def liquidate(self) -> LiquidationSnapshot:
        """Compute expenses and employer provisions for the current state."""
        totals = self._remuneration.totals()
        minimum_wage = self.parameters.minimum_wage(self.on_date)
        transport_subsidy = self._transport.amount

        benefit_lines = tuple(
            self.benefit_engine.calculate(totals, transport_subsidy)
        )
        contribution_lines = tuple(
            self.contribution_engine.calculate(totals, minimum_wage, self._risk_class)
        )

        expenses = PayrollExpenses(
            base_wage=self._remuneration.base_wage,
            transport_subsidy=transport_subsidy,
            taxable_pay=self._remuneration.extra_taxable_pay,
            non_taxable_pay=self._remuneration.non_taxable_pay,
            overtime=self._remuneration.overtime_total,
        )
        total_provision = ProvisionLineBuilder.sum_lines(benefit_lines + contribution_lines)

        calculation_id = self._generate_calculation_id(
            self._compute_inputs_fingerprint(),
            ProvisionLineBuilder.compute_lines_hash(benefit_lines + contribution_lines),
        )

        self._status = LiquidationStatus.LIQUIDATED

        return LiquidationSnapshot(
            calculation_id=calculation_id,
            expenses=expenses,
            total_expenses=expenses.total,
            benefit_lines=benefit_lines,
            contribution_lines=contribution_lines,
            total_provision=total_provision,
            total_cost=expenses.total + total_provision,
        )

    # === Internals ===

    def _recompute_dependents(self) -> None:
        """Propagate wage, overtime and pay changes to derived components."""
        self._remuneration.change_wage(self._wage.base_wage, self._wage.is_integral)
        self._overtime.change_hourly_rate(self._ordinary_hourly_rate())
        self._remuneration.change_overtime_total(self._overtime.total)
        self._transport.change_wage_base(self._remuneration.transport_subsidy_base)
        self._status = LiquidationStatus.CONFIGURED

    def _ordinary_hourly_rate(self) -> Decimal:
        hours = self.parameters.monthly_working_hours(self.on_date)
        return self._wage.base_wage / hours

    def _compute_inputs_fingerprint(self) -> str:
        """Compute fingerprint of every input used in the liquidation."""
        inputs = {
            "base_wage": str(self._wage.base_wage),
            "salary_kind": self._wage.salary_kind.value,
            "on_date": self.on_date.isoformat(),
            "risk_class": self._risk_class.value,
            "lives_near_workplace": self._transport.lives_near_workplace,
            "taxable_pay": str(self._remuneration.extra_taxable_pay),
            "non_taxable_pay": str(self._remuneration.non_taxable_pay),
            "overtime": {
                category.value: quantity
                for category, quantity, _ in self._overtime.items()
            },
        }
        json_str = json.dumps(inputs, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]

    def _generate_calculation_id(
        self, inputs_fingerprint: str, lines_fingerprint: str
    ) -> UUID:
        """Generate deterministic calculation ID."""
        data = {
            "on_date": self.on_date.isoformat(),
            "engine_version": self.engine_version,
            "inputs_fingerprint": inputs_fingerprint,
            "lines_fingerprint": lines_fingerprint,
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])
