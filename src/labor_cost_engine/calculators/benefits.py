"""Statutory social-benefit accruals."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.types import (
    BenefitKind,
    ProvisionLine,
    RemunerationTotals,
)


class BenefitBase(str, Enum):
    """How a benefit line derives its base."""

    # taxable * 0.7 when integral, else taxable + transport subsidy
    BENEFIT = "BENEFIT"
    # raw taxable total, whatever the salary kind
    TAXABLE = "TAXABLE"


@dataclass(frozen=True)
class BenefitRule:
    """One row of the benefit rule table: amount = base * factor / divisor."""

    kind: BenefitKind
    name: str
    description: str
    base: BenefitBase
    factor: Decimal
    divisor: int
    zero_when_integral: bool


BENEFIT_RULES: tuple[BenefitRule, ...] = (
    BenefitRule(
        kind=BenefitKind.SERVICE_BONUS,
        name="Prima",
        description="Prima de servicios",
        base=BenefitBase.BENEFIT,
        factor=Decimal("1"),
        divisor=12,
        zero_when_integral=True,
    ),
    BenefitRule(
        kind=BenefitKind.SEVERANCE,
        name="Cesantías",
        description="Cesantías",
        base=BenefitBase.BENEFIT,
        factor=Decimal("1"),
        divisor=12,
        zero_when_integral=True,
    ),
    BenefitRule(
        kind=BenefitKind.SEVERANCE_INTEREST,
        name="Intereses de Cesantías",
        description="Intereses sobre cesantías",
        base=BenefitBase.BENEFIT,
        factor=Decimal("0.12"),
        divisor=12,
        zero_when_integral=True,
    ),
    BenefitRule(
        kind=BenefitKind.VACATION,
        name="Vacaciones",
        description="Vacaciones",
        base=BenefitBase.TAXABLE,
        factor=Decimal("1"),
        divisor=24,
        zero_when_integral=False,
    ),
)


class SocialBenefitEngine:
    """Evaluates the benefit rule table against remuneration totals."""

    INTEGRAL_BENEFIT_FACTOR = Decimal("0.7")

    def __init__(self, rules: tuple[BenefitRule, ...] = BENEFIT_RULES):
        self.rules = rules

    def calculate(
        self,
        totals: RemunerationTotals,
        transport_subsidy: Decimal,
    ) -> list[ProvisionLine]:
        """Build one line per rule, in table order."""
        lines: list[ProvisionLine] = []
        for rule in self.rules:
            if rule.zero_when_integral and totals.integral:
                amount = Decimal("0")
            else:
                base = self.base_for(rule, totals, transport_subsidy)
                amount = base * rule.factor / rule.divisor
            lines.append(
                ProvisionLineBuilder.create_benefit_line(
                    kind=rule.kind,
                    name=rule.name,
                    description=rule.description,
                    amount=amount,
                )
            )
        return lines

    def base_for(
        self,
        rule: BenefitRule,
        totals: RemunerationTotals,
        transport_subsidy: Decimal,
    ) -> Decimal:
        if rule.base == BenefitBase.TAXABLE:
            return totals.taxable_total
        return self.benefit_base(totals, transport_subsidy)

    def benefit_base(
        self, totals: RemunerationTotals, transport_subsidy: Decimal
    ) -> Decimal:
        if totals.integral:
            return totals.taxable_total * self.INTEGRAL_BENEFIT_FACTOR
        return totals.taxable_total + transport_subsidy
