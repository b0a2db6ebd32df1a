"""Employer social-security and parafiscal contributions."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.types import (
    RISK_RATES,
    ContributionKind,
    ProvisionLine,
    RemunerationTotals,
    RiskClass,
)


class ContributionBase(str, Enum):
    """How a contribution line derives its base."""

    # Law 1393 adjustment plus 25 SMLV cap
    SOCIAL_SECURITY = "SOCIAL_SECURITY"
    # max(contribution base, SMLV), no adjustment, no cap
    PARAFISCAL = "PARAFISCAL"


@dataclass(frozen=True)
class ContributionRule:
    """One row of the contribution rule table."""

    kind: ContributionKind
    name: str
    description: str
    base: ContributionBase
    rate: Decimal | None  # None = rate comes from the risk class
    exonerable: bool


CONTRIBUTION_RULES: tuple[ContributionRule, ...] = (
    ContributionRule(
        kind=ContributionKind.HEALTH,
        name="Salud",
        description="Aporte a salud por el empleador",
        base=ContributionBase.SOCIAL_SECURITY,
        rate=Decimal("0.085"),
        exonerable=True,
    ),
    ContributionRule(
        kind=ContributionKind.PENSION,
        name="Pensión",
        description="Aporte a pensión por el empleador",
        base=ContributionBase.SOCIAL_SECURITY,
        rate=Decimal("0.12"),
        exonerable=False,
    ),
    ContributionRule(
        kind=ContributionKind.OCCUPATIONAL_RISK,
        name="ARL",
        description="Administradora de Riesgos Laborales",
        base=ContributionBase.SOCIAL_SECURITY,
        rate=None,
        exonerable=False,
    ),
    ContributionRule(
        kind=ContributionKind.FAMILY_COMPENSATION,
        name="Caja de Compensación",
        description="Aporte a caja de compensación familiar",
        base=ContributionBase.PARAFISCAL,
        rate=Decimal("0.04"),
        exonerable=False,
    ),
    ContributionRule(
        kind=ContributionKind.CHILD_WELFARE,
        name="ICBF",
        description="Instituto Colombiano de Bienestar Familiar",
        base=ContributionBase.PARAFISCAL,
        rate=Decimal("0.03"),
        exonerable=True,
    ),
    ContributionRule(
        kind=ContributionKind.TRAINING,
        name="SENA",
        description="Servicio Nacional de Aprendizaje",
        base=ContributionBase.PARAFISCAL,
        rate=Decimal("0.02"),
        exonerable=True,
    ),
)


class SocialContributionEngine:
    """Evaluates the contribution rule table against remuneration totals.

    Social-security lines (health, pension, ARL):
        threshold = accrued * 0.6
        adjustment = max(0, threshold - taxable)
        base = min(adjustment + contribution_base, 25 * SMLV)

    Parafiscal lines (CCF, ICBF, SENA):
        base = max(contribution_base, SMLV)

    Exonerable lines take a zero rate while accrued < 10 * SMLV.
    Inputs are assumed non-negative.
    """

    LAW_1393_ACCRUED_SHARE = Decimal("0.6")
    BASE_CAP_MINIMUM_WAGES = 25
    EXONERATION_MINIMUM_WAGES = 10

    def __init__(self, rules: tuple[ContributionRule, ...] = CONTRIBUTION_RULES):
        self.rules = rules

    def calculate(
        self,
        totals: RemunerationTotals,
        minimum_wage: Decimal,
        risk_class: RiskClass,
    ) -> list[ProvisionLine]:
        """Build one line per rule, in table order."""
        lines: list[ProvisionLine] = []
        for rule in self.rules:
            base = self.base_for(rule, totals, minimum_wage)
            rate = self.rate_for(rule, totals, minimum_wage, risk_class)
            lines.append(
                ProvisionLineBuilder.create_contribution_line(
                    kind=rule.kind,
                    name=rule.name,
                    description=rule.description,
                    amount=base * rate,
                )
            )
        return lines

    def base_for(
        self,
        rule: ContributionRule,
        totals: RemunerationTotals,
        minimum_wage: Decimal,
    ) -> Decimal:
        if rule.base == ContributionBase.SOCIAL_SECURITY:
            return self.social_security_base(totals, minimum_wage)
        return self.parafiscal_base(totals, minimum_wage)

    def rate_for(
        self,
        rule: ContributionRule,
        totals: RemunerationTotals,
        minimum_wage: Decimal,
        risk_class: RiskClass,
    ) -> Decimal:
        if rule.exonerable and self.is_exonerated(totals, minimum_wage):
            return Decimal("0")
        if rule.rate is None:
            return RISK_RATES[RiskClass(risk_class)]
        return rule.rate

    def social_security_base(
        self, totals: RemunerationTotals, minimum_wage: Decimal
    ) -> Decimal:
        threshold = totals.accrued_total * self.LAW_1393_ACCRUED_SHARE
        adjustment = max(Decimal("0"), threshold - totals.taxable_total)
        raw_base = adjustment + totals.contribution_base_total
        return min(raw_base, minimum_wage * self.BASE_CAP_MINIMUM_WAGES)

    def parafiscal_base(
        self, totals: RemunerationTotals, minimum_wage: Decimal
    ) -> Decimal:
        return max(totals.contribution_base_total, minimum_wage)

    def is_exonerated(self, totals: RemunerationTotals, minimum_wage: Decimal) -> bool:
        return totals.accrued_total < minimum_wage * self.EXONERATION_MINIMUM_WAGES
