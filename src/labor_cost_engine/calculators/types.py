"""Type definitions for the liquidation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


class LiquidationError(Exception):
    """Base class for every failure raised by the calculation engine."""


class InputDomainError(LiquidationError):
    """Raised when an input falls outside its valid domain."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class LiquidationStatus(str, Enum):
    """Liquidation session status."""

    CONFIGURED = "configured"
    LIQUIDATED = "liquidated"


class SalaryKind(str, Enum):
    """Salary arrangement."""

    ORDINARY = "ORDINARY"
    INTEGRAL = "INTEGRAL"


class RiskClass(str, Enum):
    """Occupational-risk classification (ARL)."""

    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


RISK_RATES: dict[RiskClass, Decimal] = {
    RiskClass.I: Decimal("0.00522"),
    RiskClass.II: Decimal("0.01044"),
    RiskClass.III: Decimal("0.02436"),
    RiskClass.IV: Decimal("0.04350"),
    RiskClass.V: Decimal("0.06960"),
}


class OvertimeCategory(str, Enum):
    """Extra-hour and surcharge categories."""

    HED = "HED"
    HEN = "HEN"
    HEFD = "HEFD"
    HEFN = "HEFN"
    RN = "RN"
    RDD = "RDD"
    RDN = "RDN"
    RDDHC = "RDDHC"
    RDNHC = "RDNHC"
    RDDONC = "RDDONC"
    RDNONC = "RDNONC"


OVERTIME_MULTIPLIERS: dict[OvertimeCategory, Decimal] = {
    OvertimeCategory.HED: Decimal("1.25"),
    OvertimeCategory.HEN: Decimal("1.75"),
    OvertimeCategory.HEFD: Decimal("2.05"),
    OvertimeCategory.HEFN: Decimal("2.55"),
    OvertimeCategory.RN: Decimal("0.35"),
    OvertimeCategory.RDD: Decimal("0.80"),
    OvertimeCategory.RDN: Decimal("1.15"),
    OvertimeCategory.RDDHC: Decimal("1.80"),
    OvertimeCategory.RDNHC: Decimal("2.15"),
    OvertimeCategory.RDDONC: Decimal("1.80"),
    OvertimeCategory.RDNONC: Decimal("2.15"),
}

OVERTIME_DESCRIPTIONS: dict[OvertimeCategory, str] = {
    OvertimeCategory.HED: "Hora extra diurna",
    OvertimeCategory.HEN: "Hora extra nocturna",
    OvertimeCategory.HEFD: "Hora extra festiva diurna",
    OvertimeCategory.HEFN: "Hora extra festiva nocturna",
    OvertimeCategory.RN: "Recargo nocturno",
    OvertimeCategory.RDD: "Recargo dominical diurno ocasional compensado",
    OvertimeCategory.RDN: "Recargo dominical nocturno ocasional compensado",
    OvertimeCategory.RDDHC: "Recargo dominical diurno habitual compensado",
    OvertimeCategory.RDNHC: "Recargo dominical nocturno habitual compensado",
    OvertimeCategory.RDDONC: "Recargo dominical diurno ocasional no compensado",
    OvertimeCategory.RDNONC: "Recargo dominical nocturno ocasional no compensado",
}


class ContributionKind(str, Enum):
    """Employer social-security and parafiscal contribution lines."""

    HEALTH = "HEALTH"
    PENSION = "PENSION"
    OCCUPATIONAL_RISK = "OCCUPATIONAL_RISK"
    FAMILY_COMPENSATION = "FAMILY_COMPENSATION"
    CHILD_WELFARE = "CHILD_WELFARE"
    TRAINING = "TRAINING"


class BenefitKind(str, Enum):
    """Statutory social-benefit accruals."""

    SERVICE_BONUS = "SERVICE_BONUS"
    SEVERANCE = "SEVERANCE"
    SEVERANCE_INTEREST = "SEVERANCE_INTEREST"
    VACATION = "VACATION"


def to_decimal(value: Any, field: str) -> Decimal:
    """Convert a numeric input to Decimal, rejecting non-numeric values."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InputDomainError(field, f"expected a number, got {value!r}")
    else:
        try:
            result = Decimal(str(value))
        except ArithmeticError:
            raise InputDomainError(field, f"expected a number, got {value!r}")
    if not result.is_finite():
        raise InputDomainError(field, "must be a finite number")
    return result


@dataclass(frozen=True)
class RemunerationTotals:
    """Totals shared by the contribution and benefit rule evaluators."""

    taxable_total: Decimal
    accrued_total: Decimal
    contribution_base_total: Decimal
    integral: bool = False


@dataclass(frozen=True)
class ProvisionLine:
    """A single employer provision (contribution or benefit)."""

    kind: ContributionKind | BenefitKind
    name: str
    description: str
    amount: Decimal

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "amount": str(self.amount),
        }


@dataclass(frozen=True)
class PayrollExpenses:
    """Direct payroll expenses for the month."""

    base_wage: Decimal
    transport_subsidy: Decimal
    taxable_pay: Decimal
    non_taxable_pay: Decimal
    overtime: Decimal

    @property
    def total(self) -> Decimal:
        return (
            self.base_wage
            + self.transport_subsidy
            + self.taxable_pay
            + self.non_taxable_pay
            + self.overtime
        )


@dataclass(frozen=True)
class LiquidationSnapshot:
    """Immutable result of one liquidation."""

    calculation_id: UUID
    expenses: PayrollExpenses
    total_expenses: Decimal
    benefit_lines: tuple[ProvisionLine, ...]
    contribution_lines: tuple[ProvisionLine, ...]
    total_provision: Decimal
    total_cost: Decimal

    def line(self, kind: ContributionKind | BenefitKind) -> ProvisionLine:
        """Return the line of the given kind."""
        for line in self.benefit_lines + self.contribution_lines:
            if line.kind == kind:
                return line
        raise KeyError(kind)
