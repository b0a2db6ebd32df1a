"""Remuneration components and derived totals."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from labor_cost_engine.calculators.types import (
    InputDomainError,
    RemunerationTotals,
    to_decimal,
)


class RemunerationAggregate:
    """Monthly remuneration: wage, extra taxable pay, overtime, non-taxable pay.

    Totals are computed on read:
    - taxable_total = base_wage + extra_taxable_pay + overtime_total
    - accrued_total = taxable_total + non_taxable_pay
    - contribution_base_total = taxable_total * contribution_factor
    - transport_subsidy_base = base_wage + extra_taxable_pay

    The 70% integral factor applies to the contribution base only.
    Benefit bases are derived separately by the benefit engine.
    """

    ORDINARY_CONTRIBUTION_FACTOR = Decimal("1.0")
    INTEGRAL_CONTRIBUTION_FACTOR = Decimal("0.7")

    def __init__(
        self,
        base_wage: Any,
        integral: bool = False,
        extra_taxable_pay: Any = 0,
        overtime_total: Any = 0,
        non_taxable_pay: Any = 0,
    ):
        self._base_wage = _non_negative(base_wage, "base_wage")
        self._integral = integral
        self._extra_taxable_pay = _non_negative(extra_taxable_pay, "taxable_pay")
        self._overtime_total = _non_negative(overtime_total, "overtime_total")
        self._non_taxable_pay = _non_negative(non_taxable_pay, "non_taxable_pay")

    @property
    def base_wage(self) -> Decimal:
        return self._base_wage

    @property
    def integral(self) -> bool:
        return self._integral

    @property
    def extra_taxable_pay(self) -> Decimal:
        return self._extra_taxable_pay

    @property
    def overtime_total(self) -> Decimal:
        return self._overtime_total

    @property
    def non_taxable_pay(self) -> Decimal:
        return self._non_taxable_pay

    @property
    def contribution_factor(self) -> Decimal:
        if self._integral:
            return self.INTEGRAL_CONTRIBUTION_FACTOR
        return self.ORDINARY_CONTRIBUTION_FACTOR

    @property
    def taxable_total(self) -> Decimal:
        return self._base_wage + self._extra_taxable_pay + self._overtime_total

    @property
    def accrued_total(self) -> Decimal:
        return self.taxable_total + self._non_taxable_pay

    @property
    def contribution_base_total(self) -> Decimal:
        return self.taxable_total * self.contribution_factor

    @property
    def transport_subsidy_base(self) -> Decimal:
        return self._base_wage + self._extra_taxable_pay

    def totals(self) -> RemunerationTotals:
        """Snapshot of the totals consumed by the rule engines."""
        return RemunerationTotals(
            taxable_total=self.taxable_total,
            accrued_total=self.accrued_total,
            contribution_base_total=self.contribution_base_total,
            integral=self._integral,
        )

    def change_wage(self, base_wage: Any, integral: bool) -> None:
        self._base_wage = _non_negative(base_wage, "base_wage")
        self._integral = integral

    def change_taxable_pay(self, amount: Any) -> None:
        self._extra_taxable_pay = _non_negative(amount, "taxable_pay")

    def change_non_taxable_pay(self, amount: Any) -> None:
        self._non_taxable_pay = _non_negative(amount, "non_taxable_pay")

    def change_overtime_total(self, amount: Any) -> None:
        self._overtime_total = _non_negative(amount, "overtime_total")


def _non_negative(value: Any, field: str) -> Decimal:
    amount = to_decimal(value, field)
    if amount < 0:
        raise InputDomainError(field, "cannot be negative")
    return amount
