"""Base wage validation against legal floors."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.calculators.types import (
    InputDomainError,
    LiquidationError,
    SalaryKind,
    to_decimal,
)


class FloorViolationError(LiquidationError):
    """Raised when a wage is below the legal floor for its salary kind."""

    def __init__(self, base_wage: Decimal, salary_kind: SalaryKind, floor: Decimal):
        self.base_wage = base_wage
        self.salary_kind = salary_kind
        self.floor = floor
        super().__init__(
            f"{salary_kind.value.lower()} wage {base_wage} is below the legal floor {floor}"
        )


class WageProfile:
    """Base wage, salary kind and effective date.

    Invariant: an ordinary wage is at least the minimum wage and an
    integral wage at least 13 minimum wages for the effective date.
    Rejected mutations leave the previous state in place.
    """

    def __init__(
        self,
        parameters: AnnualParameters,
        base_wage: Any,
        salary_kind: SalaryKind,
        effective_date: date,
    ):
        self.parameters = parameters
        wage = to_decimal(base_wage, "base_wage")
        kind = _coerce_kind(salary_kind)
        self._validate(wage, kind, effective_date)

        self._base_wage = wage
        self._salary_kind = kind
        self._effective_date = effective_date

    @property
    def base_wage(self) -> Decimal:
        return self._base_wage

    @property
    def salary_kind(self) -> SalaryKind:
        return self._salary_kind

    @property
    def effective_date(self) -> date:
        return self._effective_date

    @property
    def is_integral(self) -> bool:
        return self._salary_kind == SalaryKind.INTEGRAL

    def change_wage(self, base_wage: Any) -> None:
        wage = to_decimal(base_wage, "base_wage")
        self._validate(wage, self._salary_kind, self._effective_date)
        self._base_wage = wage

    def change_salary_kind(self, salary_kind: SalaryKind) -> None:
        kind = _coerce_kind(salary_kind)
        self._validate(self._base_wage, kind, self._effective_date)
        self._salary_kind = kind

    def floor(self, salary_kind: SalaryKind | None = None) -> Decimal:
        """Legal floor for a salary kind (the current one by default)."""
        return self._floor_for(salary_kind or self._salary_kind, self._effective_date)

    def _floor_for(self, salary_kind: SalaryKind, on_date: date) -> Decimal:
        if salary_kind == SalaryKind.INTEGRAL:
            return self.parameters.integral_salary_minimum(on_date)
        return self.parameters.minimum_wage(on_date)

    def _validate(self, base_wage: Decimal, salary_kind: SalaryKind, on_date: date) -> None:
        floor = self._floor_for(salary_kind, on_date)
        if base_wage < floor:
            raise FloorViolationError(base_wage, salary_kind, floor)


def _coerce_kind(salary_kind: Any) -> SalaryKind:
    try:
        return SalaryKind(salary_kind)
    except ValueError:
        raise InputDomainError("salary_kind", f"unknown salary kind {salary_kind!r}")
