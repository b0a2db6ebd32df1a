"""Overtime and surcharge ledger."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.types import (
    OVERTIME_MULTIPLIERS,
    InputDomainError,
    OvertimeCategory,
    to_decimal,
)


def resolve_category(category: Any) -> OvertimeCategory:
    """Resolve an enum member or its code to an OvertimeCategory."""
    if isinstance(category, str):
        category = category.strip().upper()
    try:
        resolved = OvertimeCategory(category)
    except ValueError:
        raise InputDomainError("category", f"undefined overtime category {category!r}")
    if resolved not in OVERTIME_MULTIPLIERS:
        raise InputDomainError("category", f"no multiplier defined for {resolved.value}")
    return resolved


class OvertimeLedger:
    """Whole-hour quantities per overtime category.

    amount(c) = round(quantity * multiplier * hourly_rate) to whole pesos.
    Registering a category again replaces its quantity.
    """

    def __init__(
        self,
        hourly_rate: Any,
        quantities: dict[OvertimeCategory, int] | None = None,
    ):
        self._hourly_rate = self._validate_rate(hourly_rate)
        self._quantities: dict[OvertimeCategory, int] = {}
        for category, hours in (quantities or {}).items():
            self.register_quantity(category, hours)

    @property
    def hourly_rate(self) -> Decimal:
        return self._hourly_rate

    @property
    def total(self) -> Decimal:
        total = Decimal("0")
        for category in self._quantities:
            total += self.category_amount(category)
        return total

    def change_hourly_rate(self, rate: Any) -> None:
        self._hourly_rate = self._validate_rate(rate)

    def register_quantity(self, category: Any, hours: Any) -> None:
        resolved = resolve_category(category)
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise InputDomainError("hours", f"expected whole hours, got {hours!r}")
        if hours < 0:
            raise InputDomainError("hours", "cannot be negative")
        self._quantities[resolved] = hours

    def quantity(self, category: Any) -> int:
        return self._quantities.get(resolve_category(category), 0)

    def category_amount(self, category: Any) -> Decimal:
        resolved = resolve_category(category)
        quantity = self._quantities.get(resolved, 0)
        multiplier = OVERTIME_MULTIPLIERS[resolved]
        return ProvisionLineBuilder.round_to_pesos(quantity * multiplier * self._hourly_rate)

    def items(self) -> list[tuple[OvertimeCategory, int, Decimal]]:
        """Registered categories with quantity and amount, in enum order."""
        return [
            (category, self._quantities[category], self.category_amount(category))
            for category in OvertimeCategory
            if category in self._quantities
        ]

    @staticmethod
    def _validate_rate(rate: Any) -> Decimal:
        value = to_decimal(rate, "hourly_rate")
        if value <= 0:
            raise InputDomainError("hourly_rate", "must be greater than zero")
        return value
