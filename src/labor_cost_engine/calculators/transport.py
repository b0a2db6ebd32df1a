"""Transport subsidy eligibility."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.calculators.types import InputDomainError, to_decimal

ELIGIBILITY_MINIMUM_WAGES = 2


class TransportSubsidy:
    """Transport subsidy owed for a wage base.

    Eligible while the wage base is below two minimum wages; nothing is
    paid to a worker living near the workplace.
    """

    def __init__(
        self,
        parameters: AnnualParameters,
        wage_base: Any,
        on_date: date,
        lives_near_workplace: bool = False,
    ):
        self.parameters = parameters
        self._wage_base = self._validate_base(wage_base)
        self._on_date = on_date
        self._lives_near_workplace = lives_near_workplace

    @property
    def wage_base(self) -> Decimal:
        return self._wage_base

    @property
    def lives_near_workplace(self) -> bool:
        return self._lives_near_workplace

    @property
    def ceiling(self) -> Decimal:
        return self.parameters.minimum_wage(self._on_date) * ELIGIBILITY_MINIMUM_WAGES

    @property
    def eligible(self) -> bool:
        return self._wage_base < self.ceiling

    @property
    def amount(self) -> Decimal:
        if not self.eligible or self._lives_near_workplace:
            return Decimal("0")
        return self.parameters.transport_subsidy(self._on_date)

    def change_wage_base(self, wage_base: Any) -> None:
        self._wage_base = self._validate_base(wage_base)

    def change_lives_near_workplace(self, lives_near: bool) -> None:
        self._lives_near_workplace = bool(lives_near)

    @staticmethod
    def _validate_base(wage_base: Any) -> Decimal:
        value = to_decimal(wage_base, "wage_base")
        if value < 0:
            raise InputDomainError("wage_base", "cannot be negative")
        return value
