"""Yearly legal parameters resolved by calendar date."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from labor_cost_engine.calculators.types import LiquidationError


class ParameterNotFoundError(LiquidationError):
    """Raised when no legislated value exists for a year."""

    def __init__(self, parameter: str, year: int):
        self.parameter = parameter
        self.year = year
        super().__init__(f"Parameter '{parameter}' not found for year {year}")


MINIMUM_WAGES: dict[int, Decimal] = {
    2022: Decimal("1000000"),
    2023: Decimal("1160000"),
    2024: Decimal("1300000"),
    2025: Decimal("1423500"),
    2026: Decimal("1423500"),
}

TRANSPORT_SUBSIDIES: dict[int, Decimal] = {
    2022: Decimal("117172"),
    2023: Decimal("140606"),
    2024: Decimal("162000"),
    2025: Decimal("200000"),
    2026: Decimal("200000"),
}

# Law 2101 of 2021: progressive reduction of the working week.
# (first day the hours apply, monthly hours), ascending.
WORKING_HOUR_STEPS: tuple[tuple[date, int], ...] = (
    (date.min, 240),
    (date(2023, 7, 15), 235),
    (date(2024, 7, 15), 230),
    (date(2025, 7, 15), 220),
    (date(2026, 7, 15), 210),
)

INTEGRAL_SALARY_MULTIPLE = 13


class AnnualParameters:
    """Read-only table of legislated yearly values.

    Build one instance at startup and pass it by reference to every
    component that needs it. Lookups for a year missing from the table
    raise ParameterNotFoundError; nothing is extrapolated.
    """

    def __init__(
        self,
        minimum_wages: Mapping[int, Decimal] | None = None,
        transport_subsidies: Mapping[int, Decimal] | None = None,
        working_hour_steps: tuple[tuple[date, int], ...] | None = None,
    ):
        self._minimum_wages = MappingProxyType(
            dict(minimum_wages if minimum_wages is not None else MINIMUM_WAGES)
        )
        self._transport_subsidies = MappingProxyType(
            dict(transport_subsidies if transport_subsidies is not None else TRANSPORT_SUBSIDIES)
        )
        self._working_hour_steps = tuple(
            sorted(working_hour_steps or WORKING_HOUR_STEPS, key=lambda step: step[0])
        )

    @property
    def years(self) -> list[int]:
        """Years with a legislated minimum wage."""
        return sorted(self._minimum_wages)

    def minimum_wage(self, on_date: date) -> Decimal:
        """Legal minimum monthly wage (SMLV) in force on a date."""
        return self._lookup(self._minimum_wages, "minimum_wage", on_date.year)

    def transport_subsidy(self, on_date: date) -> Decimal:
        """Monthly transport subsidy in force on a date."""
        return self._lookup(self._transport_subsidies, "transport_subsidy", on_date.year)

    def monthly_working_hours(self, on_date: date) -> int:
        """Monthly working hours in force on a date.

        The year must be in the table even though the hours themselves
        follow fixed calendar boundaries.
        """
        if on_date.year not in self._minimum_wages:
            raise ParameterNotFoundError("monthly_working_hours", on_date.year)

        hours = self._working_hour_steps[0][1]
        for starts_on, step_hours in self._working_hour_steps:
            if on_date < starts_on:
                break
            hours = step_hours
        return hours

    def integral_salary_minimum(self, on_date: date) -> Decimal:
        """Lowest wage accepted as an integral salary."""
        return self.minimum_wage(on_date) * INTEGRAL_SALARY_MULTIPLE

    def ordinary_hourly_rate(self, on_date: date) -> Decimal:
        """Value of one ordinary hour at the minimum wage."""
        return self.minimum_wage(on_date) / self.monthly_working_hours(on_date)

    @staticmethod
    def _lookup(table: Mapping[int, Decimal], parameter: str, year: int) -> Decimal:
        try:
            return table[year]
        except KeyError:
            raise ParameterNotFoundError(parameter, year)
