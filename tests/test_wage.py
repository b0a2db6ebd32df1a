"""Tests for wage floor validation."""

from datetime import date
from decimal import Decimal

import pytest

from labor_cost_engine.calculators.parameters import ParameterNotFoundError
from labor_cost_engine.calculators.types import InputDomainError, SalaryKind
from labor_cost_engine.calculators.wage import FloorViolationError, WageProfile

MARCH_2024 = date(2024, 3, 1)


class TestWageProfileConstruction:
    """Test construction against legal floors."""

    def test_minimum_wage_accepted(self, parameters):
        profile = WageProfile(parameters, 1300000, SalaryKind.ORDINARY, MARCH_2024)

        assert profile.base_wage == Decimal("1300000")
        assert profile.salary_kind == SalaryKind.ORDINARY
        assert profile.effective_date == MARCH_2024
        assert profile.is_integral is False

    def test_below_minimum_rejected(self, parameters):
        with pytest.raises(FloorViolationError) as exc_info:
            WageProfile(parameters, "1299999", SalaryKind.ORDINARY, MARCH_2024)

        assert exc_info.value.floor == Decimal("1300000")
        assert exc_info.value.base_wage == Decimal("1299999")
        assert exc_info.value.salary_kind == SalaryKind.ORDINARY

    def test_integral_floor_is_thirteen_minimum_wages(self, parameters):
        profile = WageProfile(parameters, "16900000", SalaryKind.INTEGRAL, MARCH_2024)
        assert profile.is_integral is True

        with pytest.raises(FloorViolationError) as exc_info:
            WageProfile(parameters, "16899999", SalaryKind.INTEGRAL, MARCH_2024)
        assert exc_info.value.floor == Decimal("16900000")

    def test_kind_given_as_code(self, parameters):
        profile = WageProfile(parameters, "20000000", "INTEGRAL", MARCH_2024)
        assert profile.salary_kind == SalaryKind.INTEGRAL

    def test_unknown_kind_rejected(self, parameters):
        with pytest.raises(InputDomainError) as exc_info:
            WageProfile(parameters, "2000000", "HOURLY", MARCH_2024)
        assert exc_info.value.field == "salary_kind"

    def test_unknown_year_surfaces(self, parameters):
        with pytest.raises(ParameterNotFoundError):
            WageProfile(parameters, "2000000", SalaryKind.ORDINARY, date(2019, 1, 1))

    def test_non_numeric_wage_rejected(self, parameters):
        with pytest.raises(InputDomainError):
            WageProfile(parameters, "lots", SalaryKind.ORDINARY, MARCH_2024)


class TestWageProfileMutation:
    """Test that rejected mutations keep the previous state."""

    def test_change_wage(self, parameters):
        profile = WageProfile(parameters, "1300000", SalaryKind.ORDINARY, MARCH_2024)
        profile.change_wage("2500000")
        assert profile.base_wage == Decimal("2500000")

    def test_change_wage_below_floor_keeps_state(self, parameters):
        profile = WageProfile(parameters, "1500000", SalaryKind.ORDINARY, MARCH_2024)

        with pytest.raises(FloorViolationError):
            profile.change_wage("1000000")

        assert profile.base_wage == Decimal("1500000")

    def test_change_to_integral_below_floor_keeps_state(self, parameters):
        profile = WageProfile(parameters, "5000000", SalaryKind.ORDINARY, MARCH_2024)

        with pytest.raises(FloorViolationError):
            profile.change_salary_kind(SalaryKind.INTEGRAL)

        assert profile.salary_kind == SalaryKind.ORDINARY
        assert profile.base_wage == Decimal("5000000")

    def test_change_to_integral(self, parameters):
        profile = WageProfile(parameters, "20000000", SalaryKind.ORDINARY, MARCH_2024)
        profile.change_salary_kind(SalaryKind.INTEGRAL)

        assert profile.is_integral is True
        assert profile.floor() == Decimal("16900000")
        assert profile.floor(SalaryKind.ORDINARY) == Decimal("1300000")
