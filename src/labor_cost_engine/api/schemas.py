"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from labor_cost_engine.calculators.types import RiskClass, SalaryKind


# ============================================================================
# Liquidation schemas
# ============================================================================


class LiquidationRequest(BaseModel):
    """Schema for liquidating one worker's monthly cost."""

    base_wage: Decimal = Field(gt=0)
    salary_kind: SalaryKind = SalaryKind.ORDINARY
    on_date: date
    lives_near_workplace: bool = False
    risk_class: RiskClass = RiskClass.I
    taxable_pay: Decimal = Field(default=Decimal("0"), ge=0)
    non_taxable_pay: Decimal = Field(default=Decimal("0"), ge=0)
    # codes are normalised by the engine
    overtime: dict[str, int] = Field(default_factory=dict)


class ProvisionLineResponse(BaseModel):
    """Schema for a contribution or benefit line."""

    model_config = ConfigDict(from_attributes=True)

    kind: str
    name: str
    description: str
    amount: Decimal


class ExpensesResponse(BaseModel):
    """Schema for direct payroll expenses."""

    model_config = ConfigDict(from_attributes=True)

    base_wage: Decimal
    transport_subsidy: Decimal
    taxable_pay: Decimal
    non_taxable_pay: Decimal
    overtime: Decimal


class LiquidationResponse(BaseModel):
    """Schema for a liquidation snapshot."""

    calculation_id: UUID
    on_date: date
    salary_kind: SalaryKind
    risk_class: RiskClass
    transport_subsidy_applies: bool
    expenses: ExpensesResponse
    total_expenses: Decimal
    benefits: list[ProvisionLineResponse]
    contributions: list[ProvisionLineResponse]
    total_provision: Decimal
    total_cost: Decimal


# ============================================================================
# Parameter schemas
# ============================================================================


class ParametersResponse(BaseModel):
    """Schema for the legal parameters of a year."""

    model_config = ConfigDict(from_attributes=True)

    year: int
    minimum_wage: Decimal
    transport_subsidy: Decimal
    monthly_working_hours: int
    integral_salary_minimum: Decimal
    ordinary_hourly_rate: Decimal


# ============================================================================
# Overtime schemas
# ============================================================================


class OvertimeCategoryResponse(BaseModel):
    """Schema for an overtime category."""

    code: str
    description: str
    multiplier: Decimal


class OvertimeQuoteRequest(BaseModel):
    """Schema for pricing overtime hours.

    Either hourly_rate, or monthly_wage together with on_date.
    """

    hours: dict[str, int]
    hourly_rate: Decimal | None = Field(default=None, gt=0)
    monthly_wage: Decimal | None = Field(default=None, gt=0)
    on_date: date | None = None


class OvertimeQuoteItemResponse(BaseModel):
    """Schema for one quoted overtime category."""

    code: str
    description: str
    multiplier: Decimal
    hours: int
    amount: Decimal


class OvertimeQuoteResponse(BaseModel):
    """Schema for an overtime quote."""

    hourly_rate: Decimal
    items: list[OvertimeQuoteItemResponse]
    total: Decimal


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
    context: dict[str, Any] | None = None
