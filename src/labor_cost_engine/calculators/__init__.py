"""Statutory labor cost calculation engine."""

from labor_cost_engine.calculators.benefits import SocialBenefitEngine
from labor_cost_engine.calculators.contributions import SocialContributionEngine
from labor_cost_engine.calculators.engine import PayrollLiquidation
from labor_cost_engine.calculators.line_builder import ProvisionLineBuilder
from labor_cost_engine.calculators.overtime import OvertimeLedger
from labor_cost_engine.calculators.parameters import (
    AnnualParameters,
    ParameterNotFoundError,
)
from labor_cost_engine.calculators.remuneration import RemunerationAggregate
from labor_cost_engine.calculators.transport import TransportSubsidy
from labor_cost_engine.calculators.types import (
    InputDomainError,
    LiquidationError,
    LiquidationSnapshot,
)
from labor_cost_engine.calculators.wage import FloorViolationError, WageProfile

__all__ = [
    "AnnualParameters",
    "FloorViolationError",
    "InputDomainError",
    "LiquidationError",
    "LiquidationSnapshot",
    "OvertimeLedger",
    "ParameterNotFoundError",
    "PayrollLiquidation",
    "ProvisionLineBuilder",
    "RemunerationAggregate",
    "SocialBenefitEngine",
    "SocialContributionEngine",
    "TransportSubsidy",
    "WageProfile",
]
