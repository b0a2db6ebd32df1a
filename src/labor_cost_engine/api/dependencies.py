"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.config import Settings
from labor_cost_engine.services.liquidation_service import LiquidationService


def get_annual_parameters(request: Request) -> AnnualParameters:
    """Get the parameter table built by the app factory."""
    return request.app.state.parameters


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_liquidation_service(
    parameters: Annotated[AnnualParameters, Depends(get_annual_parameters)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LiquidationService:
    """Build a liquidation service for the current request."""
    return LiquidationService(parameters, engine_version=settings.engine_version)


# Type aliases for cleaner dependency injection
Parameters = Annotated[AnnualParameters, Depends(get_annual_parameters)]
Service = Annotated[LiquidationService, Depends(get_liquidation_service)]
