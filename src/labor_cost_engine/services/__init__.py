"""Labor cost engine services."""

from labor_cost_engine.services.liquidation_service import (
    LiquidationInput,
    LiquidationService,
)

__all__ = [
    "LiquidationInput",
    "LiquidationService",
]
