"""API routes."""

from labor_cost_engine.api.routes.health import router as health_router
from labor_cost_engine.api.routes.liquidations import router as liquidations_router
from labor_cost_engine.api.routes.parameters import router as parameters_router

__all__ = ["health_router", "liquidations_router", "parameters_router"]
