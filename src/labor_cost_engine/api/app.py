"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from labor_cost_engine import __version__
from labor_cost_engine.api.routes import (
    health_router,
    liquidations_router,
    parameters_router,
)
from labor_cost_engine.calculators.parameters import (
    AnnualParameters,
    ParameterNotFoundError,
)
from labor_cost_engine.calculators.types import InputDomainError
from labor_cost_engine.calculators.wage import FloorViolationError
from labor_cost_engine.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code},
    )


def create_app(
    settings: Settings | None = None,
    parameters: AnnualParameters | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Labor Cost Engine API",
        description="Colombian payroll liquidation and employer provisions",
        version=__version__,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.parameters = parameters or AnnualParameters()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ParameterNotFoundError)
    async def parameter_not_found_handler(
        request: Request, exc: ParameterNotFoundError
    ) -> JSONResponse:
        logger.warning("Parameter lookup failed on %s: %s", request.url.path, exc)
        return _error_response(
            status.HTTP_404_NOT_FOUND, str(exc), "PARAMETER_NOT_FOUND"
        )

    @app.exception_handler(FloorViolationError)
    async def floor_violation_handler(
        request: Request, exc: FloorViolationError
    ) -> JSONResponse:
        logger.warning("Wage floor violated on %s: %s", request.url.path, exc)
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc), "FLOOR_VIOLATION"
        )

    @app.exception_handler(InputDomainError)
    async def input_domain_handler(
        request: Request, exc: InputDomainError
    ) -> JSONResponse:
        logger.warning("Rejected input on %s: %s", request.url.path, exc)
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc), "INPUT_DOMAIN_ERROR"
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            "Unexpected error on %s", request.url.path, exc_info=exc
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            "INTERNAL_ERROR",
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(liquidations_router, prefix="/api/v1")
    app.include_router(parameters_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
