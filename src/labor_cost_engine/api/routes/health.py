"""Health check endpoints."""

from datetime import date, datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from labor_cost_engine.api.dependencies import Parameters

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    parameter_years: list[int]


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    status: str
    year: int


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(parameters: Parameters) -> HealthResponse:
    """Check API health and report the configured parameter years."""
    years = parameters.years
    return HealthResponse(
        status="healthy" if years else "degraded",
        timestamp=datetime.now(timezone.utc),
        parameter_years=years,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(parameters: Parameters) -> ReadinessResponse | JSONResponse:
    """Ready only while the current year has legislated parameters."""
    year = date.today().year
    if year in parameters.years:
        return ReadinessResponse(status="ready", year=year)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "missing_parameters", "year": year},
    )
