"""Legal parameter and overtime catalogue endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from labor_cost_engine.api.dependencies import Service
from labor_cost_engine.api.schemas import (
    ErrorResponse,
    OvertimeCategoryResponse,
    OvertimeQuoteItemResponse,
    OvertimeQuoteRequest,
    OvertimeQuoteResponse,
    ParametersResponse,
)

router = APIRouter(tags=["parameters"])


@router.get(
    "/parameters/{year}",
    response_model=ParametersResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
async def get_parameters(
    service: Service,
    year: Annotated[int, Path(ge=1, le=9999)],
) -> ParametersResponse:
    """Get the legal parameters in force at the end of a year."""
    summary = service.describe_parameters(year)
    return ParametersResponse.model_validate(summary)


@router.get(
    "/overtime/categories",
    response_model=list[OvertimeCategoryResponse],
    status_code=status.HTTP_200_OK,
)
async def list_overtime_categories(service: Service) -> list[OvertimeCategoryResponse]:
    """List overtime categories with their multipliers."""
    return [
        OvertimeCategoryResponse(
            code=category.value,
            description=description,
            multiplier=multiplier,
        )
        for category, description, multiplier in service.overtime_catalogue()
    ]


@router.post(
    "/overtime/quote",
    response_model=OvertimeQuoteResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def quote_overtime(
    service: Service,
    payload: OvertimeQuoteRequest,
) -> OvertimeQuoteResponse:
    """Price overtime hours from an hourly rate or a monthly wage."""
    quote = service.quote_overtime(
        dict(payload.hours),
        hourly_rate=payload.hourly_rate,
        monthly_wage=payload.monthly_wage,
        on_date=payload.on_date,
    )
    return OvertimeQuoteResponse(
        hourly_rate=quote.hourly_rate,
        items=[
            OvertimeQuoteItemResponse(
                code=item.category.value,
                description=item.description,
                multiplier=item.multiplier,
                hours=item.hours,
                amount=item.amount,
            )
            for item in quote.items
        ],
        total=quote.total,
    )
