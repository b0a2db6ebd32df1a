"""Liquidation API endpoints."""

from fastapi import APIRouter, status

from labor_cost_engine.api.dependencies import Service
from labor_cost_engine.api.schemas import (
    ErrorResponse,
    ExpensesResponse,
    LiquidationRequest,
    LiquidationResponse,
    ProvisionLineResponse,
)
from labor_cost_engine.services.liquidation_service import LiquidationInput

router = APIRouter(prefix="/liquidations", tags=["liquidations"])


@router.post(
    "",
    response_model=LiquidationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def create_liquidation(
    service: Service,
    payload: LiquidationRequest,
) -> LiquidationResponse:
    """Liquidate the monthly employer cost of one worker. Deterministic."""
    liquidation = service.build(
        LiquidationInput(
            base_wage=payload.base_wage,
            on_date=payload.on_date,
            salary_kind=payload.salary_kind,
            lives_near_workplace=payload.lives_near_workplace,
            risk_class=payload.risk_class,
            taxable_pay=payload.taxable_pay,
            non_taxable_pay=payload.non_taxable_pay,
            overtime=dict(payload.overtime),
        )
    )
    snapshot = liquidation.liquidate()

    return LiquidationResponse(
        calculation_id=snapshot.calculation_id,
        on_date=liquidation.on_date,
        salary_kind=liquidation.salary_kind,
        risk_class=liquidation.risk_class,
        transport_subsidy_applies=liquidation.transport_subsidy_applies,
        expenses=ExpensesResponse.model_validate(snapshot.expenses),
        total_expenses=snapshot.total_expenses,
        benefits=[
            ProvisionLineResponse(
                kind=line.kind.value,
                name=line.name,
                description=line.description,
                amount=line.amount,
            )
            for line in snapshot.benefit_lines
        ],
        contributions=[
            ProvisionLineResponse(
                kind=line.kind.value,
                name=line.name,
                description=line.description,
                amount=line.amount,
            )
            for line in snapshot.contribution_lines
        ],
        total_provision=snapshot.total_provision,
        total_cost=snapshot.total_cost,
    )
