"""Base position routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_position_service
from ..schemas.positions import (
    BasePositionCreate,
    BasePositionDetail,
    BasePositionRead,
    BasePositionSummary,
    BasePositionUpdate,
    MessageResponse,
    OptionPositionRead,
    StockSharePositionRead,
)
from ..services.positions import PositionService

router = APIRouter()


@router.get("", response_model=List[BasePositionSummary])
async def list_base_positions(
    service: PositionService = Depends(get_position_service),
) -> List[BasePositionSummary]:
    """List every base position with its leg counts, newest first."""
    rows = await service.list_base_positions()
    return [
        BasePositionSummary.from_row(position, option_count, stock_count)
        for position, option_count, stock_count in rows
    ]


@router.get("/{position_id}", response_model=BasePositionDetail)
async def get_base_position(
    position_id: int,
    service: PositionService = Depends(get_position_service),
) -> BasePositionDetail:
    """Get a base position with its option and stock legs."""
    position, options, stocks = await service.get_base_position_detail(position_id)
    return BasePositionDetail.model_validate(
        {
            **position.model_dump(),
            "options": [OptionPositionRead.model_validate(option) for option in options],
            "stocks": [StockSharePositionRead.model_validate(stock) for stock in stocks],
        }
    )


@router.post("", response_model=BasePositionRead, status_code=status.HTTP_201_CREATED)
async def create_base_position(
    request: BasePositionCreate,
    service: PositionService = Depends(get_position_service),
) -> BasePositionRead:
    position = await service.create_base_position(request)
    return BasePositionRead.model_validate(position)


@router.put("/{position_id}", response_model=BasePositionRead)
async def update_base_position(
    position_id: int,
    request: BasePositionUpdate,
    service: PositionService = Depends(get_position_service),
) -> BasePositionRead:
    """Replace a base position's fields; every field must be supplied."""
    position = await service.update_base_position(position_id, request)
    return BasePositionRead.model_validate(position)


@router.delete("/{position_id}", response_model=MessageResponse)
async def delete_base_position(
    position_id: int,
    service: PositionService = Depends(get_position_service),
) -> MessageResponse:
    """Delete a base position together with all of its legs."""
    await service.delete_base_position(position_id)
    return MessageResponse(message="Position deleted successfully")
