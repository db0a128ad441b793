"""Stock-share leg routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..dependencies import get_position_service, leg_owner_filter
from ..schemas.positions import (
    MessageResponse,
    StockSharePositionCreate,
    StockSharePositionRead,
    StockSharePositionUpdate,
)
from ..services.positions import PositionService

router = APIRouter()


@router.get("", response_model=List[StockSharePositionRead])
async def list_stocks(
    base_position_id: Optional[int] = Depends(leg_owner_filter),
    service: PositionService = Depends(get_position_service),
) -> List[StockSharePositionRead]:
    """List stock legs, newest first."""
    stocks = await service.list_stocks(base_position_id)
    return [StockSharePositionRead.model_validate(stock) for stock in stocks]


@router.get("/{stock_id}", response_model=StockSharePositionRead)
async def get_stock(
    stock_id: int,
    service: PositionService = Depends(get_position_service),
) -> StockSharePositionRead:
    return StockSharePositionRead.model_validate(await service.get_stock(stock_id))


@router.post("", response_model=StockSharePositionRead, status_code=status.HTTP_201_CREATED)
async def create_stock(
    request: StockSharePositionCreate,
    service: PositionService = Depends(get_position_service),
) -> StockSharePositionRead:
    stock = await service.create_stock(request)
    return StockSharePositionRead.model_validate(stock)


@router.put("/{stock_id}", response_model=StockSharePositionRead)
async def update_stock(
    stock_id: int,
    request: StockSharePositionUpdate,
    service: PositionService = Depends(get_position_service),
) -> StockSharePositionRead:
    stock = await service.update_stock(stock_id, request)
    return StockSharePositionRead.model_validate(stock)


@router.delete("/{stock_id}", response_model=MessageResponse)
async def delete_stock(
    stock_id: int,
    service: PositionService = Depends(get_position_service),
) -> MessageResponse:
    await service.delete_stock(stock_id)
    return MessageResponse(message="Stock position deleted successfully")
