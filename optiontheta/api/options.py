"""Option leg routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..dependencies import get_position_service, leg_owner_filter
from ..schemas.positions import (
    MessageResponse,
    OptionPositionCreate,
    OptionPositionRead,
    OptionPositionUpdate,
)
from ..services.positions import PositionService

router = APIRouter()


@router.get("", response_model=List[OptionPositionRead])
async def list_options(
    base_position_id: Optional[int] = Depends(leg_owner_filter),
    service: PositionService = Depends(get_position_service),
) -> List[OptionPositionRead]:
    """List option legs, newest first."""
    options = await service.list_options(base_position_id)
    return [OptionPositionRead.model_validate(option) for option in options]


@router.get("/{option_id}", response_model=OptionPositionRead)
async def get_option(
    option_id: int,
    service: PositionService = Depends(get_position_service),
) -> OptionPositionRead:
    return OptionPositionRead.model_validate(await service.get_option(option_id))


@router.post("", response_model=OptionPositionRead, status_code=status.HTTP_201_CREATED)
async def create_option(
    request: OptionPositionCreate,
    service: PositionService = Depends(get_position_service),
) -> OptionPositionRead:
    option = await service.create_option(request)
    return OptionPositionRead.model_validate(option)


@router.put("/{option_id}", response_model=OptionPositionRead)
async def update_option(
    option_id: int,
    request: OptionPositionUpdate,
    service: PositionService = Depends(get_position_service),
) -> OptionPositionRead:
    option = await service.update_option(option_id, request)
    return OptionPositionRead.model_validate(option)


@router.delete("/{option_id}", response_model=MessageResponse)
async def delete_option(
    option_id: int,
    service: PositionService = Depends(get_position_service),
) -> MessageResponse:
    await service.delete_option(option_id)
    return MessageResponse(message="Option deleted successfully")
