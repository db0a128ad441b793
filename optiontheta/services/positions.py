"""Service layer for base positions and their option/stock legs."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, List, Optional, Tuple

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ResourceNotFoundError, StorageError
from ..db.models import BasePosition, OptionPosition, PositionStatus, StockSharePosition
from ..db.models.timestamps import utc_now
from ..repositories import (
    BasePositionRepository,
    OptionPositionRepository,
    StockSharePositionRepository,
)
from ..schemas.positions import (
    BasePositionCreate,
    BasePositionUpdate,
    OptionPositionCreate,
    OptionPositionUpdate,
    StockSharePositionCreate,
    StockSharePositionUpdate,
)
from .totals import compute_leg_totals

logger = structlog.get_logger(__name__)

POSITION_NOT_FOUND = "Position not found"
OPTION_NOT_FOUND = "Option not found"
STOCK_NOT_FOUND = "Stock position not found"


def build_position_name(symbol: str, strategy_type: str, created_on: date) -> str:
    """Name given to a base position when it is created."""
    return f"{symbol} {strategy_type} {created_on.isoformat()}"


class PositionService:
    """CRUD over base positions and legs, one transaction per call.

    Every leg write also rewrites the parent's stored totals inside the same
    transaction, so ``total_credits``, ``total_debits`` and
    ``net_position_value`` always match the legs that exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.base_positions = BasePositionRepository(session)
        self.options = OptionPositionRepository(session)
        self.stocks = StockSharePositionRepository(session)

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[None]:
        """Commit on success; roll back and translate storage failures."""
        try:
            yield
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Storage failure", operation=operation, error_type=type(exc).__name__)
            raise StorageError() from exc
        except Exception:
            await self.session.rollback()
            raise

    # ----- Base positions -----

    async def list_base_positions(self) -> List[Tuple[BasePosition, int, int]]:
        """All base positions with option and stock leg counts, newest first."""
        return await self.base_positions.list_with_leg_counts()

    async def get_base_position(self, position_id: int) -> BasePosition:
        """Get a base position or raise ResourceNotFoundError."""
        position = await self.base_positions.get(position_id)
        if position is None:
            raise ResourceNotFoundError(POSITION_NOT_FOUND)
        return position

    async def get_base_position_detail(
        self, position_id: int
    ) -> Tuple[BasePosition, List[OptionPosition], List[StockSharePosition]]:
        """Get a base position with its option and stock legs, newest first."""
        position = await self.get_base_position(position_id)
        options = await self.options.get_all(base_position_id=position_id)
        stocks = await self.stocks.get_all(base_position_id=position_id)
        return position, options, stocks

    async def create_base_position(self, data: BasePositionCreate) -> BasePosition:
        """Create a base position; the name is derived from symbol, strategy and date."""
        now = utc_now()
        position = BasePosition(
            symbol=data.symbol,
            position_name=build_position_name(data.symbol, data.strategy_type.value, now.date()),
            strategy_type=data.strategy_type,
            underlying_price=data.underlying_price,
            position_status=PositionStatus.OPEN,
            notes=data.notes,
            created_at=now,
            updated_at=now,
        )
        async with self._unit_of_work("create_base_position"):
            position = await self.base_positions.add(position)

        logger.info(
            "Created base position",
            base_position_id=position.id,
            position_name=position.position_name,
        )
        return position

    async def update_base_position(
        self, position_id: int, data: BasePositionUpdate
    ) -> BasePosition:
        """Replace every editable field of a base position."""
        async with self._unit_of_work("update_base_position"):
            position = await self.get_base_position(position_id)
            update_data = data.model_dump()
            update_data["updated_at"] = utc_now()
            position = await self.base_positions.update(position, update_data)

        logger.info("Updated base position", base_position_id=position_id)
        return position

    async def delete_base_position(self, position_id: int) -> None:
        """Delete a base position and, in the same transaction, all of its legs."""
        async with self._unit_of_work("delete_base_position"):
            deleted = await self.base_positions.delete_with_legs(position_id)
            if not deleted:
                raise ResourceNotFoundError(POSITION_NOT_FOUND)

        logger.info("Deleted base position with its legs", base_position_id=position_id)

    async def _refresh_totals(self, position_id: int) -> None:
        """Recompute and store a base position's totals from its current legs."""
        position = await self.base_positions.get(position_id)
        if position is None:
            return
        options = await self.options.get_all(base_position_id=position_id)
        stocks = await self.stocks.get_all(base_position_id=position_id)
        totals = compute_leg_totals(options, stocks)
        await self.base_positions.update(
            position, {**totals.as_update(), "updated_at": utc_now()}
        )

    # ----- Option legs -----

    async def list_options(self, base_position_id: Optional[int] = None) -> List[OptionPosition]:
        return await self.options.get_all(base_position_id=base_position_id)

    async def get_option(self, option_id: int) -> OptionPosition:
        option = await self.options.get(option_id)
        if option is None:
            raise ResourceNotFoundError(OPTION_NOT_FOUND)
        return option

    async def create_option(self, data: OptionPositionCreate) -> OptionPosition:
        """Insert an option leg; a missing parent fails on the foreign key."""
        now = utc_now()
        option = OptionPosition(**data.model_dump(), is_open=True, created_at=now, updated_at=now)
        async with self._unit_of_work("create_option"):
            option = await self.options.add(option)
            await self._refresh_totals(option.base_position_id)

        logger.info(
            "Created option leg",
            option_id=option.id,
            base_position_id=option.base_position_id,
        )
        return option

    async def update_option(self, option_id: int, data: OptionPositionUpdate) -> OptionPosition:
        """Replace every editable field of an option leg, including ``is_open``."""
        async with self._unit_of_work("update_option"):
            option = await self.get_option(option_id)
            update_data = data.model_dump()
            update_data["updated_at"] = utc_now()
            option = await self.options.update(option, update_data)
            await self._refresh_totals(option.base_position_id)

        logger.info("Updated option leg", option_id=option_id)
        return option

    async def delete_option(self, option_id: int) -> None:
        async with self._unit_of_work("delete_option"):
            option = await self.get_option(option_id)
            base_position_id = option.base_position_id
            await self.options.delete(option)
            await self._refresh_totals(base_position_id)

        logger.info("Deleted option leg", option_id=option_id, base_position_id=base_position_id)

    # ----- Stock legs -----

    async def list_stocks(
        self, base_position_id: Optional[int] = None
    ) -> List[StockSharePosition]:
        return await self.stocks.get_all(base_position_id=base_position_id)

    async def get_stock(self, stock_id: int) -> StockSharePosition:
        stock = await self.stocks.get(stock_id)
        if stock is None:
            raise ResourceNotFoundError(STOCK_NOT_FOUND)
        return stock

    async def create_stock(self, data: StockSharePositionCreate) -> StockSharePosition:
        """Insert a stock leg; a missing parent fails on the foreign key."""
        stock = StockSharePosition(**data.model_dump(), created_at=utc_now())
        async with self._unit_of_work("create_stock"):
            stock = await self.stocks.add(stock)
            await self._refresh_totals(stock.base_position_id)

        logger.info(
            "Created stock leg",
            stock_id=stock.id,
            base_position_id=stock.base_position_id,
        )
        return stock

    async def update_stock(
        self, stock_id: int, data: StockSharePositionUpdate
    ) -> StockSharePosition:
        async with self._unit_of_work("update_stock"):
            stock = await self.get_stock(stock_id)
            stock = await self.stocks.update(stock, data.model_dump())
            await self._refresh_totals(stock.base_position_id)

        logger.info("Updated stock leg", stock_id=stock_id)
        return stock

    async def delete_stock(self, stock_id: int) -> None:
        async with self._unit_of_work("delete_stock"):
            stock = await self.get_stock(stock_id)
            base_position_id = stock.base_position_id
            await self.stocks.delete(stock)
            await self._refresh_totals(base_position_id)

        logger.info("Deleted stock leg", stock_id=stock_id, base_position_id=base_position_id)


__all__ = ["PositionService", "build_position_name"]
