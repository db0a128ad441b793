"""Shared single-table data access for the position tables."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

RowT = TypeVar("RowT", bound=SQLModel)


class BaseRepository(Generic[RowT]):
    """Stages changes on the session without committing.

    The calling service owns the transaction, so a leg write and the update
    of its parent's totals land together or not at all. Subclasses set
    ``model``.
    """

    model: ClassVar[Type[SQLModel]]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, row_id: int) -> Optional[RowT]:
        return await self.session.get(self.model, row_id)

    async def list_newest_first(self, **filters: Any) -> List[RowT]:
        """Rows matching the equality ``filters`` (None means "any").

        Ordered by ``created_at`` then ``id``, both descending, so rows
        created in the same instant still come back newest first.
        """
        conditions = [
            getattr(self.model, column) == value
            for column, value in filters.items()
            if value is not None
        ]
        statement = (
            select(self.model)
            .where(*conditions)
            .order_by(desc(self.model.created_at), desc(self.model.id))
        )
        return list(await self.session.scalars(statement))

    async def add(self, row: RowT) -> RowT:
        """Insert ``row`` and load generated values such as ``id``."""
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def update(self, row: RowT, values: Mapping[str, Any]) -> RowT:
        """Write ``values`` onto ``row``; keys that are not columns are ignored."""
        for field, value in values.items():
            if field in self.model.model_fields:
                setattr(row, field, value)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def delete(self, row: RowT) -> None:
        await self.session.delete(row)
        await self.session.flush()
