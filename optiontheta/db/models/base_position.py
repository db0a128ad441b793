"""Base position model, the aggregate root of one strategy instance."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import PositionStatus, StrategyType, enum_column
from .timestamps import timestamp_column, utc_now


class BasePosition(SQLModel, table=True):
    """One options/stock strategy on a single underlying symbol.

    ``total_credits``, ``total_debits`` and ``net_position_value`` are stored
    aggregates over the position's legs. They are rewritten in the same
    transaction as every leg write (see ``services.totals``) and are never
    supplied by API callers.
    """

    __tablename__ = "base_position"

    id: Optional[int] = Field(default=None, primary_key=True)
    symbol: str = Field(index=True, max_length=20)
    position_name: str = Field(max_length=255)
    strategy_type: StrategyType = Field(sa_type=enum_column(StrategyType), index=True)
    underlying_price: Decimal = Field(max_digits=12, decimal_places=2)
    position_status: PositionStatus = Field(
        default=PositionStatus.OPEN, sa_type=enum_column(PositionStatus), index=True
    )
    notes: Optional[str] = Field(default=None)

    # Stored leg aggregates
    total_credits: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    total_debits: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    net_position_value: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)

    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column(), index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column())
