"""Stock-share leg model."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import TradeAction, enum_column
from .timestamps import timestamp_column, utc_now


class StockSharePosition(SQLModel, table=True):
    """A buy or sell of underlying shares belonging to a base position."""

    __tablename__ = "stock_share_position"

    id: Optional[int] = Field(default=None, primary_key=True)
    base_position_id: int = Field(
        foreign_key="base_position.id", ondelete="CASCADE", index=True
    )
    action: TradeAction = Field(sa_type=enum_column(TradeAction))
    shares: int
    share_price: Decimal = Field(max_digits=12, decimal_places=2)
    fees_commissions: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    trade_date: date

    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column(), index=True)
