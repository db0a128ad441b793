"""Option leg model."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import OptionLegType, OptionType, TradeAction, enum_column
from .timestamps import timestamp_column, utc_now


class OptionPosition(SQLModel, table=True):
    """A single option transaction belonging to a base position."""

    __tablename__ = "option_position"

    id: Optional[int] = Field(default=None, primary_key=True)
    base_position_id: int = Field(
        foreign_key="base_position.id", ondelete="CASCADE", index=True
    )
    position_type: OptionLegType = Field(sa_type=enum_column(OptionLegType))
    option_type: OptionType = Field(sa_type=enum_column(OptionType))
    option_action: TradeAction = Field(sa_type=enum_column(TradeAction))
    strike_price: Decimal = Field(max_digits=12, decimal_places=2)
    expiration_date: date
    contracts: int
    premium_per_contract: Decimal = Field(max_digits=12, decimal_places=2)
    fees_commissions: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    trade_date: date
    is_open: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column(), index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column())
