"""Request and response schemas for base positions and their legs."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..db.models import (
    BasePosition,
    OptionLegType,
    OptionType,
    PositionStatus,
    StrategyType,
    TradeAction,
)

# ----- Base positions -----


class BasePositionCreate(BaseModel):
    """Body of ``POST /api/base-positions``."""

    symbol: str = Field(..., min_length=1, max_length=20, description="Underlying ticker")
    strategy_type: StrategyType
    underlying_price: Decimal = Field(
        ..., gt=0, max_digits=12, decimal_places=2, description="Underlying price at creation"
    )
    notes: Optional[str] = None

    @field_validator("symbol")
    @classmethod
    def strip_symbol(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("symbol must not be blank")
        return v


class BasePositionUpdate(BasePositionCreate):
    """Body of ``PUT /api/base-positions/{id}``; every field must be resent."""

    position_name: str = Field(..., min_length=1, max_length=255)
    position_status: PositionStatus
    notes: Optional[str] = Field(..., description="Send null to clear the notes")


class BasePositionRead(BaseModel):
    """A base position as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    symbol: str
    position_name: str
    strategy_type: StrategyType
    underlying_price: float
    position_status: PositionStatus
    notes: Optional[str] = None
    total_credits: float
    total_debits: float
    net_position_value: float
    created_at: datetime
    updated_at: datetime


class BasePositionSummary(BasePositionRead):
    """List entry: a base position with its leg counts."""

    option_count: int = 0
    stock_count: int = 0

    @classmethod
    def from_row(
        cls, position: BasePosition, option_count: int, stock_count: int
    ) -> "BasePositionSummary":
        return cls.model_validate(
            {**position.model_dump(), "option_count": option_count, "stock_count": stock_count}
        )


# ----- Option legs -----


class OptionPositionFields(BaseModel):
    position_type: OptionLegType
    option_type: OptionType
    option_action: TradeAction
    strike_price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    expiration_date: date
    contracts: int = Field(..., gt=0)
    premium_per_contract: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    fees_commissions: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    trade_date: date


class OptionPositionCreate(OptionPositionFields):
    """Body of ``POST /api/options``."""

    base_position_id: int = Field(..., gt=0)


class OptionPositionUpdate(OptionPositionFields):
    """Body of ``PUT /api/options/{id}``; the owning position cannot change."""

    fees_commissions: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    is_open: bool


class OptionPositionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    base_position_id: int
    position_type: OptionLegType
    option_type: OptionType
    option_action: TradeAction
    strike_price: float
    expiration_date: date
    contracts: int
    premium_per_contract: float
    fees_commissions: float
    trade_date: date
    is_open: bool
    created_at: datetime
    updated_at: datetime


# ----- Stock legs -----


class StockSharePositionFields(BaseModel):
    action: TradeAction
    shares: int = Field(..., gt=0)
    share_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    fees_commissions: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    trade_date: date


class StockSharePositionCreate(StockSharePositionFields):
    """Body of ``POST /api/stocks``."""

    base_position_id: int = Field(..., gt=0)


class StockSharePositionUpdate(StockSharePositionFields):
    """Body of ``PUT /api/stocks/{id}``."""

    fees_commissions: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)


class StockSharePositionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    base_position_id: int
    action: TradeAction
    shares: int
    share_price: float
    fees_commissions: float
    trade_date: date
    created_at: datetime


class BasePositionDetail(BasePositionRead):
    """A base position with all of its legs, newest first."""

    options: List[OptionPositionRead] = Field(default_factory=list)
    stocks: List[StockSharePositionRead] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Confirmation returned by delete endpoints."""

    message: str
