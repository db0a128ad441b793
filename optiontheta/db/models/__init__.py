"""Database models for the Option Theta IQ application."""

from __future__ import annotations

from .base_position import BasePosition
from .enums import OptionLegType, OptionType, PositionStatus, StrategyType, TradeAction
from .option_position import OptionPosition
from .stock_share_position import StockSharePosition

__all__ = [
    "BasePosition",
    "OptionLegType",
    "OptionPosition",
    "OptionType",
    "PositionStatus",
    "StockSharePosition",
    "StrategyType",
    "TradeAction",
]
