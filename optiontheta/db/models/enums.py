"""Categorical values stored on position rows."""

from __future__ import annotations

from enum import Enum

import sqlalchemy as sa


class StrategyType(str, Enum):
    """Options strategy a base position implements."""

    COVERED_CALL = "covered_call"
    PMCC = "pmcc"
    CASH_SECURED_PUT = "cash_secured_put"
    IRON_CONDOR = "iron_condor"
    OTHER = "other"


class PositionStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class OptionLegType(str, Enum):
    """Why an option leg was traded."""

    NEW = "new"
    ROLL = "roll"
    CLOSE = "close"


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


class TradeAction(str, Enum):
    """Side of a leg transaction; used by both option and stock legs."""

    BUY = "buy"
    SELL = "sell"


def enum_column(enum_cls: type[Enum]) -> sa.Enum:
    """Column type storing an enum's ``value`` strings rather than member names."""
    return sa.Enum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=20,
        validate_strings=True,
    )
