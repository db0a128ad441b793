"""Database package for Option Theta IQ."""

from __future__ import annotations

from sqlmodel import SQLModel

from .models import BasePosition, OptionPosition, StockSharePosition
from .session import DatabaseManager, PoolOptions, get_db_manager, get_session, init_db

__all__ = [
    "BasePosition",
    "DatabaseManager",
    "OptionPosition",
    "PoolOptions",
    "SQLModel",
    "StockSharePosition",
    "get_db_manager",
    "get_session",
    "init_db",
]
