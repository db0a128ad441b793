"""Schemas for dashboard endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DashboardOverview(BaseModel):
    """Portfolio-level counters computed over every base position."""

    total_positions: int = Field(0, description="Number of base positions")
    open_positions: int = Field(0, description="Base positions with status open")
    closed_positions: int = Field(0, description="Base positions with status closed")
    total_net_value: float = Field(0.0, description="Sum of net_position_value")
    total_credits: float = Field(0.0, description="Sum of total_credits")
    total_debits: float = Field(0.0, description="Sum of total_debits")
