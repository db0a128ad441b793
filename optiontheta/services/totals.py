"""Credit/debit totals for a base position, derived from its legs."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..db.models import OptionPosition, StockSharePosition, TradeAction

CENT = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class LegTotals:
    """Stored aggregate fields of a base position."""

    total_credits: Decimal = ZERO
    total_debits: Decimal = ZERO

    @property
    def net_position_value(self) -> Decimal:
        return self.total_credits - self.total_debits

    def as_update(self) -> dict[str, Decimal]:
        """Field values ready to write onto a BasePosition."""
        return {
            "total_credits": self.total_credits,
            "total_debits": self.total_debits,
            "net_position_value": self.net_position_value,
        }


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _money(value) -> Decimal:
    return _decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def option_leg_amount(leg: OptionPosition) -> Decimal:
    """Premium paid or received for an option leg (premium is per contract)."""
    return _money(_decimal(leg.premium_per_contract) * leg.contracts)


def stock_leg_amount(leg: StockSharePosition) -> Decimal:
    """Cash paid or received for a stock leg."""
    return _money(_decimal(leg.share_price) * leg.shares)


def compute_leg_totals(
    options: Iterable[OptionPosition],
    stocks: Iterable[StockSharePosition],
) -> LegTotals:
    """Recompute a base position's totals from all of its legs.

    Sells credit the position and buys debit it. Fees and commissions are
    always debits. Open and closed option legs both count since each was an
    executed transaction.

    Args:
        options: Every option leg of the base position
        stocks: Every stock leg of the base position

    Returns:
        LegTotals with credits and debits rounded to cents
    """
    credits = ZERO
    debits = ZERO

    for option in options:
        amount = option_leg_amount(option)
        if option.option_action == TradeAction.SELL:
            credits += amount
        else:
            debits += amount
        debits += _money(option.fees_commissions or ZERO)

    for stock in stocks:
        amount = stock_leg_amount(stock)
        if stock.action == TradeAction.SELL:
            credits += amount
        else:
            debits += amount
        debits += _money(stock.fees_commissions or ZERO)

    return LegTotals(total_credits=_money(credits), total_debits=_money(debits))


__all__ = ["LegTotals", "compute_leg_totals", "option_leg_amount", "stock_leg_amount"]
