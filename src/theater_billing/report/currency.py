"""
Currency formatting.

The engine works in integer cents; this is the only place they are
scaled to dollars.
"""
from decimal import Decimal

from ..engine.constants import PERCENT_FACTOR


def usd(amount: int) -> str:
    """Format an amount in cents as USD, e.g. 173000 → "$1,730.00"."""
    dollars = Decimal(int(amount)) / PERCENT_FACTOR
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"
