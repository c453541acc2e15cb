"""Engine subpackage - core pricing logic and statement computation."""
from .pricing_engine import (
    PricingEngine,
    compute_amount,
    compute_volume_credits,
    compute_charge,
    compute_statement,
    find_play,
    get_play,
)
from .models import Play, PlayType, Performance, Invoice, ChargeResult, LineItem, Statement
from .errors import BillingError, PlayNotFoundError, UnknownGenreError, DataLoadError

__all__ = [
    'PricingEngine', 'compute_amount', 'compute_volume_credits', 'compute_charge',
    'compute_statement', 'find_play', 'get_play',
    'Play', 'PlayType', 'Performance', 'Invoice', 'ChargeResult', 'LineItem', 'Statement',
    'BillingError', 'PlayNotFoundError', 'UnknownGenreError', 'DataLoadError',
]
