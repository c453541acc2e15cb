"""Shared engine instance for the API."""
from typing import Optional

from ..engine import PricingEngine

_engine: Optional[PricingEngine] = None


def get_engine() -> PricingEngine:
    """Get the process-wide engine, loading the play catalog on first use."""
    global _engine
    if _engine is None:
        _engine = PricingEngine()
    return _engine


def set_engine(engine: Optional[PricingEngine]):
    """Replace (or clear) the process-wide engine."""
    global _engine
    _engine = engine
