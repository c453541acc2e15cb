"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
Input records are frozen; results are built once per statement.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import UnknownGenreError


class PlayType(str, Enum):
    """Genres the engine knows how to price."""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: str, play_id: Optional[str] = None) -> 'PlayType':
        """Resolve a raw genre string, raising UnknownGenreError if unrecognized."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownGenreError(value, play_id) from None


@dataclass(frozen=True)
class Play:
    """A dramatic work in the catalog."""
    play_id: str
    name: str
    type: str  # raw genre as loaded, e.g. "tragedy"

    @property
    def genre(self) -> PlayType:
        return PlayType.parse(self.type, self.play_id)


@dataclass(frozen=True)
class Performance:
    """One staging of a play on an invoice."""
    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    """A customer billing unit; performance order is the report order."""
    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class ChargeResult:
    """Amount (cents) and volume credits for a single performance."""
    amount: int
    volume_credits: int


@dataclass(frozen=True)
class TraceStep:
    """A single step in the charge calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class LineItem:
    """A single performance line on a statement."""
    play_id: str
    play_name: str
    play_type: PlayType
    audience: int
    amount: int
    volume_credits: int
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line item."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class Statement:
    """Complete result of a statement computation."""
    customer: str
    lines: list[LineItem] = field(default_factory=list)
    total_amount: int = 0
    total_volume_credits: int = 0

    def to_dict(self) -> dict:
        """Convert to a plain dict for JSON output."""
        return {
            "customer": self.customer,
            "total_amount": self.total_amount,
            "total_volume_credits": self.total_volume_credits,
            "lines": [
                {
                    "play_id": line.play_id,
                    "play_name": line.play_name,
                    "play_type": line.play_type.value,
                    "audience": line.audience,
                    "amount": line.amount,
                    "volume_credits": line.volume_credits,
                }
                for line in self.lines
            ],
        }
