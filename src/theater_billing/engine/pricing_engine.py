"""
Pricing Engine - computes charges and volume credits for an invoice.

Every performance is resolved to its play, priced by genre and audience
size, and folded into the statement totals in a single forward pass.
The functions here are pure: no I/O, no logging, no shared state.
"""
from typing import Mapping, Optional

from ..config.settings import get_settings, Settings
from . import constants as C
from .errors import PlayNotFoundError
from .models import (
    ChargeResult,
    Invoice,
    LineItem,
    Performance,
    Play,
    PlayType,
    Statement,
)


def find_play(plays: Mapping[str, Play], play_id: str) -> Optional[Play]:
    """Look up a play by id. Returns None when absent."""
    return plays.get(play_id)


def get_play(plays: Mapping[str, Play], performance: Performance) -> Play:
    """Resolve the play for a performance, raising PlayNotFoundError if absent."""
    play = find_play(plays, performance.play_id)
    if play is None:
        raise PlayNotFoundError(performance.play_id)
    return play


def compute_amount(performance: Performance, play: Play) -> int:
    """
    Compute the amount owed for a single performance, in cents.

    Tragedy: base amount plus a per-person surcharge above the threshold.
    Comedy: base amount, a flat surcharge plus per-person rate above the
    threshold, and a per-seat charge on the whole audience.
    """
    genre = play.genre
    audience = performance.audience

    if genre is PlayType.TRAGEDY:
        result = C.TRAGEDY_BASE_AMOUNT
        if audience > C.TRAGEDY_AUDIENCE_THRESHOLD:
            result += C.TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON * (
                audience - C.TRAGEDY_AUDIENCE_THRESHOLD
            )
    elif genre is PlayType.COMEDY:
        result = C.COMEDY_BASE_AMOUNT
        if audience > C.COMEDY_AUDIENCE_THRESHOLD:
            result += (
                C.COMEDY_OVER_BASE_CAPACITY_AMOUNT
                + C.COMEDY_OVER_BASE_CAPACITY_PER_PERSON * (audience - C.COMEDY_AUDIENCE_THRESHOLD)
            )
        result += C.COMEDY_AMOUNT_PER_AUDIENCE * audience
    else:
        raise AssertionError(f"unhandled play type: {genre}")

    return result


def compute_volume_credits(performance: Performance, play: Play) -> int:
    """Compute the volume credits earned by a single performance."""
    genre = play.genre
    audience = performance.audience

    result = max(audience - C.BASE_VOLUME_CREDIT_THRESHOLD, 0)
    if genre is PlayType.COMEDY:
        result += audience // C.COMEDY_EXTRA_VOLUME_FACTOR
    return result


def compute_charge(performance: Performance, play: Play) -> ChargeResult:
    """Compute both amount and volume credits for a performance."""
    return ChargeResult(
        amount=compute_amount(performance, play),
        volume_credits=compute_volume_credits(performance, play),
    )


def compute_statement(invoice: Invoice, plays: Mapping[str, Play]) -> Statement:
    """
    Compute the full statement for an invoice.

    Lines keep invoice order. Any lookup or genre failure aborts the
    whole computation; no partial statement is returned.

    Args:
        invoice: Invoice with customer and ordered performances
        plays: Mapping of play id to Play

    Returns:
        Statement with line items and totals
    """
    lines = []
    total_amount = 0
    total_volume_credits = 0

    for performance in invoice.performances:
        play = get_play(plays, performance)
        charge = compute_charge(performance, play)

        line = LineItem(
            play_id=play.play_id,
            play_name=play.name,
            play_type=play.genre,
            audience=performance.audience,
            amount=charge.amount,
            volume_credits=charge.volume_credits,
        )
        line.add_trace("Play Lookup", "Resolved play", play.name)
        line.add_trace("Genre", "Pricing as", line.play_type.value)
        line.add_trace("Amount", f"{performance.audience} seats", f"{charge.amount} cents")
        line.add_trace("Volume Credits", "Credits earned", str(charge.volume_credits))

        lines.append(line)
        total_amount += charge.amount
        total_volume_credits += charge.volume_credits

    return Statement(
        customer=invoice.customer,
        lines=lines,
        total_amount=total_amount,
        total_volume_credits=total_volume_credits,
    )


class PricingEngine:
    """
    Statement engine bound to a play catalog.

    The catalog is either passed in directly or loaded from the plays file
    named in settings. Calculation itself is stateless.
    """

    def __init__(self, plays: Optional[Mapping[str, Play]] = None, settings: Optional[Settings] = None):
        """Initialize engine with a play catalog."""
        self.settings = settings or get_settings()
        self._explicit_plays = plays is not None

        if plays is not None:
            self.plays = dict(plays)
        else:
            from ..data.loader import load_plays

            plays_path = self.settings.plays_file
            if not plays_path.exists():
                raise FileNotFoundError(
                    f"Plays file not found at {plays_path}. "
                    "Set THEATER_BILLING_PLAYS or add data/plays.json."
                )
            self.plays = load_plays(plays_path)

    def reload_data(self):
        """Reload the play catalog from disk (no-op for explicit catalogs)."""
        if not self._explicit_plays:
            self.__init__(settings=self.settings)

    def get_play(self, play_id: str) -> Play:
        """Get a play by id, raising PlayNotFoundError if absent."""
        play = find_play(self.plays, play_id)
        if play is None:
            raise PlayNotFoundError(play_id)
        return play

    def list_plays(self) -> list[Play]:
        """List catalog plays sorted by id."""
        return [self.plays[k] for k in sorted(self.plays)]

    def calculate(self, invoice: Invoice) -> Statement:
        """Calculate the statement for an invoice against this catalog."""
        return compute_statement(invoice, self.plays)
