"""
Statement rendering.

Formatting only: consumes a computed Statement and never prices anything.
"""
from typing import Mapping

import pandas as pd

from ..engine.models import Invoice, Play, Statement
from ..engine.pricing_engine import compute_statement
from .currency import usd


def render_text(statement: Statement) -> str:
    """Render a statement as the plain-text report."""
    result = f"Statement for {statement.customer}\n"
    for line in statement.lines:
        result += f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)\n"
    result += f"Amount owed is {usd(statement.total_amount)}\n"
    result += f"You earned {statement.total_volume_credits} credits\n"
    return result


def statement_frame(statement: Statement) -> pd.DataFrame:
    """Tabulate statement lines for display and CSV/Excel export."""
    return pd.DataFrame(
        [
            {
                "Play": line.play_name,
                "Type": line.play_type.value.title(),
                "Seats": line.audience,
                "Amount": usd(line.amount),
                "Credits": line.volume_credits,
            }
            for line in statement.lines
        ],
        columns=["Play", "Type", "Seats", "Amount", "Credits"],
    )


class StatementPrinter:
    """Generates the text statement for an invoice against a play catalog."""

    def __init__(self, invoice: Invoice, plays: Mapping[str, Play]):
        self.invoice = invoice
        self.plays = plays

    def statement(self) -> str:
        """Return the formatted statement for this printer's invoice."""
        return render_text(compute_statement(self.invoice, self.plays))
