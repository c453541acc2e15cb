"""Report subpackage - currency formatting and statement rendering."""
from .currency import usd
from .statement_printer import StatementPrinter, render_text, statement_frame

__all__ = ['usd', 'StatementPrinter', 'render_text', 'statement_frame']
