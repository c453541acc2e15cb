"""
Theater Billing Package

Statement generation for theater invoices.
Resolves each performance's play, prices it by genre and audience size,
and accrues loyalty volume credits.
"""

__version__ = "1.0.0"
