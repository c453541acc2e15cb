#!/usr/bin/env python
"""
Print the statement for every invoice in an invoices file.

Usage:
    python scripts/print_statements.py [--plays data/plays.json] [--invoices data/invoices.json]
                                       [--customer BigCo] [--csv [DIR]]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from theater_billing.config.settings import get_settings
from theater_billing.data.loader import load_invoices, load_plays
from theater_billing.engine import BillingError, compute_statement
from theater_billing.report import render_text, statement_frame


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Print theater billing statements")
    parser.add_argument('--plays', type=Path, default=settings.plays_file)
    parser.add_argument('--invoices', type=Path, default=settings.invoices_file)
    parser.add_argument('--customer', help="Only print this customer's invoices")
    parser.add_argument('--csv', type=Path, metavar='DIR', nargs='?', const=settings.output_dir,
                        help="Also export each statement as CSV (default dir: %(const)s)")
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        plays = load_plays(args.plays, verbose=args.verbose)
        invoices = load_invoices(args.invoices, verbose=args.verbose)
    except (FileNotFoundError, BillingError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.customer:
        invoices = [inv for inv in invoices if inv.customer == args.customer]
        if not invoices:
            print(f"ERROR: no invoices for customer '{args.customer}'", file=sys.stderr)
            return 1

    for invoice in invoices:
        try:
            statement = compute_statement(invoice, plays)
        except BillingError as e:
            print(f"ERROR: cannot bill {invoice.customer}: {e.message}", file=sys.stderr)
            return 1

        print(render_text(statement), end="")

        if args.csv:
            args.csv.mkdir(parents=True, exist_ok=True)
            out = args.csv / f"statement_{invoice.customer}.csv"
            statement_frame(statement).to_csv(out, index=False)
            if args.verbose:
                print(f"Wrote {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
