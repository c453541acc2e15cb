#!/usr/bin/env python
"""
Run the Streamlit billing application.

Usage:
    python scripts/run_app.py [--plays data/plays.json]
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Run the theater billing UI")
    parser.add_argument('--plays', help="Plays file (overrides THEATER_BILLING_PLAYS)")
    parser.add_argument('--invoices', help="Invoices file (overrides THEATER_BILLING_INVOICES)")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'theater_billing' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    env = os.environ.copy()
    if args.plays:
        env['THEATER_BILLING_PLAYS'] = str(Path(args.plays).resolve())
    if args.invoices:
        env['THEATER_BILLING_INVOICES'] = str(Path(args.invoices).resolve())

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(ui_path)]
    print(f"Starting Streamlit: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()
