"""
Data Loader - reads play catalogs and invoices from disk.

Plays come from a JSON object keyed by play id, or from a CSV with
play_id/name/type columns. Invoices come from a JSON list.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from ..engine.errors import DataLoadError
from ..engine.models import Invoice, Performance, Play

logger = logging.getLogger(__name__)

PLAY_COLUMNS = ('play_id', 'name', 'type')


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"{path.name} not found at {path}.")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e


def _parse_play(play_id: str, entry: Any, source: Union[str, Path]) -> Play:
    if not isinstance(entry, dict):
        raise DataLoadError(source, f"play '{play_id}' must be an object")
    for key in ('name', 'type'):
        if not str(entry.get(key) or '').strip():
            raise DataLoadError(source, f"play '{play_id}' is missing '{key}'")
    return Play(play_id=str(play_id).strip(), name=str(entry['name']).strip(), type=str(entry['type']).strip())


def load_plays(path: Union[str, Path], verbose: bool = False) -> dict[str, Play]:
    """
    Load the play catalog.

    Genres are kept as loaded; an unrecognized genre only fails once a
    performance of that play is priced.

    Args:
        path: JSON or CSV file
        verbose: Print progress messages

    Returns:
        Dict of play id → Play
    """
    path = Path(path)

    if path.suffix.lower() == '.csv':
        if not path.exists():
            raise FileNotFoundError(f"{path.name} not found at {path}.")
        df = pd.read_csv(path, dtype=str)
        missing = [c for c in PLAY_COLUMNS if c not in df.columns]
        if missing:
            raise DataLoadError(path, f"missing columns: {', '.join(missing)}")
        df = df.dropna(subset=['play_id']).fillna('')
        for col in PLAY_COLUMNS:
            df[col] = df[col].astype(str).str.strip()
        raw = {row['play_id']: {'name': row['name'], 'type': row['type']} for _, row in df.iterrows()}
    else:
        raw = _read_json(path)
        if not isinstance(raw, dict):
            raise DataLoadError(path, "plays file must be a JSON object keyed by play id")

    plays = {}
    for play_id, entry in raw.items():
        play = _parse_play(play_id, entry, path)
        plays[play.play_id] = play

    logger.debug("Loaded %d plays from %s", len(plays), path)
    if verbose:
        print(f"Loaded {len(plays)} plays from {path}")
    return plays


def _parse_audience(value: Any) -> Optional[int]:
    """Whole-number audience from an int, integral float or digit string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_invoice(data: Any, source: Union[str, Path] = '<invoice>') -> Invoice:
    """Build an Invoice from its JSON form ({customer, performances: [{playID, audience}]})."""
    if not isinstance(data, dict):
        raise DataLoadError(source, "invoice must be an object")
    customer = data.get('customer')
    if not customer:
        raise DataLoadError(source, "invoice is missing 'customer'")

    performances = []
    for i, perf in enumerate(data.get('performances') or []):
        if not isinstance(perf, dict):
            raise DataLoadError(source, f"{customer}: performance {i} must be an object")
        play_id = perf.get('playID', perf.get('play_id'))
        if not play_id:
            raise DataLoadError(source, f"{customer}: performance {i} is missing 'playID'")
        audience = _parse_audience(perf.get('audience'))
        if audience is None:
            raise DataLoadError(source, f"{customer}: performance {i} has invalid audience")
        if audience < 0:
            raise DataLoadError(source, f"{customer}: performance {i} has negative audience")
        performances.append(Performance(play_id=str(play_id).strip(), audience=audience))

    return Invoice(customer=str(customer), performances=tuple(performances))


def load_invoices(path: Union[str, Path], verbose: bool = False) -> list[Invoice]:
    """Load invoices from a JSON list. A single invoice object is also accepted."""
    path = Path(path)
    raw = _read_json(path)
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        raise DataLoadError(path, "invoices file must be a JSON list")

    invoices = [parse_invoice(entry, path) for entry in raw]

    logger.debug("Loaded %d invoices from %s", len(invoices), path)
    if verbose:
        print(f"Loaded {len(invoices)} invoices from {path}")
    return invoices
