import json
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from theater_billing.data.loader import load_invoices, load_plays, parse_invoice
from theater_billing.engine import DataLoadError, Performance, Play, compute_statement

PROJECT_DATA = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data')


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_load_sample_data():
    """The shipped sample invoice produces the known BigCo statement."""
    plays = load_plays(os.path.join(PROJECT_DATA, 'plays.json'))
    invoices = load_invoices(os.path.join(PROJECT_DATA, 'invoices.json'))

    assert plays["as-like"] == Play(play_id="as-like", name="As You Like It", type="comedy")
    assert len(invoices) == 1
    assert invoices[0].customer == "BigCo"

    statement = compute_statement(invoices[0], plays)
    assert statement.total_amount == 173000
    assert statement.total_volume_credits == 47


def test_load_plays_csv(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name,type\nhamlet, Hamlet ,tragedy\nas-like,As You Like It,comedy\n", encoding='utf-8')

    plays = load_plays(path)

    assert plays == {
        "hamlet": Play(play_id="hamlet", name="Hamlet", type="tragedy"),
        "as-like": Play(play_id="as-like", name="As You Like It", type="comedy"),
    }


def test_load_plays_csv_missing_columns(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name\nhamlet,Hamlet\n", encoding='utf-8')

    with pytest.raises(DataLoadError, match="missing columns: type"):
        load_plays(path)


@pytest.mark.parametrize("row,key", [
    ("hamlet,,tragedy", "name"),
    ("othello,Othello,", "type"),
    ("othello,Othello,  ", "type"),
])
def test_load_plays_csv_blank_cells(tmp_path, row, key):
    path = tmp_path / "plays.csv"
    path.write_text(f"play_id,name,type\n{row}\n", encoding='utf-8')

    with pytest.raises(DataLoadError, match=f"missing '{key}'"):
        load_plays(path)


def test_load_plays_keeps_unknown_genre(tmp_path):
    """Unrecognized genres load fine and only fail when priced."""
    path = write_json(tmp_path / "plays.json", {"godot": {"name": "Waiting for Godot", "type": "absurdist"}})
    assert load_plays(path)["godot"].type == "absurdist"


def test_load_plays_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plays(tmp_path / "nope.json")


def test_load_plays_invalid_json(tmp_path):
    path = tmp_path / "plays.json"
    path.write_text("{not json", encoding='utf-8')
    with pytest.raises(DataLoadError, match="invalid JSON"):
        load_plays(path)


@pytest.mark.parametrize("data", [
    ["hamlet"],
    {"hamlet": "Hamlet"},
    {"hamlet": {"name": "Hamlet"}},
])
def test_load_plays_malformed(tmp_path, data):
    path = write_json(tmp_path / "plays.json", data)
    with pytest.raises(DataLoadError):
        load_plays(path)


def test_load_plays_verbose(tmp_path, capsys):
    path = write_json(tmp_path / "plays.json", {"hamlet": {"name": "Hamlet", "type": "tragedy"}})
    load_plays(path, verbose=True)
    assert "Loaded 1 plays" in capsys.readouterr().out


def test_parse_invoice_preserves_order():
    invoice = parse_invoice({
        "customer": "BigCo",
        "performances": [
            {"playID": "othello", "audience": 40},
            {"play_id": "hamlet", "audience": "55"},
        ],
    })
    assert invoice.performances == (
        Performance(play_id="othello", audience=40),
        Performance(play_id="hamlet", audience=55),
    )


def test_parse_invoice_accepts_integral_float():
    invoice = parse_invoice({"customer": "X", "performances": [{"playID": "a", "audience": 40.0}]})
    assert invoice.performances[0].audience == 40


@pytest.mark.parametrize("data,message", [
    ({"performances": []}, "missing 'customer'"),
    ({"customer": "X", "performances": [{"audience": 3}]}, "missing 'playID'"),
    ({"customer": "X", "performances": [{"playID": "a", "audience": "many"}]}, "invalid audience"),
    ({"customer": "X", "performances": [{"playID": "a", "audience": -1}]}, "negative audience"),
    ({"customer": "X", "performances": [{"playID": "a", "audience": 55.9}]}, "invalid audience"),
    ({"customer": "X", "performances": [{"playID": "a", "audience": True}]}, "invalid audience"),
    ({"customer": "X", "performances": [{"playID": "a", "audience": "55.9"}]}, "invalid audience"),
    ("BigCo", "must be an object"),
])
def test_parse_invoice_rejects_malformed(data, message):
    with pytest.raises(DataLoadError, match=message):
        parse_invoice(data)


def test_load_invoices_accepts_single_object(tmp_path):
    path = write_json(tmp_path / "invoice.json", {"customer": "Solo", "performances": []})
    invoices = load_invoices(path)
    assert [inv.customer for inv in invoices] == ["Solo"]
    assert invoices[0].performances == ()
