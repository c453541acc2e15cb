import json
import sys
import os

# Add scripts and src to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (os.path.join(project_root, 'src'), os.path.join(project_root, 'scripts')):
    if path not in sys.path:
        sys.path.insert(0, path)

import print_statements

PLAYS = os.path.join(project_root, 'data', 'plays.json')
INVOICES = os.path.join(project_root, 'data', 'invoices.json')


def test_prints_sample_statement(capsys):
    code = print_statements.main(['--plays', PLAYS, '--invoices', INVOICES])

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("Statement for BigCo\n")
    assert "Amount owed is $1,730.00\n" in out
    assert out.endswith("You earned 47 credits\n")


def test_exports_csv(tmp_path, capsys):
    code = print_statements.main(['--plays', PLAYS, '--invoices', INVOICES, '--csv', str(tmp_path)])

    assert code == 0
    assert (tmp_path / 'statement_BigCo.csv').read_text(encoding='utf-8').startswith("Play,Type,Seats,Amount,Credits")


def test_unknown_customer(capsys):
    code = print_statements.main(['--plays', PLAYS, '--invoices', INVOICES, '--customer', 'Nobody'])

    assert code == 1
    assert "no invoices for customer 'Nobody'" in capsys.readouterr().err


def test_missing_play_is_reported(tmp_path, capsys):
    invoices = tmp_path / 'invoices.json'
    invoices.write_text(json.dumps([
        {"customer": "BigCo", "performances": [{"playID": "macbeth", "audience": 10}]}
    ]), encoding='utf-8')

    code = print_statements.main(['--plays', PLAYS, '--invoices', str(invoices)])

    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot bill BigCo: Play 'macbeth' not found" in captured.err


def test_missing_file_is_reported(tmp_path, capsys):
    code = print_statements.main(['--plays', str(tmp_path / 'nope.json'), '--invoices', INVOICES])

    assert code == 1
    assert "ERROR:" in capsys.readouterr().err


def test_csv_defaults_to_settings_output_dir(tmp_path, monkeypatch, capsys):
    from theater_billing.config.settings import Settings

    monkeypatch.setattr(print_statements, 'get_settings', lambda: Settings.load(tmp_path))

    code = print_statements.main(['--plays', PLAYS, '--invoices', INVOICES, '--csv'])

    assert code == 0
    assert (tmp_path / 'data' / 'outputs' / 'statement_BigCo.csv').exists()
