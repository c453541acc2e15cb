import sys
import os
from pathlib import Path

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from theater_billing.config import settings as settings_module
from theater_billing.config.settings import Settings, get_settings, reset_settings


def test_default_paths(tmp_path, monkeypatch):
    monkeypatch.delenv(settings_module.PLAYS_ENV_VAR, raising=False)
    monkeypatch.delenv(settings_module.INVOICES_ENV_VAR, raising=False)

    settings = Settings.load(tmp_path)

    assert settings.plays_file == tmp_path / 'data' / 'plays.json'
    assert settings.invoices_file == tmp_path / 'data' / 'invoices.json'
    assert settings.output_dir == tmp_path / 'data' / 'outputs'


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv(settings_module.PLAYS_ENV_VAR, str(tmp_path / 'catalog.csv'))
    monkeypatch.setenv(settings_module.INVOICES_ENV_VAR, str(tmp_path / 'bills.json'))

    settings = Settings.load(tmp_path)

    assert settings.plays_file == tmp_path / 'catalog.csv'
    assert settings.invoices_file == tmp_path / 'bills.json'


def test_project_root_has_sample_data():
    root = settings_module.get_project_root()
    assert (root / 'data' / 'plays.json').exists()


def test_get_settings_is_cached():
    reset_settings()
    try:
        assert get_settings() is get_settings()
    finally:
        reset_settings()
    assert isinstance(get_settings(), Settings)
    reset_settings()
