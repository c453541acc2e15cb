"""
Centralized settings and path configuration for the billing tool.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


PLAYS_ENV_VAR = 'THEATER_BILLING_PLAYS'
INVOICES_ENV_VAR = 'THEATER_BILLING_INVOICES'


def get_project_root() -> Path:
    """Get the project root directory (where the data/ folder lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'data' / 'plays.json').exists() or (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 4 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Input files
    plays_file: Path
    invoices_file: Path

    # Exported statements
    output_dir: Path

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        plays_file = os.environ.get(PLAYS_ENV_VAR)
        invoices_file = os.environ.get(INVOICES_ENV_VAR)

        return cls(
            project_root=root,
            plays_file=Path(plays_file) if plays_file else root / 'data' / 'plays.json',
            invoices_file=Path(invoices_file) if invoices_file else root / 'data' / 'invoices.json',
            output_dir=root / 'data' / 'outputs',
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
