"""Data loading subpackage."""
