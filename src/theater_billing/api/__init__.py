"""HTTP API subpackage."""
