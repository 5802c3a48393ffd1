"""Materials inventory HTTP service."""
