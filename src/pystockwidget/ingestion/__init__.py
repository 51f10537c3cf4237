"""Ingestion layer.

This package turns the raw value found in preferences storage into
normalized snapshot models, and serializes snapshots back for storage.
"""

__all__: list[str] = []
