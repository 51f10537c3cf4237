"""Custom exception hierarchy for pystockwidget.

The snapshot parser itself never raises; these exceptions belong to the
collaborators around it (configuration and preferences storage).
"""

from __future__ import annotations

from pathlib import Path


class StockWidgetError(Exception):
    """Base exception for all pystockwidget errors."""


class WidgetConfigError(StockWidgetError):
    """Invalid or missing configuration."""


class WidgetStoreError(StockWidgetError):
    """Preferences file could not be read, decoded or written."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
    ) -> None:
        self.path = path
        super().__init__(message)
