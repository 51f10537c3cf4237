"""Data models for widget snapshots and display state."""

from pystockwidget.models._base import StockWidgetModel
from pystockwidget.models.display import DisplayState
from pystockwidget.models.snapshot import WidgetSnapshot

__all__ = [
    "DisplayState",
    "StockWidgetModel",
    "WidgetSnapshot",
]
