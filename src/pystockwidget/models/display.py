"""Widget display model."""

from __future__ import annotations

from pystockwidget._constants import INBOUND_SUBTITLE_LABEL, NO_DATA_PLACEHOLDER
from pystockwidget.models._base import StockWidgetModel


class DisplayState(StockWidgetModel):
    """Text for the two widget slots.

    Always fully populated; the defaults are what a widget shows before
    the app has stored any snapshot.
    """

    total_stock: str = NO_DATA_PLACEHOLDER
    """Stock count slot (``"--"`` when no snapshot exists)."""
    inbound_subtitle: str = INBOUND_SUBTITLE_LABEL + "0"
    """Subtitle slot: fixed label followed by today's inbound count."""

    @classmethod
    def placeholder(cls) -> DisplayState:
        """State shown when no usable snapshot is stored."""
        return cls()

    @classmethod
    def from_counts(cls, total_stock: int, inbound_today: int) -> DisplayState:
        return cls(
            total_stock=str(total_stock),
            inbound_subtitle=INBOUND_SUBTITLE_LABEL + str(inbound_today),
        )

    @property
    def has_data(self) -> bool:
        """Whether the state reflects a stored snapshot rather than the sentinel."""
        return self.total_stock != NO_DATA_PLACEHOLDER
