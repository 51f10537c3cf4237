"""Snapshot parser.

Turns the raw value found under the widget storage key into the two text
slots of the inventory widget. Parsing never raises: a missing or
unreadable record yields the "no data yet" display, and a readable record
with missing or invalid counters shows ``0`` for those counters.
"""

from __future__ import annotations

from pystockwidget.ingestion.snapshot import RawSnapshot, decode_snapshot
from pystockwidget.models.display import DisplayState


class SnapshotParser:
    """Resolve a stored snapshot into a :class:`DisplayState`.

    Stateless; one instance may be shared by any number of widgets and
    threads.
    """

    def parse(self, raw: RawSnapshot) -> DisplayState:
        snapshot = decode_snapshot(raw)
        if snapshot is None:
            return DisplayState.placeholder()

        total_stock = snapshot.total_stock if snapshot.total_stock is not None else 0
        inbound_today = snapshot.inbound_today if snapshot.inbound_today is not None else 0
        return DisplayState.from_counts(total_stock, inbound_today)


_default_parser = SnapshotParser()


def parse_snapshot(raw: RawSnapshot) -> DisplayState:
    """Parse *raw* with a shared :class:`SnapshotParser`."""
    return _default_parser.parse(raw)
