"""Widget host adapter.

Reads the stored snapshot, runs it through the parser and hands the result
to a renderer for each widget instance. Also provides the write path the
app uses to publish fresh counters for the widget.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from pystockwidget._constants import WIDGET_STORAGE_KEY
from pystockwidget.config import WidgetConfig
from pystockwidget.exceptions import WidgetStoreError
from pystockwidget.ingestion.snapshot import decode_snapshot, encode_snapshot
from pystockwidget.models.display import DisplayState
from pystockwidget.models.snapshot import WidgetSnapshot
from pystockwidget.parser import SnapshotParser
from pystockwidget.preferences import FilePreferences, PreferencesStore

_logger = logging.getLogger(__name__)


class WidgetRenderer(Protocol):
    """Pushes a display state into one widget instance."""

    def render(self, widget_id: int, state: DisplayState) -> None: ...


class RecordingRenderer:
    """Renderer that keeps the last state rendered per widget id."""

    def __init__(self) -> None:
        self.rendered: dict[int, DisplayState] = {}

    def render(self, widget_id: int, state: DisplayState) -> None:
        self.rendered[widget_id] = state


def update_widget_data(
    store: PreferencesStore,
    snapshot: WidgetSnapshot,
    *,
    key: str = WIDGET_STORAGE_KEY,
) -> str:
    """Store *snapshot* under *key* and return the serialized value.

    Raises
    ------
    WidgetStoreError
        The store could not be written.
    """
    value = encode_snapshot(snapshot)
    store.set(key, value)
    _logger.debug("Widget data updated: %s", value)
    return value


def get_widget_data(store: PreferencesStore, *, key: str = WIDGET_STORAGE_KEY) -> WidgetSnapshot | None:
    """Return the stored snapshot, or ``None`` when absent or unreadable."""
    try:
        raw = store.get(key)
    except WidgetStoreError:
        _logger.warning("Failed to get widget data", exc_info=True)
        return None
    return decode_snapshot(raw)


class WidgetRefresher:
    """Refresh widget instances from the stored snapshot.

    Each :meth:`refresh` call reads the store once and renders every
    requested widget id with a freshly parsed :class:`DisplayState`.
    """

    def __init__(
        self,
        store: PreferencesStore,
        renderer: WidgetRenderer,
        *,
        key: str = WIDGET_STORAGE_KEY,
        parser: SnapshotParser | None = None,
    ) -> None:
        self._store = store
        self._renderer = renderer
        self._key = key
        self._parser = parser or SnapshotParser()

    @classmethod
    def from_config(cls, config: WidgetConfig, renderer: WidgetRenderer) -> WidgetRefresher:
        store = FilePreferences(config.store_dir, config.preferences_name)
        return cls(store, renderer, key=config.storage_key)

    def refresh(self, widget_ids: Iterable[int]) -> dict[int, DisplayState]:
        ids = list(widget_ids)
        if not ids:
            return {}

        raw = self._read_raw()
        states: dict[int, DisplayState] = {}
        for widget_id in ids:
            state = self._parser.parse(raw)
            self._renderer.render(widget_id, state)
            states[widget_id] = state
        _logger.debug("Refreshed %d widget(s) from key %r", len(ids), self._key)
        return states

    def _read_raw(self) -> str | None:
        try:
            return self._store.get(self._key)
        except WidgetStoreError:
            # Widgets still show the "no data yet" display.
            _logger.warning("Widget store unreadable; rendering placeholder", exc_info=True)
            return None
