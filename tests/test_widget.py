from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pystockwidget._constants import INBOUND_SUBTITLE_LABEL
from pystockwidget.config import WidgetConfig
from pystockwidget.exceptions import WidgetStoreError
from pystockwidget.models.display import DisplayState
from pystockwidget.models.snapshot import WidgetSnapshot
from pystockwidget.preferences import FilePreferences, MemoryPreferences
from pystockwidget.widget import (
    RecordingRenderer,
    WidgetRefresher,
    get_widget_data,
    update_widget_data,
)


class CountingPreferences(MemoryPreferences):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.reads = 0

    def get(self, key: str) -> str | None:
        self.reads += 1
        return super().get(key)


class BrokenPreferences(MemoryPreferences):
    def get(self, key: str) -> str | None:
        raise WidgetStoreError("preferences file is not valid JSON")

    def set(self, key: str, value: str) -> None:
        raise WidgetStoreError("read-only")


def test_update_then_get_widget_data() -> None:
    store = MemoryPreferences()
    value = update_widget_data(store, WidgetSnapshot.create(152, 12, "10:42:07"))

    assert store.get("widget_data") == value
    snapshot = get_widget_data(store)
    assert snapshot is not None
    assert snapshot.total_stock == 152
    assert snapshot.inbound_today == 12


def test_get_widget_data_absent() -> None:
    assert get_widget_data(MemoryPreferences()) is None


def test_get_widget_data_store_failure_reads_none(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pystockwidget.widget"):
        assert get_widget_data(BrokenPreferences()) is None
    assert "Failed to get widget data" in caplog.text


def test_update_widget_data_store_failure_propagates() -> None:
    with pytest.raises(WidgetStoreError):
        update_widget_data(BrokenPreferences(), WidgetSnapshot.create(1, 1))


def test_refresh_renders_every_widget_from_one_read() -> None:
    store = CountingPreferences({"widget_data": '{"totalStock": 152, "inboundToday": 12}'})
    renderer = RecordingRenderer()

    states = WidgetRefresher(store, renderer).refresh([1, 2])

    expected = DisplayState(total_stock="152", inbound_subtitle=INBOUND_SUBTITLE_LABEL + "12")
    assert states == {1: expected, 2: expected}
    assert renderer.rendered == {1: expected, 2: expected}
    assert store.reads == 1


def test_refresh_without_widgets_reads_nothing() -> None:
    store = CountingPreferences()
    renderer = RecordingRenderer()

    assert WidgetRefresher(store, renderer).refresh([]) == {}
    assert store.reads == 0
    assert renderer.rendered == {}


def test_refresh_without_data_renders_placeholder() -> None:
    renderer = RecordingRenderer()
    WidgetRefresher(MemoryPreferences(), renderer).refresh([7])
    assert renderer.rendered[7] == DisplayState.placeholder()


def test_refresh_with_unreadable_store_renders_placeholder() -> None:
    renderer = RecordingRenderer()
    WidgetRefresher(BrokenPreferences(), renderer).refresh([3])
    assert renderer.rendered[3].total_stock == "--"


def test_refresh_uses_custom_key() -> None:
    store = MemoryPreferences({"other": '{"totalStock": 4}'})
    renderer = RecordingRenderer()
    WidgetRefresher(store, renderer, key="other").refresh([1])
    assert renderer.rendered[1].total_stock == "4"


def test_refresher_from_config_reads_file_store(tmp_path: Path) -> None:
    config = WidgetConfig(store_dir=tmp_path)
    renderer = RecordingRenderer()
    refresher = WidgetRefresher.from_config(config, renderer)

    assert refresher.refresh([1])[1] == DisplayState.placeholder()

    update_widget_data(FilePreferences(tmp_path), WidgetSnapshot.create(20, 5))
    assert refresher.refresh([1])[1] == DisplayState.from_counts(20, 5)
