"""pystockwidget - Inventory home-screen widget snapshot parsing."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystockwidget")
except PackageNotFoundError:
    __version__ = "0+local"
from pystockwidget.config import WidgetConfig
from pystockwidget.exceptions import (
    StockWidgetError,
    WidgetConfigError,
    WidgetStoreError,
)
from pystockwidget.ingestion.snapshot import decode_snapshot, encode_snapshot
from pystockwidget.models import DisplayState, WidgetSnapshot
from pystockwidget.parser import SnapshotParser, parse_snapshot
from pystockwidget.preferences import FilePreferences, MemoryPreferences, PreferencesStore
from pystockwidget.widget import (
    RecordingRenderer,
    WidgetRefresher,
    WidgetRenderer,
    get_widget_data,
    update_widget_data,
)

__all__ = [
    "__version__",
    "DisplayState",
    "FilePreferences",
    "MemoryPreferences",
    "PreferencesStore",
    "RecordingRenderer",
    "SnapshotParser",
    "StockWidgetError",
    "WidgetConfig",
    "WidgetConfigError",
    "WidgetRefresher",
    "WidgetRenderer",
    "WidgetSnapshot",
    "WidgetStoreError",
    "decode_snapshot",
    "encode_snapshot",
    "get_widget_data",
    "parse_snapshot",
    "update_widget_data",
]
