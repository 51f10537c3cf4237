"""Key-value preferences storage.

The mobile app persists the widget snapshot through a shared preferences
file; these stores stand in for it on the Python side. Values are always
strings, and a key that was never written reads as ``None``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from pystockwidget._constants import DEFAULT_PREFERENCES_NAME
from pystockwidget.exceptions import WidgetStoreError

_logger = logging.getLogger(__name__)


class PreferencesStore(Protocol):
    """Minimal string key-value store interface."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryPreferences:
    """Dict-backed store, mostly for tests and previews."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class FilePreferences:
    """Store backed by a single JSON object file.

    The file lives at ``<directory>/<name>.json`` and is created on the
    first write. Writes replace the file atomically.
    """

    def __init__(self, directory: str | os.PathLike[str], name: str = DEFAULT_PREFERENCES_NAME) -> None:
        self._path = Path(directory) / f"{name}.json"

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is None or isinstance(value, str):
            return value
        _logger.debug("Ignoring non-string preference %r in %s", key, self._path)
        return None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)

    def _load(self) -> dict[str, Any]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise WidgetStoreError(f"cannot read preferences file {self._path}: {exc}", path=self._path) from exc
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise WidgetStoreError(f"preferences file {self._path} is not valid JSON", path=self._path) from exc
        if not isinstance(data, dict):
            raise WidgetStoreError(f"preferences file {self._path} is not a JSON object", path=self._path)
        return data

    def _dump(self, data: dict[str, Any]) -> None:
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.stem}.", suffix=".tmp")
        except OSError as exc:
            raise WidgetStoreError(f"cannot write preferences file {self._path}: {exc}", path=self._path) from exc

        replaced = False
        try:
            try:
                handle = os.fdopen(fd, "w", encoding="utf-8")
            except BaseException:
                os.close(fd)
                raise
            with handle:
                json.dump(data, handle, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
            replaced = True
        except OSError as exc:
            raise WidgetStoreError(f"cannot write preferences file {self._path}: {exc}", path=self._path) from exc
        finally:
            if not replaced and os.path.exists(tmp_name):
                os.unlink(tmp_name)
