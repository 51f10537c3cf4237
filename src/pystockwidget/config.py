"""Configuration for pystockwidget."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pystockwidget._constants import DEFAULT_PREFERENCES_NAME, WIDGET_STORAGE_KEY
from pystockwidget.exceptions import WidgetConfigError


def _default_store_dir() -> Path:
    return Path.home() / ".pystockwidget"


@dataclasses.dataclass(frozen=True)
class WidgetConfig:
    """Widget host configuration.

    Parameters
    ----------
    store_dir : Path
        Directory holding the preferences file.
        Defaults to ``~/.pystockwidget``.
    preferences_name : str
        Preferences file name without extension. Defaults to the name the
        app's storage plugin uses, ``"CapacitorStorage"``.
    storage_key : str
        Key the snapshot is stored under. Defaults to ``"widget_data"``.
    """

    store_dir: Path = dataclasses.field(default_factory=_default_store_dir)
    preferences_name: str = DEFAULT_PREFERENCES_NAME
    storage_key: str = WIDGET_STORAGE_KEY

    def __post_init__(self) -> None:
        if not isinstance(self.store_dir, Path):
            object.__setattr__(self, "store_dir", Path(self.store_dir))
        if not self.preferences_name.strip():
            raise WidgetConfigError("preferences_name must not be empty")
        if any(sep in self.preferences_name for sep in ("/", "\\")):
            raise WidgetConfigError(f"preferences_name must be a plain file name, got {self.preferences_name!r}")
        if not self.storage_key:
            raise WidgetConfigError("storage_key must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> WidgetConfig:
        """Create configuration from environment variables.

        Reads ``STOCKWIDGET_STORE_DIR``, ``STOCKWIDGET_PREFERENCES_NAME`` and
        ``STOCKWIDGET_STORAGE_KEY``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "STOCKWIDGET_STORE_DIR": "store_dir",
            "STOCKWIDGET_PREFERENCES_NAME": "preferences_name",
            "STOCKWIDGET_STORAGE_KEY": "storage_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "store_dir" in config_kwargs:
            config_kwargs["store_dir"] = Path(config_kwargs["store_dir"]).expanduser()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
