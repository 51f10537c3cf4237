"""Base model for widget records.

Every pystockwidget model inherits from :class:`StockWidgetModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys the mobile app
  writes map automatically to snake_case fields.
* ``frozen=True`` so snapshots and display states are immutable values.
* ``extra="ignore"`` so unknown keys in a stored record are tolerated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StockWidgetModel(BaseModel):
    """Base for pystockwidget models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
