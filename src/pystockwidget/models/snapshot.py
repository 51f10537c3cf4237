"""Stored inventory snapshot model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from pystockwidget._constants import LAST_UPDATED_FORMAT
from pystockwidget.ingestion.normalize import safe_int, safe_str
from pystockwidget.models._base import StockWidgetModel


class WidgetSnapshot(StockWidgetModel):
    """Inventory counters as the app stores them for the widget.

    Every field is optional: a counter is ``None`` when the stored record
    lacks it or holds something that is not an integer. Numbers are
    truncated toward zero and numeric strings are accepted.

    Parameters
    ----------
    total_stock : int or None
        Units currently in stock (``totalStock``).
    inbound_today : int or None
        Units received today (``inboundToday``).
    last_updated : str or None
        Local time the app wrote the record (``lastUpdated``).
    raw : dict
        The payload the model was validated from.
    """

    # Stored records are read by their camelCase keys only.
    model_config = ConfigDict(validate_by_alias=True, validate_by_name=False)

    total_stock: int | None = None
    inbound_today: int | None = None
    last_updated: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @classmethod
    def create(
        cls,
        total_stock: int,
        inbound_today: int,
        last_updated: str | None = None,
    ) -> WidgetSnapshot:
        """Build a snapshot for storage, stamping the current local time when omitted."""
        if last_updated is None:
            last_updated = datetime.now().strftime(LAST_UPDATED_FORMAT)
        return cls.model_validate(
            {"total_stock": total_stock, "inbound_today": inbound_today, "last_updated": last_updated},
            by_name=True,
        )

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # "raw" is reserved; a stored record can never override it.
        merged = dict(values)
        merged["raw"] = dict(values)
        return merged

    @field_validator("total_stock", "inbound_today", mode="before")
    @classmethod
    def _coerce_counts(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("last_updated", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return safe_str(value)
