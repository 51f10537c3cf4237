"""Snapshot codec.

Decodes the value stored under the widget key into a
:class:`~pystockwidget.models.snapshot.WidgetSnapshot` and encodes
snapshots back into the JSON the mobile app writes.

Decoding is total: an absent value and a value that is not a JSON object
both come back as ``None``. Field-level problems (missing keys, values that
are not integers) are left to the model, which maps them to ``None``.
"""

from __future__ import annotations

import json
import logging

from pystockwidget.models.snapshot import WidgetSnapshot

_logger = logging.getLogger(__name__)

RawSnapshot = str | bytes | bytearray | None


def _to_text(raw: str | bytes | bytearray) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            _logger.debug("Stored widget snapshot is not valid UTF-8 (%d bytes)", len(raw))
            return None
    _logger.debug("Stored widget snapshot has unsupported type %s", type(raw).__name__)
    return None


def _parse_json_int(literal: str) -> int | None:
    try:
        return int(literal)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit; the field reads as missing.
        _logger.debug("Ignoring %d-digit integer in stored widget snapshot", len(literal))
        return None


def decode_snapshot(raw: RawSnapshot) -> WidgetSnapshot | None:
    """Decode a stored snapshot, returning ``None`` when there is no usable record."""
    if raw is None:
        return None
    text = _to_text(raw)
    if text is None:
        return None
    try:
        payload = json.loads(text, parse_int=_parse_json_int)
    except (ValueError, RecursionError):
        _logger.debug("Stored widget snapshot is not JSON: %.64r", text)
        return None
    if not isinstance(payload, dict):
        _logger.debug("Stored widget snapshot is not a JSON object: %s", type(payload).__name__)
        return None
    return WidgetSnapshot.model_validate(payload)


def encode_snapshot(snapshot: WidgetSnapshot) -> str:
    """Serialize *snapshot* as compact camelCase JSON, omitting unset counters."""
    payload = snapshot.model_dump(by_alias=True, exclude_none=True)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
