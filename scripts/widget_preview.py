#!/usr/bin/env python3
"""Preview what the inventory widget would display.

Reads the stored widget snapshot (or a raw value given on the command
line), runs it through the parser and prints the two widget text slots.

Usage
-----
::

    python scripts/widget_preview.py
    python scripts/widget_preview.py --raw '{"totalStock": 152, "inboundToday": 12}'
    python scripts/widget_preview.py --set-total 152 --set-inbound 12 --widget-id 1 --widget-id 2

Options::

    --store-dir DIR      Preferences directory (default: STOCKWIDGET_STORE_DIR or ~/.pystockwidget)
    --raw STRING         Parse STRING instead of reading the store
    --set-total N        Store a snapshot with N units in stock before previewing
    --set-inbound N      Inbound count for --set-total (default: 0)
    --widget-id ID       Widget instance to refresh (repeatable, default: 0)
    --json               Output as machine-readable JSON
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pystockwidget import (  # noqa: E402
    DisplayState,
    FilePreferences,
    MemoryPreferences,
    RecordingRenderer,
    StockWidgetError,
    WidgetConfig,
    WidgetRefresher,
    WidgetSnapshot,
    update_widget_data,
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview the inventory widget display.")
    parser.add_argument("--store-dir", type=Path, default=None, help="Preferences directory")
    parser.add_argument("--raw", default=None, help="Parse this value instead of reading the store")
    parser.add_argument("--set-total", type=int, default=None, help="Store a snapshot with this stock count first")
    parser.add_argument("--set-inbound", type=int, default=None, help="Inbound count for --set-total (default: 0)")
    parser.add_argument(
        "--widget-id",
        type=int,
        action="append",
        dest="widget_ids",
        default=None,
        help="Widget instance id (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)
    if args.set_inbound is not None and args.set_total is None:
        parser.error("--set-inbound requires --set-total")
    return args


def _format_state(widget_id: int, state: DisplayState) -> str:
    line = f"widget {widget_id}: {state.total_stock}  |  {state.inbound_subtitle}"
    if not state.has_data:
        line += "  (no snapshot stored)"
    return line


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {"store_dir": args.store_dir} if args.store_dir is not None else {}
    try:
        config = WidgetConfig.from_env(**overrides)
    except StockWidgetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.raw is not None:
        store = MemoryPreferences({config.storage_key: args.raw})
    else:
        store = FilePreferences(config.store_dir, config.preferences_name)

    if args.set_total is not None:
        snapshot = WidgetSnapshot.create(args.set_total, args.set_inbound or 0)
        try:
            update_widget_data(store, snapshot, key=config.storage_key)
        except StockWidgetError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    renderer = RecordingRenderer()
    refresher = WidgetRefresher(store, renderer, key=config.storage_key)
    states = refresher.refresh(args.widget_ids or [0])

    if args.json:
        payload = {str(widget_id): state.model_dump(by_alias=True) for widget_id, state in states.items()}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for widget_id, state in states.items():
            print(_format_state(widget_id, state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
