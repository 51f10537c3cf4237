from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "widget_preview.py"


@pytest.fixture
def preview(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> ModuleType:
    monkeypatch.setenv("STOCKWIDGET_STORE_DIR", str(tmp_path))
    monkeypatch.delenv("STOCKWIDGET_PREFERENCES_NAME", raising=False)
    monkeypatch.delenv("STOCKWIDGET_STORAGE_KEY", raising=False)
    spec = importlib.util.spec_from_file_location("widget_preview", _SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_set_inbound_without_set_total_is_rejected(
    preview: ModuleType, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        preview.main(["--set-inbound", "3"])
    assert exc_info.value.code == 2
    assert "--set-inbound requires --set-total" in capsys.readouterr().err


def test_empty_store_is_marked_as_placeholder(preview: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    assert preview.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("widget 0: --")
    assert "(no snapshot stored)" in out


def test_stored_snapshot_is_shown(preview: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    assert preview.main(["--set-total", "152", "--set-inbound", "12", "--widget-id", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("widget 1: 152")
    assert out.rstrip().endswith("12")
    assert "(no snapshot stored)" not in out


def test_json_output(preview: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    assert preview.main(["--raw", '{"totalStock": 4}', "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["0"]["totalStock"] == "4"
