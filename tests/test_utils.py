"""Schema loading tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import requests

from json_gobject import utils
from json_gobject.codegen.core.schema import SchemaDecodeError
from json_gobject.utils import JSONLoaderError, is_url, load_json, load_schema


class _FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, content_type: str = "application/json"):
        self._payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_load_json_from_file(write_schema, widget_schema) -> None:
    path = write_schema(widget_schema)

    source, data = load_json(path)

    assert source == str(path)
    assert data["title"] == "Widget"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(JSONLoaderError, match="File not found"):
        load_json(tmp_path / "nope.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(JSONLoaderError, match="Invalid JSON"):
        load_json(path)


def test_empty_source() -> None:
    with pytest.raises(JSONLoaderError):
        load_json("")


def test_url_detection() -> None:
    assert is_url("https://example.com/schema.json")
    assert is_url("http://example.com/s")
    assert not is_url("schemas/widget.json")
    assert not is_url(Path("https://example.com"))


def test_load_json_from_url(monkeypatch: pytest.MonkeyPatch, widget_schema) -> None:
    calls = []

    def fake_get(url: str, timeout: int) -> _FakeResponse:
        calls.append((url, timeout))
        return _FakeResponse(widget_schema)

    monkeypatch.setattr(utils.requests, "get", fake_get)

    document = load_schema("https://example.com/widget.json")

    assert calls == [("https://example.com/widget.json", 30)]
    assert document.title == "Widget"


def test_url_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: _FakeResponse(status_code=404))

    with pytest.raises(JSONLoaderError, match="HTTP error 404"):
        load_json("https://example.com/widget.json")


def test_url_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(url: str, timeout: int) -> _FakeResponse:
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(utils.requests, "get", fake_get)

    with pytest.raises(JSONLoaderError, match="Connection error"):
        load_json("https://example.com/widget.json")


def test_url_invalid_body(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout: _FakeResponse(ValueError("no json"))
    )

    with pytest.raises(JSONLoaderError, match="Invalid JSON response"):
        load_json("https://example.com/widget.json")


def test_load_schema_reports_source_on_decode_error(write_schema) -> None:
    path = write_schema({"properties": {"a": {"type": 1}}})

    with pytest.raises(SchemaDecodeError) as excinfo:
        load_schema(path)

    assert str(path) in str(excinfo.value)
    assert excinfo.value.location == "/properties/a/type"
