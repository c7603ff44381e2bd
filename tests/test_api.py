"""Package-level convenience API tests."""

from __future__ import annotations

from typing import Any

from json_gobject.codegen import generate_from_schema


def test_generate_from_raw_schema(widget_schema: dict[str, Any]) -> None:
    result = generate_from_schema(widget_schema, "json", config={"function_prefix": "to_json_"})

    assert result.success, result.error_message
    assert "to_json_widget(" in result.code
    assert result.metadata["language"] == "json-glib"


def test_generate_from_document(widget_document) -> None:
    result = generate_from_schema(widget_document, namespace="app", class_name="widget")

    assert result.success, result.error_message
    assert list(result.files) == [".h", ".c"]


def test_failed_translation_is_reported() -> None:
    result = generate_from_schema({"title": "W", "properties": {"a": {"type": "array"}}}, "builder")

    assert not result.success
    assert result.files == {}
