"""Shared fixtures for the json-gobject test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from json_gobject.codegen.core.schema import SchemaDocument, parse_schema_document


@pytest.fixture
def widget_schema() -> dict[str, Any]:
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "Widget",
        "description": "A widget on screen",
        "type": "object",
        "required": ["name", "address"],
        "properties": {
            "name": {"type": "string", "description": "Display name"},
            "count": {"type": "integer"},
            "enabled": {"type": "boolean"},
            "ratio": {"type": "number"},
            "createdAt": {"type": "string", "format": "date-time"},
            "address": {
                "type": "object",
                "required": ["street"],
                "properties": {
                    "street": {"type": "string"},
                    "zip": {"type": "integer"},
                },
            },
        },
    }


@pytest.fixture
def widget_document(widget_schema: dict[str, Any]) -> SchemaDocument:
    return parse_schema_document(widget_schema, "widget.json")


@pytest.fixture
def write_schema(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a JSON value to a file under tmp_path and return its path."""

    def _write(data: Any, name: str = "schema.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
