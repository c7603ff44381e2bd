"""Schema document decoding tests."""

from __future__ import annotations

from typing import Any

import pytest

from json_gobject.codegen.core.schema import (
    SchemaDecodeError,
    iter_properties,
    parse_schema_document,
)


def test_decodes_consumed_fields(widget_schema: dict[str, Any]) -> None:
    document = parse_schema_document(widget_schema, "widget.json")

    assert document.title == "Widget"
    assert document.description == "A widget on screen"
    assert document.required == {"name", "address"}
    assert document.schema_uri == "https://json-schema.org/draft/2020-12/schema"
    assert list(document.properties) == [
        "name",
        "count",
        "enabled",
        "ratio",
        "createdAt",
        "address",
    ]

    address = document.properties["address"]
    assert address.is_object
    assert address.required == {"street"}
    assert list(address.properties) == ["street", "zip"]
    assert document.properties["createdAt"].format == "date-time"
    assert document.properties["name"].description == "Display name"


def test_unknown_fields_are_ignored() -> None:
    document = parse_schema_document(
        {"title": "T", "additionalProperties": False, "properties": {"a": {"type": "string", "minLength": 2}}}
    )

    assert list(document.properties) == ["a"]


def test_missing_type_decodes_to_empty_string() -> None:
    document = parse_schema_document({"properties": {"a": {"description": "untyped"}}})

    assert document.properties["a"].type == ""


def test_nested_properties_on_non_object_are_ignored() -> None:
    document = parse_schema_document(
        {"properties": {"a": {"type": "string", "properties": {"b": {"type": "string"}}}}}
    )

    assert document.properties["a"].properties == {}


def test_examples_are_kept_only_when_a_list() -> None:
    document = parse_schema_document(
        {
            "properties": {
                "a": {"type": "string", "examples": ["x", "y"]},
                "b": {"type": "string", "examples": "xy"},
            }
        }
    )

    assert document.properties["a"].examples == ["x", "y"]
    assert document.properties["b"].examples == []


def test_root_must_be_an_object() -> None:
    with pytest.raises(SchemaDecodeError) as excinfo:
        parse_schema_document(["not", "a", "schema"], "list.json")

    assert excinfo.value.location == "/"
    assert "list.json" in str(excinfo.value)
    assert "array" in str(excinfo.value)


@pytest.mark.parametrize(
    ("data", "location"),
    [
        ({"properties": []}, "/properties"),
        ({"properties": {"a": "string"}}, "/properties/a"),
        ({"properties": {"a": {"type": 3}}}, "/properties/a/type"),
        ({"properties": {"a": {"type": "string", "description": 1}}}, "/properties/a/description"),
        ({"required": "a"}, "/required"),
        (
            {"properties": {"a": {"type": "object", "required": [1]}}},
            "/properties/a/required",
        ),
        ({"title": ["x"]}, "/title"),
    ],
)
def test_decode_errors_report_location(data: dict[str, Any], location: str) -> None:
    with pytest.raises(SchemaDecodeError) as excinfo:
        parse_schema_document(data, "bad.json")

    assert excinfo.value.location == location
    assert excinfo.value.source == "bad.json"


def test_iter_properties_order(widget_document) -> None:
    keys = [key for key, _ in iter_properties(widget_document.properties)]
    sorted_keys = [key for key, _ in iter_properties(widget_document.properties, sort=True)]

    assert keys[0] == "name"
    assert sorted_keys == sorted(keys)
