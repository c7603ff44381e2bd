"""json-glib serializer generator tests."""

from __future__ import annotations

from json_gobject.codegen.core.generator import generate_code
from json_gobject.codegen.core.schema import parse_schema_document
from json_gobject.codegen.languages.json_glib import JsonGlibGenerator


def _code(document, **config) -> str:
    result = generate_code(JsonGlibGenerator(config or None), document)
    assert result.success, result.error_message
    return result.files[".c"]


def test_one_function_per_class_nested_first(widget_document) -> None:
    code = _code(widget_document)

    assert "static JsonObject *\ncreate_address(const gchar *street, gint64 zip)" in code
    assert code.index("create_address(") < code.index("create_widget(")


def test_required_parameters_come_first(widget_document) -> None:
    code = _code(widget_document)

    assert (
        "create_widget(const gchar *name, JsonObject *address, gint64 count, "
        "gboolean enabled, gdouble ratio, GDateTime *created_at)"
    ) in code


def test_required_pointers_are_asserted(widget_document) -> None:
    code = _code(widget_document)

    assert "g_assert(name);" in code
    assert "g_assert(address);" in code
    assert "g_assert(count);" not in code
    assert "g_assert(created_at);" not in code


def test_member_setters(widget_document) -> None:
    code = _code(widget_document)

    assert 'json_object_set_string_member(obj, "name", name);' in code
    assert 'json_object_set_int_member(obj, "count", count);' in code
    assert 'json_object_set_boolean_member(obj, "enabled", enabled);' in code
    assert 'json_object_set_double_member(obj, "ratio", ratio);' in code
    assert 'json_object_set_object_member(obj, "address", address);' in code
    assert "  return obj;\n}" in code


def test_date_time_is_formatted_and_freed(widget_document) -> None:
    code = _code(widget_document)

    assert "gchar *created_at_str = NULL;" in code
    assert "if (created_at != NULL)" in code
    assert "created_at_str = g_date_time_format_iso8601(created_at);" in code
    assert 'json_object_set_string_member(obj, "createdAt", created_at_str);' in code
    assert code.index('"createdAt", created_at_str') < code.index("g_free(created_at_str);")


def test_custom_formatter_and_prefix(widget_document) -> None:
    code = _code(
        widget_document,
        function_prefix="build_",
        datetime_formatter="my_rfc3339",
    )

    assert "build_widget(" in code
    assert "created_at_str = my_rfc3339(created_at);" in code


def test_gtk_doc_comments(widget_document) -> None:
    commented = _code(widget_document)
    bare = _code(widget_document, add_comments=False)

    assert " * create_widget:\n" in commented
    assert " * @name: Display name\n" in commented
    assert " * @count: count\n" in commented
    assert "/**" not in bare


def test_class_without_properties_takes_void() -> None:
    document = parse_schema_document({"title": "Empty", "properties": {}})

    assert "create_empty(void)" in _code(document)


def test_parameter_docs_follow_signature_order(widget_document) -> None:
    code = _code(widget_document)

    assert code.index(" * @address:") < code.index(" * @count:")
    assert code.index(" * @name:") < code.index(" * @address:")


def test_indent_size(widget_document) -> None:
    default = _code(widget_document)
    wide = _code(widget_document, indent_size=4)

    assert wide != default
    assert "\n    obj = json_object_new();\n" in wide
    assert "\n    if (created_at != NULL)\n        {\n            created_at_str = " in wide
    assert "\n  obj = json_object_new();\n" in default
