"""GObject generator tests."""

from __future__ import annotations

import re

import pytest

from json_gobject.codegen.core.generator import GeneratorError, generate_code
from json_gobject.codegen.core.schema import parse_schema_document
from json_gobject.codegen.core.translator import translate_document
from json_gobject.codegen.languages.gobject import GObjectGenerator


@pytest.fixture
def generated(widget_document) -> dict[str, str]:
    result = generate_code(
        GObjectGenerator({"namespace": "app"}), widget_document, "app", "widget"
    )
    assert result.success, result.error_message
    return result.files


def test_produces_header_and_source(generated: dict[str, str]) -> None:
    assert list(generated) == [".h", ".c"]


def test_header_declarations(generated: dict[str, str]) -> None:
    header = generated[".h"]

    assert "#ifndef APP_WIDGET_H" in header
    assert "G_BEGIN_DECLS" in header
    assert header.rstrip().endswith("#endif /* APP_WIDGET_H */")
    assert "#define APP_TYPE_WIDGET (app_widget_get_type())" in header
    assert "G_DECLARE_FINAL_TYPE(AppWidget, app_widget, APP, WIDGET, GObject)" in header
    assert "AppWidget *app_widget_new(const gchar *name, AppAddress *address);" in header
    assert "AppAddress *app_address_new(const gchar *street);" in header
    assert "void app_widget_set_count(AppWidget *self, gint64 count);" in header
    assert "const gchar *app_widget_get_name(AppWidget *self);" in header
    assert header.index("G_DECLARE_FINAL_TYPE(AppAddress") < header.index(
        "G_DECLARE_FINAL_TYPE(AppWidget"
    )


def test_source_struct_and_property_ids(generated: dict[str, str]) -> None:
    source = generated[".c"]

    assert '#include "app_widget.h"' in source
    assert "  gchar *name; /**< Display name */" in source
    assert "  AppAddress *address;" in source
    assert "  gint64 count;" in source
    assert "G_DEFINE_TYPE(AppWidget, app_widget, G_TYPE_OBJECT)" in source
    assert "  PROP_WIDGET_NAME = 1,\n  PROP_WIDGET_COUNT,\n" in source
    assert "  PROP_ADDRESS_STREET = 1,\n  PROP_ADDRESS_ZIP,\n" in source
    assert source.index("struct _AppAddress") < source.index("struct _AppWidget")
    # Every type is defined before the first function body
    assert source.index("struct _AppWidget") < source.index("app_address_finalize")


def test_source_lifecycle(generated: dict[str, str]) -> None:
    source = generated[".c"]

    assert "g_clear_object(&self->address);" in source
    assert "g_clear_pointer(&self->name, g_free);" in source
    assert "g_clear_pointer(&self->count" not in source
    assert "G_OBJECT_CLASS(app_widget_parent_class)->finalize(object);" in source
    assert "G_OBJECT_WARN_INVALID_PROPERTY_ID(object, property_id, pspec);" in source
    assert "self->name = g_value_dup_string(value);" in source
    assert "self->address = g_value_dup_object(value);" in source
    assert "self->count = g_value_get_int64(value);" in source
    assert "g_value_set_int64(value, self->count);" in source
    assert (
        'g_param_spec_object("address", "address", "", APP_TYPE_ADDRESS, '
        "G_PARAM_READWRITE | G_PARAM_EXPLICIT_NOTIFY | G_PARAM_STATIC_STRINGS)"
    ) in source
    assert "g_object_class_install_property(object_class, PROP_WIDGET_RATIO, pspec);" in source
    assert 'g_object_new(APP_TYPE_WIDGET,\n                      "name", name,\n' in source
    assert "g_return_val_if_fail(APP_IS_WIDGET(self), FALSE);" in source


def test_class_without_required_properties_takes_void(widget_document) -> None:
    document = parse_schema_document(
        {"title": "Empty", "properties": {"note": {"type": "string"}}}
    )
    result = generate_code(GObjectGenerator({"namespace": "app"}), document, "app", "empty")

    assert "AppEmpty *app_empty_new(void);" in result.files[".h"]


def test_class_without_properties_reserves_zero_id() -> None:
    document = parse_schema_document({"title": "Empty", "properties": {}})
    result = generate_code(GObjectGenerator({"namespace": "app"}), document, "app", "empty")

    assert result.success
    assert "PROP_EMPTY_0 = 0," in result.files[".c"]
    assert "Class 'empty' has no properties" in result.warnings


def test_camel_class_case() -> None:
    document = parse_schema_document(
        {
            "title": "Person",
            "properties": {
                "homeAddress": {"type": "object", "properties": {"city": {"type": "string"}}}
            },
        }
    )
    generator = GObjectGenerator({"namespace": "app", "class_case": "camel"})
    header = generate_code(generator, document, "app", "person").files[".h"]

    assert "G_DECLARE_FINAL_TYPE(AppHomeAddress, app_homeAddress, APP, HOMEADDRESS, GObject)" in header


def test_no_comments() -> None:
    document = parse_schema_document(
        {"title": "W", "properties": {"a": {"type": "string", "description": "hidden"}}}
    )
    generator = GObjectGenerator({"namespace": "app", "add_comments": False})
    result = generate_code(generator, document, "app", "w")

    assert "hidden" not in result.files[".c"].split("G_DEFINE_TYPE")[0]


def test_warnings_for_colliding_members() -> None:
    document = parse_schema_document(
        {
            "title": "Widget",
            "properties": {
                "type": {"type": "string"},
                "default": {"type": "boolean"},
                "a": {"type": "object", "properties": {"info": {"type": "object", "properties": {}}}},
                "b": {"type": "object", "properties": {"info": {"type": "object", "properties": {}}}},
            },
        }
    )
    result = generate_code(GObjectGenerator({"namespace": "app"}), document, "app", "widget")

    assert result.success
    joined = "\n".join(result.warnings)
    assert "app_widget_get_type" in joined
    assert "C keyword 'default'" in joined
    assert "Class name 'info' is generated 2 times" in joined


def test_unsupported_type_produces_no_files() -> None:
    document = parse_schema_document(
        {"title": "Widget", "properties": {"tags": {"type": "array"}}}
    )
    result = generate_code(GObjectGenerator({"namespace": "app"}), document, "app", "widget")

    assert not result.success
    assert result.files == {}
    assert result.error_message.startswith("Translation failed:")


def test_namespace_is_required(widget_document) -> None:
    classes = translate_document(widget_document, "")

    with pytest.raises(GeneratorError):
        GObjectGenerator().generate(classes, "widget")


def test_metadata(widget_document) -> None:
    result = generate_code(GObjectGenerator({"namespace": "app"}), widget_document, "app", "widget")

    assert result.metadata["classes"] == ["address", "widget"]
    assert result.metadata["property_counts"] == [2, 6]
    assert result.metadata["root_class"] == "widget"


def test_generate_single_class(widget_document) -> None:
    address = translate_document(widget_document, "app")[0]

    code = GObjectGenerator({"namespace": "app"}).generate_single_class(address)

    assert code.index("G_DECLARE_FINAL_TYPE(AppAddress") < code.index("struct _AppAddress")
    assert "app_address_class_init(AppAddressClass *klass)" in code


def test_property_names_are_canonical(widget_document) -> None:
    source = generate_code(
        GObjectGenerator({"namespace": "app"}), widget_document, "app", "widget"
    ).files[".c"]

    names = re.findall(r"g_param_spec_\w+\(\"([^\"]*)\"", source)
    assert "created-at" in names
    assert all("_" not in name for name in names)
    assert 'g_object_set(self, "created-at", created_at, NULL);' in source
    assert "self->created_at = g_value_dup_string(value);" in source


def test_indent_size(widget_document) -> None:
    generator = GObjectGenerator({"namespace": "app", "indent_size": 4})
    source = generate_code(generator, widget_document, "app", "widget").files[".c"]

    assert "    gchar *name;" in source
    assert "\n    switch ((AppWidgetProperty) property_id)\n        {\n        case PROP_WIDGET_NAME:\n            g_value_set_string(value, self->name);\n" in source
    assert 'g_object_new(APP_TYPE_WIDGET,\n                        "name", name,\n' in source
