"""
GObject type mapping.

Maps translated property descriptors to the C fragments a GObject
property needs: field type, GParamSpec constructor, GValue accessors,
constructor parameter and release statement.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.descriptors import ClassDescriptor, PropertyDescriptor, StorageKind
from ...core.naming import NamingCase, class_name_for, type_macro
from ...core.templates import c_string_literal

PARAM_FLAGS = "G_PARAM_READWRITE | G_PARAM_EXPLICIT_NOTIFY | G_PARAM_STATIC_STRINGS"


def canonical_property_name(member: str) -> str:
    """
    Property name as GLib expects it for G_PARAM_STATIC_NAME.

    Canonical names only use letters, digits and "-", so "created_at"
    becomes "created-at".
    """
    return member.replace("_", "-")


def c_declaration(c_type: str, name: str) -> str:
    """Join a C type and a name ("gchar *" + "x" -> "gchar *x")."""
    if c_type.endswith("*"):
        return f"{c_type}{name}"
    return f"{c_type} {name}"


@dataclass(frozen=True)
class GObjectProperty:
    """C fragments for one GObject property."""

    name: str  # struct member and C parameter name
    property_name: str  # canonical GParamSpec name
    nick: str
    enum: str
    c_type: str
    comment: str
    pspec: str
    value_setter: str  # stores a GValue into the struct member
    value_getter: str  # copies the struct member into a GValue
    param_type: str = ""  # type used in public function signatures
    zero_value: str = "NULL"  # returned by getters on a bad instance
    constructor: Optional[str] = None  # parameter, only for required properties
    free: Optional[str] = None  # release statement, only for ref-counted kinds

    @property
    def declaration(self) -> str:
        return c_declaration(self.c_type, self.name)

    @property
    def parameter(self) -> str:
        return c_declaration(self.param_type or self.c_type, self.name)


class GObjectTypeMapper:
    """Map property descriptors to GObject C fragments."""

    def __init__(self, naming_case: NamingCase = NamingCase.CAPITALIZE):
        self.naming_case = naming_case

    def class_name(self, namespace: str, name: str) -> str:
        return class_name_for(self.naming_case, namespace, name)

    def map_property(self, cls: ClassDescriptor, prop: PropertyDescriptor) -> GObjectProperty:
        """
        Build the C fragments for one property of a class.

        Args:
            cls: Class owning the property
            prop: Property to map

        Returns:
            GObjectProperty with every fragment the templates need
        """
        member = f"self->{prop.member_name}"
        property_name = canonical_property_name(prop.member_name)
        head = (
            f"{c_string_literal(property_name)}, "
            f"{c_string_literal(prop.source_name)}, "
            f"{c_string_literal(prop.description)}"
        )

        kind = prop.storage_kind
        free = None
        param_type = None
        zero_value = "NULL"

        if kind == StorageKind.OBJECT:
            c_type = self.class_name(cls.namespace, prop.nested_class) + " *"
            pspec = (
                f"g_param_spec_object({head}, "
                f"{type_macro(cls.namespace, prop.nested_class)}, {PARAM_FLAGS})"
            )
            value_setter = f"{member} = g_value_dup_object(value);"
            value_getter = f"g_value_set_object(value, {member});"
            free = f"g_clear_object(&{member});"

        elif kind == StorageKind.BOOLEAN:
            c_type = "gboolean"
            zero_value = "FALSE"
            pspec = f"g_param_spec_boolean({head}, FALSE, {PARAM_FLAGS})"
            value_setter = f"{member} = g_value_get_boolean(value);"
            value_getter = f"g_value_set_boolean(value, {member});"

        elif kind == StorageKind.INTEGER:
            c_type = "gint64"
            zero_value = "0"
            pspec = (
                f"g_param_spec_int64({head}, G_MININT64, G_MAXINT64, 0, {PARAM_FLAGS})"
            )
            value_setter = f"{member} = g_value_get_int64(value);"
            value_getter = f"g_value_set_int64(value, {member});"

        elif kind == StorageKind.NUMBER:
            c_type = "gdouble"
            zero_value = "0.0"
            pspec = (
                f"g_param_spec_double({head}, -G_MAXDOUBLE, G_MAXDOUBLE, 0.0, "
                f"{PARAM_FLAGS})"
            )
            value_setter = f"{member} = g_value_get_double(value);"
            value_getter = f"g_value_set_double(value, {member});"

        elif kind == StorageKind.STRING:
            c_type = "gchar *"
            param_type = "const gchar *"
            pspec = f"g_param_spec_string({head}, NULL, {PARAM_FLAGS})"
            value_setter = f"{member} = g_value_dup_string(value);"
            value_getter = f"g_value_set_string(value, {member});"
            free = f"g_clear_pointer(&{member}, g_free);"

        else:
            raise ValueError(f"Unhandled storage kind: {kind}")

        return GObjectProperty(
            name=prop.member_name,
            property_name=property_name,
            nick=prop.source_name,
            enum=prop.enum_tag,
            c_type=c_type,
            comment=prop.description,
            pspec=pspec,
            value_setter=value_setter,
            value_getter=value_getter,
            param_type=param_type or c_type,
            zero_value=zero_value,
            constructor=(
                c_declaration(param_type or c_type, prop.member_name)
                if prop.required
                else None
            ),
            free=free,
        )
