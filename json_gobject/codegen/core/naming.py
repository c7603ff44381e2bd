"""
Naming utilities for the generated C code.

Schema keys and titles are turned into two identifier styles: snake_case
member names for fields, functions and property ids, and capitalized
class identifiers for the GObject type names. The two rules differ
(see class_identifier).
"""

import re
from enum import Enum

# Split before a capital that starts a lowercase run ("IDValue" -> "ID_Value")
_FIRST_CAP_RE = re.compile(r"(.)([A-Z][a-z]+)")
# Split between a lowercase letter or digit and a capital ("MyID" -> "My_ID")
_ALL_CAP_RE = re.compile(r"([a-z0-9])([A-Z])")


class NamingCase(Enum):
    """How class identifiers are built from namespace and class name."""

    CAPITALIZE = "capitalize"  # AppHomeaddress
    CAMEL = "camel"  # AppHomeAddress


C_RESERVED_WORDS = {
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "inline", "int", "long", "register", "restrict", "return", "short",
    "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
    "unsigned", "void", "volatile", "while", "_Bool", "_Complex",
    "_Imaginary", "bool", "true", "false",
}

# Field every generated instance struct already has
PARENT_INSTANCE_MEMBER = "parent_instance"


def member_name(name: str) -> str:
    """
    Convert a schema key into a lowercase underscore-separated identifier.

    Acronym runs stay together: "HTTPServer" -> "http_server",
    "MyID" -> "my_id", "IDValue" -> "id_value". Already normalized
    names pass through unchanged.
    """
    snake = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", snake)
    return snake.lower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def class_identifier(namespace: str, name: str) -> str:
    """
    Build a class identifier from a namespace and a class name.

    Each part is reduced to "first letter upper, rest lower" and the parts
    are concatenated. Word boundaries inside either part are NOT kept:
    ("app", "homeAddress") -> "AppHomeaddress". Use
    camel_class_identifier for boundary-preserving names.
    """
    return _capitalize(namespace) + _capitalize(name)


def camel_class_identifier(namespace: str, name: str) -> str:
    """Build a class identifier keeping the word boundaries member_name finds."""
    words = member_name(namespace).split("_") + member_name(name).split("_")
    return "".join(_capitalize(word) for word in words if word)


def class_name_for(case: NamingCase, namespace: str, name: str) -> str:
    """Build a class identifier using the configured naming case."""
    if case == NamingCase.CAMEL:
        return camel_class_identifier(namespace, name)
    return class_identifier(namespace, name)


def function_name(title: str, prefix: str = "") -> str:
    """Lowercase a title and replace spaces with underscores."""
    return prefix + title.lower().replace(" ", "_")


def symbol_prefix(namespace: str, name: str) -> str:
    """Prefix shared by every function of a generated class (ns_name)."""
    return f"{namespace}_{name}"


def type_macro(namespace: str, name: str) -> str:
    """GType macro name, e.g. APP_TYPE_WIDGET."""
    return f"{namespace.upper()}_TYPE_{name.upper()}"


def cast_macro(namespace: str, name: str) -> str:
    """Instance cast macro name, e.g. APP_WIDGET."""
    return f"{namespace.upper()}_{name.upper()}"


def enum_tag(class_name: str, key: str) -> str:
    """Property id enumerator, e.g. PROP_WIDGET_NAME."""
    return f"PROP_{member_name(class_name).upper()}_{member_name(key).upper()}"


def is_c_reserved(name: str) -> bool:
    """Check whether an identifier clashes with a C keyword."""
    return name in C_RESERVED_WORDS


def is_c_identifier(name: str) -> bool:
    """Check whether a string is a valid (ASCII) C identifier."""
    return re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name) is not None
