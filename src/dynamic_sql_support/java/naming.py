"""Naming and formatting helpers for generated Java code.

This module contains small pure functions used when turning table metadata
into Java declarations. None of them depend on the class model, so they can be
tested and reused on their own.

Functions:
- is_primitive() / boxed_type(): primitive detection and boxing
- capitalize(): upper-case the first character only
- valid_property_name(): JavaBeans property name for a class name
- escape_java_string(): make text safe inside a Java string literal
- short_name() / package_name(): split fully-qualified type names
- explicit_imports(): types that need an import statement
- is_blank() / is_java_identifier(): string predicates
"""

from __future__ import annotations

import re
from typing import Final

PRIMITIVE_WRAPPERS: Final[dict[str, str]] = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "double": "Double",
    "float": "Float",
    "int": "Integer",
    "long": "Long",
    "short": "Short",
}

JAVA_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
    }
)

# A dotted name whose leading segments are lower-case package names.
_QUALIFIED_NAME: Final[re.Pattern[str]] = re.compile(
    r"\b((?:[a-z_$][\w$]*\.)+)([A-Za-z_$][\w$]*)"
)
_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][\w$]*")

IMPLICIT_PACKAGE: Final[str] = "java.lang"


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def is_primitive(type_name: str) -> bool:
    return type_name in PRIMITIVE_WRAPPERS


def boxed_type(type_name: str) -> str:
    """Replace a primitive type with its wrapper; other types pass through.

    Example:
        >>> boxed_type("int")
        'Integer'
        >>> boxed_type("BigDecimal")
        'BigDecimal'
    """
    return PRIMITIVE_WRAPPERS.get(type_name, type_name)


def capitalize(value: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike ``str.capitalize`` this does not lower-case the remainder, so
    ``capitalize("orderId")`` is ``"OrderId"``.
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def valid_property_name(value: str) -> str:
    """Return the JavaBeans property name for an identifier.

    The first character is lower-cased unless the second character is upper
    case, in which case the name is kept as-is (``URLTable`` stays
    ``URLTable``). Single characters are lower-cased.

    Example:
        >>> valid_property_name("OrderDynamicSqlSupportTable")
        'orderDynamicSqlSupportTable'
    """
    if len(value) < 2:  # noqa: PLR2004
        return value.lower()
    if value[0].isupper() and not value[1].isupper():
        return value[0].lower() + value[1:]
    return value


def escape_java_string(value: str) -> str:
    """Escape backslashes and double quotes for a Java string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def short_name(type_name: str) -> str:
    """Strip package qualifiers, including inside type arguments.

    Example:
        >>> short_name("java.util.List<java.math.BigDecimal>")
        'List<BigDecimal>'
    """
    return _QUALIFIED_NAME.sub(r"\2", type_name)


def package_name(type_name: str) -> str:
    """Return the package of a fully-qualified type, or "" when unqualified."""
    base = type_name.split("<", 1)[0].strip()
    match = _QUALIFIED_NAME.match(base)
    if match is None:
        return ""
    return match.group(1).rstrip(".")


def explicit_imports(type_name: str) -> list[str]:
    """List the qualified types in ``type_name`` that need an import.

    Primitives, unqualified names, and ``java.lang`` types are implicit.
    """
    imports: list[str] = []
    for match in _QUALIFIED_NAME.finditer(type_name):
        qualified = match.group(0)
        if match.group(1).rstrip(".") == IMPLICIT_PACKAGE:
            continue
        if qualified not in imports:
            imports.append(qualified)
    return imports


def is_java_identifier(value: str | None) -> bool:
    """Return True when ``value`` can be used as a Java identifier."""
    if value is None or not _IDENTIFIER.fullmatch(value):
        return False
    return value not in JAVA_KEYWORDS
