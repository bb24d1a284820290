"""Java source model and naming helpers.

Main Components:
- dom: immutable class, field, and method descriptions
- naming: pure string helpers (boxing, property names, escaping, imports)
"""

from .dom import JavaField, JavaInnerClass, JavaMethod, JavaTopLevelClass, Visibility
from .naming import (
    boxed_type,
    capitalize,
    escape_java_string,
    explicit_imports,
    is_blank,
    is_java_identifier,
    is_primitive,
    package_name,
    short_name,
    valid_property_name,
)

__all__ = [
    "JavaField",
    "JavaInnerClass",
    "JavaMethod",
    "JavaTopLevelClass",
    "Visibility",
    "boxed_type",
    "capitalize",
    "escape_java_string",
    "explicit_imports",
    "is_blank",
    "is_java_identifier",
    "is_primitive",
    "package_name",
    "short_name",
    "valid_property_name",
]
