"""Dynamic SQL support class generation.

Main Components:
- DynamicSqlSupportClassBuilder: per-table transformation into a class model
- DynamicSqlSupportPlugin: host-facing adapter driven by string properties
- Comment generators: injected annotation capability
- Exceptions: plugin configuration errors

Example Usage:
    >>> from dynamic_sql_support.generator import build_support_class
    >>> support_class = build_support_class(table, NamingOptions(table_class_suffix="Table"))
    >>> support_class.type
    'com.example.mapper.OrderDynamicSqlSupport'
"""

from .comments import (
    CommentGenerator,
    GeneratedAnnotationCommentGenerator,
    GeneratedAnnotations,
    NoCommentGenerator,
)
from .constants import Constants
from .exceptions import PluginConfigurationError, SupportGeneratorError
from .plugin import (
    DynamicSqlSupportPlugin,
    naming_options_from_properties,
    parse_flag,
    validate_naming_options,
)
from .support_class import (
    DynamicSqlSupportClassBuilder,
    build_support_class,
    column_field_type,
    column_initializer,
    extra_alias_fields,
    support_class_name,
)

__all__ = [
    "CommentGenerator",
    "Constants",
    "DynamicSqlSupportClassBuilder",
    "DynamicSqlSupportPlugin",
    "GeneratedAnnotationCommentGenerator",
    "GeneratedAnnotations",
    "NoCommentGenerator",
    "PluginConfigurationError",
    "SupportGeneratorError",
    "build_support_class",
    "column_field_type",
    "column_initializer",
    "extra_alias_fields",
    "naming_options_from_properties",
    "parse_flag",
    "support_class_name",
    "validate_naming_options",
]
