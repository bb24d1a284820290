"""dynamic-sql-support package.

Generates MyBatis Dynamic SQL support classes from introspected table
metadata, and exposes the generator as Model Context Protocol (FastMCP) tools.
"""

from dynamic_sql_support.generator import (
    DynamicSqlSupportClassBuilder,
    DynamicSqlSupportPlugin,
    build_support_class,
)
from dynamic_sql_support.java import JavaField, JavaInnerClass, JavaMethod, JavaTopLevelClass
from dynamic_sql_support.models import (
    ColumnMetadata,
    NamingOptions,
    SupportClassResult,
    TableMetadata,
)
from dynamic_sql_support.services import ConfigService, SupportGenerationService

__all__ = [  # noqa: RUF022
    # Core models
    "ColumnMetadata",
    "NamingOptions",
    "SupportClassResult",
    "TableMetadata",
    # Java class model
    "JavaField",
    "JavaInnerClass",
    "JavaMethod",
    "JavaTopLevelClass",
    # Generator
    "DynamicSqlSupportClassBuilder",
    "DynamicSqlSupportPlugin",
    "build_support_class",
    # Services
    "ConfigService",
    "SupportGenerationService",
]
