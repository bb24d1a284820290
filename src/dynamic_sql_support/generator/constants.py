"""Constants for dynamic SQL support class generation.

This module contains the fully-qualified names of the MyBatis Dynamic SQL
types referenced by generated code and the plugin property keys.
"""

from __future__ import annotations

from typing import Final


class Constants:
    """Configuration constants for support class generation."""

    # Generated class naming
    SUPPORT_CLASS_SUFFIX: Final[str] = "DynamicSqlSupport"
    DEFAULT_TABLE_CLASS_SUFFIX: Final[str] = ""
    DEFAULT_TABLE_ALIAS_FIELD_NAME: Final[str] = "tableAlias"

    # Types imported by every support class
    SQL_COLUMN_TYPE: Final[str] = "org.mybatis.dynamic.sql.SqlColumn"
    SQL_TABLE_TYPE: Final[str] = "org.mybatis.dynamic.sql.SqlTable"
    JDBC_TYPE: Final[str] = "java.sql.JDBCType"
    STRING_TYPE: Final[str] = "java.lang.String"

    # Plugin property keys
    TABLE_CLASS_SUFFIX: Final[str] = "tableClassSuffix"
    ADD_ALIASED_COLUMNS: Final[str] = "addAliasedColumns"
    ADD_TABLE_ALIAS: Final[str] = "addTableAlias"
    TABLE_ALIAS_FIELD_NAME: Final[str] = "tableAliasFieldName"

    PLUGIN_PROPERTIES: Final[frozenset[str]] = frozenset(
        {TABLE_CLASS_SUFFIX, ADD_ALIASED_COLUMNS, ADD_TABLE_ALIAS, TABLE_ALIAS_FIELD_NAME}
    )

    # @Generated annotation defaults
    GENERATED_ANNOTATION_TYPE: Final[str] = "jakarta.annotation.Generated"
    GENERATOR_NAME: Final[str] = "dynamic_sql_support"


__all__ = ["Constants"]
