"""Pydantic models for host metadata, naming options, and tool results.

The host framework owns table and column metadata; these models only describe
the read-only view the generator needs. Keeping the surface small keeps the
generator independent of any particular host.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from dynamic_sql_support.java.dom import JavaTopLevelClass

# -----------------------
# Host metadata
# -----------------------


class ColumnMetadata(BaseModel):
    """Introspected column as seen by the generator."""

    model_config = ConfigDict(frozen=True)

    java_property: str = Field(description="Java property name, e.g. 'orderId'")
    java_type: str = Field(
        description=(
            "Java value type, fully qualified unless primitive. "
            "Example: 'java.math.BigDecimal', 'int', 'java.lang.String'"
        )
    )
    jdbc_type_name: str = Field(description="java.sql.JDBCType constant name, e.g. 'INTEGER'")
    actual_column_name: str = Field(description="Column name as defined in the database")
    type_handler: str | None = Field(
        default=None, description="Fully-qualified custom type handler, if any"
    )
    table_alias: str | None = Field(
        default=None, description="Alias of the table this column is selected through"
    )
    is_column_name_delimited: bool = Field(
        default=False, description="Whether the column name must be quoted in SQL"
    )
    beginning_delimiter: str = Field(default='"', description="Opening identifier delimiter")
    ending_delimiter: str = Field(default='"', description="Closing identifier delimiter")

    @property
    def escaped_column_name(self) -> str:
        """Column name as it must appear in SQL, delimited when required."""
        if self.is_column_name_delimited:
            return f"{self.beginning_delimiter}{self.actual_column_name}{self.ending_delimiter}"
        return self.actual_column_name


class TableMetadata(BaseModel):
    """Introspected table as seen by the generator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Table name used in generated comments, e.g. 'sales.orders'")
    runtime_name: str = Field(
        description="Fully-qualified table name used at runtime in SQL statements"
    )
    alias: str | None = Field(default=None, description="Configured table alias")
    domain_object_name: str = Field(description="Domain object name, e.g. 'Order'")
    mapper_type: str = Field(
        description="Fully-qualified mapper interface, e.g. 'com.example.mapper.OrderMapper'"
    )
    base_record_type: str | None = Field(
        default=None, description="Fully-qualified record class, e.g. 'com.example.model.Order'"
    )
    columns: tuple[ColumnMetadata, ...] = Field(
        default=(), description="All columns in declaration order"
    )


# -----------------------
# Generator configuration
# -----------------------


class NamingOptions(BaseModel):
    """Naming and aliasing options for one support class."""

    model_config = ConfigDict(frozen=True)

    table_class_suffix: str = Field(
        default="", description="Appended to the domain object name to name the table class"
    )
    add_aliased_columns: bool = Field(
        default=False,
        description="Emit '<alias><Field>' duplicates for columns carrying a table alias",
    )
    add_table_alias: bool = Field(
        default=False, description="Emit a field holding the table alias"
    )
    table_alias_field_name: str | None = Field(
        default=None, description="Field name used for the table alias"
    )
    extra_aliases: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Extra alias fields keyed by '<tableRuntimeName>.<fieldName>'",
    )

    @field_validator("extra_aliases")
    @classmethod
    def _freeze_extra_aliases(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("extra_aliases")
    def _serialize_extra_aliases(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash(
            (
                self.table_class_suffix,
                self.add_aliased_columns,
                self.add_table_alias,
                self.table_alias_field_name,
                frozenset(self.extra_aliases.items()),
            )
        )


# -----------------------
# Tool results
# -----------------------


class SupportClassResult(BaseModel):
    """Structured response for one generated support class."""

    table: str = Field(description="Runtime name of the source table")
    support_class: JavaTopLevelClass | None = Field(
        default=None, description="Generated class description when status is 'ok'"
    )
    warnings: list[str] = Field(default_factory=list, description="Configuration warnings")
    status: Literal["ok", "error"] = Field(default="ok", description="Overall status")
    error_message: str | None = Field(default=None, description="Failure description")
    elapsed_ms: float = Field(default=0.0, description="Generation time in milliseconds")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="UTC ISO8601 timestamp of completion",
    )
