"""Dynamic SQL support class builder.

Given a table's metadata and naming options, this module assembles the
description of a ``<Record>DynamicSqlSupport`` class: a public final class
holding a static singleton of an inner ``SqlTable`` subclass, plus static
fields mirroring every column (and optional alias fields) of that singleton.

Example output, rendered by the host:

    public final class OrderDynamicSqlSupport {
        public static final OrderTable orderTable = new OrderTable();
        public static final SqlColumn<Integer> id = orderTable.id;

        public static final class OrderTable extends SqlTable {
            public final SqlColumn<Integer> id = column("id", JDBCType.INTEGER);

            public OrderTable() {
                super("orders");
            }
        }
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fastmcp.utilities.logging import get_logger

from dynamic_sql_support.java.dom import JavaField, JavaInnerClass, JavaMethod, JavaTopLevelClass
from dynamic_sql_support.java.naming import (
    boxed_type,
    capitalize,
    escape_java_string,
    explicit_imports,
    is_blank,
    package_name,
    short_name,
    valid_property_name,
)
from dynamic_sql_support.models import ColumnMetadata, NamingOptions, TableMetadata

from .comments import CommentGenerator, GeneratedAnnotations, NoCommentGenerator
from .constants import Constants

_logger = get_logger(__name__)


def support_class_name(table: TableMetadata) -> str:
    """Fully-qualified name of the support class, placed beside the mapper."""
    record_name = (
        short_name(table.base_record_type) if table.base_record_type else table.domain_object_name
    )
    class_name = f"{record_name}{Constants.SUPPORT_CLASS_SUFFIX}"
    mapper_package = package_name(table.mapper_type)
    return f"{mapper_package}.{class_name}" if mapper_package else class_name


def extra_alias_fields(options: NamingOptions, runtime_name: str) -> list[tuple[str, str]]:
    """(field name, alias) pairs for extra alias keys prefixed by ``runtime_name``."""
    prefix = f"{runtime_name}."
    return [
        (key[len(prefix) :], value)
        for key, value in options.extra_aliases.items()
        if key.startswith(prefix)
    ]


def column_field_type(column: ColumnMetadata) -> str:
    """``SqlColumn<T>`` with the column's value type boxed and unqualified."""
    return f"{short_name(Constants.SQL_COLUMN_TYPE)}<{short_name(boxed_type(column.java_type))}>"


def column_initializer(column: ColumnMetadata) -> str:
    """``column("name", JDBCType.X[, "handler"])`` for an inner-class field."""
    args = [
        f'"{escape_java_string(column.escaped_column_name)}"',
        f"{short_name(Constants.JDBC_TYPE)}.{column.jdbc_type_name}",
    ]
    if not is_blank(column.type_handler):
        args.append(f'"{escape_java_string(column.type_handler or "")}"')
    return f"column({', '.join(args)})"


@dataclass
class _Accumulator:
    """Declarations collected while building; frozen into the model at the end."""

    imports: set[str] = field(default_factory=set)
    outer_fields: list[JavaField] = field(default_factory=list)
    inner_fields: list[JavaField] = field(default_factory=list)

    def annotated(self, annotations: GeneratedAnnotations) -> tuple[str, ...]:
        self.imports.update(annotations.imports)
        return annotations.lines


class DynamicSqlSupportClassBuilder:
    """Builds the support class description for a single table.

    Instances are created with ``of`` and used once; ``build`` reads only the
    immutable inputs, so separate builders can run concurrently.
    """

    def __init__(
        self,
        table: TableMetadata,
        options: NamingOptions,
        comment_generator: CommentGenerator,
    ) -> None:
        self.table = table
        self.options = options
        self.comment_generator = comment_generator
        self.table_class_name = f"{table.domain_object_name}{options.table_class_suffix}"
        self.table_field_name = valid_property_name(self.table_class_name)

    @classmethod
    def of(
        cls,
        table: TableMetadata,
        options: NamingOptions | None = None,
        comment_generator: CommentGenerator | None = None,
    ) -> DynamicSqlSupportClassBuilder:
        return cls(table, options or NamingOptions(), comment_generator or NoCommentGenerator())

    def build(self) -> JavaTopLevelClass:
        """Assemble the complete support class."""
        acc = _Accumulator(
            imports={Constants.SQL_COLUMN_TYPE, Constants.SQL_TABLE_TYPE, Constants.JDBC_TYPE}
        )

        # Comment generator calls follow declaration order.
        class_annotations = acc.annotated(self.comment_generator.class_annotations(self.table))
        acc.outer_fields.append(self._table_definition(acc))
        self._handle_aliases(acc)
        for column in self.table.columns:
            self._handle_column(acc, column)

        inner_class = JavaInnerClass(
            name=self.table_class_name,
            visibility="public",
            is_static=True,
            is_final=True,
            superclass=short_name(Constants.SQL_TABLE_TYPE),
            fields=tuple(acc.inner_fields),
            methods=(self._constructor(),),
            annotations=class_annotations,
        )

        support_class = JavaTopLevelClass(
            type=support_class_name(self.table),
            visibility="public",
            is_final=True,
            imported_types=tuple(sorted(acc.imports)),
            fields=tuple(acc.outer_fields),
            inner_classes=(inner_class,),
        )
        _logger.debug(
            "Built %s for table %s (%d outer fields, %d inner fields)",
            support_class.type,
            self.table.runtime_name,
            len(support_class.fields),
            len(inner_class.fields),
        )
        return support_class

    # ---- table -------------------------------------------------------------
    def _table_definition(self, acc: _Accumulator) -> JavaField:
        return JavaField(
            name=self.table_field_name,
            type=self.table_class_name,
            visibility="public",
            is_static=True,
            is_final=True,
            initialization_string=f"new {self.table_class_name}()",
            annotations=acc.annotated(self.comment_generator.field_annotations(self.table)),
        )

    def _constructor(self) -> JavaMethod:
        runtime_name = escape_java_string(self.table.runtime_name)
        return JavaMethod(
            name=self.table_class_name,
            visibility="public",
            is_constructor=True,
            body_lines=(f'super("{runtime_name}");',),
        )

    # ---- aliases -----------------------------------------------------------
    def _handle_aliases(self, acc: _Accumulator) -> None:
        # Table alias configured on the host's table definition
        alias_field_name = self.options.table_alias_field_name
        if (
            self.options.add_table_alias
            and not is_blank(self.table.alias)
            and not is_blank(alias_field_name)
        ):
            self._handle_alias(acc, alias_field_name or "", self.table.alias or "")

        for field_name, alias in extra_alias_fields(self.options, self.table.runtime_name):
            self._handle_alias(acc, field_name, alias)

    def _handle_alias(self, acc: _Accumulator, field_name: str, alias: str) -> None:
        field_type = short_name(Constants.STRING_TYPE)
        acc.outer_fields.append(
            JavaField(
                name=field_name,
                type=field_type,
                visibility="public",
                is_static=True,
                is_final=True,
                initialization_string=f"{self.table_field_name}.{field_name}",
                annotations=acc.annotated(self.comment_generator.field_annotations(self.table)),
            )
        )
        acc.inner_fields.append(
            JavaField(
                name=field_name,
                type=field_type,
                visibility="public",
                is_final=True,
                initialization_string=f'"{escape_java_string(alias)}"',
            )
        )

    # ---- columns -----------------------------------------------------------
    def _handle_column(self, acc: _Accumulator, column: ColumnMetadata) -> None:
        acc.imports.update(explicit_imports(column.java_type))
        field_type = column_field_type(column)
        field_name = column.java_property
        delegate = f"{self.table_field_name}.{field_name}"

        acc.outer_fields.append(
            JavaField(
                name=field_name,
                type=field_type,
                visibility="public",
                is_static=True,
                is_final=True,
                initialization_string=delegate,
                annotations=acc.annotated(
                    self.comment_generator.field_annotations(self.table, column)
                ),
            )
        )

        # No collision check: two aliases may yield the same duplicate name.
        if self.options.add_aliased_columns and not is_blank(column.table_alias):
            acc.outer_fields.append(
                JavaField(
                    name=f"{column.table_alias}{capitalize(field_name)}",
                    type=field_type,
                    visibility="public",
                    is_static=True,
                    is_final=True,
                    initialization_string=delegate,
                    annotations=acc.annotated(
                        self.comment_generator.field_annotations(self.table, column)
                    ),
                )
            )

        acc.inner_fields.append(
            JavaField(
                name=field_name,
                type=field_type,
                visibility="public",
                is_final=True,
                initialization_string=column_initializer(column),
            )
        )


def build_support_class(
    table: TableMetadata,
    options: NamingOptions | None = None,
    comment_generator: CommentGenerator | None = None,
) -> JavaTopLevelClass:
    """Build the dynamic SQL support class for ``table``."""
    return DynamicSqlSupportClassBuilder.of(table, options, comment_generator).build()
