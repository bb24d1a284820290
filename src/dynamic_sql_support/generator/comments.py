"""Comment generators that annotate generated declarations.

The builder asks a ``CommentGenerator`` for annotations at four points: the
inner table class, the outer table field, each outer alias field, and each
outer column field. Implementations return values instead of mutating the
declarations, so the class model stays immutable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from dynamic_sql_support.java.naming import escape_java_string, short_name
from dynamic_sql_support.models import ColumnMetadata, TableMetadata

from .constants import Constants


@dataclass(frozen=True)
class GeneratedAnnotations:
    """Annotation lines to attach plus the types they need imported."""

    lines: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()


NO_ANNOTATIONS = GeneratedAnnotations()


class CommentGenerator(Protocol):
    """Capability for attaching provenance annotations to declarations."""

    def class_annotations(self, table: TableMetadata) -> GeneratedAnnotations: ...

    def field_annotations(
        self, table: TableMetadata, column: ColumnMetadata | None = None
    ) -> GeneratedAnnotations: ...


class NoCommentGenerator:
    """Comment generator that adds nothing."""

    def class_annotations(self, table: TableMetadata) -> GeneratedAnnotations:  # noqa: ARG002
        return NO_ANNOTATIONS

    def field_annotations(
        self,
        table: TableMetadata,  # noqa: ARG002
        column: ColumnMetadata | None = None,  # noqa: ARG002
    ) -> GeneratedAnnotations:
        return NO_ANNOTATIONS


class GeneratedAnnotationCommentGenerator:
    """Adds ``@Generated`` annotations naming the source table or field.

    Attributes:
        generator_name: Value of the annotation's ``value`` element
        annotation_type: Fully-qualified annotation type to import
        include_date: Add a ``date`` element with the current UTC time
        clock: Supplies the timestamp when ``include_date`` is set
    """

    def __init__(
        self,
        generator_name: str = Constants.GENERATOR_NAME,
        annotation_type: str = Constants.GENERATED_ANNOTATION_TYPE,
        *,
        include_date: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.generator_name = generator_name
        self.annotation_type = annotation_type
        self.include_date = include_date
        self._clock = clock or (lambda: datetime.now(UTC))

    def class_annotations(self, table: TableMetadata) -> GeneratedAnnotations:
        return self._annotation(f"Source Table: {table.name}")

    def field_annotations(
        self, table: TableMetadata, column: ColumnMetadata | None = None
    ) -> GeneratedAnnotations:
        if column is None:
            return self._annotation(f"Source Table: {table.name}")
        return self._annotation(f"Source field: {table.name}.{column.actual_column_name}")

    def _annotation(self, comments: str) -> GeneratedAnnotations:
        elements = [f'value="{escape_java_string(self.generator_name)}"']
        if self.include_date:
            stamp = self._clock().isoformat(timespec="seconds")
            elements.append(f'date="{stamp}"')
        elements.append(f'comments="{escape_java_string(comments)}"')
        line = f"@{short_name(self.annotation_type)}({', '.join(elements)})"
        return GeneratedAnnotations(lines=(line,), imports=(self.annotation_type,))
