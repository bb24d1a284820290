"""Generation service orchestrating plugin runs for one or many tables.

Failures at the plugin boundary are returned as typed ``SupportClassResult``
values with ``status="error"`` rather than raised, so a batch continues past
a misconfigured table.
"""

from __future__ import annotations

from collections.abc import Iterable
import time

from fastmcp.utilities.logging import get_logger

from dynamic_sql_support.generator import (
    CommentGenerator,
    DynamicSqlSupportPlugin,
    NoCommentGenerator,
    SupportGeneratorError,
)
from dynamic_sql_support.models import NamingOptions, SupportClassResult, TableMetadata

_logger = get_logger(__name__)


class SupportGenerationService:
    """Generates support classes with default options and a shared comment generator."""

    def __init__(
        self,
        default_options: NamingOptions | None = None,
        comment_generator: CommentGenerator | None = None,
    ) -> None:
        self.default_options = default_options or NamingOptions()
        self.comment_generator = comment_generator or NoCommentGenerator()

    def generate(
        self, table: TableMetadata, options: NamingOptions | None = None
    ) -> SupportClassResult:
        """Generate the support class for one table.

        Args:
            table: Host metadata for the table
            options: Naming options overriding the service defaults

        Returns:
            Result carrying the class model, or the configuration error
        """
        started = time.perf_counter()
        plugin = DynamicSqlSupportPlugin(
            comment_generator=self.comment_generator,
            options=options or self.default_options,
        )
        warnings: list[str] = []
        try:
            plugin.validate(warnings)
            (support_class,) = plugin.generate_additional_classes(table)
        except SupportGeneratorError as exc:
            _logger.warning("Support class generation failed for %s: %s", table.runtime_name, exc)
            return SupportClassResult(
                table=table.runtime_name,
                warnings=warnings,
                status="error",
                error_message=str(exc),
                elapsed_ms=_elapsed_ms(started),
            )

        return SupportClassResult(
            table=table.runtime_name,
            support_class=support_class,
            warnings=warnings,
            elapsed_ms=_elapsed_ms(started),
        )

    def generate_all(
        self, tables: Iterable[TableMetadata], options: NamingOptions | None = None
    ) -> list[SupportClassResult]:
        """Generate support classes for each table independently."""
        results = [self.generate(table, options) for table in tables]
        failed = sum(1 for r in results if r.status == "error")
        _logger.info("Generated %d support classes (%d failed)", len(results) - failed, failed)
        return results


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)
