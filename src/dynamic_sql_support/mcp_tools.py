"""MCP tool registration for support class generation.

This module exposes `register_support_tools`, which attaches two tools to a
FastMCP instance: one generating the support class for a single table and one
for a batch of tables. Both delegate to `SupportGenerationService`.
"""

from __future__ import annotations

from typing import Annotated

from fastmcp import Context, FastMCP
from fastmcp.utilities.logging import get_logger
from pydantic import Field

from dynamic_sql_support.models import NamingOptions, SupportClassResult, TableMetadata
from dynamic_sql_support.services.generation_service import SupportGenerationService

_logger = get_logger(__name__)


def register_support_tools(mcp: FastMCP, service: SupportGenerationService) -> None:
    """Register support class generation tools on the given FastMCP instance.

    Args:
        mcp: The FastMCP server instance.
        service: Service performing the generation; its default options apply
            when a call omits ``options``.
    """

    @mcp.tool
    async def generate_dynamic_sql_support(
        _ctx: Context,
        table: Annotated[TableMetadata, Field(description="Introspected table metadata")],
        options: Annotated[
            NamingOptions | None,
            Field(description="Naming options; server defaults apply when omitted"),
        ] = None,
    ) -> SupportClassResult:  # pyright: ignore[reportUnusedFunction]
        """Generate the dynamic SQL support class description for one table.

        Returns the class model (fields, inner table class, imports) for the
        host's source printer, or an error result when options are invalid.
        """
        _logger.info("generate_dynamic_sql_support: %s", table.runtime_name)
        return service.generate(table, options)

    @mcp.tool
    async def generate_dynamic_sql_support_batch(
        _ctx: Context,
        tables: Annotated[list[TableMetadata], Field(description="Tables to generate for")],
        options: Annotated[
            NamingOptions | None,
            Field(description="Naming options shared by every table"),
        ] = None,
    ) -> list[SupportClassResult]:  # pyright: ignore[reportUnusedFunction]
        """Generate support class descriptions for several tables independently."""
        _logger.info("generate_dynamic_sql_support_batch: %d tables", len(tables))
        return service.generate_all(tables, options)

    _ = (generate_dynamic_sql_support, generate_dynamic_sql_support_batch)
