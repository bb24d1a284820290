"""FastMCP server implementation for dynamic-sql-support."""

from __future__ import annotations

import dotenv
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger
from starlette.requests import Request
from starlette.responses import JSONResponse

from dynamic_sql_support.mcp_tools import register_support_tools
from dynamic_sql_support.services import ConfigService, SupportGenerationService

# Load environment variables
dotenv.load_dotenv()

_logger = get_logger(__name__)


def create_generation_service() -> SupportGenerationService:
    """Build the generation service from environment configuration."""
    return SupportGenerationService(
        default_options=ConfigService.get_naming_options(),
        comment_generator=ConfigService.get_comment_generator(),
    )


mcp = FastMCP(
    instructions=(
        "Generates MyBatis Dynamic SQL support class descriptions from "
        "introspected table metadata."
    ),
)

# -- Tool Registration -------------------------------------------------------
generation_service = create_generation_service()
_logger.info(
    "Default naming options: %s", generation_service.default_options.model_dump_json()
)

register_support_tools(mcp, generation_service)


# -- Health Check ----------------------------------------------------------
@mcp.custom_route("/health", methods=["GET"])
async def health_check(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "healthy", "service": "dynamic-sql-support"})
