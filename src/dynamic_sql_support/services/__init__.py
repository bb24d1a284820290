"""Services package for dynamic-sql-support.

This package contains service classes that sit between the MCP tools and the
generator: configuration from the environment and per-table generation with
typed results.

Main Components:
- ConfigService: Environment-driven naming options and comment generator
- SupportGenerationService: Single and batch support class generation
"""

from .config_service import ConfigService
from .generation_service import SupportGenerationService

__all__ = [
    "ConfigService",
    "SupportGenerationService",
]
