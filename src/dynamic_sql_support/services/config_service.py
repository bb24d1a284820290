"""Configuration service for dynamic-sql-support.

This module centralizes environment variable handling for the MCP server:
default naming options applied when a tool call does not carry its own, and
the comment generator used for every generated class.
"""

from __future__ import annotations

import os

from fastmcp.utilities.logging import get_logger

from dynamic_sql_support.generator import (
    CommentGenerator,
    Constants,
    GeneratedAnnotationCommentGenerator,
    NoCommentGenerator,
    naming_options_from_properties,
)
from dynamic_sql_support.models import NamingOptions

_logger = get_logger(__name__)

ENV_PREFIX = "DYNAMIC_SQL_SUPPORT_"

# Environment variable -> plugin property key
_ENV_PROPERTIES: dict[str, str] = {
    f"{ENV_PREFIX}TABLE_CLASS_SUFFIX": Constants.TABLE_CLASS_SUFFIX,
    f"{ENV_PREFIX}ADD_ALIASED_COLUMNS": Constants.ADD_ALIASED_COLUMNS,
    f"{ENV_PREFIX}ADD_TABLE_ALIAS": Constants.ADD_TABLE_ALIAS,
    f"{ENV_PREFIX}TABLE_ALIAS_FIELD_NAME": Constants.TABLE_ALIAS_FIELD_NAME,
}


class ConfigService:
    """Service for reading generator configuration from the environment."""

    @staticmethod
    def get_plugin_properties() -> dict[str, str]:
        """Collect plugin properties from environment variables.

        Recognized settings map onto the plugin property keys. Extra aliases
        come from ``DYNAMIC_SQL_SUPPORT_EXTRA_ALIASES`` as comma-separated
        ``<table>.<field>=<alias>`` pairs; malformed pairs are skipped.

        Returns:
            Plugin property mapping
        """
        properties: dict[str, str] = {}
        for env_name, key in _ENV_PROPERTIES.items():
            value = os.getenv(env_name)
            if value is not None:
                properties[key] = value

        raw_aliases = os.getenv(f"{ENV_PREFIX}EXTRA_ALIASES", "")
        for pair in raw_aliases.split(","):
            if not pair.strip():
                continue
            key, sep, value = pair.partition("=")
            if not sep or not key.strip():
                _logger.warning("Ignoring malformed extra alias entry: %r", pair)
                continue
            properties[key.strip()] = value.strip()
        return properties

    @staticmethod
    def get_naming_options() -> NamingOptions:
        """Naming options configured through the environment."""
        return naming_options_from_properties(ConfigService.get_plugin_properties())

    @staticmethod
    def get_comment_generator() -> CommentGenerator:
        """Comment generator selected by ``DYNAMIC_SQL_SUPPORT_COMMENTS``.

        ``generated`` adds ``@Generated`` annotations; anything else, including
        the default ``none``, adds nothing.
        """
        mode = os.getenv(f"{ENV_PREFIX}COMMENTS", "none").strip().lower()
        if mode == "generated":
            annotation_type = os.getenv(
                f"{ENV_PREFIX}GENERATED_ANNOTATION", Constants.GENERATED_ANNOTATION_TYPE
            )
            return GeneratedAnnotationCommentGenerator(annotation_type=annotation_type)
        if mode != "none":
            _logger.warning("Unknown comment mode %r, falling back to 'none'", mode)
        return NoCommentGenerator()
