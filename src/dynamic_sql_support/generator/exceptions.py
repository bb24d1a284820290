"""Custom exception hierarchy for support class generation.

The builder itself has no failure path: the host validates metadata before
handing it over. Errors only arise at the plugin boundary, where string
properties are turned into naming options.
"""

from __future__ import annotations


class SupportGeneratorError(Exception):
    """Base exception for support class generation errors."""


class PluginConfigurationError(SupportGeneratorError):
    """Raised when plugin properties cannot produce valid Java names.

    This is raised when, for example:
    - The table class suffix contains characters not allowed in identifiers
    - The table alias field name is not a valid Java identifier
    """

    def __init__(self, warnings: list[str]) -> None:
        self.warnings = list(warnings)
        super().__init__("; ".join(self.warnings) or "Invalid plugin configuration")
