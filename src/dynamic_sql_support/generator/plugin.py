"""Host-facing plugin that emits one support class per table.

The host configures the plugin with string properties. Four keys are
recognized (see ``Constants.PLUGIN_PROPERTIES``); every other property is an
extra alias entry of the form ``<tableRuntimeName>.<fieldName> = <alias>``,
whose field name must be a Java identifier.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastmcp.utilities.logging import get_logger

from dynamic_sql_support.java.dom import JavaTopLevelClass
from dynamic_sql_support.java.naming import is_blank, is_java_identifier
from dynamic_sql_support.models import NamingOptions, TableMetadata

from .comments import CommentGenerator, NoCommentGenerator
from .constants import Constants
from .exceptions import PluginConfigurationError
from .support_class import DynamicSqlSupportClassBuilder, extra_alias_fields

_logger = get_logger(__name__)


def parse_flag(value: str | None) -> bool:
    """Boolean property semantics: true only for a case-insensitive "true"."""
    return value is not None and value.strip().lower() == "true"


def naming_options_from_properties(properties: Mapping[str, str]) -> NamingOptions:
    """Split plugin properties into naming options and extra aliases."""
    suffix = properties.get(Constants.TABLE_CLASS_SUFFIX)
    alias_field_name = properties.get(Constants.TABLE_ALIAS_FIELD_NAME)
    return NamingOptions(
        table_class_suffix=Constants.DEFAULT_TABLE_CLASS_SUFFIX if suffix is None else suffix,
        add_aliased_columns=parse_flag(properties.get(Constants.ADD_ALIASED_COLUMNS)),
        add_table_alias=parse_flag(properties.get(Constants.ADD_TABLE_ALIAS)),
        table_alias_field_name=alias_field_name,
        extra_aliases={
            key: value
            for key, value in properties.items()
            if key not in Constants.PLUGIN_PROPERTIES
        },
    )


def validate_naming_options(options: NamingOptions, warnings: list[str]) -> bool:
    """Append problems with ``options`` to ``warnings``; False when unusable."""
    valid = True

    # An empty suffix is fine; a non-empty one must extend an identifier.
    suffix = options.table_class_suffix
    if suffix and not is_java_identifier(f"T{suffix}"):
        warnings.append(f"{Constants.TABLE_CLASS_SUFFIX} {suffix!r} is not a valid identifier part")
        valid = False

    alias_field_name = options.table_alias_field_name
    if options.add_table_alias and is_blank(alias_field_name):
        warnings.append(
            f"{Constants.ADD_TABLE_ALIAS} is set but {Constants.TABLE_ALIAS_FIELD_NAME} is empty; "
            "table alias fields will not be generated"
        )
    elif not is_blank(alias_field_name) and not is_java_identifier(alias_field_name):
        warnings.append(
            f"{Constants.TABLE_ALIAS_FIELD_NAME} {alias_field_name!r} is not a valid Java identifier"
        )
        valid = False

    # Static check on the last key segment; generation re-checks the exact
    # remainder after the runtime name of each table.
    for key in options.extra_aliases:
        if "." not in key:
            warnings.append(f"Extra alias {key!r} has no table prefix and will be ignored")
            continue
        field_name = key.rpartition(".")[2]
        if not is_java_identifier(field_name):
            warnings.append(
                f"Extra alias {key!r}: field name {field_name!r} is not a valid Java identifier"
            )
            valid = False

    return valid


class DynamicSqlSupportPlugin:
    """Generates dynamic SQL support classes for the tables a host hands over.

    Attributes:
        options: Naming options derived from the plugin properties
        comment_generator: Annotation capability passed to every builder
    """

    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        comment_generator: CommentGenerator | None = None,
        *,
        options: NamingOptions | None = None,
    ) -> None:
        if options is None:
            options = naming_options_from_properties(properties or {})
        self.options = options
        self.comment_generator = comment_generator or NoCommentGenerator()
        self._validated: bool | None = None
        self._warnings: list[str] = []

    @property
    def warnings(self) -> list[str]:
        return list(self._warnings)

    def validate(self, warnings: list[str]) -> bool:
        """Validate the configuration, appending messages to ``warnings``."""
        found: list[str] = []
        valid = validate_naming_options(self.options, found)
        for message in found:
            _logger.warning("Dynamic SQL support plugin: %s", message)
        warnings.extend(found)
        self._warnings = found
        self._validated = valid
        return valid

    def generate_additional_classes(self, table: TableMetadata) -> list[JavaTopLevelClass]:
        """Return the support class for ``table``.

        Raises:
            PluginConfigurationError: If the plugin properties are invalid, or
                an extra alias for this table does not name a Java identifier
        """
        if self._validated is None:
            self.validate([])
        if not self._validated:
            raise PluginConfigurationError(self._warnings)

        invalid = [
            f"Extra alias field name {name!r} for table {table.runtime_name!r} "
            "is not a valid Java identifier"
            for name, _ in extra_alias_fields(self.options, table.runtime_name)
            if not is_java_identifier(name)
        ]
        if invalid:
            for message in invalid:
                _logger.warning("Dynamic SQL support plugin: %s", message)
            raise PluginConfigurationError(invalid)

        builder = DynamicSqlSupportClassBuilder.of(table, self.options, self.comment_generator)
        return [builder.build()]
