from __future__ import annotations

import pytest

from dynamic_sql_support.generator import (
    DynamicSqlSupportPlugin,
    PluginConfigurationError,
    naming_options_from_properties,
    parse_flag,
)
from dynamic_sql_support.models import ColumnMetadata, NamingOptions, TableMetadata


def _table() -> TableMetadata:
    return TableMetadata(
        name="orders",
        runtime_name="orders",
        alias="o",
        domain_object_name="Order",
        mapper_type="com.example.mapper.OrderMapper",
        columns=(
            ColumnMetadata(
                java_property="id",
                java_type="int",
                jdbc_type_name="INTEGER",
                actual_column_name="id",
            ),
        ),
    )


@pytest.mark.parametrize(
    "value,expected",
    [
        ("true", True),
        ("TRUE", True),
        (" True ", True),
        ("false", False),
        ("yes", False),
        ("1", False),
        ("", False),
        (None, False),
    ],
)
def test_parse_flag(value: str | None, expected: bool) -> None:
    assert parse_flag(value) is expected


def test_naming_options_from_properties() -> None:
    options = naming_options_from_properties(
        {
            "tableClassSuffix": "Table",
            "addAliasedColumns": "true",
            "addTableAlias": "True",
            "tableAliasFieldName": "tableAlias",
            "orders.buyer": "b",
        }
    )

    assert options == NamingOptions(
        table_class_suffix="Table",
        add_aliased_columns=True,
        add_table_alias=True,
        table_alias_field_name="tableAlias",
        extra_aliases={"orders.buyer": "b"},
    )


def test_missing_properties_use_defaults() -> None:
    options = naming_options_from_properties({})
    assert options.table_class_suffix == ""
    assert options.add_aliased_columns is False
    assert options.add_table_alias is False
    assert options.table_alias_field_name is None
    assert dict(options.extra_aliases) == {}


def test_plugin_generates_one_class_per_table() -> None:
    plugin = DynamicSqlSupportPlugin(
        {
            "tableClassSuffix": "Table",
            "addTableAlias": "true",
            "tableAliasFieldName": "tableAlias",
            "orders.buyer": "b",
        }
    )
    warnings: list[str] = []
    assert plugin.validate(warnings) is True
    assert warnings == []

    (support_class,) = plugin.generate_additional_classes(_table())
    assert support_class.type == "com.example.mapper.OrderDynamicSqlSupport"
    assert [f.name for f in support_class.fields] == ["orderTable", "tableAlias", "buyer", "id"]


def test_missing_alias_field_name_is_a_warning_only() -> None:
    plugin = DynamicSqlSupportPlugin({"addTableAlias": "true"})
    warnings: list[str] = []

    assert plugin.validate(warnings) is True
    assert len(warnings) == 1
    assert "tableAliasFieldName" in warnings[0]

    (support_class,) = plugin.generate_additional_classes(_table())
    assert [f.name for f in support_class.fields] == ["order", "id"]


@pytest.mark.parametrize(
    "properties",
    [
        {"tableClassSuffix": "-Table"},
        {"tableClassSuffix": "Ta ble"},
        {"tableAliasFieldName": "table alias"},
        {"tableAliasFieldName": "class", "addTableAlias": "true"},
        {"tableAliasFieldName": "alias\n", "addTableAlias": "true"},
        {"tableClassSuffix": "Table\n"},
        {"orders.class": "x"},
        {"orders.": "y"},
        {"orders.a b": "z"},
        {"orders.buyer\n": "b"},
    ],
)
def test_invalid_properties_fail_validation(properties: dict[str, str]) -> None:
    plugin = DynamicSqlSupportPlugin(properties)
    warnings: list[str] = []

    assert plugin.validate(warnings) is False
    assert warnings
    with pytest.raises(PluginConfigurationError) as exc_info:
        plugin.generate_additional_classes(_table())
    assert exc_info.value.warnings == warnings


def test_generate_validates_lazily() -> None:
    plugin = DynamicSqlSupportPlugin({"tableClassSuffix": "!"})
    with pytest.raises(PluginConfigurationError, match="tableClassSuffix"):
        plugin.generate_additional_classes(_table())
    assert plugin.warnings


def test_explicit_options_override_properties() -> None:
    plugin = DynamicSqlSupportPlugin(
        {"tableClassSuffix": "Ignored"}, options=NamingOptions(table_class_suffix="Record")
    )
    (support_class,) = plugin.generate_additional_classes(_table())
    assert support_class.inner_classes[0].name == "OrderRecord"


def test_extra_alias_without_table_prefix_is_a_warning_only() -> None:
    plugin = DynamicSqlSupportPlugin({"buyer": "b"})
    warnings: list[str] = []

    assert plugin.validate(warnings) is True
    assert len(warnings) == 1
    assert "'buyer'" in warnings[0]

    (support_class,) = plugin.generate_additional_classes(_table())
    assert [f.name for f in support_class.fields] == ["order", "id"]


def test_extra_alias_remainder_is_checked_per_table() -> None:
    # The last segment is valid, but for table "orders" the field is "a.b".
    plugin = DynamicSqlSupportPlugin({"orders.a.b": "x"})
    warnings: list[str] = []
    assert plugin.validate(warnings) is True
    assert warnings == []

    with pytest.raises(PluginConfigurationError, match="'a.b'"):
        plugin.generate_additional_classes(_table())

    other = _table().model_copy(update={"runtime_name": "orders.a", "name": "orders.a"})
    (support_class,) = plugin.generate_additional_classes(other)
    assert [f.name for f in support_class.fields] == ["order", "b", "id"]


def test_naming_options_extra_aliases_are_read_only() -> None:
    source = {"orders.buyer": "b"}
    options = NamingOptions(extra_aliases=source)
    source["orders.seller"] = "s"

    assert dict(options.extra_aliases) == {"orders.buyer": "b"}
    with pytest.raises(TypeError):
        options.extra_aliases["orders.seller"] = "s"  # type: ignore[index]
    with pytest.raises(TypeError):
        NamingOptions().extra_aliases["orders.seller"] = "s"  # type: ignore[index]


def test_naming_options_are_hashable() -> None:
    first = NamingOptions(extra_aliases={"orders.buyer": "b", "orders.seller": "s"})
    second = NamingOptions(extra_aliases={"orders.seller": "s", "orders.buyer": "b"})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, NamingOptions()}) == 2
    assert first.model_dump()["extra_aliases"] == {"orders.buyer": "b", "orders.seller": "s"}
