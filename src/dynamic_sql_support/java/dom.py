"""Immutable Java class model for generated support classes.

The host's source printer consumes these values; nothing here renders Java
text. Every model is frozen and uses tuples for collections, so a class
description is complete once constructed and can be handed off safely.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .naming import package_name, short_name

Visibility = Literal["public", "protected", "private", "default"]


class JavaField(BaseModel):
    """A field declaration with its initializer expression."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Field name")
    type: str = Field(description="Field type as written in source (short names)")
    visibility: Visibility = Field(default="public", description="Access modifier")
    is_static: bool = Field(default=False, description="Whether the field is static")
    is_final: bool = Field(default=False, description="Whether the field is final")
    initialization_string: str | None = Field(
        default=None, description="Initializer expression, without the trailing semicolon"
    )
    annotations: tuple[str, ...] = Field(
        default=(), description="Annotation source lines placed before the declaration"
    )


class JavaMethod(BaseModel):
    """A method or constructor with literal body lines."""

    model_config = ConfigDict(frozen=True)

    name: str
    visibility: Visibility = "public"
    is_constructor: bool = False
    body_lines: tuple[str, ...] = ()


class JavaInnerClass(BaseModel):
    """A nested class declaration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Simple class name")
    visibility: Visibility = Field(default="public", description="Access modifier")
    is_static: bool = Field(default=False, description="Whether the class is static")
    is_final: bool = Field(default=False, description="Whether the class is final")
    superclass: str | None = Field(default=None, description="Superclass short name")
    fields: tuple[JavaField, ...] = Field(default=(), description="Fields in declaration order")
    methods: tuple[JavaMethod, ...] = Field(default=(), description="Methods and constructors")
    annotations: tuple[str, ...] = Field(default=(), description="Class annotation lines")

    def field(self, name: str) -> JavaField | None:
        """Return the first field named ``name``, if any."""
        return next((f for f in self.fields if f.name == name), None)


class JavaTopLevelClass(BaseModel):
    """A top-level class declaration together with its imports."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Fully-qualified class name")
    visibility: Visibility = Field(default="public", description="Access modifier")
    is_final: bool = Field(default=False, description="Whether the class is final")
    imported_types: tuple[str, ...] = Field(
        default=(), description="Sorted fully-qualified types requiring an import"
    )
    fields: tuple[JavaField, ...] = Field(default=(), description="Fields in declaration order")
    inner_classes: tuple[JavaInnerClass, ...] = Field(default=(), description="Nested classes")
    annotations: tuple[str, ...] = Field(default=(), description="Class annotation lines")

    @property
    def short_name(self) -> str:
        return short_name(self.type)

    @property
    def package_name(self) -> str:
        return package_name(self.type)

    def field(self, name: str) -> JavaField | None:
        """Return the first field named ``name``, if any."""
        return next((f for f in self.fields if f.name == name), None)
