"""
Schema synthesizer.

Builds the schema for a classified shape. Member schemas are always
obtained from the registry's ``sub_schema``, which decides between
inlining and referencing and keeps recursion finite.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..errors import ConfigError, MissingDiscriminator
from ..schema import DiscriminatorForm, EnumForm, PropertiesForm, Schema
from .analyzer.shapes import (
    NewtypeShape,
    RecordShape,
    StructVariantUnionShape,
    TypeShape,
    UnitVariantUnionShape,
)
from .analyzer.tagging import Internal, TagStrategy


class SchemaRegistry(Protocol):
    def sub_schema(self, tp: Any) -> Schema: ...


class SchemaSynthesizer:
    """Turns shapes into schemas."""

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry

    def synthesize(self, shape: TypeShape, strategy: TagStrategy) -> Schema:
        """
        Build the schema of a classified type.

        Args:
            shape: Result of the shape classifier
            strategy: Tag strategy (only consulted for unions)

        Returns:
            The type's schema

        Raises:
            MissingDiscriminator: If a union of struct variants is not internally tagged
        """
        if isinstance(shape, RecordShape):
            return self._properties(shape.fields)

        if isinstance(shape, NewtypeShape):
            return self.registry.sub_schema(shape.inner)

        if isinstance(shape, UnitVariantUnionShape):
            enum_schema = Schema(ty=EnumForm(values=tuple(shape.variants)))
            if isinstance(strategy, Internal):
                return Schema(
                    ty=PropertiesForm(
                        properties={strategy.tag: enum_schema},
                        optional_properties={},
                        additional_properties=True,
                    )
                )
            return enum_schema

        if isinstance(shape, StructVariantUnionShape):
            if not isinstance(strategy, Internal):
                raise MissingDiscriminator(
                    shape.type_name,
                    "unions with struct variants require a tag (internal tagging)",
                )
            for name, fields in shape.variants:
                # JSON Typedef forbids the tag inside a mapping's properties
                if any(field_name == strategy.tag for field_name, _ in fields):
                    raise ConfigError(
                        shape.type_name,
                        f"tag `{strategy.tag}` clashes with a field of variant `{name}`",
                        key="tag",
                    )
            mapping = {name: self._properties(fields) for name, fields in shape.variants}
            return Schema(ty=DiscriminatorForm(discriminator=strategy.tag, mapping=mapping))

        raise TypeError(f"Unknown shape {shape!r}")

    def _properties(self, fields: list[tuple[str, Any]]) -> Schema:
        """All fields required, unknown properties tolerated."""
        properties = {name: self.registry.sub_schema(tp) for name, tp in fields}
        return Schema(
            ty=PropertiesForm(
                properties=properties,
                optional_properties={},
                additional_properties=True,
            )
        )
