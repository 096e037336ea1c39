"""
JSON Typedef schema value model.

Schemas are immutable trees built bottom-up by the synthesizer. Each
schema has exactly one form (``SchemaType``) plus the shared ``metadata``
and ``nullable`` keywords. ``to_dict`` renders the JSON Typedef wire form
(RFC 8927).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any


class SchemaType:
    """Base class for the JSON Typedef forms."""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def children(self) -> tuple[Schema, ...]:
        return ()


@dataclass(frozen=True)
class EmptyForm(SchemaType):
    """Accepts any JSON value."""

    def to_dict(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class TypeForm(SchemaType):
    """A primitive: boolean, string, timestamp, float32/64, (u)int8/16/32."""

    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class EnumForm(SchemaType):
    values: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"enum": list(self.values)}


@dataclass(frozen=True)
class ElementsForm(SchemaType):
    elements: Schema | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"elements": self.elements.to_dict()}

    def children(self) -> tuple[Schema, ...]:
        return (self.elements,)


@dataclass(frozen=True)
class PropertiesForm(SchemaType):
    """An object with required and optional properties.

    ``properties`` is always emitted, even when empty, so the form stays
    recognisable to a validator when only optional properties exist.
    """

    properties: dict[str, Schema] = field(default_factory=dict)
    optional_properties: dict[str, Schema] = field(default_factory=dict)
    additional_properties: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"properties": {k: v.to_dict() for k, v in self.properties.items()}}
        if self.optional_properties:
            out["optionalProperties"] = {k: v.to_dict() for k, v in self.optional_properties.items()}
        if self.additional_properties:
            out["additionalProperties"] = True
        return out

    def children(self) -> tuple[Schema, ...]:
        return (*self.properties.values(), *self.optional_properties.values())


@dataclass(frozen=True)
class ValuesForm(SchemaType):
    values: Schema | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"values": self.values.to_dict()}

    def children(self) -> tuple[Schema, ...]:
        return (self.values,)


@dataclass(frozen=True)
class DiscriminatorForm(SchemaType):
    discriminator: str = ""
    mapping: dict[str, Schema] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "discriminator": self.discriminator,
            "mapping": {k: v.to_dict() for k, v in self.mapping.items()},
        }

    def children(self) -> tuple[Schema, ...]:
        return tuple(self.mapping.values())


@dataclass(frozen=True)
class RefForm(SchemaType):
    ref: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"ref": self.ref}


@dataclass(frozen=True)
class Schema:
    """A JSON Typedef schema (without root-only ``definitions``)."""

    ty: SchemaType = field(default_factory=EmptyForm)
    metadata: dict[str, Any] = field(default_factory=dict)
    nullable: bool = False

    def to_dict(self) -> dict[str, Any]:
        out = self.ty.to_dict()
        if self.nullable:
            out["nullable"] = True
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        return out

    def with_nullable(self) -> Schema:
        if self.nullable:
            return self
        return replace(self, nullable=True)

    def with_metadata(self, metadata: dict[str, Any]) -> Schema:
        if not metadata:
            return self
        return replace(self, metadata={**self.metadata, **metadata})

    @property
    def is_ref(self) -> bool:
        return isinstance(self.ty, RefForm)

    def refs(self) -> set[str]:
        """Definition ids referenced anywhere in this schema."""
        if isinstance(self.ty, RefForm):
            return {self.ty.ref}
        found: set[str] = set()
        for child in self.ty.children():
            found |= child.refs()
        return found


@dataclass(frozen=True)
class RootSchema:
    """The top-level schema together with the definitions it refers to."""

    schema: Schema = field(default_factory=Schema)
    definitions: dict[str, Schema] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = self.schema.to_dict()
        if self.definitions:
            out["definitions"] = {k: v.to_dict() for k, v in self.definitions.items()}
        return out

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True)
class Names:
    """Identity of a type, used to name and deduplicate definitions.

    Attributes:
        short: Bare declared name (e.g. "Shape")
        long: Fully qualified name (e.g. "geometry.shapes.Shape")
        type_params: Names of each generic type argument, in declaration order
        const_params: String renderings of each generic constant argument
    """

    short: str = ""
    long: str = ""
    type_params: tuple[Names, ...] = ()
    const_params: tuple[str, ...] = ()

    def key(self) -> tuple:
        """Identity used for deduplication: long name plus rendered params."""
        return (self.long, tuple(p.key() for p in self.type_params), self.const_params)

    def render_short(self) -> str:
        return self.short + self._render_params(lambda n: n.render_short())

    def render_long(self) -> str:
        return self.long + self._render_params(lambda n: n.render_long())

    def _render_params(self, render) -> str:
        params = [render(p) for p in self.type_params] + list(self.const_params)
        if not params:
            return ""
        return "<" + ", ".join(params) + ">"
