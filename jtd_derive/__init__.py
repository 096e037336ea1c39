"""JSON Typedef derivation

Derive JSON Typedef (RFC 8927) schemas from Python dataclasses, enums,
NewTypes and tagged unions, with definitions and references for shared
and recursive types.
"""

__version__ = "0.3.0"
__author__ = "François Lagunas"

from .config import DeriveConfig, NamingStrategy, TypeConfig, typedef
from .errors import (
    ConfigError,
    DeriveError,
    MissingDiscriminator,
    NameCollision,
    ShapeErrorKind,
    UnsupportedShape,
)
from .pipeline import Generator, derive_schema
from .pipeline.type_ast import EnumDef, Fields, StructDef, TaggedUnion, Variant
from .schema import Names, RootSchema, Schema

__all__ = [
    "Generator",
    "derive_schema",
    "DeriveConfig",
    "NamingStrategy",
    "TypeConfig",
    "typedef",
    "TaggedUnion",
    "StructDef",
    "EnumDef",
    "Fields",
    "Variant",
    "Names",
    "Schema",
    "RootSchema",
    "DeriveError",
    "UnsupportedShape",
    "ShapeErrorKind",
    "MissingDiscriminator",
    "ConfigError",
    "NameCollision",
]
