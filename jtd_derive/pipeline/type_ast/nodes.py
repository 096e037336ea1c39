"""
Node definitions for type declarations.

These nodes describe the layout of a user type (record or union) as
declared, before any classification. They are produced either by
reflecting over Python classes or built directly by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldStyle(str, Enum):
    """How the members of a record or variant are declared."""

    NAMED = "named"  # Circle { radius: float }
    UNNAMED = "unnamed"  # Meters(float)
    UNIT = "unit"  # Origin


@dataclass
class Member:
    """A single member of a record or variant."""

    # None for positional members
    name: str | None = None
    type: Any = None


@dataclass
class Fields:
    """The members of a record or variant together with their style."""

    style: FieldStyle = FieldStyle.UNIT
    members: list[Member] = field(default_factory=list)

    @staticmethod
    def named(**members: Any) -> Fields:
        return Fields(FieldStyle.NAMED, [Member(name, tp) for name, tp in members.items()])

    @staticmethod
    def unnamed(*types: Any) -> Fields:
        return Fields(FieldStyle.UNNAMED, [Member(None, tp) for tp in types])

    @staticmethod
    def unit() -> Fields:
        return Fields(FieldStyle.UNIT)


@dataclass
class Variant:
    """A case of a union."""

    name: str = ""
    fields: Fields = field(default_factory=Fields)


@dataclass(eq=False)
class TypeDef:
    """Base class for declared types.

    Attributes:
        name: Bare declared name
        qualname: Dotted path within the module for nested classes ("" if same as name)
        module: Dotted path of the declaring module ("" if none)
        options: Raw per-type options, validated at derivation time
        type_args: Generic type arguments, in declaration order
        const_args: Generic constant arguments, in declaration order
    """

    name: str = ""
    qualname: str = ""
    module: str = ""
    options: dict[str, Any] | None = None
    type_args: tuple[Any, ...] = ()
    const_args: tuple[Any, ...] = ()


@dataclass(eq=False)
class StructDef(TypeDef):
    """A record type."""

    fields: Fields = field(default_factory=Fields)


@dataclass(eq=False)
class EnumDef(TypeDef):
    """A union type."""

    variants: list[Variant] = field(default_factory=list)
